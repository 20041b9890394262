import logging

from fastapi import APIRouter, Depends, Request

from ..config import event_rate_limit
from ..models import Event
from ..rate_limit import limiter
from ..repositories import EventRepository, get_event_repository
from ..schemas import EventIn, EventOut
from ..services import StatUpdater, get_stat_updater

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/event", tags=["events"])


async def create_event(
    ev: EventIn,
    events: EventRepository,
    stats: StatUpdater,
) -> EventOut:
    # Client-supplied ev.id is ignored; the database assigns one.
    e = Event(
        minute=ev.minute,
        type=ev.type,
        player_id=ev.playerId,
        meta=ev.meta or {},
    )
    await events.save(e)
    logger.info(
        "Recorded %s event %s at minute %d for player %s",
        e.type,
        e.id,
        e.minute,
        e.player_id,
    )
    await stats.update_stats_for(e)
    return EventOut.from_model(e)


# POST /api/event
@router.post("", response_model=EventOut)
@limiter.limit(event_rate_limit)
async def create_event_route(
    request: Request,
    ev: EventIn,
    events: EventRepository = Depends(get_event_repository),
    stats: StatUpdater = Depends(get_stat_updater),
) -> EventOut:
    return await create_event(ev, events, stats)
