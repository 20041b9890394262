from fastapi import APIRouter, Depends

from ..repositories import (
    EventRepository,
    MatchRepository,
    PlayerRepository,
    get_event_repository,
    get_match_repository,
    get_player_repository,
)
from ..schemas import EventOut, MatchBundleOut, MatchOut, PlayerOut

# Resource-only prefix; API_PREFIX is added in main.py
router = APIRouter(prefix="/match", tags=["match"])


# GET /api/match
@router.get("", response_model=MatchBundleOut)
async def get_match_bundle(
    matches: MatchRepository = Depends(get_match_repository),
    players: PlayerRepository = Depends(get_player_repository),
    events: EventRepository = Depends(get_event_repository),
) -> MatchBundleOut:
    m = await matches.first()
    return MatchBundleOut(
        match=MatchOut.from_model(m) if m else None,
        players=[PlayerOut.from_model(p) for p in await players.list()],
        events=[EventOut.from_model(e) for e in await events.list()],
    )
