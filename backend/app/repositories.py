"""Storage access for matches, players and events.

Each repository wraps the request's ``AsyncSession`` and offers the same
three operations: ``get`` by identifier, ``save`` (which commits), and
``list`` in identifier order. Lookups return ``None`` when nothing matches;
callers decide what absence means.
"""

from __future__ import annotations

from typing import Generic, Optional, TypeVar

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from .db import get_session
from .models import Event, Match, Player

ModelT = TypeVar("ModelT", Match, Player, Event)


class Repository(Generic[ModelT]):
    model: type[ModelT]

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get(self, record_id: int) -> Optional[ModelT]:
        return await self.session.get(self.model, record_id)

    async def save(self, record: ModelT) -> ModelT:
        self.session.add(record)
        await self.session.commit()
        return record

    async def list(self) -> list[ModelT]:
        stmt = select(self.model).order_by(self.model.id)
        return list((await self.session.execute(stmt)).scalars().all())


class MatchRepository(Repository[Match]):
    model = Match

    async def first(self) -> Optional[Match]:
        """Return the current match: the one with the lowest identifier."""

        stmt = select(Match).order_by(Match.id).limit(1)
        return (await self.session.execute(stmt)).scalars().first()


class PlayerRepository(Repository[Player]):
    model = Player


class EventRepository(Repository[Event]):
    model = Event


def get_match_repository(
    session: AsyncSession = Depends(get_session),
) -> MatchRepository:
    return MatchRepository(session)


def get_player_repository(
    session: AsyncSession = Depends(get_session),
) -> PlayerRepository:
    return PlayerRepository(session)


def get_event_repository(
    session: AsyncSession = Depends(get_session),
) -> EventRepository:
    return EventRepository(session)
