from typing import Any, Dict, List, Optional
from datetime import datetime
from pydantic import BaseModel, Field, field_validator

from .time_utils import coerce_utc


class MatchOut(BaseModel):
    """The current match as shown on the dashboard."""

    id: int
    date: datetime
    homeTeam: str
    awayTeam: str
    homeScore: int
    awayScore: int

    @field_validator("date")
    @classmethod
    def _normalize_date(cls, value: datetime) -> datetime:
        return coerce_utc(value)

    @classmethod
    def from_model(cls, m) -> "MatchOut":
        return cls(
            id=m.id,
            date=m.date,
            homeTeam=m.home_team,
            awayTeam=m.away_team,
            homeScore=m.home_score,
            awayScore=m.away_score,
        )


class PlayerOut(BaseModel):
    id: int
    name: str
    team: str
    position: Optional[str] = None
    goals: int = 0
    assists: int = 0
    formRating: float

    @classmethod
    def from_model(cls, p) -> "PlayerOut":
        return cls(
            id=p.id,
            name=p.name,
            team=p.team,
            position=p.position,
            goals=p.goals,
            assists=p.assists,
            formRating=p.form_rating,
        )


class EventIn(BaseModel):
    """Body of ``POST /event``.

    Any ``id`` sent by the client is accepted but never stored; the database
    assigns the identifier.
    """

    id: Optional[int] = None
    minute: int
    type: str
    playerId: int
    meta: Optional[Dict[str, Any]] = None


class EventOut(BaseModel):
    id: int
    minute: int
    type: str
    playerId: Optional[int] = None
    meta: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_model(cls, e) -> "EventOut":
        return cls(
            id=e.id,
            minute=e.minute,
            type=e.type,
            playerId=e.player_id,
            meta=e.meta or {},
        )


class MatchBundleOut(BaseModel):
    """Everything the dashboard needs in one response."""

    match: Optional[MatchOut] = None
    players: List[PlayerOut] = Field(default_factory=list)
    events: List[EventOut] = Field(default_factory=list)
