import logging
import re
from typing import Any, Optional

from fastapi import Depends

from ..models import Event, Player
from ..repositories import PlayerRepository, get_player_repository
from .rating import recalc_rating

logger = logging.getLogger(__name__)

ASSIST_META_KEY = "assistId"
_INTEGER_ID = re.compile(r"[+-]?[0-9]+")


class InvalidAssistReference(ValueError):
    """Raised when a GOAL event's ``assistId`` is not an integer identifier."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"assistId {value!r} is not a valid player identifier")
        self.value = value


def parse_player_id(value: Any) -> int:
    """Parse a metadata value into a player identifier.

    The value is rendered to text, which must be an optionally signed run of
    ASCII digits: ``7`` and ``"7"`` are accepted while ``7.5``, ``True``,
    ``" 7"`` and ``"1_0"`` are not.
    """

    text = str(value)
    if not _INTEGER_ID.fullmatch(text):
        raise InvalidAssistReference(value)
    return int(text)


class StatUpdater:
    """Apply a stored event to the goal/assist totals of the players it names."""

    def __init__(self, players: PlayerRepository) -> None:
        self.players = players

    async def update_stats_for(self, event: Event) -> None:
        event_type = (event.type or "").upper()
        if event_type == "GOAL":
            await self._credit(event.player_id, goals=1)
            assist_id = self._assist_id(event.meta)
            if assist_id is not None:
                await self._credit(assist_id, assists=1)
        elif event_type == "ASSIST":
            await self._credit(event.player_id, assists=1)

    @staticmethod
    def _assist_id(meta: Optional[dict[str, Any]]) -> Optional[int]:
        if not meta:
            return None
        raw = meta.get(ASSIST_META_KEY)
        if raw is None:
            return None
        return parse_player_id(raw)

    async def _credit(
        self, player_id: Optional[int], *, goals: int = 0, assists: int = 0
    ) -> Optional[Player]:
        if player_id is None:
            return None
        player = await self.players.get(player_id)
        if player is None:
            logger.debug("Player %s not found; skipping stat update", player_id)
            return None

        player.goals = (player.goals or 0) + goals
        player.assists = (player.assists or 0) + assists
        player.form_rating = recalc_rating(player.goals, player.assists)
        await self.players.save(player)
        logger.info(
            "Updated player %s: goals=%d assists=%d rating=%.1f",
            player.id,
            player.goals,
            player.assists,
            player.form_rating,
        )
        return player


def get_stat_updater(
    players: PlayerRepository = Depends(get_player_repository),
) -> StatUpdater:
    return StatUpdater(players)
