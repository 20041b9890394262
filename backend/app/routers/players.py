from typing import Optional

from fastapi import APIRouter, Depends

from ..repositories import PlayerRepository, get_player_repository
from ..schemas import PlayerOut

router = APIRouter(prefix="/player", tags=["players"])


# GET /api/player/{pid}
@router.get("/{pid}", response_model=Optional[PlayerOut])
async def get_player(
    pid: int,
    players: PlayerRepository = Depends(get_player_repository),
) -> Optional[PlayerOut]:
    """Return the player, or ``null`` when no player has this identifier."""

    p = await players.get(pid)
    if p is None:
        return None
    return PlayerOut.from_model(p)
