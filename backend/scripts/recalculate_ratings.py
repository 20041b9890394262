#!/usr/bin/env python3
"""Admin helper to recompute every player's form rating from goals/assists."""

from __future__ import annotations

import argparse
import asyncio
import json
import os
import sys
from dataclasses import asdict, dataclass
from typing import Any, Iterable, List

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker

from app.db import database_url
from app.services import recalc_rating


@dataclass
class RatingChange:
    id: int
    name: str
    goals: int
    assists: int
    before: float
    after: float

    @classmethod
    def from_row(cls, row: Any) -> "RatingChange":
        goals = row.goals or 0
        assists = row.assists or 0
        return cls(
            id=row.id,
            name=row.name,
            goals=goals,
            assists=assists,
            before=row.form_rating,
            after=recalc_rating(goals, assists),
        )


def plan_rating_updates(rows: Iterable[Any]) -> List[RatingChange]:
    """Return the players whose stored rating disagrees with their stats."""

    changes = [RatingChange.from_row(row) for row in rows]
    return [c for c in changes if c.before is None or abs(c.before - c.after) > 1e-9]


async def _get_engine() -> AsyncEngine:
    return create_async_engine(database_url(), echo=False, pool_pre_ping=True)


async def main() -> None:
    parser = argparse.ArgumentParser(
        description=(
            "Recompute form_rating for every player from their stored goals "
            "and assists."
        )
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show the proposed changes without writing them to the database.",
    )
    args = parser.parse_args()

    engine = await _get_engine()
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    try:
        async with Session() as session:
            result = await session.execute(
                text(
                    """
                    SELECT id, name, goals, assists, form_rating
                    FROM player
                    ORDER BY id
                    """
                )
            )
            changes = plan_rating_updates(result.all())

            if not changes:
                print("All ratings are up to date; nothing to do.")
                return

            print(json.dumps([asdict(c) for c in changes], indent=2))

            if args.dry_run:
                print("Dry run; no updates written.")
                return

            for change in changes:
                await session.execute(
                    text("UPDATE player SET form_rating = :rating WHERE id = :player_id"),
                    {"player_id": change.id, "rating": change.after},
                )
            await session.commit()
            print(f"Updated {len(changes)} player rating(s).")
    finally:
        await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
