import asyncio
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker

from app.db import database_url
from app.models import Match, Player
from app.services import recalc_rating

HOME_TEAM = "Blue FC"
AWAY_TEAM = "Red United"

engine = create_async_engine(database_url(), echo=False, pool_pre_ping=True)
Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

async def main():
    async with Session() as s:
        existing_matches = {
            x.id for x in (await s.execute(select(Match))).scalars().all()
        }
        if 1 not in existing_matches:
            s.add(
                Match(
                    id=1,
                    date=datetime(2025, 9, 20, 18, 0, tzinfo=timezone.utc),
                    home_team=HOME_TEAM,
                    away_team=AWAY_TEAM,
                    home_score=2,
                    away_score=1,
                )
            )
        await s.commit()

        # starting squads, no stats yet
        existing_players = {
            x.id for x in (await s.execute(select(Player))).scalars().all()
        }
        squad = [
            (1, "Yassine Amrani", HOME_TEAM, "GK"),
            (2, "Karim Ben Salah", HOME_TEAM, "DF"),
            (3, "Malek Trabelsi", HOME_TEAM, "MF"),
            (4, "Omar Jaziri", HOME_TEAM, "FW"),
            (5, "Lucas Moreau", AWAY_TEAM, "GK"),
            (6, "Hugo Bernard", AWAY_TEAM, "DF"),
            (7, "Theo Laurent", AWAY_TEAM, "MF"),
            (8, "Noah Girard", AWAY_TEAM, "FW"),
        ]
        for pid, name, team, position in squad:
            if pid not in existing_players:
                s.add(
                    Player(
                        id=pid,
                        name=name,
                        team=team,
                        position=position,
                        goals=0,
                        assists=0,
                        form_rating=recalc_rating(0, 0),
                    )
                )
        await s.commit()

    await engine.dispose()

if __name__ == "__main__":
    asyncio.run(main())
