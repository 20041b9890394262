import os
import sys
import asyncio

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

# app.main validates CORS settings at import time.
os.environ.setdefault("ALLOWED_ORIGINS", "http://localhost:4200")
os.environ.setdefault("DISABLE_RATE_LIMITS", "true")
# Honour any externally provided DATABASE_URL (e.g. CI may set a file-backed DB)
# but fall back to an in-memory SQLite database so local runs remain isolated.
DEFAULT_DB_URL = os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

# Register every model with the declarative Base before create_all runs.
from app import db, models  # noqa: F401


@pytest.fixture(scope="session")
def session_loop():
    """Single event loop for all sync fixtures that need to run async DB code."""

    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    yield loop
    loop.close()


@pytest.fixture(autouse=True, scope="session")
def ensure_database(session_loop):
    """Ensure the test database starts clean and honours DATABASE_URL."""

    mp = pytest.MonkeyPatch()
    desired_url = os.getenv("DATABASE_URL") or DEFAULT_DB_URL
    mp.setenv("DATABASE_URL", desired_url)

    if desired_url.startswith("sqlite") and ":memory:" not in desired_url:
        path = desired_url.split("///")[-1]
        if os.path.exists(path):
            os.remove(path)

    db.engine = None
    db.AsyncSessionLocal = None
    yield
    if db.engine is not None:
        session_loop.run_until_complete(db.engine.dispose())
        db.engine = None

    if db.AsyncSessionLocal is not None:
        db.AsyncSessionLocal = None
    mp.undo()


async def _reset_schema(engine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(db.Base.metadata.drop_all)
        await conn.run_sync(db.Base.metadata.create_all)


@pytest.fixture(autouse=True)
def reset_schema(session_loop):
    """Start every test from empty match, player and event tables."""

    engine = db.engine or db.get_engine()
    session_loop.run_until_complete(_reset_schema(engine))
    yield


@pytest.fixture
def run_db(session_loop):
    """Run ``fn(session)`` against the test database and return its result."""

    def _run(fn):
        async def _go():
            async with db.AsyncSessionLocal() as session:
                return await fn(session)

        return session_loop.run_until_complete(_go())

    return _run


@pytest.fixture
def seed_players(run_db):
    """Insert players given as ``(id, name, team)`` tuples with zeroed stats."""

    def _seed(*rows):
        async def _insert(session):
            session.add_all(
                [
                    models.Player(
                        id=pid,
                        name=name,
                        team=team,
                        goals=0,
                        assists=0,
                        form_rating=6.0,
                    )
                    for pid, name, team in rows
                ]
            )
            await session.commit()

        run_db(_insert)

    return _seed


@pytest.fixture
def load_player(run_db):
    def _load(pid):
        async def _get(session):
            return await session.get(models.Player, pid)

        return run_db(_get)

    return _load
