import pytest
from fastapi.testclient import TestClient
from sqlalchemy import select

from app.main import app
from app.models import Event


@pytest.fixture
def client():
    return TestClient(app)


def _stored_events(run_db):
    async def _list(session):
        return (await session.execute(select(Event).order_by(Event.id))).scalars().all()

    return run_db(_list)


def test_goal_updates_scorer_rating(client, seed_players, load_player):
    seed_players((1, "Scorer", "Blue FC"))

    resp = client.post(
        "/api/event",
        json={"minute": 23, "type": "GOAL", "playerId": 1, "meta": {}},
    )

    assert resp.status_code == 200
    body = resp.json()
    assert body["minute"] == 23
    assert body["type"] == "GOAL"
    assert body["playerId"] == 1
    assert body["meta"] == {}
    assert isinstance(body["id"], int)

    scorer = load_player(1)
    assert scorer.goals == 1
    assert scorer.form_rating == 7.0


def test_goal_with_assist_updates_both_players(client, seed_players, load_player):
    seed_players((1, "Scorer", "Blue FC"), (2, "Provider", "Blue FC"))

    resp = client.post(
        "/api/event",
        json={"minute": 51, "type": "GOAL", "playerId": 1, "meta": {"assistId": 2}},
    )

    assert resp.status_code == 200
    assert resp.json()["meta"] == {"assistId": 2}

    scorer = load_player(1)
    provider = load_player(2)
    assert (scorer.goals, scorer.form_rating) == (1, 7.0)
    assert (provider.assists, provider.form_rating) == (1, 6.5)

    players = client.get("/api/match").json()["players"]
    assert [(p["id"], p["formRating"]) for p in players] == [(1, 7.0), (2, 6.5)]


def test_client_supplied_id_is_ignored(client, run_db, seed_players):
    seed_players((1, "Scorer", "Blue FC"))

    first = client.post(
        "/api/event",
        json={"id": 999, "minute": 1, "type": "SHOT", "playerId": 1},
    )
    second = client.post(
        "/api/event",
        json={"id": 999, "minute": 2, "type": "SHOT", "playerId": 1},
    )

    assert first.status_code == 200
    assert second.status_code == 200
    assert first.json()["id"] != 999
    assert second.json()["id"] != first.json()["id"]
    assert [e.id for e in _stored_events(run_db)] == [
        first.json()["id"],
        second.json()["id"],
    ]


def test_missing_meta_is_stored_as_empty_object(client, run_db, seed_players):
    seed_players((1, "Scorer", "Blue FC"))

    resp = client.post(
        "/api/event",
        json={"minute": 5, "type": "TACKLE", "playerId": 1, "meta": None},
    )

    assert resp.status_code == 200
    assert resp.json()["meta"] == {}
    assert _stored_events(run_db)[0].meta == {}


def test_other_event_types_leave_players_unchanged(client, seed_players, load_player):
    seed_players((1, "Scorer", "Blue FC"))

    resp = client.post(
        "/api/event",
        json={"minute": 70, "type": "CARD", "playerId": 1, "meta": {"color": "yellow"}},
    )

    assert resp.status_code == 200
    player = load_player(1)
    assert (player.goals, player.assists, player.form_rating) == (0, 0, 6.0)


def test_event_for_unknown_player_is_still_stored(client, run_db):
    resp = client.post(
        "/api/event",
        json={"minute": 8, "type": "GOAL", "playerId": 404, "meta": {}},
    )

    assert resp.status_code == 200
    stored = _stored_events(run_db)
    assert len(stored) == 1
    assert stored[0].player_id == 404


def test_malformed_assist_id_fails_request(run_db, seed_players, load_player):
    seed_players((1, "Scorer", "Blue FC"), (2, "Provider", "Blue FC"))
    client = TestClient(app, raise_server_exceptions=False)

    resp = client.post(
        "/api/event",
        json={"minute": 60, "type": "GOAL", "playerId": 1, "meta": {"assistId": "abc"}},
    )

    assert resp.status_code == 500
    assert resp.headers["content-type"].startswith("application/problem+json")
    assert resp.json()["code"] == "internal_server_error"

    # The event and the scorer's goal were committed before the failure.
    assert len(_stored_events(run_db)) == 1
    assert load_player(1).goals == 1
    assert load_player(2).assists == 0


def test_rejects_non_integer_minute(client):
    resp = client.post(
        "/api/event",
        json={"minute": "late", "type": "GOAL", "playerId": 1},
    )

    assert resp.status_code == 422


def test_blank_event_type_is_stored_without_stat_changes(client, run_db, seed_players, load_player):
    seed_players((1, "Scorer", "Blue FC"))

    resp = client.post(
        "/api/event",
        json={"minute": 9, "type": "", "playerId": 1, "meta": {}},
    )

    assert resp.status_code == 200
    assert resp.json()["type"] == ""
    assert _stored_events(run_db)[0].type == ""
    player = load_player(1)
    assert (player.goals, player.assists, player.form_rating) == (0, 0, 6.0)
