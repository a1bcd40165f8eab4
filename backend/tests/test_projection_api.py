"""Tests for the projection API endpoints."""

from __future__ import annotations

import copy

import pytest
from fastapi.testclient import TestClient

from app.main import app

client = TestClient(app)

WEEK_BODY = {
    "roster": [
        {
            "player": {
                "id": "1",
                "name": "Lead Guard",
                "nbaTeam": "LAL",
                "positions": ["PG"],
                "gamesPlayed": 30,
                "minutes": 34.0,
                "fgm": 9.0,
                "fga": 18.0,
                "ftm": 5.0,
                "fta": 6.0,
                "threepm": 3.0,
                "rebounds": 5.0,
                "assists": 8.0,
                "steals": 1.5,
                "blocks": 0.4,
                "turnovers": 3.0,
                "points": 26.0,
            },
            "slotType": "starter",
        },
        {
            "player": {"id": "2", "name": "Sidelined", "nbaTeam": "GS", "positions": ["C"], "status": "O"},
            "slotType": "starter",
        },
    ],
    "gamesByDate": {
        "2026-01-05": [{"gameId": "g1", "homeTeam": "LAL", "awayTeam": "GSW", "status": "Final"}],
        "2026-01-06": [{"gameId": "g2", "homeTeam": "LAL", "awayTeam": "BOS", "status": "7:30 PM ET"}],
    },
    "weekDates": ["2026-01-05", "2026-01-06"],
    "today": "2026-01-06",
}


@pytest.fixture
def week_body():
    return copy.deepcopy(WEEK_BODY)


@pytest.mark.unit
def test_health():
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


@pytest.mark.unit
def test_root_lists_projection_routes():
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["endpoints"] == [
        "/api/projection/matchup",
        "/api/projection/slate",
        "/api/projection/starts",
        "/api/projection/week",
    ]
    for path in response.json()["endpoints"]:
        assert client.post(path, json={}).status_code == 422


@pytest.mark.unit
def test_week_projection(week_body):
    response = client.post("/api/projection/week", json=week_body)

    assert response.status_code == 200
    data = response.json()
    assert data["total_started_games"] == pytest.approx(2.0)
    assert data["total_scheduled_games"] == 3
    assert data["total_stats"]["points"] == pytest.approx(52.0)
    assert data["total_stats"]["fg_pct"] == pytest.approx(0.5)
    sidelined = next(p for p in data["player_projections"] if p["player_id"] == "2")
    assert sidelined["expected_started_games"] == 0.0
    assert sidelined["nba_team"] == "GSW"


@pytest.mark.unit
def test_week_projection_error_code(week_body):
    week_body["gamesByDate"] = {"2026-01-05": [], "2026-01-06": []}

    response = client.post("/api/projection/week", json=week_body)

    assert response.status_code == 400
    assert response.json()["detail"]["code"] == "NO_SCHEDULE_DATA"


@pytest.mark.unit
def test_bad_today_is_rejected(week_body):
    week_body["today"] = "someday"

    response = client.post("/api/projection/week", json=week_body)

    assert response.status_code == 400


@pytest.mark.unit
def test_missing_roster_is_validation_error(week_body):
    del week_body["roster"]

    response = client.post("/api/projection/week", json=week_body)

    assert response.status_code == 422


@pytest.mark.unit
def test_slate_projection(week_body):
    response = client.post("/api/projection/slate", json=week_body)

    assert response.status_code == 200
    data = response.json()
    assert data["today_date"] == "2026-01-06"
    assert data["excluded_started_games"] == 2
    assert data["included_not_started_games"] == 1
    assert data["projection"]["total_started_games"] == pytest.approx(1.0)
    assert data["explanation"].startswith("Current includes through yesterday")


@pytest.mark.unit
def test_rest_of_week_starts(week_body):
    response = client.post("/api/projection/starts", json=week_body)

    assert response.status_code == 200
    data = response.json()
    assert data["days_remaining"] == 1
    assert data["projected_starts"] == 1
    assert data["per_day"][0]["date"] == "2026-01-06"


@pytest.mark.unit
def test_matchup_projection(week_body):
    response = client.post("/api/projection/matchup", json={"user": week_body, "opponent": week_body})

    assert response.status_code == 200
    data = response.json()
    assert data["user_record"]["tie"] == 9
    assert data["opponent_record"]["win"] == 0


@pytest.mark.unit
def test_matchup_limited_to_league_categories(week_body):
    response = client.post(
        "/api/projection/matchup",
        json={"user": week_body, "opponent": week_body, "categories": ["PTS", "3PTM", "MIN"]},
    )

    assert response.status_code == 200
    record = response.json()["user_record"]
    assert record["tie"] == 2
    assert set(record["categories"]) == {"PTS", "3PM"}


@pytest.mark.unit
def test_week_range_replaces_week_dates(week_body):
    listed = client.post("/api/projection/week", json=week_body).json()
    del week_body["weekDates"]
    week_body["weekRange"] = "Jan 5 - 6"

    response = client.post("/api/projection/week", json=week_body)

    assert response.status_code == 200
    assert response.json()["total_scheduled_games"] == listed["total_scheduled_games"]
    assert response.json()["total_stats"] == listed["total_stats"]
