"""Pytest configuration and fixtures for tools tests."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

import pytest

from tools.matchup.models import NBAGame, Player, RosterSlot


@pytest.fixture
def week_dates() -> List[str]:
    """A Monday-Sunday matchup week."""
    return [
        "2026-01-05",
        "2026-01-06",
        "2026-01-07",
        "2026-01-08",
        "2026-01-09",
        "2026-01-10",
        "2026-01-11",
    ]


@pytest.fixture
def make_player():
    """Returns a function to create a Player with sensible per-game averages."""

    def _create_player(
        player_id: str = "1",
        name: Optional[str] = None,
        nba_team: Optional[str] = "LAL",
        positions: Sequence[str] = ("PG",),
        status: Optional[str] = None,
        games_played: Optional[int] = 30,
        **stats: Optional[float],
    ) -> Player:
        """
        Create a player.

        Args:
            stats: Per-game overrides (points=25.0, fga=None, ...)

        Returns:
            Player with a 20-point, 8/16 FG, 4/5 FT baseline line
        """
        line: Dict[str, Optional[float]] = {
            "minutes": 32.0,
            "fgm": 8.0,
            "fga": 16.0,
            "fg_pct": 0.5,
            "ftm": 4.0,
            "fta": 5.0,
            "ft_pct": 0.8,
            "threepm": 2.0,
            "rebounds": 5.0,
            "assists": 6.0,
            "steals": 1.0,
            "blocks": 0.5,
            "turnovers": 2.5,
            "points": 22.0,
        }
        line.update(stats)
        return Player(
            player_id=player_id,
            name=name or f"Player {player_id}",
            nba_team=nba_team,
            positions=list(positions),
            status=status,
            games_played=games_played,
            **line,
        )

    return _create_player


@pytest.fixture
def make_slot():
    """Returns a function to wrap a Player in a RosterSlot."""

    def _create_slot(player: Player, slot_type: str = "starter") -> RosterSlot:
        return RosterSlot(player=player, slot_type=slot_type)

    return _create_slot


@pytest.fixture
def make_game():
    """Returns a function to create an NBAGame."""

    def _create_game(home: str, away: str, status: str = "7:30 PM ET") -> NBAGame:
        return NBAGame(game_id=f"{away}@{home}", home_team=home, away_team=away, status=status)

    return _create_game


@pytest.fixture
def schedule_for(make_game):
    """Returns a function building games_by_date with one game per (date, home, away)."""

    def _create_schedule(games: Sequence[tuple]) -> Dict[str, List[NBAGame]]:
        """
        Create schedule data structure.

        Args:
            games: (date_str, home, away) or (date_str, home, away, status) tuples

        Returns:
            Dict mapping date to that day's games
        """
        schedule: Dict[str, List[NBAGame]] = {}
        for entry in games:
            date_str, home, away = entry[:3]
            status = entry[3] if len(entry) > 3 else "7:30 PM ET"
            schedule.setdefault(date_str, []).append(make_game(home, away, status))
        return schedule

    return _create_schedule


@pytest.fixture
def sample_input_document() -> Dict:
    """A projection input document in the camelCase wire format."""
    return {
        "roster": [
            {
                "player": {
                    "id": "101",
                    "name": "Guard One",
                    "nbaTeam": "LAL",
                    "positions": ["PG", "SG"],
                    "gamesPlayed": 40,
                    "minutes": 34.0,
                    "fgm": 9.0,
                    "fga": 19.0,
                    "fgPct": 0.474,
                    "ftm": 5.0,
                    "fta": 6.0,
                    "ftPct": 0.833,
                    "threepm": 3.0,
                    "rebounds": 4.0,
                    "assists": 7.0,
                    "steals": 1.2,
                    "blocks": 0.3,
                    "turnovers": 3.0,
                    "points": 26.0,
                },
                "slotType": "starter",
            },
            {
                "player": {
                    "id": "102",
                    "name": "Big Two",
                    "nbaTeam": "UTAH",
                    "positions": "PF/C",
                    "status": "DTD",
                    "gamesPlayed": 4,
                    "minutes": 28.0,
                    "fgm": 6.0,
                    "fga": 10.0,
                    "ftm": 2.0,
                    "fta": 3.0,
                    "rebounds": 10.0,
                    "assists": 2.0,
                    "blocks": 1.8,
                    "points": 14.0,
                },
                "slotType": "bench",
            },
            {
                "player": {"id": "103", "name": "Hurt Three", "nbaTeam": "BOS", "positions": ["SF"]},
                "slotType": "ir",
            },
        ],
        "gamesByDate": {
            "2026-01-05": [{"gameId": "g1", "homeTeam": "LAL", "awayTeam": "UTA", "status": "Final"}],
            "2026-01-06": [],
            "2026-01-07": [{"gameId": "g2", "homeTeam": "UTA", "awayTeam": "BOS", "status": "7:00 PM ET"}],
            "2026-01-08": [{"gameId": "g3", "homeTeam": "DEN", "awayTeam": "LAL", "status": "9:00 PM ET"}],
        },
        "weekDates": ["2026-01-05", "2026-01-06", "2026-01-07", "2026-01-08"],
        "today": "2026-01-07",
    }
