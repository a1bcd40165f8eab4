"""Load projection inputs (roster, schedule, dates) from JSON documents."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from tools.matchup.models import (
    LineupSlot,
    NBAGame,
    RosterSlot,
    parse_games_by_date,
    parse_lineup_slots,
    parse_roster,
)
from tools.schedule.matchup_week import date_range, get_matchup_week_dates, parse_date_range_text

logger = logging.getLogger(__name__)


class InputFormatError(ValueError):
    """Raised when a projection input document has the wrong shape."""


@dataclass
class ProjectionInput:
    roster: List[RosterSlot]
    games_by_date: Dict[str, List[NBAGame]]
    week_dates: List[str]
    lineup_slots: Tuple[LineupSlot, ...]
    today: Optional[date] = None


def _check_player_ids(roster: Sequence[RosterSlot]) -> None:
    seen = set()
    for index, slot in enumerate(roster):
        player_id = slot.player.player_id
        if not player_id:
            raise InputFormatError(f"Roster entry {index} has no player id")
        if player_id in seen:
            raise InputFormatError(f"Duplicate player id in roster: {player_id}")
        seen.add(player_id)


def _season_year(today_date: Optional[date], games_by_date: Mapping[str, Any]) -> int:
    """Year the NBA season ends in, judged from today or the first schedule date."""
    reference = today_date
    if reference is None and games_by_date:
        try:
            reference = date.fromisoformat(min(games_by_date))
        except ValueError:
            reference = None
    reference = reference or date.today()
    return reference.year + 1 if reference.month >= 10 else reference.year


def _default_week_dates(
    data: Mapping[str, Any], games_by_date: Mapping[str, Any], today_date: Optional[date]
) -> List[str]:
    """Week dates when none are listed.

    A ``weekRange`` text ("Dec 29 - Jan 4") wins, then the Monday-Sunday week
    containing ``today``, then every date in the schedule.
    """
    week_range = data.get("weekRange", data.get("week_range"))
    if week_range:
        start, end = parse_date_range_text(str(week_range), _season_year(today_date, games_by_date))
        if start is None or end is None:
            raise InputFormatError(f"'weekRange' is not a range like 'Jan 5 - 11': {week_range!r}")
        return [d.isoformat() for d in date_range(start, end)]
    if today_date is not None:
        return get_matchup_week_dates(today_date)
    return sorted(games_by_date.keys())


def parse_projection_input(data: Any) -> ProjectionInput:
    """Validate and convert a decoded JSON document.

    Expected shape::

        {
          "roster": [{"player": {...}, "slotType": "starter"}, ...],
          "gamesByDate": {"2026-01-06": [{"gameId": ..., "homeTeam": ..., ...}]},
          "weekDates": ["2026-01-06", ...],       # or "matchupDates"; optional
          "weekRange": "Jan 5 - 11",              # optional, used without weekDates
          "lineupSlots": [{"slotName": "PG", "eligiblePositions": ["PG"]}],  # optional
          "today": "2026-01-06"                    # optional
        }
    """
    if not isinstance(data, Mapping):
        raise InputFormatError("Projection input must be a JSON object")

    roster = data.get("roster")
    if not isinstance(roster, list) or not all(isinstance(e, Mapping) for e in roster):
        raise InputFormatError("'roster' must be a list of {player, slotType} objects")

    games_by_date = data.get("gamesByDate", data.get("games_by_date"))
    if not isinstance(games_by_date, Mapping) or not all(
        isinstance(games, list) for games in games_by_date.values()
    ):
        raise InputFormatError("'gamesByDate' must map ISO dates to lists of games")

    today = data.get("today")
    try:
        today_date = date.fromisoformat(today) if today else None
    except (TypeError, ValueError) as exc:
        raise InputFormatError(f"'today' is not an ISO date: {today!r}") from exc

    week_dates = data.get("weekDates", data.get("matchupDates", data.get("week_dates")))
    if week_dates is None:
        week_dates = _default_week_dates(data, games_by_date, today_date)
    if not isinstance(week_dates, list) or not all(isinstance(d, str) for d in week_dates):
        raise InputFormatError("'weekDates' must be a list of ISO date strings")

    lineup_slots = data.get("lineupSlots", data.get("lineup_slots"))
    if lineup_slots is not None and not isinstance(lineup_slots, list):
        raise InputFormatError("'lineupSlots' must be a list of {slotName, eligiblePositions}")

    roster_slots = parse_roster(roster)
    _check_player_ids(roster_slots)

    return ProjectionInput(
        roster=roster_slots,
        games_by_date=parse_games_by_date(games_by_date),
        week_dates=list(week_dates),
        lineup_slots=parse_lineup_slots(lineup_slots),
        today=today_date,
    )


def load_projection_input(path: Union[str, Path]) -> ProjectionInput:
    """Read a projection input JSON file.

    Raises:
        InputFormatError: If the file is missing, not JSON, or has the wrong shape
    """
    file_path = Path(path).expanduser()
    if not file_path.exists():
        raise InputFormatError(f"Input file not found: {file_path}")

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as exc:
        raise InputFormatError(f"Invalid JSON in {file_path}: {exc}") from exc

    projection_input = parse_projection_input(data)
    logger.debug(
        f"Loaded {len(projection_input.roster)} roster slots and "
        f"{len(projection_input.week_dates)} dates from {file_path}"
    )
    return projection_input
