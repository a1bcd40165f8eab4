"""Matchup week date helpers and remaining-games summaries."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple

from tools.matchup.models import NBAGame
from tools.schedule.team_codes import get_team_game_dates, normalize_team_code

MONTH_INDEX = {
    "jan": 1, "feb": 2, "mar": 3, "apr": 4, "may": 5, "jun": 6,
    "jul": 7, "aug": 8, "sep": 9, "oct": 10, "nov": 11, "dec": 12,
}

_DATE_RANGE_PATTERN = re.compile(r"^(\w{3})\s+(\d{1,2})\s*-\s*(?:(\w{3})\s+)?(\d{1,2})")


def date_range(start: date, end: date) -> Iterable[date]:
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def get_matchup_week_dates(today: Optional[date] = None) -> List[str]:
    """Return the Monday-Sunday ISO dates of the week containing ``today``."""
    today = today or date.today()
    monday = today - timedelta(days=today.weekday())
    return [d.isoformat() for d in date_range(monday, monday + timedelta(days=6))]


def get_remaining_matchup_dates(
    week_dates: Optional[Sequence[str]] = None, today: Optional[date] = None
) -> List[str]:
    """Return the week dates from today onward."""
    today = today or date.today()
    if week_dates is None:
        week_dates = get_matchup_week_dates(today)
    today_str = today.isoformat()
    return [d for d in week_dates if d >= today_str]


def parse_date_range_text(
    text: str, season_year: int
) -> Tuple[Optional[date], Optional[date]]:
    """Parse league schedule ranges like "Feb 9 - 22" or "Dec 29 - Jan 4".

    ``season_year`` is the year the season ends in; October through December
    dates belong to the previous calendar year.
    """
    match = _DATE_RANGE_PATTERN.match(text.strip())
    if not match:
        return None, None

    start_month = MONTH_INDEX.get(match.group(1).lower())
    end_month = MONTH_INDEX.get(match.group(3).lower()) if match.group(3) else start_month
    if start_month is None or end_month is None:
        return None, None

    start_year = season_year - 1 if start_month >= 10 else season_year
    end_year = season_year - 1 if end_month >= 10 else season_year
    try:
        start = date(start_year, start_month, int(match.group(2)))
        end = date(end_year, end_month, int(match.group(4)))
    except ValueError:
        return None, None
    return start, end


@dataclass
class GamesRemainingInfo:
    count: int
    day_labels: List[str] = field(default_factory=list)
    is_today: bool = False
    text: str = "—"


def get_player_remaining_games_badge(
    team: Optional[str],
    week_dates: Sequence[str],
    games_by_date: Mapping[str, Sequence[NBAGame]],
    today: Optional[date] = None,
) -> GamesRemainingInfo:
    """Summarize a player's remaining games this week ("Today +1", "Fri/Sun", "4g left")."""
    team_code = normalize_team_code(team)
    if not team_code or not week_dates:
        return GamesRemainingInfo(count=0)

    today = today or date.today()
    today_str = today.isoformat()
    remaining_dates = get_remaining_matchup_dates(week_dates, today)
    if not remaining_dates:
        return GamesRemainingInfo(count=0, text="No games left")

    game_dates = get_team_game_dates(
        team_code, {d: games_by_date.get(d, []) for d in remaining_dates}
    )
    count = len(game_dates)
    day_labels = [date.fromisoformat(d).strftime("%a") for d in game_dates[:3]]
    is_today = count > 0 and game_dates[0] == today_str

    if count == 0:
        text = "No games left"
    elif is_today and count == 1:
        text = "Today"
    elif is_today:
        text = f"Today +{count - 1}"
    elif count == 1:
        text = day_labels[0]
    elif count <= 3:
        text = "/".join(day_labels)
    else:
        text = f"{count}g left"

    return GamesRemainingInfo(count=count, day_labels=day_labels, is_today=is_today, text=text)
