"""NBA team code normalization.

Fantasy sites (and users) do not always use the schedule feed's standard
abbreviations, e.g. ESPN writes "UTAH" and "GS" where the feed has "UTA" and
"GSW". Every team comparison goes through ``normalize_team_code`` first.
"""

from __future__ import annotations

import re
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from tools.matchup.models import NBAGame

TEAM_CODE_ALIASES: Dict[str, str] = {
    "UTAH": "UTA",
    "GS": "GSW",
    "NY": "NYK",
    "SA": "SAS",
    "NO": "NOP",
    "NOR": "NOP",
    "PHO": "PHX",
    "WSH": "WAS",
    "BRK": "BKN",
    "CHO": "CHA",
}

_CLEAN_CODE = re.compile(r"^[A-Z]{2,3}$")
_LEADING_BLOCK = re.compile(r"^[A-Z]{2,4}")
_ANY_BLOCK = re.compile(r"[A-Z]{2,4}")


def normalize_team_code(team: Optional[str]) -> Optional[str]:
    """Return the canonical team code, or None when it cannot be resolved.

    Examples:
        >>> normalize_team_code("utah")
        'UTA'
        >>> normalize_team_code("GS")
        'GSW'
        >>> normalize_team_code("UTAH•")
        'UTA'
        >>> normalize_team_code("12") is None
        True
    """
    if not team:
        return None

    raw = str(team).upper().strip()
    if not raw:
        return None

    if _CLEAN_CODE.match(raw):
        return TEAM_CODE_ALIASES.get(raw, raw)

    # Noisy input ("UTAH•", "LAL (2)"): take the first 2-4 letter block
    match = _LEADING_BLOCK.match(raw) or _ANY_BLOCK.search(raw)
    if not match:
        return None

    extracted = match.group(0)
    if extracted in TEAM_CODE_ALIASES:
        return TEAM_CODE_ALIASES[extracted]
    if _CLEAN_CODE.match(extracted):
        return extracted
    return None


def find_team_game(team_code: Optional[str], games: Iterable[NBAGame]) -> Optional[NBAGame]:
    """Find the game a team plays in a day's slate (team code already normalized)."""
    if not team_code:
        return None
    for game in games:
        if team_code in (
            normalize_team_code(game.home_team),
            normalize_team_code(game.away_team),
        ):
            return game
    return None


def get_team_game_dates(
    team: Optional[str], games_by_date: Mapping[str, Sequence[NBAGame]]
) -> List[str]:
    """Return the dates (in schedule order) on which a team plays."""
    team_code = normalize_team_code(team)
    if not team_code:
        return []
    return [
        date_str
        for date_str, games in games_by_date.items()
        if find_team_game(team_code, games) is not None
    ]


def get_team_games_in_range(
    team: Optional[str], games_by_date: Mapping[str, Sequence[NBAGame]]
) -> int:
    return len(get_team_game_dates(team, games_by_date))
