"""Classify free-text NBA game status strings into a GameStatus."""

from __future__ import annotations

import re
from typing import Optional

from tools.matchup.models import GameStatus

_IN_PROGRESS_MARKERS = (
    "in progress",
    "live",
    "qtr",
    "quarter",
    "half",
    "1st",
    "2nd",
    "3rd",
    "4th",
    "overtime",
)

# "OT", "2OT", "End of OT" but not the "ot" inside "not started"
_OVERTIME_PATTERN = re.compile(r"\b\d*ot\b")


def parse_game_status(status: Optional[str]) -> GameStatus:
    """Parse a game status string from a schedule feed.

    Anything not recognized as final or live is NOT_STARTED, so an unknown
    status never removes a game from the remaining projection.

    Examples:
        >>> parse_game_status("Final/OT")
        <GameStatus.FINAL: 'FINAL'>
        >>> parse_game_status("3rd Qtr")
        <GameStatus.IN_PROGRESS: 'IN_PROGRESS'>
        >>> parse_game_status("7:30 PM ET")
        <GameStatus.NOT_STARTED: 'NOT_STARTED'>
    """
    if not status:
        return GameStatus.NOT_STARTED

    text = str(status).lower().strip()

    if "final" in text:
        return GameStatus.FINAL

    if any(marker in text for marker in _IN_PROGRESS_MARKERS):
        return GameStatus.IN_PROGRESS

    if _OVERTIME_PATTERN.search(text):
        return GameStatus.IN_PROGRESS

    return GameStatus.NOT_STARTED
