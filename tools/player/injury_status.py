"""Player health status classification and expected-participation multipliers."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union


class PlayerStatus(str, Enum):
    HEALTHY = "HEALTHY"
    PROBABLE = "PROBABLE"
    QUESTIONABLE = "QUESTIONABLE"
    DAY_TO_DAY = "DAY_TO_DAY"
    OUT = "OUT"


# Fraction of a game a player in each status is expected to play
INJURY_MULTIPLIERS = {
    PlayerStatus.HEALTHY: 1.0,
    PlayerStatus.PROBABLE: 0.85,
    PlayerStatus.QUESTIONABLE: 0.7,
    PlayerStatus.DAY_TO_DAY: 0.6,
    PlayerStatus.OUT: 0.0,
}

_OUT_TOKENS = {"O", "OUT", "IR", "SUSP", "SUSPENDED", "SSPD"}
_QUESTIONABLE_TOKENS = {"Q", "QUESTIONABLE"}
_PROBABLE_TOKENS = {"GTD", "P", "PROBABLE"}


def classify_player_status(status: Optional[str]) -> PlayerStatus:
    """Map a free-text player status (ESPN/Yahoo style) to a PlayerStatus.

    Unrecognized or empty text is treated as healthy.

    Examples:
        >>> classify_player_status("O")
        <PlayerStatus.OUT: 'OUT'>
        >>> classify_player_status("INJ (O)")
        <PlayerStatus.OUT: 'OUT'>
        >>> classify_player_status("dtd")
        <PlayerStatus.DAY_TO_DAY: 'DAY_TO_DAY'>
    """
    if not status:
        return PlayerStatus.HEALTHY

    token = str(status).upper().strip()
    if not token:
        return PlayerStatus.HEALTHY

    if token in _OUT_TOKENS or "(O)" in token:
        return PlayerStatus.OUT
    if "DTD" in token:
        return PlayerStatus.DAY_TO_DAY
    if token in _QUESTIONABLE_TOKENS:
        return PlayerStatus.QUESTIONABLE
    if token in _PROBABLE_TOKENS:
        return PlayerStatus.PROBABLE
    return PlayerStatus.HEALTHY


def get_injury_multiplier(status: Union[PlayerStatus, str, None]) -> float:
    """Return the expected-participation fraction (0.0 to 1.0) for a status.

    A multiplier of 0 keeps the player out of every lineup slot; anything
    above 0 is the credit the player earns for a start.
    """
    if not isinstance(status, PlayerStatus):
        status = classify_player_status(status)
    return INJURY_MULTIPLIERS[status]


def get_injury_status_label(multiplier: float) -> str:
    if multiplier <= 0:
        return "OUT"
    if multiplier <= 0.6:
        return "DTD (60%)"
    if multiplier <= 0.7:
        return "Q (70%)"
    if multiplier <= 0.85:
        return "GTD (85%)"
    return "Active"
