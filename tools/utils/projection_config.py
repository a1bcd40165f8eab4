"""Configuration for the projection engine, with environment overrides."""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass, field
from typing import Mapping, Tuple

from tools.matchup.models import STANDARD_LINEUP_SLOTS, LineupSlot, ProjectedStats
from tools.player.shrinkage import DEFAULT_AVERAGES, POSITION_AVERAGES, SHRINKAGE_K

logger = logging.getLogger(__name__)

# Sample size assumed when a player's games played is unknown
DEFAULT_GAMES_PLAYED = 10


def _env_number(env_var: str, default: float, *, allow_zero: bool) -> float:
    """Read a non-negative number from the environment.

    Inline comments ("15  # conservative") are ignored. Unparseable,
    negative or non-finite values (and zero unless ``allow_zero``) fall back
    to ``default`` with a warning.
    """
    raw = os.environ.get(env_var)
    if raw is None:
        return default
    text = raw.split("#", 1)[0].strip()
    try:
        value = float(text)
    except ValueError:
        logger.warning(f"{env_var}={raw!r} is not a number, using {default}")
        return default
    if not math.isfinite(value) or value < 0 or (value == 0 and not allow_zero):
        logger.warning(f"{env_var}={raw!r} is out of range, using {default}")
        return default
    return value


@dataclass(frozen=True)
class ProjectionConfig:
    """Reference data and tuning constants handed to the projection engine."""

    shrinkage_k: float = SHRINKAGE_K
    default_games_played: float = DEFAULT_GAMES_PLAYED
    lineup_slots: Tuple[LineupSlot, ...] = STANDARD_LINEUP_SLOTS
    position_averages: Mapping[str, ProjectedStats] = field(
        default_factory=lambda: POSITION_AVERAGES
    )
    default_averages: ProjectedStats = DEFAULT_AVERAGES


def load_projection_config() -> ProjectionConfig:
    """Build a ProjectionConfig, honoring SLATECAST_* environment overrides.

    Supported variables:
        SLATECAST_SHRINKAGE_K: shrinkage constant (default 10)
        SLATECAST_DEFAULT_GAMES_PLAYED: sample size assumed when unknown (default 10)
    """
    shrinkage_k = _env_number("SLATECAST_SHRINKAGE_K", float(SHRINKAGE_K), allow_zero=False)
    default_games = _env_number(
        "SLATECAST_DEFAULT_GAMES_PLAYED", float(DEFAULT_GAMES_PLAYED), allow_zero=True
    )
    return ProjectionConfig(shrinkage_k=shrinkage_k, default_games_played=default_games)


DEFAULT_CONFIG = ProjectionConfig()
