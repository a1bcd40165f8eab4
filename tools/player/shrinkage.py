"""Shrinkage blending of small-sample per-game stats toward position averages."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Sequence, Tuple

from tools.matchup.models import Player, ProjectedStats

logger = logging.getLogger(__name__)

# Higher K = more conservative, blends further toward the fallback
SHRINKAGE_K = 10

DEFAULT_AVERAGES = ProjectedStats(
    points=13.0,
    rebounds=5.0,
    assists=3.0,
    steals=0.9,
    blocks=0.6,
    threepm=1.5,
    turnovers=1.8,
    fg_pct=0.46,
    ft_pct=0.77,
    fga=11.0,
    fgm=5.1,
    fta=3.0,
    ftm=2.3,
)

# League-average per-game lines by position
POSITION_AVERAGES: Mapping[str, ProjectedStats] = MappingProxyType(
    {
        "PG": ProjectedStats(
            points=14.5, rebounds=3.5, assists=6.0, steals=1.2, blocks=0.3,
            threepm=2.0, turnovers=2.5, fg_pct=0.44, ft_pct=0.82,
            fga=12.0, fgm=5.3, fta=3.5, ftm=2.9,
        ),
        "SG": ProjectedStats(
            points=15.0, rebounds=3.8, assists=3.5, steals=1.0, blocks=0.4,
            threepm=2.2, turnovers=2.0, fg_pct=0.45, ft_pct=0.80,
            fga=13.0, fgm=5.9, fta=3.0, ftm=2.4,
        ),
        "SF": ProjectedStats(
            points=13.5, rebounds=5.5, assists=2.5, steals=0.9, blocks=0.5,
            threepm=1.8, turnovers=1.8, fg_pct=0.46, ft_pct=0.78,
            fga=11.0, fgm=5.1, fta=2.8, ftm=2.2,
        ),
        "PF": ProjectedStats(
            points=12.5, rebounds=6.5, assists=2.0, steals=0.7, blocks=0.8,
            threepm=1.2, turnovers=1.5, fg_pct=0.48, ft_pct=0.75,
            fga=10.0, fgm=4.8, fta=2.5, ftm=1.9,
        ),
        "C": ProjectedStats(
            points=11.0, rebounds=8.0, assists=1.5, steals=0.5, blocks=1.2,
            threepm=0.5, turnovers=1.5, fg_pct=0.55, ft_pct=0.70,
            fga=8.0, fgm=4.4, fta=2.8, ftm=2.0,
        ),
    }
)


@dataclass(frozen=True)
class ShrinkageResult:
    value: float
    used_shrinkage: bool


def _is_missing(value: Optional[float]) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value))


def apply_shrinkage_blend(
    observed_value: Optional[float],
    fallback_value: float,
    games_played: float,
    k: float = SHRINKAGE_K,
) -> ShrinkageResult:
    """Blend an observed per-game value toward a fallback by sample size.

    ``value = w * observed + (1 - w) * fallback`` with ``w = gp / (gp + k)``.
    Samples of at least ``k`` games are trusted outright, and a missing
    observation returns the fallback.

    Examples:
        >>> round(apply_shrinkage_blend(15.0, 10.0, 5).value, 2)
        11.67
        >>> apply_shrinkage_blend(None, 10.0, 5)
        ShrinkageResult(value=10.0, used_shrinkage=True)
    """
    if _is_missing(observed_value):
        return ShrinkageResult(value=fallback_value, used_shrinkage=True)

    if games_played >= k:
        return ShrinkageResult(value=observed_value, used_shrinkage=False)

    games_played = max(games_played, 0)
    weight = games_played / (games_played + k)
    if weight == 0:
        return ShrinkageResult(value=fallback_value, used_shrinkage=True)
    blended = weight * observed_value + (1 - weight) * fallback_value
    return ShrinkageResult(value=blended, used_shrinkage=True)


def get_position_fallback(
    positions: Sequence[str],
    position_averages: Mapping[str, ProjectedStats] = POSITION_AVERAGES,
    default_averages: ProjectedStats = DEFAULT_AVERAGES,
) -> ProjectedStats:
    """Return the league-average line for the player's primary position."""
    primary = positions[0].upper() if positions else None
    if primary and primary in position_averages:
        return position_averages[primary]
    return default_averages


def _has_production(player: Player) -> bool:
    return any(
        value is not None and value > 0
        for value in (
            player.minutes,
            player.points,
            player.rebounds,
            player.assists,
            player.threepm,
        )
    )


def _missing_volume(made: Optional[float], attempted: Optional[float]) -> bool:
    return (_is_missing(attempted) or attempted <= 0) and (_is_missing(made) or made <= 0)


def _observed_pct(
    pct: Optional[float], makes: Optional[float], attempts: Optional[float]
) -> Optional[float]:
    """Reported percentage, or makes / attempts when the percentage is absent."""
    if pct is not None and not math.isnan(pct):
        return pct
    if makes is not None and attempts:
        return makes / attempts
    return None


def get_blended_per_game_stats(
    player: Player,
    games_played: float,
    k: float = SHRINKAGE_K,
    position_averages: Mapping[str, ProjectedStats] = POSITION_AVERAGES,
    default_averages: ProjectedStats = DEFAULT_AVERAGES,
) -> Tuple[ProjectedStats, bool]:
    """Get a player's per-game line with shrinkage applied to every stat.

    A player who clearly produces (points, rebounds, ...) but shows zero
    shooting volume almost always comes from a row whose shooting cells were
    lost upstream ('--' parsed as 0). That volume is treated as missing so the
    position fallback fills it in instead of a literal non-shooter.

    Returns:
        Tuple of (per_game_stats, used_shrinkage)
    """
    fallback = get_position_fallback(player.positions, position_averages, default_averages)
    produces = _has_production(player)
    missing_fg = produces and _missing_volume(player.fgm, player.fga)
    missing_ft = produces and _missing_volume(player.ftm, player.fta)

    if missing_fg or missing_ft:
        logger.debug(
            f"{player.name}: shooting volume missing (FG: {missing_fg}, FT: {missing_ft}), "
            "using position fallback"
        )

    used_any = False

    def blend(observed: Optional[float], fallback_value: float) -> float:
        nonlocal used_any
        result = apply_shrinkage_blend(observed, fallback_value, games_played, k)
        if result.used_shrinkage:
            used_any = True
        return result.value

    stats = ProjectedStats(
        fgm=blend(None if missing_fg else player.fgm, fallback.fgm),
        fga=blend(None if missing_fg else player.fga, fallback.fga),
        fg_pct=blend(
            None if missing_fg else _observed_pct(player.fg_pct, player.fgm, player.fga),
            fallback.fg_pct,
        ),
        ftm=blend(None if missing_ft else player.ftm, fallback.ftm),
        fta=blend(None if missing_ft else player.fta, fallback.fta),
        ft_pct=blend(
            None if missing_ft else _observed_pct(player.ft_pct, player.ftm, player.fta),
            fallback.ft_pct,
        ),
        threepm=blend(player.threepm, fallback.threepm),
        rebounds=blend(player.rebounds, fallback.rebounds),
        assists=blend(player.assists, fallback.assists),
        steals=blend(player.steals, fallback.steals),
        blocks=blend(player.blocks, fallback.blocks),
        turnovers=blend(player.turnovers, fallback.turnovers),
        points=blend(player.points, fallback.points),
    )
    return stats, used_any
