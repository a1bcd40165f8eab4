"""Slate-aware remaining projection.

Games that have tipped off (IN_PROGRESS) or finished (FINAL) already count
toward the current matchup totals tracked elsewhere. Only NOT_STARTED games
are projected here, so no player-game is ever counted in both halves.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Mapping, Optional, Sequence

from tools.matchup.models import (
    GameStatus,
    LineupSlot,
    NBAGame,
    RosterSlot,
    SlateAwareProjectionResult,
)
from tools.matchup.week_projection import project_week_by_date
from tools.schedule.slate_tracker import (
    build_player_game_map,
    build_slate_status,
    filter_schedule_by_status,
)
from tools.utils.projection_config import ProjectionConfig

logger = logging.getLogger(__name__)


def project_slate_aware(
    roster: Sequence[RosterSlot],
    games_by_date: Mapping[str, Sequence[NBAGame]],
    week_dates: Sequence[str],
    today: Optional[date] = None,
    lineup_slots: Optional[Sequence[LineupSlot]] = None,
    config: Optional[ProjectionConfig] = None,
    as_of: Optional[datetime] = None,
) -> SlateAwareProjectionResult:
    """Project remaining totals, excluding games that have already started.

    Args:
        roster: Roster slots in roster order
        games_by_date: ISO date -> that day's games, with live status text
        week_dates: ISO dates of the remaining window
        today: Date whose slate is summarized (defaults to today)
        lineup_slots: Ordered lineup slot configuration
        config: Engine configuration
        as_of: Snapshot time shown in the slate status

    Returns:
        SlateAwareProjectionResult with the remaining projection, today's
        slate status and the per-date breakdown
    """
    today_str = (today or date.today()).isoformat()
    slate_status = build_slate_status(games_by_date.get(today_str, []), as_of=as_of)
    logger.debug(f"Slate status for {today_str}: {slate_status}")

    window = set(week_dates)
    player_game_map = build_player_game_map(
        roster, {d: games for d, games in games_by_date.items() if d in window}
    )

    excluded_started_games = 0
    included_not_started_games = 0
    for games in player_game_map.values():
        for game in games:
            if game.status is GameStatus.NOT_STARTED:
                included_not_started_games += 1
            else:
                excluded_started_games += 1

    logger.info(
        f"Slate-aware projection: {included_not_started_games} pending player-games included, "
        f"{excluded_started_games} started/completed excluded"
    )

    remaining_schedule = filter_schedule_by_status(games_by_date, GameStatus.NOT_STARTED)
    projection, stats_by_date = project_week_by_date(
        roster, week_dates, remaining_schedule, lineup_slots, config
    )

    if excluded_started_games > 0:
        projection.warnings.append(
            f"Excluded {excluded_started_games} started/completed games from remaining projection"
        )

    return SlateAwareProjectionResult(
        projection=projection,
        slate_status=slate_status,
        today_date=today_str,
        stats_by_date=stats_by_date,
        excluded_started_games=excluded_started_games,
        included_not_started_games=included_not_started_games,
    )
