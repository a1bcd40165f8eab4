"""Rest-of-week start counts using maximum lineup matching.

Unlike the weekly projection, these counts are whole starts: no injury
weighting, no expected-value credit. Only players sitting in an IR roster slot
are excluded. Each remaining day is solved as a maximum bipartite matching of
players with a game to lineup slots.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import List, Mapping, Optional, Sequence

from tools.matchup.models import STANDARD_LINEUP_SLOTS, LineupSlot, NBAGame, RosterSlot
from tools.matchup.roster_optimizer import AvailablePlayer, SlotAssignment, find_maximum_matching
from tools.schedule.matchup_week import get_remaining_matchup_dates
from tools.schedule.team_codes import find_team_game, normalize_team_code

logger = logging.getLogger(__name__)


@dataclass
class ExcludedPlayer:
    player_id: str
    player_name: str
    reason: str  # "IR slot", "No positions" or "Missing team"
    nba_team: Optional[str] = None
    positions: List[str] = field(default_factory=list)


@dataclass
class DayStartsBreakdown:
    date: str
    slots_count: int
    schedule_games_count: int
    players_with_game: int
    filtered_out: int
    starts_used: int
    overflow: int
    unused_slots: int
    missing_team_count: int
    slot_assignments: List[SlotAssignment] = field(default_factory=list)
    excluded_players: List[ExcludedPlayer] = field(default_factory=list)


@dataclass
class RestOfWeekStats:
    projected_starts: int
    max_possible_starts: int
    unused_starts: int
    overflow_games: int
    roster_games_remaining: int
    days_remaining: int
    per_day: List[DayStartsBreakdown] = field(default_factory=list)


def _calculate_day_starts(
    date_str: str,
    roster: Sequence[RosterSlot],
    games: Sequence[NBAGame],
    lineup_slots: Sequence[LineupSlot],
) -> DayStartsBreakdown:
    excluded: List[ExcludedPlayer] = []
    candidates: List[AvailablePlayer] = []
    missing_team_count = 0

    for slot in roster:
        player = slot.player
        positions = list(player.positions or [])

        if slot.is_ir:
            excluded.append(
                ExcludedPlayer(player.player_id, player.name, "IR slot", player.nba_team, positions)
            )
            continue

        if not positions:
            excluded.append(
                ExcludedPlayer(player.player_id, player.name, "No positions", player.nba_team, positions)
            )
            continue

        team_code = normalize_team_code(player.nba_team)
        if not team_code:
            missing_team_count += 1
            excluded.append(
                ExcludedPlayer(player.player_id, player.name, "Missing team", player.nba_team, positions)
            )
            continue

        if find_team_game(team_code, games) is None:
            continue

        candidates.append(AvailablePlayer(player_id=player.player_id, positions=positions, name=player.name))

    matching = find_maximum_matching(candidates, lineup_slots)
    starts_used = matching.match_count

    return DayStartsBreakdown(
        date=date_str,
        slots_count=len(lineup_slots),
        schedule_games_count=len(games),
        players_with_game=len(candidates),
        filtered_out=len(excluded),
        starts_used=starts_used,
        overflow=max(0, len(candidates) - starts_used),
        unused_slots=max(0, len(lineup_slots) - starts_used),
        missing_team_count=missing_team_count,
        slot_assignments=matching.assignments,
        excluded_players=excluded,
    )


def compute_rest_of_week_starts(
    roster: Sequence[RosterSlot],
    matchup_dates: Sequence[str],
    games_by_date: Mapping[str, Sequence[NBAGame]],
    lineup_slots: Optional[Sequence[LineupSlot]] = None,
    today: Optional[date] = None,
) -> RestOfWeekStats:
    """Compute integer starts for the remaining days (today onward) of a matchup.

    Args:
        roster: Roster slots
        matchup_dates: ISO dates of the full matchup period
        games_by_date: ISO date -> that day's games
        lineup_slots: Ordered lineup slot configuration (standard 8 slots by default)
        today: First date considered remaining (defaults to today)

    Returns:
        RestOfWeekStats with totals and a per-day breakdown
    """
    slots = tuple(lineup_slots) if lineup_slots else STANDARD_LINEUP_SLOTS
    future_dates = sorted(get_remaining_matchup_dates(matchup_dates, today))

    per_day = [
        _calculate_day_starts(d, roster, games_by_date.get(d, []), slots) for d in future_dates
    ]

    projected_starts = sum(day.starts_used for day in per_day)
    max_possible = len(slots) * len(future_dates)

    logger.info(
        f"Rest of week: {projected_starts}/{max_possible} starts over {len(future_dates)} days"
    )

    return RestOfWeekStats(
        projected_starts=projected_starts,
        max_possible_starts=max_possible,
        unused_starts=max_possible - projected_starts,
        overflow_games=sum(day.overflow for day in per_day),
        roster_games_remaining=sum(day.players_with_game for day in per_day),
        days_remaining=len(future_dates),
        per_day=per_day,
    )
