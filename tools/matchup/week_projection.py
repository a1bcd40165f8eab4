"""Schedule-aware weekly projection for a fantasy basketball roster.

Projects category totals for a matchup window from:
- each player's scheduled games (team schedule per date)
- lineup slot constraints (PG/SG/SF/PF/C/G/F/UTIL by default)
- injury status multipliers (O/IR = 0, DTD = 0.6, ...)
- shrinkage blending for small or missing stat samples
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from tools.matchup.models import (
    LineupSlot,
    NBAGame,
    PlayerProjection,
    ProjectedStats,
    RosterSlot,
    WeekProjectionResult,
)
from tools.matchup.roster_optimizer import AvailablePlayer, fill_lineups_for_day
from tools.player.injury_status import get_injury_multiplier
from tools.player.shrinkage import get_blended_per_game_stats
from tools.schedule.team_codes import find_team_game, get_team_games_in_range, normalize_team_code
from tools.utils.projection_config import DEFAULT_CONFIG, ProjectionConfig

logger = logging.getLogger(__name__)


@dataclass
class _GameCounts:
    scheduled: int = 0
    started: float = 0.0
    benched: int = 0


@dataclass
class ProjectionValidation:
    """Diagnostics on how well a roster maps onto the schedule."""

    players_received: int = 0
    players_with_valid_team_id: int = 0
    players_with_at_least_one_game: int = 0
    games_found_total: int = 0
    unmapped_players: List[Dict[str, Optional[str]]] = field(default_factory=list)


@dataclass
class ProjectionError:
    code: str
    message: str
    validation: Optional[ProjectionValidation] = None


@dataclass
class ProjectionOutcome:
    success: bool
    result: Optional[WeekProjectionResult] = None
    error: Optional[ProjectionError] = None
    validation: Optional[ProjectionValidation] = None


def _roster_keys(roster: Sequence[RosterSlot]) -> List[str]:
    """One allocation key per roster entry, unique even when player ids repeat or are blank."""
    return [f"{index}:{slot.player.player_id}" for index, slot in enumerate(roster)]


def _players_with_games_on(
    roster: Sequence[RosterSlot], keys: Sequence[str], games: Sequence[NBAGame]
) -> List[AvailablePlayer]:
    """Non-IR players (in roster order) whose team plays in the given slate.

    Each AvailablePlayer carries the roster key as its ``player_id``.
    """
    available = []
    for key, slot in zip(keys, roster):
        if slot.is_ir:
            continue
        team_code = normalize_team_code(slot.player.nba_team)
        if find_team_game(team_code, games) is None:
            continue
        available.append(
            AvailablePlayer(
                player_id=key,
                positions=slot.player.positions or [],
                injury_multiplier=get_injury_multiplier(slot.player.status),
                name=slot.player.name,
            )
        )
    return available


def project_week_by_date(
    roster: Sequence[RosterSlot],
    week_dates: Sequence[str],
    games_by_date: Mapping[str, Sequence[NBAGame]],
    lineup_slots: Optional[Sequence[LineupSlot]] = None,
    config: Optional[ProjectionConfig] = None,
) -> Tuple[WeekProjectionResult, Dict[str, ProjectedStats]]:
    """Project week totals and the per-date breakdown.

    Pure function that:
    1. For each date, finds players with a game that day
    2. Fills lineup slots (most constrained first)
    3. Credits each start with the player's injury multiplier
    4. Sums per-game stats x expected started games for each player
    5. Computes FG%/FT% via sum(makes) / sum(attempts)

    Args:
        roster: Roster slots in roster order (IR slots are ignored)
        week_dates: ISO dates making up the projection window
        games_by_date: ISO date -> that day's games
        lineup_slots: Ordered lineup slot configuration (defaults to config's)
        config: Engine configuration (defaults to DEFAULT_CONFIG)

    Returns:
        Tuple of (week_result, stats_by_date)
    """
    config = config or DEFAULT_CONFIG
    slots = tuple(lineup_slots) if lineup_slots else config.lineup_slots

    logger.debug(f"Projecting {len(week_dates)} days with {len(slots)} lineup slots")

    warnings: List[str] = []
    keys = _roster_keys(roster)
    counts: Dict[str, _GameCounts] = {
        key: _GameCounts() for key, slot in zip(keys, roster) if not slot.is_ir
    }
    started_by_date: Dict[str, Dict[str, float]] = {}
    empty_slot_days = 0
    empty_slot_missed_games = 0
    players_missing_positions = set()

    for date_str in week_dates:
        available = _players_with_games_on(roster, keys, games_by_date.get(date_str, []))

        for player in available:
            counts[player.player_id].scheduled += 1
            if not player.positions and player.player_id not in players_missing_positions:
                players_missing_positions.add(player.player_id)
                logger.warning(f"Player {player.name} has games but no eligible positions!")

        started_today = fill_lineups_for_day(available, slots)
        started_by_date[date_str] = started_today

        unfilled = len(slots) - len(started_today)
        if unfilled > 0:
            empty_slot_days += 1
            empty_slot_missed_games += unfilled
            logger.debug(f"{date_str}: Only {len(started_today)}/{len(slots)} slots filled")

        for player in available:
            player_counts = counts[player.player_id]
            credit = started_today.get(player.player_id, 0.0)
            if credit > 0:
                player_counts.started += credit
            elif player.injury_multiplier > 0:
                # Had a game and could play, but no slot was left
                player_counts.benched += 1

    player_projections: List[PlayerProjection] = []
    total_stats = ProjectedStats()
    stats_by_date: Dict[str, ProjectedStats] = {d: ProjectedStats() for d in week_dates}
    total_started = 0.0
    total_benched = 0
    total_scheduled = 0
    total_possible = 0.0

    for key, slot in zip(keys, roster):
        if slot.is_ir:
            continue

        player = slot.player
        player_counts = counts[key]
        injury_multiplier = get_injury_multiplier(player.status)

        games_played = (
            player.games_played
            if player.games_played is not None
            else config.default_games_played
        )
        per_game, used_shrinkage = get_blended_per_game_stats(
            player,
            games_played,
            k=config.shrinkage_k,
            position_averages=config.position_averages,
            default_averages=config.default_averages,
        )

        projected = per_game.scaled(player_counts.started)
        total_stats = total_stats.plus(projected)
        total_started += player_counts.started
        total_benched += player_counts.benched
        total_scheduled += player_counts.scheduled
        total_possible += player_counts.scheduled * injury_multiplier

        for date_str in week_dates:
            credit = started_by_date[date_str].get(key, 0.0)
            if credit > 0:
                stats_by_date[date_str] = stats_by_date[date_str].plus(per_game.scaled(credit))

        player_projections.append(
            PlayerProjection(
                player_id=player.player_id,
                player_name=player.name,
                nba_team=normalize_team_code(player.nba_team) or player.nba_team,
                positions=list(player.positions or []),
                status=player.status or "healthy",
                injury_multiplier=injury_multiplier,
                scheduled_games=player_counts.scheduled,
                expected_started_games=player_counts.started,
                benched_games=player_counts.benched,
                projected_stats=projected.with_derived_percentages(),
                used_shrinkage=used_shrinkage,
            )
        )

        if used_shrinkage:
            warnings.append(f"{player.name}: Using blended stats (limited sample)")

    if empty_slot_missed_games > 0:
        warnings.append(
            f"{empty_slot_missed_games} unfilled lineup slot-games across {empty_slot_days} day(s)"
        )

    stats_by_date = {d: s.with_derived_percentages() for d, s in stats_by_date.items()}

    logger.info(
        f"Projection complete: {len(player_projections)} players, "
        f"{total_started:.2f} started games, {total_benched} benched, "
        f"{empty_slot_days} empty-slot days"
    )

    result = WeekProjectionResult(
        total_stats=total_stats.with_derived_percentages(),
        total_started_games=total_started,
        total_bench_overflow=total_benched,
        total_scheduled_games=total_scheduled,
        total_possible_games=total_possible,
        empty_slot_days=empty_slot_days,
        empty_slot_missed_games=empty_slot_missed_games,
        player_projections=player_projections,
        warnings=warnings,
    )
    return result, stats_by_date


def project_week(
    roster: Sequence[RosterSlot],
    week_dates: Sequence[str],
    games_by_date: Mapping[str, Sequence[NBAGame]],
    lineup_slots: Optional[Sequence[LineupSlot]] = None,
    config: Optional[ProjectionConfig] = None,
) -> WeekProjectionResult:
    """Project week totals for a fantasy roster. See ``project_week_by_date``."""
    result, _ = project_week_by_date(roster, week_dates, games_by_date, lineup_slots, config)
    return result


def validate_projection_input(
    roster: Sequence[RosterSlot],
    week_dates: Sequence[str],
    games_by_date: Mapping[str, Sequence[NBAGame]],
) -> ProjectionValidation:
    """Count how many roster players map to a team with games in the window."""
    validation = ProjectionValidation()
    window = {d: games_by_date.get(d, []) for d in week_dates}

    for slot in roster:
        if slot.is_ir:
            continue
        player = slot.player
        validation.players_received += 1

        team_code = normalize_team_code(player.nba_team)
        if not team_code:
            validation.unmapped_players.append({"name": player.name, "nba_team": player.nba_team})
            continue
        validation.players_with_valid_team_id += 1

        games_found = get_team_games_in_range(team_code, window)
        validation.games_found_total += games_found
        if games_found > 0:
            validation.players_with_at_least_one_game += 1

    return validation


def project_week_safe(
    roster: Sequence[RosterSlot],
    week_dates: Sequence[str],
    games_by_date: Mapping[str, Sequence[NBAGame]],
    lineup_slots: Optional[Sequence[LineupSlot]] = None,
    config: Optional[ProjectionConfig] = None,
) -> ProjectionOutcome:
    """Run ``project_week`` after checking the inputs can produce a projection.

    Returns a ProjectionOutcome carrying either the result or a
    ProjectionError (ROSTER_MISSING, NO_DATES, NO_SCHEDULE_DATA,
    SCHEDULE_MAPPING_FAILED) rather than raising.
    """
    if not roster:
        return ProjectionOutcome(
            success=False,
            error=ProjectionError("ROSTER_MISSING", "Roster has no players"),
        )
    if not week_dates:
        return ProjectionOutcome(
            success=False,
            error=ProjectionError("NO_DATES", "No dates to project"),
        )
    if not any(games_by_date.get(d) for d in week_dates):
        return ProjectionOutcome(
            success=False,
            error=ProjectionError("NO_SCHEDULE_DATA", "No NBA games found for the requested dates"),
        )

    validation = validate_projection_input(roster, week_dates, games_by_date)
    if validation.players_received > 0 and validation.games_found_total == 0:
        return ProjectionOutcome(
            success=False,
            error=ProjectionError(
                "SCHEDULE_MAPPING_FAILED",
                f"None of {validation.players_received} players matched a scheduled game",
                validation=validation,
            ),
            validation=validation,
        )

    result = project_week(roster, week_dates, games_by_date, lineup_slots, config)
    return ProjectionOutcome(success=True, result=result, validation=validation)
