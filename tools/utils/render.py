"""Rendering helpers using Rich."""

from __future__ import annotations

from typing import Mapping, Optional

from rich.table import Table

from tools.matchup.matchup_compare import CategoryRecord
from tools.matchup.models import ProjectedStats, SlateStatus, WeekProjectionResult
from tools.matchup.rest_of_week import RestOfWeekStats
from tools.player.injury_status import get_injury_status_label
from tools.utils.serialization import stats_to_category_map
from tools.utils.stat_mappings import CATEGORY_FIELDS, PERCENTAGE_VOLUME_FIELDS, is_percentage_stat


def _format_category_value(category: str, stats: ProjectedStats) -> str:
    values = stats_to_category_map(stats)
    value = values.get(category, 0.0)
    if not is_percentage_stat(category):
        return f"{value:.1f}"
    makes_field, attempts_field = PERCENTAGE_VOLUME_FIELDS[category]
    made = getattr(stats, makes_field)
    attempted = getattr(stats, attempts_field)
    return f"{value * 100:.1f}% ({made:.0f}/{attempted:.0f})"


def _status_color(multiplier: float) -> str:
    if multiplier <= 0:
        return "red"
    if multiplier < 1:
        return "yellow"
    return "green"


def render_player_projection_table(
    result: WeekProjectionResult, remaining_games: Optional[Mapping[str, str]] = None
) -> Table:
    """Per-player breakdown: schedule, expected starts and key counting stats.

    ``remaining_games`` maps player id to a games-left badge and adds a "Left" column.
    """
    table = Table(title="Player Projections")
    table.add_column("Player", justify="left")
    table.add_column("Team", justify="center")
    table.add_column("Pos", justify="left")
    table.add_column("Status", justify="center")
    table.add_column("Games", justify="right")
    if remaining_games is not None:
        table.add_column("Left", justify="center")
    table.add_column("Starts", justify="right")
    table.add_column("Bench", justify="right")
    table.add_column("PTS", justify="right")
    table.add_column("REB", justify="right")
    table.add_column("AST", justify="right")
    table.add_column("3PM", justify="right")

    ordered = sorted(
        result.player_projections,
        key=lambda p: (-p.expected_started_games, p.player_name),
    )
    for projection in ordered:
        color = _status_color(projection.injury_multiplier)
        label = get_injury_status_label(projection.injury_multiplier)
        name = projection.player_name
        if projection.used_shrinkage:
            name = f"{name} [dim]*[/dim]"
        stats = projection.projected_stats
        cells = [
            name,
            projection.nba_team or "-",
            "/".join(projection.positions) or "-",
            f"[{color}]{label}[/{color}]",
            str(projection.scheduled_games),
        ]
        if remaining_games is not None:
            cells.append(remaining_games.get(projection.player_id, "-"))
        table.add_row(
            *cells,
            f"{projection.expected_started_games:.2f}",
            str(projection.benched_games),
            f"{stats.points:.1f}",
            f"{stats.rebounds:.1f}",
            f"{stats.assists:.1f}",
            f"{stats.threepm:.1f}",
        )
    return table


def render_totals_table(stats: ProjectedStats, title: str = "Projected Category Totals") -> Table:
    table = Table(title=title)
    table.add_column("Category", style="bold")
    table.add_column("Projected", justify="right")
    for category in CATEGORY_FIELDS:
        table.add_row(category, _format_category_value(category, stats))
    return table


def render_games_summary(result: WeekProjectionResult) -> str:
    """One-line summary of game usage for a projection."""
    summary = (
        f"Starts: [bold]{result.total_started_games:.2f}[/bold] of "
        f"{result.total_scheduled_games} scheduled games "
        f"({result.total_bench_overflow} benched)"
    )
    if result.empty_slot_missed_games:
        summary += (
            f" | [yellow]{result.empty_slot_missed_games} empty slot-games "
            f"over {result.empty_slot_days} day(s)[/yellow]"
        )
    return summary


def render_slate_status(slate_status: SlateStatus, today_date: Optional[str] = None) -> str:
    day = f"{today_date} " if today_date else ""
    return (
        f"[bold]Slate {day}as of {slate_status.as_of_time}:[/bold] "
        f"[green]{slate_status.not_started} not started[/green], "
        f"[yellow]{slate_status.in_progress} live[/yellow], "
        f"[dim]{slate_status.final} final[/dim] "
        f"({slate_status.total_games} total)"
    )


def render_rest_of_week_table(stats: RestOfWeekStats) -> Table:
    table = Table(title="Rest of Week Starts")
    table.add_column("Date", justify="left")
    table.add_column("NBA Games", justify="right")
    table.add_column("Players", justify="right")
    table.add_column("Starts", justify="right")
    table.add_column("Slots", justify="right")
    table.add_column("Overflow", justify="right")
    table.add_column("Unused", justify="right")

    for day in stats.per_day:
        overflow_color = "red" if day.overflow else "white"
        unused_color = "yellow" if day.unused_slots else "white"
        table.add_row(
            day.date,
            str(day.schedule_games_count),
            str(day.players_with_game),
            str(day.starts_used),
            str(day.slots_count),
            f"[{overflow_color}]{day.overflow}[/{overflow_color}]",
            f"[{unused_color}]{day.unused_slots}[/{unused_color}]",
        )

    table.add_row(
        "[bold]Total[/bold]",
        "",
        str(stats.roster_games_remaining),
        f"[bold]{stats.projected_starts}[/bold]",
        str(stats.max_possible_starts),
        str(stats.overflow_games),
        str(stats.unused_starts),
    )
    return table


def render_comparison_table(
    *,
    user_stats: ProjectedStats,
    opponent_stats: ProjectedStats,
    user_record: CategoryRecord,
    user_label: str = "You",
    opponent_label: str = "Opponent",
) -> Table:
    table = Table(title="Projected Matchup")
    table.add_column("Category", style="bold")
    table.add_column(user_label, justify="right")
    table.add_column(opponent_label, justify="right")
    table.add_column("Result", justify="center")

    for category, outcome in user_record.categories.items():
        color = {"win": "green", "loss": "red"}.get(outcome, "yellow")
        table.add_row(
            category,
            _format_category_value(category, user_stats),
            _format_category_value(category, opponent_stats),
            f"[{color}]{outcome.upper()}[/{color}]",
        )

    table.caption = (
        f"Projected record: {user_record.win:.0f}-{user_record.loss:.0f}-{user_record.tie:.0f}"
    )
    return table
