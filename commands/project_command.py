"""Week projection command for the Slatecast CLI."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from commands import CommandError, InputCommand
from tools.matchup.matchup_compare import compare_projections
from tools.matchup.models import ProjectedStats
from tools.matchup.week_projection import project_week_safe
from tools.utils.input_loader import InputFormatError, load_projection_input
from tools.utils.projection_config import ProjectionConfig, load_projection_config
from tools.utils.render import (
    render_comparison_table,
    render_games_summary,
    render_player_projection_table,
    render_totals_table,
)

logger = logging.getLogger(__name__)


class ProjectCommand(InputCommand):
    """Project full-week category totals for a roster."""

    OPPONENT_FLAGS = ("-o", "--opponent")
    CATEGORY_FLAGS = ("-c", "--categories")

    @property
    def name(self) -> str:
        return "/project"

    @property
    def aliases(self) -> List[str]:
        return ["/p"]

    @property
    def description(self) -> str:
        return "Project week category totals using lineup-slot constraints."

    @property
    def arguments(self) -> List[Dict[str, str | bool]]:
        return [
            self.INPUT_ARGUMENT,
            {
                "name": "-o, --opponent",
                "required": False,
                "description": "Opponent input JSON; shows projected category outcomes",
            },
            {
                "name": "-c, --categories",
                "required": False,
                "default": "all nine",
                "description": "Comma-separated league categories to compare (e.g. PTS,REB,3PTM)",
            },
        ]

    def execute(self, command: str) -> None:
        if self.should_show_help(command):
            self.show_help()
            return

        projection_input, options, _ = self.parse_command(
            command, (*self.OPPONENT_FLAGS, *self.CATEGORY_FLAGS)
        )
        config = load_projection_config()

        with self.console.status("[cyan]Computing projections...", spinner="dots"):
            outcome = project_week_safe(
                projection_input.roster,
                projection_input.week_dates,
                projection_input.games_by_date,
                projection_input.lineup_slots,
                config,
            )

        if not outcome.success or outcome.result is None:
            error = outcome.error
            self.console.print(f"[red]{error.code}[/red]: {error.message}")
            if error.validation and error.validation.unmapped_players:
                names = ", ".join(
                    str(p.get("name")) for p in error.validation.unmapped_players
                )
                self.console.print(f"Unmapped players: {names}", style="yellow")
            return

        result = outcome.result
        dates = projection_input.week_dates
        self.console.print(f"[bold green]Week projection:[/bold green] {dates[0]} to {dates[-1]}")
        self.console.print(render_games_summary(result))
        self.console.print(render_player_projection_table(result))
        self.console.print(render_totals_table(result.total_stats))

        for warning in result.warnings:
            self.console.print(f"Warning: {warning}", style="yellow")

        opponent_path = self.option(options, *self.OPPONENT_FLAGS)
        if opponent_path:
            categories = self.option(options, *self.CATEGORY_FLAGS)
            self._render_opponent(
                opponent_path,
                result.total_stats,
                config,
                categories.split(",") if categories else None,
            )

    def _render_opponent(
        self,
        path: str,
        user_stats: ProjectedStats,
        config: ProjectionConfig,
        categories: Optional[List[str]] = None,
    ) -> None:
        try:
            opponent_input = load_projection_input(path)
        except InputFormatError as err:
            raise CommandError(f"Opponent input: {err}") from err

        opponent_outcome = project_week_safe(
            opponent_input.roster,
            opponent_input.week_dates,
            opponent_input.games_by_date,
            opponent_input.lineup_slots,
            config,
        )
        if not opponent_outcome.success or opponent_outcome.result is None:
            error = opponent_outcome.error
            self.console.print(f"Opponent [red]{error.code}[/red]: {error.message}")
            return

        opponent_stats = opponent_outcome.result.total_stats
        user_record, _ = compare_projections(user_stats, opponent_stats, categories)
        logger.debug(f"Projected record vs opponent: {user_record}")
        self.console.print(
            render_comparison_table(
                user_stats=user_stats,
                opponent_stats=opponent_stats,
                user_record=user_record,
            )
        )
