"""Slate-aware remaining projection command for the Slatecast CLI."""

from __future__ import annotations

from datetime import date
from typing import Dict, List

from commands import InputCommand
from commands.input_context import parse_today
from tools.matchup.slate_projection import project_slate_aware
from tools.schedule.matchup_week import get_player_remaining_games_badge
from tools.schedule.slate_tracker import get_projection_explanation
from tools.utils.projection_config import load_projection_config
from tools.utils.render import (
    render_games_summary,
    render_player_projection_table,
    render_slate_status,
    render_totals_table,
)


class SlateCommand(InputCommand):
    """Project the rest of the week, skipping games that have tipped off."""

    @property
    def name(self) -> str:
        return "/slate"

    @property
    def description(self) -> str:
        return "Project remaining totals using only games that have not started."

    @property
    def arguments(self) -> List[Dict[str, str | bool]]:
        return [
            {
                **self.INPUT_ARGUMENT,
                "description": "Projection input JSON with live game status text",
            },
            {
                "name": "-t, --today",
                "required": False,
                "default": "input 'today' or system date",
                "description": "Date of the current slate (YYYY-MM-DD)",
            },
        ]

    def execute(self, command: str) -> None:
        if self.should_show_help(command):
            self.show_help()
            return

        projection_input, options, _ = self.parse_command(command, self.TODAY_FLAGS)
        today = parse_today(self.option(options, *self.TODAY_FLAGS)) or projection_input.today

        with self.console.status("[cyan]Computing remaining projection...", spinner="dots"):
            slate_result = project_slate_aware(
                projection_input.roster,
                projection_input.games_by_date,
                projection_input.week_dates,
                today=today,
                lineup_slots=projection_input.lineup_slots,
                config=load_projection_config(),
            )

        self.console.print(render_slate_status(slate_result.slate_status, slate_result.today_date))
        self.console.print(get_projection_explanation(slate_result.slate_status), style="dim")
        self.console.print(
            f"Included {slate_result.included_not_started_games} pending player-games, "
            f"excluded {slate_result.excluded_started_games} started or final."
        )

        projection = slate_result.projection
        self.console.print(render_games_summary(projection))
        remaining_games = {
            slot.player.player_id: get_player_remaining_games_badge(
                slot.player.nba_team,
                projection_input.week_dates,
                projection_input.games_by_date,
                today=date.fromisoformat(slate_result.today_date),
            ).text
            for slot in projection_input.roster
            if not slot.is_ir
        }
        self.console.print(render_player_projection_table(projection, remaining_games))
        self.console.print(render_totals_table(projection.total_stats, title="Remaining Totals"))

        for warning in projection.warnings:
            self.console.print(f"Warning: {warning}", style="yellow")
