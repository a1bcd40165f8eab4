"""Rest-of-week starts command for the Slatecast CLI."""

from __future__ import annotations

from typing import Dict, List

from commands import InputCommand
from commands.input_context import parse_today
from tools.matchup.rest_of_week import compute_rest_of_week_starts
from tools.utils.render import render_rest_of_week_table


class StartsCommand(InputCommand):
    """Count the lineup starts left in the matchup."""

    @property
    def name(self) -> str:
        return "/starts"

    @property
    def description(self) -> str:
        return "Show projected starts, overflow and unused slots for the rest of the week."

    @property
    def arguments(self) -> List[Dict[str, str | bool]]:
        return [
            self.INPUT_ARGUMENT,
            {
                "name": "-t, --today",
                "required": False,
                "default": "input 'today' or system date",
                "description": "First remaining date (YYYY-MM-DD)",
            },
            {
                "name": "-v, --verbose",
                "required": False,
                "description": "Show excluded players and slot assignments per day",
            },
        ]

    def execute(self, command: str) -> None:
        if self.should_show_help(command):
            self.show_help()
            return

        projection_input, options, switches = self.parse_command(
            command, self.TODAY_FLAGS, switches=("-v", "--verbose")
        )
        today = parse_today(self.option(options, *self.TODAY_FLAGS))
        verbose = bool(switches)

        stats = compute_rest_of_week_starts(
            projection_input.roster,
            projection_input.week_dates,
            projection_input.games_by_date,
            lineup_slots=projection_input.lineup_slots,
            today=today or projection_input.today,
        )

        if not stats.days_remaining:
            self.console.print("No days remaining in this matchup.", style="yellow")
            return

        self.console.print(render_rest_of_week_table(stats))

        if not verbose:
            return

        for day in stats.per_day:
            if day.slot_assignments:
                assigned = ", ".join(
                    f"{a.assigned_slot}: {a.player_name}" for a in day.slot_assignments
                )
                self.console.print(f"[bold]{day.date}[/bold] {assigned}")
            for excluded in day.excluded_players:
                self.console.print(
                    f"  [dim]{excluded.player_name} excluded ({excluded.reason})[/dim]"
                )
