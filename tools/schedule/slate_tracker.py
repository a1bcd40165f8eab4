"""Live slate tracking: which roster games have started, finished, or are still pending."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Dict, List, Mapping, Optional, Sequence
from zoneinfo import ZoneInfo

from tools.matchup.models import GameStatus, NBAGame, PlayerGameStatus, RosterSlot, SlateStatus
from tools.schedule.game_status import parse_game_status
from tools.schedule.team_codes import find_team_game, normalize_team_code

logger = logging.getLogger(__name__)

EASTERN = ZoneInfo("America/New_York")


def _format_as_of(as_of: Optional[datetime]) -> str:
    moment = as_of or datetime.now(tz=EASTERN)
    if moment.tzinfo is not None:
        moment = moment.astimezone(EASTERN)
    hour = moment.hour % 12 or 12
    suffix = "AM" if moment.hour < 12 else "PM"
    return f"{hour}:{moment.minute:02d} {suffix} ET"


def build_slate_status(
    games: Sequence[NBAGame], as_of: Optional[datetime] = None
) -> SlateStatus:
    """Summarize one day's slate by game status.

    Args:
        games: The day's games
        as_of: Time of the snapshot (defaults to now, shown in Eastern time)

    Returns:
        SlateStatus with per-status counts and derived flags
    """
    not_started = in_progress = final = 0
    for game in games:
        status = parse_game_status(game.status)
        if status is GameStatus.NOT_STARTED:
            not_started += 1
        elif status is GameStatus.IN_PROGRESS:
            in_progress += 1
        else:
            final += 1

    return SlateStatus(
        not_started=not_started,
        in_progress=in_progress,
        final=final,
        total_games=len(games),
        as_of_time=_format_as_of(as_of),
        today_has_started_games=in_progress > 0 or final > 0,
        all_today_games_complete=len(games) > 0 and not_started == 0 and in_progress == 0,
    )


def build_player_game_map(
    roster: Sequence[RosterSlot],
    games_by_date: Mapping[str, Sequence[NBAGame]],
) -> Dict[str, List[PlayerGameStatus]]:
    """Map player_id -> the player's games (with live status) across the schedule.

    IR players and players whose team code cannot be resolved are left out;
    players with no games in the schedule get no entry.
    """
    player_game_map: Dict[str, List[PlayerGameStatus]] = {}

    for slot in roster:
        if slot.is_ir:
            continue

        player = slot.player
        team_code = normalize_team_code(player.nba_team)
        if not team_code:
            logger.debug(f"{player.name}: unrecognized team code {player.nba_team!r}, skipping")
            continue

        player_games: List[PlayerGameStatus] = []
        for date_str, games in games_by_date.items():
            game = find_team_game(team_code, games)
            if game is None:
                continue
            player_games.append(
                PlayerGameStatus(
                    player_id=player.player_id,
                    player_name=player.name,
                    nba_team=team_code,
                    date=date_str,
                    game_id=game.game_id,
                    status=parse_game_status(game.status),
                    start_time=game.start_time,
                )
            )

        if player_games:
            player_game_map[player.player_id] = player_games

    return player_game_map


def filter_not_started_games(
    player_game_map: Mapping[str, Sequence[PlayerGameStatus]],
) -> Dict[str, List[PlayerGameStatus]]:
    """Keep only NOT_STARTED games; players left with none are dropped."""
    filtered: Dict[str, List[PlayerGameStatus]] = {}
    for player_id, games in player_game_map.items():
        not_started = [g for g in games if g.status is GameStatus.NOT_STARTED]
        if not_started:
            filtered[player_id] = not_started
    return filtered


def filter_schedule_by_status(
    games_by_date: Mapping[str, Sequence[NBAGame]],
    status: GameStatus = GameStatus.NOT_STARTED,
) -> Dict[str, List[NBAGame]]:
    """Return a copy of the schedule holding only games in the given status."""
    return {
        date_str: [g for g in games if parse_game_status(g.status) is status]
        for date_str, games in games_by_date.items()
    }


def get_projection_explanation(slate_status: SlateStatus) -> str:
    """Explain which games land in the current vs remaining totals."""
    if not slate_status.today_has_started_games:
        return "Current includes through yesterday; Remaining includes today and future games."

    if slate_status.all_today_games_complete:
        return "Current includes today (all games complete); Remaining includes future days only."

    return (
        "Current includes live games already started; Remaining includes only games "
        f"that have not started ({slate_status.not_started} games)."
    )
