"""Data types shared by the schedule-aware projection engine."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, fields, replace
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

ALL_POSITIONS: Tuple[str, ...] = ("PG", "SG", "SF", "PF", "C")

SLOT_TYPES = {"starter", "bench", "ir"}


def _get(data: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    """Return the first present key (supports camelCase and snake_case input)."""
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


def _to_optional_float(value: Any) -> Optional[float]:
    if value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number):
        return None
    return number


@dataclass(frozen=True)
class ProjectedStats:
    """A fantasy stat line: makes/attempts plus the nine H2H categories."""

    fgm: float = 0.0
    fga: float = 0.0
    fg_pct: float = 0.0
    ftm: float = 0.0
    fta: float = 0.0
    ft_pct: float = 0.0
    threepm: float = 0.0
    rebounds: float = 0.0
    assists: float = 0.0
    steals: float = 0.0
    blocks: float = 0.0
    turnovers: float = 0.0
    points: float = 0.0

    def scaled(self, games: float) -> "ProjectedStats":
        """Multiply counting stats by a number of games.

        Percentages are left at 0.0; they only make sense once totals are
        summed (see ``with_derived_percentages``).
        """
        return ProjectedStats(
            fgm=self.fgm * games,
            fga=self.fga * games,
            ftm=self.ftm * games,
            fta=self.fta * games,
            threepm=self.threepm * games,
            rebounds=self.rebounds * games,
            assists=self.assists * games,
            steals=self.steals * games,
            blocks=self.blocks * games,
            turnovers=self.turnovers * games,
            points=self.points * games,
        )

    def plus(self, other: "ProjectedStats") -> "ProjectedStats":
        return ProjectedStats(
            fgm=self.fgm + other.fgm,
            fga=self.fga + other.fga,
            ftm=self.ftm + other.ftm,
            fta=self.fta + other.fta,
            threepm=self.threepm + other.threepm,
            rebounds=self.rebounds + other.rebounds,
            assists=self.assists + other.assists,
            steals=self.steals + other.steals,
            blocks=self.blocks + other.blocks,
            turnovers=self.turnovers + other.turnovers,
            points=self.points + other.points,
        )

    def with_derived_percentages(self) -> "ProjectedStats":
        """Recompute FG% and FT% from makes/attempts (0.0 when no attempts)."""
        return replace(
            self,
            fg_pct=(self.fgm / self.fga) if self.fga > 0 else 0.0,
            ft_pct=(self.ftm / self.fta) if self.fta > 0 else 0.0,
        )

    def as_dict(self) -> Dict[str, float]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass
class Player:
    """A rostered NBA player with per-game averages.

    Stat fields are ``None`` when the upstream source had no value for them.
    """

    player_id: str
    name: str
    nba_team: Optional[str] = None
    positions: List[str] = field(default_factory=list)
    status: Optional[str] = None
    games_played: Optional[int] = None
    minutes: Optional[float] = None
    fgm: Optional[float] = None
    fga: Optional[float] = None
    fg_pct: Optional[float] = None
    ftm: Optional[float] = None
    fta: Optional[float] = None
    ft_pct: Optional[float] = None
    threepm: Optional[float] = None
    rebounds: Optional[float] = None
    assists: Optional[float] = None
    steals: Optional[float] = None
    blocks: Optional[float] = None
    turnovers: Optional[float] = None
    points: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Player":
        player_id = _get(data, "id", "player_id", "playerId")
        positions = _get(data, "positions", default=[]) or []
        if isinstance(positions, str):
            positions = [p.strip() for p in positions.replace("/", ",").split(",")]
        games_played = _get(data, "gamesPlayed", "games_played")
        try:
            games_played = int(games_played) if games_played is not None else None
        except (TypeError, ValueError):
            games_played = None

        return cls(
            player_id=str(player_id) if player_id is not None else "",
            name=str(_get(data, "name", default=player_id or "")),
            nba_team=_get(data, "nbaTeam", "nba_team", "team"),
            positions=[str(p).upper() for p in positions if str(p).strip()],
            status=_get(data, "status"),
            games_played=games_played,
            minutes=_to_optional_float(_get(data, "minutes", "min")),
            fgm=_to_optional_float(_get(data, "fgm")),
            fga=_to_optional_float(_get(data, "fga")),
            fg_pct=_to_optional_float(_get(data, "fgPct", "fg_pct")),
            ftm=_to_optional_float(_get(data, "ftm")),
            fta=_to_optional_float(_get(data, "fta")),
            ft_pct=_to_optional_float(_get(data, "ftPct", "ft_pct")),
            threepm=_to_optional_float(_get(data, "threepm", "threes", "fg3m")),
            rebounds=_to_optional_float(_get(data, "rebounds", "reb")),
            assists=_to_optional_float(_get(data, "assists", "ast")),
            steals=_to_optional_float(_get(data, "steals", "stl")),
            blocks=_to_optional_float(_get(data, "blocks", "blk")),
            turnovers=_to_optional_float(_get(data, "turnovers", "to")),
            points=_to_optional_float(_get(data, "points", "pts")),
        )


@dataclass
class RosterSlot:
    player: Player
    slot_type: str = "starter"

    @property
    def is_ir(self) -> bool:
        return self.slot_type == "ir"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RosterSlot":
        slot_type = str(_get(data, "slotType", "slot_type", default="starter")).lower()
        if slot_type not in SLOT_TYPES:
            slot_type = "bench"
        return cls(player=Player.from_dict(data.get("player", {})), slot_type=slot_type)


@dataclass
class NBAGame:
    game_id: str
    home_team: str
    away_team: str
    status: str = ""
    start_time: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "NBAGame":
        home = _get(data, "homeTeam", "home_team", default="")
        away = _get(data, "awayTeam", "away_team", default="")
        game_id = _get(data, "gameId", "game_id", default=f"{home}-{away}")
        return cls(
            game_id=str(game_id),
            home_team=str(home).upper(),
            away_team=str(away).upper(),
            status=str(_get(data, "status", default="")),
            start_time=_get(data, "startTime", "start_time", "gameTime"),
        )


@dataclass(frozen=True)
class LineupSlot:
    slot: str
    eligible_positions: Tuple[str, ...]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LineupSlot":
        name = _get(data, "slotName", "slot_name", "slot", default="")
        positions = _get(data, "eligiblePositions", "eligible_positions", default=()) or ()
        if isinstance(positions, str):
            positions = [p.strip() for p in positions.replace("/", ",").split(",")]
        return cls(
            slot=str(name),
            eligible_positions=tuple(str(p).upper() for p in positions if str(p).strip()),
        )


STANDARD_LINEUP_SLOTS: Tuple[LineupSlot, ...] = (
    LineupSlot("PG", ("PG",)),
    LineupSlot("SG", ("SG",)),
    LineupSlot("SF", ("SF",)),
    LineupSlot("PF", ("PF",)),
    LineupSlot("C", ("C",)),
    LineupSlot("G", ("PG", "SG")),
    LineupSlot("F", ("SF", "PF")),
    LineupSlot("UTIL", ALL_POSITIONS),
)


class GameStatus(str, Enum):
    NOT_STARTED = "NOT_STARTED"
    IN_PROGRESS = "IN_PROGRESS"
    FINAL = "FINAL"


@dataclass
class SlateStatus:
    not_started: int
    in_progress: int
    final: int
    total_games: int
    as_of_time: str
    today_has_started_games: bool
    all_today_games_complete: bool


@dataclass
class PlayerGameStatus:
    player_id: str
    player_name: str
    nba_team: str
    date: str
    game_id: str
    status: GameStatus
    start_time: Optional[str] = None


@dataclass
class PlayerProjection:
    player_id: str
    player_name: str
    nba_team: Optional[str]
    positions: List[str]
    status: str
    injury_multiplier: float
    scheduled_games: int
    expected_started_games: float
    benched_games: int
    projected_stats: ProjectedStats
    used_shrinkage: bool


@dataclass
class WeekProjectionResult:
    total_stats: ProjectedStats
    total_started_games: float
    total_bench_overflow: int
    total_scheduled_games: int
    total_possible_games: float
    empty_slot_days: int
    empty_slot_missed_games: int
    player_projections: List[PlayerProjection]
    warnings: List[str]


@dataclass
class SlateAwareProjectionResult:
    projection: WeekProjectionResult
    slate_status: SlateStatus
    today_date: str
    stats_by_date: Dict[str, ProjectedStats]
    excluded_started_games: int
    included_not_started_games: int


def parse_roster(entries: Sequence[Mapping[str, Any]]) -> List[RosterSlot]:
    return [RosterSlot.from_dict(entry) for entry in entries]


def parse_games_by_date(
    data: Mapping[str, Sequence[Mapping[str, Any]]]
) -> Dict[str, List[NBAGame]]:
    return {
        str(date_str): [NBAGame.from_dict(game) for game in games or []]
        for date_str, games in data.items()
    }


def parse_lineup_slots(
    entries: Optional[Sequence[Mapping[str, Any]]],
) -> Tuple[LineupSlot, ...]:
    if not entries:
        return STANDARD_LINEUP_SLOTS
    return tuple(LineupSlot.from_dict(entry) for entry in entries)
