"""Pydantic models for API requests and responses."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ProjectionRequest(BaseModel):
    """Roster, schedule and window for a projection.

    Roster entries and games are passed through to the engine parsers, which
    accept both camelCase and snake_case keys.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    roster: List[Dict[str, Any]]
    games_by_date: Dict[str, List[Dict[str, Any]]]
    week_dates: Optional[List[str]] = None
    week_range: Optional[str] = None
    lineup_slots: Optional[List[Dict[str, Any]]] = None
    today: Optional[str] = None


class MatchupProjectionRequest(BaseModel):
    """Two rosters projected over the same schedule."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    user: ProjectionRequest
    opponent: ProjectionRequest
    categories: Optional[List[str]] = None


class ProjectedStatsModel(BaseModel):
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


class PlayerProjectionModel(BaseModel):
    """One player's contribution to a projection window."""

    player_id: str
    player_name: str
    nba_team: Optional[str] = None
    positions: List[str] = []
    status: str
    injury_multiplier: float
    scheduled_games: int
    expected_started_games: float
    benched_games: int
    projected_stats: ProjectedStatsModel
    used_shrinkage: bool


class WeekProjectionResponse(BaseModel):
    """Response for the week projection endpoint."""

    total_stats: ProjectedStatsModel
    total_started_games: float
    total_bench_overflow: int
    total_scheduled_games: int
    total_possible_games: float
    empty_slot_days: int
    empty_slot_missed_games: int
    player_projections: List[PlayerProjectionModel] = []
    warnings: List[str] = []


class SlateStatusModel(BaseModel):
    not_started: int
    in_progress: int
    final: int
    total_games: int
    as_of_time: str
    today_has_started_games: bool
    all_today_games_complete: bool


class SlateProjectionResponse(BaseModel):
    """Response for the slate-aware remaining projection endpoint."""

    projection: WeekProjectionResponse
    slate_status: SlateStatusModel
    today_date: str
    stats_by_date: Dict[str, ProjectedStatsModel] = {}
    excluded_started_games: int
    included_not_started_games: int
    explanation: str


class SlotAssignmentModel(BaseModel):
    player_id: str
    player_name: str
    assigned_slot: str
    positions: List[str] = []


class ExcludedPlayerModel(BaseModel):
    player_id: str
    player_name: str
    reason: str
    nba_team: Optional[str] = None
    positions: List[str] = []


class DayStartsModel(BaseModel):
    """Integer starts for a single remaining day."""

    date: str
    slots_count: int
    schedule_games_count: int
    players_with_game: int
    filtered_out: int
    starts_used: int
    overflow: int
    unused_slots: int
    missing_team_count: int
    slot_assignments: List[SlotAssignmentModel] = []
    excluded_players: List[ExcludedPlayerModel] = []


class RestOfWeekResponse(BaseModel):
    """Response for the rest-of-week starts endpoint."""

    projected_starts: int
    max_possible_starts: int
    unused_starts: int
    overflow_games: int
    roster_games_remaining: int
    days_remaining: int
    per_day: List[DayStartsModel] = []


class CategoryRecordModel(BaseModel):
    win: float
    loss: float
    tie: float
    categories: Dict[str, str] = {}


class MatchupProjectionResponse(BaseModel):
    """Response for the head-to-head projection endpoint."""

    user: WeekProjectionResponse
    opponent: WeekProjectionResponse
    user_record: CategoryRecordModel
    opponent_record: CategoryRecordModel
