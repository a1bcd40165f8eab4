"""Projection API endpoints."""

import logging

from fastapi import APIRouter, HTTPException

from app.models import (
    MatchupProjectionRequest,
    MatchupProjectionResponse,
    ProjectionRequest,
    RestOfWeekResponse,
    SlateProjectionResponse,
    WeekProjectionResponse,
)

from tools.matchup.matchup_compare import compare_projections
from tools.matchup.models import WeekProjectionResult
from tools.matchup.rest_of_week import compute_rest_of_week_starts
from tools.matchup.slate_projection import project_slate_aware
from tools.matchup.week_projection import project_week_safe
from tools.schedule.slate_tracker import get_projection_explanation
from tools.utils.input_loader import InputFormatError, ProjectionInput, parse_projection_input
from tools.utils.projection_config import load_projection_config
from tools.utils.serialization import to_jsonable

logger = logging.getLogger(__name__)

router = APIRouter()


def _parse_request(body: ProjectionRequest) -> ProjectionInput:
    try:
        return parse_projection_input(body.model_dump())
    except InputFormatError as e:
        raise HTTPException(status_code=400, detail=str(e))


def _run_week_projection(projection_input: ProjectionInput) -> WeekProjectionResult:
    outcome = project_week_safe(
        projection_input.roster,
        projection_input.week_dates,
        projection_input.games_by_date,
        projection_input.lineup_slots,
        load_projection_config(),
    )
    if not outcome.success or outcome.result is None:
        error = outcome.error
        logger.warning(f"Projection rejected: {error.code} - {error.message}")
        raise HTTPException(
            status_code=400,
            detail={
                "code": error.code,
                "message": error.message,
                "validation": to_jsonable(error.validation),
            },
        )
    return outcome.result


@router.post("/week", response_model=WeekProjectionResponse)
def post_week_projection(body: ProjectionRequest):
    """Project category totals for the full window.

    Returns:
        WeekProjectionResponse with totals, per-player breakdown and warnings
    """
    result = _run_week_projection(_parse_request(body))
    return to_jsonable(result)


@router.post("/slate", response_model=SlateProjectionResponse)
def post_slate_projection(body: ProjectionRequest):
    """Project remaining totals using only games that have not started."""
    projection_input = _parse_request(body)

    result = project_slate_aware(
        projection_input.roster,
        projection_input.games_by_date,
        projection_input.week_dates,
        today=projection_input.today,
        lineup_slots=projection_input.lineup_slots,
        config=load_projection_config(),
    )

    response = to_jsonable(result)
    response["explanation"] = get_projection_explanation(result.slate_status)
    return response


@router.post("/starts", response_model=RestOfWeekResponse)
def post_rest_of_week_starts(body: ProjectionRequest):
    """Integer starts, overflow and unused slots for the remaining days."""
    projection_input = _parse_request(body)

    stats = compute_rest_of_week_starts(
        projection_input.roster,
        projection_input.week_dates,
        projection_input.games_by_date,
        lineup_slots=projection_input.lineup_slots,
        today=projection_input.today,
    )
    return to_jsonable(stats)


@router.post("/matchup", response_model=MatchupProjectionResponse)
def post_matchup_projection(body: MatchupProjectionRequest):
    """Project both rosters and compare them category by category."""
    user_result = _run_week_projection(_parse_request(body.user))
    opponent_result = _run_week_projection(_parse_request(body.opponent))

    user_record, opponent_record = compare_projections(
        user_result.total_stats, opponent_result.total_stats, body.categories
    )

    return {
        "user": to_jsonable(user_result),
        "opponent": to_jsonable(opponent_result),
        "user_record": to_jsonable(user_record),
        "opponent_record": to_jsonable(opponent_record),
    }
