"""Tests for projected category comparison."""

import pytest

from tools.matchup.matchup_compare import compare_projections, resolve_categories
from tools.matchup.models import ProjectedStats


def _line(**overrides) -> ProjectedStats:
    base = dict(
        fgm=40.0, fga=85.0, ftm=20.0, fta=25.0, threepm=12.0, rebounds=45.0,
        assists=25.0, steals=8.0, blocks=5.0, turnovers=14.0, points=115.0,
    )
    base.update(overrides)
    return ProjectedStats(**base).with_derived_percentages()


@pytest.mark.unit
def test_identical_lines_tie_everywhere():
    record_a, record_b = compare_projections(_line(), _line())

    assert record_a.tie == 9
    assert record_a.win == record_b.win == 0
    assert record_a.total == 0


@pytest.mark.unit
def test_turnovers_lower_is_better():
    record_a, record_b = compare_projections(_line(turnovers=10.0), _line(turnovers=15.0))

    assert record_a.categories["TO"] == "win"
    assert record_b.categories["TO"] == "loss"


@pytest.mark.unit
def test_counting_stat_win_and_loss():
    record_a, record_b = compare_projections(_line(points=130.0), _line(rebounds=60.0))

    assert record_a.categories["PTS"] == "win"
    assert record_a.categories["REB"] == "loss"
    assert record_a.win == 1
    assert record_a.loss == 1
    assert record_b.win == 1


@pytest.mark.unit
def test_percentage_tie_broken_by_volume():
    """Same FG% on more attempts wins the category."""
    record_a, _ = compare_projections(_line(fgm=40.0, fga=80.0), _line(fgm=50.0, fga=100.0))

    assert record_a.categories["FG%"] == "loss"


@pytest.mark.unit
def test_records_are_symmetric():
    a, b = _line(points=120.0, steals=9.0), _line(assists=30.0, turnovers=10.0)

    record_a, record_b = compare_projections(a, b)

    assert record_a.win == record_b.loss
    assert record_a.loss == record_b.win
    assert record_a.win + record_a.loss + record_a.tie == 9


@pytest.mark.unit
def test_league_categories_limit_comparison():
    record_a, _ = compare_projections(
        _line(points=130.0, turnovers=20.0), _line(), categories=["Points", "3PTM", "MIN"]
    )

    assert list(record_a.categories) == ["PTS", "3PM"]
    assert record_a.win == 1
    assert record_a.tie == 1
    assert record_a.loss == 0


@pytest.mark.unit
def test_resolve_categories_falls_back_to_all_nine():
    assert resolve_categories(["MIN", "GP"]) == resolve_categories(None)
    assert len(resolve_categories(None)) == 9
    assert resolve_categories(["st", "ST", "blk"]) == ["STL", "BLK"]
