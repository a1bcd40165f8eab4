"""Tests for shrinkage blending toward position averages."""

from __future__ import annotations

import math

import pytest

from tools.player.shrinkage import (
    DEFAULT_AVERAGES,
    POSITION_AVERAGES,
    SHRINKAGE_K,
    apply_shrinkage_blend,
    get_blended_per_game_stats,
    get_position_fallback,
)


@pytest.mark.unit
def test_blend_weight_uses_games_over_games_plus_k():
    """3 games played: w = 3 / 13."""
    result = apply_shrinkage_blend(20.0, 13.0, 3)

    weight = 3 / 13
    assert result.value == pytest.approx(weight * 20.0 + (1 - weight) * 13.0)
    assert result.used_shrinkage is True


@pytest.mark.unit
def test_large_sample_is_trusted_exactly():
    result = apply_shrinkage_blend(27.3, 13.0, SHRINKAGE_K)

    assert result.value == 27.3
    assert result.used_shrinkage is False


@pytest.mark.unit
def test_zero_games_returns_fallback_exactly():
    result = apply_shrinkage_blend(40.0, 13.0, 0)

    assert result.value == 13.0
    assert result.used_shrinkage is True


@pytest.mark.unit
@pytest.mark.parametrize("observed", [None, math.nan])
def test_missing_observation_returns_fallback(observed):
    result = apply_shrinkage_blend(observed, 5.5, 50)

    assert result.value == 5.5
    assert result.used_shrinkage is True


@pytest.mark.unit
def test_custom_k_changes_weight():
    result = apply_shrinkage_blend(10.0, 0.0, 5, k=5)

    assert result.value == 10.0
    assert result.used_shrinkage is False


@pytest.mark.unit
def test_position_fallback_uses_primary_position():
    assert get_position_fallback(["C", "PF"]) == POSITION_AVERAGES["C"]
    assert get_position_fallback(["pg"]) == POSITION_AVERAGES["PG"]


@pytest.mark.unit
def test_position_fallback_defaults_when_unknown():
    assert get_position_fallback([]) == DEFAULT_AVERAGES
    assert get_position_fallback(["G"]) == DEFAULT_AVERAGES


class TestBlendedPerGameStats:
    """Test per-player blending across all stats."""

    @pytest.mark.unit
    def test_zero_games_gives_position_averages(self, make_player):
        player = make_player(positions=["C"], games_played=0)

        stats, used = get_blended_per_game_stats(player, 0)

        assert stats == POSITION_AVERAGES["C"]
        assert used is True

    @pytest.mark.unit
    def test_established_player_keeps_observed_line(self, make_player):
        player = make_player(points=31.0, rebounds=11.0)

        stats, used = get_blended_per_game_stats(player, 40)

        assert stats.points == 31.0
        assert stats.rebounds == 11.0
        assert used is False

    @pytest.mark.unit
    def test_single_missing_stat_falls_back_for_that_stat_only(self, make_player):
        player = make_player(positions=["SF"], blocks=None)

        stats, used = get_blended_per_game_stats(player, 40)

        assert stats.blocks == POSITION_AVERAGES["SF"].blocks
        assert stats.points == 22.0
        assert used is True

    @pytest.mark.unit
    def test_missing_free_throw_volume_treated_as_unknown(self, make_player):
        player = make_player(positions=["PF"], ftm=0.0, fta=0.0, ft_pct=0.0)

        stats, _ = get_blended_per_game_stats(player, 40)

        assert stats.fta == POSITION_AVERAGES["PF"].fta
        assert stats.ftm == POSITION_AVERAGES["PF"].ftm
        # Field goals were present and are kept
        assert stats.fga == 16.0

    @pytest.mark.unit
    def test_missing_percentages_derived_from_makes_and_attempts(self, make_player):
        player = make_player(fg_pct=None, ft_pct=None)

        stats, used = get_blended_per_game_stats(player, 50)

        assert used is False
        assert stats.fg_pct == pytest.approx(0.5)
        assert stats.ft_pct == pytest.approx(0.8)

    @pytest.mark.unit
    def test_missing_percentage_without_attempts_falls_back(self, make_player):
        player = make_player(positions=["C"], ft_pct=None, ftm=None, fta=None)

        stats, used = get_blended_per_game_stats(player, 50)

        assert used is True
        assert stats.ft_pct == POSITION_AVERAGES["C"].ft_pct

    @pytest.mark.unit
    def test_non_producing_player_keeps_zero_volume(self, make_player):
        """No production at all: zero shooting is taken at face value."""
        player = make_player(
            minutes=0.0, points=0.0, rebounds=0.0, assists=0.0, threepm=0.0, fgm=0.0, fga=0.0
        )

        stats, _ = get_blended_per_game_stats(player, 40)

        assert stats.fga == 0.0
        assert stats.fgm == 0.0
