"""Tests for injury status classification."""

import pytest

from tools.player.injury_status import (
    PlayerStatus,
    classify_player_status,
    get_injury_multiplier,
    get_injury_status_label,
)


@pytest.mark.unit
@pytest.mark.parametrize(
    "text, expected",
    [
        ("O", PlayerStatus.OUT),
        ("out", PlayerStatus.OUT),
        ("IR", PlayerStatus.OUT),
        ("SUSP", PlayerStatus.OUT),
        ("INJ (O)", PlayerStatus.OUT),
        ("DTD", PlayerStatus.DAY_TO_DAY),
        ("dtd", PlayerStatus.DAY_TO_DAY),
        ("Q", PlayerStatus.QUESTIONABLE),
        ("Questionable", PlayerStatus.QUESTIONABLE),
        ("GTD", PlayerStatus.PROBABLE),
        ("P", PlayerStatus.PROBABLE),
        ("probable", PlayerStatus.PROBABLE),
        ("healthy", PlayerStatus.HEALTHY),
        ("ACTIVE", PlayerStatus.HEALTHY),
        ("", PlayerStatus.HEALTHY),
        (None, PlayerStatus.HEALTHY),
        ("   ", PlayerStatus.HEALTHY),
    ],
)
def test_classify_player_status(text, expected):
    assert classify_player_status(text) is expected


@pytest.mark.unit
def test_multipliers():
    assert get_injury_multiplier("O") == 0.0
    assert get_injury_multiplier("DTD") == 0.6
    assert get_injury_multiplier("Q") == 0.7
    assert get_injury_multiplier("GTD") == 0.85
    assert get_injury_multiplier(None) == 1.0
    assert get_injury_multiplier(PlayerStatus.QUESTIONABLE) == 0.7


@pytest.mark.unit
def test_multiplier_always_in_unit_interval():
    for status in PlayerStatus:
        assert 0.0 <= get_injury_multiplier(status) <= 1.0


@pytest.mark.unit
def test_status_labels():
    assert get_injury_status_label(0.0) == "OUT"
    assert get_injury_status_label(0.6) == "DTD (60%)"
    assert get_injury_status_label(0.7) == "Q (70%)"
    assert get_injury_status_label(0.85) == "GTD (85%)"
    assert get_injury_status_label(1.0) == "Active"
