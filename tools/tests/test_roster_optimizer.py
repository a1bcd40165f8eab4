"""Tests for roster optimizer."""

import pytest

from tools.matchup.models import STANDARD_LINEUP_SLOTS, LineupSlot
from tools.matchup.roster_optimizer import (
    AvailablePlayer,
    count_eligible_slots,
    fill_lineups_for_day,
    find_maximum_matching,
    is_eligible_for_slot,
)


def _slot(name: str) -> LineupSlot:
    return next(s for s in STANDARD_LINEUP_SLOTS if s.slot == name)


class TestEligibleSlots:
    """Test position eligibility matching."""

    def test_util_accepts_any_position(self):
        """Util slot should accept any position."""
        assert is_eligible_for_slot(["PG"], _slot("UTIL"))
        assert is_eligible_for_slot(["C"], _slot("UTIL"))
        assert is_eligible_for_slot(["SF"], _slot("UTIL"))

    def test_g_slot_accepts_guards(self):
        """G slot should accept PG and SG."""
        assert is_eligible_for_slot(["PG"], _slot("G"))
        assert is_eligible_for_slot(["SG"], _slot("G"))
        assert not is_eligible_for_slot(["C"], _slot("G"))
        assert not is_eligible_for_slot(["SF"], _slot("G"))

    def test_f_slot_accepts_forwards(self):
        """F slot should accept SF and PF."""
        assert is_eligible_for_slot(["SF"], _slot("F"))
        assert is_eligible_for_slot(["PF"], _slot("F"))
        assert not is_eligible_for_slot(["C"], _slot("F"))
        assert not is_eligible_for_slot(["PG"], _slot("F"))

    def test_specific_position_requires_exact_match(self):
        """Specific position slots require exact match."""
        assert is_eligible_for_slot(["PG"], _slot("PG"))
        assert not is_eligible_for_slot(["SG"], _slot("PG"))
        assert is_eligible_for_slot(["C"], _slot("C"))
        assert not is_eligible_for_slot(["PF"], _slot("C"))

    def test_lowercase_positions_match(self):
        assert is_eligible_for_slot(["pg"], _slot("PG"))

    def test_count_eligible_slots(self):
        """Single-position guards fit 3 standard slots; dual guards fit 4."""
        assert count_eligible_slots(["PG"], STANDARD_LINEUP_SLOTS) == 3
        assert count_eligible_slots(["PG", "SG"], STANDARD_LINEUP_SLOTS) == 4
        assert count_eligible_slots(["C"], STANDARD_LINEUP_SLOTS) == 2
        assert count_eligible_slots([], STANDARD_LINEUP_SLOTS) == 0


class TestFillLineupsForDay:
    """Test the greedy daily slot filler."""

    @pytest.mark.unit
    def test_ten_point_guards_fill_three_slots(self):
        """Only PG, G and UTIL accept a pure PG."""
        players = [AvailablePlayer(player_id=f"pg{i}", positions=["PG"]) for i in range(10)]

        started = fill_lineups_for_day(players)

        assert len(started) == 3
        # Ties keep roster order
        assert set(started) == {"pg0", "pg1", "pg2"}

    @pytest.mark.unit
    def test_started_never_exceeds_slot_count(self):
        positions = [["PG"], ["SG"], ["SF"], ["PF"], ["C"], ["PG", "SG"], ["SF", "PF"], ["C"], ["PF", "C"], ["SG"]]
        players = [AvailablePlayer(player_id=str(i), positions=p) for i, p in enumerate(positions)]

        started = fill_lineups_for_day(players)

        assert len(started) == len(STANDARD_LINEUP_SLOTS)

    @pytest.mark.unit
    def test_out_players_never_take_a_slot(self):
        one_slot = [LineupSlot("PG", ("PG",))]
        players = [
            AvailablePlayer(player_id="out", positions=["PG"], injury_multiplier=0.0),
            AvailablePlayer(player_id="healthy", positions=["PG"]),
        ]

        started = fill_lineups_for_day(players, one_slot)

        assert started == {"healthy": 1.0}

    @pytest.mark.unit
    def test_credit_is_injury_multiplier(self):
        players = [AvailablePlayer(player_id="dtd", positions=["C"], injury_multiplier=0.6)]

        started = fill_lineups_for_day(players)

        assert started == {"dtd": 0.6}

    @pytest.mark.unit
    def test_most_constrained_player_placed_first(self):
        """A C-only player keeps the C slot even when listed after a flexible big."""
        slots = [LineupSlot("C", ("C",)), LineupSlot("F", ("SF", "PF"))]
        players = [
            AvailablePlayer(player_id="flex", positions=["PF", "C"]),
            AvailablePlayer(player_id="center", positions=["C"]),
        ]

        started = fill_lineups_for_day(players, slots)

        assert set(started) == {"flex", "center"}

    @pytest.mark.unit
    def test_duplicate_slot_names_are_distinct_slots(self):
        slots = [LineupSlot("UTIL", ("PG", "C")), LineupSlot("UTIL", ("PG", "C"))]
        players = [
            AvailablePlayer(player_id="a", positions=["PG"]),
            AvailablePlayer(player_id="b", positions=["C"]),
        ]

        assert len(fill_lineups_for_day(players, slots)) == 2

    @pytest.mark.unit
    def test_no_players(self):
        assert fill_lineups_for_day([]) == {}


class TestMaximumMatching:
    """Test the augmenting-path matcher used for whole-start counts."""

    @staticmethod
    def _cycle_slots():
        return [
            LineupSlot("S1", ("PG", "SG")),
            LineupSlot("S2", ("SG", "SF")),
            LineupSlot("S3", ("PG", "SF")),
        ]

    @staticmethod
    def _cycle_players():
        return [
            AvailablePlayer(player_id="a", positions=["PG"], name="A"),
            AvailablePlayer(player_id="b", positions=["SF"], name="B"),
            AvailablePlayer(player_id="c", positions=["SG"], name="C"),
        ]

    @pytest.mark.unit
    def test_matching_beats_single_greedy_pass(self):
        """The greedy pass strands one player here; the matching seats all three."""
        slots, players = self._cycle_slots(), self._cycle_players()

        greedy = fill_lineups_for_day(players, slots)
        matching = find_maximum_matching(players, slots)

        assert len(greedy) == 2
        assert matching.match_count == 3

    @pytest.mark.unit
    def test_assignments_respect_eligibility(self):
        slots, players = self._cycle_slots(), self._cycle_players()
        positions = {p.player_id: p.positions for p in players}
        slots_by_name = {s.slot: s for s in slots}

        matching = find_maximum_matching(players, slots)

        assert len(matching.assignments) == 3
        assert len({a.assigned_slot for a in matching.assignments}) == 3
        for assignment in matching.assignments:
            assert is_eligible_for_slot(positions[assignment.player_id], slots_by_name[assignment.assigned_slot])

    @pytest.mark.unit
    def test_capped_by_slot_count(self):
        players = [AvailablePlayer(player_id=f"p{i}", positions=["PG", "SG", "SF", "PF", "C"]) for i in range(12)]

        matching = find_maximum_matching(players)

        assert matching.match_count == len(STANDARD_LINEUP_SLOTS)

    @pytest.mark.unit
    def test_deterministic_regardless_of_input_order(self):
        players = self._cycle_players()
        forward = find_maximum_matching(players, self._cycle_slots())
        backward = find_maximum_matching(list(reversed(players)), self._cycle_slots())

        assert forward == backward

    @pytest.mark.unit
    def test_players_without_positions_are_unmatched(self):
        players = [AvailablePlayer(player_id="x", positions=[])]

        assert find_maximum_matching(players).match_count == 0
