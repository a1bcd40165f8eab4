"""Daily lineup slot allocation for maximizing started players."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from tools.matchup.models import STANDARD_LINEUP_SLOTS, LineupSlot

logger = logging.getLogger(__name__)


@dataclass
class AvailablePlayer:
    """A player with a game on the day being filled."""

    player_id: str
    positions: Sequence[str]
    injury_multiplier: float = 1.0
    name: str = ""


@dataclass
class SlotAssignment:
    player_id: str
    player_name: str
    assigned_slot: str
    positions: List[str]


@dataclass
class MatchingResult:
    match_count: int
    assignments: List[SlotAssignment] = field(default_factory=list)


def is_eligible_for_slot(player_positions: Sequence[str], slot: LineupSlot) -> bool:
    """Check if a player with given positions can fill a lineup slot.

    Args:
        player_positions: Player's eligible positions (e.g., ["PG", "SG"])
        slot: The lineup slot (e.g., G accepts PG and SG)

    Returns:
        True if any of the player's positions is accepted by the slot
    """
    return any(pos.upper() in slot.eligible_positions for pos in player_positions)


def count_eligible_slots(
    player_positions: Sequence[str], lineup_slots: Sequence[LineupSlot]
) -> int:
    return sum(1 for slot in lineup_slots if is_eligible_for_slot(player_positions, slot))


def fill_lineups_for_day(
    available_players: Sequence[AvailablePlayer],
    lineup_slots: Sequence[LineupSlot] = STANDARD_LINEUP_SLOTS,
) -> Dict[str, float]:
    """Fill one day's lineup slots with a single greedy pass.

    Algorithm:
    1. Drop players with an injury multiplier of 0 (they never take a slot)
    2. Sort by number of eligible slots (ascending) - most constrained first;
       the sort is stable so ties keep roster order
    3. Each player claims the first open slot, in configured order, they are
       eligible for
    4. Players left without a slot do not start that day

    This is not a maximum matching; see ``find_maximum_matching``.

    Args:
        available_players: Players with a game today, in roster order
        lineup_slots: Ordered lineup slot configuration

    Returns:
        Dictionary mapping player_id to started credit (the injury multiplier)
    """
    candidates = [p for p in available_players if p.injury_multiplier > 0]
    candidates = sorted(
        candidates, key=lambda p: count_eligible_slots(p.positions, lineup_slots)
    )

    started: Dict[str, float] = {}
    used_slots = set()

    for player in candidates:
        if player.player_id in started:
            continue

        for slot_idx, slot in enumerate(lineup_slots):
            if slot_idx in used_slots:
                continue
            if is_eligible_for_slot(player.positions, slot):
                started[player.player_id] = player.injury_multiplier
                used_slots.add(slot_idx)
                logger.debug(
                    f"✓ Assigned {player.player_id} to {slot.slot} (eligible: {list(player.positions)})"
                )
                break
        else:
            logger.debug(
                f"✗ No slot available for {player.player_id} (eligible: {list(player.positions)})"
            )

    return started


def find_maximum_matching(
    players: Sequence[AvailablePlayer],
    lineup_slots: Sequence[LineupSlot] = STANDARD_LINEUP_SLOTS,
) -> MatchingResult:
    """Assign players to slots with a maximum bipartite matching (augmenting paths).

    Players are processed in a stable order (id, then name) so results are
    deterministic. Injury multipliers are ignored; every match is a whole start.
    """
    ordered = sorted(players, key=lambda p: (p.player_id, p.name))

    player_to_slots: List[List[int]] = [
        [idx for idx, slot in enumerate(lineup_slots) if is_eligible_for_slot(p.positions, slot)]
        for p in ordered
    ]
    slot_match: List[Optional[int]] = [None] * len(lineup_slots)

    def try_augment(player_idx: int, visited: List[bool]) -> bool:
        for slot_idx in player_to_slots[player_idx]:
            if visited[slot_idx]:
                continue
            visited[slot_idx] = True
            current = slot_match[slot_idx]
            if current is None or try_augment(current, visited):
                slot_match[slot_idx] = player_idx
                return True
        return False

    match_count = 0
    for player_idx in range(len(ordered)):
        if try_augment(player_idx, [False] * len(lineup_slots)):
            match_count += 1

    assignments = []
    for slot_idx, player_idx in enumerate(slot_match):
        if player_idx is None:
            continue
        player = ordered[player_idx]
        assignments.append(
            SlotAssignment(
                player_id=player.player_id,
                player_name=player.name,
                assigned_slot=lineup_slots[slot_idx].slot,
                positions=list(player.positions),
            )
        )

    return MatchingResult(match_count=match_count, assignments=assignments)
