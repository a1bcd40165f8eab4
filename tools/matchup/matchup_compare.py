"""Category-by-category comparison of two projected stat lines."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from tools.matchup.models import ProjectedStats
from tools.utils.stat_mappings import (
    CATEGORY_FIELDS,
    PERCENTAGE_VOLUME_FIELDS,
    canonical_category,
    get_projection_field_for_stat,
    is_lower_better,
)

logger = logging.getLogger(__name__)

# Differences below this are treated as ties (float precision)
TIE_TOLERANCE = 0.001


@dataclass
class CategoryRecord:
    win: float = 0.0
    loss: float = 0.0
    tie: float = 0.0
    categories: Dict[str, str] = field(default_factory=dict)

    @property
    def total(self) -> float:
        """Total = wins only (ties don't add to total)."""
        return self.win


def _record(a: CategoryRecord, b: CategoryRecord, category: str, winner: str) -> None:
    if winner == "a":
        a.win += 1.0
        b.loss += 1.0
        a.categories[category], b.categories[category] = "win", "loss"
    elif winner == "b":
        b.win += 1.0
        a.loss += 1.0
        a.categories[category], b.categories[category] = "loss", "win"
    else:
        a.tie += 1.0
        b.tie += 1.0
        a.categories[category] = b.categories[category] = "tie"


def resolve_categories(categories: Optional[Sequence[str]] = None) -> List[str]:
    """Canonical category names for a league's scoring list, in the given order.

    Accepts platform spellings ("3PTM", "ST", "Points"). Unknown names are
    dropped; None or an empty result means all nine categories.
    """
    if not categories:
        return list(CATEGORY_FIELDS)
    resolved: List[str] = []
    for name in categories:
        name = name.strip()
        category = canonical_category(name) or canonical_category(name.upper())
        if category is None:
            logger.debug(f"Ignoring unsupported category {name!r}")
        elif category not in resolved:
            resolved.append(category)
    return resolved or list(CATEGORY_FIELDS)


def compare_projections(
    team_a: ProjectedStats,
    team_b: ProjectedStats,
    categories: Optional[Sequence[str]] = None,
) -> Tuple[CategoryRecord, CategoryRecord]:
    """Calculate projected category wins/losses/ties for two teams.

    For FG% and FT% ties, uses volume (FGA/FTA) as tiebreaker - larger volume wins.
    For other stats, ties count as ties (not 0.5 points each). Turnovers are
    lower-is-better. ``categories`` limits the comparison to a league's
    scoring categories (see ``resolve_categories``).
    """
    record_a, record_b = CategoryRecord(), CategoryRecord()

    for category in resolve_categories(categories):
        field_name = get_projection_field_for_stat(category)
        a_value = getattr(team_a, field_name)
        b_value = getattr(team_b, field_name)

        if abs(a_value - b_value) < TIE_TOLERANCE:
            volume_fields = PERCENTAGE_VOLUME_FIELDS.get(category)
            if volume_fields:
                a_volume = getattr(team_a, volume_fields[1])
                b_volume = getattr(team_b, volume_fields[1])
                if abs(a_volume - b_volume) > TIE_TOLERANCE:
                    _record(record_a, record_b, category, "a" if a_volume > b_volume else "b")
                    continue
            _record(record_a, record_b, category, "tie")
            continue

        a_better = a_value < b_value if is_lower_better(category) else a_value > b_value
        _record(record_a, record_b, category, "a" if a_better else "b")

    return record_a, record_b
