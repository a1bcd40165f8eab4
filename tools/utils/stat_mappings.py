"""Stat category mapping utilities.

Maps the nine H2H category names to ``ProjectedStats`` fields:
- Display names (e.g., "3PM", "FG%")
- Projection field names (lowercase: "threepm", "fg_pct")
- Makes/attempts fields backing each percentage category
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

# Category display name -> ProjectedStats field, in standard display order
CATEGORY_FIELDS: Dict[str, str] = {
    "FG%": "fg_pct",
    "FT%": "ft_pct",
    "3PM": "threepm",
    "REB": "rebounds",
    "AST": "assists",
    "STL": "steals",
    "BLK": "blocks",
    "TO": "turnovers",
    "PTS": "points",
}

# Alternate spellings seen across fantasy platforms
CATEGORY_ALIASES: Dict[str, str] = {
    "3PTM": "3PM",
    "3-Point Baskets Made": "3PM",
    "ST": "STL",
    "Steals": "STL",
    "Points": "PTS",
    "Rebounds": "REB",
    "Assists": "AST",
    "Blocks": "BLK",
    "Turnovers": "TO",
}

# Categories where the lower value wins
LOWER_IS_BETTER = {"TO"}

# Percentage category -> (makes field, attempts field)
PERCENTAGE_VOLUME_FIELDS: Dict[str, Tuple[str, str]] = {
    "FG%": ("fgm", "fga"),
    "FT%": ("ftm", "fta"),
}


def canonical_category(stat_name: str) -> Optional[str]:
    """Return the canonical category name, or None if not one of the nine.

    Examples:
        >>> canonical_category("3PTM")
        '3PM'
        >>> canonical_category("MIN") is None
        True
    """
    name = CATEGORY_ALIASES.get(stat_name, stat_name)
    return name if name in CATEGORY_FIELDS else None


def get_projection_field_for_stat(stat_name: str) -> str:
    """Get the ProjectedStats field for a category name, or empty string if unknown."""
    category = canonical_category(stat_name)
    return CATEGORY_FIELDS[category] if category else ""


def is_percentage_stat(stat_name: str) -> bool:
    """Check if a stat is a percentage stat.

    Percentage stats should not be summed but rather computed from
    makes and attempts (e.g., FG% = FGM / FGA).
    """
    return "%" in stat_name


def is_lower_better(stat_name: str) -> bool:
    return canonical_category(stat_name) in LOWER_IS_BETTER
