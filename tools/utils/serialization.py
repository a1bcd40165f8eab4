"""Utilities for converting projection results into plain JSON-ready data."""

from __future__ import annotations

import dataclasses
import json
import math
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from tools.matchup.models import ProjectedStats
from tools.utils.stat_mappings import CATEGORY_FIELDS


def to_jsonable(obj: Any) -> Any:
    """Convert engine objects (dataclasses, enums, mappings) to plain data.

    Args:
        obj: Object to convert (dataclass, enum, dict, list or scalar)

    Returns:
        Nested dicts/lists/scalars suitable for ``json.dumps``
    """
    if obj is None or isinstance(obj, (str, bool, int)):
        return obj

    if isinstance(obj, float):
        # NaN/Infinity are not valid JSON
        return obj if math.isfinite(obj) else 0.0

    if isinstance(obj, Enum):
        return obj.value

    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: to_jsonable(getattr(obj, f.name)) for f in dataclasses.fields(obj)}

    if isinstance(obj, Mapping):
        return {str(key): to_jsonable(value) for key, value in obj.items()}

    if isinstance(obj, (list, tuple, set, frozenset)):
        return [to_jsonable(item) for item in obj]

    # Fall back to __dict__
    if hasattr(obj, "__dict__"):
        return to_jsonable(vars(obj))

    return str(obj)


def dumps(obj: Any, indent: Optional[int] = 2) -> str:
    return json.dumps(to_jsonable(obj), indent=indent)


def stats_to_category_map(stats: ProjectedStats) -> Dict[str, float]:
    """Extract the nine categories (plus makes/attempts) keyed by display name.

    Args:
        stats: A projected stat line

    Returns:
        Dictionary mapping category names ("FG%", "PTS", ...) and the
        special volume keys ("_FGM", "_FGA", "_FTM", "_FTA") to values
    """
    result = {name: getattr(stats, field_name) for name, field_name in CATEGORY_FIELDS.items()}
    result["_FGM"] = stats.fgm
    result["_FGA"] = stats.fga
    result["_FTM"] = stats.ftm
    result["_FTA"] = stats.fta
    return result
