# -*- coding: utf-8 -*-
"""
Result Export
=============

Converts kernel results into JSON-ready primitives for display layers.

Dataclasses become dicts, enums their values, tuples lists, and undefined
numbers (NaN, infinities) become None so the output is strict JSON.
"""

import json
import math
from dataclasses import fields, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from ..core.results import FieldCheckResult, LimitResult, PathComparison

# Derived properties worth exporting alongside the stored fields.
_EXTRA_PROPERTIES = {
    LimitResult: ("exists", "caveat"),
    PathComparison: ("path_dependent", "agree", "common_estimate", "caveat"),
    FieldCheckResult: ("conservative", "match_count", "is_heuristic", "caveat"),
}


def to_dict(result: Any) -> Any:
    """Recursively convert a kernel result to plain Python data."""
    if isinstance(result, Enum):
        return result.value
    if isinstance(result, float):
        return result if math.isfinite(result) else None
    if is_dataclass(result) and not isinstance(result, type):
        data = {f.name: to_dict(getattr(result, f.name)) for f in fields(result)}
        for name in _EXTRA_PROPERTIES.get(type(result), ()):
            data[name] = to_dict(getattr(result, name))
        return data
    if isinstance(result, dict):
        return {str(to_dict(k)): to_dict(v) for k, v in result.items()}
    if isinstance(result, (list, tuple)):
        return [to_dict(v) for v in result]
    return result


def to_json(result: Any, indent: int = 2) -> str:
    """Export a kernel result as a JSON string."""
    return json.dumps(to_dict(result), indent=indent, ensure_ascii=False)


def save_json(result: Any, path: str) -> None:
    """Save a kernel result as a JSON file."""
    Path(path).write_text(to_json(result), encoding='utf-8')
