from __future__ import annotations
import math
from typing import Any, List


def ensure_list(obj: Any) -> List[Any]:
    """Ensure object is a list. If None, return empty list. If already list, return as-is."""
    if obj is None:
        return []
    if isinstance(obj, list):
        return obj
    return [obj]


def round_half_up(x: float, ndigits: int = 0) -> float:
    """Round with .5 going up (toward +inf), not to the nearest even digit."""
    scale = 10 ** ndigits
    return math.floor(x * scale + 0.5) / scale


def clamp(x: float, low: float, high: float) -> float:
    return max(low, min(high, x))
