"""Aggregate score helpers."""
from __future__ import annotations

import math
from typing import Iterable


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up, unlike ``round``."""
    return int(math.floor(value + 0.5))


def mean_score(scores: Iterable[int]) -> int:
    """Mean of all recorded scores, recomputed from scratch; 0 when empty."""

    values = list(scores)
    if not values:
        return 0
    return round_half_up(sum(values) / len(values))


__all__ = ["mean_score", "round_half_up"]
