# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Numeric helpers shared by the scoring nodes.

All scoring nodes clamp sub-scores into [0, 1] and combine them with a
weighted average whose quotient is defined as 0.0 when the total weight is
zero (never NaN, never ZeroDivisionError).
"""

from __future__ import annotations

import math
from collections.abc import Iterable


def clamp(value: float, lower: float = 0.0, upper: float = 1.0) -> float:
    """Clamp ``value`` into ``[lower, upper]``."""
    return max(lower, min(upper, value))


def weighted_average(pairs: Iterable[tuple[float, float]]) -> float:
    """Compute ``sum(w * s) / sum(w)`` over ``(weight, score)`` pairs.

    Returns:
        The weighted mean, or 0.0 when the total weight is zero.
    """
    total_weighted = 0.0
    total_weight = 0.0
    for weight, score in pairs:
        total_weighted += weight * score
        total_weight += weight
    if total_weight == 0:
        return 0.0
    return total_weighted / total_weight


def coerce_clamped(value: object, lower: float = 0.0, upper: float = 1.0) -> object:
    """Clamp numeric configuration input, leaving anything else untouched.

    Used by ``field_validator(mode="before")`` hooks so that out-of-range
    thresholds and weights are clamped instead of rejected. Non-numeric
    values are returned unchanged so pydantic reports the type error.
    Numeric strings, as read from environment variables, are parsed first.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        try:
            value = float(value)
        except ValueError:
            return value
    if isinstance(value, (int, float)):
        if math.isnan(value):
            return value
        return clamp(float(value), lower, upper)
    return value


def is_finite_score(value: float) -> bool:
    """True if ``value`` is a real, finite number."""
    return isinstance(value, (int, float)) and math.isfinite(value)


__all__ = ["clamp", "coerce_clamped", "is_finite_score", "weighted_average"]
