# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Utility helpers for neural-dharma."""

from neuraldharma.utils.util_clock import Clock, epoch_ms, utc_now
from neuraldharma.utils.util_scoring import (
    clamp,
    coerce_clamped,
    is_finite_score,
    weighted_average,
)

__all__ = [
    "Clock",
    "clamp",
    "coerce_clamped",
    "epoch_ms",
    "is_finite_score",
    "utc_now",
    "weighted_average",
]
