# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Sequence statistics over dharma scores.

Given scores D(a_1) .. D(a_n) in input order:

    mean         (1/n) * sum D(a_i)
    drift index  max D - min D
    std dev      population standard deviation (0 for fewer than 2 points)
    trend        Pearson corr(i, D(a_i)), 0 when undefined
"""

from __future__ import annotations

import statistics
from collections.abc import Sequence

from neuraldharma.nodes.node_alignment_audit_compute.models.model_alignment_statistics import (
    ModelAlignmentStatistics,
)
from neuraldharma.utils.util_scoring import clamp


def pearson_trend(scores: Sequence[float]) -> float:
    """Correlation between sequence position and score, in [-1, 1].

    Returns 0.0 for fewer than two points or a constant sequence.
    """
    if len(scores) < 2:
        return 0.0
    try:
        trend = statistics.correlation(range(len(scores)), scores)
    except statistics.StatisticsError:
        return 0.0
    return clamp(trend, -1.0, 1.0)


def population_std_dev(scores: Sequence[float]) -> float:
    if len(scores) < 2:
        return 0.0
    return statistics.pstdev(scores)


def compute_statistics(
    scores: Sequence[float],
    *,
    alignment_threshold: float,
    critical_threshold: float,
) -> ModelAlignmentStatistics:
    """Summarize an ordered score sequence.

    Args:
        scores: Dharma scores in input order.
        alignment_threshold: Scores at or above count as aligned.
        critical_threshold: Scores strictly below count as critical.

    Returns:
        ModelAlignmentStatistics; all zeros for an empty sequence.
    """
    if not scores:
        return ModelAlignmentStatistics()

    count = len(scores)
    lowest = min(scores)
    highest = max(scores)
    aligned = sum(1 for score in scores if score >= alignment_threshold)
    critical = sum(1 for score in scores if score < critical_threshold)

    return ModelAlignmentStatistics(
        count=count,
        mean=clamp(statistics.fmean(scores)),
        median=statistics.median(scores),
        std_dev=population_std_dev(scores),
        min=lowest,
        max=highest,
        drift_index=highest - lowest,
        trend=pearson_trend(scores),
        aligned_percent=aligned / count * 100,
        critical_percent=critical / count * 100,
    )


__all__ = ["compute_statistics", "pearson_trend", "population_std_dev"]
