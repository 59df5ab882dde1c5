# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Guna classification: pure functions, no I/O.

Algorithm:
    1. Raw score per guna = sum(weight[guna][dim] * value[dim]) over the
       dimensions present in the vector. Weights may be negative.
    2. Numerically stable softmax across the three raw scores (the max raw
       score is subtracted before exponentiating).
    3. Primary guna = argmax, ties broken sattva > rajas > tamas.
    4. Dominance margin = top probability - runner-up probability. A margin
       below ``dominance_threshold`` yields a mixed classification.

Bounds of the feature values are not validated: any finite input classifies.
"""

from __future__ import annotations

import logging
import math

from neuraldharma.enums.enum_guna import EnumGuna
from neuraldharma.models.model_feature_vector import ModelFeatureVector
from neuraldharma.nodes.node_guna_classifier_compute.models.model_guna_classification import (
    ModelGunaClassification,
    ModelGunaScores,
)
from neuraldharma.nodes.node_guna_classifier_compute.models.model_guna_classifier_config import (
    ModelGunaClassifierConfig,
)
from neuraldharma.nodes.node_guna_classifier_compute.models.model_guna_weights import (
    ModelGunaWeights,
)

logger = logging.getLogger(__name__)


def compute_raw_scores(
    features: ModelFeatureVector, weights: ModelGunaWeights
) -> dict[EnumGuna, float]:
    """Linear (unnormalized) score of each guna for a feature vector."""
    present = features.present_dimensions()
    raw: dict[EnumGuna, float] = {}
    for guna in EnumGuna:
        guna_weights = weights.for_guna(guna)
        raw[guna] = sum(
            guna_weights.get(dimension, 0.0) * value
            for dimension, value in present.items()
        )
    return raw


def softmax_scores(raw: dict[EnumGuna, float]) -> ModelGunaScores:
    """Normalize raw guna scores into probabilities summing to 1.0.

    Raw scores must be finite. Use saturated_scores when they overflow.
    """
    peak = max(raw.values())
    exps = {guna: math.exp(score - peak) for guna, score in raw.items()}
    total = sum(exps.values())
    return ModelGunaScores(
        sattva=exps[EnumGuna.SATTVA] / total,
        rajas=exps[EnumGuna.RAJAS] / total,
        tamas=exps[EnumGuna.TAMAS] / total,
    )


def saturated_scores(
    features: ModelFeatureVector, weights: ModelGunaWeights
) -> ModelGunaScores:
    """Limit of the softmax when raw scores overflow a float.

    Features are rescaled by their largest magnitude so the ranking can be
    computed in range. At that magnitude any difference in raw score drives
    the softmax to a one-hot, so mass is split evenly across the top gunas.
    """
    present = features.present_dimensions()
    scale = max((abs(value) for value in present.values()), default=1.0) or 1.0
    scaled = features.model_copy(
        update={dimension: value / scale for dimension, value in present.items()}
    )
    raw = compute_raw_scores(scaled, weights)
    peak = max(raw.values())
    top = [guna for guna, score in raw.items() if score == peak]
    share = 1.0 / len(top)
    return ModelGunaScores(
        sattva=share if EnumGuna.SATTVA in top else 0.0,
        rajas=share if EnumGuna.RAJAS in top else 0.0,
        tamas=share if EnumGuna.TAMAS in top else 0.0,
    )


def _build_reasoning(
    scores: ModelGunaScores, primary: EnumGuna, runner_up: EnumGuna, is_mixed: bool
) -> str:
    primary_pct = scores.get(primary) * 100
    if is_mixed:
        runner_pct = scores.get(runner_up) * 100
        return (
            f"Mixed classification: primarily {primary.value} ({primary_pct:.1f}%) "
            f"with significant {runner_up.value} influence ({runner_pct:.1f}%). "
            f"Action is {primary.description} but shows tendencies toward being "
            f"{runner_up.description}."
        )
    return (
        f"Dominant {primary.value} classification ({primary_pct:.1f}%). "
        f"Action is {primary.description}."
    )


def classify_features(
    features: ModelFeatureVector,
    config: ModelGunaClassifierConfig | None = None,
) -> ModelGunaClassification:
    """Classify a feature vector into sattva, rajas or tamas.

    Args:
        features: Behavioral feature vector of the action.
        config: Weights and dominance threshold. Defaults are used when None.

    Returns:
        ModelGunaClassification with normalized scores and reasoning.
    """
    config = config or ModelGunaClassifierConfig()
    raw = compute_raw_scores(features, config.weights)
    if all(math.isfinite(score) for score in raw.values()):
        scores = softmax_scores(raw)
    else:
        logger.warning("Raw guna scores overflowed; using saturated softmax")
        scores = saturated_scores(features, config.weights)

    ranked = scores.ranked()
    primary, runner_up = ranked[0], ranked[1]
    margin = scores.get(primary) - scores.get(runner_up)
    is_mixed = margin < config.dominance_threshold

    logger.debug(
        "Guna classification: primary=%s margin=%.4f mixed=%s",
        primary.value,
        margin,
        is_mixed,
    )

    return ModelGunaClassification(
        primary=primary,
        scores=scores,
        features=features,
        is_mixed=is_mixed,
        reasoning=_build_reasoning(scores, primary, runner_up, is_mixed),
    )


__all__ = [
    "classify_features",
    "compute_raw_scores",
    "saturated_scores",
    "softmax_scores",
]
