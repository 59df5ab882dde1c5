# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Process-quality reward reshaping.

Given a reward R in [r_min, r_max] and a process quality Q in [0, 1]:

    R_n      = 2 * (R - r_min) / (r_max - r_min) - 1     (R when r_min == r_max)
    damping  = (1 - lambda) + lambda * Q
    R_n'     = R_n * damping
    R_n'     = max(0, R_n')         if negatives disallowed and Q >= 0.7
    R'       = (R_n' + 1) / 2 * (r_max - r_min) + r_min

lambda = 0 reproduces the conventional reward; lambda = 1 scales the
normalized reward entirely by Q.
"""

from __future__ import annotations

import logging

from neuraldharma.nodes.node_nishkama_objective_compute.handlers.exceptions import (
    NonFiniteObjectiveValueError,
)
from neuraldharma.nodes.node_nishkama_objective_compute.models.model_nishkama_objective_config import (
    HIGH_QUALITY_FLOOR,
    ModelNishkamaObjectiveConfig,
)
from neuraldharma.nodes.node_nishkama_objective_compute.models.model_objective_result import (
    ModelObjectiveResult,
)
from neuraldharma.nodes.node_nishkama_objective_compute.models.model_process_quality_input import (
    ModelProcessQualityInput,
)
from neuraldharma.utils.util_scoring import clamp, is_finite_score, weighted_average

logger = logging.getLogger(__name__)

# Weights of the default quality function.
_QUALITY_WEIGHTS: dict[str, float] = {
    "ahimsa": 1.0,
    "satya": 0.9,
    "nishkama": 0.85,
    "viveka": 0.8,
    "seva": 0.7,
    "consistency": 0.65,
}


def default_quality_fn(quality_input: ModelProcessQualityInput) -> float:
    """Weighted average of six process principles, clamped to [0, 1]."""
    f = quality_input.features
    scores = {
        "ahimsa": 1.0 - f.harm_potential,
        "satya": f.transparency,
        "nishkama": 1.0 - f.attachment,
        "viveka": f.deliberation,
        "seva": f.altruism,
        "consistency": f.consistency,
    }
    return clamp(
        weighted_average((weight, scores[name]) for name, weight in _QUALITY_WEIGHTS.items())
    )


def reshape_reward(
    original_reward: float,
    process_quality: float,
    config: ModelNishkamaObjectiveConfig,
) -> ModelObjectiveResult:
    """Dampen ``original_reward`` by ``process_quality``.

    Raises:
        NonFiniteObjectiveValueError: If the reward or the quality is NaN or
            infinite.
    """
    if not is_finite_score(original_reward):
        raise NonFiniteObjectiveValueError("Reward", original_reward)
    if not is_finite_score(process_quality):
        raise NonFiniteObjectiveValueError("Process quality", process_quality)
    quality = clamp(process_quality)
    lam = config.process_weight
    r_min, r_max = config.reward_range
    span = r_max - r_min

    normalized = 2 * (original_reward - r_min) / span - 1 if span != 0 else original_reward
    damping = clamp((1 - lam) + lam * quality)
    modified_normalized = normalized * damping
    if not config.allow_negative_rewards and quality >= HIGH_QUALITY_FLOOR:
        modified_normalized = max(0.0, modified_normalized)
    modified_reward = (modified_normalized + 1) / 2 * span + r_min

    recommended = quality >= config.recommendation_threshold
    change_pct = (modified_reward - original_reward) / (abs(original_reward) or 1) * 100
    sign = "+" if change_pct >= 0 else ""
    verdict = (
        "Action recommended." if recommended else "Action discouraged (low process quality)."
    )
    reasoning = (
        f"Original reward: {original_reward:.4f}. "
        f"Process quality (Q): {quality:.3f}. "
        f"Process weight (λ): {lam:.2f}. "
        f"Damping factor: {damping:.3f}. "
        f"Modified reward: {modified_reward:.4f} ({sign}{change_pct:.1f}% change). "
        f"{verdict}"
    )

    logger.debug(
        "Reshaped reward %.4f -> %.4f (Q=%.3f, lambda=%.2f)",
        original_reward,
        modified_reward,
        quality,
        lam,
    )
    return ModelObjectiveResult(
        original_reward=original_reward,
        process_quality=quality,
        modified_reward=modified_reward,
        damping_factor=damping,
        recommended=recommended,
        reasoning=reasoning,
    )


__all__ = ["default_quality_fn", "reshape_reward"]
