# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Default fitness principles used to rank candidate actions."""

from __future__ import annotations

from neuraldharma.nodes.node_karma_evaluator_compute.models.model_evaluation_principle import (
    ModelEvaluationPrinciple,
)

DEFAULT_FITNESS_PRINCIPLES: tuple[ModelEvaluationPrinciple, ...] = (
    ModelEvaluationPrinciple(
        principle_id="ahimsa",
        display_name="Ahimsa (Non-harm)",
        weight=1.0,
        score_fn=lambda f: 1.0 - f.harm_potential,
    ),
    ModelEvaluationPrinciple(
        principle_id="satya",
        display_name="Satya (Truthfulness)",
        weight=0.9,
        score_fn=lambda f: f.transparency,
    ),
    ModelEvaluationPrinciple(
        principle_id="aparigraha",
        display_name="Aparigraha (Non-attachment)",
        weight=0.85,
        score_fn=lambda f: 1.0 - f.attachment,
    ),
    ModelEvaluationPrinciple(
        principle_id="viveka",
        display_name="Viveka (Discernment)",
        weight=0.8,
        score_fn=lambda f: f.deliberation,
    ),
    ModelEvaluationPrinciple(
        principle_id="seva",
        display_name="Seva (Service)",
        weight=0.75,
        score_fn=lambda f: f.altruism,
    ),
    ModelEvaluationPrinciple(
        principle_id="sthairya",
        display_name="Sthairya (Steadfastness)",
        weight=0.7,
        score_fn=lambda f: f.consistency,
    ),
)


__all__ = ["DEFAULT_FITNESS_PRINCIPLES"]
