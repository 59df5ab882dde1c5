# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Boundary gating: pure functions, no I/O.

Every rule is evaluated (highest priority first). A violated rule yields a
violation report and no compliance score; a passing rule contributes its
clamped compliance score to the mean. The action is permitted iff no rule
was violated.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from neuraldharma.enums.enum_recommendation import EnumRecommendation
from neuraldharma.nodes.node_dharma_constraint_compute.models.model_boundary_rule import (
    ModelBoundaryRule,
)
from neuraldharma.nodes.node_dharma_constraint_compute.models.model_constrained_action import (
    ModelConstrainedAction,
)
from neuraldharma.nodes.node_dharma_constraint_compute.models.model_constraint_evaluation import (
    ModelConstraintEvaluation,
    ModelPassedRule,
    ModelViolationReport,
)
from neuraldharma.nodes.node_dharma_constraint_compute.models.model_dharma_constraint_config import (
    ModelDharmaConstraintConfig,
)
from neuraldharma.utils.util_scoring import clamp

logger = logging.getLogger(__name__)


def sort_rules(rules: Iterable[ModelBoundaryRule]) -> list[ModelBoundaryRule]:
    """Order rules by descending priority, preserving insertion order on ties."""
    return sorted(rules, key=lambda rule: -rule.priority)


def recommend(
    permitted: bool, compliance_score: float, config: ModelDharmaConstraintConfig
) -> EnumRecommendation:
    if not permitted:
        return EnumRecommendation.DENY
    if compliance_score >= config.proceed_threshold:
        return EnumRecommendation.PROCEED
    if compliance_score >= config.caution_threshold:
        return EnumRecommendation.CAUTION
    return EnumRecommendation.DENY


def evaluate_constraints(
    action: ModelConstrainedAction,
    rules: Sequence[ModelBoundaryRule],
    config: ModelDharmaConstraintConfig,
) -> ModelConstraintEvaluation:
    """Gate one action against ``rules`` (expected in priority order).

    Args:
        action: The proposed action.
        rules: Boundary rules, highest priority first.
        config: Role binding and recommendation thresholds.

    Returns:
        ModelConstraintEvaluation with permit decision and reasoning.
    """
    violations: list[ModelViolationReport] = []
    passed: list[ModelPassedRule] = []

    for rule in rules:
        if rule.is_violated(action):
            violations.append(
                ModelViolationReport(
                    rule_id=rule.rule_id,
                    rule_name=rule.name,
                    priority=rule.priority,
                    grounding=rule.grounding,
                    message=f'Action "{action.description}" violates {rule.name}',
                )
            )
        else:
            passed.append(
                ModelPassedRule(
                    rule_id=rule.rule_id,
                    rule_name=rule.name,
                    score=clamp(rule.compliance_score(action)),
                )
            )

    permitted = not violations
    compliance_score = (
        clamp(sum(p.score for p in passed) / len(passed)) if passed else 0.0
    )
    recommendation = recommend(permitted, compliance_score, config)

    if permitted:
        reasoning = (
            f'Action complies with all {len(rules)} boundary rules for role "{config.role}". '
            f"Compliance score: {compliance_score:.3f}. "
            f"Recommendation: {recommendation.value}."
        )
    else:
        names = ", ".join(v.rule_name for v in violations)
        reasoning = (
            f'Action violates {len(violations)} rule(s) for role "{config.role}": '
            f"{names}. Action denied."
        )
        logger.warning(
            "Action %s denied for role %s: %s",
            action.action_id,
            config.role,
            ", ".join(v.rule_id for v in violations),
        )

    return ModelConstraintEvaluation(
        permitted=permitted,
        compliance_score=compliance_score,
        violations=tuple(violations),
        passed=tuple(passed),
        recommendation=recommendation,
        reasoning=reasoning,
    )


__all__ = ["evaluate_constraints", "recommend", "sort_rules"]
