# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Dharmic discrimination of action candidates.

A candidate is dharmic when it violates no critical boundary, its tamas
probability does not exceed ``max_tamas`` and its alignment score reaches
``alignment_threshold``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from neuraldharma.enums.enum_recommendation import EnumRecommendation
from neuraldharma.enums.enum_severity import EnumSeverity
from neuraldharma.nodes.node_guna_classifier_compute.models.model_guna_classification import (
    ModelGunaClassification,
)
from neuraldharma.nodes.node_viveka_filter_compute.models.model_action_candidate import (
    ModelActionCandidate,
)
from neuraldharma.nodes.node_viveka_filter_compute.models.model_ethical_boundary import (
    ModelEthicalBoundary,
)
from neuraldharma.nodes.node_viveka_filter_compute.models.model_viveka_filter_config import (
    CAUTION_MARGIN,
    SEVERITY_PENALTIES,
    ModelVivekaFilterConfig,
)
from neuraldharma.nodes.node_viveka_filter_compute.models.model_viveka_verdict import (
    ModelBoundaryViolation,
    ModelVivekaVerdict,
)
from neuraldharma.utils.util_scoring import clamp

logger = logging.getLogger(__name__)


def sort_boundaries(boundaries: Iterable[ModelEthicalBoundary]) -> list[ModelEthicalBoundary]:
    """Descending priority, registration order kept on ties."""
    return sorted(boundaries, key=lambda boundary: -boundary.priority)


def _reasoning(
    violations: Sequence[ModelBoundaryViolation],
    classification: ModelGunaClassification,
    alignment_score: float,
) -> str:
    if violations:
        names = ", ".join(v.boundary for v in violations)
        head = f"{len(violations)} boundary violation(s): {names}."
    else:
        head = "No ethical boundary violations detected."
    scores = classification.scores
    return (
        f"{head} Guna: {classification.primary.value} "
        f"(sattva: {scores.sattva * 100:.0f}%, rajas: {scores.rajas * 100:.0f}%, "
        f"tamas: {scores.tamas * 100:.0f}%). "
        f"Alignment score: {alignment_score * 100:.1f}%."
    )


def evaluate_candidate(
    candidate: ModelActionCandidate,
    boundaries: Sequence[ModelEthicalBoundary],
    classification: ModelGunaClassification,
    config: ModelVivekaFilterConfig,
) -> ModelVivekaVerdict:
    """Discriminate one candidate.

    Args:
        candidate: Action under consideration.
        boundaries: Boundaries in priority order.
        classification: Guna classification of ``candidate.features``.
        config: Thresholds.

    Returns:
        ModelVivekaVerdict with recommendation and reasoning.
    """
    violations = [
        ModelBoundaryViolation(
            boundary=boundary.name,
            severity=boundary.severity,
            description=boundary.description,
        )
        for boundary in boundaries
        if boundary.is_violated(candidate)
    ]
    severities = {v.severity for v in violations}
    has_critical = EnumSeverity.CRITICAL in severities
    has_violation = EnumSeverity.VIOLATION in severities

    penalty = sum(SEVERITY_PENALTIES[v.severity] for v in violations)
    alignment_score = clamp(classification.scores.sattva - penalty)
    too_tamasic = classification.scores.tamas > config.max_tamas

    dharmic = not has_critical and not too_tamasic and alignment_score >= config.alignment_threshold

    if has_critical or too_tamasic:
        recommendation = EnumRecommendation.DENY
    elif has_violation or alignment_score < config.alignment_threshold + CAUTION_MARGIN:
        recommendation = EnumRecommendation.CAUTION
    else:
        recommendation = EnumRecommendation.PROCEED

    logger.debug(
        "Viveka verdict for %r: dharmic=%s score=%.3f violations=%d",
        candidate.description,
        dharmic,
        alignment_score,
        len(violations),
    )

    return ModelVivekaVerdict(
        dharmic=dharmic,
        violations=tuple(violations),
        guna_classification=classification,
        alignment_score=alignment_score,
        recommendation=recommendation,
        reasoning=_reasoning(violations, classification, alignment_score),
    )


__all__ = ["evaluate_candidate", "sort_boundaries"]
