# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Output stability guarding: pure functions over an explicit history.

Guard pipeline for one output (stability starts at 1.0):

    1. Screen the input. Threat patterns block immediately; a semantic
       perturbation costs 0.4.
    2. Compare the output with recent outputs. Variance (1 - mean
       similarity) above ``max_output_variance`` costs 0.3 and either
       sanitizes or falls back, depending on ``prefer_sanitize``.
    3. Redact exfiltration patterns from the output, 0.5 each.

The output is approved iff the clamped stability score exceeds 0.3.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from neuraldharma.enums.enum_guard_action import EnumGuardAction
from neuraldharma.enums.enum_perturbation_type import EnumPerturbationType
from neuraldharma.enums.enum_threat import EnumThreatCategory
from neuraldharma.nodes.node_sthitaprajna_guard_compute.models.model_guard_decision import (
    ModelGuardDecision,
    ModelPerturbationAnalysis,
)
from neuraldharma.nodes.node_sthitaprajna_guard_compute.models.model_sthitaprajna_guard_config import (
    APPROVAL_FLOOR,
    DRIFT_PENALTY,
    EXFILTRATION_PENALTY,
    PERTURBATION_PENALTY,
    ModelSthitaprajnaGuardConfig,
)
from neuraldharma.nodes.node_sthitaprajna_guard_compute.models.model_threat_pattern import (
    ModelThreatPattern,
)
from neuraldharma.utils.util_scoring import clamp

logger = logging.getLogger(__name__)

SimilarityFn = Callable[[str, str], float]

REDACTION = "[REDACTED]"


def jaccard_similarity(a: str, b: str) -> float:
    """Jaccard index of lower-cased whitespace tokens; 1.0 for two empty texts."""
    tokens_a = set(a.lower().split())
    tokens_b = set(b.lower().split())
    union = tokens_a | tokens_b
    if not union:
        return 1.0
    return len(tokens_a & tokens_b) / len(union)


def _threat_type(pattern: ModelThreatPattern) -> EnumPerturbationType:
    if pattern.category is EnumThreatCategory.JAILBREAK:
        return EnumPerturbationType.JAILBREAK
    # Manipulation and exfiltration attempts in inputs are treated as injection.
    return EnumPerturbationType.INJECTION


def analyze_input(
    text: str,
    patterns: Sequence[ModelThreatPattern],
    config: ModelSthitaprajnaGuardConfig,
    similarity_fn: SimilarityFn = jaccard_similarity,
    reference: str | None = None,
) -> ModelPerturbationAnalysis:
    """Screen an input for threat patterns and drift from ``reference``."""
    for pattern in patterns:
        if pattern.matches(text):
            similarity = clamp(similarity_fn(text, reference)) if reference else 0.0
            return ModelPerturbationAnalysis(
                perturbed=True,
                similarity=similarity,
                perturbation_type=_threat_type(pattern),
                details=(
                    f"Threat pattern detected: {pattern.name} "
                    f"({pattern.severity.value} severity)"
                ),
            )

    if not reference:
        return ModelPerturbationAnalysis(perturbed=False, similarity=1.0)

    similarity = clamp(similarity_fn(text, reference))
    if similarity < config.similarity_threshold:
        return ModelPerturbationAnalysis(
            perturbed=True,
            similarity=similarity,
            perturbation_type=EnumPerturbationType.SEMANTIC,
            details=f"Input diverges significantly from reference (similarity: {similarity:.3f})",
        )
    return ModelPerturbationAnalysis(perturbed=False, similarity=similarity)


def guard_output(
    output: str,
    history: Sequence[str],
    patterns: Sequence[ModelThreatPattern],
    config: ModelSthitaprajnaGuardConfig,
    similarity_fn: SimilarityFn = jaccard_similarity,
    *,
    input_text: str | None = None,
    reference_input: str | None = None,
) -> tuple[ModelGuardDecision, bool]:
    """Guard one output against its input and the recent output history.

    Returns:
        The decision, and whether the original output should join the
        consistency history (False when blocked on input or replaced by the
        fallback).
    """
    stability = 1.0
    reasons: list[str] = []

    if input_text:
        analysis = analyze_input(input_text, patterns, config, similarity_fn, reference_input)
        if analysis.perturbed:
            stability -= PERTURBATION_PENALTY
            reasons.append(f"Input perturbation detected: {analysis.details}.")
            if analysis.perturbation_type.is_adversarial:
                logger.warning("Blocked output for adversarial input: %s", analysis.details)
                reasons.append("Blocked due to adversarial input.")
                return (
                    ModelGuardDecision(
                        approved=False,
                        output=config.fallback_response,
                        original_output=output,
                        stability_score=0.0,
                        action=EnumGuardAction.BLOCK,
                        reasoning=" ".join(reasons),
                    ),
                    False,
                )

    action = EnumGuardAction.PASS

    if history:
        similarities = [clamp(similarity_fn(output, previous)) for previous in history]
        variance = 1.0 - sum(similarities) / len(similarities)
        if variance > config.max_output_variance:
            stability -= DRIFT_PENALTY
            reasons.append(f"Output deviates from baseline (variance: {variance:.3f}).")
            if not config.prefer_sanitize:
                logger.warning("Output drift %.3f exceeds limit, using fallback", variance)
                reasons.append("Falling back to safe response due to excessive drift.")
                return (
                    ModelGuardDecision(
                        approved=False,
                        output=config.fallback_response,
                        original_output=output,
                        stability_score=clamp(stability),
                        action=EnumGuardAction.FALLBACK,
                        reasoning=" ".join(reasons),
                    ),
                    False,
                )
            action = EnumGuardAction.SANITIZE
            reasons.append("Output passed with reduced confidence.")

    released = output
    for pattern in patterns:
        if pattern.category is EnumThreatCategory.EXFILTRATION and pattern.matches(released):
            stability -= EXFILTRATION_PENALTY
            reasons.append(f"Potential data exfiltration in output: {pattern.name}.")
            action = EnumGuardAction.SANITIZE
            released = pattern.pattern.sub(REDACTION, released)

    stability = clamp(stability)
    approved = stability > APPROVAL_FLOOR
    if action is EnumGuardAction.PASS and not approved:
        action = EnumGuardAction.BLOCK

    return (
        ModelGuardDecision(
            approved=approved,
            output=output if action is EnumGuardAction.PASS else released,
            original_output=output,
            stability_score=stability,
            action=action,
            reasoning=" ".join(reasons) or "Output is stable and consistent.",
        ),
        True,
    )


__all__ = ["REDACTION", "SimilarityFn", "analyze_input", "guard_output", "jaccard_similarity"]
