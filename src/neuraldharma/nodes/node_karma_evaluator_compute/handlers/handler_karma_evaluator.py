# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Weighted multi-principle scoring of actions.

Composite score:

    D(a) = sum(w_i * s_i(a)) / sum(w_i)      (0.0 when sum(w_i) == 0)

Each sub-score ``s_i`` is clamped into [0, 1] before weighting. A sub-score
below ``violation_threshold`` is reported as a violation, a sub-score at or
above ``commendation_threshold`` as a commendation.

Batch evaluation never aborts on a single bad item: failures are captured
as ModelItemFailure records.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from pydantic import ValidationError

from neuraldharma.models.model_item_failure import ModelItemFailure
from neuraldharma.nodes.node_karma_evaluator_compute.handlers.exceptions import (
    KarmaEvaluationError,
    NonFiniteScoreError,
    PrincipleScoringError,
)
from neuraldharma.nodes.node_karma_evaluator_compute.models.model_evaluated_action import (
    ModelEvaluatedAction,
)
from neuraldharma.nodes.node_karma_evaluator_compute.models.model_evaluation_principle import (
    ModelEvaluationPrinciple,
)
from neuraldharma.nodes.node_karma_evaluator_compute.models.model_karma_evaluation import (
    ModelBatchEvaluation,
    ModelKarmaEvaluation,
    ModelPrincipleScore,
)
from neuraldharma.nodes.node_karma_evaluator_compute.models.model_karma_evaluator_config import (
    ModelKarmaEvaluatorConfig,
)
from neuraldharma.utils.util_clock import Clock, utc_now
from neuraldharma.utils.util_scoring import clamp, is_finite_score

logger = logging.getLogger(__name__)


def _build_reasoning(
    action: ModelEvaluatedAction,
    dharma_score: float,
    principle_count: int,
    level: str,
    violations: Sequence[str],
    commendations: Sequence[str],
) -> str:
    reasoning = (
        f'Action "{action.description}" scored {dharma_score:.3f} '
        f"across {principle_count} dharmic principles. "
        f"Alignment level: {level}. "
    )
    if violations:
        reasoning += f"Violations: {'; '.join(violations)}. "
    if commendations:
        reasoning += f"Commendations: {'; '.join(commendations)}."
    return reasoning.rstrip()


def evaluate_action(
    action: ModelEvaluatedAction,
    principles: Sequence[ModelEvaluationPrinciple],
    config: ModelKarmaEvaluatorConfig | None = None,
    *,
    clock: Clock = utc_now,
) -> ModelKarmaEvaluation:
    """Score one action against every principle.

    Args:
        action: The action to evaluate.
        principles: Principles in evaluation order.
        config: Thresholds. Defaults are used when None.
        clock: Source of the ``evaluated_at`` timestamp.

    Returns:
        ModelKarmaEvaluation with composite score, breakdown and reasoning.

    Raises:
        NonFiniteScoreError: If a principle returns NaN or infinity.
        PrincipleScoringError: If a principle's score function raises.
    """
    config = config or ModelKarmaEvaluatorConfig()
    principle_scores: list[ModelPrincipleScore] = []
    violations: list[str] = []
    commendations: list[str] = []
    total_weighted = 0.0
    total_weight = 0.0

    for principle in principles:
        try:
            value = principle.score(action.features)
        except Exception as exc:
            raise PrincipleScoringError(principle.principle_id, exc) from exc
        if not is_finite_score(value):
            raise NonFiniteScoreError(principle.principle_id, value)
        raw_score = clamp(value)
        weighted_score = raw_score * principle.weight
        principle_scores.append(
            ModelPrincipleScore(
                principle_id=principle.principle_id,
                principle=principle.display_name,
                grounding=principle.grounding,
                weight=principle.weight,
                raw_score=raw_score,
                weighted_score=weighted_score,
            )
        )
        total_weighted += weighted_score
        total_weight += principle.weight

        if raw_score < config.violation_threshold:
            violations.append(f"{principle.display_name}: score {raw_score:.3f} below threshold")
        if raw_score >= config.commendation_threshold:
            commendations.append(f"{principle.display_name}: exemplary score {raw_score:.3f}")

    dharma_score = clamp(total_weighted / total_weight) if total_weight > 0 else 0.0
    level = config.level_thresholds.level_for(dharma_score)

    logger.debug(
        "Evaluated action %s: score=%.4f level=%s violations=%d",
        action.action_id,
        dharma_score,
        level.value,
        len(violations),
    )

    return ModelKarmaEvaluation(
        action=action,
        dharma_score=dharma_score,
        principle_scores=tuple(principle_scores),
        alignment_level=level,
        is_aligned=dharma_score >= config.alignment_threshold,
        violations=tuple(violations),
        commendations=tuple(commendations),
        reasoning=_build_reasoning(
            action, dharma_score, len(principles), level.value, violations, commendations
        ),
        evaluated_at=clock(),
    )


def _item_id(item: Any) -> str | None:
    if isinstance(item, ModelEvaluatedAction):
        return item.action_id
    if isinstance(item, Mapping):
        raw = item.get("id", item.get("action_id"))
        return None if raw is None else str(raw)
    return None


def evaluate_batch(
    actions: Iterable[ModelEvaluatedAction | Mapping[str, Any]],
    principles: Sequence[ModelEvaluationPrinciple],
    config: ModelKarmaEvaluatorConfig | None = None,
    *,
    clock: Clock = utc_now,
) -> ModelBatchEvaluation:
    """Evaluate many actions, capturing per-item failures.

    Items may be ModelEvaluatedAction instances or raw mappings in wire
    format. Successful evaluations are sorted by descending score (stable).
    """
    evaluations: list[ModelKarmaEvaluation] = []
    failures: list[ModelItemFailure] = []

    for index, item in enumerate(actions):
        try:
            action = (
                item
                if isinstance(item, ModelEvaluatedAction)
                else ModelEvaluatedAction.model_validate(item)
            )
            evaluations.append(evaluate_action(action, principles, config, clock=clock))
        except (ValidationError, KarmaEvaluationError, TypeError, ValueError, ArithmeticError) as exc:
            logger.warning(
                "Skipping action at index %d (id=%s): %s",
                index,
                _item_id(item),
                exc,
            )
            failures.append(
                ModelItemFailure(
                    index=index,
                    item_id=_item_id(item),
                    error_type=type(exc).__name__,
                    message=str(exc),
                )
            )

    evaluations.sort(key=lambda evaluation: evaluation.dharma_score, reverse=True)
    return ModelBatchEvaluation(evaluations=tuple(evaluations), failures=tuple(failures))


__all__ = ["evaluate_action", "evaluate_batch"]
