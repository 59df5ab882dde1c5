# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""KarmaEvaluator: composite dharmic scoring of single actions.

Holds the principle set and thresholds; scoring is delegated to the pure
handlers in ``handlers/handler_karma_evaluator.py``.

Example:
    >>> evaluator = KarmaEvaluator(alignment_threshold=0.6)
    >>> result = evaluator.evaluate(action)
    >>> result.is_aligned
    True
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from neuraldharma.models.model_alignment_level_thresholds import (
    ACTION_LEVEL_THRESHOLDS,
    ModelAlignmentLevelThresholds,
)
from neuraldharma.nodes.node_karma_evaluator_compute.handlers.handler_core_principles import (
    CORE_PRINCIPLES,
)
from neuraldharma.nodes.node_karma_evaluator_compute.handlers.handler_karma_evaluator import (
    evaluate_action,
    evaluate_batch,
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
)
from neuraldharma.nodes.node_karma_evaluator_compute.models.model_karma_evaluator_config import (
    ModelKarmaEvaluatorConfig,
)
from neuraldharma.utils.util_clock import Clock, utc_now


class KarmaEvaluator:
    """Scores actions against the core principles plus any custom ones.

    Args:
        principles: Custom principles.
        merge_with_defaults: When False and ``principles`` is given, only the
            supplied principles are used. Otherwise they are appended to
            the five core principles.
        alignment_threshold: Minimum composite score for ``is_aligned``.
        commendation_threshold: Sub-score that earns a commendation.
        violation_threshold: Sub-score below which a violation is raised.
        level_thresholds: Alignment level bucket boundaries.
        clock: Source of evaluation timestamps.
    """

    def __init__(
        self,
        *,
        principles: Sequence[ModelEvaluationPrinciple] | None = None,
        merge_with_defaults: bool = True,
        alignment_threshold: float = 0.5,
        commendation_threshold: float = 0.85,
        violation_threshold: float = 0.3,
        level_thresholds: ModelAlignmentLevelThresholds = ACTION_LEVEL_THRESHOLDS,
        clock: Clock = utc_now,
    ) -> None:
        if principles is not None and not merge_with_defaults:
            self._principles: tuple[ModelEvaluationPrinciple, ...] = tuple(principles)
        else:
            self._principles = CORE_PRINCIPLES + tuple(principles or ())
        self._config = ModelKarmaEvaluatorConfig(
            alignment_threshold=alignment_threshold,
            commendation_threshold=commendation_threshold,
            violation_threshold=violation_threshold,
            level_thresholds=level_thresholds,
        )
        self._clock = clock

    @classmethod
    def from_config(
        cls,
        config: ModelKarmaEvaluatorConfig,
        *,
        principles: Sequence[ModelEvaluationPrinciple] | None = None,
        merge_with_defaults: bool = True,
        clock: Clock = utc_now,
    ) -> KarmaEvaluator:
        """Build an evaluator from a prepared config model."""
        return cls(
            principles=principles,
            merge_with_defaults=merge_with_defaults,
            alignment_threshold=config.alignment_threshold,
            commendation_threshold=config.commendation_threshold,
            violation_threshold=config.violation_threshold,
            level_thresholds=config.level_thresholds,
            clock=clock,
        )

    @property
    def config(self) -> ModelKarmaEvaluatorConfig:
        return self._config

    @property
    def principles(self) -> tuple[ModelEvaluationPrinciple, ...]:
        """Active principles in evaluation order."""
        return self._principles

    def evaluate(self, action: ModelEvaluatedAction) -> ModelKarmaEvaluation:
        return evaluate_action(action, self._principles, self._config, clock=self._clock)

    def score(self, action: ModelEvaluatedAction) -> float:
        """Composite dharma score only."""
        return self.evaluate(action).dharma_score

    def evaluate_batch_with_failures(
        self, actions: Iterable[ModelEvaluatedAction | Mapping[str, Any]]
    ) -> ModelBatchEvaluation:
        """Evaluate many actions, returning successes and captured failures."""
        return evaluate_batch(actions, self._principles, self._config, clock=self._clock)

    def evaluate_batch(
        self, actions: Iterable[ModelEvaluatedAction | Mapping[str, Any]]
    ) -> list[ModelKarmaEvaluation]:
        """Evaluate many actions, highest score first. Failed items are logged and skipped."""
        return list(self.evaluate_batch_with_failures(actions).evaluations)


__all__ = ["KarmaEvaluator"]
