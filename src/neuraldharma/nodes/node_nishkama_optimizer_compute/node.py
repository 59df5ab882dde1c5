# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""NishkamaOptimizer: select among candidate actions by dharmic fitness.

Candidates are ranked by a weighted principle score adjusted by their guna
classification, rather than by expected reward. Randomness, when enabled
through ``temperature``, comes from an injectable ``random.Random``.
"""

from __future__ import annotations

import random
from collections.abc import Sequence

from neuraldharma.nodes.node_guna_classifier_compute.node import GunaClassifier
from neuraldharma.nodes.node_karma_evaluator_compute.models.model_evaluation_principle import (
    ModelEvaluationPrinciple,
)
from neuraldharma.nodes.node_nishkama_optimizer_compute.handlers.handler_fitness_principles import (
    DEFAULT_FITNESS_PRINCIPLES,
)
from neuraldharma.nodes.node_nishkama_optimizer_compute.handlers.handler_nishkama_optimizer import (
    compute_fitness,
    optimize_candidates,
)
from neuraldharma.nodes.node_nishkama_optimizer_compute.models.model_candidate_action import (
    ModelCandidateAction,
)
from neuraldharma.nodes.node_nishkama_optimizer_compute.models.model_nishkama_optimizer_config import (
    ModelNishkamaOptimizerConfig,
)
from neuraldharma.nodes.node_nishkama_optimizer_compute.models.model_optimization_result import (
    ModelOptimizationResult,
)


class NishkamaOptimizer:
    """Fitness-based selector over candidate actions.

    Args:
        principles: Fitness principles. Replaces the defaults when given.
        guna_classifier: Classifier for the guna modifier.
        temperature: Boltzmann temperature, 0 for deterministic selection.
        minimum_fitness: Viability cut-off.
        svadharma: Role tag that earns the svadharma bonus.
        svadharma_weight: Size of the svadharma bonus.
        rng: Random source for stochastic selection.
    """

    def __init__(
        self,
        *,
        principles: Sequence[ModelEvaluationPrinciple] | None = None,
        guna_classifier: GunaClassifier | None = None,
        temperature: float = 0.0,
        minimum_fitness: float = 0.0,
        svadharma: str | None = None,
        svadharma_weight: float = 0.2,
        rng: random.Random | None = None,
    ) -> None:
        self._principles = (
            tuple(principles) if principles is not None else DEFAULT_FITNESS_PRINCIPLES
        )
        self._classifier = guna_classifier or GunaClassifier()
        self._config = ModelNishkamaOptimizerConfig(
            temperature=temperature,
            minimum_fitness=minimum_fitness,
            svadharma=svadharma,
            svadharma_weight=svadharma_weight,
        )
        self._rng = rng or random.Random()

    @classmethod
    def from_config(
        cls,
        config: ModelNishkamaOptimizerConfig,
        *,
        principles: Sequence[ModelEvaluationPrinciple] | None = None,
        guna_classifier: GunaClassifier | None = None,
        rng: random.Random | None = None,
    ) -> NishkamaOptimizer:
        return cls(
            principles=principles,
            guna_classifier=guna_classifier,
            temperature=config.temperature,
            minimum_fitness=config.minimum_fitness,
            svadharma=config.svadharma,
            svadharma_weight=config.svadharma_weight,
            rng=rng,
        )

    @property
    def config(self) -> ModelNishkamaOptimizerConfig:
        return self._config

    @property
    def principles(self) -> tuple[ModelEvaluationPrinciple, ...]:
        return self._principles

    def optimize(self, actions: Sequence[ModelCandidateAction]) -> ModelOptimizationResult:
        """Rank ``actions`` and select one.

        Raises:
            EmptyCandidateSetError: If ``actions`` is empty.
            NonFiniteScoreError: If a fitness principle returns NaN or infinity.
        """
        return optimize_candidates(
            actions, self._principles, self._classifier, self._config, self._rng
        )

    def get_fitness(self, action: ModelCandidateAction) -> float:
        return compute_fitness(action, self._principles, self._classifier, self._config)

    def is_dharmic(self, action: ModelCandidateAction, threshold: float = 0.5) -> bool:
        return self.get_fitness(action) >= threshold


__all__ = ["NishkamaOptimizer"]
