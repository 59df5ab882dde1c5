# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Dharmic fitness ranking and selection.

Fitness of a candidate:

    base     = weighted average of clamped principle scores (0 if sum(w) == 0)
    fitness  = clamp(base + 0.15 * P(sattva) - 0.15 * P(tamas))
    fitness  = clamp(fitness + svadharma_weight)   if the svadharma tags match

Selection:

    1. Drop candidates below ``minimum_fitness``; if none remain keep all.
    2. Stable sort by descending fitness.
    3. temperature == 0 (or a single candidate): take the first.
       temperature > 0: Boltzmann draw with weights exp(f / temperature),
       computed as exp((f - f_max) / temperature) to avoid overflow.
"""

from __future__ import annotations

import logging
import math
import random
from collections.abc import Sequence

from neuraldharma.models.model_feature_vector import ModelFeatureVector
from neuraldharma.nodes.node_guna_classifier_compute.node import GunaClassifier
from neuraldharma.nodes.node_karma_evaluator_compute.handlers.exceptions import (
    NonFiniteScoreError,
)
from neuraldharma.nodes.node_karma_evaluator_compute.models.model_evaluation_principle import (
    ModelEvaluationPrinciple,
)
from neuraldharma.nodes.node_nishkama_optimizer_compute.handlers.exceptions import (
    EmptyCandidateSetError,
)
from neuraldharma.nodes.node_nishkama_optimizer_compute.models.model_candidate_action import (
    ModelCandidateAction,
)
from neuraldharma.nodes.node_nishkama_optimizer_compute.models.model_nishkama_optimizer_config import (
    GUNA_MODIFIER_WEIGHT,
    ModelNishkamaOptimizerConfig,
)
from neuraldharma.nodes.node_nishkama_optimizer_compute.models.model_optimization_result import (
    ModelOptimizationResult,
    ModelRankedCandidate,
)
from neuraldharma.utils.util_scoring import clamp, is_finite_score, weighted_average

logger = logging.getLogger(__name__)


def base_fitness(
    features: ModelFeatureVector, principles: Sequence[ModelEvaluationPrinciple]
) -> float:
    """Weighted average of clamped principle scores.

    Raises:
        NonFiniteScoreError: If a principle returns NaN or infinity.
    """
    pairs: list[tuple[float, float]] = []
    for principle in principles:
        value = principle.score(features)
        if not is_finite_score(value):
            raise NonFiniteScoreError(principle.principle_id, value)
        pairs.append((principle.weight, clamp(value)))
    return weighted_average(pairs)


def compute_fitness(
    action: ModelCandidateAction,
    principles: Sequence[ModelEvaluationPrinciple],
    classifier: GunaClassifier,
    config: ModelNishkamaOptimizerConfig,
) -> float:
    """Dharmic fitness of one candidate in [0, 1]."""
    fitness = base_fitness(action.features, principles)
    scores = classifier.classify_features(action.features).scores
    fitness = clamp(
        fitness + scores.sattva * GUNA_MODIFIER_WEIGHT - scores.tamas * GUNA_MODIFIER_WEIGHT
    )
    if config.svadharma and action.svadharma == config.svadharma:
        fitness = clamp(fitness + config.svadharma_weight)
    return fitness


def rank_candidates(
    actions: Sequence[ModelCandidateAction],
    principles: Sequence[ModelEvaluationPrinciple],
    classifier: GunaClassifier,
    config: ModelNishkamaOptimizerConfig,
) -> list[ModelRankedCandidate]:
    """Score, filter and sort candidates. Returns the viable pool."""
    evaluated: list[ModelRankedCandidate] = []
    for action in actions:
        classification = classifier.classify_features(action.features)
        evaluated.append(
            ModelRankedCandidate(
                action=action,
                dharmic_fitness=compute_fitness(action, principles, classifier, config),
                guna=classification.primary,
                guna_scores=classification.scores,
                reasoning=classification.reasoning,
            )
        )

    viable = [e for e in evaluated if e.dharmic_fitness >= config.minimum_fitness]
    if not viable:
        logger.warning(
            "No candidate reached minimum fitness %.3f; falling back to all %d candidates",
            config.minimum_fitness,
            len(evaluated),
        )
        viable = evaluated

    viable.sort(key=lambda e: e.dharmic_fitness, reverse=True)
    return viable


def boltzmann_index(
    fitnesses: Sequence[float], temperature: float, rng: random.Random
) -> int:
    """Draw an index with probability proportional to exp(f / temperature)."""
    peak = max(fitnesses)
    weights = [math.exp((f - peak) / temperature) for f in fitnesses]
    total = sum(weights)
    draw = rng.random()
    cumulative = 0.0
    for index, weight in enumerate(weights):
        cumulative += weight / total
        if draw <= cumulative:
            return index
    return len(weights) - 1


def optimize_candidates(
    actions: Sequence[ModelCandidateAction],
    principles: Sequence[ModelEvaluationPrinciple],
    classifier: GunaClassifier,
    config: ModelNishkamaOptimizerConfig,
    rng: random.Random,
) -> ModelOptimizationResult:
    """Rank candidates and select one.

    Raises:
        EmptyCandidateSetError: If ``actions`` is empty.
    """
    if not actions:
        raise EmptyCandidateSetError()

    pool = rank_candidates(actions, principles, classifier, config)

    stochastic = config.temperature > 0
    index = 0
    if stochastic and len(pool) > 1:
        index = boltzmann_index(
            [e.dharmic_fitness for e in pool], config.temperature, rng
        )
    chosen = pool[index]

    suffix = (
        f" [Stochastic selection, τ={config.temperature:g}]"
        if stochastic
        else " [Deterministic selection]"
    )
    reasoning = (
        f'Selected "{chosen.action.description}" with dharmic fitness '
        f"{chosen.dharmic_fitness:.3f} ({chosen.guna.value}). {chosen.reasoning}{suffix}"
    )
    logger.debug(
        "Selected candidate %s (fitness=%.4f) from pool of %d",
        chosen.action.action_id,
        chosen.dharmic_fitness,
        len(pool),
    )
    return ModelOptimizationResult(
        ranked=tuple(pool), selected=chosen.action, selection_reasoning=reasoning
    )


__all__ = [
    "base_fitness",
    "boltzmann_index",
    "compute_fitness",
    "optimize_candidates",
    "rank_candidates",
]
