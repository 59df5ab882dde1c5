# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Unit tests for NishkamaOptimizerCompute."""

from __future__ import annotations

import math
import random

import pytest

from neuraldharma.enums import EnumGuna
from neuraldharma.models import ModelFeatureVector
from neuraldharma.nodes.node_karma_evaluator_compute.handlers.exceptions import (
    NonFiniteScoreError,
)
from neuraldharma.nodes.node_karma_evaluator_compute.models import ModelEvaluationPrinciple
from neuraldharma.nodes.node_nishkama_optimizer_compute.handlers.exceptions import (
    EmptyCandidateSetError,
)
from neuraldharma.nodes.node_nishkama_optimizer_compute.handlers.handler_nishkama_optimizer import (
    boltzmann_index,
)
from neuraldharma.nodes.node_nishkama_optimizer_compute.models import (
    ModelCandidateAction,
    ModelNishkamaOptimizerConfig,
)
from neuraldharma.nodes.node_nishkama_optimizer_compute.node import NishkamaOptimizer

# =============================================================================
# Helpers
# =============================================================================


class _FixedRandom(random.Random):
    """Random source returning a fixed draw and counting calls."""

    def __init__(self, draw: float) -> None:
        super().__init__(0)
        self.draw = draw
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self.draw


_GOOD = ModelFeatureVector(
    altruism=0.9,
    deliberation=0.85,
    attachment=0.1,
    agitation=0.05,
    transparency=0.95,
    effort=0.8,
    harm_potential=0.0,
    consistency=0.9,
)

_BAD = ModelFeatureVector(
    altruism=0.0,
    deliberation=0.05,
    attachment=0.9,
    agitation=0.3,
    transparency=0.1,
    effort=0.1,
    harm_potential=0.9,
    consistency=0.1,
)

_MIDDLING = ModelFeatureVector(
    altruism=0.5,
    deliberation=0.5,
    attachment=0.5,
    agitation=0.5,
    transparency=0.5,
    effort=0.5,
    harm_potential=0.5,
    consistency=0.5,
)


def _candidate(
    action_id: str, features: ModelFeatureVector, svadharma: str | None = None
) -> ModelCandidateAction:
    return ModelCandidateAction(
        action_id=action_id,
        description=f"{action_id} action",
        payload={"tool": action_id},
        features=features,
        svadharma=svadharma,
    )


# =============================================================================
# Tests: Fitness
# =============================================================================


@pytest.mark.unit
class TestFitness:
    def test_sattvic_candidate_saturates(self) -> None:
        assert NishkamaOptimizer().get_fitness(_candidate("good", _GOOD)) == pytest.approx(1.0)

    def test_harmful_candidate_is_not_dharmic(self) -> None:
        optimizer = NishkamaOptimizer()
        assert optimizer.is_dharmic(_candidate("bad", _BAD)) is False
        assert optimizer.is_dharmic(_candidate("good", _GOOD)) is True

    def test_fitness_in_unit_interval(self) -> None:
        optimizer = NishkamaOptimizer()
        for features in (_GOOD, _BAD, _MIDDLING):
            assert 0.0 <= optimizer.get_fitness(_candidate("x", features)) <= 1.0

    def test_svadharma_bonus(self) -> None:
        plain = NishkamaOptimizer(svadharma="healer")
        candidate = _candidate("mid", _MIDDLING, svadharma="healer")
        other = _candidate("mid", _MIDDLING, svadharma="warrior")
        assert plain.get_fitness(candidate) - plain.get_fitness(other) == pytest.approx(0.2)

    def test_zero_weight_principles_use_guna_modifier_only(self) -> None:
        optimizer = NishkamaOptimizer(
            principles=[
                ModelEvaluationPrinciple(
                    principle_id="none", display_name="None", weight=0.0, score_fn=lambda _f: 1.0
                )
            ]
        )
        fitness = optimizer.get_fitness(_candidate("good", _GOOD))
        assert 0.0 < fitness <= 0.15

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_principle_is_rejected(self, value: float) -> None:
        optimizer = NishkamaOptimizer(
            principles=[
                ModelEvaluationPrinciple(
                    principle_id="broken", display_name="Broken", weight=1.0, score_fn=lambda _f: value
                )
            ]
        )

        with pytest.raises(NonFiniteScoreError) as exc_info:
            optimizer.get_fitness(_candidate("bad", _BAD))

        assert exc_info.value.principle_id == "broken"
        with pytest.raises(NonFiniteScoreError):
            optimizer.optimize([_candidate("bad", _BAD)])


# =============================================================================
# Tests: Selection
# =============================================================================


@pytest.mark.unit
class TestOptimize:
    def test_empty_input_raises(self) -> None:
        with pytest.raises(EmptyCandidateSetError) as exc_info:
            NishkamaOptimizer().optimize([])
        assert exc_info.value.code == "OPTIMIZER_001"
        assert isinstance(exc_info.value, ValueError)

    def test_single_candidate_selected(self) -> None:
        rng = _FixedRandom(0.99)
        only = _candidate("only", _BAD)
        result = NishkamaOptimizer(temperature=2.0, rng=rng).optimize([only])
        assert result.selected == only
        assert rng.calls == 0

    def test_deterministic_selection_picks_fittest(self) -> None:
        result = NishkamaOptimizer().optimize(
            [_candidate("bad", _BAD), _candidate("mid", _MIDDLING), _candidate("good", _GOOD)]
        )
        assert result.selected.action_id == "good"
        assert [r.action.action_id for r in result.ranked] == ["good", "mid", "bad"]
        assert result.ranked[0].guna == EnumGuna.SATTVA
        assert result.selection_reasoning.startswith(
            'Selected "good action" with dharmic fitness 1.000 (sattva).'
        )
        assert result.selection_reasoning.endswith("[Deterministic selection]")

    def test_deterministic_selection_is_repeatable(self) -> None:
        optimizer = NishkamaOptimizer()
        candidates = [_candidate("a", _MIDDLING), _candidate("b", _MIDDLING)]
        picks = {optimizer.optimize(candidates).selected.action_id for _ in range(5)}
        assert picks == {"a"}

    def test_payload_carried_through(self) -> None:
        result = NishkamaOptimizer().optimize([_candidate("good", _GOOD)])
        assert result.selected.payload == {"tool": "good"}

    def test_minimum_fitness_filters_pool(self) -> None:
        result = NishkamaOptimizer(minimum_fitness=0.9).optimize(
            [_candidate("bad", _BAD), _candidate("good", _GOOD)]
        )
        assert [r.action.action_id for r in result.ranked] == ["good"]

    def test_minimum_fitness_falls_back_to_all(self) -> None:
        result = NishkamaOptimizer(minimum_fitness=0.99).optimize(
            [_candidate("bad", _BAD), _candidate("mid", _MIDDLING)]
        )
        assert len(result.ranked) == 2
        assert result.selected.action_id == "mid"

    def test_stochastic_low_draw_selects_first(self) -> None:
        optimizer = NishkamaOptimizer(temperature=1.0, rng=_FixedRandom(0.0))
        result = optimizer.optimize([_candidate("bad", _BAD), _candidate("good", _GOOD)])
        assert result.selected.action_id == "good"
        assert "[Stochastic selection, τ=1]" in result.selection_reasoning

    def test_stochastic_high_draw_selects_last(self) -> None:
        optimizer = NishkamaOptimizer(temperature=1.0, rng=_FixedRandom(0.99))
        result = optimizer.optimize([_candidate("bad", _BAD), _candidate("good", _GOOD)])
        assert result.selected.action_id == "bad"

    def test_selected_always_in_pool(self) -> None:
        optimizer = NishkamaOptimizer(temperature=0.5, rng=random.Random(7))
        candidates = [_candidate(str(i), f) for i, f in enumerate((_GOOD, _BAD, _MIDDLING))]
        for _ in range(20):
            result = optimizer.optimize(candidates)
            assert result.selected in [r.action for r in result.ranked]

    def test_negative_temperature_clamped(self) -> None:
        assert ModelNishkamaOptimizerConfig(temperature=-3).temperature == 0.0


@pytest.mark.unit
class TestBoltzmannIndex:
    def test_large_fitness_over_tiny_temperature_does_not_overflow(self) -> None:
        index = boltzmann_index([1.0, 0.0], 1e-6, _FixedRandom(0.5))
        assert index == 0

    def test_equal_fitness_is_uniform(self) -> None:
        assert boltzmann_index([0.5, 0.5], 1.0, _FixedRandom(0.49)) == 0
        assert boltzmann_index([0.5, 0.5], 1.0, _FixedRandom(0.51)) == 1
