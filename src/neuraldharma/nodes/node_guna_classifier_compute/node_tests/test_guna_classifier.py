# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Unit tests for GunaClassifierCompute."""

from __future__ import annotations

import random

import pytest

from neuraldharma.enums import EnumGuna
from neuraldharma.models import ModelFeatureVector
from neuraldharma.nodes.node_guna_classifier_compute.handlers.exceptions import (
    GunaClassifierConfigurationError,
)
from neuraldharma.nodes.node_guna_classifier_compute.handlers.handler_guna_classifier import (
    classify_features,
    compute_raw_scores,
    saturated_scores,
    softmax_scores,
)
from neuraldharma.nodes.node_guna_classifier_compute.models import (
    DEFAULT_GUNA_WEIGHTS,
    ModelGunaClassifierConfig,
    ModelGunaWeights,
)
from neuraldharma.nodes.node_guna_classifier_compute.node import GunaClassifier

# =============================================================================
# Helpers
# =============================================================================


def _features(**overrides: float) -> ModelFeatureVector:
    values = {
        "altruism": 0.0,
        "deliberation": 0.0,
        "attachment": 0.0,
        "agitation": 0.0,
        "transparency": 0.0,
        "effort": 0.0,
        "harm_potential": 0.0,
        "consistency": 0.0,
    }
    values.update(overrides)
    return ModelFeatureVector(**values)


_SATTVIC = _features(
    altruism=0.9,
    deliberation=0.85,
    attachment=0.1,
    agitation=0.05,
    transparency=0.95,
    effort=0.8,
    consistency=0.9,
)

_RAJASIC = _features(
    deliberation=0.1,
    attachment=0.95,
    agitation=0.9,
    effort=0.2,
    harm_potential=0.95,
    deception_level=1.0,
)

_TAMASIC = _features(harm_potential=1.0, attachment=0.2)


# =============================================================================
# Tests: Pure handlers
# =============================================================================


@pytest.mark.unit
class TestHandlers:
    def test_raw_scores_are_linear(self) -> None:
        raw = compute_raw_scores(_features(altruism=1.0), DEFAULT_GUNA_WEIGHTS)
        assert raw[EnumGuna.SATTVA] == pytest.approx(1.0)
        assert raw[EnumGuna.RAJAS] == pytest.approx(-0.3)
        assert raw[EnumGuna.TAMAS] == pytest.approx(-0.5)

    def test_unweighted_extension_dimension_ignored(self) -> None:
        base = compute_raw_scores(_features(), DEFAULT_GUNA_WEIGHTS)
        extended = compute_raw_scores(_features(scope_creep=1.0), DEFAULT_GUNA_WEIGHTS)
        assert base == extended

    def test_softmax_sums_to_one(self) -> None:
        scores = softmax_scores(
            {EnumGuna.SATTVA: 500.0, EnumGuna.RAJAS: -500.0, EnumGuna.TAMAS: 0.0}
        )
        assert scores.sattva + scores.rajas + scores.tamas == pytest.approx(1.0)
        assert scores.sattva == pytest.approx(1.0)

    def test_default_config_used_when_none(self) -> None:
        assert classify_features(_SATTVIC).primary == EnumGuna.SATTVA

    def test_overflowing_raw_scores_saturate(self) -> None:
        features = _features(altruism=1e308, transparency=1e308)
        raw = compute_raw_scores(features, DEFAULT_GUNA_WEIGHTS)
        assert raw[EnumGuna.SATTVA] == float("inf")

        result = classify_features(features)
        assert result.primary == EnumGuna.SATTVA
        assert result.scores.sattva == pytest.approx(1.0)
        assert result.scores.rajas == 0.0
        assert result.scores.tamas == 0.0

    def test_saturated_scores_split_ties(self) -> None:
        weights = ModelGunaWeights(
            sattva={"altruism": 2.0},
            rajas={"altruism": 2.0},
            tamas={"altruism": -2.0},
        )
        scores = saturated_scores(_features(altruism=1e308), weights)
        assert scores.sattva == pytest.approx(0.5)
        assert scores.rajas == pytest.approx(0.5)
        assert scores.tamas == 0.0

    def test_scores_form_distribution_for_random_features(self) -> None:
        rng = random.Random(20251018)
        dimensions = (
            "altruism",
            "deliberation",
            "attachment",
            "agitation",
            "transparency",
            "effort",
            "harm_potential",
            "consistency",
        )
        for _ in range(300):
            magnitude = rng.choice((1.0, 10.0, 1e3, 1e308))
            values = {
                name: rng.uniform(-1.0, 1.0) * magnitude for name in dimensions
            }
            scores = classify_features(_features(**values)).scores
            total = scores.sattva + scores.rajas + scores.tamas
            assert total == pytest.approx(1.0)
            for score in (scores.sattva, scores.rajas, scores.tamas):
                assert 0.0 <= score <= 1.0


# =============================================================================
# Tests: Classification
# =============================================================================


@pytest.mark.unit
class TestClassification:
    @pytest.mark.parametrize(
        ("features", "expected"),
        [
            (_SATTVIC, EnumGuna.SATTVA),
            (_RAJASIC, EnumGuna.RAJAS),
            (_TAMASIC, EnumGuna.TAMAS),
        ],
    )
    def test_primary_guna(self, features: ModelFeatureVector, expected: EnumGuna) -> None:
        result = GunaClassifier().classify_features(features)
        assert result.primary == expected
        total = result.scores.sattva + result.scores.rajas + result.scores.tamas
        assert total == pytest.approx(1.0)

    def test_dominant_reasoning(self) -> None:
        result = GunaClassifier().classify_features(_SATTVIC)
        assert result.is_mixed is False
        assert result.reasoning.startswith("Dominant sattva classification (")
        assert "balanced, wise, and harmonious" in result.reasoning

    def test_tie_breaks_toward_sattva_and_is_mixed(self) -> None:
        result = GunaClassifier().classify_features(_features())
        assert result.primary == EnumGuna.SATTVA
        assert result.scores.sattva == pytest.approx(1 / 3)
        assert result.is_mixed is True
        assert result.reasoning.startswith("Mixed classification: primarily sattva (33.3%)")
        assert "significant rajas influence" in result.reasoning

    def test_zero_dominance_threshold_never_mixed(self) -> None:
        classifier = GunaClassifier(dominance_threshold=0.0)
        assert classifier.classify_features(_features()).is_mixed is False

    def test_features_echoed(self) -> None:
        result = GunaClassifier().classify_features(_SATTVIC)
        assert result.features == _SATTVIC

    def test_is_sattvic_and_is_tamasic(self) -> None:
        classifier = GunaClassifier()
        assert classifier.is_sattvic(_SATTVIC) is True
        assert classifier.is_sattvic(_TAMASIC) is False
        assert classifier.is_tamasic(_TAMASIC) is True
        assert classifier.is_tamasic(_SATTVIC) is False


# =============================================================================
# Tests: Configuration
# =============================================================================


@pytest.mark.unit
class TestConfiguration:
    def test_custom_weights_merge_per_guna(self) -> None:
        classifier = GunaClassifier(weights={"tamas": {"harmPotential": 5.0}})
        weights = classifier.get_weights()
        assert weights.tamas["harm_potential"] == 5.0
        assert weights.tamas["effort"] == -1.0
        assert weights.sattva == DEFAULT_GUNA_WEIGHTS.sattva

    def test_get_weights_returns_copy(self) -> None:
        classifier = GunaClassifier()
        weights = classifier.get_weights()
        weights.sattva["altruism"] = -99.0
        assert classifier.get_weights().sattva["altruism"] == 1.0

    def test_update_weights(self) -> None:
        classifier = GunaClassifier()
        classifier.update_weights({"sattva": {"altruism": 0.0}})
        assert classifier.get_weights().sattva["altruism"] == 0.0
        assert classifier.get_weights().sattva["deliberation"] == 0.9

    def test_dominance_threshold_clamped(self) -> None:
        assert ModelGunaClassifierConfig(dominance_threshold=2.0).dominance_threshold == 1.0

    def test_classify_without_extractor_raises(self) -> None:
        with pytest.raises(GunaClassifierConfigurationError) as exc_info:
            GunaClassifier().classify({"anything": 1})
        assert exc_info.value.code == "GUNA_001"

    def test_classify_with_extractor(self) -> None:
        classifier = GunaClassifier(feature_extractor=lambda _action: _SATTVIC)
        assert classifier.classify(object()).primary == EnumGuna.SATTVA
