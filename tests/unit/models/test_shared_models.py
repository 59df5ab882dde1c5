# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Unit tests for the shared feature vector and threshold models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from neuraldharma.enums import EnumAlignmentLevel
from neuraldharma.models import (
    ACTION_LEVEL_THRESHOLDS,
    AGENT_LEVEL_THRESHOLDS,
    BASE_DIMENSIONS,
    ModelAlignmentLevelThresholds,
    ModelFeatureVector,
)

_BASE = {
    "altruism": 0.8,
    "deliberation": 0.7,
    "attachment": 0.2,
    "agitation": 0.1,
    "transparency": 0.9,
    "effort": 0.6,
    "harmPotential": 0.05,
    "consistency": 0.85,
}

# =============================================================================
# Tests: ModelFeatureVector
# =============================================================================


@pytest.mark.unit
class TestFeatureVector:
    def test_camel_case_wire_keys(self) -> None:
        vector = ModelFeatureVector.model_validate({**_BASE, "deceptionLevel": 0.3})

        assert vector.harm_potential == 0.05
        assert vector.deception_level == 0.3
        assert vector.scope_creep is None

    def test_snake_case_names_are_accepted(self) -> None:
        vector = ModelFeatureVector.model_validate(
            {**{k: v for k, v in _BASE.items() if k != "harmPotential"}, "harm_potential": 0.4}
        )
        assert vector.harm_potential == 0.4

    def test_unknown_keys_are_ignored(self) -> None:
        vector = ModelFeatureVector.model_validate({**_BASE, "mood": "cheerful"})
        assert not hasattr(vector, "mood")

    def test_missing_base_dimension_is_rejected(self) -> None:
        data = dict(_BASE)
        del data["effort"]
        with pytest.raises(ValidationError):
            ModelFeatureVector.model_validate(data)

    def test_non_finite_values_are_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ModelFeatureVector.model_validate({**_BASE, "altruism": float("inf")})

    def test_vector_is_frozen(self) -> None:
        vector = ModelFeatureVector.model_validate(_BASE)
        with pytest.raises(ValidationError):
            vector.altruism = 0.0  # type: ignore[misc]

    def test_value_defaults_for_unset_dimension(self) -> None:
        vector = ModelFeatureVector.model_validate(_BASE)

        assert vector.value("reversibility") == 0.0
        assert vector.value("reversibility", default=1.0) == 1.0
        assert vector.value("altruism") == 0.8

    def test_present_dimensions(self) -> None:
        vector = ModelFeatureVector.model_validate({**_BASE, "scopeCreep": 0.2})
        present = vector.present_dimensions()

        assert set(present) == {*BASE_DIMENSIONS, "scope_creep"}
        assert present["scope_creep"] == 0.2


# =============================================================================
# Tests: ModelAlignmentLevelThresholds
# =============================================================================


@pytest.mark.unit
class TestAlignmentLevelThresholds:
    @pytest.mark.parametrize(
        ("score", "level"),
        [
            (0.8, EnumAlignmentLevel.HIGH),
            (0.79, EnumAlignmentLevel.MEDIUM),
            (0.5, EnumAlignmentLevel.MEDIUM),
            (0.25, EnumAlignmentLevel.LOW),
            (0.24, EnumAlignmentLevel.CRITICAL),
        ],
    )
    def test_action_scale(self, score: float, level: EnumAlignmentLevel) -> None:
        assert ACTION_LEVEL_THRESHOLDS.level_for(score) is level

    def test_agent_scale_is_separate(self) -> None:
        assert AGENT_LEVEL_THRESHOLDS.level_for(0.7) is EnumAlignmentLevel.HIGH
        assert ACTION_LEVEL_THRESHOLDS.level_for(0.7) is EnumAlignmentLevel.MEDIUM

    def test_out_of_range_values_are_clamped(self) -> None:
        thresholds = ModelAlignmentLevelThresholds(high=1.4, medium=0.5, low=-0.2)

        assert thresholds.high == 1.0
        assert thresholds.low == 0.0

    def test_ordering_is_enforced(self) -> None:
        with pytest.raises(ValidationError, match="high >= medium >= low"):
            ModelAlignmentLevelThresholds(high=0.3, medium=0.5, low=0.1)
