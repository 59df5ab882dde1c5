# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Unit tests for the shared scoring and clock helpers."""

from __future__ import annotations

import math
from datetime import UTC, datetime

import pytest

from neuraldharma.utils import (
    clamp,
    coerce_clamped,
    epoch_ms,
    is_finite_score,
    utc_now,
    weighted_average,
)

# =============================================================================
# Tests: Scoring helpers
# =============================================================================


@pytest.mark.unit
class TestClamp:
    def test_inside_range_is_unchanged(self) -> None:
        assert clamp(0.4) == 0.4

    def test_bounds(self) -> None:
        assert clamp(-3.0) == 0.0
        assert clamp(7.5) == 1.0

    def test_custom_bounds(self) -> None:
        assert clamp(5.0, -1.0, 2.0) == 2.0


@pytest.mark.unit
class TestWeightedAverage:
    def test_weighted_mean(self) -> None:
        assert weighted_average([(1.0, 1.0), (3.0, 0.0)]) == pytest.approx(0.25)

    def test_zero_total_weight_is_zero(self) -> None:
        assert weighted_average([(0.0, 1.0), (0.0, 0.5)]) == 0.0

    def test_empty_is_zero(self) -> None:
        assert weighted_average([]) == 0.0


@pytest.mark.unit
class TestCoerceClamped:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [(1.5, 1.0), (-2, 0.0), (0.3, 0.3), ("2.0", 1.0), ("0.25", 0.25)],
    )
    def test_numeric_values_are_clamped(self, raw: object, expected: float) -> None:
        assert coerce_clamped(raw) == expected

    def test_non_numeric_values_pass_through(self) -> None:
        assert coerce_clamped("high") == "high"
        assert coerce_clamped(None) is None
        assert coerce_clamped(True) is True

    def test_nan_passes_through(self) -> None:
        assert math.isnan(coerce_clamped(float("nan")))  # type: ignore[arg-type]


@pytest.mark.unit
class TestIsFiniteScore:
    def test_finite(self) -> None:
        assert is_finite_score(0.5) is True
        assert is_finite_score(3) is True

    def test_non_finite(self) -> None:
        assert is_finite_score(float("inf")) is False
        assert is_finite_score(float("nan")) is False


# =============================================================================
# Tests: Clock helpers
# =============================================================================


@pytest.mark.unit
class TestClock:
    def test_utc_now_is_timezone_aware(self) -> None:
        assert utc_now().tzinfo is UTC

    def test_epoch_ms(self) -> None:
        assert epoch_ms(datetime(2025, 1, 1, tzinfo=UTC)) == 1_735_689_600_000
