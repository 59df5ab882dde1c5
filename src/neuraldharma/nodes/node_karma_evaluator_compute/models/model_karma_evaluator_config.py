# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Configuration for the karma evaluator.

Thresholds are clamped into [0, 1] rather than rejected.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from neuraldharma.models.model_alignment_level_thresholds import (
    ACTION_LEVEL_THRESHOLDS,
    ModelAlignmentLevelThresholds,
)
from neuraldharma.utils.util_scoring import coerce_clamped


class ModelKarmaEvaluatorConfig(BaseModel):
    """Thresholds applied to principle sub-scores and the composite score."""

    model_config = ConfigDict(frozen=True)

    alignment_threshold: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="Minimum composite score for is_aligned.",
    )
    commendation_threshold: float = Field(
        default=0.85,
        ge=0.0,
        le=1.0,
        description="Sub-score at or above which a principle earns a commendation.",
    )
    violation_threshold: float = Field(
        default=0.3,
        ge=0.0,
        le=1.0,
        description="Sub-score below which a principle raises a violation.",
    )
    level_thresholds: ModelAlignmentLevelThresholds = Field(
        default=ACTION_LEVEL_THRESHOLDS,
        description="Bucket boundaries for the alignment level.",
    )

    @field_validator(
        "alignment_threshold", "commendation_threshold", "violation_threshold", mode="before"
    )
    @classmethod
    def _clamp(cls, value: object) -> object:
        return coerce_clamped(value)


__all__ = ["ModelKarmaEvaluatorConfig"]
