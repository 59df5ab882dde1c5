# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""EvaluationPrinciple: a named, weighted scoring rule.

A principle carries metadata (id, display name, grounding reference,
description), a weight in [0, 1] and a single capability: ``score``, which
maps a feature vector to a sub-score. The scoring callable is configuration
and is excluded from serialization.
"""

from __future__ import annotations

from collections.abc import Callable

from pydantic import BaseModel, ConfigDict, Field, field_validator

from neuraldharma.models.model_feature_vector import ModelFeatureVector
from neuraldharma.utils.util_scoring import coerce_clamped

PrincipleScoreFn = Callable[[ModelFeatureVector], float]


class ModelEvaluationPrinciple(BaseModel):
    """A weighted scoring rule over a feature vector."""

    model_config = ConfigDict(frozen=True)

    principle_id: str = Field(min_length=1, description="Stable principle identifier.")
    display_name: str = Field(description="Human-readable name used in messages.")
    grounding: str = Field(default="", description="Reference grounding this principle.")
    weight: float = Field(ge=0.0, le=1.0, description="Weight in the composite score.")
    description: str = Field(default="", description="What the principle measures.")
    score_fn: PrincipleScoreFn = Field(
        exclude=True, repr=False, description="Feature vector -> sub-score."
    )

    @field_validator("weight", mode="before")
    @classmethod
    def _clamp_weight(cls, value: object) -> object:
        return coerce_clamped(value)

    def score(self, features: ModelFeatureVector) -> float:
        """Raw (unclamped) sub-score for ``features``."""
        return float(self.score_fn(features))


__all__ = ["ModelEvaluationPrinciple", "PrincipleScoreFn"]
