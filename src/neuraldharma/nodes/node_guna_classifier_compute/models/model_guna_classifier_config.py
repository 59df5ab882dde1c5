# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Configuration for the guna classifier."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from neuraldharma.nodes.node_guna_classifier_compute.models.model_guna_weights import (
    DEFAULT_GUNA_WEIGHTS,
    ModelGunaWeights,
)
from neuraldharma.utils.util_scoring import coerce_clamped


class ModelGunaClassifierConfig(BaseModel):
    """Weights and dominance threshold used to classify a vector."""

    model_config = ConfigDict(frozen=True)

    weights: ModelGunaWeights = Field(
        default=DEFAULT_GUNA_WEIGHTS,
        description="Per-guna feature weights (defaults merged with overrides by the node).",
    )
    dominance_threshold: float = Field(
        default=0.1,
        ge=0.0,
        le=1.0,
        description=(
            "Minimum gap between the top two probabilities for a 'dominant' "
            "classification. Smaller gaps are reported as mixed."
        ),
    )

    @field_validator("dominance_threshold", mode="before")
    @classmethod
    def _clamp_threshold(cls, value: object) -> object:
        return coerce_clamped(value)


__all__ = ["ModelGunaClassifierConfig"]
