# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Output models for the guna classifier."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from neuraldharma.enums.enum_guna import GUNA_PRECEDENCE, EnumGuna
from neuraldharma.models.model_feature_vector import ModelFeatureVector


class ModelGunaScores(BaseModel):
    """Softmax-normalized guna probabilities, summing to 1.0."""

    model_config = ConfigDict(frozen=True)

    sattva: float = Field(ge=0.0, le=1.0, description="Probability of sattva.")
    rajas: float = Field(ge=0.0, le=1.0, description="Probability of rajas.")
    tamas: float = Field(ge=0.0, le=1.0, description="Probability of tamas.")

    def get(self, guna: EnumGuna) -> float:
        """Probability of a single guna."""
        return float(getattr(self, guna.value))

    def ranked(self) -> list[EnumGuna]:
        """Gunas ordered by probability, ties resolved sattva > rajas > tamas."""
        return sorted(GUNA_PRECEDENCE, key=lambda guna: -self.get(guna))


class ModelGunaClassification(BaseModel):
    """Result of classifying a feature vector into a guna."""

    model_config = ConfigDict(frozen=True)

    primary: EnumGuna = Field(description="Dominant guna (argmax of scores).")
    scores: ModelGunaScores = Field(description="Normalized score for each guna.")
    features: ModelFeatureVector = Field(description="Vector that was classified.")
    is_mixed: bool = Field(
        description="True when the dominance margin is below the configured threshold."
    )
    reasoning: str = Field(description="Human-readable explanation.")


__all__ = ["ModelGunaClassification", "ModelGunaScores"]
