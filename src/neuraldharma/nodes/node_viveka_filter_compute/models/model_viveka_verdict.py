# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Output models for the viveka filter."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from neuraldharma.enums.enum_recommendation import EnumRecommendation
from neuraldharma.enums.enum_severity import EnumSeverity
from neuraldharma.nodes.node_guna_classifier_compute.models.model_guna_classification import (
    ModelGunaClassification,
)


class ModelBoundaryViolation(BaseModel):
    model_config = ConfigDict(frozen=True)

    boundary: str = Field(description="Name of the violated boundary.")
    severity: EnumSeverity
    description: str = Field(default="")


class ModelVivekaVerdict(BaseModel):
    """Discrimination verdict for one candidate."""

    model_config = ConfigDict(frozen=True)

    dharmic: bool = Field(
        description="No critical violation, not too tamasic, score above threshold."
    )
    violations: tuple[ModelBoundaryViolation, ...] = Field(
        default=(), description="Violated boundaries, highest priority first."
    )
    guna_classification: ModelGunaClassification
    alignment_score: float = Field(ge=0.0, le=1.0)
    recommendation: EnumRecommendation
    reasoning: str


__all__ = ["ModelBoundaryViolation", "ModelVivekaVerdict"]
