# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Output models for the karma evaluator."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from neuraldharma.enums.enum_alignment_level import EnumAlignmentLevel
from neuraldharma.models.model_item_failure import ModelItemFailure
from neuraldharma.nodes.node_karma_evaluator_compute.models.model_evaluated_action import (
    ModelEvaluatedAction,
)


class ModelPrincipleScore(BaseModel):
    """Score of a single principle for one action."""

    model_config = ConfigDict(frozen=True)

    principle_id: str = Field(description="Principle identifier.")
    principle: str = Field(description="Principle display name.")
    grounding: str = Field(default="", description="Principle grounding reference.")
    weight: float = Field(ge=0.0, le=1.0, description="Principle weight.")
    raw_score: float = Field(ge=0.0, le=1.0, description="Clamped sub-score.")
    weighted_score: float = Field(ge=0.0, le=1.0, description="raw_score * weight.")


class ModelKarmaEvaluation(BaseModel):
    """Full evaluation of one action against all configured principles."""

    model_config = ConfigDict(frozen=True)

    action: ModelEvaluatedAction = Field(description="Value copy of the evaluated action.")
    dharma_score: float = Field(ge=0.0, le=1.0, description="Weighted composite score.")
    principle_scores: tuple[ModelPrincipleScore, ...] = Field(
        description="Per-principle breakdown in configuration order."
    )
    alignment_level: EnumAlignmentLevel = Field(description="Bucketed composite score.")
    is_aligned: bool = Field(description="dharma_score >= alignment threshold.")
    violations: tuple[str, ...] = Field(default=(), description="Principles below the violation threshold.")
    commendations: tuple[str, ...] = Field(
        default=(), description="Principles at or above the commendation threshold."
    )
    reasoning: str = Field(description="Synthesized explanation.")
    evaluated_at: datetime = Field(description="UTC time of evaluation.")


class ModelBatchEvaluation(BaseModel):
    """Batch evaluation output with per-item failures captured."""

    model_config = ConfigDict(frozen=True)

    evaluations: tuple[ModelKarmaEvaluation, ...] = Field(
        default=(), description="Successful evaluations, highest score first."
    )
    failures: tuple[ModelItemFailure, ...] = Field(
        default=(), description="Items that could not be evaluated."
    )


__all__ = ["ModelBatchEvaluation", "ModelKarmaEvaluation", "ModelPrincipleScore"]
