# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Output models for the nishkama optimizer."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from neuraldharma.enums.enum_guna import EnumGuna
from neuraldharma.nodes.node_guna_classifier_compute.models.model_guna_classification import (
    ModelGunaScores,
)
from neuraldharma.nodes.node_nishkama_optimizer_compute.models.model_candidate_action import (
    ModelCandidateAction,
)


class ModelRankedCandidate(BaseModel):
    """A candidate with its dharmic fitness and guna classification."""

    model_config = ConfigDict(frozen=True)

    action: ModelCandidateAction
    dharmic_fitness: float = Field(ge=0.0, le=1.0)
    guna: EnumGuna
    guna_scores: ModelGunaScores
    reasoning: str = Field(description="Guna classification reasoning.")


class ModelOptimizationResult(BaseModel):
    """Ranked viable pool and the selected candidate."""

    model_config = ConfigDict(frozen=True)

    ranked: tuple[ModelRankedCandidate, ...] = Field(
        description="Viable pool, highest fitness first."
    )
    selected: ModelCandidateAction = Field(description="Chosen candidate.")
    selection_reasoning: str


__all__ = ["ModelOptimizationResult", "ModelRankedCandidate"]
