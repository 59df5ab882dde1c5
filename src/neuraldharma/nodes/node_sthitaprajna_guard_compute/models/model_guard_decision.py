# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Output models for the stability guard."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from neuraldharma.enums.enum_guard_action import EnumGuardAction
from neuraldharma.enums.enum_perturbation_type import EnumPerturbationType


class ModelPerturbationAnalysis(BaseModel):
    """Result of screening an input."""

    model_config = ConfigDict(frozen=True)

    perturbed: bool
    similarity: float = Field(ge=0.0, le=1.0, description="Similarity to the reference input.")
    perturbation_type: EnumPerturbationType = EnumPerturbationType.NONE
    details: str | None = None


class ModelGuardDecision(BaseModel):
    """Guard verdict on one output."""

    model_config = ConfigDict(frozen=True)

    approved: bool = Field(description="stability_score > 0.3 and not blocked.")
    output: str = Field(description="Released output (possibly sanitized or fallback).")
    original_output: str
    stability_score: float = Field(ge=0.0, le=1.0)
    action: EnumGuardAction
    reasoning: str


__all__ = ["ModelGuardDecision", "ModelPerturbationAnalysis"]
