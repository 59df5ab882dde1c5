# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Output models for the dharma constraint gate."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from neuraldharma.enums.enum_recommendation import EnumRecommendation


class ModelViolationReport(BaseModel):
    """A rule the action violated."""

    model_config = ConfigDict(frozen=True)

    rule_id: str = Field(description="Violated rule identifier.")
    rule_name: str = Field(description="Violated rule name.")
    priority: int = Field(description="Priority of the violated rule.")
    grounding: str = Field(default="", description="Rule grounding reference.")
    message: str = Field(description="Violation message.")


class ModelPassedRule(BaseModel):
    """A rule the action satisfied, with its clamped compliance score."""

    model_config = ConfigDict(frozen=True)

    rule_id: str
    rule_name: str
    score: float = Field(ge=0.0, le=1.0)


class ModelConstraintEvaluation(BaseModel):
    """Result of gating one action against all boundary rules."""

    model_config = ConfigDict(frozen=True)

    permitted: bool = Field(description="True iff no rule was violated.")
    compliance_score: float = Field(
        ge=0.0, le=1.0, description="Mean compliance over passed rules (0 if none)."
    )
    violations: tuple[ModelViolationReport, ...] = Field(default=())
    passed: tuple[ModelPassedRule, ...] = Field(default=())
    recommendation: EnumRecommendation
    reasoning: str


__all__ = ["ModelConstraintEvaluation", "ModelPassedRule", "ModelViolationReport"]
