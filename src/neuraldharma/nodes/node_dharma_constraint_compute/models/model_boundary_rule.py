# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""BoundaryRule: a prioritized hard constraint on actions.

A rule couples metadata with two capabilities: a violation predicate and a
compliance score used when the rule passes. Priority (1-5, higher first)
orders evaluation only; it never changes the permit decision.
"""

from __future__ import annotations

import math
from collections.abc import Callable

from pydantic import BaseModel, ConfigDict, Field, field_validator

from neuraldharma.nodes.node_dharma_constraint_compute.models.model_constrained_action import (
    ModelConstrainedAction,
)

RulePredicate = Callable[[ModelConstrainedAction], bool]
RuleScoreFn = Callable[[ModelConstrainedAction], float]

MIN_RULE_PRIORITY = 1
MAX_RULE_PRIORITY = 5


class ModelBoundaryRule(BaseModel):
    """A named, prioritized boundary rule."""

    model_config = ConfigDict(frozen=True)

    rule_id: str = Field(min_length=1, description="Stable rule identifier.")
    name: str = Field(description="Human-readable rule name.")
    grounding: str = Field(default="", description="Reference grounding this rule.")
    priority: int = Field(
        ge=MIN_RULE_PRIORITY,
        le=MAX_RULE_PRIORITY,
        description="Evaluation priority, 5 is evaluated first.",
    )
    violation_fn: RulePredicate = Field(exclude=True, repr=False)
    compliance_fn: RuleScoreFn = Field(exclude=True, repr=False)

    @field_validator("priority", mode="before")
    @classmethod
    def _clamp_priority(cls, value: object) -> object:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return value
        if math.isnan(value):
            return value
        return max(MIN_RULE_PRIORITY, min(MAX_RULE_PRIORITY, round(value)))

    def is_violated(self, action: ModelConstrainedAction) -> bool:
        return bool(self.violation_fn(action))

    def compliance_score(self, action: ModelConstrainedAction) -> float:
        return float(self.compliance_fn(action))


__all__ = [
    "MAX_RULE_PRIORITY",
    "MIN_RULE_PRIORITY",
    "ModelBoundaryRule",
    "RulePredicate",
    "RuleScoreFn",
]
