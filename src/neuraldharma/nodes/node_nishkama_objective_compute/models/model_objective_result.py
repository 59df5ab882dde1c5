# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Output model of the nishkama objective."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelObjectiveResult(BaseModel):
    """Reward before and after process-quality damping."""

    model_config = ConfigDict(frozen=True)

    original_reward: float = Field(description="Reward returned by the wrapped reward function.")
    process_quality: float = Field(ge=0.0, le=1.0, description="Process quality Q.")
    modified_reward: float = Field(description="Damped reward in the original reward range.")
    damping_factor: float = Field(ge=0.0, le=1.0, description="(1 - lambda) + lambda * Q.")
    recommended: bool = Field(description="Q >= recommendation threshold.")
    reasoning: str


__all__ = ["ModelObjectiveResult"]
