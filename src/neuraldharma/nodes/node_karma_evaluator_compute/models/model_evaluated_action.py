# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Input model for the karma evaluator."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from neuraldharma.models.model_feature_vector import ModelFeatureVector


class ModelEvaluatedAction(BaseModel):
    """An action to be scored against the dharmic principles."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    action_id: str = Field(alias="id", description="Action identifier.")
    description: str = Field(default="", description="Human-readable description.")
    features: ModelFeatureVector = Field(description="Behavioral feature vector.")
    agent_role: str | None = Field(default=None, description="Role of the acting agent.")
    timestamp: int | None = Field(default=None, description="Unix epoch milliseconds.")


__all__ = ["ModelEvaluatedAction"]
