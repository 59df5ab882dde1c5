# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Input to the process-quality function of the nishkama objective."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from neuraldharma.models.model_feature_vector import ModelFeatureVector


class ModelProcessQualityInput(BaseModel):
    """Describes how an action was taken, independent of its reward."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    features: ModelFeatureVector = Field(description="Behavioral feature vector.")
    description: str | None = Field(default=None)
    agent_role: str | None = Field(default=None)
    timestamp: int | None = Field(default=None, description="Unix epoch milliseconds.")


__all__ = ["ModelProcessQualityInput"]
