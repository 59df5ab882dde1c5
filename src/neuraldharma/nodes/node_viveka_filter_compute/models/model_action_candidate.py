# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Input model for the viveka discrimination filter."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from neuraldharma.models.model_feature_vector import ModelFeatureVector


class ModelActionCandidate(BaseModel):
    """An action awaiting a dharmic / adharmic verdict."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    description: str = Field(description="Human-readable description.")
    features: ModelFeatureVector = Field(description="Behavioral feature vector.")
    targets: tuple[str, ...] = Field(default=(), description="Entities affected by the action.")
    intent: str | None = Field(default=None, description="Declared intent.")
    context: dict[str, Any] = Field(default_factory=dict, description="Free-form context.")


__all__ = ["ModelActionCandidate"]
