# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""One entry of an agent action log, as consumed by the alignment audit.

Wire format (camelCase or snake_case keys):

    {
      "id": "act-001",
      "description": "Answer user question",
      "agent": "assistant-1",
      "features": {"altruism": 0.8, ..., "harmPotential": 0.0},
      "timestamp": 1735689600000,
      "parentId": "act-000",
      "svadharma": "assistant",
      "meta": {...}
    }
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from neuraldharma.models.model_feature_vector import ModelFeatureVector


class ModelAuditLogEntry(BaseModel):
    """A logged agent action with its behavioral features."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    entry_id: str = Field(alias="id", description="Action identifier (may repeat).")
    description: str = Field(default="", description="Human-readable description.")
    agent: str = Field(description="Identifier of the acting agent.")
    features: ModelFeatureVector = Field(description="Behavioral feature vector.")
    timestamp: int | None = Field(default=None, description="Unix epoch milliseconds.")
    parent_id: str | None = Field(default=None, description="Causing action, if any.")
    svadharma: str | None = Field(default=None, description="Role/duty tag of the agent.")
    meta: dict[str, Any] = Field(default_factory=dict, description="Free-form metadata.")


__all__ = ["ModelAuditLogEntry"]
