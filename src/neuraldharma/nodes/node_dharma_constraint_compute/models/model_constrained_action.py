# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Input model for the dharma constraint gate."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ModelConstrainedAction(BaseModel):
    """An action proposed by an agent, checked against boundary rules.

    Risk dimensions are optional; an unset dimension reads as 0 for the
    default rules.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    action_id: str = Field(alias="id", description="Action identifier.")
    action_type: str = Field(alias="type", description="Action category, e.g. 'tool_call'.")
    description: str = Field(default="", description="Human-readable description.")
    agent_role: str | None = Field(default=None, description="Role of the acting agent.")
    targets: tuple[str, ...] = Field(default=(), description="Entities affected by the action.")
    intent: str | None = Field(default=None, description="Stated intent.")
    harm_potential: float | None = Field(default=None, description="Harm potential in [0, 1].")
    deception_level: float | None = Field(default=None, description="Deception level in [0, 1].")
    resource_consumption: float | None = Field(
        default=None, description="Resource consumption in [0, 1]."
    )
    reversible: bool | None = Field(default=None, description="Whether the action can be undone.")
    context: dict[str, Any] = Field(default_factory=dict, description="Free-form context.")


__all__ = ["ModelConstrainedAction"]
