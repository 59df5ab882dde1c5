# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""An observed downstream consequence of a logged action."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from neuraldharma.enums.enum_karma import EnumConsequenceSeverity


class ModelConsequence(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    timestamp: int = Field(description="Unix epoch milliseconds when observed.")
    description: str = Field(description="What happened.")
    severity: EnumConsequenceSeverity = Field(description="How bad it was.")
    reversible: bool = Field(default=True, description="Whether the effect can be undone.")
    affected_entities: tuple[str, ...] = Field(
        default=(),
        description="Entities affected by the consequence.",
    )


__all__ = ["ModelConsequence"]
