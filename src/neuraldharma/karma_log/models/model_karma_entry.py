# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""A logged agent action and everything attached to it afterwards."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from neuraldharma.enums.enum_guna import EnumGuna
from neuraldharma.enums.enum_karma import EnumKarmaClassification
from neuraldharma.karma_log.models.model_consequence import ModelConsequence


class ModelKarmaEntry(BaseModel):
    """Snapshot of one karma log entry.

    Entries are immutable; the logger replaces an entry with an updated
    copy when consequences or a classification are attached.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    entry_id: str = Field(alias="id", description="Unique karma entry id.")
    timestamp: int = Field(description="Unix epoch milliseconds of the action.")
    agent: str = Field(description="Agent or component that acted.")
    action: str = Field(description="Human-readable action description.")
    params: dict[str, Any] = Field(default_factory=dict, description="Action parameters.")
    consequences: tuple[ModelConsequence, ...] = Field(default=())
    parent_id: str | None = Field(default=None, description="Causal parent entry id.")
    classification: EnumKarmaClassification | None = None
    guna: EnumGuna | None = None
    meta: dict[str, Any] = Field(default_factory=dict)

    @property
    def max_severity_rank(self) -> int:
        """Highest consequence severity rank, 0 without consequences."""
        return max((c.severity.rank for c in self.consequences), default=0)


__all__ = ["ModelKarmaEntry"]
