# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Regex threat signature for the stability guard."""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

from neuraldharma.enums.enum_threat import EnumThreatCategory, EnumThreatSeverity


class ModelThreatPattern(BaseModel):
    """A named regex signature.

    String patterns are compiled case-insensitively; pass a compiled
    ``re.Pattern`` to control flags.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    pattern: re.Pattern[str] = Field(description="Signature searched anywhere in the text.")
    severity: EnumThreatSeverity
    category: EnumThreatCategory

    @field_validator("pattern", mode="before")
    @classmethod
    def _compile(cls, value: object) -> object:
        if isinstance(value, str):
            return re.compile(value, re.IGNORECASE)
        return value

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None


__all__ = ["ModelThreatPattern"]
