# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Configuration for the viveka filter.

Alignment score:

    score = P(sattva) - sum(penalty[severity] for each violation), clamped

with penalties critical 0.4, violation 0.2, warning 0.05.
"""

from __future__ import annotations

from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_validator

from neuraldharma.enums.enum_severity import EnumSeverity
from neuraldharma.utils.util_scoring import coerce_clamped

SEVERITY_PENALTIES = MappingProxyType(
    {
        EnumSeverity.CRITICAL: 0.4,
        EnumSeverity.VIOLATION: 0.2,
        EnumSeverity.WARNING: 0.05,
    }
)

# Scores within this margin above the threshold get CAUTION instead of PROCEED.
CAUTION_MARGIN = 0.15


class ModelVivekaFilterConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    alignment_threshold: float = Field(
        default=0.4, ge=0.0, le=1.0, description="Minimum alignment score to pass."
    )
    max_tamas: float = Field(
        default=0.5, ge=0.0, le=1.0, description="Maximum tamas probability to pass."
    )
    replace_defaults: bool = Field(
        default=False, description="Use only caller-supplied boundaries."
    )

    @field_validator("alignment_threshold", "max_tamas", mode="before")
    @classmethod
    def _clamp(cls, value: object) -> object:
        return coerce_clamped(value)


__all__ = ["CAUTION_MARGIN", "SEVERITY_PENALTIES", "ModelVivekaFilterConfig"]
