# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Configuration for the dharma constraint gate."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from neuraldharma.utils.util_scoring import coerce_clamped


class ModelDharmaConstraintConfig(BaseModel):
    """Role binding and recommendation thresholds."""

    model_config = ConfigDict(frozen=True)

    role: str = Field(description="Role the gated agent operates in.")
    role_description: str | None = Field(
        default=None, description="Defaults to 'Agent operating in role: <role>'."
    )
    include_defaults: bool = Field(default=True, description="Include the five default rules.")
    proceed_threshold: float = Field(default=0.6, ge=0.0, le=1.0)
    caution_threshold: float = Field(default=0.3, ge=0.0, le=1.0)

    @field_validator("proceed_threshold", "caution_threshold", mode="before")
    @classmethod
    def _clamp(cls, value: object) -> object:
        return coerce_clamped(value)

    @property
    def effective_role_description(self) -> str:
        return self.role_description or f"Agent operating in role: {self.role}"


__all__ = ["ModelDharmaConstraintConfig"]
