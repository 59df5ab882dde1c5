# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Configuration for the nishkama objective."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from neuraldharma.utils.util_scoring import coerce_clamped

# Process quality at or above which a non-negative floor applies when
# negative rewards are disallowed.
HIGH_QUALITY_FLOOR = 0.7


class ModelNishkamaObjectiveConfig(BaseModel):
    """Reward reshaping parameters.

    Attributes:
        process_weight: lambda in [0, 1]. 0 leaves rewards untouched, 1 makes
            the reward fully dependent on process quality.
        recommendation_threshold: Minimum Q for ``recommended``.
        allow_negative_rewards: When False, high-quality actions (Q >= 0.7)
            never receive a reward below the middle of the range.
        reward_range: (r_min, r_max) of the wrapped reward function.
    """

    model_config = ConfigDict(frozen=True)

    process_weight: float = Field(default=0.5, ge=0.0, le=1.0)
    recommendation_threshold: float = Field(default=0.3, ge=0.0, le=1.0)
    allow_negative_rewards: bool = Field(default=True)
    reward_range: tuple[float, float] = Field(default=(-1.0, 1.0))

    @field_validator("process_weight", "recommendation_threshold", mode="before")
    @classmethod
    def _clamp(cls, value: object) -> object:
        return coerce_clamped(value)


__all__ = ["HIGH_QUALITY_FLOOR", "ModelNishkamaObjectiveConfig"]
