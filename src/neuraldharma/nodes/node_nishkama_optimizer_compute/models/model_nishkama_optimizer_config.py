# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Configuration for the nishkama optimizer."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from neuraldharma.utils.util_scoring import coerce_clamped

# Weight of P(sattva) bonus and P(tamas) penalty applied to the base fitness.
GUNA_MODIFIER_WEIGHT = 0.15


class ModelNishkamaOptimizerConfig(BaseModel):
    """Selection parameters.

    Attributes:
        temperature: 0 selects the fittest candidate deterministically; larger
            values flatten the Boltzmann distribution over the pool.
        minimum_fitness: Candidates below this are dropped (unless all are).
        svadharma: Role tag rewarded with ``svadharma_weight`` when matched.
        svadharma_weight: Fitness bonus for a matching svadharma tag.
    """

    model_config = ConfigDict(frozen=True)

    temperature: float = Field(default=0.0, ge=0.0)
    minimum_fitness: float = Field(default=0.0, ge=0.0, le=1.0)
    svadharma: str | None = Field(default=None)
    svadharma_weight: float = Field(default=0.2, ge=0.0, le=1.0)

    @field_validator("temperature", mode="before")
    @classmethod
    def _non_negative(cls, value: object) -> object:
        return coerce_clamped(value, 0.0, float("inf"))

    @field_validator("minimum_fitness", "svadharma_weight", mode="before")
    @classmethod
    def _clamp(cls, value: object) -> object:
        return coerce_clamped(value)


__all__ = ["GUNA_MODIFIER_WEIGHT", "ModelNishkamaOptimizerConfig"]
