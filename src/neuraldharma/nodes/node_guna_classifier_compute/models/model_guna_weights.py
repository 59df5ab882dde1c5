# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Per-guna feature weights for the guna classifier.

Each guna carries a signed weight per feature dimension. Positive weights
pull a vector toward that guna, negative weights push it away (high
attachment pulls toward rajas and away from sattva). Dimensions without a
weight contribute nothing.
"""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_snake

from neuraldharma.enums.enum_guna import EnumGuna


def _normalize_keys(weights: Mapping[str, float]) -> dict[str, float]:
    return {to_snake(key): float(value) for key, value in weights.items()}


class ModelGunaWeights(BaseModel):
    """Signed feature weights for each of the three gunas."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    sattva: dict[str, float] = Field(default_factory=dict, description="Weights toward sattva.")
    rajas: dict[str, float] = Field(default_factory=dict, description="Weights toward rajas.")
    tamas: dict[str, float] = Field(default_factory=dict, description="Weights toward tamas.")

    @field_validator("sattva", "rajas", "tamas", mode="before")
    @classmethod
    def _snake_case_dimensions(cls, value: object) -> object:
        if isinstance(value, Mapping):
            return _normalize_keys(value)
        return value

    def for_guna(self, guna: EnumGuna) -> dict[str, float]:
        """Return the weight map of one guna."""
        return getattr(self, guna.value)

    def merged(
        self, overrides: ModelGunaWeights | Mapping[str, Mapping[str, float]] | None
    ) -> ModelGunaWeights:
        """Return a copy with ``overrides`` applied dimension-by-dimension."""
        if overrides is None:
            return self
        if isinstance(overrides, ModelGunaWeights):
            override_map: dict[str, Mapping[str, float]] = overrides.model_dump()
        else:
            override_map = dict(overrides)
        merged: dict[str, dict[str, float]] = {}
        for guna in EnumGuna:
            current = dict(self.for_guna(guna))
            current.update(_normalize_keys(override_map.get(guna.value) or {}))
            merged[guna.value] = current
        return ModelGunaWeights(**merged)


DEFAULT_GUNA_WEIGHTS = ModelGunaWeights(
    sattva={
        "altruism": 1.0,
        "deliberation": 0.9,
        "attachment": -0.8,
        "agitation": -0.7,
        "transparency": 1.0,
        "effort": 0.5,
        "harm_potential": -1.0,
        "consistency": 0.9,
    },
    rajas={
        "altruism": -0.3,
        "deliberation": 0.2,
        "attachment": 1.0,
        "agitation": 0.9,
        "transparency": -0.2,
        "effort": 0.8,
        "harm_potential": 0.3,
        "consistency": -0.3,
    },
    tamas={
        "altruism": -0.5,
        "deliberation": -1.0,
        "attachment": 0.3,
        # Inertia, not calm.
        "agitation": -0.5,
        "transparency": -0.8,
        "effort": -1.0,
        "harm_potential": 0.8,
        "consistency": -0.6,
    },
)


__all__ = ["DEFAULT_GUNA_WEIGHTS", "ModelGunaWeights"]
