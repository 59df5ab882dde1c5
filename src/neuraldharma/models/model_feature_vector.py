# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Behavioral feature vector shared by every scoring node.

A feature vector is an immutable value object describing the behavioral
character of a single action. Each dimension is semantically in [0, 1];
callers are responsible for the bound, the library does not enforce it
and never mutates a vector.

Wire format uses camelCase keys (``harmPotential``, ``deceptionLevel``,
``scopeCreep``); snake_case attribute names are accepted as well.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# The eight dimensions every vector carries.
BASE_DIMENSIONS: tuple[str, ...] = (
    "altruism",
    "deliberation",
    "attachment",
    "agitation",
    "transparency",
    "effort",
    "harm_potential",
    "consistency",
)

# Optional dimensions used by the karma evaluator and audit inputs.
EXTENSION_DIMENSIONS: tuple[str, ...] = (
    "deception_level",
    "reversibility",
    "scope_creep",
)


class ModelFeatureVector(BaseModel):
    """Named behavioral dimensions of an action, each nominally in [0, 1]."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
        allow_inf_nan=False,
    )

    altruism: float = Field(description="Benefit to others vs self (0=pure self, 1=pure altruistic).")
    deliberation: float = Field(description="Planning quality (0=impulsive, 1=fully deliberate).")
    attachment: float = Field(description="Attachment to outcome (0=detached, 1=fully attached).")
    agitation: float = Field(description="Urgency or agitation (0=calm, 1=frantic).")
    transparency: float = Field(description="Transparency (0=deceptive, 1=fully transparent).")
    effort: float = Field(description="Effort exerted (0=inert, 1=maximum effort).")
    harm_potential: float = Field(description="Harm potential (0=harmless, 1=maximally harmful).")
    consistency: float = Field(description="Consistency with stated values (0=contradictory, 1=consistent).")

    deception_level: float | None = Field(default=None, description="Degree of deception, if measured.")
    reversibility: float | None = Field(default=None, description="How reversible the action is, if measured.")
    scope_creep: float | None = Field(default=None, description="Drift beyond the assigned scope, if measured.")

    def value(self, dimension: str, default: float = 0.0) -> float:
        """Return a dimension's value, or ``default`` when it is unset."""
        raw = getattr(self, dimension, None)
        return default if raw is None else float(raw)

    def present_dimensions(self) -> dict[str, float]:
        """All dimensions that carry a value, keyed by attribute name."""
        present = {name: float(getattr(self, name)) for name in BASE_DIMENSIONS}
        for name in EXTENSION_DIMENSIONS:
            raw = getattr(self, name)
            if raw is not None:
                present[name] = float(raw)
        return present


__all__ = ["BASE_DIMENSIONS", "EXTENSION_DIMENSIONS", "ModelFeatureVector"]
