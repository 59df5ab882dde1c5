# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""EthicalBoundary: a yama/niyama-derived limit with a severity.

Unlike gate rules, boundaries do not carry a compliance score; a violated
boundary lowers the candidate's alignment score by its severity penalty.
"""

from __future__ import annotations

from collections.abc import Callable

from pydantic import BaseModel, ConfigDict, Field

from neuraldharma.enums.enum_severity import EnumSeverity
from neuraldharma.nodes.node_viveka_filter_compute.models.model_action_candidate import (
    ModelActionCandidate,
)

BoundaryPredicate = Callable[[ModelActionCandidate], bool]


class ModelEthicalBoundary(BaseModel):
    """A named boundary; higher priority is checked first."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="Boundary name, reported on violation.")
    description: str = Field(default="", description="What the boundary protects.")
    priority: int = Field(default=1, description="Check order, highest first.")
    severity: EnumSeverity = Field(description="Severity of a violation.")
    violation_fn: BoundaryPredicate = Field(exclude=True, repr=False)

    def is_violated(self, candidate: ModelActionCandidate) -> bool:
        return bool(self.violation_fn(candidate))


__all__ = ["BoundaryPredicate", "ModelEthicalBoundary"]
