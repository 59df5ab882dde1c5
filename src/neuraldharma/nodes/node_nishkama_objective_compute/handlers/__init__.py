# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Handlers for NishkamaObjectiveCompute node."""

from neuraldharma.nodes.node_nishkama_objective_compute.handlers.exceptions import (
    NishkamaObjectiveError,
    NonFiniteObjectiveValueError,
)
from neuraldharma.nodes.node_nishkama_objective_compute.handlers.handler_nishkama_objective import (
    default_quality_fn,
    reshape_reward,
)

__all__ = [
    "NishkamaObjectiveError",
    "NonFiniteObjectiveValueError",
    "default_quality_fn",
    "reshape_reward",
]
