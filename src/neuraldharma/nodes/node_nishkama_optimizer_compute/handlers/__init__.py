# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Handlers for NishkamaOptimizerCompute node."""

from neuraldharma.nodes.node_nishkama_optimizer_compute.handlers.exceptions import (
    EmptyCandidateSetError,
    NishkamaOptimizerError,
)
from neuraldharma.nodes.node_nishkama_optimizer_compute.handlers.handler_fitness_principles import (
    DEFAULT_FITNESS_PRINCIPLES,
)
from neuraldharma.nodes.node_nishkama_optimizer_compute.handlers.handler_nishkama_optimizer import (
    base_fitness,
    boltzmann_index,
    compute_fitness,
    optimize_candidates,
    rank_candidates,
)

__all__ = [
    "DEFAULT_FITNESS_PRINCIPLES",
    "EmptyCandidateSetError",
    "NishkamaOptimizerError",
    "base_fitness",
    "boltzmann_index",
    "compute_fitness",
    "optimize_candidates",
    "rank_candidates",
]
