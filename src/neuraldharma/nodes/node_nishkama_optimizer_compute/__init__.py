# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""NishkamaOptimizerCompute node: dharmic-fitness selection among candidates."""

from neuraldharma.nodes.node_nishkama_optimizer_compute.handlers import (
    DEFAULT_FITNESS_PRINCIPLES,
    EmptyCandidateSetError,
    NishkamaOptimizerError,
)
from neuraldharma.nodes.node_nishkama_optimizer_compute.models import (
    ModelCandidateAction,
    ModelNishkamaOptimizerConfig,
    ModelOptimizationResult,
    ModelRankedCandidate,
)
from neuraldharma.nodes.node_nishkama_optimizer_compute.node import NishkamaOptimizer

__all__ = [
    "DEFAULT_FITNESS_PRINCIPLES",
    "EmptyCandidateSetError",
    "ModelCandidateAction",
    "ModelNishkamaOptimizerConfig",
    "ModelOptimizationResult",
    "ModelRankedCandidate",
    "NishkamaOptimizer",
    "NishkamaOptimizerError",
]
