# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Models for NishkamaOptimizerCompute node."""

from neuraldharma.nodes.node_nishkama_optimizer_compute.models.model_candidate_action import (
    ModelCandidateAction,
    PayloadT,
)
from neuraldharma.nodes.node_nishkama_optimizer_compute.models.model_nishkama_optimizer_config import (
    GUNA_MODIFIER_WEIGHT,
    ModelNishkamaOptimizerConfig,
)
from neuraldharma.nodes.node_nishkama_optimizer_compute.models.model_optimization_result import (
    ModelOptimizationResult,
    ModelRankedCandidate,
)

__all__ = [
    "GUNA_MODIFIER_WEIGHT",
    "ModelCandidateAction",
    "ModelNishkamaOptimizerConfig",
    "ModelOptimizationResult",
    "ModelRankedCandidate",
    "PayloadT",
]
