# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""NishkamaObjectiveCompute node: process-quality reward reshaping."""

from neuraldharma.nodes.node_nishkama_objective_compute.handlers import (
    NishkamaObjectiveError,
    NonFiniteObjectiveValueError,
    default_quality_fn,
    reshape_reward,
)
from neuraldharma.nodes.node_nishkama_objective_compute.models import (
    ModelNishkamaObjectiveConfig,
    ModelObjectiveResult,
    ModelProcessQualityInput,
)
from neuraldharma.nodes.node_nishkama_objective_compute.node import NishkamaObjective

__all__ = [
    "ModelNishkamaObjectiveConfig",
    "ModelObjectiveResult",
    "ModelProcessQualityInput",
    "NishkamaObjective",
    "NishkamaObjectiveError",
    "NonFiniteObjectiveValueError",
    "default_quality_fn",
    "reshape_reward",
]
