# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Models for NishkamaObjectiveCompute node."""

from neuraldharma.nodes.node_nishkama_objective_compute.models.model_nishkama_objective_config import (
    HIGH_QUALITY_FLOOR,
    ModelNishkamaObjectiveConfig,
)
from neuraldharma.nodes.node_nishkama_objective_compute.models.model_objective_result import (
    ModelObjectiveResult,
)
from neuraldharma.nodes.node_nishkama_objective_compute.models.model_process_quality_input import (
    ModelProcessQualityInput,
)

__all__ = [
    "HIGH_QUALITY_FLOOR",
    "ModelNishkamaObjectiveConfig",
    "ModelObjectiveResult",
    "ModelProcessQualityInput",
]
