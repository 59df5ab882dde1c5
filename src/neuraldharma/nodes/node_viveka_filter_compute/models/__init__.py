# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Models for VivekaFilterCompute node."""

from neuraldharma.nodes.node_viveka_filter_compute.models.model_action_candidate import (
    ModelActionCandidate,
)
from neuraldharma.nodes.node_viveka_filter_compute.models.model_ethical_boundary import (
    BoundaryPredicate,
    ModelEthicalBoundary,
)
from neuraldharma.nodes.node_viveka_filter_compute.models.model_viveka_filter_config import (
    CAUTION_MARGIN,
    SEVERITY_PENALTIES,
    ModelVivekaFilterConfig,
)
from neuraldharma.nodes.node_viveka_filter_compute.models.model_viveka_verdict import (
    ModelBoundaryViolation,
    ModelVivekaVerdict,
)

__all__ = [
    "CAUTION_MARGIN",
    "SEVERITY_PENALTIES",
    "BoundaryPredicate",
    "ModelActionCandidate",
    "ModelBoundaryViolation",
    "ModelEthicalBoundary",
    "ModelVivekaFilterConfig",
    "ModelVivekaVerdict",
]
