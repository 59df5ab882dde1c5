# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""VivekaFilterCompute node: dharmic discrimination of action candidates."""

from neuraldharma.nodes.node_viveka_filter_compute.handlers import DEFAULT_ETHICAL_BOUNDARIES
from neuraldharma.nodes.node_viveka_filter_compute.models import (
    ModelActionCandidate,
    ModelBoundaryViolation,
    ModelEthicalBoundary,
    ModelVivekaFilterConfig,
    ModelVivekaVerdict,
)
from neuraldharma.nodes.node_viveka_filter_compute.node import VivekaFilter

__all__ = [
    "DEFAULT_ETHICAL_BOUNDARIES",
    "ModelActionCandidate",
    "ModelBoundaryViolation",
    "ModelEthicalBoundary",
    "ModelVivekaFilterConfig",
    "ModelVivekaVerdict",
    "VivekaFilter",
]
