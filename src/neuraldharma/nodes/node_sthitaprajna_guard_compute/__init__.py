# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""SthitaprajnaGuardCompute node: output stability under adversarial input."""

from neuraldharma.nodes.node_sthitaprajna_guard_compute.handlers import (
    DEFAULT_THREAT_PATTERNS,
    jaccard_similarity,
)
from neuraldharma.nodes.node_sthitaprajna_guard_compute.models import (
    ModelGuardDecision,
    ModelPerturbationAnalysis,
    ModelSthitaprajnaGuardConfig,
    ModelThreatPattern,
)
from neuraldharma.nodes.node_sthitaprajna_guard_compute.node import SthitaprajnaGuard

__all__ = [
    "DEFAULT_THREAT_PATTERNS",
    "ModelGuardDecision",
    "ModelPerturbationAnalysis",
    "ModelSthitaprajnaGuardConfig",
    "ModelThreatPattern",
    "SthitaprajnaGuard",
    "jaccard_similarity",
]
