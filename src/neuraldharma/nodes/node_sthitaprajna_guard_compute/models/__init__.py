# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Models for SthitaprajnaGuardCompute node."""

from neuraldharma.nodes.node_sthitaprajna_guard_compute.models.model_guard_decision import (
    ModelGuardDecision,
    ModelPerturbationAnalysis,
)
from neuraldharma.nodes.node_sthitaprajna_guard_compute.models.model_sthitaprajna_guard_config import (
    DEFAULT_FALLBACK_RESPONSE,
    ModelSthitaprajnaGuardConfig,
)
from neuraldharma.nodes.node_sthitaprajna_guard_compute.models.model_threat_pattern import (
    ModelThreatPattern,
)

__all__ = [
    "DEFAULT_FALLBACK_RESPONSE",
    "ModelGuardDecision",
    "ModelPerturbationAnalysis",
    "ModelSthitaprajnaGuardConfig",
    "ModelThreatPattern",
]
