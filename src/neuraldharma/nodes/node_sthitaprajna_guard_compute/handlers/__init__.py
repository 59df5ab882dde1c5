# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Handlers for SthitaprajnaGuardCompute node."""

from neuraldharma.nodes.node_sthitaprajna_guard_compute.handlers.handler_sthitaprajna_guard import (
    REDACTION,
    SimilarityFn,
    analyze_input,
    guard_output,
    jaccard_similarity,
)
from neuraldharma.nodes.node_sthitaprajna_guard_compute.handlers.handler_threat_patterns import (
    DEFAULT_THREAT_PATTERNS,
)

__all__ = [
    "DEFAULT_THREAT_PATTERNS",
    "REDACTION",
    "SimilarityFn",
    "analyze_input",
    "guard_output",
    "jaccard_similarity",
]
