# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Handlers for GunaClassifierCompute node."""

from neuraldharma.nodes.node_guna_classifier_compute.handlers.exceptions import (
    GunaClassifierConfigurationError,
    GunaClassifierError,
)
from neuraldharma.nodes.node_guna_classifier_compute.handlers.handler_guna_classifier import (
    classify_features,
    compute_raw_scores,
    saturated_scores,
    softmax_scores,
)

__all__ = [
    "GunaClassifierConfigurationError",
    "GunaClassifierError",
    "classify_features",
    "compute_raw_scores",
    "saturated_scores",
    "softmax_scores",
]
