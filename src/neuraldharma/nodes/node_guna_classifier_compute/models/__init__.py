# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Models for GunaClassifierCompute node."""

from neuraldharma.nodes.node_guna_classifier_compute.models.model_guna_classification import (
    ModelGunaClassification,
    ModelGunaScores,
)
from neuraldharma.nodes.node_guna_classifier_compute.models.model_guna_classifier_config import (
    ModelGunaClassifierConfig,
)
from neuraldharma.nodes.node_guna_classifier_compute.models.model_guna_weights import (
    DEFAULT_GUNA_WEIGHTS,
    ModelGunaWeights,
)

__all__ = [
    "DEFAULT_GUNA_WEIGHTS",
    "ModelGunaClassification",
    "ModelGunaClassifierConfig",
    "ModelGunaScores",
    "ModelGunaWeights",
]
