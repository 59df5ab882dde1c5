# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""GunaClassifierCompute: classify feature vectors into sattva, rajas, tamas."""

from neuraldharma.nodes.node_guna_classifier_compute.handlers import (
    GunaClassifierConfigurationError,
    GunaClassifierError,
    classify_features,
)
from neuraldharma.nodes.node_guna_classifier_compute.models import (
    DEFAULT_GUNA_WEIGHTS,
    ModelGunaClassification,
    ModelGunaClassifierConfig,
    ModelGunaScores,
    ModelGunaWeights,
)
from neuraldharma.nodes.node_guna_classifier_compute.node import GunaClassifier

__all__ = [
    "DEFAULT_GUNA_WEIGHTS",
    "GunaClassifier",
    "GunaClassifierConfigurationError",
    "GunaClassifierError",
    "ModelGunaClassification",
    "ModelGunaClassifierConfig",
    "ModelGunaScores",
    "ModelGunaWeights",
    "classify_features",
]
