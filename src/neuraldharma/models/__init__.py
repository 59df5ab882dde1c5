# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Shared models for neural-dharma nodes."""

from neuraldharma.models.model_alignment_level_thresholds import (
    ACTION_LEVEL_THRESHOLDS,
    AGENT_LEVEL_THRESHOLDS,
    ModelAlignmentLevelThresholds,
)
from neuraldharma.models.model_feature_vector import (
    BASE_DIMENSIONS,
    EXTENSION_DIMENSIONS,
    ModelFeatureVector,
)
from neuraldharma.models.model_item_failure import ModelItemFailure

__all__ = [
    "ACTION_LEVEL_THRESHOLDS",
    "AGENT_LEVEL_THRESHOLDS",
    "BASE_DIMENSIONS",
    "EXTENSION_DIMENSIONS",
    "ModelAlignmentLevelThresholds",
    "ModelFeatureVector",
    "ModelItemFailure",
]
