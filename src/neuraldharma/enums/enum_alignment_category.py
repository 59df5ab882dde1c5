# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""AI alignment categories used to index reference verses."""

from __future__ import annotations

from enum import Enum


class EnumAlignmentCategory(str, Enum):
    REWARD_SHAPING = "reward-shaping"
    ADVERSARIAL_ROBUSTNESS = "adversarial-robustness"
    VALUE_ALIGNMENT = "value-alignment"
    BEHAVIORAL_CLASSIFICATION = "behavioral-classification"
    OVERSIGHT_TRANSPARENCY = "oversight-transparency"
    OBJECTIVE_FUNCTION = "objective-function"
    ROLE_CONSTRAINTS = "role-constraints"
    HARM_AVOIDANCE = "harm-avoidance"
    HONESTY_CALIBRATION = "honesty-calibration"
    GOODHARTS_LAW = "goodharts-law"


__all__ = ["EnumAlignmentCategory"]
