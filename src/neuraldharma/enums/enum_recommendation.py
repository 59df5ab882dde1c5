# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Recommendation enum shared by the constraint gate and viveka filter."""

from __future__ import annotations

from enum import Enum


class EnumRecommendation(str, Enum):
    """Recommended handling of an evaluated action."""

    PROCEED = "proceed"
    CAUTION = "caution"
    DENY = "deny"


__all__ = ["EnumRecommendation"]
