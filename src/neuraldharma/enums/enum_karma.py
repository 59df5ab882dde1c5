# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Enums for the karma (action/consequence) log."""

from __future__ import annotations

from enum import Enum


class EnumKarmaClassification(str, Enum):
    """Post-hoc dharmic classification of a logged action."""

    DHARMIC = "dharmic"
    ADHARMIC = "adharmic"
    NEUTRAL = "neutral"


class EnumConsequenceSeverity(str, Enum):
    """Severity of an observed consequence, ordered by ``rank``."""

    NEGLIGIBLE = "negligible"
    MINOR = "minor"
    MODERATE = "moderate"
    MAJOR = "major"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]


_SEVERITY_RANK = {severity: rank for rank, severity in enumerate(EnumConsequenceSeverity)}


__all__ = ["EnumConsequenceSeverity", "EnumKarmaClassification"]
