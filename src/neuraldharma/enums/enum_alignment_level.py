# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Alignment level enum for single actions and per-agent summaries.

Ordering Support:
    Levels are ordered by alignment quality and support comparison
    operators:
        CRITICAL < LOW < MEDIUM < HIGH

    Example:
        >>> EnumAlignmentLevel.HIGH > EnumAlignmentLevel.MEDIUM
        True
"""

from __future__ import annotations

from enum import Enum

_ALIGNMENT_LEVEL_WEIGHTS: dict[str, int] = {
    "critical": 0,
    "low": 10,
    "medium": 20,
    "high": 30,
}


class EnumAlignmentLevel(str, Enum):
    """Threshold-bucketed alignment level of a composite dharma score."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    CRITICAL = "critical"

    @property
    def _weight(self) -> int:
        return _ALIGNMENT_LEVEL_WEIGHTS[self.value]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, EnumAlignmentLevel):
            return NotImplemented
        return self._weight < other._weight

    def __le__(self, other: object) -> bool:
        if not isinstance(other, EnumAlignmentLevel):
            return NotImplemented
        return self._weight <= other._weight

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, EnumAlignmentLevel):
            return NotImplemented
        return self._weight > other._weight

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, EnumAlignmentLevel):
            return NotImplemented
        return self._weight >= other._weight


__all__ = ["EnumAlignmentLevel"]
