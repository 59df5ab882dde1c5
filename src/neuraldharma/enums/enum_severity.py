# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Severity enum for flagged actions and ethical boundary violations."""

from __future__ import annotations

from enum import Enum


class EnumSeverity(str, Enum):
    """Severity of a flag or boundary violation (WARNING < VIOLATION < CRITICAL)."""

    WARNING = "warning"
    VIOLATION = "violation"
    CRITICAL = "critical"


__all__ = ["EnumSeverity"]
