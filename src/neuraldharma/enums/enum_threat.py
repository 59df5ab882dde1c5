# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Threat pattern severity and category enums."""

from __future__ import annotations

from enum import Enum


class EnumThreatSeverity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class EnumThreatCategory(str, Enum):
    """Category of a threat pattern.

    Only EXFILTRATION patterns are also applied to outputs (and redacted).
    """

    INJECTION = "injection"
    JAILBREAK = "jailbreak"
    MANIPULATION = "manipulation"
    EXFILTRATION = "exfiltration"


__all__ = ["EnumThreatCategory", "EnumThreatSeverity"]
