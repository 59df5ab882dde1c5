# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Built-in threat signatures for the stability guard."""

from __future__ import annotations

from neuraldharma.enums.enum_threat import EnumThreatCategory, EnumThreatSeverity
from neuraldharma.nodes.node_sthitaprajna_guard_compute.models.model_threat_pattern import (
    ModelThreatPattern,
)

DEFAULT_THREAT_PATTERNS: tuple[ModelThreatPattern, ...] = (
    ModelThreatPattern(
        name="Instruction Override",
        pattern=r"ignore\s+(all\s+)?(previous|prior|above)\s+(instructions|prompts|rules)",
        severity=EnumThreatSeverity.CRITICAL,
        category=EnumThreatCategory.JAILBREAK,
    ),
    ModelThreatPattern(
        name="Role Hijack",
        pattern=r"you\s+are\s+now\s+(?:a|an|the)\s+",
        severity=EnumThreatSeverity.HIGH,
        category=EnumThreatCategory.JAILBREAK,
    ),
    ModelThreatPattern(
        name="System Prompt Leak",
        pattern=r"(?:reveal|show|output|print|display)\s+(?:your\s+)?(?:system\s+)?prompt",
        severity=EnumThreatSeverity.HIGH,
        category=EnumThreatCategory.EXFILTRATION,
    ),
    ModelThreatPattern(
        name="Encoding Bypass",
        pattern=r"(?:base64|rot13|hex)\s*(?:decode|encode|convert)",
        severity=EnumThreatSeverity.MEDIUM,
        category=EnumThreatCategory.MANIPULATION,
    ),
    ModelThreatPattern(
        name="DAN Pattern",
        pattern=r"\bDAN\b.*(?:mode|jailbreak|unlock)",
        severity=EnumThreatSeverity.CRITICAL,
        category=EnumThreatCategory.JAILBREAK,
    ),
    ModelThreatPattern(
        name="Prompt Injection Delimiter",
        pattern=r"(?:---|\[INST\]|\[/INST\]|<\|im_start\|>|<\|system\|>)",
        severity=EnumThreatSeverity.HIGH,
        category=EnumThreatCategory.INJECTION,
    ),
)


__all__ = ["DEFAULT_THREAT_PATTERNS"]
