# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Shared enums for neural-dharma nodes."""

from neuraldharma.enums.enum_alignment_category import EnumAlignmentCategory
from neuraldharma.enums.enum_alignment_level import EnumAlignmentLevel
from neuraldharma.enums.enum_audit_verdict import EnumAuditVerdict
from neuraldharma.enums.enum_guard_action import EnumGuardAction
from neuraldharma.enums.enum_guna import GUNA_PRECEDENCE, EnumGuna
from neuraldharma.enums.enum_karma import EnumConsequenceSeverity, EnumKarmaClassification
from neuraldharma.enums.enum_perturbation_type import EnumPerturbationType
from neuraldharma.enums.enum_recommendation import EnumRecommendation
from neuraldharma.enums.enum_severity import EnumSeverity
from neuraldharma.enums.enum_threat import EnumThreatCategory, EnumThreatSeverity

__all__ = [
    "GUNA_PRECEDENCE",
    "EnumAlignmentCategory",
    "EnumAlignmentLevel",
    "EnumAuditVerdict",
    "EnumConsequenceSeverity",
    "EnumGuardAction",
    "EnumGuna",
    "EnumKarmaClassification",
    "EnumPerturbationType",
    "EnumRecommendation",
    "EnumSeverity",
    "EnumThreatCategory",
    "EnumThreatSeverity",
]
