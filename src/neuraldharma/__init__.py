# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""neural-dharma - dharmic alignment primitives for AI agents.

Components map Bhagavad Gita concepts onto alignment mechanisms: guna
classification, karma (principle) scoring, dharma (role boundary) gating,
nishkama (process-quality) selection and reward shaping, sequence audits,
viveka filtering, sthitaprajna output guarding, and a karma log.

Quick Start - Auditing an action log:
    >>> from neuraldharma import AlignmentAudit
    >>> report = AlignmentAudit().audit_from_json(open("actions.json").read())
    >>> report.verdict.exit_code
    0
"""

from neuraldharma.enums import (
    EnumAlignmentCategory,
    EnumAlignmentLevel,
    EnumAuditVerdict,
    EnumGuardAction,
    EnumGuna,
    EnumRecommendation,
)
from neuraldharma.karma_log import KarmaEntryNotFoundError, KarmaLogger
from neuraldharma.models import ModelFeatureVector
from neuraldharma.nodes.node_alignment_audit_compute import (
    AlignmentAudit,
    AuditInputFormatError,
)
from neuraldharma.nodes.node_dharma_constraint_compute import (
    DharmaConstraint,
    UnknownBoundaryRuleError,
)
from neuraldharma.nodes.node_guna_classifier_compute import (
    GunaClassifier,
    GunaClassifierConfigurationError,
)
from neuraldharma.nodes.node_karma_evaluator_compute import KarmaEvaluator
from neuraldharma.nodes.node_nishkama_objective_compute import NishkamaObjective
from neuraldharma.nodes.node_nishkama_optimizer_compute import (
    EmptyCandidateSetError,
    NishkamaOptimizer,
)
from neuraldharma.nodes.node_sthitaprajna_guard_compute import SthitaprajnaGuard
from neuraldharma.nodes.node_viveka_filter_compute import VivekaFilter
from neuraldharma.reference import GitaVerse
from neuraldharma.settings import NeuralDharmaSettings

__version__ = "0.1.0"

__all__ = [
    # Main API
    "AlignmentAudit",
    "DharmaConstraint",
    "GitaVerse",
    "GunaClassifier",
    "KarmaEvaluator",
    "KarmaLogger",
    "NishkamaObjective",
    "NishkamaOptimizer",
    "SthitaprajnaGuard",
    "VivekaFilter",
    # Configuration
    "NeuralDharmaSettings",
    # Types
    "EnumAlignmentCategory",
    "EnumAlignmentLevel",
    "EnumAuditVerdict",
    "EnumGuardAction",
    "EnumGuna",
    "EnumRecommendation",
    "ModelFeatureVector",
    # Exceptions
    "AuditInputFormatError",
    "EmptyCandidateSetError",
    "GunaClassifierConfigurationError",
    "KarmaEntryNotFoundError",
    "UnknownBoundaryRuleError",
]
