# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Alignment audit report models.

A report is built fresh per audit and never mutated. Flagged actions hold
value copies of their log entries, so the report is fully serializable
with ``model_dump(mode="json")``.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from neuraldharma.enums.enum_alignment_level import EnumAlignmentLevel
from neuraldharma.enums.enum_audit_verdict import EnumAuditVerdict
from neuraldharma.enums.enum_severity import EnumSeverity
from neuraldharma.models.model_item_failure import ModelItemFailure
from neuraldharma.nodes.node_alignment_audit_compute.models.model_alignment_statistics import (
    ModelAlignmentStatistics,
)
from neuraldharma.nodes.node_alignment_audit_compute.models.model_audit_log_entry import (
    ModelAuditLogEntry,
)
from neuraldharma.nodes.node_karma_evaluator_compute.models.model_karma_evaluation import (
    ModelKarmaEvaluation,
)

AUDITOR_VERSION = "0.1.0"


class ModelTimeRange(BaseModel):
    """Earliest and latest entry timestamps (epoch ms), 0 when unknown."""

    model_config = ConfigDict(frozen=True)

    start: int = 0
    end: int = 0


class ModelAuditMeta(BaseModel):
    model_config = ConfigDict(frozen=True)

    generated_at: datetime = Field(description="UTC time the report was generated.")
    audit_id: str = Field(description="Unique audit identifier.")
    action_count: int = Field(ge=0, description="Number of input entries.")
    time_range: ModelTimeRange = Field(default_factory=ModelTimeRange)
    auditor_version: str = Field(default=AUDITOR_VERSION)


class ModelAgentSummary(BaseModel):
    """Per-agent aggregate over that agent's entries."""

    model_config = ConfigDict(frozen=True)

    agent_id: str
    action_count: int = Field(ge=1)
    mean_dharma_score: float = Field(ge=0.0, le=1.0)
    alignment_level: EnumAlignmentLevel
    top_violations: tuple[str, ...] = Field(default=(), max_length=3)
    top_commendations: tuple[str, ...] = Field(default=(), max_length=3)


class ModelFlaggedAction(BaseModel):
    """An entry whose evaluation needs attention."""

    model_config = ConfigDict(frozen=True)

    action: ModelAuditLogEntry = Field(description="Value copy of the flagged log entry.")
    evaluation: ModelKarmaEvaluation
    flag_reason: str
    severity: EnumSeverity


class ModelAlignmentReport(BaseModel):
    """Result of auditing an ordered sequence of agent actions."""

    model_config = ConfigDict(frozen=True)

    meta: ModelAuditMeta
    verdict: EnumAuditVerdict
    overall_dharma_score: float = Field(ge=0.0, le=1.0)
    statistics: ModelAlignmentStatistics
    agent_summaries: tuple[ModelAgentSummary, ...] = ()
    evaluations: tuple[ModelKarmaEvaluation, ...] = Field(
        default=(), description="Evaluations, highest score first."
    )
    flagged_actions: tuple[ModelFlaggedAction, ...] = Field(
        default=(), description="Flagged entries, highest score first."
    )
    patterns: tuple[str, ...] = ()
    recommendations: tuple[str, ...] = Field(min_length=1)
    philosophical_context: str
    principle_breakdown: dict[str, float] = Field(
        default_factory=dict, description="Principle id -> mean raw score."
    )
    failures: tuple[ModelItemFailure, ...] = Field(
        default=(), description="Entries that could not be validated or evaluated."
    )


__all__ = [
    "AUDITOR_VERSION",
    "ModelAgentSummary",
    "ModelAlignmentReport",
    "ModelAuditMeta",
    "ModelFlaggedAction",
    "ModelTimeRange",
]
