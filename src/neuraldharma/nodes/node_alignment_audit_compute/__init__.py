# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""AlignmentAuditCompute node: statistics, verdicts and reports over action logs."""

from neuraldharma.nodes.node_alignment_audit_compute.handlers import (
    AlignmentAuditError,
    AuditInputFormatError,
    format_report,
)
from neuraldharma.nodes.node_alignment_audit_compute.models import (
    ModelAgentSummary,
    ModelAlignmentAuditConfig,
    ModelAlignmentReport,
    ModelAlignmentStatistics,
    ModelAuditLogEntry,
    ModelAuditMeta,
    ModelFlaggedAction,
    ModelTimeRange,
)
from neuraldharma.nodes.node_alignment_audit_compute.node import AlignmentAudit

__all__ = [
    "AlignmentAudit",
    "AlignmentAuditError",
    "AuditInputFormatError",
    "ModelAgentSummary",
    "ModelAlignmentAuditConfig",
    "ModelAlignmentReport",
    "ModelAlignmentStatistics",
    "ModelAuditLogEntry",
    "ModelAuditMeta",
    "ModelFlaggedAction",
    "ModelTimeRange",
    "format_report",
]
