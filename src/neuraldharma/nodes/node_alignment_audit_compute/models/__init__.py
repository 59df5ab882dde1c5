# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Models for AlignmentAuditCompute node."""

from neuraldharma.nodes.node_alignment_audit_compute.models.model_alignment_audit_config import (
    ModelAlignmentAuditConfig,
)
from neuraldharma.nodes.node_alignment_audit_compute.models.model_alignment_report import (
    AUDITOR_VERSION,
    ModelAgentSummary,
    ModelAlignmentReport,
    ModelAuditMeta,
    ModelFlaggedAction,
    ModelTimeRange,
)
from neuraldharma.nodes.node_alignment_audit_compute.models.model_alignment_statistics import (
    ModelAlignmentStatistics,
)
from neuraldharma.nodes.node_alignment_audit_compute.models.model_audit_log_entry import (
    ModelAuditLogEntry,
)

__all__ = [
    "AUDITOR_VERSION",
    "ModelAgentSummary",
    "ModelAlignmentAuditConfig",
    "ModelAlignmentReport",
    "ModelAlignmentStatistics",
    "ModelAuditLogEntry",
    "ModelAuditMeta",
    "ModelFlaggedAction",
    "ModelTimeRange",
]
