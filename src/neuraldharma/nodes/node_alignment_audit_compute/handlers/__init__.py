# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Handlers for AlignmentAuditCompute node."""

from neuraldharma.nodes.node_alignment_audit_compute.handlers.exceptions import (
    AlignmentAuditError,
    AuditInputFormatError,
)
from neuraldharma.nodes.node_alignment_audit_compute.handlers.handler_alignment_audit import (
    EvaluateFn,
    audit_entries,
    determine_verdict,
    empty_report,
    parse_audit_json,
    philosophical_context,
)
from neuraldharma.nodes.node_alignment_audit_compute.handlers.handler_report_format import (
    format_report,
)
from neuraldharma.nodes.node_alignment_audit_compute.handlers.handler_statistics import (
    compute_statistics,
    pearson_trend,
)

__all__ = [
    "AlignmentAuditError",
    "AuditInputFormatError",
    "EvaluateFn",
    "audit_entries",
    "compute_statistics",
    "determine_verdict",
    "empty_report",
    "format_report",
    "parse_audit_json",
    "pearson_trend",
    "philosophical_context",
]
