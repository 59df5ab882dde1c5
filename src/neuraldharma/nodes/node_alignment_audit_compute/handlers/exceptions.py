# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Exceptions for the alignment audit.

Error Codes:
    - AUDIT_001: Audit log is not a JSON array (or is not valid JSON)
"""

from __future__ import annotations


class AlignmentAuditError(Exception):
    """Base exception for alignment audit errors.

    Attributes:
        message: Human-readable error description.
        code: Error code (e.g., AUDIT_001).
    """

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


class AuditInputFormatError(AlignmentAuditError, ValueError):
    """Raised when serialized audit input cannot be read as a list of entries.

    Contract Error Code: AUDIT_001
    Recoverable: False (input must be fixed)
    """

    def __init__(self, detail: str) -> None:
        super().__init__(
            f"Audit log must be a JSON array of log entry objects: {detail}",
            code="AUDIT_001",
        )


__all__ = ["AlignmentAuditError", "AuditInputFormatError"]
