# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Exceptions for the dharma constraint gate.

Error Codes:
    - CONSTRAINT_001: Removing a rule id that is not registered
"""

from __future__ import annotations


class DharmaConstraintError(Exception):
    """Base exception for constraint gate errors.

    Attributes:
        message: Human-readable error description.
        code: Error code (e.g., CONSTRAINT_001).
    """

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


class UnknownBoundaryRuleError(DharmaConstraintError):
    """Raised by ``remove_rule`` for an id that is not registered.

    Contract Error Code: CONSTRAINT_001
    """

    def __init__(self, rule_id: str) -> None:
        super().__init__(
            f"No boundary rule registered with id '{rule_id}'", code="CONSTRAINT_001"
        )
        self.rule_id = rule_id


__all__ = ["DharmaConstraintError", "UnknownBoundaryRuleError"]
