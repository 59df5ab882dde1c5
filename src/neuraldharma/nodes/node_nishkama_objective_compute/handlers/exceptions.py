# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Exceptions for the nishkama objective.

Error Codes:
    - OBJECTIVE_001: A reward or quality function returned NaN or infinity
"""

from __future__ import annotations


class NishkamaObjectiveError(Exception):
    """Base exception for objective errors.

    Attributes:
        message: Human-readable error description.
        code: Error code (e.g., OBJECTIVE_001).
    """

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


class NonFiniteObjectiveValueError(NishkamaObjectiveError, ValueError):
    """Raised when a reward or process quality is not a finite number.

    Contract Error Code: OBJECTIVE_001
    Recoverable: False (the reward or quality function must be fixed)
    """

    def __init__(self, source: str, value: float) -> None:
        super().__init__(
            f"{source} must be finite, got {value!r}",
            code="OBJECTIVE_001",
        )
        self.source = source


__all__ = ["NishkamaObjectiveError", "NonFiniteObjectiveValueError"]
