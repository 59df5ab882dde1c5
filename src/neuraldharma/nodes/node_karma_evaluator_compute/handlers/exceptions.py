# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Exceptions for the karma evaluator.

Error Codes:
    - KARMA_001: A principle produced a non-finite score
    - KARMA_002: A principle score function raised
"""

from __future__ import annotations


class KarmaEvaluationError(Exception):
    """Base exception for karma evaluation errors.

    Attributes:
        message: Human-readable error description.
        code: Error code (e.g., KARMA_001).
    """

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


class NonFiniteScoreError(KarmaEvaluationError):
    """Raised when a principle's score function returns NaN or infinity.

    Contract Error Code: KARMA_001
    Recoverable: True (the item is recorded as a failure in batch paths)
    """

    def __init__(self, principle_id: str, value: float) -> None:
        super().__init__(
            f"Principle '{principle_id}' produced a non-finite score: {value!r}",
            code="KARMA_001",
        )
        self.principle_id = principle_id


class PrincipleScoringError(KarmaEvaluationError):
    """Raised when a principle's score function fails.

    The original exception is chained as ``__cause__``.

    Contract Error Code: KARMA_002
    Recoverable: True (the item is recorded as a failure in batch paths)
    """

    def __init__(self, principle_id: str, error: Exception) -> None:
        super().__init__(
            f"Principle '{principle_id}' failed: {type(error).__name__}: {error}",
            code="KARMA_002",
        )
        self.principle_id = principle_id


__all__ = ["KarmaEvaluationError", "NonFiniteScoreError", "PrincipleScoringError"]
