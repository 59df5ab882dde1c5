# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Exceptions for the nishkama optimizer.

Error Codes:
    - OPTIMIZER_001: Optimization requested over an empty candidate set
"""

from __future__ import annotations


class NishkamaOptimizerError(Exception):
    """Base exception for optimizer errors.

    Attributes:
        message: Human-readable error description.
        code: Error code (e.g., OPTIMIZER_001).
    """

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


class EmptyCandidateSetError(NishkamaOptimizerError, ValueError):
    """Raised when ``optimize`` receives no candidates.

    Contract Error Code: OPTIMIZER_001
    Recoverable: False (caller must supply at least one candidate)
    """

    def __init__(self) -> None:
        super().__init__(
            "Cannot optimize empty action set. At least one action required.",
            code="OPTIMIZER_001",
        )


__all__ = ["EmptyCandidateSetError", "NishkamaOptimizerError"]
