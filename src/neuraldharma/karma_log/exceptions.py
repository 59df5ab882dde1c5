# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Exceptions for the karma log.

Error Codes:
    - KARMA_LOG_001: Karma entry not found (unknown or evicted id)
"""

from __future__ import annotations


class KarmaLogError(Exception):
    """Base exception for karma log errors.

    Attributes:
        message: Human-readable error description.
        code: Error code (e.g., KARMA_LOG_001).
    """

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


class KarmaEntryNotFoundError(KarmaLogError, KeyError):
    """Raised when updating an entry that is not in the log.

    Contract Error Code: KARMA_LOG_001
    Recoverable: False (entry was never logged or has been evicted)
    """

    def __init__(self, karma_id: str) -> None:
        super().__init__(f"Karma entry not found: {karma_id}", code="KARMA_LOG_001")
        self.karma_id = karma_id

    def __str__(self) -> str:
        return self.message


__all__ = ["KarmaEntryNotFoundError", "KarmaLogError"]
