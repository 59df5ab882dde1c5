# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Exceptions for the guna classifier.

Error Codes:
    - GUNA_001: Classifier used without a configured feature extractor
"""

from __future__ import annotations


class GunaClassifierError(Exception):
    """Base exception for guna classifier errors.

    Attributes:
        message: Human-readable error description.
        code: Error code (e.g., GUNA_001).
    """

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


class GunaClassifierConfigurationError(GunaClassifierError):
    """Raised when ``classify()`` is called without a feature extractor.

    Contract Error Code: GUNA_001
    Recoverable: False (configure a feature extractor or use classify_features)
    """

    def __init__(self, message: str) -> None:
        super().__init__(message, code="GUNA_001")


__all__ = ["GunaClassifierConfigurationError", "GunaClassifierError"]
