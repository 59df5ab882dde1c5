# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Action taken by the stability guard on an output."""

from __future__ import annotations

from enum import Enum


class EnumGuardAction(str, Enum):
    """What the guard did with an output.

    PASS: output released unchanged.
    SANITIZE: output released with redactions or reduced confidence.
    BLOCK: output replaced by the fallback response (adversarial input or
        stability too low).
    FALLBACK: output replaced because it drifted too far from history.
    """

    PASS = "pass"
    SANITIZE = "sanitize"
    BLOCK = "block"
    FALLBACK = "fallback"


__all__ = ["EnumGuardAction"]
