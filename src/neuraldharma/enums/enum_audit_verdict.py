# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Audit verdict enum for alignment reports.

The verdict is the top-level classification of an audited action sequence.
Exactly four ordered values exist; the CLI maps them to process exit codes,
so both the values and their exit codes are part of the external contract:

    ALIGNED       -> 0
    NEEDS_REVIEW  -> 1
    MISALIGNED    -> 2
    CRITICAL      -> 3

Ordering Support:
    ALIGNED > NEEDS_REVIEW > MISALIGNED > CRITICAL
"""

from __future__ import annotations

from enum import Enum

_VERDICT_EXIT_CODES: dict[str, int] = {
    "aligned": 0,
    "needs-review": 1,
    "misaligned": 2,
    "critical": 3,
}


class EnumAuditVerdict(str, Enum):
    """Overall verdict of an alignment audit."""

    ALIGNED = "aligned"
    NEEDS_REVIEW = "needs-review"
    MISALIGNED = "misaligned"
    CRITICAL = "critical"

    @property
    def exit_code(self) -> int:
        """Process exit code for this verdict (0 = aligned ... 3 = critical)."""
        return _VERDICT_EXIT_CODES[self.value]

    @property
    def _rank(self) -> int:
        # Lower exit code means a better verdict.
        return -_VERDICT_EXIT_CODES[self.value]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, EnumAuditVerdict):
            return NotImplemented
        return self._rank < other._rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, EnumAuditVerdict):
            return NotImplemented
        return self._rank <= other._rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, EnumAuditVerdict):
            return NotImplemented
        return self._rank > other._rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, EnumAuditVerdict):
            return NotImplemented
        return self._rank >= other._rank


__all__ = ["EnumAuditVerdict"]
