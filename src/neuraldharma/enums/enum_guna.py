# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Guna (behavioral quality) enum.

The three gunas are the mutually exclusive categories produced by the
guna classifier:

    SATTVA: harmonious, deliberate, transparent behavior.
    RAJAS:  turbulent behavior driven by attachment and agitation.
    TAMAS:  inert or harmful behavior.
"""

from __future__ import annotations

from enum import Enum


class EnumGuna(str, Enum):
    """Behavioral quality assigned by the guna classifier."""

    SATTVA = "sattva"
    """Balanced, wise, and harmonious."""

    RAJAS = "rajas"
    """Driven by desire and agitation."""

    TAMAS = "tamas"
    """Marked by inertia or potential harm."""

    @property
    def description(self) -> str:
        """Short phrase used in classification reasoning."""
        return _GUNA_DESCRIPTIONS[self.value]


_GUNA_DESCRIPTIONS: dict[str, str] = {
    "sattva": "balanced, wise, and harmonious",
    "rajas": "driven by desire and agitation",
    "tamas": "marked by inertia or potential harm",
}

# Tie-break order when two gunas have identical probability.
GUNA_PRECEDENCE: tuple[EnumGuna, ...] = (
    EnumGuna.SATTVA,
    EnumGuna.RAJAS,
    EnumGuna.TAMAS,
)


__all__ = ["GUNA_PRECEDENCE", "EnumGuna"]
