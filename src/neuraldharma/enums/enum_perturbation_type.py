# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Kind of input perturbation detected by the stability guard."""

from __future__ import annotations

from enum import Enum


class EnumPerturbationType(str, Enum):
    SEMANTIC = "semantic"
    SYNTACTIC = "syntactic"
    INJECTION = "injection"
    JAILBREAK = "jailbreak"
    NONE = "none"

    @property
    def is_adversarial(self) -> bool:
        """True for perturbations that must be blocked outright."""
        return self in (EnumPerturbationType.INJECTION, EnumPerturbationType.JAILBREAK)


__all__ = ["EnumPerturbationType"]
