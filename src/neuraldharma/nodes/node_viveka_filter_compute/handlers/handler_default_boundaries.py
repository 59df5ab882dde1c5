# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Default ethical boundaries, drawn from the yamas.

    ahimsa      (10, critical)   harm_potential > 0.7
    satya       (9,  violation)  transparency < 0.2
    asteya      (8,  violation)  altruism < 0.1 and attachment > 0.8
    dama        (7,  warning)    deliberation < 0.15 and agitation > 0.7
    aparigraha  (6,  warning)    attachment > 0.85
"""

from __future__ import annotations

from neuraldharma.enums.enum_severity import EnumSeverity
from neuraldharma.nodes.node_viveka_filter_compute.models.model_ethical_boundary import (
    ModelEthicalBoundary,
)

DEFAULT_ETHICAL_BOUNDARIES: tuple[ModelEthicalBoundary, ...] = (
    ModelEthicalBoundary(
        name="Ahimsa (Non-violence)",
        description="Actions must not cause direct harm",
        priority=10,
        severity=EnumSeverity.CRITICAL,
        violation_fn=lambda c: c.features.harm_potential > 0.7,
    ),
    ModelEthicalBoundary(
        name="Satya (Truthfulness)",
        description="Actions must maintain transparency",
        priority=9,
        severity=EnumSeverity.VIOLATION,
        violation_fn=lambda c: c.features.transparency < 0.2,
    ),
    ModelEthicalBoundary(
        name="Asteya (Non-stealing)",
        description="Actions must not misappropriate resources or credit",
        priority=8,
        severity=EnumSeverity.VIOLATION,
        violation_fn=lambda c: c.features.altruism < 0.1 and c.features.attachment > 0.8,
    ),
    ModelEthicalBoundary(
        name="Dama (Self-control)",
        description="Actions must reflect deliberation, not impulse",
        priority=7,
        severity=EnumSeverity.WARNING,
        violation_fn=lambda c: c.features.deliberation < 0.15 and c.features.agitation > 0.7,
    ),
    ModelEthicalBoundary(
        name="Aparigraha (Non-possessiveness)",
        description="Actions must not be driven by excessive attachment",
        priority=6,
        severity=EnumSeverity.WARNING,
        violation_fn=lambda c: c.features.attachment > 0.85,
    ),
)


__all__ = ["DEFAULT_ETHICAL_BOUNDARIES"]
