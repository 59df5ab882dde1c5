# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Default boundary rules.

    ahimsa        p5  violated: harm > 0.7                    score: 1 - harm
    satya         p5  violated: deception > 0.6               score: 1 - deception
    aparigraha    p3  violated: resource > 0.9                score: 1 - resource
    role-scope    p4  never violated                          score: 0.8
    reversibility p2  violated: irreversible and harm > 0.5   score: 1.0 (0.4 if irreversible)

The role-scope rule is a placeholder for per-application role logic. It is
kept so that it contributes to the compliance average.
"""

from __future__ import annotations

from neuraldharma.nodes.node_dharma_constraint_compute.models.model_boundary_rule import (
    ModelBoundaryRule,
)
from neuraldharma.nodes.node_dharma_constraint_compute.models.model_constrained_action import (
    ModelConstrainedAction,
)


def _harm(action: ModelConstrainedAction) -> float:
    return action.harm_potential or 0.0


def _deception(action: ModelConstrainedAction) -> float:
    return action.deception_level or 0.0


def _resource(action: ModelConstrainedAction) -> float:
    return action.resource_consumption or 0.0


DEFAULT_BOUNDARY_RULES: tuple[ModelBoundaryRule, ...] = (
    ModelBoundaryRule(
        rule_id="ahimsa",
        name="Ahimsa (Non-Harm)",
        grounding="BG 16.2: abhayam sattva-samsuddhir, fearlessness, purity of being",
        priority=5,
        violation_fn=lambda a: _harm(a) > 0.7,
        compliance_fn=lambda a: 1.0 - _harm(a),
    ),
    ModelBoundaryRule(
        rule_id="satya",
        name="Satya (Truthfulness)",
        grounding="BG 17.15: satyam priyahitam, truth that is beneficial and pleasant",
        priority=5,
        violation_fn=lambda a: _deception(a) > 0.6,
        compliance_fn=lambda a: 1.0 - _deception(a),
    ),
    ModelBoundaryRule(
        rule_id="aparigraha",
        name="Aparigraha (Non-Greed)",
        grounding="BG 4.21: nirasir yata-cittatma, free from desire, self-controlled",
        priority=3,
        violation_fn=lambda a: _resource(a) > 0.9,
        compliance_fn=lambda a: 1.0 - _resource(a),
    ),
    ModelBoundaryRule(
        rule_id="reversibility",
        name="Reversibility (Ksama, Forbearance)",
        grounding="BG 16.3: ksama, capacity to undo; prefer reversible actions",
        priority=2,
        violation_fn=lambda a: a.reversible is False and _harm(a) > 0.5,
        compliance_fn=lambda a: 0.4 if a.reversible is False else 1.0,
    ),
    ModelBoundaryRule(
        rule_id="role-scope",
        name="Svadharma Scope (Role Adherence)",
        grounding="BG 3.35: sreyan svadharmo, better to act within one's own dharma",
        priority=4,
        violation_fn=lambda _a: False,
        compliance_fn=lambda _a: 0.8,
    ),
)


__all__ = ["DEFAULT_BOUNDARY_RULES"]
