# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Unit tests for DharmaConstraintCompute."""

from __future__ import annotations

import random

import pytest

from neuraldharma.enums import EnumRecommendation
from neuraldharma.nodes.node_dharma_constraint_compute.handlers.exceptions import (
    UnknownBoundaryRuleError,
)
from neuraldharma.nodes.node_dharma_constraint_compute.models import (
    ModelBoundaryRule,
    ModelConstrainedAction,
    ModelDharmaConstraintConfig,
)
from neuraldharma.nodes.node_dharma_constraint_compute.node import DharmaConstraint

# =============================================================================
# Helpers
# =============================================================================


def _action(**overrides: object) -> ModelConstrainedAction:
    payload: dict[str, object] = {
        "id": "act-1",
        "type": "tool_call",
        "description": "summarize document",
    }
    payload.update(overrides)
    return ModelConstrainedAction.model_validate(payload)


def _rule(rule_id: str, priority: int, violated: bool = False, score: float = 1.0) -> ModelBoundaryRule:
    return ModelBoundaryRule(
        rule_id=rule_id,
        name=rule_id.title(),
        priority=priority,
        violation_fn=lambda _a: violated,
        compliance_fn=lambda _a: score,
    )


# =============================================================================
# Tests: Default rules
# =============================================================================


@pytest.mark.unit
class TestDefaultRules:
    def test_rule_order_by_priority(self) -> None:
        gate = DharmaConstraint("assistant")
        assert [r.rule_id for r in gate.rules] == [
            "ahimsa",
            "satya",
            "role-scope",
            "aparigraha",
            "reversibility",
        ]

    def test_benign_action_proceeds(self) -> None:
        result = DharmaConstraint("assistant").evaluate(_action())
        assert result.permitted is True
        assert result.violations == ()
        assert len(result.passed) == 5
        assert result.compliance_score == pytest.approx(0.96)
        assert result.recommendation == EnumRecommendation.PROCEED
        assert result.reasoning == (
            'Action complies with all 5 boundary rules for role "assistant". '
            "Compliance score: 0.960. Recommendation: proceed."
        )

    def test_high_harm_is_denied(self) -> None:
        result = DharmaConstraint("assistant").evaluate(_action(harmPotential=0.9))
        assert result.permitted is False
        assert result.recommendation == EnumRecommendation.DENY
        assert [v.rule_id for v in result.violations] == ["ahimsa"]
        violation = result.violations[0]
        assert violation.priority == 5
        assert violation.message == 'Action "summarize document" violates Ahimsa (Non-Harm)'
        assert result.reasoning.endswith("Ahimsa (Non-Harm). Action denied.")

    def test_compliance_excludes_violated_rules(self) -> None:
        result = DharmaConstraint("assistant").evaluate(_action(harmPotential=0.9))
        assert len(result.passed) == 4
        # satya 1.0, role-scope 0.8, aparigraha 1.0, reversibility 1.0
        assert result.compliance_score == pytest.approx(3.8 / 4)

    def test_deception_threshold_is_strict(self) -> None:
        gate = DharmaConstraint("assistant")
        assert gate.is_permitted(_action(deceptionLevel=0.6)) is True
        assert gate.is_permitted(_action(deceptionLevel=0.61)) is False

    def test_irreversible_harmful_action_violates_reversibility(self) -> None:
        result = DharmaConstraint("assistant").evaluate(
            _action(harmPotential=0.6, reversible=False)
        )
        assert [v.rule_id for v in result.violations] == ["reversibility"]

    def test_irreversible_low_harm_scores_reduced(self) -> None:
        result = DharmaConstraint("assistant").evaluate(_action(reversible=False))
        scores = {p.rule_id: p.score for p in result.passed}
        assert result.permitted is True
        assert scores["reversibility"] == 0.4

    def test_moderate_risk_gets_caution(self) -> None:
        result = DharmaConstraint("assistant").evaluate(
            _action(harmPotential=0.6, deceptionLevel=0.6, resourceConsumption=0.9)
        )
        assert result.permitted is True
        assert result.compliance_score == pytest.approx(2.7 / 5)
        assert result.recommendation == EnumRecommendation.CAUTION

    def test_role_scope_never_violated(self) -> None:
        gate = DharmaConstraint("assistant")
        role_scope = next(r for r in gate.rules if r.rule_id == "role-scope")
        assert role_scope.is_violated(_action(harmPotential=1.0)) is False
        assert role_scope.compliance_score(_action()) == 0.8


# =============================================================================
# Tests: Configuration and rule management
# =============================================================================


@pytest.mark.unit
class TestConfiguration:
    def test_role_description_default(self) -> None:
        gate = DharmaConstraint("medical-assistant")
        assert gate.role == "medical-assistant"
        assert gate.role_description == "Agent operating in role: medical-assistant"

    def test_custom_rules_only(self) -> None:
        gate = DharmaConstraint("r", rules=[_rule("low", 1, score=0.1)], include_defaults=False)
        result = gate.evaluate(_action())
        assert result.permitted is True
        assert result.recommendation == EnumRecommendation.DENY

    def test_no_rules_scores_zero(self) -> None:
        gate = DharmaConstraint("r", include_defaults=False)
        result = gate.evaluate(_action())
        assert result.permitted is True
        assert result.compliance_score == 0.0
        assert result.recommendation == EnumRecommendation.DENY

    def test_permission_is_and_of_rules_regardless_of_priority(self) -> None:
        gate = DharmaConstraint("r", rules=[_rule("minor", 1, violated=True)])
        assert gate.is_permitted(_action()) is False

    def test_permitted_iff_no_violations_for_random_rules(self) -> None:
        rng = random.Random(1729)
        for _ in range(200):
            rules = [
                _rule(
                    f"rule-{i}",
                    rng.randint(1, 5),
                    violated=rng.random() < 0.3,
                    score=rng.uniform(-0.5, 1.5),
                )
                for i in range(rng.randint(0, 6))
            ]
            flagged = {r.rule_id for r in rules if r.violation_fn(None)}
            gate = DharmaConstraint("r", rules=rules, include_defaults=False)
            result = gate.evaluate(_action())

            assert result.permitted == (not result.violations)
            assert result.permitted == (not flagged)
            assert {v.rule_id for v in result.violations} == flagged
            assert len(result.violations) + len(result.passed) == len(rules)
            assert 0.0 <= result.compliance_score <= 1.0

    def test_add_rule_resorts_stably(self) -> None:
        gate = DharmaConstraint("r", include_defaults=False)
        gate.add_rule(_rule("first", 3))
        gate.add_rule(_rule("top", 5))
        gate.add_rule(_rule("second", 3))
        assert [r.rule_id for r in gate.rules] == ["top", "first", "second"]

    def test_remove_rule(self) -> None:
        gate = DharmaConstraint("r")
        removed = gate.remove_rule("role-scope")
        assert removed.rule_id == "role-scope"
        assert "role-scope" not in [r.rule_id for r in gate.rules]

    def test_remove_unknown_rule_raises(self) -> None:
        with pytest.raises(UnknownBoundaryRuleError) as exc_info:
            DharmaConstraint("r").remove_rule("nope")
        assert exc_info.value.code == "CONSTRAINT_001"

    def test_priority_clamped(self) -> None:
        assert _rule("big", 9).priority == 5
        assert _rule("small", -3).priority == 1

    def test_compliance_score_clamped(self) -> None:
        gate = DharmaConstraint("r", rules=[_rule("wild", 3, score=4.0)], include_defaults=False)
        assert gate.get_compliance_score(_action()) == 1.0

    def test_thresholds_clamped(self) -> None:
        config = ModelDharmaConstraintConfig(role="r", proceed_threshold=1.7, caution_threshold=-1)
        assert config.proceed_threshold == 1.0
        assert config.caution_threshold == 0.0

    def test_from_config(self) -> None:
        config = ModelDharmaConstraintConfig(role="r", include_defaults=False)
        gate = DharmaConstraint.from_config(config, rules=[_rule("only", 2)])
        assert [r.rule_id for r in gate.rules] == ["only"]

    def test_evaluation_serializes_without_callables(self) -> None:
        result = DharmaConstraint("r").evaluate(_action(harmPotential=0.9))
        dumped = result.model_dump(mode="json")
        assert dumped["recommendation"] == "deny"
        assert dumped["violations"][0]["rule_id"] == "ahimsa"
        assert "violation_fn" not in DharmaConstraint("r").rules[0].model_dump()
