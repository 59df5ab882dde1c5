# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""DharmaConstraint: role-bound boundary gate for agent actions.

Owns the ordered rule set for one role. Rules are kept sorted by
descending priority; equal priorities keep registration order.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from neuraldharma.nodes.node_dharma_constraint_compute.handlers.exceptions import (
    UnknownBoundaryRuleError,
)
from neuraldharma.nodes.node_dharma_constraint_compute.handlers.handler_default_rules import (
    DEFAULT_BOUNDARY_RULES,
)
from neuraldharma.nodes.node_dharma_constraint_compute.handlers.handler_dharma_constraint import (
    evaluate_constraints,
    sort_rules,
)
from neuraldharma.nodes.node_dharma_constraint_compute.models.model_boundary_rule import (
    ModelBoundaryRule,
)
from neuraldharma.nodes.node_dharma_constraint_compute.models.model_constrained_action import (
    ModelConstrainedAction,
)
from neuraldharma.nodes.node_dharma_constraint_compute.models.model_constraint_evaluation import (
    ModelConstraintEvaluation,
)
from neuraldharma.nodes.node_dharma_constraint_compute.models.model_dharma_constraint_config import (
    ModelDharmaConstraintConfig,
)

logger = logging.getLogger(__name__)


class DharmaConstraint:
    """Evaluates proposed actions against prioritized boundary rules.

    Args:
        role: Role the gated agent operates in.
        role_description: Free-text role description.
        rules: Additional rules, merged with the defaults.
        include_defaults: Set False to use only ``rules``.
        proceed_threshold: Compliance score needed for PROCEED.
        caution_threshold: Compliance score needed for CAUTION.
    """

    def __init__(
        self,
        role: str,
        *,
        role_description: str | None = None,
        rules: Sequence[ModelBoundaryRule] | None = None,
        include_defaults: bool = True,
        proceed_threshold: float = 0.6,
        caution_threshold: float = 0.3,
    ) -> None:
        self._config = ModelDharmaConstraintConfig(
            role=role,
            role_description=role_description,
            include_defaults=include_defaults,
            proceed_threshold=proceed_threshold,
            caution_threshold=caution_threshold,
        )
        defaults = DEFAULT_BOUNDARY_RULES if include_defaults else ()
        self._rules = sort_rules([*defaults, *(rules or ())])

    @classmethod
    def from_config(
        cls,
        config: ModelDharmaConstraintConfig,
        rules: Sequence[ModelBoundaryRule] | None = None,
    ) -> DharmaConstraint:
        return cls(
            config.role,
            role_description=config.role_description,
            rules=rules,
            include_defaults=config.include_defaults,
            proceed_threshold=config.proceed_threshold,
            caution_threshold=config.caution_threshold,
        )

    @property
    def config(self) -> ModelDharmaConstraintConfig:
        return self._config

    @property
    def role(self) -> str:
        return self._config.role

    @property
    def role_description(self) -> str:
        return self._config.effective_role_description

    @property
    def rules(self) -> tuple[ModelBoundaryRule, ...]:
        """Active rules, highest priority first."""
        return tuple(self._rules)

    def evaluate(self, action: ModelConstrainedAction) -> ModelConstraintEvaluation:
        return evaluate_constraints(action, self._rules, self._config)

    def is_permitted(self, action: ModelConstrainedAction) -> bool:
        return self.evaluate(action).permitted

    def get_compliance_score(self, action: ModelConstrainedAction) -> float:
        return self.evaluate(action).compliance_score

    def add_rule(self, rule: ModelBoundaryRule) -> None:
        """Register a rule and restore priority order."""
        self._rules = sort_rules([*self._rules, rule])
        logger.debug("Added boundary rule %s (priority %d)", rule.rule_id, rule.priority)

    def remove_rule(self, rule_id: str) -> ModelBoundaryRule:
        """Unregister the first rule with ``rule_id`` and return it.

        Raises:
            UnknownBoundaryRuleError: If no rule has that id.
        """
        for index, rule in enumerate(self._rules):
            if rule.rule_id == rule_id:
                del self._rules[index]
                return rule
        raise UnknownBoundaryRuleError(rule_id)


__all__ = ["DharmaConstraint"]
