# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Models for DharmaConstraintCompute node."""

from neuraldharma.nodes.node_dharma_constraint_compute.models.model_boundary_rule import (
    MAX_RULE_PRIORITY,
    MIN_RULE_PRIORITY,
    ModelBoundaryRule,
    RulePredicate,
    RuleScoreFn,
)
from neuraldharma.nodes.node_dharma_constraint_compute.models.model_constrained_action import (
    ModelConstrainedAction,
)
from neuraldharma.nodes.node_dharma_constraint_compute.models.model_constraint_evaluation import (
    ModelConstraintEvaluation,
    ModelPassedRule,
    ModelViolationReport,
)
from neuraldharma.nodes.node_dharma_constraint_compute.models.model_dharma_constraint_config import (
    ModelDharmaConstraintConfig,
)

__all__ = [
    "MAX_RULE_PRIORITY",
    "MIN_RULE_PRIORITY",
    "ModelBoundaryRule",
    "ModelConstrainedAction",
    "ModelConstraintEvaluation",
    "ModelDharmaConstraintConfig",
    "ModelPassedRule",
    "ModelViolationReport",
    "RulePredicate",
    "RuleScoreFn",
]
