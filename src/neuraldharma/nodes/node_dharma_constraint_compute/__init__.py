# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""DharmaConstraintCompute node: priority-ordered boundary gating of actions."""

from neuraldharma.nodes.node_dharma_constraint_compute.handlers import (
    DEFAULT_BOUNDARY_RULES,
    DharmaConstraintError,
    UnknownBoundaryRuleError,
    evaluate_constraints,
)
from neuraldharma.nodes.node_dharma_constraint_compute.models import (
    ModelBoundaryRule,
    ModelConstrainedAction,
    ModelConstraintEvaluation,
    ModelDharmaConstraintConfig,
    ModelPassedRule,
    ModelViolationReport,
)
from neuraldharma.nodes.node_dharma_constraint_compute.node import DharmaConstraint

__all__ = [
    "DEFAULT_BOUNDARY_RULES",
    "DharmaConstraint",
    "DharmaConstraintError",
    "ModelBoundaryRule",
    "ModelConstrainedAction",
    "ModelConstraintEvaluation",
    "ModelDharmaConstraintConfig",
    "ModelPassedRule",
    "ModelViolationReport",
    "UnknownBoundaryRuleError",
    "evaluate_constraints",
]
