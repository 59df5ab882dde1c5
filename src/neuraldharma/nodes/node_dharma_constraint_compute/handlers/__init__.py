# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Handlers for DharmaConstraintCompute node."""

from neuraldharma.nodes.node_dharma_constraint_compute.handlers.exceptions import (
    DharmaConstraintError,
    UnknownBoundaryRuleError,
)
from neuraldharma.nodes.node_dharma_constraint_compute.handlers.handler_default_rules import (
    DEFAULT_BOUNDARY_RULES,
)
from neuraldharma.nodes.node_dharma_constraint_compute.handlers.handler_dharma_constraint import (
    evaluate_constraints,
    recommend,
    sort_rules,
)

__all__ = [
    "DEFAULT_BOUNDARY_RULES",
    "DharmaConstraintError",
    "UnknownBoundaryRuleError",
    "evaluate_constraints",
    "recommend",
    "sort_rules",
]
