# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Handlers for KarmaEvaluatorCompute node."""

from neuraldharma.nodes.node_karma_evaluator_compute.handlers.exceptions import (
    KarmaEvaluationError,
    NonFiniteScoreError,
    PrincipleScoringError,
)
from neuraldharma.nodes.node_karma_evaluator_compute.handlers.handler_core_principles import (
    CORE_PRINCIPLES,
)
from neuraldharma.nodes.node_karma_evaluator_compute.handlers.handler_karma_evaluator import (
    evaluate_action,
    evaluate_batch,
)

__all__ = [
    "CORE_PRINCIPLES",
    "KarmaEvaluationError",
    "NonFiniteScoreError",
    "PrincipleScoringError",
    "evaluate_action",
    "evaluate_batch",
]
