# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""KarmaEvaluatorCompute node: weighted principle scoring of actions."""

from neuraldharma.nodes.node_karma_evaluator_compute.handlers import (
    CORE_PRINCIPLES,
    KarmaEvaluationError,
    NonFiniteScoreError,
    PrincipleScoringError,
    evaluate_action,
    evaluate_batch,
)
from neuraldharma.nodes.node_karma_evaluator_compute.models import (
    ModelBatchEvaluation,
    ModelEvaluatedAction,
    ModelEvaluationPrinciple,
    ModelKarmaEvaluation,
    ModelKarmaEvaluatorConfig,
    ModelPrincipleScore,
)
from neuraldharma.nodes.node_karma_evaluator_compute.node import KarmaEvaluator

__all__ = [
    "CORE_PRINCIPLES",
    "KarmaEvaluationError",
    "KarmaEvaluator",
    "ModelBatchEvaluation",
    "ModelEvaluatedAction",
    "ModelEvaluationPrinciple",
    "ModelKarmaEvaluation",
    "ModelKarmaEvaluatorConfig",
    "ModelPrincipleScore",
    "NonFiniteScoreError",
    "PrincipleScoringError",
    "evaluate_action",
    "evaluate_batch",
]
