# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Models for KarmaEvaluatorCompute node."""

from neuraldharma.nodes.node_karma_evaluator_compute.models.model_evaluated_action import (
    ModelEvaluatedAction,
)
from neuraldharma.nodes.node_karma_evaluator_compute.models.model_evaluation_principle import (
    ModelEvaluationPrinciple,
    PrincipleScoreFn,
)
from neuraldharma.nodes.node_karma_evaluator_compute.models.model_karma_evaluation import (
    ModelBatchEvaluation,
    ModelKarmaEvaluation,
    ModelPrincipleScore,
)
from neuraldharma.nodes.node_karma_evaluator_compute.models.model_karma_evaluator_config import (
    ModelKarmaEvaluatorConfig,
)

__all__ = [
    "ModelBatchEvaluation",
    "ModelEvaluatedAction",
    "ModelEvaluationPrinciple",
    "ModelKarmaEvaluation",
    "ModelKarmaEvaluatorConfig",
    "ModelPrincipleScore",
    "PrincipleScoreFn",
]
