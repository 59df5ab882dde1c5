# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""NishkamaObjective: wrap a reward function with process-quality damping.

The returned reward depends on how an action was taken as well as on what
it achieved.

Example:
    >>> objective = NishkamaObjective(task_reward, process_weight=0.6)
    >>> result = objective.compute(state, action, next_state, quality_input)
    >>> result.modified_reward
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

from neuraldharma.nodes.node_nishkama_objective_compute.handlers.exceptions import (
    NonFiniteObjectiveValueError,
)
from neuraldharma.nodes.node_nishkama_objective_compute.handlers.handler_nishkama_objective import (
    default_quality_fn,
    reshape_reward,
)
from neuraldharma.nodes.node_nishkama_objective_compute.models.model_nishkama_objective_config import (
    ModelNishkamaObjectiveConfig,
)
from neuraldharma.nodes.node_nishkama_objective_compute.models.model_objective_result import (
    ModelObjectiveResult,
)
from neuraldharma.nodes.node_nishkama_objective_compute.models.model_process_quality_input import (
    ModelProcessQualityInput,
)
from neuraldharma.utils.util_scoring import clamp, is_finite_score

StateT = TypeVar("StateT")
ActionT = TypeVar("ActionT")

RewardFunction = Callable[[StateT, ActionT, StateT], float]
QualityFunction = Callable[[ModelProcessQualityInput], float]


class NishkamaObjective(Generic[StateT, ActionT]):
    """Reward reshaper combining task reward with process quality.

    Args:
        reward_fn: (state, action, next_state) -> reward.
        process_weight: lambda in [0, 1], clamped.
        quality_fn: Process quality function; defaults to a weighted
            average of six dharmic process principles.
        recommendation_threshold: Minimum Q for ``recommended``.
        allow_negative_rewards: Allow negative rewards for high-Q actions.
        reward_range: (r_min, r_max) of ``reward_fn``.
    """

    def __init__(
        self,
        reward_fn: RewardFunction[StateT, ActionT],
        *,
        process_weight: float = 0.5,
        quality_fn: QualityFunction | None = None,
        recommendation_threshold: float = 0.3,
        allow_negative_rewards: bool = True,
        reward_range: tuple[float, float] = (-1.0, 1.0),
    ) -> None:
        self._reward_fn = reward_fn
        self._quality_fn = quality_fn or default_quality_fn
        self._config = ModelNishkamaObjectiveConfig(
            process_weight=process_weight,
            recommendation_threshold=recommendation_threshold,
            allow_negative_rewards=allow_negative_rewards,
            reward_range=reward_range,
        )

    @classmethod
    def from_config(
        cls,
        reward_fn: RewardFunction[StateT, ActionT],
        config: ModelNishkamaObjectiveConfig,
        *,
        quality_fn: QualityFunction | None = None,
    ) -> NishkamaObjective[StateT, ActionT]:
        return cls(
            reward_fn,
            process_weight=config.process_weight,
            quality_fn=quality_fn,
            recommendation_threshold=config.recommendation_threshold,
            allow_negative_rewards=config.allow_negative_rewards,
            reward_range=config.reward_range,
        )

    @property
    def config(self) -> ModelNishkamaObjectiveConfig:
        return self._config

    @property
    def process_weight(self) -> float:
        return self._config.process_weight

    @process_weight.setter
    def process_weight(self, weight: float) -> None:
        self._config = self._config.model_copy(update={"process_weight": clamp(weight)})

    def compute(
        self,
        state: StateT,
        action: ActionT,
        next_state: StateT,
        quality_input: ModelProcessQualityInput,
    ) -> ModelObjectiveResult:
        """Evaluate the wrapped reward and reshape it by process quality."""
        original_reward = float(self._reward_fn(state, action, next_state))
        quality = self.get_process_quality(quality_input)
        return reshape_reward(original_reward, quality, self._config)

    def get_process_quality(self, quality_input: ModelProcessQualityInput) -> float:
        """Q for ``quality_input``, clamped to [0, 1].

        Raises:
            NonFiniteObjectiveValueError: If the quality function returns NaN
                or infinity.
        """
        quality = float(self._quality_fn(quality_input))
        if not is_finite_score(quality):
            raise NonFiniteObjectiveValueError("Process quality", quality)
        return clamp(quality)

    @classmethod
    def pure_nishkama(
        cls, quality_fn: QualityFunction | None = None
    ) -> NishkamaObjective[StateT, ActionT]:
        """lambda = 1 objective whose reward comes from a constant neutral 0."""
        return cls(
            lambda _state, _action, _next_state: 0.0,
            process_weight=1.0,
            quality_fn=quality_fn,
        )

    @classmethod
    def conventional(
        cls, reward_fn: RewardFunction[StateT, ActionT]
    ) -> NishkamaObjective[StateT, ActionT]:
        """lambda = 0 objective: the wrapped reward passes through unchanged."""
        return cls(reward_fn, process_weight=0.0)


__all__ = ["NishkamaObjective", "QualityFunction", "RewardFunction"]
