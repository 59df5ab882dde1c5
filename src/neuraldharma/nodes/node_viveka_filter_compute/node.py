# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""VivekaFilter: separates dharmic from adharmic action candidates.

Combines ethical boundaries with guna classification of the candidate's
features.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from neuraldharma.nodes.node_guna_classifier_compute.node import GunaClassifier
from neuraldharma.nodes.node_viveka_filter_compute.handlers.handler_default_boundaries import (
    DEFAULT_ETHICAL_BOUNDARIES,
)
from neuraldharma.nodes.node_viveka_filter_compute.handlers.handler_viveka_filter import (
    evaluate_candidate,
    sort_boundaries,
)
from neuraldharma.nodes.node_viveka_filter_compute.models.model_action_candidate import (
    ModelActionCandidate,
)
from neuraldharma.nodes.node_viveka_filter_compute.models.model_ethical_boundary import (
    ModelEthicalBoundary,
)
from neuraldharma.nodes.node_viveka_filter_compute.models.model_viveka_filter_config import (
    ModelVivekaFilterConfig,
)
from neuraldharma.nodes.node_viveka_filter_compute.models.model_viveka_verdict import (
    ModelVivekaVerdict,
)

logger = logging.getLogger(__name__)


class VivekaFilter:
    """Discrimination filter over action candidates.

    Args:
        boundaries: Extra boundaries, appended to the defaults.
        replace_defaults: Use only ``boundaries``.
        guna_classifier: Classifier for candidate features.
        alignment_threshold: Minimum alignment score to pass.
        max_tamas: Maximum tamas probability to pass.
    """

    def __init__(
        self,
        *,
        boundaries: Sequence[ModelEthicalBoundary] | None = None,
        replace_defaults: bool = False,
        guna_classifier: GunaClassifier | None = None,
        alignment_threshold: float = 0.4,
        max_tamas: float = 0.5,
    ) -> None:
        self._config = ModelVivekaFilterConfig(
            alignment_threshold=alignment_threshold,
            max_tamas=max_tamas,
            replace_defaults=replace_defaults,
        )
        defaults = () if replace_defaults else DEFAULT_ETHICAL_BOUNDARIES
        self._boundaries = sort_boundaries([*defaults, *(boundaries or ())])
        self._classifier = guna_classifier or GunaClassifier()

    @classmethod
    def from_config(
        cls,
        config: ModelVivekaFilterConfig,
        *,
        boundaries: Sequence[ModelEthicalBoundary] | None = None,
        guna_classifier: GunaClassifier | None = None,
    ) -> VivekaFilter:
        return cls(
            boundaries=boundaries,
            replace_defaults=config.replace_defaults,
            guna_classifier=guna_classifier,
            alignment_threshold=config.alignment_threshold,
            max_tamas=config.max_tamas,
        )

    @property
    def config(self) -> ModelVivekaFilterConfig:
        return self._config

    @property
    def boundaries(self) -> tuple[ModelEthicalBoundary, ...]:
        """Configured boundaries, highest priority first."""
        return tuple(self._boundaries)

    def evaluate(self, candidate: ModelActionCandidate) -> ModelVivekaVerdict:
        classification = self._classifier.classify_features(candidate.features)
        return evaluate_candidate(candidate, self._boundaries, classification, self._config)

    def is_dharmic(self, candidate: ModelActionCandidate) -> bool:
        return self.evaluate(candidate).dharmic

    def filter(self, candidates: Iterable[ModelActionCandidate]) -> list[ModelActionCandidate]:
        """Keep only dharmic candidates, in input order."""
        return [candidate for candidate in candidates if self.is_dharmic(candidate)]

    def add_boundary(self, boundary: ModelEthicalBoundary) -> None:
        self._boundaries = sort_boundaries([*self._boundaries, boundary])
        logger.debug("Added ethical boundary %r (priority %d)", boundary.name, boundary.priority)


__all__ = ["VivekaFilter"]
