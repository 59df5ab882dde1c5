# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""GunaClassifier: behavioral guna classification.

Assigns one of three qualities to an action's feature vector:

  Sattva - goodness, harmony, wisdom, balance
  Rajas  - passion, activity, desire, turbulence
  Tamas  - ignorance, inertia, darkness, harm

The classifier owns its weight configuration; classification itself is
delegated to the pure ``classify_features`` handler.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from neuraldharma.models.model_feature_vector import ModelFeatureVector
from neuraldharma.nodes.node_guna_classifier_compute.handlers.exceptions import (
    GunaClassifierConfigurationError,
)
from neuraldharma.nodes.node_guna_classifier_compute.handlers.handler_guna_classifier import (
    classify_features,
)
from neuraldharma.nodes.node_guna_classifier_compute.models.model_guna_classification import (
    ModelGunaClassification,
)
from neuraldharma.nodes.node_guna_classifier_compute.models.model_guna_classifier_config import (
    ModelGunaClassifierConfig,
)
from neuraldharma.nodes.node_guna_classifier_compute.models.model_guna_weights import (
    DEFAULT_GUNA_WEIGHTS,
    ModelGunaWeights,
)

FeatureExtractor = Callable[[Any], ModelFeatureVector]


class GunaClassifier:
    """Weighted-feature guna classifier.

    Args:
        weights: Per-guna weight overrides, merged over the defaults.
        feature_extractor: Optional callable turning an arbitrary action into
            a feature vector, used by ``classify()``.
        dominance_threshold: Margin below which a classification is mixed.
    """

    def __init__(
        self,
        *,
        weights: ModelGunaWeights | Mapping[str, Mapping[str, float]] | None = None,
        feature_extractor: FeatureExtractor | None = None,
        dominance_threshold: float = 0.1,
    ) -> None:
        self._config = ModelGunaClassifierConfig(
            weights=DEFAULT_GUNA_WEIGHTS.merged(weights),
            dominance_threshold=dominance_threshold,
        )
        self._feature_extractor = feature_extractor

    @classmethod
    def from_config(
        cls,
        config: ModelGunaClassifierConfig,
        *,
        feature_extractor: FeatureExtractor | None = None,
    ) -> GunaClassifier:
        return cls(
            weights=config.weights,
            feature_extractor=feature_extractor,
            dominance_threshold=config.dominance_threshold,
        )

    @property
    def config(self) -> ModelGunaClassifierConfig:
        """Current (immutable) configuration snapshot."""
        return self._config

    def classify_features(self, features: ModelFeatureVector) -> ModelGunaClassification:
        """Classify a pre-computed feature vector."""
        return classify_features(features, self._config)

    def classify(self, action: Any) -> ModelGunaClassification:
        """Classify an arbitrary action through the configured feature extractor.

        Raises:
            GunaClassifierConfigurationError: If no feature extractor is configured.
        """
        if self._feature_extractor is None:
            raise GunaClassifierConfigurationError(
                "No feature extractor configured. Use classify_features() with a "
                "ModelFeatureVector, or pass feature_extractor to the constructor."
            )
        return self.classify_features(self._feature_extractor(action))

    def is_sattvic(self, features: ModelFeatureVector, threshold: float = 0.5) -> bool:
        """True if P(sattva) reaches ``threshold``."""
        return self.classify_features(features).scores.sattva >= threshold

    def is_tamasic(self, features: ModelFeatureVector, threshold: float = 0.4) -> bool:
        """True if P(tamas) reaches ``threshold``."""
        return self.classify_features(features).scores.tamas >= threshold

    def get_weights(self) -> ModelGunaWeights:
        """Deep copy of the active weights."""
        return self._config.weights.model_copy(deep=True)

    def update_weights(
        self, updates: ModelGunaWeights | Mapping[str, Mapping[str, float]]
    ) -> None:
        """Merge weight updates into the active configuration."""
        self._config = self._config.model_copy(
            update={"weights": self._config.weights.merged(updates)}
        )


__all__ = ["FeatureExtractor", "GunaClassifier"]
