# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Runtime settings for neural-dharma, loaded from environment or YAML.

Environment variables use the ``NEURAL_DHARMA_`` prefix; nested node
sections use ``__`` as delimiter:

    NEURAL_DHARMA_ALIGNMENT_THRESHOLD=0.6
    NEURAL_DHARMA_LOG_LEVEL=DEBUG
    NEURAL_DHARMA_KARMA_EVALUATOR__VIOLATION_THRESHOLD=0.35
    NEURAL_DHARMA_STHITAPRAJNA_GUARD__PREFER_SANITIZE=false

A YAML file holds the same keys in snake_case:

    alignment_threshold: 0.6
    karma_evaluator:
      violation_threshold: 0.35

Values passed explicitly (including those read by ``from_yaml``) take
precedence over the environment. Out-of-range thresholds are clamped when
converted to node config models.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from neuraldharma.karma_log.karma_logger import DEFAULT_MAX_ENTRIES
from neuraldharma.nodes.node_alignment_audit_compute.models.model_alignment_audit_config import (
    ModelAlignmentAuditConfig,
)
from neuraldharma.nodes.node_guna_classifier_compute.models.model_guna_classifier_config import (
    ModelGunaClassifierConfig,
)
from neuraldharma.nodes.node_karma_evaluator_compute.models.model_karma_evaluator_config import (
    ModelKarmaEvaluatorConfig,
)
from neuraldharma.nodes.node_nishkama_objective_compute.models.model_nishkama_objective_config import (
    ModelNishkamaObjectiveConfig,
)
from neuraldharma.nodes.node_nishkama_optimizer_compute.models.model_nishkama_optimizer_config import (
    ModelNishkamaOptimizerConfig,
)
from neuraldharma.nodes.node_sthitaprajna_guard_compute.models.model_sthitaprajna_guard_config import (
    ModelSthitaprajnaGuardConfig,
)
from neuraldharma.nodes.node_viveka_filter_compute.models.model_viveka_filter_config import (
    ModelVivekaFilterConfig,
)

logger = logging.getLogger(__name__)


class NeuralDharmaSettings(BaseSettings):
    """Pydantic Settings for neural-dharma, loaded from environment.

    Audit thresholds sit at the top level because the audit CLI is the
    main consumer; every other component has its own section.
    """

    model_config = SettingsConfigDict(
        env_prefix="NEURAL_DHARMA_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    log_level: str = Field(default="WARNING", description="Root log level for the CLI.")

    alignment_threshold: float = Field(
        default=0.5, description="Audit: scores below this are violations."
    )
    critical_threshold: float = Field(
        default=0.25, description="Audit: scores below this are critical."
    )
    aligned_verdict: float = Field(
        default=0.65, description="Audit: mean score needed for the aligned verdict."
    )
    review_verdict: float = Field(
        default=0.45, description="Audit: mean score needed for needs-review."
    )

    karma_evaluator: ModelKarmaEvaluatorConfig = Field(default_factory=ModelKarmaEvaluatorConfig)
    guna_classifier: ModelGunaClassifierConfig = Field(default_factory=ModelGunaClassifierConfig)
    nishkama_optimizer: ModelNishkamaOptimizerConfig = Field(
        default_factory=ModelNishkamaOptimizerConfig
    )
    nishkama_objective: ModelNishkamaObjectiveConfig = Field(
        default_factory=ModelNishkamaObjectiveConfig
    )
    viveka_filter: ModelVivekaFilterConfig = Field(default_factory=ModelVivekaFilterConfig)
    sthitaprajna_guard: ModelSthitaprajnaGuardConfig = Field(
        default_factory=ModelSthitaprajnaGuardConfig
    )
    karma_log_max_entries: int = Field(default=DEFAULT_MAX_ENTRIES, ge=1)

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: object) -> object:
        if isinstance(value, str):
            level = value.strip().upper()
            if level not in logging.getLevelNamesMapping():
                raise ValueError(f"Unknown log level: {value!r}")
            return level
        return value

    @classmethod
    def from_yaml(cls, path: str | Path) -> NeuralDharmaSettings:
        """Load settings from a YAML mapping; unset keys fall back to env/defaults.

        Raises:
            OSError: If the file cannot be read.
            ValueError: If the file is not a YAML mapping.
        """
        path = Path(path)
        content: object = yaml.safe_load(path.read_text(encoding="utf-8"))
        if content is None:
            content = {}
        if not isinstance(content, dict):
            raise ValueError(
                f"{path} must contain a YAML mapping (got {type(content).__name__})"
            )
        logger.debug("Loaded settings from %s (%d keys)", path, len(content))
        return cls(**content)

    def to_audit_config(self) -> ModelAlignmentAuditConfig:
        """Convert the audit thresholds to a clamped ModelAlignmentAuditConfig."""
        return ModelAlignmentAuditConfig(
            alignment_threshold=self.alignment_threshold,
            critical_threshold=self.critical_threshold,
            aligned_verdict=self.aligned_verdict,
            review_verdict=self.review_verdict,
        )


__all__ = ["NeuralDharmaSettings"]
