# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""SthitaprajnaGuard: keeps agent outputs steady under adversarial input.

The guard owns a bounded history of recent outputs used for drift
detection. One guard instance per conversation or context; call
``reset_history`` when the context changes.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

from neuraldharma.nodes.node_sthitaprajna_guard_compute.handlers.handler_sthitaprajna_guard import (
    SimilarityFn,
    analyze_input,
    guard_output,
    jaccard_similarity,
)
from neuraldharma.nodes.node_sthitaprajna_guard_compute.handlers.handler_threat_patterns import (
    DEFAULT_THREAT_PATTERNS,
)
from neuraldharma.nodes.node_sthitaprajna_guard_compute.models.model_guard_decision import (
    ModelGuardDecision,
    ModelPerturbationAnalysis,
)
from neuraldharma.nodes.node_sthitaprajna_guard_compute.models.model_sthitaprajna_guard_config import (
    DEFAULT_FALLBACK_RESPONSE,
    ModelSthitaprajnaGuardConfig,
)
from neuraldharma.nodes.node_sthitaprajna_guard_compute.models.model_threat_pattern import (
    ModelThreatPattern,
)


class SthitaprajnaGuard:
    """Output stability guard.

    Args:
        similarity_threshold: Inputs less similar to their reference are perturbed.
        max_output_variance: Allowed drift of an output from recent outputs.
        fallback_response: Text released instead of blocked outputs.
        threat_patterns: Extra signatures, appended to the defaults.
        similarity_fn: Text similarity in [0, 1]. Jaccard on tokens by default.
        prefer_sanitize: Sanitize drifting outputs rather than fall back.
        consistency_window: Number of recent outputs kept.
    """

    def __init__(
        self,
        *,
        similarity_threshold: float = 0.85,
        max_output_variance: float = 0.3,
        fallback_response: str = DEFAULT_FALLBACK_RESPONSE,
        threat_patterns: Sequence[ModelThreatPattern] | None = None,
        similarity_fn: SimilarityFn = jaccard_similarity,
        prefer_sanitize: bool = True,
        consistency_window: int = 20,
    ) -> None:
        self._config = ModelSthitaprajnaGuardConfig(
            similarity_threshold=similarity_threshold,
            max_output_variance=max_output_variance,
            fallback_response=fallback_response,
            prefer_sanitize=prefer_sanitize,
            consistency_window=consistency_window,
        )
        self._patterns = [*DEFAULT_THREAT_PATTERNS, *(threat_patterns or ())]
        self._similarity_fn = similarity_fn
        self._history: deque[str] = deque(maxlen=self._config.consistency_window)

    @classmethod
    def from_config(
        cls,
        config: ModelSthitaprajnaGuardConfig,
        *,
        threat_patterns: Sequence[ModelThreatPattern] | None = None,
        similarity_fn: SimilarityFn = jaccard_similarity,
    ) -> SthitaprajnaGuard:
        return cls(
            similarity_threshold=config.similarity_threshold,
            max_output_variance=config.max_output_variance,
            fallback_response=config.fallback_response,
            threat_patterns=threat_patterns,
            similarity_fn=similarity_fn,
            prefer_sanitize=config.prefer_sanitize,
            consistency_window=config.consistency_window,
        )

    @staticmethod
    def jaccard_similarity(a: str, b: str) -> float:
        return jaccard_similarity(a, b)

    @property
    def config(self) -> ModelSthitaprajnaGuardConfig:
        return self._config

    @property
    def threat_patterns(self) -> tuple[ModelThreatPattern, ...]:
        return tuple(self._patterns)

    @property
    def history(self) -> tuple[str, ...]:
        """Recent outputs, oldest first."""
        return tuple(self._history)

    def analyze_input(self, text: str, reference: str | None = None) -> ModelPerturbationAnalysis:
        return analyze_input(text, self._patterns, self._config, self._similarity_fn, reference)

    def guard(
        self,
        output: str,
        input_text: str | None = None,
        reference_input: str | None = None,
    ) -> ModelGuardDecision:
        """Screen ``output`` and record it in the history unless it was replaced."""
        decision, record = guard_output(
            output,
            tuple(self._history),
            self._patterns,
            self._config,
            self._similarity_fn,
            input_text=input_text,
            reference_input=reference_input,
        )
        if record:
            self._history.append(output)
        return decision

    def reset_history(self) -> None:
        self._history.clear()

    def add_threat_pattern(self, pattern: ModelThreatPattern) -> None:
        self._patterns.append(pattern)


__all__ = ["SthitaprajnaGuard"]
