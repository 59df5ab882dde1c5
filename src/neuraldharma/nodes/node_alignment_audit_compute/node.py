# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""AlignmentAudit: reports over sequences of logged agent actions.

Evaluation is delegated to a KarmaEvaluator; statistics, flagging, verdict
and rendering live in the pure handlers of this node.

Example:
    >>> audit = AlignmentAudit()
    >>> report = audit.audit(entries)
    >>> report.verdict
    <EnumAuditVerdict.ALIGNED: 'aligned'>
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any
from uuid import uuid4

from neuraldharma.models.model_alignment_level_thresholds import (
    AGENT_LEVEL_THRESHOLDS,
    ModelAlignmentLevelThresholds,
)
from neuraldharma.nodes.node_alignment_audit_compute.handlers.handler_alignment_audit import (
    audit_entries,
    parse_audit_json,
)
from neuraldharma.nodes.node_alignment_audit_compute.handlers.handler_report_format import (
    format_report,
)
from neuraldharma.nodes.node_alignment_audit_compute.models.model_alignment_audit_config import (
    ModelAlignmentAuditConfig,
)
from neuraldharma.nodes.node_alignment_audit_compute.models.model_alignment_report import (
    ModelAlignmentReport,
)
from neuraldharma.nodes.node_alignment_audit_compute.models.model_audit_log_entry import (
    ModelAuditLogEntry,
)
from neuraldharma.nodes.node_karma_evaluator_compute.node import KarmaEvaluator
from neuraldharma.utils.util_clock import Clock, utc_now

IdFactory = Callable[[], str]


def default_audit_id() -> str:
    return f"audit_{uuid4().hex}"


class AlignmentAudit:
    """Audits ordered action logs for dharmic alignment.

    Args:
        evaluator: Scorer for individual actions. A default KarmaEvaluator
            is created when None.
        alignment_threshold: Scores below this are violations.
        critical_threshold: Scores below this are critical.
        aligned_verdict: Mean score needed for the aligned verdict.
        review_verdict: Mean score needed for the needs-review verdict.
        agent_level_thresholds: Scale used to bucket per-agent means.
        clock: Source of report timestamps.
        id_factory: Source of audit ids.
    """

    def __init__(
        self,
        *,
        evaluator: KarmaEvaluator | None = None,
        alignment_threshold: float = 0.5,
        critical_threshold: float = 0.25,
        aligned_verdict: float = 0.65,
        review_verdict: float = 0.45,
        agent_level_thresholds: ModelAlignmentLevelThresholds = AGENT_LEVEL_THRESHOLDS,
        clock: Clock = utc_now,
        id_factory: IdFactory = default_audit_id,
    ) -> None:
        self._evaluator = evaluator or KarmaEvaluator(clock=clock)
        self._config = ModelAlignmentAuditConfig(
            alignment_threshold=alignment_threshold,
            critical_threshold=critical_threshold,
            aligned_verdict=aligned_verdict,
            review_verdict=review_verdict,
            agent_level_thresholds=agent_level_thresholds,
        )
        self._clock = clock
        self._id_factory = id_factory

    @classmethod
    def from_config(
        cls,
        config: ModelAlignmentAuditConfig,
        *,
        evaluator: KarmaEvaluator | None = None,
        clock: Clock = utc_now,
        id_factory: IdFactory = default_audit_id,
    ) -> AlignmentAudit:
        return cls(
            evaluator=evaluator,
            alignment_threshold=config.alignment_threshold,
            critical_threshold=config.critical_threshold,
            aligned_verdict=config.aligned_verdict,
            review_verdict=config.review_verdict,
            agent_level_thresholds=config.agent_level_thresholds,
            clock=clock,
            id_factory=id_factory,
        )

    @property
    def config(self) -> ModelAlignmentAuditConfig:
        return self._config

    @property
    def evaluator(self) -> KarmaEvaluator:
        return self._evaluator

    def audit(
        self, entries: Iterable[ModelAuditLogEntry | Mapping[str, Any]]
    ) -> ModelAlignmentReport:
        """Run a full audit. Malformed entries end up in ``report.failures``.

        Raises:
            AuditInputFormatError: If ``entries`` is a single entry or a
                string instead of a collection.
        """
        return audit_entries(
            entries,
            self._evaluator.evaluate,
            self._config,
            generated_at=self._clock(),
            audit_id=self._id_factory(),
        )

    def audit_from_json(self, text: str) -> ModelAlignmentReport:
        """Audit a JSON array of log entries.

        Raises:
            AuditInputFormatError: If ``text`` is not a JSON array.
        """
        return self.audit(parse_audit_json(text))

    @staticmethod
    def format_report(report: ModelAlignmentReport) -> str:
        return format_report(report)


__all__ = ["AlignmentAudit", "IdFactory", "default_audit_id"]
