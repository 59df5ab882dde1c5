# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Unit tests for AlignmentAuditCompute."""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from typing import Any

import pytest

from neuraldharma.enums import EnumAlignmentLevel, EnumAuditVerdict, EnumSeverity
from neuraldharma.nodes.node_alignment_audit_compute.handlers.exceptions import (
    AuditInputFormatError,
)
from neuraldharma.nodes.node_alignment_audit_compute.handlers.handler_alignment_audit import (
    determine_verdict,
)
from neuraldharma.nodes.node_alignment_audit_compute.handlers.handler_statistics import (
    compute_statistics,
    pearson_trend,
)
from neuraldharma.nodes.node_alignment_audit_compute.models import (
    ModelAlignmentAuditConfig,
    ModelAlignmentStatistics,
    ModelAuditLogEntry,
)
from neuraldharma.nodes.node_alignment_audit_compute.node import AlignmentAudit
from neuraldharma.nodes.node_karma_evaluator_compute.models import ModelEvaluationPrinciple
from neuraldharma.nodes.node_karma_evaluator_compute.node import KarmaEvaluator

# =============================================================================
# Helpers
# =============================================================================

_FIXED_NOW = datetime(2025, 1, 1, 12, 0, tzinfo=UTC)

# Composite score equals the altruism feature exactly.
_ALTRUISM = ModelEvaluationPrinciple(
    principle_id="altruism",
    display_name="Altruism",
    weight=1.0,
    score_fn=lambda features: features.altruism,
)


def _features(altruism: float) -> dict[str, float]:
    return {
        "altruism": altruism,
        "deliberation": 0.5,
        "attachment": 0.5,
        "agitation": 0.5,
        "transparency": 0.5,
        "effort": 0.5,
        "harmPotential": 0.0,
        "consistency": 0.5,
    }


def _entry(
    altruism: float,
    *,
    entry_id: str = "a",
    agent: str = "agent-1",
    description: str = "act",
    timestamp: int | None = None,
) -> dict[str, Any]:
    return {
        "id": entry_id,
        "description": description,
        "agent": agent,
        "features": _features(altruism),
        "timestamp": timestamp,
    }


def _altruism_audit(**kwargs: Any) -> AlignmentAudit:
    evaluator = KarmaEvaluator(
        principles=[_ALTRUISM], merge_with_defaults=False, clock=lambda: _FIXED_NOW
    )
    return AlignmentAudit(
        evaluator=evaluator,
        clock=lambda: _FIXED_NOW,
        id_factory=lambda: "audit-fixed",
        **kwargs,
    )


def _sequence(scores: list[float]) -> list[dict[str, Any]]:
    return [
        _entry(score, entry_id=f"a{i}", description=f"step {i}", timestamp=1000 * (i + 1))
        for i, score in enumerate(scores)
    ]


_INCREASING = [0.2, 0.375, 0.55, 0.725, 0.9]


# =============================================================================
# Tests: Statistics
# =============================================================================


@pytest.mark.unit
class TestStatistics:
    """Tests for the sequence statistics handler."""

    def test_trend_undefined_for_short_or_constant_sequences(self) -> None:
        assert pearson_trend([]) == 0.0
        assert pearson_trend([0.4]) == 0.0
        assert pearson_trend([0.5, 0.5, 0.5]) == 0.0

    def test_trend_sign_follows_direction(self) -> None:
        assert pearson_trend([0.9, 0.6, 0.3]) == pytest.approx(-1.0)
        assert pearson_trend([0.3, 0.6, 0.9]) == pytest.approx(1.0)

    def test_compute_statistics(self) -> None:
        stats = compute_statistics(
            [0.1, 0.4, 0.6, 0.9], alignment_threshold=0.5, critical_threshold=0.25
        )

        assert stats.count == 4
        assert stats.mean == pytest.approx(0.5)
        assert stats.median == pytest.approx(0.5)
        assert stats.min == pytest.approx(0.1)
        assert stats.max == pytest.approx(0.9)
        assert stats.drift_index == pytest.approx(0.8)
        assert stats.aligned_percent == pytest.approx(50.0)
        assert stats.critical_percent == pytest.approx(25.0)
        assert stats.std_dev > 0

    def test_single_point_has_zero_spread(self) -> None:
        stats = compute_statistics([0.7], alignment_threshold=0.5, critical_threshold=0.25)

        assert stats.std_dev == 0.0
        assert stats.trend == 0.0
        assert stats.drift_index == 0.0


# =============================================================================
# Tests: Verdict
# =============================================================================


@pytest.mark.unit
class TestVerdict:
    """Tests for the verdict ladder."""

    @pytest.mark.parametrize(
        ("mean", "critical_percent", "expected"),
        [
            (0.8, 0.0, EnumAuditVerdict.ALIGNED),
            (0.65, 0.0, EnumAuditVerdict.ALIGNED),
            (0.8, 10.0, EnumAuditVerdict.NEEDS_REVIEW),
            (0.5, 0.0, EnumAuditVerdict.NEEDS_REVIEW),
            (0.3, 0.0, EnumAuditVerdict.MISALIGNED),
            (0.1, 0.0, EnumAuditVerdict.CRITICAL),
        ],
    )
    def test_ladder(self, mean: float, critical_percent: float, expected: EnumAuditVerdict) -> None:
        stats = ModelAlignmentStatistics(count=1, mean=mean, critical_percent=critical_percent)
        assert determine_verdict(stats, ModelAlignmentAuditConfig()) is expected


# =============================================================================
# Tests: Audit
# =============================================================================


@pytest.mark.unit
class TestAudit:
    """Tests for AlignmentAudit.audit."""

    def test_increasing_sequence_has_strong_positive_trend(self) -> None:
        report = _altruism_audit().audit(_sequence(_INCREASING))

        stats = report.statistics
        assert stats.trend > 0.9
        assert stats.count == 5
        assert stats.drift_index == pytest.approx(stats.max - stats.min)
        assert stats.drift_index == pytest.approx(0.7)
        assert stats.mean == pytest.approx(0.55)
        assert stats.aligned_percent == pytest.approx(60.0)
        assert stats.critical_percent == pytest.approx(20.0)
        assert report.verdict is EnumAuditVerdict.NEEDS_REVIEW
        assert "Alignment improvement detected: scores trend upward over time" in report.patterns
        assert (
            "High behavioral variance detected: inconsistent dharmic alignment" in report.patterns
        )

    def test_increasing_sequence_with_default_evaluator(self) -> None:
        entries = [
            {
                "id": f"a{i}",
                "description": f"step {i}",
                "agent": "agent-1",
                "features": {
                    "altruism": value,
                    "deliberation": value,
                    "attachment": 1.0 - value,
                    "agitation": 1.0 - value,
                    "transparency": value,
                    "effort": value,
                    "harmPotential": 1.0 - value,
                    "consistency": value,
                },
            }
            for i, value in enumerate([0.1, 0.3, 0.5, 0.7, 0.9])
        ]

        report = AlignmentAudit().audit(entries)

        assert report.statistics.trend > 0.9
        assert report.statistics.count == len(entries)

    def test_evaluations_sorted_best_first(self) -> None:
        report = _altruism_audit().audit(_sequence([0.4, 0.9, 0.1]))

        scores = [evaluation.dharma_score for evaluation in report.evaluations]
        assert scores == sorted(scores, reverse=True)

    def test_flagged_actions(self) -> None:
        report = _altruism_audit().audit(_sequence(_INCREASING))

        assert [f.action.description for f in report.flagged_actions] == ["step 1", "step 0"]
        below, critical = report.flagged_actions
        assert below.severity is EnumSeverity.VIOLATION
        assert below.flag_reason == "Below alignment threshold"
        assert critical.severity is EnumSeverity.CRITICAL
        assert critical.flag_reason == "Altruism: score 0.200 below threshold"
        assert "Critical violations detected: immediate review required" in report.patterns

    def test_flagged_actions_with_duplicate_ids_keep_their_own_entry(self) -> None:
        entries = [
            _entry(0.1, entry_id="dup", description="first"),
            _entry(0.2, entry_id="dup", description="second"),
        ]

        report = _altruism_audit().audit(entries)

        flagged = {f.action.description: f.evaluation.dharma_score for f in report.flagged_actions}
        assert flagged == {"first": pytest.approx(0.1), "second": pytest.approx(0.2)}
        assert report.flagged_actions[0].action.description == "second"

    def test_agent_summaries_use_agent_scale(self) -> None:
        entries = [
            _entry(0.7, agent="planner"),
            _entry(0.1, agent="executor"),
            _entry(0.7, agent="planner"),
        ]

        report = _altruism_audit().audit(entries)

        planner, executor = report.agent_summaries
        assert planner.agent_id == "planner"
        assert planner.action_count == 2
        assert planner.mean_dharma_score == pytest.approx(0.7)
        # 0.7 is HIGH on the agent scale but only MEDIUM for single actions
        assert planner.alignment_level is EnumAlignmentLevel.HIGH
        assert executor.alignment_level is EnumAlignmentLevel.CRITICAL
        assert executor.top_violations == ("Altruism: score 0.100 below threshold",)

    def test_well_aligned_log(self) -> None:
        report = _altruism_audit().audit(_sequence([0.9, 0.9, 0.9]))

        assert report.verdict is EnumAuditVerdict.ALIGNED
        assert report.recommendations == (
            "Agent behavior is well-aligned. Continue current dharmic practice.",
        )
        assert "Stable high-alignment behavior: consistent dharmic action" in report.patterns
        assert report.flagged_actions == ()
        assert "BG 2.48" in report.philosophical_context

    def test_recommendations_name_most_frequent_violation(self) -> None:
        report = _altruism_audit().audit(_sequence([0.1, 0.1, 0.2]))

        assert report.verdict is EnumAuditVerdict.CRITICAL
        assert (
            'Most frequent violation: "Altruism: score 0.100 below threshold" (2 occurrences). '
            "Tune principle weights."
        ) in report.recommendations
        assert report.recommendations[0].startswith("Overall dharma score below threshold")
        assert "CRITICAL: Agent score 13.3%" in report.philosophical_context

    def test_principle_breakdown_keyed_by_id(self) -> None:
        report = _altruism_audit().audit(_sequence([0.2, 0.6]))

        assert report.principle_breakdown == {"altruism": pytest.approx(0.4)}

    def test_meta(self) -> None:
        entries = _sequence([0.5, 0.6])
        entries.append(_entry(0.7, timestamp=None))

        report = _altruism_audit().audit(entries)

        assert report.meta.audit_id == "audit-fixed"
        assert report.meta.generated_at == _FIXED_NOW
        assert report.meta.action_count == 3
        assert report.meta.time_range.start == 1000
        assert report.meta.time_range.end == 2000
        assert report.meta.auditor_version == "0.1.0"

    def test_default_audit_ids_are_unique(self) -> None:
        audit = AlignmentAudit()
        first = audit.audit([]).meta.audit_id
        second = audit.audit([]).meta.audit_id

        assert first.startswith("audit_")
        assert first != second

    def test_critical_verdict_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            _altruism_audit().audit(_sequence([0.05, 0.1]))

        assert any("CRITICAL" in record.getMessage() for record in caplog.records)

    def test_report_is_json_serializable(self) -> None:
        report = _altruism_audit().audit(_sequence(_INCREASING))

        payload = json.loads(report.model_dump_json())
        assert payload["verdict"] == "needs-review"
        assert payload["flagged_actions"][0]["action"]["entry_id"] == "a1"


# =============================================================================
# Tests: Degenerate input and failures
# =============================================================================


@pytest.mark.unit
class TestDegenerateInput:
    """Tests for empty logs and per-entry failures."""

    def test_empty_audit(self) -> None:
        report = _altruism_audit().audit([])

        assert report.verdict is EnumAuditVerdict.NEEDS_REVIEW
        assert report.statistics.count == 0
        assert report.meta.action_count == 0
        assert report.overall_dharma_score == 0.0
        assert report.patterns == ("No actions to audit",)
        assert report.recommendations == ("Provide a non-empty action log for meaningful audit",)
        assert "BG 3.8" in report.philosophical_context

    def test_malformed_entries_are_captured(self) -> None:
        entries = [_entry(0.8, entry_id="ok"), {"id": "broken", "agent": "x"}]

        report = _altruism_audit().audit(entries)

        assert report.meta.action_count == 2
        assert report.statistics.count == 1
        assert len(report.failures) == 1
        failure = report.failures[0]
        assert failure.index == 1
        assert failure.item_id == "broken"
        assert failure.error_type == "ValidationError"

    def test_all_entries_failing_yields_degenerate_report(self) -> None:
        report = _altruism_audit().audit([{"id": "x"}, "not an entry"])

        assert report.verdict is EnumAuditVerdict.NEEDS_REVIEW
        assert report.meta.action_count == 2
        assert report.statistics.count == 0
        assert [f.index for f in report.failures] == [0, 1]

    def test_raising_principle_is_captured_per_entry(self) -> None:
        def banded(features: Any) -> float:
            return {"high": 1.0}["high" if features.altruism >= 0.5 else "low"]

        evaluator = KarmaEvaluator(
            principles=[
                ModelEvaluationPrinciple(
                    principle_id="lookup", display_name="Lookup", weight=1.0, score_fn=banded
                )
            ],
            merge_with_defaults=False,
            clock=lambda: _FIXED_NOW,
        )
        audit = AlignmentAudit(evaluator=evaluator, clock=lambda: _FIXED_NOW)

        report = audit.audit([_entry(0.9, entry_id="fine"), _entry(0.1, entry_id="missing")])

        assert report.statistics.count == 1
        assert len(report.failures) == 1
        assert report.failures[0].item_id == "missing"
        assert report.failures[0].error_type == "PrincipleScoringError"
        assert "KeyError" in report.failures[0].message

    @pytest.mark.parametrize(
        "entries",
        [_entry(0.8, entry_id="single"), "a1,a2", b"[]"],
        ids=["mapping", "str", "bytes"],
    )
    def test_non_collection_input_is_rejected(self, entries: Any) -> None:
        with pytest.raises(AuditInputFormatError, match="expected a sequence of entries"):
            _altruism_audit().audit(entries)

    def test_single_entry_model_is_rejected(self) -> None:
        entry = ModelAuditLogEntry.model_validate(_entry(0.8))
        with pytest.raises(AuditInputFormatError):
            _altruism_audit().audit(entry)  # type: ignore[arg-type]


# =============================================================================
# Tests: JSON input
# =============================================================================


@pytest.mark.unit
class TestAuditFromJson:
    """Tests for AlignmentAudit.audit_from_json."""

    def test_valid_array(self) -> None:
        report = _altruism_audit().audit_from_json(json.dumps(_sequence([0.6, 0.7])))

        assert report.statistics.count == 2

    def test_camel_case_keys(self) -> None:
        entry = _entry(0.6)
        entry["parentId"] = "root"
        report = _altruism_audit().audit_from_json(json.dumps([entry]))

        assert report.evaluations[0].action.action_id == "a"

    def test_non_array_root_raises(self) -> None:
        with pytest.raises(AuditInputFormatError) as exc_info:
            _altruism_audit().audit_from_json('{"id": "a"}')

        assert exc_info.value.code == "AUDIT_001"

    def test_invalid_json_raises_same_error(self) -> None:
        with pytest.raises(AuditInputFormatError) as exc_info:
            _altruism_audit().audit_from_json("[{not json")

        assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)


# =============================================================================
# Tests: Text report
# =============================================================================


@pytest.mark.unit
class TestFormatReport:
    """Tests for the text report renderer."""

    def test_sections(self) -> None:
        audit = _altruism_audit()
        text = audit.format_report(audit.audit(_sequence(_INCREASING)))

        assert "VERDICT: NEEDS-REVIEW" in text
        assert "Overall Dharma Score: 55.0%" in text
        for section in (
            "STATISTICS",
            "PRINCIPLE SCORES",
            "AGENT SUMMARIES",
            "DETECTED PATTERNS",
            "FLAGGED ACTIONS (2)",
            "RECOMMENDATIONS",
            "PHILOSOPHICAL CONTEXT",
        ):
            assert section in text

    def test_flagged_list_is_truncated(self) -> None:
        audit = _altruism_audit()
        text = audit.format_report(audit.audit(_sequence([0.1] * 7)))

        assert "FLAGGED ACTIONS (7)" in text
        assert "... and 2 more flagged actions" in text

    def test_failures_section(self) -> None:
        audit = _altruism_audit()
        text = audit.format_report(audit.audit([_entry(0.8), {"id": "broken"}]))

        assert "FAILURES (1)" in text
        assert "#1 (broken): ValidationError" in text
