# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Plain-text rendering of alignment audit reports."""

from __future__ import annotations

from neuraldharma.enums.enum_severity import EnumSeverity
from neuraldharma.nodes.node_alignment_audit_compute.models.model_alignment_report import (
    AUDITOR_VERSION,
    ModelAlignmentReport,
)

RULE = "-" * 61
BAR_WIDTH = 20
MAX_FLAGGED_SHOWN = 5

_SEVERITY_MARKERS = {
    EnumSeverity.CRITICAL: "!!!",
    EnumSeverity.VIOLATION: "!! ",
    EnumSeverity.WARNING: "!  ",
}


def _pct(value: float) -> str:
    return f"{value * 100:.1f}%"


def _bar(score: float) -> str:
    filled = round(score * BAR_WIDTH)
    return ("#" * filled).ljust(BAR_WIDTH, ".")


def _trend_label(trend: float) -> str:
    if trend > 0:
        return "Improving"
    if trend < 0:
        return "Degrading"
    return "Stable"


def format_report(report: ModelAlignmentReport) -> str:
    """Render ``report`` as a human-readable multi-section text block."""
    stats = report.statistics
    lines = [
        "",
        "=" * 61,
        "  NEURAL-DHARMA ALIGNMENT AUDIT REPORT",
        '  "Aligned by dharma. Governed by karma."',
        "=" * 61,
        "",
        "  karmany evadhikaras te ma phaleshu kadachana  (Gita 2.47)",
        "",
        f"  Audit ID:     {report.meta.audit_id}",
        f"  Generated:    {report.meta.generated_at.isoformat()}",
        f"  Actions:      {report.meta.action_count}",
        "",
        RULE,
        f"  VERDICT: {report.verdict.value.upper()}",
        f"  Overall Dharma Score: {_pct(report.overall_dharma_score)}",
        RULE,
        "",
        "  STATISTICS",
        f"    Mean Score:      {_pct(stats.mean)}",
        f"    Median Score:    {_pct(stats.median)}",
        f"    Std Deviation:   {_pct(stats.std_dev)}",
        f"    Drift Index:     {_pct(stats.drift_index)}",
        f"    Trend:           {_trend_label(stats.trend)} ({stats.trend:.3f})",
        f"    Aligned Actions: {stats.aligned_percent:.1f}%",
        f"    Critical:        {stats.critical_percent:.1f}%",
        "",
    ]

    if report.principle_breakdown:
        lines.append("  PRINCIPLE SCORES")
        for principle_id, score in report.principle_breakdown.items():
            lines.append(f"    {principle_id:<20} {_bar(score)} {_pct(score)}")
        lines.append("")

    if report.agent_summaries:
        lines.append("  AGENT SUMMARIES")
        for agent in report.agent_summaries:
            lines.append(
                f"    {agent.agent_id}: {_pct(agent.mean_dharma_score)} "
                f"[{agent.alignment_level.value}] ({agent.action_count} actions)"
            )
        lines.append("")

    if report.patterns:
        lines.append("  DETECTED PATTERNS")
        lines.extend(f"    * {pattern}" for pattern in report.patterns)
        lines.append("")

    if report.flagged_actions:
        lines.append(f"  FLAGGED ACTIONS ({len(report.flagged_actions)})")
        for flagged in report.flagged_actions[:MAX_FLAGGED_SHOWN]:
            lines.append(
                f"    {_SEVERITY_MARKERS[flagged.severity]} "
                f"[{flagged.severity.value.upper()}] {flagged.action.description}"
            )
            lines.append(
                f"       Score: {_pct(flagged.evaluation.dharma_score)} | {flagged.flag_reason}"
            )
        hidden = len(report.flagged_actions) - MAX_FLAGGED_SHOWN
        if hidden > 0:
            lines.append(f"    ... and {hidden} more flagged actions")
        lines.append("")

    if report.failures:
        lines.append(f"  FAILURES ({len(report.failures)})")
        for failure in report.failures:
            # pydantic messages span several lines; the first one names the problem
            summary = failure.message.partition("\n")[0]
            lines.append(
                f"    #{failure.index} ({failure.item_id or 'no id'}): "
                f"{failure.error_type}: {summary}"
            )
        lines.append("")

    lines.append("  RECOMMENDATIONS")
    lines.extend(f"    + {recommendation}" for recommendation in report.recommendations)
    lines.append("")

    lines.append("  PHILOSOPHICAL CONTEXT")
    lines.extend(f"    {line}" for line in report.philosophical_context.splitlines())
    lines.extend(
        [
            "",
            RULE,
            f"  neural-dharma v{AUDITOR_VERSION}",
            '  "Aligned by dharma. Governed by karma."',
            RULE,
            "",
        ]
    )
    return "\n".join(lines)


__all__ = ["format_report"]
