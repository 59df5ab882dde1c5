# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""
neural-dharma CLI: alignment audits and Gita reference lookups.

Usage:
    neural-dharma audit agent-actions.json
    neural-dharma audit agent-actions.json --json
    neural-dharma audit agent-actions.json --config settings.yaml --verbose
    neural-dharma verse "BG 2.47"
    neural-dharma concepts
    python -m neuraldharma.cli --version

Exit Codes:
    0 - aligned (or a successful lookup)
    1 - needs-review
    2 - misaligned
    3 - critical
    4 - Error: unreadable file, invalid input, unknown verse or usage error
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from neuraldharma import __version__
from neuraldharma.nodes.node_alignment_audit_compute.handlers.exceptions import (
    AuditInputFormatError,
)
from neuraldharma.nodes.node_alignment_audit_compute.node import AlignmentAudit
from neuraldharma.nodes.node_karma_evaluator_compute.node import KarmaEvaluator
from neuraldharma.reference.gita_verse import GitaVerse
from neuraldharma.settings import NeuralDharmaSettings

logger = logging.getLogger(__name__)

# JSON output indentation (spaces)
JSON_INDENT_SPACES = 2

EXIT_ERROR = 4

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_LOG_FORMAT_HELP = """
Log format (JSON array, camelCase or snake_case keys):
  [
    {
      "id": "action-1",
      "description": "Provide information",
      "agent": "assistant",
      "features": {
        "altruism": 0.9, "deliberation": 0.85,
        "attachment": 0.1, "agitation": 0.05,
        "transparency": 0.95, "effort": 0.8,
        "harmPotential": 0.0, "consistency": 0.9
      },
      "timestamp": 1700000000000
    }
  ]
"""


def _print_error(message: str, error_type: str, as_json: bool) -> int:
    """Report an error on stdout (JSON) or stderr (text) and return EXIT_ERROR."""
    if as_json:
        print(
            json.dumps(
                {"error": message, "error_type": error_type},
                indent=JSON_INDENT_SPACES,
            )
        )
    else:
        print(f"Error: {message}", file=sys.stderr)
    return EXIT_ERROR


def _configure_logging(level: str, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else level,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def _load_settings(config_path: Path | None) -> NeuralDharmaSettings:
    if config_path is None:
        return NeuralDharmaSettings()
    return NeuralDharmaSettings.from_yaml(config_path)


def _run_audit(parsed_args: argparse.Namespace) -> int:
    as_json: bool = parsed_args.json

    try:
        settings = _load_settings(parsed_args.config)
    except (OSError, ValueError) as e:
        # ValidationError is a ValueError
        return _print_error(f"Invalid settings: {e}", "invalid_config", as_json)

    _configure_logging(settings.log_level, parsed_args.verbose)

    log_path: Path = parsed_args.log_file
    try:
        content = log_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        return _print_error(f"Cannot read {log_path}: {e}", "read_error", as_json)

    evaluator = KarmaEvaluator.from_config(settings.karma_evaluator)
    audit = AlignmentAudit.from_config(settings.to_audit_config(), evaluator=evaluator)

    try:
        report = audit.audit_from_json(content)
    except AuditInputFormatError as e:
        return _print_error(e.message, "invalid_input", as_json)

    logger.debug(
        "Audit %s: %d actions, verdict %s",
        report.meta.audit_id,
        report.meta.action_count,
        report.verdict.value,
    )

    if as_json:
        print(report.model_dump_json(indent=JSON_INDENT_SPACES, by_alias=True))
    else:
        print(audit.format_report(report))
    return report.verdict.exit_code


def _run_verse(parsed_args: argparse.Namespace) -> int:
    gita = GitaVerse()
    reference: str = parsed_args.reference
    if gita.get_verse(reference) is None:
        print(f"Error: Verse {reference!r} not found.", file=sys.stderr)
        print(
            f"Available verses: {', '.join(gita.list_references())}",
            file=sys.stderr,
        )
        return EXIT_ERROR

    print(gita.format_verse(reference))
    return 0


def _run_concepts(parsed_args: argparse.Namespace) -> int:
    lines: list[str] = ["Gita-to-Alignment Concept Mappings", "=" * 60]
    for mapping in GitaVerse().get_all_concept_mappings():
        lines.append("")
        lines.append(f"{mapping.gita_concept} -> {mapping.alignment_concept}")
        lines.append(f"  Module: {mapping.module_implementation}")
        lines.append(f"  Formal: {mapping.formal_definition}")
        lines.append(f"  Bridge: {mapping.philosophical_bridge}")
        verses = ", ".join(v.reference for v in mapping.relevant_verses) or "(none)"
        lines.append(f"  Verses: {verses}")
    print("\n".join(lines))
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="neural-dharma - dharmic alignment audits for AI agents",
        prog="neural-dharma",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s audit agent-actions.json             # Text report, exit code = verdict
  %(prog)s audit agent-actions.json --json      # JSON report for CI
  %(prog)s verse "BG 2.47"                      # Show a verse
  %(prog)s concepts                             # List concept mappings
""",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    audit_parser = subparsers.add_parser(
        "audit",
        help="Run an alignment audit on an action log",
        description="Run an alignment audit on a JSON action log.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=_LOG_FORMAT_HELP,
    )
    audit_parser.add_argument("log_file", type=Path, metavar="LOG_JSON", help="Action log file")
    audit_parser.add_argument(
        "--json",
        action="store_true",
        help="Output the report (or error) as JSON",
    )
    audit_parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        metavar="PATH",
        help="Settings YAML file (environment NEURAL_DHARMA_* applies otherwise)",
    )
    audit_parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging on stderr",
    )
    audit_parser.set_defaults(handler=_run_audit)

    verse_parser = subparsers.add_parser("verse", help='Display a Gita verse (e.g. "BG 2.47")')
    verse_parser.add_argument("reference", help='Canonical reference, e.g. "BG 2.47"')
    verse_parser.set_defaults(handler=_run_verse)

    concepts_parser = subparsers.add_parser(
        "concepts", help="List all Gita-to-alignment concept mappings"
    )
    concepts_parser.set_defaults(handler=_run_concepts)

    return parser


def main(args: list[str] | None = None) -> int:
    """CLI entry point.

    Args:
        args: Command line arguments (uses sys.argv if None).

    Returns:
        The verdict exit code for ``audit``, 0 for successful lookups, and
        4 for errors.
    """
    parser = _build_parser()
    try:
        parsed_args = parser.parse_args(args)
    except SystemExit as e:
        # argparse exits 0 for --help/--version and 2 for usage errors.
        return 0 if e.code in (0, None) else EXIT_ERROR

    if parsed_args.command is None:
        parser.print_help()
        return 0

    return parsed_args.handler(parsed_args)


if __name__ == "__main__":
    sys.exit(main())
