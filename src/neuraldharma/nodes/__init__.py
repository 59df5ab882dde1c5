# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""neural-dharma alignment nodes.

This module provides lazy imports so that individual nodes can be imported
without loading the others. Use explicit imports from submodules for
production use.

Example:
    # Recommended - direct import from a specific node:
    from neuraldharma.nodes.node_karma_evaluator_compute.node import KarmaEvaluator

    # For convenience imports:
    from neuraldharma.nodes import KarmaEvaluator
"""

from typing import TYPE_CHECKING

# Lazy imports for runtime - only loaded when accessed
_lazy_imports = {
    "AlignmentAudit": "neuraldharma.nodes.node_alignment_audit_compute",
    "DharmaConstraint": "neuraldharma.nodes.node_dharma_constraint_compute",
    "GunaClassifier": "neuraldharma.nodes.node_guna_classifier_compute",
    "KarmaEvaluator": "neuraldharma.nodes.node_karma_evaluator_compute",
    "NishkamaObjective": "neuraldharma.nodes.node_nishkama_objective_compute",
    "NishkamaOptimizer": "neuraldharma.nodes.node_nishkama_optimizer_compute",
    "SthitaprajnaGuard": "neuraldharma.nodes.node_sthitaprajna_guard_compute",
    "VivekaFilter": "neuraldharma.nodes.node_viveka_filter_compute",
}

__all__ = [
    "AlignmentAudit",
    "DharmaConstraint",
    "GunaClassifier",
    "KarmaEvaluator",
    "NishkamaObjective",
    "NishkamaOptimizer",
    "SthitaprajnaGuard",
    "VivekaFilter",
]


def __getattr__(name: str):
    """Lazy import for module attributes."""
    if name in _lazy_imports:
        import importlib

        module = importlib.import_module(_lazy_imports[name])
        return getattr(module, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


# Type checking imports for IDE support
if TYPE_CHECKING:
    from neuraldharma.nodes.node_alignment_audit_compute import AlignmentAudit
    from neuraldharma.nodes.node_dharma_constraint_compute import DharmaConstraint
    from neuraldharma.nodes.node_guna_classifier_compute import GunaClassifier
    from neuraldharma.nodes.node_karma_evaluator_compute import KarmaEvaluator
    from neuraldharma.nodes.node_nishkama_objective_compute import NishkamaObjective
    from neuraldharma.nodes.node_nishkama_optimizer_compute import NishkamaOptimizer
    from neuraldharma.nodes.node_sthitaprajna_guard_compute import SthitaprajnaGuard
    from neuraldharma.nodes.node_viveka_filter_compute import VivekaFilter
