# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Handlers for VivekaFilterCompute node."""

from neuraldharma.nodes.node_viveka_filter_compute.handlers.handler_default_boundaries import (
    DEFAULT_ETHICAL_BOUNDARIES,
)
from neuraldharma.nodes.node_viveka_filter_compute.handlers.handler_viveka_filter import (
    evaluate_candidate,
    sort_boundaries,
)

__all__ = ["DEFAULT_ETHICAL_BOUNDARIES", "evaluate_candidate", "sort_boundaries"]
