# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Append-only action/consequence log."""

from neuraldharma.karma_log.exceptions import KarmaEntryNotFoundError, KarmaLogError
from neuraldharma.karma_log.karma_logger import (
    DEFAULT_MAX_ENTRIES,
    KarmaLogger,
    default_karma_id,
)
from neuraldharma.karma_log.models import ModelConsequence, ModelKarmaEntry

__all__ = [
    "DEFAULT_MAX_ENTRIES",
    "KarmaEntryNotFoundError",
    "KarmaLogError",
    "KarmaLogger",
    "ModelConsequence",
    "ModelKarmaEntry",
    "default_karma_id",
]
