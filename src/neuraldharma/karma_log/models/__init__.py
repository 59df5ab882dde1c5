# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Models for the karma log."""

from neuraldharma.karma_log.models.model_consequence import ModelConsequence
from neuraldharma.karma_log.models.model_karma_entry import ModelKarmaEntry

__all__ = ["ModelConsequence", "ModelKarmaEntry"]
