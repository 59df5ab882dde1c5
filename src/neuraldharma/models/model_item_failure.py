# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Per-item failure record for batch evaluation paths.

Batch evaluation and auditing never abort on a single malformed item. The
failing item is skipped and described by one of these records instead.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelItemFailure(BaseModel):
    """A batch item that could not be evaluated."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=0, description="Position of the item in the input sequence.")
    item_id: str | None = Field(
        default=None, description="Identifier of the item, when one could be read."
    )
    error_type: str = Field(description="Exception class name.")
    message: str = Field(description="Error message.")


__all__ = ["ModelItemFailure"]
