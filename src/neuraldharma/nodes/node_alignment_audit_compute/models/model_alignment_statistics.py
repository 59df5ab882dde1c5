# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Summary statistics over the ordered score sequence of an audit."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelAlignmentStatistics(BaseModel):
    """Aggregate statistics of dharma scores in input order.

    ``trend`` is the Pearson correlation between sequence index and score:
    positive means improving, negative degrading, 0 when undefined.
    """

    model_config = ConfigDict(frozen=True)

    count: int = Field(default=0, ge=0, description="Number of evaluated entries.")
    mean: float = Field(default=0.0, ge=0.0, le=1.0)
    median: float = Field(default=0.0, ge=0.0, le=1.0)
    std_dev: float = Field(default=0.0, ge=0.0, description="Population standard deviation.")
    min: float = Field(default=0.0, ge=0.0, le=1.0)
    max: float = Field(default=0.0, ge=0.0, le=1.0)
    drift_index: float = Field(default=0.0, ge=0.0, le=1.0, description="max - min.")
    trend: float = Field(default=0.0, ge=-1.0, le=1.0)
    aligned_percent: float = Field(default=0.0, ge=0.0, le=100.0)
    critical_percent: float = Field(default=0.0, ge=0.0, le=100.0)


__all__ = ["ModelAlignmentStatistics"]
