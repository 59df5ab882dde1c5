# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Candidate action model for the nishkama optimizer.

The payload is opaque to the optimizer and carried through unchanged, so
callers can select among arbitrary objects (tool calls, plans, replies).
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from neuraldharma.models.model_feature_vector import ModelFeatureVector

PayloadT = TypeVar("PayloadT")


class ModelCandidateAction(BaseModel, Generic[PayloadT]):
    """One option in a selection among candidate actions."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    action_id: str = Field(alias="id", description="Candidate identifier.")
    description: str = Field(default="", description="Human-readable description.")
    payload: PayloadT | None = Field(default=None, description="Caller-defined payload.")
    features: ModelFeatureVector = Field(description="Behavioral feature vector.")
    svadharma: str | None = Field(
        default=None, description="Role/duty tag, matched against the optimizer's svadharma."
    )


__all__ = ["ModelCandidateAction", "PayloadT"]
