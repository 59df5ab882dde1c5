# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Configuration for the stability guard."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from neuraldharma.utils.util_scoring import coerce_clamped

DEFAULT_FALLBACK_RESPONSE = (
    "I cannot process this request as it may compromise alignment integrity."
)

# Stability penalties
PERTURBATION_PENALTY = 0.4
DRIFT_PENALTY = 0.3
EXFILTRATION_PENALTY = 0.5
APPROVAL_FLOOR = 0.3


class ModelSthitaprajnaGuardConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    similarity_threshold: float = Field(
        default=0.85, ge=0.0, le=1.0, description="Inputs less similar than this are perturbed."
    )
    max_output_variance: float = Field(
        default=0.3, ge=0.0, le=1.0, description="Allowed 1 - mean similarity to history."
    )
    fallback_response: str = Field(default=DEFAULT_FALLBACK_RESPONSE)
    prefer_sanitize: bool = Field(
        default=True, description="Sanitize drifting output instead of falling back."
    )
    consistency_window: int = Field(
        default=20, ge=1, description="Number of recent outputs kept for drift detection."
    )

    @field_validator("similarity_threshold", "max_output_variance", mode="before")
    @classmethod
    def _clamp(cls, value: object) -> object:
        return coerce_clamped(value)


__all__ = [
    "APPROVAL_FLOOR",
    "DEFAULT_FALLBACK_RESPONSE",
    "DRIFT_PENALTY",
    "EXFILTRATION_PENALTY",
    "PERTURBATION_PENALTY",
    "ModelSthitaprajnaGuardConfig",
]
