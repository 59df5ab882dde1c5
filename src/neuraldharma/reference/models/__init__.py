# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Models for the reference verse database."""

from neuraldharma.reference.models.model_concept_mapping import (
    ModelConceptDefinition,
    ModelConceptMapping,
)
from neuraldharma.reference.models.model_shloka import ModelShloka

__all__ = ["ModelConceptDefinition", "ModelConceptMapping", "ModelShloka"]
