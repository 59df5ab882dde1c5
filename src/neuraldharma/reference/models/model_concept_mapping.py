# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Mappings from Gita concepts to alignment concepts.

A ``ModelConceptDefinition`` is the packaged form: it names where its
verses come from (an alignment category or a module). ``GitaVerse``
resolves it against its current verses into a ``ModelConceptMapping``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from neuraldharma.enums.enum_alignment_category import EnumAlignmentCategory
from neuraldharma.reference.models.model_shloka import ModelShloka


class ModelConceptDefinition(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    gita_concept: str = Field(min_length=1)
    alignment_concept: str
    formal_definition: str
    verse_category: EnumAlignmentCategory | None = Field(
        default=None,
        description="Relevant verses are those in this category.",
    )
    verse_module: str | None = Field(
        default=None,
        description="Relevant verses are those mapped to this module.",
    )
    module_implementation: str
    philosophical_bridge: str

    @model_validator(mode="after")
    def _one_verse_source(self) -> ModelConceptDefinition:
        if (self.verse_category is None) == (self.verse_module is None):
            raise ValueError(
                f"Concept {self.gita_concept!r} needs exactly one of "
                "verse_category or verse_module"
            )
        return self


class ModelConceptMapping(BaseModel):
    """A concept mapping with its relevant verses resolved."""

    model_config = ConfigDict(frozen=True)

    gita_concept: str
    alignment_concept: str
    formal_definition: str
    relevant_verses: tuple[ModelShloka, ...] = ()
    module_implementation: str
    philosophical_bridge: str


__all__ = ["ModelConceptDefinition", "ModelConceptMapping"]
