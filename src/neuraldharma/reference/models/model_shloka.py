# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""A Bhagavad Gita verse with its alignment mapping."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from neuraldharma.enums.enum_alignment_category import EnumAlignmentCategory


class ModelShloka(BaseModel):
    """One shloka keyed by its canonical reference (e.g. ``"BG 2.47"``)."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    chapter: int = Field(ge=1, description="Chapter number.")
    verse: int = Field(ge=1, description="Verse number within the chapter.")
    reference: str = Field(min_length=1, description="Canonical reference.")
    sanskrit: str = Field(description="Devanagari text.")
    transliteration: str = Field(description="IAST transliteration.")
    translation: str = Field(description="English translation.")
    commentary: str = Field(description="Commentary relating the verse to alignment.")
    alignment_categories: tuple[EnumAlignmentCategory, ...] = Field(
        default=(),
        description="Alignment categories the verse addresses.",
    )
    primary_concept: str = Field(description="Primary concept of the verse.")
    relevant_module: str = Field(description="Component most relevant to the verse.")
    formal_statement: str | None = Field(
        default=None,
        description="Formal statement of the principle, if any.",
    )


__all__ = ["ModelShloka"]
