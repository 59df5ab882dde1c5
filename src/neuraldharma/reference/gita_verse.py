# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""GitaVerse: Bhagavad Gita verses mapped to AI alignment concepts.

Verses and concept mappings ship as YAML package data
(``neuraldharma.reference.data``) and are read with
``importlib.resources``, so the database works from wheels and zip
imports alike. Lookups return None on absence.

Example:
    >>> gita = GitaVerse()
    >>> gita.get_verse("BG 2.47").primary_concept
    'Nishkama Karma'
    >>> [v.reference for v in gita.get_by_chapter(3)]
    ['BG 3.9', 'BG 3.35']
"""

from __future__ import annotations

import importlib.resources
import logging
import random as _random
import unicodedata
from collections.abc import Iterable, Mapping
from typing import Any

import yaml

from neuraldharma.enums.enum_alignment_category import EnumAlignmentCategory
from neuraldharma.reference.models.model_concept_mapping import (
    ModelConceptDefinition,
    ModelConceptMapping,
)
from neuraldharma.reference.models.model_shloka import ModelShloka

logger = logging.getLogger(__name__)

DATA_PACKAGE = "neuraldharma.reference.data"
EPIGRAPH_REFERENCE = "BG 2.47"


def _read_data_list(filename: str, key: str) -> list[dict[str, Any]]:
    """Read the top-level list ``key`` from a packaged YAML file."""
    data_file = importlib.resources.files(DATA_PACKAGE).joinpath(filename)
    content: object = yaml.safe_load(data_file.read_text(encoding="utf-8"))
    if not isinstance(content, dict) or not isinstance(content.get(key), list):
        raise ValueError(f"{filename} must be a mapping with a '{key}' list")
    return content[key]


def load_shlokas() -> list[ModelShloka]:
    """Load the packaged verse database in file order."""
    return [ModelShloka.model_validate(item) for item in _read_data_list("shlokas.yaml", "shlokas")]


def load_concepts() -> list[ModelConceptDefinition]:
    """Load the packaged concept definitions in file order."""
    return [
        ModelConceptDefinition.model_validate(item)
        for item in _read_data_list("concepts.yaml", "concepts")
    ]


def _fold(text: str) -> str:
    """Casefold and strip diacritics, so ``Triguna`` matches ``Triguṇa``."""
    decomposed = unicodedata.normalize("NFKD", text.strip())
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()


class GitaVerse:
    """In-memory verse database keyed by canonical reference.

    Args:
        additional_verses: Extra verses, added after the packaged ones. A
            verse whose reference already exists replaces it.
    """

    def __init__(
        self,
        additional_verses: Iterable[ModelShloka | Mapping[str, Any]] | None = None,
    ) -> None:
        self._verses: dict[str, ModelShloka] = {}
        for shloka in load_shlokas():
            self._verses[shloka.reference] = shloka
        self._concepts = load_concepts()
        for extra in additional_verses or ():
            self.add_verse(extra)
        logger.debug(
            "Loaded %d verses and %d concept mappings",
            len(self._verses),
            len(self._concepts),
        )

    # ------------------------------------------------------------------
    # Verse lookup
    # ------------------------------------------------------------------

    def get_verse(self, reference: str) -> ModelShloka | None:
        """Get a verse by canonical reference, e.g. ``"BG 2.47"``."""
        return self._verses.get(reference)

    def get_by_chapter_verse(self, chapter: int, verse: int) -> ModelShloka | None:
        return self.get_verse(f"BG {chapter}.{verse}")

    def get_by_category(self, category: EnumAlignmentCategory | str) -> list[ModelShloka]:
        return [v for v in self._verses.values() if category in v.alignment_categories]

    def get_by_module(self, module: str) -> list[ModelShloka]:
        return [v for v in self._verses.values() if v.relevant_module == module]

    def get_by_chapter(self, chapter: int) -> list[ModelShloka]:
        """Verses of one chapter, ordered by verse number."""
        return sorted(
            (v for v in self._verses.values() if v.chapter == chapter),
            key=lambda v: v.verse,
        )

    def random(self, rng: _random.Random | None = None) -> ModelShloka:
        """Pick a verse uniformly at random."""
        return (rng or _random.Random()).choice(list(self._verses.values()))

    def get_epigraph(self) -> ModelShloka:
        return self._verses[EPIGRAPH_REFERENCE]

    def list_references(self) -> list[str]:
        return sorted(self._verses)

    def count(self) -> int:
        return len(self._verses)

    def add_verse(self, shloka: ModelShloka | Mapping[str, Any]) -> None:
        """Add a verse, replacing any verse with the same reference."""
        if not isinstance(shloka, ModelShloka):
            shloka = ModelShloka.model_validate(shloka)
        if shloka.reference in self._verses:
            logger.debug("Replacing verse %s", shloka.reference)
        self._verses[shloka.reference] = shloka

    # ------------------------------------------------------------------
    # Concept mappings
    # ------------------------------------------------------------------

    def _resolve(self, definition: ModelConceptDefinition) -> ModelConceptMapping:
        if definition.verse_category is not None:
            verses = self.get_by_category(definition.verse_category)
        else:
            verses = self.get_by_module(definition.verse_module or "")
        return ModelConceptMapping(
            gita_concept=definition.gita_concept,
            alignment_concept=definition.alignment_concept,
            formal_definition=definition.formal_definition,
            relevant_verses=tuple(verses),
            module_implementation=definition.module_implementation,
            philosophical_bridge=definition.philosophical_bridge,
        )

    def get_concept_mapping(self, concept: str) -> ModelConceptMapping | None:
        """Look up a concept by name, ignoring case and diacritics."""
        wanted = _fold(concept)
        for definition in self._concepts:
            if _fold(definition.gita_concept) == wanted:
                return self._resolve(definition)
        return None

    def get_all_concept_mappings(self) -> list[ModelConceptMapping]:
        return [self._resolve(definition) for definition in self._concepts]

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def format_verse(self, reference: str) -> str:
        """Render a verse for terminal display."""
        verse = self.get_verse(reference)
        if verse is None:
            return f"Verse {reference} not found"

        blocks = [
            f"{verse.reference} - {verse.primary_concept}",
            verse.sanskrit,
            f'"{verse.translation}"',
            verse.commentary,
        ]
        footer = [f"Module: {verse.relevant_module}"]
        if verse.formal_statement:
            footer.insert(0, f"Formal: {verse.formal_statement}")
        blocks.append("\n".join(footer))
        return "\n\n".join(blocks)


__all__ = ["DATA_PACKAGE", "EPIGRAPH_REFERENCE", "GitaVerse", "load_concepts", "load_shlokas"]
