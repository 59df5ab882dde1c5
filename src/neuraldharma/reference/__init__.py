# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Reference database of Gita verses and alignment concept mappings."""

from neuraldharma.reference.gita_verse import (
    EPIGRAPH_REFERENCE,
    GitaVerse,
    load_concepts,
    load_shlokas,
)
from neuraldharma.reference.models import (
    ModelConceptDefinition,
    ModelConceptMapping,
    ModelShloka,
)

__all__ = [
    "EPIGRAPH_REFERENCE",
    "GitaVerse",
    "ModelConceptDefinition",
    "ModelConceptMapping",
    "ModelShloka",
    "load_concepts",
    "load_shlokas",
]
