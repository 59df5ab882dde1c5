# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""KarmaLogger: append-only causal log of agent actions and consequences.

Every logged action gets an id and a timestamp. Consequences and a
post-hoc classification can be attached later; parent ids chain actions
into causal trees. The log is bounded: beyond ``max_entries`` the oldest
entries are evicted, and updates to an evicted id raise
``KarmaEntryNotFoundError`` like any unknown id.

Example:
    >>> karma = KarmaLogger()
    >>> root = karma.log("planner", "draft plan")
    >>> child = karma.log("executor", "run step 1", parent_id=root)
    >>> [e.action for e in karma.get_ancestry(child)]
    ['draft plan', 'run step 1']
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any
from uuid import uuid4

from neuraldharma.enums.enum_guna import EnumGuna
from neuraldharma.enums.enum_karma import EnumConsequenceSeverity, EnumKarmaClassification
from neuraldharma.karma_log.exceptions import KarmaEntryNotFoundError
from neuraldharma.karma_log.models.model_consequence import ModelConsequence
from neuraldharma.karma_log.models.model_karma_entry import ModelKarmaEntry
from neuraldharma.utils.util_clock import Clock, epoch_ms, utc_now

logger = logging.getLogger(__name__)

DEFAULT_MAX_ENTRIES = 10_000

IdFactory = Callable[[], str]
EntryCallback = Callable[[ModelKarmaEntry], None]
ConsequenceCallback = Callable[[ModelKarmaEntry, ModelConsequence], None]


def default_karma_id() -> str:
    return f"karma_{uuid4().hex}"


class KarmaLogger:
    """In-memory karma log owned by one agent runtime.

    Args:
        max_entries: Retention bound; oldest entries are evicted first.
        on_entry: Called with every new entry.
        on_consequence: Called with the updated entry and the new consequence.
        clock: Source of action and consequence timestamps.
        id_factory: Generator of entry ids.
    """

    def __init__(
        self,
        *,
        max_entries: int = DEFAULT_MAX_ENTRIES,
        on_entry: EntryCallback | None = None,
        on_consequence: ConsequenceCallback | None = None,
        clock: Clock = utc_now,
        id_factory: IdFactory = default_karma_id,
    ) -> None:
        if max_entries < 1:
            raise ValueError(f"max_entries must be at least 1, got {max_entries}")
        self._max_entries = max_entries
        self._on_entry = on_entry
        self._on_consequence = on_consequence
        self._clock = clock
        self._id_factory = id_factory
        # Insertion order is chronological order.
        self._entries: dict[str, ModelKarmaEntry] = {}

    @property
    def max_entries(self) -> int:
        return self._max_entries

    @property
    def size(self) -> int:
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def _require(self, karma_id: str) -> ModelKarmaEntry:
        entry = self._entries.get(karma_id)
        if entry is None:
            raise KarmaEntryNotFoundError(karma_id)
        return entry

    # ------------------------------------------------------------------
    # Writing
    # ------------------------------------------------------------------

    def log(
        self,
        agent: str,
        action: str,
        params: Mapping[str, Any] | None = None,
        parent_id: str | None = None,
        meta: Mapping[str, Any] | None = None,
    ) -> str:
        """Log a new action and return its karma id."""
        karma_id = self._id_factory()
        entry = ModelKarmaEntry(
            entry_id=karma_id,
            timestamp=epoch_ms(self._clock()),
            agent=agent,
            action=action,
            params=dict(params or {}),
            parent_id=parent_id,
            meta=dict(meta or {}),
        )
        self._entries.pop(karma_id, None)
        self._entries[karma_id] = entry

        while len(self._entries) > self._max_entries:
            evicted = next(iter(self._entries))
            del self._entries[evicted]
            logger.debug("Evicted karma entry %s (max_entries=%d)", evicted, self._max_entries)

        logger.debug("Logged karma %s: agent=%s action=%s", karma_id, agent, action)
        if self._on_entry is not None:
            self._on_entry(entry)
        return karma_id

    def add_consequence(
        self,
        karma_id: str,
        consequence: ModelConsequence | Mapping[str, Any],
    ) -> ModelKarmaEntry:
        """Attach an observed consequence to a logged action.

        A mapping without ``timestamp`` is stamped with the logger clock.

        Raises:
            KarmaEntryNotFoundError: If ``karma_id`` is not in the log.
        """
        entry = self._require(karma_id)
        if not isinstance(consequence, ModelConsequence):
            data = dict(consequence)
            data.setdefault("timestamp", epoch_ms(self._clock()))
            consequence = ModelConsequence.model_validate(data)

        updated = entry.model_copy(
            update={"consequences": (*entry.consequences, consequence)}
        )
        self._entries[karma_id] = updated

        if consequence.severity is EnumConsequenceSeverity.CRITICAL:
            logger.warning(
                "Critical consequence for karma %s (agent=%s): %s",
                karma_id,
                entry.agent,
                consequence.description,
            )
        if self._on_consequence is not None:
            self._on_consequence(updated, consequence)
        return updated

    def classify(
        self,
        karma_id: str,
        classification: EnumKarmaClassification | str,
        guna: EnumGuna | str | None = None,
    ) -> ModelKarmaEntry:
        """Classify an action post-hoc. A missing ``guna`` keeps the current tag.

        Raises:
            KarmaEntryNotFoundError: If ``karma_id`` is not in the log.
        """
        entry = self._require(karma_id)
        update: dict[str, Any] = {
            "classification": EnumKarmaClassification(classification),
        }
        if guna is not None:
            update["guna"] = EnumGuna(guna)
        updated = entry.model_copy(update=update)
        self._entries[karma_id] = updated
        return updated

    def clear(self) -> None:
        self._entries.clear()

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    def get(self, karma_id: str) -> ModelKarmaEntry | None:
        return self._entries.get(karma_id)

    def get_ancestry(self, karma_id: str) -> list[ModelKarmaEntry]:
        """Causal chain ending at ``karma_id``, root first.

        The chain stops at the first parent that is not in the log.
        """
        chain: list[ModelKarmaEntry] = []
        seen: set[str] = set()
        current = self._entries.get(karma_id)
        while current is not None and current.entry_id not in seen:
            seen.add(current.entry_id)
            chain.append(current)
            current = self._entries.get(current.parent_id) if current.parent_id else None
        chain.reverse()
        return chain

    def get_children(self, karma_id: str) -> list[ModelKarmaEntry]:
        return [e for e in self._entries.values() if e.parent_id == karma_id]

    def query(
        self,
        *,
        agent: str | None = None,
        since: int | None = None,
        until: int | None = None,
        classification: EnumKarmaClassification | str | None = None,
        guna: EnumGuna | str | None = None,
        min_severity: EnumConsequenceSeverity | str | None = None,
    ) -> list[ModelKarmaEntry]:
        """Entries matching every given filter, in chronological order.

        ``since`` and ``until`` are inclusive epoch milliseconds.
        ``min_severity`` keeps entries whose worst consequence is at least
        that severe; entries without consequences rank as negligible.
        Unknown enum values, including the empty string, raise ValueError.
        """
        min_rank = (
            EnumConsequenceSeverity(min_severity).rank if min_severity is not None else None
        )
        wanted_classification = (
            EnumKarmaClassification(classification) if classification is not None else None
        )
        wanted_guna = EnumGuna(guna) if guna is not None else None

        def matches(entry: ModelKarmaEntry) -> bool:
            if agent is not None and entry.agent != agent:
                return False
            if since is not None and entry.timestamp < since:
                return False
            if until is not None and entry.timestamp > until:
                return False
            if wanted_classification is not None and entry.classification is not wanted_classification:
                return False
            if wanted_guna is not None and entry.guna is not wanted_guna:
                return False
            return min_rank is None or entry.max_severity_rank >= min_rank

        return [e for e in self._entries.values() if matches(e)]

    def export(self) -> list[ModelKarmaEntry]:
        """All retained entries, oldest first."""
        return list(self._entries.values())


__all__ = [
    "DEFAULT_MAX_ENTRIES",
    "ConsequenceCallback",
    "EntryCallback",
    "IdFactory",
    "KarmaLogger",
    "default_karma_id",
]
