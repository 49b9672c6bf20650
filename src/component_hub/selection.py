"""Multi-select tracking for bulk export."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field

from component_hub.models import CatalogEntry


@dataclass(frozen=True, slots=True)
class SelectionTracker:
    """Immutable set of checked entry ids.

    Every operation returns a new tracker, so the application state that
    holds one stays a plain value.
    """

    ids: frozenset[str] = field(default_factory=frozenset)

    def toggle(self, entry_id: str) -> SelectionTracker:
        """Remove entry_id if selected, otherwise add it."""
        if entry_id in self.ids:
            return SelectionTracker(self.ids - {entry_id})
        return SelectionTracker(self.ids | {entry_id})

    def select_many(self, entry_ids: Iterable[str]) -> SelectionTracker:
        return SelectionTracker(self.ids | frozenset(entry_ids))

    def clear(self) -> SelectionTracker:
        return SelectionTracker()

    def size(self) -> int:
        return len(self.ids)

    def is_selected(self, entry_id: str) -> bool:
        return entry_id in self.ids

    def ordered(self, entries: Sequence[CatalogEntry]) -> list[CatalogEntry]:
        """Selected entries in the order they appear in entries."""
        return [entry for entry in entries if entry.id in self.ids]

    def __contains__(self, entry_id: object) -> bool:
        return entry_id in self.ids

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.ids))

    def __len__(self) -> int:
        return len(self.ids)


__all__ = ["SelectionTracker"]
