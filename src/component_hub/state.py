"""Application state, pure transitions, and effect descriptions.

The controller owns a single immutable ``AppState``. UI events become
``Event`` values folded in by ``reduce``; actions that touch the outside
world (clipboard, notifications) return ``Effect`` values that the Textual
shell executes with ``run_effects``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field, replace

from component_hub.action_messages import (
    build_bulk_copy_notification,
    build_clipboard_failure_error,
    build_copy_code_notification,
    build_empty_selection_warning,
)
from component_hub.catalog import CatalogStore, count_blocks
from component_hub.export import format_bulk, format_single
from component_hub.models import (
    ALL_CATEGORIES,
    CATEGORY_FILTERS,
    DEFAULT_EXPORT_LANGUAGE,
    CatalogEntry,
    ResolvedView,
    SessionState,
)
from component_hub.query import GroupedView, query_catalog
from component_hub.selection import SelectionTracker
from component_hub.variants import (
    CLOSED,
    DetailState,
    change_variant,
    close_detail,
    initial_variant_name,
    open_detail,
    resolve_variant,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AppState:
    """Everything the UI needs besides the catalog itself."""

    search_term: str = ""
    category_filter: str = ALL_CATEGORIES
    selection: SelectionTracker = field(default_factory=SelectionTracker)
    detail: DetailState = CLOSED


# ============================================================================
# Events
# ============================================================================


@dataclass(frozen=True, slots=True)
class SearchChanged:
    term: str


@dataclass(frozen=True, slots=True)
class CategoryChanged:
    category: str


@dataclass(frozen=True, slots=True)
class SelectionToggled:
    entry_id: str


@dataclass(frozen=True, slots=True)
class SelectionCleared:
    pass


@dataclass(frozen=True, slots=True)
class EntriesSelected:
    entry_ids: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class EntryOpened:
    entry_id: str


@dataclass(frozen=True, slots=True)
class VariantChanged:
    variant_name: str


@dataclass(frozen=True, slots=True)
class EntryClosed:
    pass


Event = (
    SearchChanged
    | CategoryChanged
    | SelectionToggled
    | SelectionCleared
    | EntriesSelected
    | EntryOpened
    | VariantChanged
    | EntryClosed
)


def reduce(state: AppState, event: Event, store: CatalogStore) -> AppState:
    """Return the state that follows event. Never mutates state.

    Raises:
        ValueError: On an unknown category filter.
    """
    if isinstance(event, SearchChanged):
        return replace(state, search_term=event.term)
    if isinstance(event, CategoryChanged):
        if event.category not in CATEGORY_FILTERS:
            raise ValueError(f"Unknown category filter {event.category!r}")
        return replace(state, category_filter=event.category)
    if isinstance(event, SelectionToggled):
        return replace(state, selection=state.selection.toggle(event.entry_id))
    if isinstance(event, SelectionCleared):
        return replace(state, selection=state.selection.clear())
    if isinstance(event, EntriesSelected):
        return replace(state, selection=state.selection.select_many(event.entry_ids))
    if isinstance(event, EntryOpened):
        entry = store.get(event.entry_id)
        if entry is None:
            logger.debug("Ignoring open of unknown entry %r", event.entry_id)
            return state
        return replace(state, detail=open_detail(entry))
    if isinstance(event, VariantChanged):
        return replace(state, detail=change_variant(state.detail, event.variant_name))
    if isinstance(event, EntryClosed):
        return replace(state, detail=close_detail(state.detail))
    raise TypeError(f"Unhandled event {event!r}")


# ============================================================================
# Effects
# ============================================================================


@dataclass(frozen=True, slots=True)
class CopyToClipboard:
    text: str


@dataclass(frozen=True, slots=True)
class Notify:
    title: str
    description: str
    severity: str = "information"  # "information" | "warning" | "error"


Effect = CopyToClipboard | Notify


def run_effects(
    effects: Iterable[Effect],
    *,
    write_clipboard: Callable[[str], bool],
    notify: Callable[[Notify], None],
) -> bool:
    """Execute effects in order. Returns False if a clipboard write failed.

    A failed clipboard write replaces the remaining effects with a single
    error notification, so success toasts are never shown for lost text.
    """
    for effect in effects:
        if isinstance(effect, CopyToClipboard):
            if not write_clipboard(effect.text):
                title, description = build_clipboard_failure_error()
                notify(Notify(title, description, severity="error"))
                return False
        else:
            notify(effect)
    return True


# ============================================================================
# Controller
# ============================================================================


@dataclass(frozen=True, slots=True)
class BulkExport:
    """Text produced by a bulk export and the number of entries it covers."""

    text: str
    entry_count: int


class HubController:
    """Owns the application state and turns user intents into effects."""

    def __init__(
        self,
        store: CatalogStore,
        state: AppState | None = None,
        export_language: str = DEFAULT_EXPORT_LANGUAGE,
    ) -> None:
        self._store = store
        self._state = state or AppState()
        self.export_language = export_language

    @property
    def store(self) -> CatalogStore:
        return self._store

    @property
    def state(self) -> AppState:
        return self._state

    def dispatch(self, event: Event) -> AppState:
        self._state = reduce(self._state, event, self._store)
        return self._state

    def grouped_view(self) -> GroupedView:
        return query_catalog(
            self._store.entries, self._state.search_term, self._state.category_filter
        )

    def open_entry(self) -> CatalogEntry | None:
        detail = self._state.detail
        if detail.entry_id is None:
            return None
        return self._store.get(detail.entry_id)

    def resolved_open_entry(self) -> ResolvedView | None:
        """Resolve code/preview/path for the open entry and chosen variant."""
        entry = self.open_entry()
        if entry is None:
            return None
        return resolve_variant(entry, self._state.detail.variant_name)

    def copy_code(self, entry: CatalogEntry | None = None) -> list[Effect]:
        """Copy the resolved code of the open entry, or of entry as first opened."""
        if entry is None:
            resolved = self.resolved_open_entry()
        else:
            resolved = resolve_variant(entry, initial_variant_name(entry))
        if resolved is None:
            return []
        title, description = build_copy_code_notification()
        return [CopyToClipboard(format_single(resolved.code)), Notify(title, description)]

    def selected_entries(self) -> list[CatalogEntry]:
        return self._state.selection.ordered(self._store.entries)

    def take_bulk_export(self) -> BulkExport | None:
        """Format the selected entries and clear the selection.

        Returns None, leaving the selection untouched, when nothing is
        selected.
        """
        if self._state.selection.size() == 0:
            return None
        entries = self.selected_entries()
        text = format_bulk(entries, self.export_language)
        self.dispatch(SelectionCleared())
        logger.debug(
            "Bulk export of %d entries as %d blocks (%d chars)",
            len(entries),
            count_blocks(entries),
            len(text),
        )
        return BulkExport(text=text, entry_count=len(entries))

    def bulk_copy(self) -> list[Effect]:
        export = self.take_bulk_export()
        if export is None:
            title, description = build_empty_selection_warning()
            return [Notify(title, description, severity="warning")]
        title, description = build_bulk_copy_notification(export.entry_count)
        return [CopyToClipboard(export.text), Notify(title, description)]


# ============================================================================
# Session conversion
# ============================================================================


def state_to_session(state: AppState, highlighted_id: str | None = None) -> SessionState:
    return SessionState(
        search_term=state.search_term,
        category_filter=state.category_filter,
        highlighted_id=highlighted_id,
    )


def state_from_session(session: SessionState) -> AppState:
    """Rebuild search and category from a saved session.

    The selection is never persisted, so it always starts empty.
    """
    category = session.category_filter
    if category not in CATEGORY_FILTERS:
        category = ALL_CATEGORIES
    return AppState(search_term=session.search_term, category_filter=category)


__all__ = [
    "AppState",
    "BulkExport",
    "CategoryChanged",
    "CopyToClipboard",
    "Effect",
    "EntriesSelected",
    "EntryClosed",
    "EntryOpened",
    "Event",
    "HubController",
    "Notify",
    "SearchChanged",
    "SelectionCleared",
    "SelectionToggled",
    "VariantChanged",
    "reduce",
    "run_effects",
    "state_from_session",
    "state_to_session",
]
