"""Variant resolution and the open/closed detail state machine."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from component_hub.models import CatalogEntry, ResolvedView, Variant

logger = logging.getLogger(__name__)


def find_variant(entry: CatalogEntry, variant_name: str) -> Variant | None:
    """Return the variant named variant_name, or None."""
    for variant in entry.variants or ():
        if variant.name == variant_name:
            return variant
    return None


def resolve_variant(entry: CatalogEntry, chosen_variant_name: str) -> ResolvedView:
    """Resolve the code, preview, and file path to display for an entry.

    Without variants or without a chosen name, the entry's own fields are
    used. A found variant supplies its code and path; its preview falls back
    to the entry's preview when absent. An unknown name degrades every field
    to the entry's own value.
    """
    own = ResolvedView(code=entry.code, preview=entry.preview, file_path=entry.file_path)
    if not entry.variants or not chosen_variant_name:
        return own
    variant = find_variant(entry, chosen_variant_name)
    if variant is None:
        logger.debug("Variant %r not found on %s; using entry fields", chosen_variant_name, entry.id)
        return own
    return ResolvedView(
        code=variant.code,
        preview=variant.preview if variant.preview is not None else entry.preview,
        file_path=variant.file_path,
    )


def initial_variant_name(entry: CatalogEntry) -> str:
    """Variant chosen when an entry is opened: the first one, or empty."""
    if entry.variants:
        return entry.variants[0].name
    return ""


def next_variant_name(entry: CatalogEntry, current: str, step: int = 1) -> str:
    """Cycle through variant names with wrap-around.

    An unknown current name starts from the first variant.
    """
    names = entry.variant_names
    if not names:
        return ""
    if current not in names:
        return names[0]
    return names[(names.index(current) + step) % len(names)]


# ============================================================================
# Detail state machine: closed <-> open(entry_id, variant_name)
# ============================================================================


@dataclass(frozen=True, slots=True)
class DetailState:
    """Which entry is open in the detail view and which variant is chosen."""

    entry_id: str | None = None
    variant_name: str = ""

    @property
    def is_open(self) -> bool:
        return self.entry_id is not None


CLOSED = DetailState()


def open_detail(entry: CatalogEntry) -> DetailState:
    return DetailState(entry_id=entry.id, variant_name=initial_variant_name(entry))


def change_variant(detail: DetailState, variant_name: str) -> DetailState:
    """Set the chosen variant name. Ignored while closed."""
    if not detail.is_open:
        logger.debug("Ignoring variant change to %r while detail view is closed", variant_name)
        return detail
    return DetailState(entry_id=detail.entry_id, variant_name=variant_name)


def close_detail(detail: DetailState) -> DetailState:
    return CLOSED


__all__ = [
    "CLOSED",
    "DetailState",
    "change_variant",
    "close_detail",
    "find_variant",
    "initial_variant_name",
    "next_variant_name",
    "open_detail",
    "resolve_variant",
]
