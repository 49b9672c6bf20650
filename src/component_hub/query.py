"""Catalog filtering, grouping, and search-term highlighting."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Mapping

from rich.markup import escape as escape_markup

from component_hub.models import ALL_CATEGORIES, CATEGORIES, CATEGORY_FILTERS, CatalogEntry

GroupedView = dict[str, list[CatalogEntry]]


# ============================================================================
# Text Formatting Utilities
# ============================================================================


def truncate_text(text: str, max_len: int, suffix: str = "...") -> str:
    """Truncate text to max_len characters, adding suffix if truncated.

    Args:
        text: The text to truncate.
        max_len: Maximum length before truncation (not including suffix).
        suffix: String to append when truncated.

    Returns:
        Original text if within limit, otherwise truncated with suffix.
    """
    if len(text) <= max_len:
        return text
    return text[:max_len] + suffix


def escape_rich_text(text: str) -> str:
    """Escape text for safe Rich markup rendering."""
    return escape_markup(text) if text else ""


_HIGHLIGHT_PATTERN_CACHE: dict[str, re.Pattern[str]] = {}


def highlight_text(text: str, term: str, color: str) -> str:
    """Escape text and wrap case-insensitive occurrences of term in Rich markup."""
    if not text:
        return text
    escaped_text = escape_rich_text(text)
    if not term:
        return escaped_text
    escaped_term = escape_rich_text(term)
    key = escaped_term.lower()
    pattern = _HIGHLIGHT_PATTERN_CACHE.get(key)
    if pattern is None:
        pattern = re.compile(re.escape(escaped_term), re.IGNORECASE)
        _HIGHLIGHT_PATTERN_CACHE[key] = pattern
    return pattern.sub(lambda match: f"[bold {color}]{match.group(0)}[/]", escaped_text)


# ============================================================================
# Matching
# ============================================================================


def matches_search(entry: CatalogEntry, search_term: str) -> bool:
    """True if search_term is a case-insensitive substring of the name or any tag.

    An empty term matches every entry.
    """
    if not search_term:
        return True
    needle = search_term.lower()
    if needle in entry.name.lower():
        return True
    return any(needle in tag.lower() for tag in entry.tags)


def matches_category(entry: CatalogEntry, category_filter: str) -> bool:
    """True if category_filter is "all" or equals the entry's category."""
    return category_filter == ALL_CATEGORIES or entry.category == category_filter


def _check_category_filter(category_filter: str) -> None:
    if category_filter not in CATEGORY_FILTERS:
        raise ValueError(
            f"Unknown category filter {category_filter!r} "
            f"(expected one of {', '.join(CATEGORY_FILTERS)})"
        )


def filter_entries(
    entries: Iterable[CatalogEntry], search_term: str, category_filter: str
) -> list[CatalogEntry]:
    """Return entries matching both predicates, preserving input order."""
    _check_category_filter(category_filter)
    return [
        entry
        for entry in entries
        if matches_search(entry, search_term) and matches_category(entry, category_filter)
    ]


# ============================================================================
# Grouping
# ============================================================================


def query_catalog(
    entries: Iterable[CatalogEntry], search_term: str, category_filter: str
) -> GroupedView:
    """Filter and group entries by category.

    With ``"all"``, groups follow the fixed category order and categories
    without matches are omitted. With a specific category, the result holds
    exactly that one key, even when its list is empty.

    Raises:
        ValueError: If category_filter is neither "all" nor a known category.
    """
    matched = filter_entries(entries, search_term, category_filter)
    if category_filter != ALL_CATEGORIES:
        return {category_filter: matched}
    grouped: GroupedView = {}
    for category in CATEGORIES:
        in_category = [entry for entry in matched if entry.category == category]
        if in_category:
            grouped[category] = in_category
    return grouped


def flatten_groups(view: Mapping[str, list[CatalogEntry]]) -> Iterator[CatalogEntry]:
    """Yield entries of a grouped view in display order."""
    for group in view.values():
        yield from group


def count_entries(view: Mapping[str, list[CatalogEntry]]) -> int:
    return sum(len(group) for group in view.values())


__all__ = [
    "_HIGHLIGHT_PATTERN_CACHE",
    "GroupedView",
    "count_entries",
    "escape_rich_text",
    "filter_entries",
    "flatten_groups",
    "highlight_text",
    "matches_category",
    "matches_search",
    "query_catalog",
    "truncate_text",
]
