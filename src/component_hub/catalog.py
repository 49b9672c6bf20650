"""Catalog store, invariant validation, and JSON catalog loading."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path
from typing import Any

from component_hub.models import CATEGORIES, CatalogEntry, Variant

logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """Raised when catalog data violates the data model invariants."""


# ============================================================================
# Validation
# ============================================================================


def validate_entry(entry: CatalogEntry) -> None:
    """Check a single entry's category and variant invariants."""
    if entry.category not in CATEGORIES:
        raise CatalogError(
            f"Entry {entry.id!r} has invalid category {entry.category!r} "
            f"(expected one of {', '.join(CATEGORIES)})"
        )
    if entry.variants is None:
        return
    if not entry.variants:
        raise CatalogError(f"Entry {entry.id!r} declares an empty variant list")
    seen: set[str] = set()
    for variant in entry.variants:
        if variant.name in seen:
            raise CatalogError(f"Entry {entry.id!r} has duplicate variant name {variant.name!r}")
        seen.add(variant.name)


def validate_entries(entries: Iterable[CatalogEntry]) -> None:
    """Validate every entry and the catalog-wide id uniqueness invariant."""
    seen_ids: set[str] = set()
    for entry in entries:
        if entry.id in seen_ids:
            raise CatalogError(f"Duplicate entry id {entry.id!r}")
        seen_ids.add(entry.id)
        validate_entry(entry)


# ============================================================================
# Catalog Store
# ============================================================================


class CatalogStore:
    """Read-only, ordered collection of catalog entries.

    Populated once at startup and never mutated; safe to share.
    """

    __slots__ = ("_by_id", "_entries")

    def __init__(self, entries: Iterable[CatalogEntry]) -> None:
        materialized = tuple(entries)
        validate_entries(materialized)
        self._entries: tuple[CatalogEntry, ...] = materialized
        self._by_id: dict[str, CatalogEntry] = {entry.id: entry for entry in materialized}

    @property
    def entries(self) -> tuple[CatalogEntry, ...]:
        return self._entries

    def get(self, entry_id: str) -> CatalogEntry | None:
        return self._by_id.get(entry_id)

    def entries_for_ids(self, ids: Iterable[str]) -> list[CatalogEntry]:
        """Return entries whose id is in ids, in catalog order. Unknown ids are skipped."""
        wanted = set(ids)
        return [entry for entry in self._entries if entry.id in wanted]

    def __contains__(self, entry_id: object) -> bool:
        return entry_id in self._by_id

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


# ============================================================================
# JSON Catalog Parsing
# ============================================================================


def _require_str(data: dict[str, Any], key: str, context: str, *aliases: str) -> str:
    """Return data[key] (or the first present alias) as a string, else raise."""
    for candidate in (key, *aliases):
        if candidate in data:
            value = data[candidate]
            if not isinstance(value, str):
                raise CatalogError(f"{context}: field {candidate!r} must be a string")
            return value
    raise CatalogError(f"{context}: missing required field {key!r}")


def _parse_tags(raw: Any, context: str) -> tuple[str, ...]:
    if raw is None:
        return ()
    if not isinstance(raw, list) or not all(isinstance(tag, str) for tag in raw):
        raise CatalogError(f"{context}: 'tags' must be a list of strings")
    return tuple(raw)


def _parse_variants(raw: Any, context: str) -> tuple[Variant, ...] | None:
    if raw is None:
        return None
    if not isinstance(raw, list):
        raise CatalogError(f"{context}: 'variants' must be a list")
    variants: list[Variant] = []
    for index, item in enumerate(raw):
        item_context = f"{context} variant #{index}"
        if not isinstance(item, dict):
            raise CatalogError(f"{item_context}: expected an object")
        variants.append(
            Variant(
                name=_require_str(item, "name", item_context),
                file_path=_require_str(item, "file_path", item_context, "filePath"),
                code=_require_str(item, "code", item_context),
            )
        )
    return tuple(variants)


def parse_catalog_entry(data: dict[str, Any], index: int = 0) -> CatalogEntry:
    """Build a CatalogEntry from one JSON object.

    Accepts both snake_case keys and the camelCase keys (``filePath``,
    ``subPages``) used by the web front-end's seed files.
    """
    context = f"Entry #{index}"
    if "id" in data and isinstance(data["id"], str):
        context = f"Entry {data['id']!r}"
    raw_variants = data.get("variants", data.get("subPages"))
    return CatalogEntry(
        id=_require_str(data, "id", context),
        name=_require_str(data, "name", context),
        description=_require_str(data, "description", context) if "description" in data else "",
        category=_require_str(data, "category", context),
        tags=_parse_tags(data.get("tags"), context),
        version=_require_str(data, "version", context) if "version" in data else "",
        file_path=_require_str(data, "file_path", context, "filePath"),
        code=_require_str(data, "code", context),
        variants=_parse_variants(raw_variants, context),
    )


def parse_catalog_data(data: Any) -> list[CatalogEntry]:
    """Parse decoded JSON into validated catalog entries.

    The top level may be a list of entries or an object with a
    ``components`` list.
    """
    if isinstance(data, dict):
        data = data.get("components")
    if not isinstance(data, list):
        raise CatalogError("Catalog must be a list of components or {'components': [...]}")
    entries: list[CatalogEntry] = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise CatalogError(f"Entry #{index}: expected an object")
        entries.append(parse_catalog_entry(item, index))
    validate_entries(entries)
    return entries


def load_catalog_file(path: Path) -> list[CatalogEntry]:
    """Read and parse a JSON catalog file.

    Raises:
        OSError: If the file cannot be read.
        CatalogError: If the content is not valid JSON or violates invariants.
    """
    text = path.read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise CatalogError(f"{path.name} is not valid JSON: {exc}") from exc
    entries = parse_catalog_data(data)
    logger.debug("Loaded %d catalog entries from %s", len(entries), path)
    return entries


def count_blocks(entries: Sequence[CatalogEntry]) -> int:
    """Number of export blocks the given entries produce (one per variant or entry)."""
    return sum(len(entry.variants) if entry.variants else 1 for entry in entries)


__all__ = [
    "CatalogError",
    "CatalogStore",
    "count_blocks",
    "load_catalog_file",
    "parse_catalog_data",
    "parse_catalog_entry",
    "validate_entries",
    "validate_entry",
]
