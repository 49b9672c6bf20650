"""Data models and constants for the Component Hub application."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

# Application identity used for platformdirs config paths
CONFIG_APP_NAME = "component-hub"

# Fixed category enumeration, in display order
CATEGORIES: tuple[str, ...] = ("UI", "Hooks", "Providers", "Pages")

# Sentinel category filter meaning "every category, grouped"
ALL_CATEGORIES = "all"

CATEGORY_FILTERS: tuple[str, ...] = (ALL_CATEGORIES, *CATEGORIES)

# Category -> icon identifier (resolved to a glyph by the list widget)
CATEGORY_ICONS: dict[str, str] = {
    "UI": "layout",
    "Hooks": "zap",
    "Providers": "users",
    "Pages": "code",
}

# Language tag used on fenced code blocks in bulk exports
DEFAULT_EXPORT_LANGUAGE = "typescript"

# Opaque handle to a visual preview. Calling it yields a Rich renderable;
# the engine only passes it along.
PreviewRenderer = Callable[[], Any]


@dataclass(frozen=True, slots=True)
class Variant:
    """A named sub-page of a composite catalog entry."""

    name: str
    file_path: str
    code: str
    preview: PreviewRenderer | None = None


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    """A reusable building block with metadata, source text, and optional preview."""

    id: str
    name: str
    description: str
    category: str
    tags: tuple[str, ...]
    version: str
    file_path: str
    code: str
    preview: PreviewRenderer | None = None
    variants: tuple[Variant, ...] | None = None

    @property
    def is_composite(self) -> bool:
        return bool(self.variants)

    @property
    def variant_names(self) -> list[str]:
        return [variant.name for variant in self.variants or ()]


@dataclass(frozen=True, slots=True)
class ResolvedView:
    """Effective code/preview/path of an entry after variant resolution."""

    code: str
    preview: PreviewRenderer | None
    file_path: str


@dataclass(slots=True)
class SessionState:
    """State to restore on next run (filters and cursor). The selection always starts empty."""

    search_term: str = ""
    category_filter: str = ALL_CATEGORIES
    highlighted_id: str | None = None

    def __post_init__(self) -> None:
        """Reset an unknown category filter to "all"."""
        if self.category_filter not in CATEGORY_FILTERS:
            self.category_filter = ALL_CATEGORIES


@dataclass(slots=True)
class UserConfig:
    """UI preferences and session state. Catalog data is never stored here."""

    session: SessionState = field(default_factory=SessionState)
    theme_name: str = "monokai"
    export_language: str = DEFAULT_EXPORT_LANGUAGE
    export_dir: str = ""  # Empty = use ~/component-hub-exports/
    ascii_icons: bool = False
    show_preview: bool = True
    version: int = 1
    config_defaulted: bool = False  # Runtime only: set when a corrupt file was replaced


__all__ = [
    "ALL_CATEGORIES",
    "CATEGORIES",
    "CATEGORY_FILTERS",
    "CATEGORY_ICONS",
    "CONFIG_APP_NAME",
    "DEFAULT_EXPORT_LANGUAGE",
    "CatalogEntry",
    "PreviewRenderer",
    "ResolvedView",
    "SessionState",
    "UserConfig",
    "Variant",
]
