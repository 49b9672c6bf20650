"""Shared test fixtures for Component Hub tests."""

from __future__ import annotations

from typing import Any

import pytest

from component_hub.models import CatalogEntry, UserConfig, Variant
from component_hub.query import _HIGHLIGHT_PATTERN_CACHE
from component_hub.themes import DEFAULT_THEME_NAME, apply_theme
from component_hub.widgets.listing import set_ascii_icons

# ── Module-level dict isolation ──────────────────────────────────────────────


@pytest.fixture(autouse=True)
def _reset_global_dicts():
    """Restore THEME_COLORS, CATEGORY_COLORS, and the icon set after each test.

    ComponentHub.__init__ and action_cycle_theme mutate these module-level
    tables. Without this fixture tests that instantiate the app would pollute
    the state for later tests.
    """
    yield
    apply_theme(DEFAULT_THEME_NAME)
    set_ascii_icons(False)
    _HIGHLIGHT_PATTERN_CACHE.clear()


# ── Factories ────────────────────────────────────────────────────────────────


@pytest.fixture
def make_variant():
    """Factory fixture for creating Variant instances with sensible defaults."""

    def _make(
        name: str = "Main",
        file_path: str | None = None,
        code: str | None = None,
        preview: Any = None,
    ) -> Variant:
        slug = name.replace(" ", "")
        return Variant(
            name=name,
            file_path=file_path if file_path is not None else f"src/pages/{slug}.tsx",
            code=code if code is not None else f"export const {slug} = () => null;",
            preview=preview,
        )

    return _make


@pytest.fixture
def make_entry():
    """Factory fixture for creating CatalogEntry instances with sensible defaults."""

    def _make(
        id: str = "1",
        name: str = "Button",
        description: str = "Test component",
        category: str = "UI",
        tags: tuple[str, ...] = ("button",),
        version: str = "1.0.0",
        file_path: str | None = None,
        code: str | None = None,
        preview: Any = None,
        variants: tuple[Variant, ...] | None = None,
    ) -> CatalogEntry:
        return CatalogEntry(
            id=id,
            name=name,
            description=description,
            category=category,
            tags=tuple(tags),
            version=version,
            file_path=file_path if file_path is not None else f"src/components/{name}.tsx",
            code=code if code is not None else f"export const {name} = () => null;",
            preview=preview,
            variants=variants,
        )

    return _make


@pytest.fixture
def sample_config():
    """Factory fixture for creating UserConfig with optional overrides."""

    def _make(**kwargs: Any) -> UserConfig:
        return UserConfig(**kwargs)

    return _make
