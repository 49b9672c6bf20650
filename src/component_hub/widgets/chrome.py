"""Widget chrome for the category filter tabs and footer hints."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.message import Message
from textual.widgets import Label, Static

from component_hub.models import ALL_CATEGORIES, CATEGORY_FILTERS
from component_hub.query import escape_rich_text
from component_hub.themes import THEME_COLORS


class ContextFooter(Static):
    """Context-sensitive footer showing relevant keybindings."""

    DEFAULT_CSS = """
    ContextFooter {
        dock: bottom;
        height: 1;
        background: $th-background;
        color: $th-muted;
        padding: 0 1;
        border-top: solid $th-panel-alt;
    }
    """

    def render_bindings(self, bindings: list[tuple[str, str]], mode_badge: str = "") -> None:
        """Update the footer with a list of (key, label) binding hints."""
        accent = THEME_COLORS["accent"]
        muted = THEME_COLORS["muted"]
        parts = []
        if mode_badge:
            parts.append(mode_badge)
        for key, label in bindings:
            safe_key = escape_rich_text(key)
            if key and label:
                parts.append(f"[bold {accent}]{safe_key}[/] [{muted}]{label}[/]")
            elif label:
                parts.append(f"[italic {muted}]{label}[/]")
            else:
                parts.append(f"[italic {muted}]{safe_key}[/]")
        self.update("  ".join(parts))


def _tab_label(category: str) -> str:
    return "All" if category == ALL_CATEGORIES else category


class CategoryFilterBar(Horizontal):
    """Row of category tabs; the active filter is highlighted."""

    DEFAULT_CSS = """
    CategoryFilterBar {
        height: 1;
        padding: 0 1;
        background: $th-panel;
    }

    CategoryFilterBar .category-tab {
        padding: 0 1;
        color: $th-muted;
    }

    CategoryFilterBar .category-tab:hover {
        color: $th-text;
    }

    CategoryFilterBar .category-tab.active {
        color: $th-accent;
        text-style: bold reverse;
    }
    """

    class CategorySelected(Message):
        """Message sent when a category tab is clicked."""

        def __init__(self, category: str) -> None:
            super().__init__()
            self.category = category

    def __init__(self, active: str = ALL_CATEGORIES) -> None:
        super().__init__()
        self._active = active

    def compose(self) -> ComposeResult:
        for index, category in enumerate(CATEGORY_FILTERS):
            classes = "category-tab active" if category == self._active else "category-tab"
            yield Label(f"{index} {_tab_label(category)}", classes=classes, id=f"tab-{index}")

    @property
    def active(self) -> str:
        return self._active

    def set_active(self, category: str) -> None:
        """Highlight the tab for category."""
        self._active = category
        for index, candidate in enumerate(CATEGORY_FILTERS):
            tab = self.query_one(f"#tab-{index}", Label)
            tab.set_class(candidate == category, "active")

    def on_click(self, event: object) -> None:
        """Handle click on a category tab."""
        from textual.events import Click

        if not isinstance(event, Click):
            return
        widget = event.widget
        if not isinstance(widget, Label):
            return
        widget_id = widget.id or ""
        if widget_id.startswith("tab-"):
            try:
                index = int(widget_id.split("-", 1)[1])
                self.post_message(self.CategorySelected(CATEGORY_FILTERS[index]))
            except (ValueError, IndexError):
                pass


__all__ = [
    "CategoryFilterBar",
    "ContextFooter",
]
