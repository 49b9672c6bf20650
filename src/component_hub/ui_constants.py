"""Internal UI constants for the ComponentHub app."""

from __future__ import annotations

from textual.binding import Binding, BindingType

APP_CSS = """
Screen {
    background: $th-background;
}

Header {
    background: $th-panel-alt;
    color: $th-text;
}

#main-container {
    height: 1fr;
}

#left-pane {
    width: 2fr;
    min-width: 44;
    max-width: 90;
    height: 100%;
    border: tall $th-highlight;
    background: $th-panel;
}

#left-pane:focus-within {
    border: tall $th-accent;
}

#right-pane {
    width: 3fr;
    height: 100%;
    border: tall $th-highlight;
    background: $th-panel;
}

#list-header {
    padding: 0 1;
    background: $th-panel;
    color: $th-accent;
    text-style: bold;
}

#details-header {
    padding: 0 1;
    background: $th-panel;
    color: $th-accent-alt;
    text-style: bold;
}

#entry-list {
    height: 1fr;
    scrollbar-gutter: stable;
}

#details-scroll {
    height: 1fr;
    padding: 0 1;
}

#search-container {
    height: auto;
    padding: 0 1;
    background: $th-panel;
    display: none;
}

#search-container.visible {
    display: block;
}

#search-input {
    width: 100%;
    border: tall $th-accent;
    background: $th-background;
}

#search-input:focus {
    border: tall $th-accent-alt;
}

#entry-list > .option-list--option-highlighted {
    background: $th-highlight;
}

#entry-list:focus > .option-list--option-highlighted {
    background: $th-highlight-focus;
}

#entry-list > .option-list--option-hover {
    background: $th-panel-alt;
}

VerticalScroll {
    scrollbar-background: $th-scrollbar-bg;
    scrollbar-color: $th-scrollbar-thumb;
    scrollbar-color-active: $th-scrollbar-active;
}

#status-bar {
    padding: 0 1;
    color: $th-muted;
}
"""

APP_BINDINGS: list[BindingType] = [
    Binding("q", "quit", "Quit", show=False),
    Binding("slash", "toggle_search", "Search", show=False),
    Binding("escape", "cancel_search", "Cancel", show=False),
    Binding("j", "cursor_down", "Down", show=False),
    Binding("k", "cursor_up", "Up", show=False),
    # Selection
    Binding("space", "toggle_select", "Select", show=False),
    Binding("a", "select_all", "Select All", show=False),
    Binding("u", "clear_selection", "Clear Selection", show=False),
    # Copy and export
    Binding("c", "copy_code", "Copy Code", show=False),
    Binding("y", "bulk_copy", "Copy Selected", show=False),
    Binding("C", "bulk_copy", "Copy Selected", show=False),
    Binding("E", "export_file", "Export File", show=False),
    # Category filter
    Binding("f", "next_category", "Next Category", show=False),
    Binding("F", "prev_category", "Previous Category", show=False),
    Binding("0", "set_category(0)", "All", show=False),
    Binding("1", "set_category(1)", "UI", show=False),
    Binding("2", "set_category(2)", "Hooks", show=False),
    Binding("3", "set_category(3)", "Providers", show=False),
    Binding("4", "set_category(4)", "Pages", show=False),
    # Detail pane preview
    Binding("p", "toggle_preview", "Preview", show=False),
    # Theme cycling
    Binding("ctrl+t", "cycle_theme", "Theme", show=False),
    # Help overlay
    Binding("question_mark", "show_help", "Help (?)", show=False),
]

# Footer hints for the main list: (key, label)
LIST_FOOTER_BINDINGS: list[tuple[str, str]] = [
    ("/", "search"),
    ("Space", "select"),
    ("Enter", "open"),
    ("c", "copy"),
    ("y", "copy selected"),
    ("E", "export"),
    ("f", "category"),
    ("?", "help"),
]

__all__ = [
    "APP_BINDINGS",
    "APP_CSS",
    "LIST_FOOTER_BINDINGS",
]
