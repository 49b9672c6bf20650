"""General-purpose modal dialogs."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Label, Static

from component_hub.themes import THEME_COLORS

# ============================================================================
# Help Overlay
# ============================================================================

HelpSections = list[tuple[str, list[tuple[str, str]]]]


class HelpScreen(ModalScreen[None]):
    """Full-screen help overlay showing all keyboard shortcuts by category."""

    _DEFAULT_SECTIONS: HelpSections = [
        (
            "Navigation",
            [
                ("j / k", "Navigate down / up"),
                ("Enter", "Open component details"),
                ("Esc", "Clear search / close details"),
            ],
        ),
        (
            "Search & Filter",
            [
                ("/", "Search names and tags"),
                ("f / F", "Next / previous category"),
                ("0-4", "All / UI / Hooks / Providers / Pages"),
            ],
        ),
        (
            "Selection",
            [
                ("Space", "Toggle selection"),
                ("a", "Select all visible"),
                ("u", "Clear selection"),
            ],
        ),
        (
            "Export",
            [
                ("c", "Copy component code"),
                ("y / C", "Copy selected as LLM-ready Markdown"),
                ("E", "Export selected to a Markdown file"),
            ],
        ),
        (
            "Details",
            [
                ("[ / ]", "Previous / next page"),
                ("c", "Copy code of the shown page"),
                ("p", "Toggle preview"),
            ],
        ),
        (
            "Other",
            [
                ("Ctrl+t", "Cycle theme"),
                ("?", "Help overlay"),
                ("q", "Quit"),
            ],
        ),
    ]

    BINDINGS = [
        Binding("question_mark", "dismiss", "Close", show=False),
        Binding("escape", "dismiss", "Close"),
        Binding("q", "dismiss", "Close", show=False),
    ]

    CSS = """
    HelpScreen {
        align: center middle;
    }

    #help-dialog {
        width: 70%;
        height: 85%;
        min-width: 56;
        min-height: 20;
        background: $th-background;
        border: tall $th-accent;
        padding: 0 2;
        overflow-y: auto;
    }

    #help-title {
        text-style: bold;
        color: $th-accent-alt;
        text-align: center;
        margin-bottom: 1;
    }

    .help-section-title {
        text-style: bold;
    }

    .help-keys {
        padding-left: 2;
        margin-bottom: 1;
        color: $th-text;
    }

    #help-footer {
        text-align: center;
        color: $th-muted;
    }
    """

    def __init__(
        self,
        sections: HelpSections | None = None,
        footer_note: str = "Close: ? / Esc / q",
    ) -> None:
        super().__init__()
        self._sections = sections or list(self._DEFAULT_SECTIONS)
        self._footer_note = footer_note

    @staticmethod
    def _render_section_lines(entries: list[tuple[str, str]]) -> str:
        green = THEME_COLORS["green"]
        return "\n".join(f"[{green}]{key:<8}[/] {description}" for key, description in entries)

    def compose(self) -> ComposeResult:
        with VerticalScroll(id="help-dialog"):
            yield Label("Keyboard Shortcuts", id="help-title")
            for section_name, entries in self._sections:
                if not entries:
                    continue
                yield Label(
                    f"[{THEME_COLORS['accent']}]{section_name}[/]",
                    classes="help-section-title",
                )
                yield Static(self._render_section_lines(entries), classes="help-keys")
            yield Label(self._footer_note, id="help-footer")

    def action_dismiss(self) -> None:
        self.dismiss(None)


__all__ = [
    "HelpScreen",
]
