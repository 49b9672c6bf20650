"""Detail pane widget for rendering a catalog entry's metadata, preview, and code."""

from __future__ import annotations

import logging
from pathlib import PurePosixPath

from rich.console import Group, RenderableType
from rich.syntax import Syntax
from rich.text import Text
from textual.widgets import Static

from component_hub.models import CatalogEntry, ResolvedView
from component_hub.query import escape_rich_text
from component_hub.themes import THEME_COLORS, get_category_color
from component_hub.widgets.listing import category_glyph

logger = logging.getLogger(__name__)

# File suffix -> Pygments lexer name for the code section
_LEXERS_BY_SUFFIX: dict[str, str] = {
    ".ts": "typescript",
    ".tsx": "typescript",
    ".js": "javascript",
    ".jsx": "javascript",
    ".py": "python",
    ".css": "css",
    ".json": "json",
}
DEFAULT_LEXER = "typescript"

NO_PREVIEW_MESSAGE = "Logic component: no visual preview available"


def lexer_for_path(file_path: str) -> str:
    """Pick a syntax lexer from a file path's suffix."""
    return _LEXERS_BY_SUFFIX.get(PurePosixPath(file_path).suffix.lower(), DEFAULT_LEXER)


def _render_header(entry: CatalogEntry) -> str:
    color = get_category_color(entry.category)
    glyph = escape_rich_text(category_glyph(entry.category))
    return (
        f"[bold {THEME_COLORS['text']}]{escape_rich_text(entry.name)}[/]"
        f"  [{color}]{glyph} {escape_rich_text(entry.category)}[/]"
        f"  [{THEME_COLORS['muted']}]v{escape_rich_text(entry.version)}[/]"
    )


def _render_metadata(entry: CatalogEntry, resolved: ResolvedView, variant_name: str) -> str:
    accent = THEME_COLORS["accent"]
    lines = [f"[{THEME_COLORS['text']}]{escape_rich_text(entry.description)}[/]"]
    lines.append(f"  [bold {accent}]Path:[/] [{THEME_COLORS['purple']}]{escape_rich_text(resolved.file_path)}[/]")
    if entry.tags:
        tags = ", ".join(escape_rich_text(tag) for tag in entry.tags)
        lines.append(f"  [bold {accent}]Tags:[/] {tags}")
    if entry.variants:
        names = []
        for name in entry.variant_names:
            safe = escape_rich_text(name)
            if name == variant_name:
                names.append(f"[bold reverse {THEME_COLORS['accent_alt']}] {safe} [/]")
            else:
                names.append(f"[{THEME_COLORS['muted']}] {safe} [/]")
        lines.append(f"  [bold {accent}]Pages:[/] {' '.join(names)}")
    return "\n".join(lines)


def _render_preview(resolved: ResolvedView) -> RenderableType:
    if resolved.preview is None:
        return Text(NO_PREVIEW_MESSAGE, style="dim italic")
    return resolved.preview()


def render_entry_details(
    entry: CatalogEntry,
    resolved: ResolvedView,
    *,
    variant_name: str = "",
    show_preview: bool = True,
) -> Group:
    """Build the full detail renderable for an entry and its resolved view."""
    orange = THEME_COLORS["orange"]
    parts: list[RenderableType] = [
        Text.from_markup(_render_header(entry)),
        Text.from_markup(_render_metadata(entry, resolved, variant_name)),
        Text(""),
    ]
    if show_preview:
        parts.append(Text.from_markup(f"[bold {orange}]▾ Preview[/]"))
        parts.append(_render_preview(resolved))
        parts.append(Text(""))
    parts.append(Text.from_markup(f"[bold {THEME_COLORS['green']}]▾ Code[/]"))
    parts.append(
        Syntax(
            resolved.code,
            lexer_for_path(resolved.file_path),
            theme="monokai",
            line_numbers=True,
            word_wrap=False,
        )
    )
    return Group(*parts)


class EntryDetails(Static):
    """Widget to display one catalog entry."""

    def __init__(self, *, id: str | None = None) -> None:
        super().__init__(id=id)
        self._entry: CatalogEntry | None = None

    def update_entry(
        self,
        entry: CatalogEntry | None,
        resolved: ResolvedView | None = None,
        *,
        variant_name: str = "",
        show_preview: bool = True,
    ) -> None:
        """Update the displayed entry. ``None`` shows a placeholder."""
        self._entry = entry
        if entry is None or resolved is None:
            self.update("[dim italic]Highlight a component to view details[/]")
            return
        logger.debug("Rendering details for %s (variant=%r)", entry.id, variant_name)
        self.update(
            render_entry_details(
                entry, resolved, variant_name=variant_name, show_preview=show_preview
            )
        )

    @property
    def entry(self) -> CatalogEntry | None:
        return self._entry


__all__ = [
    "DEFAULT_LEXER",
    "NO_PREVIEW_MESSAGE",
    "EntryDetails",
    "lexer_for_path",
    "render_entry_details",
]
