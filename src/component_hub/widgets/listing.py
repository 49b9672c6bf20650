"""List rendering helpers for catalog entries and category group headers."""

from __future__ import annotations

from component_hub.models import CATEGORY_ICONS, CatalogEntry
from component_hub.query import escape_rich_text, highlight_text, truncate_text
from component_hub.themes import THEME_COLORS, get_category_color

DESCRIPTION_PREVIEW_MAX_LEN = 80  # Max description length in list rows
MAX_LIST_TAGS = 4  # Tags shown per row before "+N"

# Icon identifier -> glyph, per icon set
_ICON_SETS: dict[str, dict[str, str]] = {
    "unicode": {
        "layout": "▦",
        "zap": "⚡",
        "users": "⚇",
        "code": "⟨⟩",
        "selected": "●",
        "unselected": "○",
        "variants": "⧉",
    },
    "ascii": {
        "layout": "#",
        "zap": "~",
        "users": "@",
        "code": "<>",
        "selected": "[x]",
        "unselected": "[ ]",
        "variants": "+",
    },
}
_ACTIVE_ICON_SET = _ICON_SETS["unicode"]

# Fallback for an identifier missing from the active set
_UNKNOWN_ICON = "?"


def set_ascii_icons(enabled: bool) -> None:
    """Switch list indicators between Unicode and ASCII modes."""
    global _ACTIVE_ICON_SET
    _ACTIVE_ICON_SET = _ICON_SETS["ascii"] if enabled else _ICON_SETS["unicode"]


def icon_glyph(identifier: str) -> str:
    return _ACTIVE_ICON_SET.get(identifier, _UNKNOWN_ICON)


def category_glyph(category: str) -> str:
    """Glyph for a category, looked up through CATEGORY_ICONS."""
    return icon_glyph(CATEGORY_ICONS.get(category, ""))


def render_group_header(category: str, count: int) -> str:
    """Render a category group heading for the OptionList."""
    color = get_category_color(category)
    glyph = escape_rich_text(category_glyph(category))
    return f"[bold {color}]{glyph} {escape_rich_text(category)}[/] [{THEME_COLORS['muted']}]({count})[/]"


def _render_tags(tags: tuple[str, ...], search_term: str) -> str:
    shown = [highlight_text(tag, search_term, THEME_COLORS["accent"]) for tag in tags[:MAX_LIST_TAGS]]
    extra = len(tags) - MAX_LIST_TAGS
    if extra > 0:
        shown.append(f"+{extra}")
    return f"[{THEME_COLORS['purple']}]{', '.join(shown)}[/]" if shown else ""


def render_entry_option(
    entry: CatalogEntry,
    *,
    selected: bool = False,
    search_term: str = "",
) -> str:
    """Render a catalog entry as Rich markup for OptionList display."""
    if selected:
        marker = f"[{THEME_COLORS['green']}]{escape_rich_text(icon_glyph('selected'))}[/]"
    else:
        marker = f"[{THEME_COLORS['muted']}]{escape_rich_text(icon_glyph('unselected'))}[/]"
    name = highlight_text(entry.name, search_term, THEME_COLORS["accent"])
    title_line = f"{marker} [bold]{name}[/] [{THEME_COLORS['muted']}]v{escape_rich_text(entry.version)}[/]"
    if entry.variants:
        glyph = escape_rich_text(icon_glyph("variants"))
        title_line += f" [{THEME_COLORS['orange']}]{glyph} {len(entry.variants)}[/]"

    description = escape_rich_text(truncate_text(entry.description, DESCRIPTION_PREVIEW_MAX_LEN))
    lines = [title_line, f"  [dim]{description}[/]"]
    tags = _render_tags(entry.tags, search_term)
    if tags:
        lines.append(f"  {tags}")
    return "\n".join(lines)


__all__ = [
    "DESCRIPTION_PREVIEW_MAX_LEN",
    "MAX_LIST_TAGS",
    "category_glyph",
    "icon_glyph",
    "render_entry_option",
    "render_group_header",
    "set_ascii_icons",
]
