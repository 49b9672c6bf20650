"""Focused tests for list and detail rendering helpers."""

from __future__ import annotations

from rich.console import Console
from rich.syntax import Syntax
from rich.text import Text

from component_hub.models import ResolvedView
from component_hub.themes import MONOKAI_THEME
from component_hub.variants import resolve_variant
from component_hub.widgets.details import (
    NO_PREVIEW_MESSAGE,
    lexer_for_path,
    render_entry_details,
)
from component_hub.widgets.listing import (
    category_glyph,
    icon_glyph,
    render_entry_option,
    render_group_header,
    set_ascii_icons,
)


def _plain(renderable) -> str:
    console = Console(width=100, record=True, color_system=None)
    console.print(renderable)
    return console.export_text()


class TestListing:
    def test_set_ascii_icons_changes_rendered_selection_marker(self, make_entry):
        entry = make_entry(name="Selection Test")

        set_ascii_icons(True)
        assert "[x]" in Text.from_markup(render_entry_option(entry, selected=True)).plain

        set_ascii_icons(False)
        assert "●" in render_entry_option(entry, selected=True)

    def test_unselected_marker(self, make_entry):
        assert "○" in render_entry_option(make_entry(), selected=False)

    def test_option_markup_parses(self, make_entry):
        entry = make_entry(name="[weird]", description="desc [/]", tags=("a[b]",))
        plain = Text.from_markup(render_entry_option(entry, search_term="weird")).plain
        assert "[weird]" in plain
        assert "a[b]" in plain

    def test_option_highlights_search_term(self, make_entry):
        markup = render_entry_option(make_entry(name="useHybridAuth"), search_term="auth")
        assert f"[bold {MONOKAI_THEME['accent']}]Auth[/]" in markup

    def test_option_truncates_description(self, make_entry):
        plain = Text.from_markup(render_entry_option(make_entry(description="x" * 200))).plain
        assert "x" * 80 + "..." in plain
        assert "x" * 81 not in plain

    def test_option_limits_tags(self, make_entry):
        entry = make_entry(tags=("a", "b", "c", "d", "e", "f"))
        plain = Text.from_markup(render_entry_option(entry)).plain
        assert "a, b, c, d, +2" in plain

    def test_option_without_tags_has_two_lines(self, make_entry):
        assert len(render_entry_option(make_entry(tags=())).splitlines()) == 2

    def test_composite_shows_variant_count(self, make_entry, make_variant):
        entry = make_entry(variants=(make_variant("A"), make_variant("B")))
        plain = Text.from_markup(render_entry_option(entry)).plain
        assert "⧉ 2" in plain

    def test_group_header(self):
        plain = Text.from_markup(render_group_header("Hooks", 1)).plain
        assert plain == "⚡ Hooks (1)"

    def test_glyph_fallbacks(self):
        assert icon_glyph("nope") == "?"
        assert category_glyph("Widgets") == "?"
        set_ascii_icons(True)
        assert category_glyph("Pages") == "<>"


class TestDetails:
    def test_lexer_for_path(self):
        assert lexer_for_path("src/Button.tsx") == "typescript"
        assert lexer_for_path("src/util.JS") == "javascript"
        assert lexer_for_path("src/pages/auth/") == "typescript"
        assert lexer_for_path("hooks.py") == "python"

    def test_logic_entry_shows_no_preview_message(self, make_entry):
        entry = make_entry(name="useThing", category="Hooks", code="export const useThing = 1;")

        text = _plain(render_entry_details(entry, resolve_variant(entry, "")))

        assert NO_PREVIEW_MESSAGE in text
        assert "export const useThing = 1;" in text

    def test_preview_hidden_when_disabled(self, make_entry):
        entry = make_entry()

        text = _plain(render_entry_details(entry, resolve_variant(entry, ""), show_preview=False))

        assert "Preview" not in text
        assert NO_PREVIEW_MESSAGE not in text

    def test_preview_renderer_called(self, make_entry):
        entry = make_entry(preview=lambda: Text("Rendered Sample"))
        text = _plain(render_entry_details(entry, resolve_variant(entry, "")))
        assert "Rendered Sample" in text

    def test_composite_shows_pages_and_resolved_path(self, make_entry, make_variant):
        entry = make_entry(
            category="Pages",
            variants=(
                make_variant("Login Page", file_path="src/Login.tsx"),
                make_variant("Register Page", file_path="src/Register.tsx"),
            ),
        )

        text = _plain(
            render_entry_details(
                entry, resolve_variant(entry, "Register Page"), variant_name="Register Page"
            )
        )

        assert "Pages:" in text
        assert "Login Page" in text
        assert "src/Register.tsx" in text

    def test_code_section_is_syntax(self, make_entry):
        entry = make_entry(file_path="a.py", code="pass")
        group = render_entry_details(
            entry, ResolvedView(code="pass", preview=None, file_path="a.py")
        )
        syntax = group.renderables[-1]
        assert isinstance(syntax, Syntax)
        assert syntax.code == "pass"
