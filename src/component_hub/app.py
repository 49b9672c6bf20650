"""Textual application shell for browsing and exporting the component catalog."""

from __future__ import annotations

import logging
import sys
from dataclasses import replace
from pathlib import Path

from textual import on
from textual.app import App, ComposeResult, ScreenStackError
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.css.query import NoMatches
from textual.widgets import Header, Input, Label, OptionList
from textual.widgets.option_list import Option

from component_hub.action_messages import (
    build_actionable_error,
    build_empty_selection_warning,
    build_file_export_notification,
)
from component_hub.catalog import CatalogStore
from component_hub.cli import (
    _configure_color_mode,
    _configure_logging,
    _resolve_catalog,
    _validate_interactive_tty,
)
from component_hub.cli import main as _cli_main
from component_hub.config import load_config, save_config
from component_hub.export import DEFAULT_EXPORT_DIR
from component_hub.io_actions import copy_to_clipboard, write_timestamped_export_file
from component_hub.modals import EntryDetailScreen, HelpScreen
from component_hub.models import ALL_CATEGORIES, CATEGORY_FILTERS, CatalogEntry, UserConfig
from component_hub.query import count_entries, escape_rich_text, flatten_groups
from component_hub.state import (
    AppState,
    CategoryChanged,
    Effect,
    EntriesSelected,
    EntryOpened,
    HubController,
    Notify,
    SearchChanged,
    SelectionCleared,
    SelectionToggled,
    run_effects,
    state_from_session,
    state_to_session,
)
from component_hub.themes import TEXTUAL_THEMES, apply_theme, next_theme_name
from component_hub.ui_constants import APP_BINDINGS, APP_CSS, LIST_FOOTER_BINDINGS
from component_hub.variants import initial_variant_name, resolve_variant
from component_hub.widgets import (
    CategoryFilterBar,
    ContextFooter,
    EntryDetails,
    render_entry_option,
    render_group_header,
    set_ascii_icons,
)

logger = logging.getLogger(__name__)

# Option ids for category headers; entry options use the entry id
_GROUP_OPTION_PREFIX = "group:"


def build_list_empty_message(search_term: str, category_filter: str) -> str:
    """Build the placeholder shown when no component matches."""
    lines = ["[dim italic]No components found[/]"]
    if search_term or category_filter != ALL_CATEGORIES:
        lines.append("[dim]Try adjusting your search or filter criteria[/]")
    return "\n".join(lines)


class ComponentHub(App):
    """A TUI application to browse a component catalog and export code."""

    TITLE = "Component Hub"

    CSS = APP_CSS

    BINDINGS = APP_BINDINGS

    def __init__(
        self,
        store: CatalogStore,
        config: UserConfig | None = None,
        restore_session: bool = True,
        ascii_icons: bool = False,
        initial_search: str | None = None,
        initial_category: str | None = None,
    ) -> None:
        super().__init__()
        # Register all Textual themes so $th-* CSS variables resolve before compose()
        for textual_theme in TEXTUAL_THEMES.values():
            self.register_theme(textual_theme)
        self._config = config or UserConfig()
        self._restore_session = restore_session
        self._show_preview = self._config.show_preview
        set_ascii_icons(ascii_icons or self._config.ascii_icons)

        state = AppState()
        if restore_session:
            state = state_from_session(self._config.session)
        if initial_search is not None:
            state = replace(state, search_term=initial_search)
        if initial_category is not None:
            state = replace(state, category_filter=initial_category)
        self._controller = HubController(
            store, state, export_language=self._config.export_language
        )
        self._apply_theme()

    def _apply_theme(self) -> None:
        """Activate the configured theme for both Rich markup and CSS variables."""
        self._config.theme_name = apply_theme(self._config.theme_name)
        try:
            self.theme = self._config.theme_name
        except Exception as e:
            logger.debug("Skipping theme activation in current context: %s", e, exc_info=True)

    @property
    def controller(self) -> HubController:
        return self._controller

    def compose(self) -> ComposeResult:
        state = self._controller.state
        yield Header()
        with Horizontal(id="main-container"):
            with Vertical(id="left-pane"):
                yield Label(
                    f" Components ({len(self._controller.store)} total)", id="list-header"
                )
                yield CategoryFilterBar(state.category_filter)
                with Vertical(id="search-container"):
                    yield Input(placeholder=" Search components...", id="search-input")
                yield OptionList(id="entry-list")
                yield Label("", id="status-bar")
            with Vertical(id="right-pane"):
                yield Label(" Component Details", id="details-header")
                with VerticalScroll(id="details-scroll"):
                    yield EntryDetails(id="entry-details")
        yield ContextFooter()

    def on_mount(self) -> None:
        """Populate the list and restore the highlighted entry."""
        if self._config.config_defaulted:
            self.notify(
                "Config file was corrupt and has been backed up. Using defaults.",
                severity="warning",
                timeout=8,
            )
        self.sub_title = f"{len(self._controller.store)} components"

        search_term = self._controller.state.search_term
        if search_term:
            search_input = self._get_search_input_widget()
            with search_input.prevent(Input.Changed):
                search_input.value = search_term
            self.query_one("#search-container").add_class("visible")

        self._refresh_list_view()
        if self._restore_session and self._config.session.highlighted_id:
            self._highlight_entry(self._config.session.highlighted_id)
        self._refresh_detail_pane()
        self._update_status_bar()
        self._update_footer()
        logger.debug(
            "App mounted: %d entries, category=%s, %d selected",
            len(self._controller.store),
            self._controller.state.category_filter,
            self._controller.state.selection.size(),
        )
        self._get_entry_list_widget().focus()

    def on_unmount(self) -> None:
        """Save session state on exit."""
        self._save_session_state()

    # ========================================================================
    # Widget access
    # ========================================================================

    def _get_entry_list_widget(self) -> OptionList:
        return self.query_one("#entry-list", OptionList)

    def _get_search_input_widget(self) -> Input:
        return self.query_one("#search-input", Input)

    def _get_details_widget(self) -> EntryDetails:
        return self.query_one("#entry-details", EntryDetails)

    # ========================================================================
    # Persistence
    # ========================================================================

    def _save_config_or_warn(self, context: str) -> bool:
        """Save config and notify the user on failure.

        Returns True on success, False on failure.
        """
        if not save_config(self._config):
            self.notify(f"Failed to save {context}.", severity="warning")
            return False
        return True

    def _save_session_state(self) -> None:
        """Store filters, selection, and cursor in the config and save it.

        Handles the case where DOM widgets may already be destroyed during unmount.
        """
        try:
            highlighted = self._get_current_entry()
        except ScreenStackError:
            highlighted = None
        self._config.session = state_to_session(
            self._controller.state, highlighted.id if highlighted else None
        )
        self._config.show_preview = self._show_preview
        if not save_config(self._config):
            logger.warning("Failed to save session state to config file")

    # ========================================================================
    # List rendering
    # ========================================================================

    def _refresh_list_view(self) -> None:
        """Rebuild the grouped list from the controller's current view.

        Group headers are disabled options so the cursor skips them.
        """
        option_list = self._get_entry_list_widget()
        previous = self._get_current_entry()
        option_list.clear_options()
        state = self._controller.state
        view = self._controller.grouped_view()

        options: list[Option] = []
        for category, entries in view.items():
            if state.category_filter == ALL_CATEGORIES:
                options.append(
                    Option(
                        render_group_header(category, len(entries)),
                        id=f"{_GROUP_OPTION_PREFIX}{category}",
                        disabled=True,
                    )
                )
            options.extend(Option(self._render_option(entry), id=entry.id) for entry in entries)

        if count_entries(view) == 0:
            empty = build_list_empty_message(state.search_term, state.category_filter)
            option_list.add_option(Option(empty, disabled=True))
            return
        option_list.add_options(options)
        if previous is None or not self._highlight_entry(previous.id):
            self._highlight_first_entry()

    def _render_option(self, entry: CatalogEntry) -> str:
        state = self._controller.state
        return render_entry_option(
            entry,
            selected=state.selection.is_selected(entry.id),
            search_term=state.search_term,
        )

    def _refresh_entry_options(self) -> None:
        """Re-render entry rows in place after a selection change."""
        option_list = self._get_entry_list_widget()
        for index in range(option_list.option_count):
            option = option_list.get_option_at_index(index)
            entry = self._controller.store.get(option.id) if option.id else None
            if entry is not None:
                option_list.replace_option_prompt_at_index(index, self._render_option(entry))

    def _highlight_first_entry(self) -> None:
        option_list = self._get_entry_list_widget()
        for index in range(option_list.option_count):
            if not option_list.get_option_at_index(index).disabled:
                option_list.highlighted = index
                return

    def _highlight_entry(self, entry_id: str) -> bool:
        """Move the cursor to entry_id if it is listed. Returns True on success."""
        option_list = self._get_entry_list_widget()
        for index in range(option_list.option_count):
            if option_list.get_option_at_index(index).id == entry_id:
                option_list.highlighted = index
                return True
        return False

    def _get_current_entry(self) -> CatalogEntry | None:
        """Get the currently highlighted entry."""
        try:
            option_list = self._get_entry_list_widget()
        except NoMatches:
            return None
        idx = option_list.highlighted
        if idx is None or not 0 <= idx < option_list.option_count:
            return None
        option_id = option_list.get_option_at_index(idx).id
        return self._controller.store.get(option_id) if option_id else None

    def _visible_entry_ids(self) -> list[str]:
        return [entry.id for entry in flatten_groups(self._controller.grouped_view())]

    def _refresh_detail_pane(self) -> None:
        entry = self._get_current_entry()
        try:
            details = self._get_details_widget()
        except NoMatches:
            return
        if entry is None:
            details.update_entry(None)
            return
        variant_name = initial_variant_name(entry)
        details.update_entry(
            entry,
            resolve_variant(entry, variant_name),
            variant_name=variant_name,
            show_preview=self._show_preview,
        )

    def _update_status_bar(self) -> None:
        state = self._controller.state
        shown = count_entries(self._controller.grouped_view())
        parts = [f"{shown} shown", f"{state.selection.size()} selected"]
        if state.category_filter != ALL_CATEGORIES:
            parts.append(f"category: {state.category_filter}")
        if state.search_term:
            parts.append(f"search: {escape_rich_text(state.search_term)}")
        self.query_one("#status-bar", Label).update(" · ".join(parts))

    def _update_footer(self) -> None:
        selected = self._controller.state.selection.size()
        badge = f"[bold reverse] {selected} selected [/]" if selected else ""
        try:
            self.query_one(ContextFooter).render_bindings(LIST_FOOTER_BINDINGS, mode_badge=badge)
        except NoMatches:
            pass

    def _after_state_change(self, *, rebuild: bool) -> None:
        if rebuild:
            self._refresh_list_view()
            self._refresh_detail_pane()
        else:
            self._refresh_entry_options()
        self._update_status_bar()
        self._update_footer()

    # ========================================================================
    # Effects
    # ========================================================================

    def _copy_to_clipboard(self, text: str) -> bool:
        return copy_to_clipboard(text)

    def _notify_effect(self, effect: Notify) -> None:
        self.notify(effect.description, title=effect.title, severity=effect.severity)

    def _run_effects(self, effects: list[Effect]) -> bool:
        return run_effects(
            effects, write_clipboard=self._copy_to_clipboard, notify=self._notify_effect
        )

    # ========================================================================
    # List events
    # ========================================================================

    @on(OptionList.OptionHighlighted, "#entry-list")
    def on_entry_highlighted(self, event: OptionList.OptionHighlighted) -> None:
        self._refresh_detail_pane()

    @on(OptionList.OptionSelected, "#entry-list")
    def on_entry_selected(self, event: OptionList.OptionSelected) -> None:
        """Open the detail modal for the chosen entry (Enter key)."""
        entry_id = event.option.id
        if not entry_id or entry_id not in self._controller.store:
            return
        self._controller.dispatch(EntryOpened(entry_id))
        self.push_screen(
            EntryDetailScreen(
                self._controller,
                on_copy=self.action_copy_code,
                show_preview=self._show_preview,
            )
        )

    @on(Input.Changed, "#search-input")
    def on_search_changed(self, event: Input.Changed) -> None:
        self._controller.dispatch(SearchChanged(event.value))
        self._after_state_change(rebuild=True)

    @on(Input.Submitted, "#search-input")
    def on_search_submitted(self, event: Input.Submitted) -> None:
        self._get_entry_list_widget().focus()

    @on(CategoryFilterBar.CategorySelected)
    def on_category_selected(self, event: CategoryFilterBar.CategorySelected) -> None:
        self._set_category(event.category)

    # ========================================================================
    # Actions
    # ========================================================================

    def action_toggle_search(self) -> None:
        """Toggle search input visibility."""
        container = self.query_one("#search-container")
        if "visible" in container.classes:
            container.remove_class("visible")
            self._get_entry_list_widget().focus()
        else:
            container.add_class("visible")
            self._get_search_input_widget().focus()

    def action_cancel_search(self) -> None:
        """Clear the search term and hide the input."""
        container = self.query_one("#search-container")
        if "visible" not in container.classes and not self._controller.state.search_term:
            return
        container.remove_class("visible")
        search_input = self._get_search_input_widget()
        with search_input.prevent(Input.Changed):
            search_input.value = ""
        self._controller.dispatch(SearchChanged(""))
        self._after_state_change(rebuild=True)
        self._get_entry_list_widget().focus()

    def action_cursor_down(self) -> None:
        self._get_entry_list_widget().action_cursor_down()

    def action_cursor_up(self) -> None:
        self._get_entry_list_widget().action_cursor_up()

    def action_toggle_select(self) -> None:
        """Toggle selection of the highlighted entry."""
        entry = self._get_current_entry()
        if entry is None:
            return
        self._controller.dispatch(SelectionToggled(entry.id))
        self._after_state_change(rebuild=False)

    def action_select_all(self) -> None:
        """Select every visible entry."""
        visible = self._visible_entry_ids()
        if not visible:
            return
        self._controller.dispatch(EntriesSelected(tuple(visible)))
        self._after_state_change(rebuild=False)

    def action_clear_selection(self) -> None:
        self._controller.dispatch(SelectionCleared())
        self._after_state_change(rebuild=False)

    def action_copy_code(self) -> None:
        """Copy the open entry's resolved code, or the highlighted entry's."""
        if self._controller.state.detail.is_open:
            effects = self._controller.copy_code()
        else:
            entry = self._get_current_entry()
            if entry is None:
                self.notify("No component highlighted", title="Copy", severity="warning")
                return
            effects = self._controller.copy_code(entry)
        self._run_effects(effects)

    def action_bulk_copy(self) -> None:
        """Copy every selected entry as LLM-ready Markdown and clear the selection."""
        self._run_effects(self._controller.bulk_copy())
        self._after_state_change(rebuild=False)

    def _get_export_dir(self) -> Path:
        """Return the configured export directory path."""
        return Path(self._config.export_dir or Path.home() / DEFAULT_EXPORT_DIR).expanduser()

    def action_export_file(self) -> None:
        """Write the selected entries' Markdown export to a timestamped file."""
        export = self._controller.take_bulk_export()
        if export is None:
            title, description = build_empty_selection_warning()
            self.notify(description, title=title, severity="warning")
            return
        self._after_state_change(rebuild=False)
        try:
            filepath = write_timestamped_export_file(
                content=export.text + "\n",
                export_dir=self._get_export_dir(),
            )
        except OSError as exc:
            logger.warning("File export failed: %s", exc)
            self.notify(
                build_actionable_error(
                    "write the export file",
                    why=str(exc),
                    next_step="check export_dir in the config file",
                ),
                title="Export failed",
                severity="error",
            )
            return
        title, description = build_file_export_notification(export.entry_count, filepath.name)
        self.notify(description, title=title)

    def _set_category(self, category: str) -> None:
        if category == self._controller.state.category_filter:
            return
        self._controller.dispatch(CategoryChanged(category))
        self.query_one(CategoryFilterBar).set_active(category)
        self._after_state_change(rebuild=True)

    def _step_category(self, step: int) -> None:
        current = CATEGORY_FILTERS.index(self._controller.state.category_filter)
        self._set_category(CATEGORY_FILTERS[(current + step) % len(CATEGORY_FILTERS)])

    def action_next_category(self) -> None:
        self._step_category(1)

    def action_prev_category(self) -> None:
        self._step_category(-1)

    def action_set_category(self, index: int) -> None:
        if 0 <= index < len(CATEGORY_FILTERS):
            self._set_category(CATEGORY_FILTERS[index])

    def action_toggle_preview(self) -> None:
        self._show_preview = not self._show_preview
        self._refresh_detail_pane()

    def action_cycle_theme(self) -> None:
        """Cycle through available color themes."""
        self._config.theme_name = next_theme_name(self._config.theme_name)
        self._apply_theme()
        self._refresh_list_view()
        self._refresh_detail_pane()
        self._update_footer()
        self._save_config_or_warn("theme preference")
        self.notify(f"Theme: {self._config.theme_name}", title="Theme")

    def action_show_help(self) -> None:
        self.push_screen(HelpScreen())


def main() -> int:
    """Main entry point wrapper for CLI/bootstrap logic."""
    return _cli_main(
        load_config_fn=load_config,
        resolve_catalog_fn=_resolve_catalog,
        configure_logging_fn=_configure_logging,
        configure_color_mode_fn=_configure_color_mode,
        validate_interactive_tty_fn=_validate_interactive_tty,
        app_factory=ComponentHub,
    )


if __name__ == "__main__":
    sys.exit(main())
