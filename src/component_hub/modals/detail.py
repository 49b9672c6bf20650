"""Component detail modal with page picker, preview, and code view."""

from __future__ import annotations

import logging
from collections.abc import Callable

from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical, VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Label, Select, Static

from component_hub.state import EntryClosed, HubController, VariantChanged
from component_hub.variants import next_variant_name
from component_hub.widgets.details import EntryDetails

logger = logging.getLogger(__name__)


class EntryDetailScreen(ModalScreen[None]):
    """Detail view of the controller's open entry.

    Every variant change goes through the controller, so the screen only
    renders ``controller.state.detail``. Closing dispatches ``EntryClosed``.
    """

    BINDINGS = [
        Binding("escape", "close", "Close"),
        Binding("q", "close", "Close", show=False),
        Binding("c", "copy_code", "Copy code"),
        Binding("left_square_bracket,bracketleft", "prev_variant", "Prev page", show=False),
        Binding("right_square_bracket,bracketright", "next_variant", "Next page", show=False),
        Binding("p", "toggle_preview", "Preview", show=False),
    ]

    CSS = """
    EntryDetailScreen {
        align: center middle;
    }

    #detail-dialog {
        width: 90%;
        height: 90%;
        background: $th-background;
        border: tall $th-accent;
        padding: 0 1;
    }

    #detail-variant-select {
        width: 40;
        margin-bottom: 1;
    }

    #detail-scroll {
        height: 1fr;
    }

    #detail-footer {
        color: $th-muted;
        height: 1;
    }
    """

    def __init__(
        self,
        controller: HubController,
        *,
        on_copy: Callable[[], None],
        show_preview: bool = True,
    ) -> None:
        super().__init__()
        self._controller = controller
        self._on_copy = on_copy
        self._show_preview = show_preview

    def compose(self) -> ComposeResult:
        entry = self._controller.open_entry()
        with Vertical(id="detail-dialog"):
            if entry is not None and entry.variants:
                yield Label("[bold]Page[/]")
                yield Select(
                    [(name, name) for name in entry.variant_names],
                    value=self._controller.state.detail.variant_name,
                    allow_blank=False,
                    id="detail-variant-select",
                )
            with VerticalScroll(id="detail-scroll"):
                yield EntryDetails(id="detail-body")
            yield Static(self._footer_text(entry is not None and entry.is_composite), id="detail-footer")

    def on_mount(self) -> None:
        self._refresh_body()

    @staticmethod
    def _footer_text(has_variants: bool) -> str:
        hints = "c copy code  p preview  Esc close"
        if has_variants:
            hints = "[ / ] page  " + hints
        return hints

    @property
    def show_preview(self) -> bool:
        return self._show_preview

    def _refresh_body(self) -> None:
        body = self.query_one("#detail-body", EntryDetails)
        body.update_entry(
            self._controller.open_entry(),
            self._controller.resolved_open_entry(),
            variant_name=self._controller.state.detail.variant_name,
            show_preview=self._show_preview,
        )

    def _select_variant(self, variant_name: str) -> None:
        if variant_name == self._controller.state.detail.variant_name:
            return
        self._controller.dispatch(VariantChanged(variant_name))
        logger.debug("Detail view switched to page %r", variant_name)
        self._refresh_body()

    @on(Select.Changed, "#detail-variant-select")
    def on_variant_selected(self, event: Select.Changed) -> None:
        if isinstance(event.value, str):
            self._select_variant(event.value)

    def _step_variant(self, step: int) -> None:
        entry = self._controller.open_entry()
        if entry is None or not entry.variants:
            return
        name = next_variant_name(entry, self._controller.state.detail.variant_name, step)
        self._select_variant(name)
        select = self.query_one("#detail-variant-select", Select)
        with select.prevent(Select.Changed):
            select.value = name

    def action_prev_variant(self) -> None:
        self._step_variant(-1)

    def action_next_variant(self) -> None:
        self._step_variant(1)

    def action_toggle_preview(self) -> None:
        self._show_preview = not self._show_preview
        self._refresh_body()

    def action_copy_code(self) -> None:
        self._on_copy()

    def action_close(self) -> None:
        self._controller.dispatch(EntryClosed())
        self.dismiss(None)


__all__ = ["EntryDetailScreen"]
