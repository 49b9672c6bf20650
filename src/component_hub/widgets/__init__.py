"""Widget classes and markup renderers for the Component Hub UI."""

from component_hub.widgets.chrome import CategoryFilterBar, ContextFooter
from component_hub.widgets.details import EntryDetails, render_entry_details
from component_hub.widgets.listing import (
    DESCRIPTION_PREVIEW_MAX_LEN,
    render_entry_option,
    render_group_header,
    set_ascii_icons,
)

__all__ = [
    "DESCRIPTION_PREVIEW_MAX_LEN",
    "CategoryFilterBar",
    "ContextFooter",
    "EntryDetails",
    "render_entry_details",
    "render_entry_option",
    "render_group_header",
    "set_ascii_icons",
]
