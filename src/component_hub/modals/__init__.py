"""Modal dialogs for the Component Hub TUI.

Import modals from this package: ``from component_hub.modals import HelpScreen``
"""

from component_hub.modals.common import HelpScreen
from component_hub.modals.detail import EntryDetailScreen

__all__ = [
    "EntryDetailScreen",
    "HelpScreen",
]
