"""Presentation adapters built on BrowserCatalog.

Modules:
    menu: Numbered terminal menu
    dialog: zenity radio list dialog
    icons: Icon names shown in the dialog
"""

from .menu import (
    InvalidSelectionError,
    SelectionAborted,
    format_menu,
    parse_selection,
)
from .dialog import (
    build_list_args,
    match_selection,
    shorten_url,
    zenity_available,
)
from .icons import (
    DEFAULT_ICON,
    get_browser_icon,
    guess_icon,
)

__all__ = [
    # menu
    "InvalidSelectionError",
    "SelectionAborted",
    "format_menu",
    "parse_selection",
    # dialog
    "build_list_args",
    "match_selection",
    "shorten_url",
    "zenity_available",
    # icons
    "DEFAULT_ICON",
    "get_browser_icon",
    "guess_icon",
]
