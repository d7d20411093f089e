"""Command implementations for mdpick CLI."""

from .pick import add_pick_arguments, handle_pick
from .scan import add_scan_arguments, handle_scan
from .show import add_show_arguments, handle_show

__all__ = [
    "add_pick_arguments",
    "handle_pick",
    "add_scan_arguments",
    "handle_scan",
    "add_show_arguments",
    "handle_show",
]
