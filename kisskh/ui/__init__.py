"""
UI Layer - Rich rendering for the CLI harness.
"""

from kisskh.ui.components import UIComponents
from kisskh.ui.console import get_console, setup_console
from kisskh.ui.error_handler import ErrorHandler, display_warning, handle_error
from kisskh.ui.themes import get_palette

__all__ = [
    "UIComponents",
    "get_console",
    "setup_console",
    "ErrorHandler",
    "handle_error",
    "display_warning",
    "get_palette",
]
