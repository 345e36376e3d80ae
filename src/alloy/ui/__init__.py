"""Console output and logging for Alloy.

Submodules:
- console: Theme and console instance
- logging: Logger configuration
- messages: Status messages (error, warning, info)
"""

from alloy.ui.console import ALLOY_THEME, VERSION, console, icon
from alloy.ui.logging import close_logging, log, setup_logging
from alloy.ui.messages import error, info, show_state_error, warning

__all__ = [
    "ALLOY_THEME",
    "VERSION",
    "close_logging",
    "console",
    "error",
    "icon",
    "info",
    "log",
    "setup_logging",
    "show_state_error",
    "warning",
]
