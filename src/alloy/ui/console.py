"""Console configuration and theme for Alloy messages.

This module provides the console instance shared by the logging handler and
the message helpers.
"""

import sys

from rich.console import Console
from rich.theme import Theme

try:
    from alloy import __version__ as _PKG_VERSION  # type: ignore
except ImportError:
    _PKG_VERSION = "dev"

ALLOY_THEME = Theme(
    {
        # --- Semantic Status ---
        "success": "bold green",
        "warning": "bold yellow",
        "error": "bold red",
        "info": "cyan",
        # --- Data & Values ---
        "key": "cyan",
        "value": "green",
        "path": "blue underline",
        # --- Modifiers ---
        "dim": "dim",
        "emphasis": "bold",
    }
)

console = Console(theme=ALLOY_THEME, stderr=True)

VERSION = _PKG_VERSION


def _supports_emoji() -> bool:
    """Best-effort detection if the terminal supports Unicode symbols."""
    enc = getattr(console, "encoding", None) or sys.getdefaultencoding()
    return "utf" in enc.lower()


def icon(name: str) -> str:
    """Return a status icon suited to the terminal.

    Names: check, warn, error, info
    """
    if _supports_emoji():
        mapping = {"check": "✓", "warn": "⚠", "error": "✗", "info": "ℹ"}
    else:
        mapping = {"check": "OK", "warn": "!", "error": "X", "info": "i"}
    return mapping.get(name, "")


__all__ = [
    "ALLOY_THEME",
    "VERSION",
    "console",
    "icon",
]
