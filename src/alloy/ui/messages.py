"""Status messages shown to the user on the console."""

from __future__ import annotations

from rich.markup import escape

from alloy.core.shared.exceptions import StateFileError, StateParseError
from alloy.ui.console import console, icon
from alloy.ui.logging import log


def warning(message: str, indent: int = 0, do_log: bool = True) -> None:
    """Display a warning message."""
    spaces = "  " * indent
    console.print(f"{spaces}[warning]{icon('warn')}[/warning]  {message}", markup=True)
    if do_log:
        log(message, level="warning")


def error(message: str, indent: int = 0, do_log: bool = True) -> None:
    """Display an error message."""
    spaces = "  " * indent
    console.print(f"{spaces}[error]{icon('error')}[/error]  {message}", markup=True)
    if do_log:
        log(message, level="error")


def info(message: str, indent: int = 0, do_log: bool = True) -> None:
    """Display an info message."""
    spaces = "  " * indent
    console.print(f"{spaces}[info]{icon('info')}[/info]  {message}", markup=True)
    if do_log:
        log(message, level="info")


def show_state_error(err: StateFileError) -> None:
    """Tell the user that a state file could not be used.

    Malformed files get a hint to fix them by hand, since the program never
    rewrites the config.
    """
    message = f"{type(err).__name__}: {err}"
    error(escape(message), do_log=False)
    log(message, level="error")
    if isinstance(err, StateParseError):
        hint = f"Fix or remove [path]{escape(str(err.path))}[/path] and restart."
        info(hint, indent=1, do_log=False)


__all__ = [
    "error",
    "info",
    "show_state_error",
    "warning",
]
