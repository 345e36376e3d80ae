"""Exception taxonomy for Alloy.

Every failure while reading, parsing or writing a state file is reported
through one of the classes below. Callers decide the policy: a missing cache
is usually replaced by defaults, whereas a malformed file should be shown to
the user.
"""

from __future__ import annotations

from pathlib import Path


class AlloyError(Exception):
    """Base class for all Alloy-specific exceptions."""


class StateFileError(AlloyError):
    """An operation on a cache or config file failed.

    Attributes:
        path: The file the operation was performed on.
        reason: Human-readable description of the underlying failure.
    """

    def __init__(self, message: str, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(message)


class StateReadError(StateFileError):
    """The file is missing, unreadable or not valid UTF-8."""


class StateParseError(StateFileError):
    """The file is not valid TOML or a value does not fit its field."""


class StateWriteError(StateFileError):
    """The cache file could not be written."""


__all__ = [
    "AlloyError",
    "StateFileError",
    "StateParseError",
    "StateReadError",
    "StateWriteError",
]
