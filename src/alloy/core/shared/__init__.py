"""Shared building blocks used across the Alloy package."""

from alloy.core.shared.exceptions import (
    AlloyError,
    StateFileError,
    StateParseError,
    StateReadError,
    StateWriteError,
)

__all__ = [
    "AlloyError",
    "StateFileError",
    "StateParseError",
    "StateReadError",
    "StateWriteError",
]
