"""Program-written session state: the *cache*.

The cache is always fully populated. Sections or fields missing from the
file take their default values when it is loaded, and the whole document is
written back on save.

Example TOML cache:
    [window]
    dark = true
    win_w = 1280
    win_h = 800
    win_x = 64
    win_y = 64

    [updates]
    last_checked = 1700000000

    [image]
    fit_stretches = false
    antialiasing = "auto"
"""

from __future__ import annotations

import time
from enum import Enum

from pydantic import BaseModel, Field, StrictBool

from alloy.core.shared.typing import I32, U32, U64

# Minimum wall-clock time between two update checks
UPDATE_CHECK_INTERVAL_SECONDS = 60 * 60 * 24


class Theme(str, Enum):
    """Colour theme of the viewer window."""

    LIGHT = "light"
    DARK = "dark"

    def switch_theme(self) -> Theme:
        """Return the other theme."""
        return Theme.LIGHT if self is Theme.DARK else Theme.DARK


class Antialias(str, Enum):
    """Image resampling filter selection."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


class CacheImageSection(BaseModel):
    """Image display state remembered between sessions."""

    fit_stretches: StrictBool = Field(
        default=False,
        description="Stretch small images to the window.",
    )
    antialiasing: Antialias = Field(default=Antialias.AUTO, description="Resampling mode.")


class CacheWindowSection(BaseModel):
    """Window geometry and theme of the last session.

    ``dark`` is the only on-disk encoding of the theme; see ``Cache.theme``.
    """

    dark: StrictBool = False
    win_w: U32 = 580
    win_h: U32 = 558
    win_x: I32 = 64
    win_y: I32 = 64


class CacheUpdateSection(BaseModel):
    """Bookkeeping for the periodic update check."""

    last_checked: U64 = Field(default=0, description="Unix time of the last check, in seconds.")

    def update_check_needed(self, now: float | None = None) -> bool:
        """Check whether more than 24 hours passed since the last check.

        A ``last_checked`` in the future counts as no time elapsed.

        Args:
            now: Current Unix time. Defaults to the system clock.
        """
        current = time.time() if now is None else now
        elapsed = max(current - self.last_checked, 0.0)
        return elapsed > UPDATE_CHECK_INTERVAL_SECONDS

    def set_update_check_time(self, now: float | None = None) -> None:
        """Record the current time as the time of the last check.

        A clock reading before the Unix epoch is stored as 0.
        """
        current = int(time.time() if now is None else now)
        self.last_checked = current if current >= 0 else 0


class Cache(BaseModel):
    """Top-level cache document with one model per TOML table."""

    window: CacheWindowSection = Field(default_factory=CacheWindowSection)
    updates: CacheUpdateSection = Field(default_factory=CacheUpdateSection)
    image: CacheImageSection = Field(default_factory=CacheImageSection)

    def theme(self) -> Theme:
        """Theme derived from ``window.dark``."""
        return Theme.DARK if self.window.dark else Theme.LIGHT

    def set_theme(self, theme: Theme) -> None:
        """Store *theme* as ``window.dark``."""
        self.window.dark = theme == Theme.DARK

    def to_toml_dict(self) -> dict[str, object]:
        """Return the complete document as plain TOML-serializable data."""
        return self.model_dump(mode="json")


__all__ = [
    "UPDATE_CHECK_INTERVAL_SECONDS",
    "Antialias",
    "Cache",
    "CacheImageSection",
    "CacheUpdateSection",
    "CacheWindowSection",
    "Theme",
]
