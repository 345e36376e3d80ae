"""Alloy - persisted state for the Alloy image viewer.

Public API:
    - Cache: program-written session state (window geometry, theme, ...)
    - Configuration: user-edited, read-only preferences

Persistence:
    - load_cache, save_cache, load_cache_or_default
    - load_config, generate_default_config
"""

import contextlib
from importlib import metadata

__version__ = "1.0.0"

with contextlib.suppress(metadata.PackageNotFoundError):
    __version__ = metadata.version(__name__)

from alloy.core.domain.cache import (
    Antialias,
    Cache,
    CacheImageSection,
    CacheUpdateSection,
    CacheWindowSection,
    Theme,
)
from alloy.core.domain.config import (
    Command,
    ConfigImageSection,
    Configuration,
    ConfigUpdateSection,
    ConfigWindowSection,
    EnvVar,
    TitleSection,
)
from alloy.core.shared.exceptions import (
    AlloyError,
    StateFileError,
    StateParseError,
    StateReadError,
    StateWriteError,
)
from alloy.io.cache import load_cache, load_cache_or_default, save_cache
from alloy.io.config import generate_default_config, load_config

__all__ = [
    # Version
    "__version__",
    # Cache
    "Antialias",
    "Cache",
    "CacheImageSection",
    "CacheUpdateSection",
    "CacheWindowSection",
    "Theme",
    # Configuration
    "Command",
    "ConfigImageSection",
    "ConfigUpdateSection",
    "ConfigWindowSection",
    "Configuration",
    "EnvVar",
    "TitleSection",
    # Errors
    "AlloyError",
    "StateFileError",
    "StateParseError",
    "StateReadError",
    "StateWriteError",
    # Persistence
    "generate_default_config",
    "load_cache",
    "load_cache_or_default",
    "load_config",
    "save_cache",
]
