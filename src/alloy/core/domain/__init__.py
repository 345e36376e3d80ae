"""Domain models representing the Alloy state files."""

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
from alloy.core.domain.title import format_file_path

__all__ = [
    "Antialias",
    "Cache",
    "CacheImageSection",
    "CacheUpdateSection",
    "CacheWindowSection",
    "Command",
    "ConfigImageSection",
    "ConfigUpdateSection",
    "ConfigWindowSection",
    "Configuration",
    "EnvVar",
    "Theme",
    "TitleSection",
    "format_file_path",
]
