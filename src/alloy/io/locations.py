"""Per-user locations of the state files."""

from __future__ import annotations

from pathlib import Path

from platformdirs import user_cache_dir, user_config_dir

APP_NAME = "alloy"
CONFIG_FILENAME = "cfg.toml"
CACHE_FILENAME = "cache.toml"


def _in_dir(directory: str, filename: str, create_parent: bool) -> Path:
    base = Path(directory)
    if create_parent:
        base.mkdir(parents=True, exist_ok=True)
    return base / filename


def config_file_path(create_parent: bool = False) -> Path:
    """Return the conventional config path, e.g. ``~/.config/alloy/cfg.toml``."""
    return _in_dir(user_config_dir(APP_NAME, appauthor=False), CONFIG_FILENAME, create_parent)


def cache_file_path(create_parent: bool = False) -> Path:
    """Return the conventional cache path, e.g. ``~/.cache/alloy/cache.toml``."""
    return _in_dir(user_cache_dir(APP_NAME, appauthor=False), CACHE_FILENAME, create_parent)


__all__ = ["CACHE_FILENAME", "CONFIG_FILENAME", "cache_file_path", "config_file_path"]
