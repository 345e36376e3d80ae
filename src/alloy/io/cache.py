"""Cache file loading and saving.

The cache is read and written as a whole. Concurrent saves to the same path
are not coordinated: the last writer wins.
"""

from __future__ import annotations

import os
from pathlib import Path

import tomli_w

from alloy.core.domain.cache import Cache
from alloy.core.shared.exceptions import StateReadError, StateWriteError
from alloy.io.documents import read_document, validate_document
from alloy.ui.logging import log


def load_cache(path: str | os.PathLike[str]) -> Cache:
    """Load the cache from a TOML file.

    Missing tables and fields are filled with their defaults.

    Args:
        path: Path to the TOML cache file.

    Returns:
        Cache: Fully populated cache.

    Raises:
        StateReadError: If the file cannot be read.
        StateParseError: If the file is malformed.
    """
    path = Path(path)
    data = read_document(path, "cache")
    return validate_document(Cache, data, path, "cache")


def load_cache_or_default(path: str | os.PathLike[str]) -> Cache:
    """Load the cache, starting from defaults when there is none yet.

    Only read failures fall back to defaults; a malformed cache is still
    reported through ``StateParseError``.
    """
    try:
        return load_cache(path)
    except StateReadError as exc:
        log(f"{exc}; using default cache", level="debug")
        return Cache()


def save_cache(cache: Cache, path: str | os.PathLike[str]) -> None:
    """Save the complete cache to a TOML file, replacing its contents.

    Args:
        cache: Cache to save.
        path: Destination file.

    Raises:
        StateWriteError: If the file cannot be written.
    """
    path = Path(path)
    text = tomli_w.dumps(cache.to_toml_dict())
    log(f"Writing cache to {path}", level="debug")
    try:
        with path.open("w", encoding="utf-8") as f:
            f.write(text)
    except OSError as exc:
        reason = exc.strerror or str(exc)
        msg = f"Could not write to cache file {path}: {reason}"
        raise StateWriteError(msg, path, reason) from exc


__all__ = ["load_cache", "load_cache_or_default", "save_cache"]
