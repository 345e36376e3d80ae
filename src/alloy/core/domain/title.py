"""Shortened file-path rendering for the window title."""

from __future__ import annotations

import os
from pathlib import Path, PurePath

# Win32 "verbatim" prefix that canonicalized paths carry on Windows
VERBATIM_PREFIX = "\\\\?\\"


def normalize_display_path(text: str) -> str:
    """Drop platform-specific decorations from a path string meant for display."""
    return text.removeprefix(VERBATIM_PREFIX)


def _as_pure_path(file_path: str | os.PathLike[str]) -> PurePath:
    if isinstance(file_path, PurePath):
        return file_path
    return Path(file_path)


def _components(path: PurePath) -> list[str]:
    """Split *path* into drive, root directory and name components."""
    components: list[str] = []
    if path.drive:
        components.append(path.drive)
    if path.root:
        components.append(path.root)
    components.extend(path.parts[1:] if path.anchor else path.parts)
    return components


def depth_below_root(path: PurePath) -> int:
    """Count the components of *path* at or below its root directory.

    A drive or UNC share component that precedes the root directory is not
    counted, so ``C:\\a\\b`` and ``/a/b`` both have a depth of 3.
    """
    component_count = 0
    # The root is the second component when a drive comes first
    root_index = 0
    for index, component in enumerate(_components(path)):
        component_count += 1
        if path.root and component == path.root:
            root_index = index
    return component_count - root_index


def format_file_path(file_path: str | os.PathLike[str], displayed_folders: int | None) -> str:
    """Render *file_path* with at most *displayed_folders* parent folders.

    Args:
        file_path: Path of the displayed file. It must end with a file name.
        displayed_folders: Number of parent folders to keep. ``None`` or ``0``
            shows the file name only.

    Returns:
        The shortened path. Paths that are already shallow enough are
        returned whole, exactly as given.
    """
    path = _as_pure_path(file_path)
    if not displayed_folders:
        return path.name

    if depth_below_root(path) <= displayed_folders + 1:
        return normalize_display_path(os.fspath(file_path))

    # The path itself is its own zeroth ancestor
    ancestors = [path, *path.parents]
    anchor = ancestors[displayed_folders + 1]
    return str(path.relative_to(anchor))


__all__ = [
    "VERBATIM_PREFIX",
    "depth_below_root",
    "format_file_path",
    "normalize_display_path",
]
