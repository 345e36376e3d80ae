"""Tests for window-title path formatting."""

from pathlib import Path, PurePosixPath, PureWindowsPath

import pytest

from alloy.core.domain.config import PROGRAM_NAME_SUFFIX, TitleSection
from alloy.core.domain.title import depth_below_root, format_file_path, normalize_display_path


class TestFileNameOnly:
    """Without displayed folders only the file name is shown."""

    @pytest.mark.parametrize("displayed_folders", [None, 0])
    def test_file_name(self, displayed_folders):
        """``None`` and ``0`` both mean file name only."""
        path = PurePosixPath("/a/b/c/d/file.txt")
        assert format_file_path(path, displayed_folders) == "file.txt"

    def test_relative_path(self):
        """Relative paths are shortened the same way."""
        assert format_file_path(PurePosixPath("photos/cat.png"), None) == "cat.png"


class TestDeepPaths:
    """Paths deeper than the requested folder count are shortened."""

    def test_one_folder(self):
        """One parent folder plus the file name."""
        path = PurePosixPath("/a/b/c/d/file.txt")
        assert format_file_path(path, 1) == "d/file.txt"

    def test_three_folders(self):
        """Several parent folders are kept in order."""
        path = PurePosixPath("/a/b/c/d/file.txt")
        assert format_file_path(path, 3) == "b/c/d/file.txt"

    def test_no_leading_separator(self):
        """The shortest deep path still has no leading separator."""
        path = PurePosixPath("/a/b/c/d/file.txt")
        assert format_file_path(path, 4) == "a/b/c/d/file.txt"

    def test_windows_drive(self):
        """A drive letter does not count as a folder."""
        path = PureWindowsPath(r"C:\Users\me\Pictures\cat.png")
        assert format_file_path(path, 1) == r"Pictures\cat.png"

    def test_windows_verbatim_prefix(self):
        """The verbatim prefix disappears with the stripped ancestors."""
        path = PureWindowsPath(r"\\?\C:\Users\me\Pictures\cat.png")
        assert format_file_path(path, 2) == r"me\Pictures\cat.png"

    def test_relative_deep_path(self):
        """Relative paths have no root to skip."""
        path = PurePosixPath("a/b/c/file.txt")
        assert format_file_path(path, 1) == "c/file.txt"

    def test_native_path(self, tmp_path):
        """Native paths and strings are accepted."""
        image = tmp_path / "album" / "cat.png"
        expected = str(Path("album") / "cat.png")
        assert format_file_path(image, 1) == expected
        assert format_file_path(str(image), 1) == expected


class TestShallowPaths:
    """Paths that are shallow enough are returned whole."""

    def test_shallow_posix_path(self):
        """Two components under the root fit into five folders."""
        assert format_file_path(PurePosixPath("/a/file.txt"), 5) == "/a/file.txt"

    def test_root_counts_as_a_level(self):
        """The root directory takes one of the displayed levels."""
        path = PurePosixPath("/a/b/file.txt")
        assert format_file_path(path, 3) == "/a/b/file.txt"
        assert format_file_path(path, 2) == "a/b/file.txt"

    def test_string_returned_verbatim(self):
        """A shallow path given as text is not normalized."""
        assert format_file_path("/a//b/./file.txt", 5) == "/a//b/./file.txt"

    def test_windows_path(self):
        """The drive is kept for shallow paths."""
        path = PureWindowsPath(r"C:\Pictures\cat.png")
        assert format_file_path(path, 2) == r"C:\Pictures\cat.png"

    def test_windows_verbatim_prefix_is_stripped(self):
        """The long-path marker is removed from the displayed string."""
        path = PureWindowsPath(r"\\?\C:\Pictures\cat.png")
        assert format_file_path(path, 3) == r"C:\Pictures\cat.png"


class TestHelpers:
    """Tests for the path helpers."""

    @pytest.mark.parametrize(
        ("path", "depth"),
        [
            (PurePosixPath("/a/b"), 3),
            (PurePosixPath("a/b"), 2),
            (PureWindowsPath(r"C:\a\b"), 3),
            (PureWindowsPath(r"\\server\share\a\b"), 3),
            (PureWindowsPath(r"C:a\b"), 3),
        ],
    )
    def test_depth_below_root(self, path, depth):
        """Prefix components before the root are not counted."""
        assert depth_below_root(path) == depth

    def test_normalize_display_path(self):
        """Only a leading verbatim marker is removed."""
        assert normalize_display_path(r"\\?\C:\x") == r"C:\x"
        assert normalize_display_path("/x/y") == "/x/y"


class TestTitleSection:
    """Tests for the ``[title]`` config table."""

    def test_format_file_path_uses_displayed_folders(self):
        """The section forwards its folder count."""
        title = TitleSection(displayed_folders=1)
        assert title.format_file_path(PurePosixPath("/a/b/c/d/file.txt")) == "d/file.txt"

    def test_unset_section_shows_file_name(self):
        """An empty section shows the file name only."""
        assert TitleSection().format_file_path(PurePosixPath("/a/b/file.txt")) == "file.txt"

    @pytest.mark.parametrize(
        ("show", "expected"),
        [(None, PROGRAM_NAME_SUFFIX), (True, PROGRAM_NAME_SUFFIX), (False, "")],
    )
    def test_format_program_name(self, show, expected):
        """Only an explicit ``false`` hides the program name."""
        assert TitleSection(show_program_name=show).format_program_name() == expected
