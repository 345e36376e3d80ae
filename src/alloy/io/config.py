"""Configuration file loading.

There is deliberately no writer: the config belongs to the user.
"""

from __future__ import annotations

import os
from pathlib import Path

from alloy.core.domain.config import Configuration
from alloy.io.documents import read_document, validate_document


def load_config(path: str | os.PathLike[str]) -> Configuration:
    """Load configuration from a TOML file.

    Unset tables and fields stay ``None``.

    Args:
        path: Path to the TOML configuration file.

    Returns:
        Configuration: Validated configuration object.

    Raises:
        StateReadError: If the file cannot be read.
        StateParseError: If the configuration is invalid.
    """
    path = Path(path)
    data = read_document(path, "config")
    return validate_document(Configuration, data, path, "config")


def generate_default_config() -> str:
    """Generate a configuration template as a string.

    Every option is commented out, so loading the template unchanged gives
    the built-in behaviour.

    Returns:
        str: TOML-formatted configuration template.
    """
    return """# Alloy Configuration File
# Uncomment and edit the options you want to change.

# [bindings]
# img_next = ["Right", "D"]
# img_prev = ["Left", "A"]
# toggle_theme = ["T"]

# [[commands]]
# input = ["E"]
# program = "gimp"
# args = ["${img}"]
# envs = [{ name = "GIMP_LANG", value = "en" }]

# [updates]
# check_updates = true

# [title]
# displayed_folders = 1       # parent folders shown before the file name
# show_program_name = true

# [image]
# antialiasing = "auto"       # auto, always, never

# [window]
# start_fullscreen = false
# start_maximized = false
# show_bottom_bar = true
# theme = "light"             # light, dark
# use_last_window_area = true
# win_w = 580
# win_h = 558
# win_x = 64
# win_y = 64
"""


__all__ = ["generate_default_config", "load_config"]
