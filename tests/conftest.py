"""Pytest fixtures for Alloy tests."""

import pytest

from alloy.core.domain.cache import (
    Antialias,
    Cache,
    CacheImageSection,
    CacheUpdateSection,
    CacheWindowSection,
)
from alloy.ui.logging import close_logging


@pytest.fixture
def populated_cache():
    """Cache with every field away from its default."""
    return Cache(
        window=CacheWindowSection(dark=True, win_w=1280, win_h=720, win_x=-20, win_y=300),
        updates=CacheUpdateSection(last_checked=1_700_000_000),
        image=CacheImageSection(fit_stretches=True, antialiasing=Antialias.NEVER),
    )


@pytest.fixture
def sample_config_file(tmp_path):
    """Create a config file that sets every table."""
    config_content = """
[bindings]
img_next = ["Right", "D"]
img_prev = ["Left"]

[[commands]]
input = ["E", "png"]
program = "gimp"
args = ["--new-instance"]
envs = [{ name = "GIMP_LANG", value = "en" }]

[[commands]]
input = ["png"]
program = "optipng"

[updates]
check_updates = false

[title]
displayed_folders = 2
show_program_name = false

[image]
antialiasing = "never"

[window]
start_maximized = true
theme = "dark"
win_w = 800
win_x = -10
"""
    config_file = tmp_path / "cfg.toml"
    config_file.write_text(config_content)
    return config_file


@pytest.fixture
def reset_logging():
    """Leave the alloy logger unconfigured after the test."""
    yield
    close_logging()
