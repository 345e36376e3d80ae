"""Reading and writing the Alloy state files."""

from alloy.io.cache import load_cache, load_cache_or_default, save_cache
from alloy.io.config import generate_default_config, load_config
from alloy.io.locations import cache_file_path, config_file_path

__all__ = [
    "cache_file_path",
    "config_file_path",
    "generate_default_config",
    "load_cache",
    "load_cache_or_default",
    "load_config",
    "save_cache",
]
