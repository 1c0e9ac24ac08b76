"""
Configuration loading for impsort.
"""

from __future__ import annotations

from .load import Settings, default_settings, load_settings, settings_from_dict
from .paths import CONFIG_FILENAMES, find_config
from .presets import DEFAULT_EXTENSIONS, DEFAULT_GROUPS, DEFAULT_IGNORES

__all__ = [
    "Settings",
    "default_settings",
    "load_settings",
    "settings_from_dict",
    "CONFIG_FILENAMES",
    "find_config",
    "DEFAULT_EXTENSIONS",
    "DEFAULT_GROUPS",
    "DEFAULT_IGNORES",
]
