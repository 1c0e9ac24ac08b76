"""
Settings loader.

Reads .impsort.yaml (or an explicit path) and compiles the group
configuration once. Without a config file the built-in preset is used.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ..errors import ConfigurationError
from ..model import GroupConfiguration
from .paths import find_config
from .presets import DEFAULT_CASE_SENSITIVE, DEFAULT_EXTENSIONS, DEFAULT_GROUPS, DEFAULT_IGNORES

_LOG = logging.getLogger("impsort.config")

_yaml = YAML(typ="safe")

_KNOWN_KEYS = {"groups", "case_sensitive", "ignores", "extensions"}


@dataclass
class Settings:
    groups: GroupConfiguration
    ignores: List[str] = field(default_factory=lambda: list(DEFAULT_IGNORES))
    extensions: List[str] = field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    source: Optional[Path] = None   # None when built from defaults


def _read_yaml_map(path: Path) -> dict:
    """Read a YAML file that must contain a mapping (empty file is {})."""
    try:
        raw = _yaml.load(path.read_text(encoding="utf-8")) or {}
    except YAMLError as e:
        raise ConfigurationError(f"{path}: invalid YAML: {e}")
    except OSError as e:
        raise ConfigurationError(f"{path}: cannot read config: {e}")
    if not isinstance(raw, dict):
        raise ConfigurationError(f"{path}: config must be a mapping")
    return raw


def _str_list(raw: dict, key: str, default: List[str]) -> List[str]:
    val = raw.get(key)
    if val is None:
        return list(default)
    if not isinstance(val, list) or not all(isinstance(x, str) for x in val):
        raise ConfigurationError(f"{key}: must be a list of strings")
    return list(val)


def _normalize_extensions(exts: List[str]) -> List[str]:
    return [e.lower() if e.startswith(".") else "." + e.lower() for e in exts]


def settings_from_dict(raw: dict, *, source: Optional[Path] = None) -> Settings:
    """
    Build Settings from an already parsed mapping.

    Raises:
        ConfigurationError: On unknown keys, wrong types or invalid patterns
    """
    unknown = set(raw) - _KNOWN_KEYS
    if unknown:
        raise ConfigurationError(f"unknown config keys: {', '.join(sorted(map(str, unknown)))}")

    case_sensitive: Any = raw.get("case_sensitive", DEFAULT_CASE_SENSITIVE)
    if not isinstance(case_sensitive, bool):
        raise ConfigurationError("case_sensitive: must be true or false")

    groups_raw = raw.get("groups")
    if groups_raw is None:
        groups_raw = DEFAULT_GROUPS

    return Settings(
        groups=GroupConfiguration.compile(groups_raw, case_sensitive=case_sensitive),
        ignores=_str_list(raw, "ignores", DEFAULT_IGNORES),
        extensions=_normalize_extensions(_str_list(raw, "extensions", DEFAULT_EXTENSIONS)),
        source=source,
    )


def default_settings() -> Settings:
    return settings_from_dict({})


def load_settings(root: Path, path: Optional[Path] = None) -> Settings:
    """
    Load settings for a project.

    Args:
        root: Project root searched for .impsort.yaml
        path: Explicit config file; must exist when given

    Returns:
        Settings with a compiled group configuration
    """
    if path is not None:
        if not path.is_file():
            raise ConfigurationError(f"config file not found: {path}")
        cfg_file: Optional[Path] = path.resolve()
    else:
        cfg_file = find_config(root)

    if cfg_file is None:
        _LOG.debug("no config file under %s, using built-in preset", root)
        return default_settings()

    _LOG.debug("loading config from %s", cfg_file)
    return settings_from_dict(_read_yaml_map(cfg_file), source=cfg_file)


__all__ = ["Settings", "settings_from_dict", "default_settings", "load_settings"]
