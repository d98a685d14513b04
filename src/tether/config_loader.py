"""Load TetherConfig from tether.yaml or tether.toml if present.

Merges file config with keyword overrides. Overrides take precedence.
"""

from __future__ import annotations

import tomllib
from dataclasses import fields
from typing import TYPE_CHECKING

import yaml

from tether._errors import ConfigError
from tether.config import TetherConfig

if TYPE_CHECKING:
    from pathlib import Path

_KNOWN_KEYS = frozenset(f.name for f in fields(TetherConfig))


def load_config(root: Path, **overrides: object) -> TetherConfig:
    """Load TetherConfig from root, optionally merging tether.yaml.

    Looks for tether.yaml, tether.yml, or tether.toml in root. If found,
    loads and merges with overrides. Overrides take precedence.

    Raises:
        ConfigError: If a config file is present but unreadable, is not a
            mapping, or sets unknown keys.

    """
    file_config = _read_tether_config(root)
    merged = {**file_config, **overrides}
    unknown = sorted(set(merged) - _KNOWN_KEYS)
    if unknown:
        msg = f"Unknown tether config keys: {', '.join(unknown)}"
        raise ConfigError(msg)
    return TetherConfig(**merged)  # type: ignore[arg-type]


def _read_tether_config(root: Path) -> dict[str, object]:
    """Read tether config from yaml/toml if present. Returns empty dict otherwise."""
    for name in ("tether.yaml", "tether.yml"):
        path = root / name
        if path.is_file():
            return _parse_yaml(path)
    toml_path = root / "tether.toml"
    if toml_path.is_file():
        return _parse_toml(toml_path)
    return {}


def _parse_yaml(path: Path) -> dict[str, object]:
    try:
        data = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as exc:
        msg = f"Invalid YAML in {path.name}: {exc}"
        raise ConfigError(msg) from exc
    return _flatten_tether_section(data, path)


def _parse_toml(path: Path) -> dict[str, object]:
    try:
        data = tomllib.loads(path.read_text())
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path.name}: {exc}"
        raise ConfigError(msg) from exc
    return _flatten_tether_section(data, path)


def _flatten_tether_section(data: object, path: Path) -> dict[str, object]:
    """Extract tether.* keys into top-level config."""
    if not isinstance(data, dict):
        msg = f"{path.name} must contain a mapping, got {type(data).__name__}"
        raise ConfigError(msg)
    result: dict[str, object] = {}
    for k, v in data.items():
        if k != "tether":
            result[k] = v
    section = data.get("tether")
    if isinstance(section, dict):
        result.update(section)
    elif section is not None:
        msg = f"[tether] section in {path.name} must be a mapping"
        raise ConfigError(msg)
    return result
