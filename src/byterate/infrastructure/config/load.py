from __future__ import annotations

from copy import deepcopy
from pathlib import Path
from typing import Any, Mapping

import yaml
from dotenv import load_dotenv

from .defaults import DEFAULT_CONFIG
from .schema import AppConfig, EnvOverrides

_SECTION_KEYS: frozenset[str] = frozenset({"logging", "parser", "display"})
_TOP_LEVEL_KEYS: tuple[str, ...] = ("app_name", "environment")

# Flat (env var / CLI) key -> (YAML section, key inside the section)
_FLAT_KEYS: dict[str, tuple[str, str]] = {
    "log_level": ("logging", "level"),
    "log_format": ("logging", "format"),
    "strict_units": ("parser", "strict_units"),
    "display_precision": ("display", "precision"),
    "display_value_width": ("display", "value_width"),
    "display_unit_width": ("display", "unit_width"),
}


def _deep_merge(base: dict[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Merge ``override`` into ``base`` in place; nested mappings merge, anything else replaces."""
    for key, value in override.items():
        if isinstance(base.get(key), dict) and isinstance(value, Mapping):
            _deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def _normalize_layer(data: Mapping[str, Any]) -> dict[str, Any]:
    """Bring one layer into the sectioned YAML shape.

    Layers may mix sections (``display: {precision: 2}``) with flat keys
    (``display_precision=2``); flat keys are folded into their section.
    """
    out: dict[str, Any] = {
        key: dict(data[key])
        for key in _SECTION_KEYS
        if isinstance(data.get(key), Mapping)
    }
    out.update({key: data[key] for key in _TOP_LEVEL_KEYS if key in data})

    for flat_key, (section, section_key) in _FLAT_KEYS.items():
        if flat_key in data:
            out.setdefault(section, {})[section_key] = data[flat_key]

    return out


def _require_file(path: Path) -> Path:
    if not path.is_file():
        raise FileNotFoundError(path)
    return path


def _read_yaml_config(config_path: Path) -> dict[str, Any]:
    parsed = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    if parsed is None:
        return {}
    if not isinstance(parsed, dict):
        raise ValueError(f"Config YAML must be a mapping, got: {type(parsed)!r}")
    return parsed


def load_config(
    *,
    config_path: Path | None = None,
    dotenv_path: Path | None = None,
    cli_overrides: dict[str, Any] | None = None,
) -> AppConfig:
    """Build the validated config from defaults < YAML < env vars < CLI overrides.

    Raises:
        FileNotFoundError: ``config_path`` or ``dotenv_path`` is not a regular file.
        OSError: A config file exists but cannot be read.
        ValueError: The YAML is not a mapping, or the merged values don't validate.
        yaml.YAMLError: The YAML file is malformed.
    """
    # A .env file only seeds os.environ, so it is read before the env layer.
    if dotenv_path is not None:
        load_dotenv(_require_file(dotenv_path), override=False)

    merged = _normalize_layer(deepcopy(DEFAULT_CONFIG))

    if config_path is not None:
        _deep_merge(merged, _normalize_layer(_read_yaml_config(_require_file(config_path))))

    _deep_merge(merged, _normalize_layer(EnvOverrides().to_update_dict()))
    _deep_merge(merged, _normalize_layer(cli_overrides or {}))

    return AppConfig.model_validate(merged)
