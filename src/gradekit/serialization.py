"""
Serialization helpers for ConfigurationValue.

Provides JSON/YAML round-trip via an intermediate dict representation,
so build tooling can hand a resolved configuration over as a file.
Loading does NOT validate; call gradekit.validator.validate afterwards.
"""
from __future__ import annotations

import json
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict

import yaml

from gradekit.model import ConfigurationValue, GCMode
from gradekit.validator import ConfigError


_FIELD_NAMES = tuple(f.name for f in fields(ConfigurationValue))


def config_to_dict(c: ConfigurationValue) -> Dict[str, Any]:
    d: Dict[str, Any] = {name: getattr(c, name) for name in _FIELD_NAMES}
    d["gc"] = c.gc.value
    return d


def config_from_dict(d: Dict[str, Any] | None) -> ConfigurationValue:
    if d is None:
        return ConfigurationValue()
    if not isinstance(d, dict):
        raise ConfigError(f"Configuration must be a mapping, got {type(d).__name__}")
    unknown = sorted(set(d) - set(_FIELD_NAMES))
    if unknown:
        raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")
    kwargs = dict(d)
    if "gc" in kwargs:
        try:
            kwargs["gc"] = GCMode(kwargs["gc"])
        except ValueError:
            raise ConfigError(f"Unknown gc mode: {kwargs['gc']!r}") from None
    return ConfigurationValue(**kwargs)


def config_to_json(c: ConfigurationValue) -> str:
    return json.dumps(config_to_dict(c), sort_keys=True)


def config_from_json(s: str) -> ConfigurationValue:
    try:
        d = json.loads(s)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Malformed JSON configuration: {e}") from e
    return config_from_dict(d)


def config_to_yaml(c: ConfigurationValue) -> str:
    return yaml.safe_dump(config_to_dict(c))


def config_from_yaml(s: str) -> ConfigurationValue:
    try:
        d = yaml.safe_load(s)
    except yaml.YAMLError as e:
        raise ConfigError(f"Malformed YAML configuration: {e}") from e
    return config_from_dict(d)


def load_config(path: str | Path) -> ConfigurationValue:
    """
    Load a configuration file.

    Files ending in .json are read as JSON, everything else as YAML.
    """
    path = Path(path)
    text = path.read_text()
    if path.suffix == ".json":
        return config_from_json(text)
    return config_from_yaml(text)
