"""Configuration for the pathjoin command line."""

import json
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

from pathjoin.exceptions import ConfigError

ENV_PREFIX = "PATHJOIN_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(var: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"{var} must be one of true/false/1/0/yes/no/on/off, got {value!r}")


@dataclass
class PathjoinConfig:
    """Settings for the pathjoin CLI."""

    base_dir: str = "."
    null_terminated: bool = False
    verbose: bool = False

    @classmethod
    def from_env(cls) -> "PathjoinConfig":
        """Create config from PATHJOIN_* environment variables."""
        return cls(**cls._env_values())

    @classmethod
    def from_file(cls, path: Path | str) -> "PathjoinConfig":
        """
        Create config from a YAML or JSON file.

        Keys that are not config fields are ignored.

        Raises:
            ConfigError: If the file cannot be read or is not a mapping
        """
        return cls(**cls._file_values(Path(path)))

    @classmethod
    def load(cls, config_path: Path | str | None = None, **overrides: Any) -> "PathjoinConfig":
        """Load config with hierarchy: defaults < file < env < overrides."""
        config = cls()
        if config_path is not None:
            config = replace(config, **cls._file_values(Path(config_path)))
        config = replace(config, **cls._env_values())
        explicit = {key: value for key, value in overrides.items() if value is not None}
        return replace(config, **explicit)

    @classmethod
    def _env_values(cls) -> dict[str, Any]:
        values: dict[str, Any] = {}
        base_dir = os.environ.get(f"{ENV_PREFIX}BASE_DIR")
        if base_dir is not None:
            values["base_dir"] = base_dir
        for name in ("null_terminated", "verbose"):
            var = f"{ENV_PREFIX}{name.upper()}"
            raw = os.environ.get(var)
            if raw is not None:
                values[name] = _parse_bool(var, raw)
        return values

    @classmethod
    def _file_values(cls, path: Path) -> dict[str, Any]:
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise ConfigError(str(path), f"not valid UTF-8 ({e.reason} at byte {e.start})") from e
        except OSError as e:
            raise ConfigError(str(path), e.strerror or str(e)) from e

        suffix = path.suffix.lower()
        try:
            if suffix in (".yaml", ".yml"):
                data = yaml.safe_load(text)
            elif suffix == ".json":
                data = json.loads(text)
            else:
                raise ConfigError(str(path), f"unsupported format '{suffix}'")
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigError(str(path), str(e)) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(str(path), "top level must be a mapping")

        values: dict[str, Any] = {}
        for f in fields(cls):
            if f.name not in data:
                continue
            values[f.name] = _check_file_value(path, f.name, data[f.name])
        return values


def _check_file_value(path: Path, name: str, value: Any) -> Any:
    """Validate one setting read from a config file."""
    if name == "base_dir":
        if not isinstance(value, str):
            raise ConfigError(str(path), f"{name} must be a string")
        return value
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        try:
            return _parse_bool(name, value)
        except ValueError as e:
            raise ConfigError(str(path), str(e)) from e
    raise ConfigError(str(path), f"{name} must be a boolean")
