"""
Layered settings: defaults < ~/.weatherdash/config.json < WEATHERDASH_* env vars < explicit overrides.
"""

import json
import os
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import BaseModel, Field, ValidationError, field_validator

from weatherdash.errors import ConfigError
from weatherdash.transport.http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_MS

CONFIG_FILE = Path.home() / ".weatherdash" / "config.json"

ENV_VARS = {
    "base_url": "WEATHERDASH_API_BASE",
    "timeout_ms": "WEATHERDASH_TIMEOUT_MS",
    "log_level": "WEATHERDASH_LOG_LEVEL",
}

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseModel):
    base_url: str = DEFAULT_BASE_URL
    timeout_ms: int = Field(default=DEFAULT_TIMEOUT_MS, gt=0)
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}, expected one of {', '.join(LOG_LEVELS)}")
        return level


def load_config_file(path: Optional[Union[str, Path]] = None) -> dict[str, Any]:
    path = Path(path) if path else CONFIG_FILE
    try:
        raw = json.loads(path.read_text())
    except FileNotFoundError:
        return {}
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid config file {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"Invalid config file {path}: expected a JSON object")
    return raw


def save_config_file(cfg: dict[str, Any], path: Optional[Union[str, Path]] = None) -> None:
    path = Path(path) if path else CONFIG_FILE
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(cfg, indent=2))


def load_settings(path: Optional[Union[str, Path]] = None, **overrides: Any) -> Settings:
    values: dict[str, Any] = {k: v for k, v in load_config_file(path).items() if k in Settings.model_fields}
    for field, var in ENV_VARS.items():
        if os.environ.get(var):
            values[field] = os.environ[var]
    values.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return Settings(**values)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings: {e}") from e


def update_config_file(changes: dict[str, Any], path: Optional[Union[str, Path]] = None) -> dict[str, Any]:
    """Merge `changes` into the config file after checking they make valid settings."""
    unknown = sorted(set(changes) - set(Settings.model_fields))
    if unknown:
        raise ConfigError(f"Unknown setting(s): {', '.join(unknown)}")
    cfg = {**load_config_file(path), **changes}
    try:
        validated = Settings(**{k: v for k, v in cfg.items() if k in Settings.model_fields})
    except ValidationError as e:
        raise ConfigError(f"Invalid settings: {e}") from e
    cfg.update(validated.model_dump(include=set(changes)))
    save_config_file(cfg, path)
    return cfg
