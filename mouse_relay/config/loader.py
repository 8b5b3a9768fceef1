"""Configuration loader for the mouse relay.

Loads configuration from YAML files and environment variables.
Environment variables override YAML values using the MOUSERELAY_ prefix.
Nested keys use double underscores: MOUSERELAY_SERVER__PORT=9000
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

ENV_PREFIX = "MOUSERELAY_"


class ServerConfig(BaseModel):
    """HTTP listener settings."""

    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8080, ge=1, le=65535)


class InputConfig(BaseModel):
    """Input injector settings."""

    backend: str = Field(default="pynput", pattern="^(pynput|null)$")
    validate_bounds: bool = Field(default=False)
    screen_width: int = Field(default=1920, ge=1)
    screen_height: int = Field(default=1080, ge=1)


class LoggingConfig(BaseModel):
    """Logging settings."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = Field(default="readable", pattern="^(readable|json)$")


class Config(BaseModel):
    """Root configuration model."""

    server: ServerConfig = Field(default_factory=ServerConfig)
    input: InputConfig = Field(default_factory=InputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def default_config_path() -> Path:
    """Path of the bundled default configuration file."""
    project_root = Path(__file__).parent.parent.parent
    return project_root / "configs" / "default.yaml"


def env_variable(section: str, key: str) -> str:
    """Name of the variable that overrides ``section.key``."""
    return f"{ENV_PREFIX}{section.upper()}__{key.upper()}"


def _env_overrides() -> dict[str, dict[str, str]]:
    """Collect MOUSERELAY_<SECTION>__<KEY> variables for every known setting.

    Values stay strings; pydantic converts them when the config is validated.
    """
    overrides: dict[str, dict[str, str]] = {}
    for section, field in Config.model_fields.items():
        for key in field.annotation.model_fields:
            value = os.environ.get(env_variable(section, key))
            if value is not None:
                overrides.setdefault(section, {})[key] = value
    return overrides


def load_config(config_path: str | Path | None = None) -> Config:
    """Load configuration from YAML file with environment variable overrides.

    Args:
        config_path: Path to YAML config file. If None, uses default.yaml,
            falling back to built-in defaults when it is not present.

    Returns:
        Validated Config object.

    Raises:
        FileNotFoundError: If an explicit config file doesn't exist.
        ValidationError: If config values are invalid.
    """
    data: dict[str, Any] = {}

    if config_path is None:
        path = default_config_path()
        if path.exists():
            data = _read_yaml(path)
        else:
            logger.debug("No default config at %s; using built-in defaults", path)
    else:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        data = _read_yaml(path)

    for section, values in _env_overrides().items():
        from_file = data.get(section)
        data[section] = {**from_file, **values} if isinstance(from_file, dict) else values

    return Config.model_validate(data)


def _read_yaml(path: Path) -> dict[str, Any]:
    with open(path) as f:
        return yaml.safe_load(f) or {}


def get_default_config() -> Config:
    """Get default configuration without loading from file."""
    return Config()
