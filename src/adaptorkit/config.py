"""Settings loading and validation used to seed the config store."""

from __future__ import annotations

from copy import deepcopy
import logging
from pathlib import Path
import tomllib
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .exceptions import ConfigValidationError

LOGGER = logging.getLogger(__name__)

CONFIG_PATH = Path.home() / ".config" / "adaptorkit" / "config.toml"

VALID_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class LoggingConfig(BaseModel):
    """Logging behavior and output destinations."""

    level: str = "INFO"
    structured: bool = True
    log_to_file: bool = False
    log_file_path: str = "~/.local/state/adaptorkit/adaptorkit.log"

    @field_validator("level", mode="before")
    @classmethod
    def _validate_level(cls, value: Any) -> str:
        if not isinstance(value, str):
            raise ValueError("Logging level must be a string.")
        normalized = value.strip().upper()
        if normalized not in VALID_LOG_LEVELS:
            raise ValueError(f"Unsupported log level {normalized!r}.")
        return normalized

    @field_validator("log_file_path", mode="before")
    @classmethod
    def _validate_log_file_path(cls, value: Any) -> str:
        if not isinstance(value, str):
            raise ValueError("log_file_path must be a string.")
        normalized = value.strip()
        if not normalized:
            raise ValueError("log_file_path must not be empty.")
        return normalized


class Settings(BaseModel):
    """Root settings model. Unknown keys are kept and seed the config store."""

    model_config = ConfigDict(extra="allow")
    logging: LoggingConfig = LoggingConfig()
    test_mode: bool = False


DEFAULT_SETTINGS: dict[str, Any] = Settings().model_dump()


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge override values onto base values."""
    merged: dict[str, Any] = deepcopy(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _validate_settings(raw: dict[str, Any]) -> dict[str, Any]:
    """Validate merged settings and fall back to defaults when invalid."""
    try:
        return Settings.model_validate(raw).model_dump()
    except ValidationError as exc:
        LOGGER.warning("Settings validation failed, using defaults: %s", exc)
        return deepcopy(DEFAULT_SETTINGS)
    except Exception as exc:  # noqa: BLE001 - unexpected model construction failure.
        raise ConfigValidationError(f"Unable to validate settings: {exc}") from exc


def load_settings(config_path: Path | None = None) -> dict[str, Any]:
    """
    Load settings from TOML, merge with defaults, and validate.

    A missing file yields the defaults. A file that cannot be parsed is
    logged and ignored.
    """
    target_path = config_path or CONFIG_PATH

    raw_data: dict[str, Any] = {}
    if target_path.exists():
        try:
            raw_data = tomllib.loads(target_path.read_text(encoding="utf-8"))
        except (OSError, tomllib.TOMLDecodeError) as exc:
            LOGGER.warning("Failed to parse settings at %s: %s", target_path, exc)
            raw_data = {}

    return _validate_settings(_deep_merge(DEFAULT_SETTINGS, raw_data))
