"""
Configuration for SmartHome Catalogue
=====================================
Runtime settings loaded from environment variables, plus the logging setup.
Catalogue files default to the JSON documents shipped in ``smarthome/data``.
"""

from __future__ import annotations

import logging
import os
import sys
from contextlib import suppress
from dataclasses import dataclass, field
from logging.handlers import RotatingFileHandler
from pathlib import Path

from smarthome.constants import (
    DEFAULT_ACTUATOR_CATALOGUE,
    DEFAULT_DEVICE_LOG_LIMIT,
    DEFAULT_SENSOR_CATALOGUE,
)

_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_CONSOLE_HANDLER = "smarthome_console"
_FILE_HANDLER = "smarthome_file"


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.lower() in {"1", "true", "t", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"Environment variable {name} must be an integer.") from None


@dataclass
class AppConfig:
    """Runtime configuration loaded from environment variables."""

    environment: str = field(default_factory=lambda: os.getenv("SMARTHOME_ENV", "development"))
    sensor_catalogue_path: str = field(
        default_factory=lambda: os.getenv("SMARTHOME_SENSOR_CATALOGUE", DEFAULT_SENSOR_CATALOGUE)
    )
    actuator_catalogue_path: str = field(
        default_factory=lambda: os.getenv("SMARTHOME_ACTUATOR_CATALOGUE", DEFAULT_ACTUATOR_CATALOGUE)
    )
    device_log_limit: int = field(
        default_factory=lambda: _env_int("SMARTHOME_DEVICE_LOG_LIMIT", DEFAULT_DEVICE_LOG_LIMIT)
    )

    DEBUG: bool = field(default_factory=lambda: _env_bool("SMARTHOME_DEBUG", False))
    log_level: str = field(default_factory=lambda: os.getenv("SMARTHOME_LOG_LEVEL", "INFO"))
    log_file: str | None = field(default_factory=lambda: os.getenv("SMARTHOME_LOG_FILE") or None)

    def __post_init__(self) -> None:
        self.log_level = self.log_level.upper()
        if self.device_log_limit < 1:
            raise ValueError("SMARTHOME_DEVICE_LOG_LIMIT must be a positive integer.")


def load_config() -> AppConfig:
    """Build an :class:`AppConfig` from the current environment."""
    return AppConfig()


def validate_config(config: AppConfig) -> list[str]:
    """
    Check a configuration for problems that would surface later.

    Args:
        config: Configuration to inspect

    Returns:
        Human-readable warnings; empty when nothing looks wrong
    """
    warnings: list[str] = []
    if config.log_level not in _VALID_LOG_LEVELS:
        warnings.append(f"Unknown log level '{config.log_level}', falling back to INFO")
    for label, path in (
        ("sensor", config.sensor_catalogue_path),
        ("actuator", config.actuator_catalogue_path),
    ):
        if not path or not Path(path).is_file():
            warnings.append(f"The {label} catalogue file '{path}' does not exist")
    return warnings


def setup_logging(debug: bool = False, log_file: str | None = None, level: str | None = None) -> None:
    """Setup logging configuration."""
    if debug:
        log_level = logging.DEBUG
    elif level and level.upper() in _VALID_LOG_LEVELS:
        log_level = logging.getLevelName(level.upper())
    else:
        log_level = logging.INFO

    root = logging.getLogger()
    root.setLevel(log_level)

    # Avoid duplicate handlers when called more than once
    has_console = any(getattr(h, "name", "") == _CONSOLE_HANDLER for h in root.handlers)
    has_file = any(getattr(h, "name", "") == _FILE_HANDLER for h in root.handlers)
    added_handler = False

    stream = sys.stdout
    with suppress(AttributeError, ValueError):
        stream.reconfigure(encoding="utf-8", errors="replace")
    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    if not has_console:
        console_handler = logging.StreamHandler(stream=stream)
        console_handler.name = _CONSOLE_HANDLER
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)
        added_handler = True

    if log_file and not has_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.name = _FILE_HANDLER
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
        added_handler = True

    for handler in root.handlers:
        if getattr(handler, "name", "") in {_CONSOLE_HANDLER, _FILE_HANDLER}:
            handler.setLevel(log_level)

    if added_handler:
        root.info(f"Logging initialized at level: {logging.getLevelName(log_level)}")


def setup_logging_from_config(config: AppConfig) -> None:
    """Apply the logging settings carried by ``config``."""
    setup_logging(debug=config.DEBUG, log_file=config.log_file, level=config.log_level)
