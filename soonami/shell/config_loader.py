"""Configuration Loader - Imperative Shell.

This module handles loading configuration from YAML files and
environment variables. All I/O is contained here.

Models (Config, AlertLabels) are defined in soonami/core/config.py.
"""

import logging
import os
from dataclasses import replace
from pathlib import Path
from typing import Any

import yaml

from soonami.core.config import (
    AlertLabels,
    Config,
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_READ_TIMEOUT,
    DEFAULT_TIMEZONE,
    validate_config,
)


logger = logging.getLogger(__name__)


DEFAULT_CONFIG_PATH = "config/config.yaml"


def _parse_labels(data: dict[str, Any]) -> AlertLabels:
    """Parse alert labels, keeping defaults for missing keys."""
    defaults = AlertLabels()
    return AlertLabels(
        no_alert=str(data.get("no_alert", defaults.no_alert)),
        alert_issued=str(data.get("alert_issued", defaults.alert_issued)),
        not_available=str(data.get("not_available", defaults.not_available)),
    )


def _validated(config: Config) -> Config:
    """Log validation problems and reset invalid timeouts to defaults."""
    result = validate_config(config)
    for error in result.warnings:
        logger.warning("Config %s: %s", error.field, error.message)
    for error in result.critical_errors:
        logger.error("Config %s: %s", error.field, error.message)

    fields = {e.field for e in result.critical_errors}
    if "connect_timeout" in fields:
        config = replace(config, connect_timeout=DEFAULT_CONNECT_TIMEOUT)
    if "read_timeout" in fields:
        config = replace(config, read_timeout=DEFAULT_READ_TIMEOUT)
    return config


def load_config_from_dict(data: dict[str, Any]) -> Config:
    """Load configuration from a dictionary.

    Args:
        data: Configuration dictionary

    Returns:
        Parsed Config object
    """
    config = Config(
        connect_timeout=float(data.get("connect_timeout", DEFAULT_CONNECT_TIMEOUT)),
        read_timeout=float(data.get("read_timeout", DEFAULT_READ_TIMEOUT)),
        display_timezone=str(data.get("display_timezone", DEFAULT_TIMEZONE)),
        labels=_parse_labels(data.get("labels") or {}),
    )
    return _validated(config)


def load_config(config_path: str | Path | None = None) -> Config:
    """Load configuration from a YAML file.

    This method performs file I/O.

    Args:
        config_path: Path to YAML config file.
                    If None, uses CONFIG_PATH env var or default.

    Returns:
        Parsed Config object (defaults if the file is missing or empty)

    Raises:
        yaml.YAMLError: If config file is invalid YAML
    """
    if config_path is None:
        config_path = os.environ.get("CONFIG_PATH", DEFAULT_CONFIG_PATH)

    path = Path(config_path)

    logger.info("Loading configuration from %s", path)

    if not path.exists():
        logger.warning("Config file not found: %s, using defaults", path)
        return Config()

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        logger.warning("Config file is empty, using defaults")
        return Config()

    config = load_config_from_dict(data)

    logger.info(
        "Loaded config: timeouts %.1fs/%.1fs, timezone %s",
        config.connect_timeout,
        config.read_timeout,
        config.display_timezone,
    )

    return config


def load_config_from_env() -> Config:
    """Load configuration from environment variables.

    Environment variables:
        SOONAMI_CONNECT_TIMEOUT: Connect timeout in seconds
        SOONAMI_READ_TIMEOUT: Read timeout in seconds
        SOONAMI_TIMEZONE: IANA zone used for the displayed date

    Returns:
        Config object from environment
    """
    config = Config(
        connect_timeout=float(
            os.environ.get("SOONAMI_CONNECT_TIMEOUT", DEFAULT_CONNECT_TIMEOUT)
        ),
        read_timeout=float(
            os.environ.get("SOONAMI_READ_TIMEOUT", DEFAULT_READ_TIMEOUT)
        ),
        display_timezone=os.environ.get("SOONAMI_TIMEZONE", DEFAULT_TIMEZONE),
    )
    return _validated(config)
