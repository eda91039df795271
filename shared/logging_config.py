"""
Logging setup for the Hello Cities function app.

Levels are taken from the optional application settings file:

    {
      "Logging": {
        "LogLevel": {
          "Default": "Information",
          "shared.swapi": "Debug"
        }
      }
    }

"Default" applies to the root logger, every other key to the logger of that
name. Level names use either the Functions host vocabulary (Trace, Debug,
Information, Warning, Error, Critical, None) or Python's own names.

Python's root logger only lets WARNING and above through when nothing is
configured, which drops every informational log this app writes. That default
rule is replaced here so the effective default is Information. host.json
applies the same override on the host side.
"""
import json
import logging
import os
from typing import Dict, Optional

from shared.config import AppSettings, ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_LEVEL = logging.INFO

# Azure SDK request/response logging is kept quiet unless the settings file names it
DEFAULT_CATEGORY_LEVELS = {
    "azure.core.pipeline.policies.http_logging_policy": logging.WARNING,
}

LEVEL_NAMES = {
    "trace": logging.DEBUG,
    "debug": logging.DEBUG,
    "information": logging.INFO,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
    "fatal": logging.CRITICAL,
    # "None" switches a category off entirely
    "none": logging.CRITICAL + 10,
}


def parse_level(name: str) -> int:
    """Translate a level name from the settings file into a logging level."""
    if not isinstance(name, str) or name.strip().lower() not in LEVEL_NAMES:
        raise ConfigurationError(f"Unknown log level: {name!r}")
    return LEVEL_NAMES[name.strip().lower()]


def load_log_levels(path: str) -> Dict[str, str]:
    """
    Read the Logging.LogLevel section of the settings file.
    A missing file is not an error; the app then runs on defaults.
    """
    if not os.path.isfile(path):
        return {}

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Settings file {path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Settings file {path} must hold a JSON object")

    logging_section = data.get("Logging")
    if logging_section is None:
        return {}
    if not isinstance(logging_section, dict):
        raise ConfigurationError(f"Logging in {path} must be an object")

    section = logging_section.get("LogLevel")
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigurationError(f"Logging.LogLevel in {path} must be an object")
    return section


def configure_logging(settings: Optional[AppSettings] = None) -> Dict[str, int]:
    """
    Apply log levels to the root logger and to every configured category.

    Returns the effective mapping of category -> level, "" being the root logger.
    """
    settings = settings or AppSettings.from_env()
    configured = load_log_levels(settings.app_settings_file)

    levels: Dict[str, int] = {"": DEFAULT_LEVEL}
    levels.update(DEFAULT_CATEGORY_LEVELS)

    for category, level_name in configured.items():
        level = parse_level(level_name)
        if category.lower() == "default":
            levels[""] = level
        else:
            levels[category] = level

    root = logging.getLogger()
    if not root.handlers:
        # Outside the Functions worker there is no handler on the root logger yet
        logging.basicConfig(
            format='%(asctime)s %(levelname)s %(name)s %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

    for category, level in levels.items():
        logging.getLogger(category or None).setLevel(level)

    logger.debug(f"[LoggingConfig] Applied log levels: {levels}")
    return levels
