"""
Module: msgshell/core/config.py
Purpose: Configuration loading for the msgshell host

Configuration is optional. When a path is given, the YAML file is parsed,
validated against CONFIG_SCHEMA and merged over the defaults. A .env file is
loaded first so MSGSHELL_LOG_LEVEL can be set there as well as in the
environment.

Usage:
    config = load_config()                 # Defaults only
    config = load_config('msgshell.yaml')  # Defaults + file
"""

import yaml
from pathlib import Path
import os
from dotenv import load_dotenv
from jsonschema import validate, ValidationError
from typing import Optional, Dict, Any

from msgshell.core.exceptions import ConfigError
from msgshell.core.logging import ComponentType, LogLevel, LogMessage, log_event


# Default values for optional config settings
DEFAULT_COMMAND_PREFIX = "/"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVEL_ENV_VAR = "MSGSHELL_LOG_LEVEL"

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

CONFIG_SCHEMA = {
    "type": "object",
    "properties": {
        "command_prefix": {"type": "string", "minLength": 1},
        "logging": {
            "type": "object",
            "properties": {
                "level": {"type": "string", "enum": LOG_LEVELS},
                "file": {"type": "string", "minLength": 1},
                "version": {"type": "integer"},
            },
        },
    },
}


def default_config() -> Dict[str, Any]:
    return {
        "command_prefix": DEFAULT_COMMAND_PREFIX,
        "logging": {"level": DEFAULT_LOG_LEVEL},
    }


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Loads configuration from an optional YAML file, validates it and applies
    environment overrides.

    Args:
        config_path: The path to the configuration file, or None for defaults.

    Returns:
        A dictionary with at least 'command_prefix' and 'logging' keys.

    Raises:
        ConfigError: If the configuration file does not exist, is invalid YAML,
                     or does not match the configuration schema.
    """
    # Load .env file first
    load_dotenv()

    config = default_config()

    if config_path is not None:
        path = Path(config_path)
        if not path.is_file():
            raise ConfigError(f"Configuration file not found: {config_path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                file_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Error parsing YAML file {config_path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Error reading configuration file {config_path}: {e}") from e

        # An empty file is an empty config
        if file_config is None:
            file_config = {}
        if not isinstance(file_config, dict):
            raise ConfigError(
                f"Invalid configuration format in {config_path}. Expected a dictionary, got {type(file_config).__name__}."
            )

        try:
            validate(instance=file_config, schema=CONFIG_SCHEMA)
        except ValidationError as e:
            location = " -> ".join(map(str, e.path)) if e.path else "N/A"
            raise ConfigError(f"Invalid configuration in {config_path}: {e.message} (path: {location})") from e

        config.update({k: v for k, v in file_config.items() if k != "logging"})
        if "logging" in file_config:
            logging_config = dict(file_config["logging"])
            # A dictConfig mapping is used as-is
            if "version" not in logging_config:
                logging_config.setdefault("level", DEFAULT_LOG_LEVEL)
            config["logging"] = logging_config
        config["config_path"] = str(path)

    env_level = os.getenv(LOG_LEVEL_ENV_VAR)
    if env_level:
        env_level = env_level.upper()
        if env_level not in LOG_LEVELS:
            raise ConfigError(f"Invalid {LOG_LEVEL_ENV_VAR} value: {env_level}. Expected one of {', '.join(LOG_LEVELS)}")
        config["logging"]["level"] = env_level

    log_event(
        LogMessage(
            level=LogLevel.DEBUG,
            component=ComponentType.CONFIG,
            action="config_loaded",
            event_summary=f"Configuration loaded from {config_path or 'defaults'}",
            details={"command_prefix": config["command_prefix"], "log_level": config["logging"].get("level")},
        ),
        logger_name=__name__,
    )
    return config
