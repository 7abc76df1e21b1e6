import logging
import logging.config
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Any, Optional
from datetime import datetime, timezone
import sys

LOG_FORMAT = "%(asctime)s %(process)d %(threadName)s %(name)s - %(levelname)s - %(message)s"


class LogLevel(Enum):
    DEBUG = "DEBUG"  # Detailed information, typically of interest only when diagnosing problems.
    INFO = "INFO"  # Confirmation that things are working as expected.
    WARNING = "WARNING"  # Something unexpected happened, but the command still ran.
    ERROR = "ERROR"  # A command could not be completed.
    CRITICAL = "CRITICAL"  # The host itself may be unable to continue running.


class ComponentType(Enum):
    CLI = "cli"  # Argument parsing, subcommand selection, exit codes.
    DISPATCHER = "dispatcher"  # Command lookup and execution.
    BATCH = "batch"  # Batch script loading and execution.
    CONFIG = "config"  # Configuration loading.


@dataclass
class LogMessage:
    level: LogLevel
    component: ComponentType
    action: str  # Verb describing the event, e.g., "command_dispatched", "script_loaded"
    event_summary: str  # Human-readable summary of the event.
    timestamp: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat(timespec="milliseconds"))
    command: Optional[str] = None  # Name of the command involved, if applicable.
    duration_ms: Optional[float] = None  # Duration of the action in milliseconds, if applicable.
    details: Dict[str, Any] = field(default_factory=dict)  # Component-specific structured data providing context.

    def to_dict(self) -> Dict[str, Any]:
        """Converts the LogMessage dataclass to a dictionary, suitable for logging extra data."""
        data = {
            "timestamp": self.timestamp,
            "level": self.level.value,
            "component": self.component.value,
            "action": self.action,
            "event_summary": self.event_summary,
            "command": self.command,
            "duration_ms": self.duration_ms,
            "details": self.details,
        }
        # Filter out None values
        return {k: v for k, v in data.items() if v is not None}


def setup_logging(logging_config: Optional[Dict[str, Any]] = None):
    """
    Configures the logging system.

    Args:
        logging_config: The 'logging' section of the loaded configuration.
                        A mapping with a 'version' key is passed to dictConfig;
                        otherwise 'level' and the optional 'file' are used to
                        set up a basic console logger.
    """
    logging_config = logging_config or {}
    if "version" in logging_config:
        # Remove any existing handlers from the root logger to avoid duplicates
        for handler in logging.root.handlers[:]:
            logging.root.removeHandler(handler)
        dict_config = {k: v for k, v in logging_config.items() if k != "level"}
        try:
            logging.config.dictConfig(dict_config)
        except (ValueError, TypeError, AttributeError, ImportError) as e:
            setup_basic_logging(logging_config.get("level", "WARNING"))
            logging.getLogger(__name__).error(f"Error applying logging configuration: {e}")
            return
        if "level" in logging_config:
            logging.getLogger().setLevel(logging_config["level"])
    else:
        setup_basic_logging(logging_config.get("level", "WARNING"), logging_config.get("file"))


def setup_basic_logging(level: str = "WARNING", log_file: Optional[str] = None):
    """Sets up a basic console logger on stderr, plus a file handler when log_file is given."""
    # Remove any existing handlers from the root logger to avoid duplicates
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    handlers = [console_handler]

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = handlers

    if log_file:
        logging.getLogger(__name__).debug(f"File logging configured. Log file: {log_file}")


def get_logger(name: str) -> logging.Logger:
    """
    Gets a logger instance by name.

    Args:
        name: The name of the logger.

    Returns:
        A logging.Logger instance.
    """
    return logging.getLogger(name)


def log_event(log_message: LogMessage, logger_name: str = "msgshell"):
    """
    Logs a structured LogMessage using a specified logger.

    Args:
        log_message: The LogMessage object to log.
        logger_name: The name of the logger to use. Defaults to "msgshell".
    """
    logger = get_logger(logger_name)
    extra_data = log_message.to_dict()

    # Standard logging methods expect level as an integer, not Enum
    level_map = {
        LogLevel.DEBUG: logging.DEBUG,
        LogLevel.INFO: logging.INFO,
        LogLevel.WARNING: logging.WARNING,
        LogLevel.ERROR: logging.ERROR,
        LogLevel.CRITICAL: logging.CRITICAL,
    }
    level_int = level_map.get(log_message.level, logging.INFO)

    logger.log(level_int, log_message.event_summary, extra=extra_data)
