"""Logging configuration for cas-auth.

Environment-driven control over verbosity and format, applied once at
application startup with ``setup_logging()``.
"""

import logging
import logging.config
import os
from enum import Enum


class LogLevel(str, Enum):
    """Supported log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogVerbosity(str, Enum):
    """Log verbosity modes."""
    QUIET = "QUIET"      # Only errors and critical
    NORMAL = "NORMAL"    # Warnings and above
    VERBOSE = "VERBOSE"  # Info level logging
    DEBUG = "DEBUG"      # Full debug logging


class LogFormat(str, Enum):
    """Log format options."""
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


def get_log_level_from_verbosity(verbosity: str) -> str:
    """Map verbosity mode to log level."""
    verbosity_map = {
        LogVerbosity.QUIET: LogLevel.ERROR.value,
        LogVerbosity.NORMAL: LogLevel.WARNING.value,
        LogVerbosity.VERBOSE: LogLevel.INFO.value,
        LogVerbosity.DEBUG: LogLevel.DEBUG.value,
    }
    try:
        return verbosity_map[LogVerbosity(verbosity.upper())]
    except ValueError:
        return LogLevel.WARNING.value


class LoggingConfig:
    """Logging configuration manager."""

    # HTTP client internals would otherwise log every validation request
    ERROR_ONLY_MODULES = [
        "httpx",
        "httpcore",
        "asyncio",
    ]

    FORMATS = {
        LogFormat.SIMPLE: "%(asctime)s - %(levelname)s - %(message)s",
        LogFormat.DETAILED: "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
        LogFormat.JSON: '{"time":"%(asctime)s","level":"%(levelname)s","module":"%(name)s","message":"%(message)s"}',
    }

    @classmethod
    def build(cls) -> dict:
        """Build a ``dictConfig`` mapping from environment variables.

        ``LOG_LEVEL`` sets the level of the cas_auth loggers, ``LOG_VERBOSITY``
        the root level and ``LOG_FORMAT`` one of simple, detailed or json.
        """
        log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        if log_level not in LogLevel.__members__:
            log_level = LogLevel.INFO.value
        root_level = get_log_level_from_verbosity(os.getenv("LOG_VERBOSITY", "NORMAL"))

        try:
            log_format = LogFormat(os.getenv("LOG_FORMAT", "simple").lower())
        except ValueError:
            log_format = LogFormat.SIMPLE

        config = {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": cls.FORMATS[log_format],
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "root": {
                "level": root_level,
                "handlers": ["console"],
            },
            "loggers": {
                "cas_auth": {
                    "level": log_level,
                    "handlers": ["console"],
                    "propagate": False,
                },
            },
        }

        for module in cls.ERROR_ONLY_MODULES:
            config["loggers"][module] = {
                "level": "ERROR",
                "handlers": ["console"],
                "propagate": False,
            }

        return config

    @classmethod
    def configure(cls) -> None:
        """Configure logging based on environment variables."""
        logging.config.dictConfig(cls.build())


def setup_logging() -> None:
    """Setup logging configuration from environment variables.

    Call once at application startup; importing cas_auth does not touch the
    host application's logging.
    """
    LoggingConfig.configure()
