"""Configuration and logging."""

from .settings import CasSettings, configuration_error_from
from .logging_config import LoggingConfig, setup_logging

__all__ = [
    "CasSettings",
    "configuration_error_from",
    "LoggingConfig",
    "setup_logging",
]
