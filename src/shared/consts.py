"""Constants shared by configuration and logging."""

import logging
from enum import Enum


class EnumEnvironment(str, Enum):
    """Deployment environment; production switches logs to JSON."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"


class EnumLogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @classmethod
    def to_numeric(cls, name: str) -> int:
        """Map a level name to its ``logging`` constant, defaulting to INFO."""
        try:
            return getattr(logging, cls(name.upper()).value)
        except ValueError:
            return logging.INFO
