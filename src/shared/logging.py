"""
Logging Configuration - Shared Layer

Structured logging for use case execution. Every layer obtains its logger
through ``get_logger`` and emits dotted event names with keyword context,
e.g. ``logger.info("use_case.failed", use_case="SignUpUseCase")``.
"""

import logging
import os
import sys
from typing import Any, List, Optional

import structlog
from structlog.types import Processor

from src.shared.consts import EnumEnvironment, EnumLogLevel

_SHARED_PROCESSORS: List[Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
]


def _select_renderer(environment: str) -> Processor:
    env_value = environment.lower()
    if env_value == EnumEnvironment.PRODUCTION.value:
        return structlog.processors.JSONRenderer()
    # Plain output keeps captured test logs readable.
    return structlog.dev.ConsoleRenderer(
        colors=env_value == EnumEnvironment.DEVELOPMENT.value
    )


def configure_logging(
    level: Optional[str] = None,
    file_path: Optional[str] = None,
    environment: str = EnumEnvironment.DEVELOPMENT.value,
) -> None:
    """
    Configure structlog on top of the standard logging module.

    Args:
        level: Log level name; falls back to ``LOG_LEVEL`` then ``INFO``.
        file_path: Optional log file; falls back to ``LOG_FILE_PATH``.
        environment: Application environment, selects the renderer.
    """
    log_level = level or os.environ.get("LOG_LEVEL") or "INFO"
    log_file = file_path or os.environ.get("LOG_FILE_PATH")
    numeric_level = EnumLogLevel.to_numeric(log_level)

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=_select_renderer(environment),
        foreign_pre_chain=[
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
        ],
    )
    for handler in handlers:
        handler.setFormatter(formatter)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.handlers = handlers
    root_logger.setLevel(numeric_level)

    get_logger(__name__).debug(
        "logging.configured", level=log_level, file_path=log_file
    )


def update_logging_from_settings(settings: Any) -> None:
    """
    Reconfigure logging from the application settings object.

    Args:
        settings: Object exposing ``logging.level``, ``logging.file_path``
            and ``environment`` (enum members or plain strings).
    """
    level = settings.logging.level
    environment = settings.environment
    configure_logging(
        level=level.value if hasattr(level, "value") else level,
        file_path=settings.logging.file_path,
        environment=(
            environment.value if hasattr(environment, "value") else environment
        ),
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger configured for the project."""
    return structlog.get_logger(name)
