"""Structured logging for patternkit, built on structlog over stdlib logging."""
import logging
import os
import threading
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING, List, Optional

import structlog

if TYPE_CHECKING:
    from patternkit.config.schemas import LoggingConfig

_configure_lock = threading.Lock()

# Records stay silent until setup_logging() installs handlers on the root logger
logging.getLogger("patternkit").addHandler(logging.NullHandler())

# Processors shared by structlog loggers and foreign (stdlib) log records
_SHARED_PROCESSORS = [
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
]


def _configure_structlog() -> None:
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


def _build_formatter(renderer: str) -> logging.Formatter:
    if renderer == "json":
        final_processor = structlog.processors.JSONRenderer()
    else:
        final_processor = structlog.dev.ConsoleRenderer(colors=False)
    return structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            final_processor,
        ],
        foreign_pre_chain=_SHARED_PROCESSORS,
    )


def setup_logging(config: Optional["LoggingConfig"] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the application using structlog.

    Args:
        config: Logging configuration. If None, it is read from the
                process-wide ConfigurationManager.

    Returns:
        Configured structlog logger instance.
    """
    if config is None:
        from patternkit.config.manager import get_config_manager
        from patternkit.config.schemas import LoggingConfig

        config = get_config_manager().get_typed(LoggingConfig)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.level.upper()))

    formatter = _build_formatter(config.renderer)
    handlers: List[logging.Handler] = []

    if config.destination in ("file", "both"):
        log_path = os.path.expandvars(config.file_path)
        log_dir = os.path.dirname(log_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=config.max_size_mb * 1024 * 1024,
            backupCount=config.backup_count,
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if config.destination in ("stdout", "both"):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    # Remove any existing handlers and add new ones
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    for handler in handlers:
        root_logger.addHandler(handler)

    with _configure_lock:
        structlog.reset_defaults()
        _configure_structlog()

    logger = structlog.get_logger("patternkit")
    logger.debug(
        "Logging configured",
        log_level=config.level,
        log_destination=config.destination,
        renderer=config.renderer,
    )
    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structured logger, routing through stdlib logging."""
    if not structlog.is_configured():
        with _configure_lock:
            if not structlog.is_configured():
                _configure_structlog()
    return structlog.get_logger(name)
