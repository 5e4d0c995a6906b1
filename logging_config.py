"""Structured logging configuration for the container metrics translator"""
import logging
import sys
from typing import Any, Dict, Optional
import structlog
from structlog.stdlib import LoggerFactory
from structlog.dev import ConsoleRenderer
from structlog.processors import JSONRenderer, TimeStamper, StackInfoRenderer
from config import Config


def setup_structured_logging(config: Config) -> None:
    """Setup structured logging with JSON format for production and console for development"""

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        TimeStamper(fmt="iso"),
        StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if config.is_development:
        processors.append(ConsoleRenderer())
    else:
        processors.append(JSONRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    level = getattr(logging, config.log_level.upper())

    handlers = []

    if config.log_file is not None:
        config.log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(str(config.log_file))
        file_handler.setLevel(level)
        handlers.append(file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    handlers.append(console_handler)

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=handlers,
        force=True,
    )

    # The generated client logs every model it builds at debug level
    logging.getLogger('kubernetes').setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance"""
    return structlog.get_logger(name)


def bind_container(logger: structlog.stdlib.BoundLogger, container_name: str, container_id: str) -> structlog.stdlib.BoundLogger:
    """Add container identity to logger context"""
    return logger.bind(container_name=container_name, container_id=container_id)


def log_container_translation(
    logger: structlog.stdlib.BoundLogger,
    container_name: str,
    metrics_count: int,
    timeseries_count: int,
    dropped: int = 0,
) -> None:
    """Log a finished container translation with structured data"""
    logger.debug(
        "Container translated",
        container_name=container_name,
        metrics_count=metrics_count,
        timeseries_count=timeseries_count,
        dropped=dropped,
        event_type="container_translation",
    )


def log_error(logger: structlog.stdlib.BoundLogger, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
    """Log error with structured context"""
    logger.error(
        "Error occurred",
        error=str(error),
        error_type=type(error).__name__,
        context=context or {},
        event_type="error",
        exc_info=True
    )
