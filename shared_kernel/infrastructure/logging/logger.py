"""structlog setup for the shared kernel."""
import logging
import os
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING, List, Optional

import structlog

if TYPE_CHECKING:
    from shared_kernel.config.schemas.logging_schema import LoggingConfig

_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
    structlog.processors.KeyValueRenderer(key_order=["event"], drop_missing=True),
]


class CallerInfoFormatter(logging.Formatter):
    """Formatter exposing ``%(caller_info)s`` as module.function:line."""

    def format(self, record: logging.LogRecord) -> str:
        record.caller_info = f"{record.module}.{record.funcName}:{record.lineno}"
        return super().format(record)


def _build_handlers(config: 'LoggingConfig') -> List[logging.Handler]:
    formatter = CallerInfoFormatter(config.format)
    handlers: List[logging.Handler] = []

    if config.destination in ("file", "both"):
        log_file = os.path.expandvars(config.file_path)
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers.append(RotatingFileHandler(
            log_file,
            maxBytes=config.max_size_mb * 1024 * 1024,
            backupCount=config.backup_count,
        ))

    if config.destination in ("stdout", "both"):
        handlers.append(logging.StreamHandler())

    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(config: Optional['LoggingConfig'] = None) -> structlog.stdlib.BoundLogger:
    """
    Route the root logger to the configured destination and set up structlog.

    Existing root handlers are replaced, so calling this again reconfigures
    logging instead of duplicating output.

    Args:
        config: Logging configuration. Defaults to ``LoggingConfig()``,
               which honours LOG_LEVEL and LOG_DESTINATION.
    Returns:
        The kernel's structlog logger.
    """
    if config is None:
        from shared_kernel.config.schemas.logging_schema import LoggingConfig
        config = LoggingConfig()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.level))
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    for handler in _build_handlers(config):
        root_logger.addHandler(handler)

    structlog.configure(
        processors=_PROCESSORS,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    logger = structlog.get_logger("shared_kernel")
    logger.debug(
        "Logging configured",
        log_level=config.level,
        log_destination=config.destination,
        log_file=config.file_path,
    )
    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger that routes through the stdlib logger ``name``."""
    return structlog.wrap_logger(logging.getLogger(name))
