"""Configuration schemas package."""

from .app_schema import EventSourcingConfig, KernelConfig, validate_config
from .logging_schema import LoggingConfig

__all__ = [
    "EventSourcingConfig",
    "KernelConfig",
    "LoggingConfig",
    "validate_config",
]
