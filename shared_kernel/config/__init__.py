"""Configuration package - schemas, environment expansion and the manager."""

from .schemas import EventSourcingConfig, KernelConfig, LoggingConfig, validate_config

__all__ = [
    "EventSourcingConfig",
    "KernelConfig",
    "LoggingConfig",
    "validate_config",
]
