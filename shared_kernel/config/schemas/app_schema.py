"""Main configuration schema for the shared kernel."""
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from shared_kernel.domain.base.exceptions import ConfigurationError

from .logging_schema import LoggingConfig


class EventSourcingConfig(BaseModel):
    """Event sourcing configuration."""
    model_config = ConfigDict(extra="forbid")

    snapshot_interval: int = Field(
        100, ge=1, description="Take a snapshot every N applied events"
    )


class KernelConfig(BaseModel):
    """Shared kernel configuration."""

    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    event_sourcing: EventSourcingConfig = Field(
        default_factory=lambda: EventSourcingConfig()
    )


def validate_config(config: Dict[str, Any]) -> KernelConfig:
    """Validate a raw configuration dictionary into a KernelConfig."""
    try:
        return KernelConfig.model_validate(config)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}", details=e.errors()) from e
