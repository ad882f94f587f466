"""Base event classes - foundation for event-driven and event-sourced entities."""
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, model_validator


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class DomainEvent(BaseModel):
    """Base class for all domain events.

    Events are immutable once created. ``event_type`` is a label for
    publishing and logs and defaults to the concrete class name; entities
    route events by their class, never by this label.

    Events hash by class and ``event_id`` so they can be kept in sets and
    used as dict keys even when ``metadata`` holds unhashable values.
    """
    model_config = ConfigDict(frozen=True)

    event_id: str = Field(default_factory=lambda: str(uuid4()))
    occurred_at: datetime = Field(default_factory=_utc_now)
    event_type: str = ""
    aggregate_id: Optional[str] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _default_event_type(cls, data: Any) -> Any:
        # Set event_type based on class name if not provided
        if isinstance(data, dict) and not data.get('event_type'):
            data = {**data, 'event_type': cls.__name__}
        return data

    def __hash__(self) -> int:
        # equal events share an event_id
        return hash((type(self), self.event_id))
