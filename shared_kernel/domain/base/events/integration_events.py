"""Integration events - messages that cross bounded context boundaries."""
from datetime import datetime, timezone
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class IntegrationEvent(BaseModel):
    """Base class for events published to other bounded contexts.

    Unlike domain events these are never applied to an entity; they carry
    only what other contexts are allowed to see.
    """
    model_config = ConfigDict(frozen=True)

    event_id: UUID = Field(default_factory=uuid4)
    occurred_on: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
