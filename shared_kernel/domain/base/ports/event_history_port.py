"""Event history port - where event-sourced entities are rebuilt from."""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field

from shared_kernel.domain.base.events.base_events import DomainEvent


class EntitySnapshot(BaseModel):
    """Checkpoint of an entity's fields at a given version."""
    model_config = ConfigDict(frozen=True)

    entity_id: Any
    version: int = Field(..., ge=0)
    state: str
    taken_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class EventHistorySource(ABC):
    """Port for reading the persisted history of an event-sourced entity.

    Where the history lives (file, append log, remote store) is up to the
    adapter; callers only rely on the events being ordered and finite.
    """

    @abstractmethod
    def load_snapshot(self, entity_id: Any) -> Optional[EntitySnapshot]:
        """Return the latest snapshot for the entity, if one exists."""

    @abstractmethod
    def load_events(self, entity_id: Any, after_version: int = 0) -> Iterable[DomainEvent]:
        """Return the entity's events applied after ``after_version``, in order."""
