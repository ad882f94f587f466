"""Rebuilding event-sourced entities from their persisted history."""
from typing import Any, Optional, Type, TypeVar

from shared_kernel.config.schemas import EventSourcingConfig
from shared_kernel.domain.base.event_sourced_entity import EventSourcedEntity
from shared_kernel.domain.base.exceptions import EntityNotFoundError
from shared_kernel.domain.base.ports import EntitySnapshot, EventHistorySource
from shared_kernel.infrastructure.logging.logger import get_logger

E = TypeVar('E', bound=EventSourcedEntity)

logger = get_logger(__name__)


class EntityRehydrator:
    """Loads event-sourced entities through an EventHistorySource.

    A snapshot, when the source has one, short-circuits the replay: the
    entity is built from the snapshot state and only the events recorded
    after the snapshot version are applied.
    """

    def __init__(
        self,
        source: EventHistorySource,
        config: Optional[EventSourcingConfig] = None,
    ):
        self._source = source
        self._config = config or EventSourcingConfig()

    def load(self, entity_cls: Type[E], entity_id: Any) -> E:
        """Rebuild the entity with the given ID.

        Raises:
            EntityNotFoundError: If the source has neither a snapshot nor events.
        """
        snapshot = self._source.load_snapshot(entity_id)
        if snapshot is not None:
            entity = entity_cls.from_snapshot(snapshot.state)
            entity.restore_from_snapshot(
                snapshot.version,
                self._source.load_events(entity_id, after_version=snapshot.version),
            )
            logger.debug(
                "Rehydrated entity from snapshot",
                entity_type=entity_cls.__name__,
                entity_id=entity_id,
                snapshot_version=snapshot.version,
                version=entity.version,
            )
            return entity

        entity = entity_cls(id=entity_id)
        entity.load_from_history(self._source.load_events(entity_id))
        if entity.is_fresh():
            raise EntityNotFoundError(entity_cls.__name__, entity_id)

        logger.debug(
            "Rehydrated entity from history",
            entity_type=entity_cls.__name__,
            entity_id=entity_id,
            version=entity.version,
        )
        return entity

    def should_snapshot(self, entity: EventSourcedEntity, last_snapshot_version: int = 0) -> bool:
        """True once the entity has moved past the next snapshot boundary."""
        interval = self._config.snapshot_interval
        return entity.version // interval > last_snapshot_version // interval

    @staticmethod
    def take_snapshot(entity: EventSourcedEntity) -> EntitySnapshot:
        """Capture the entity's fields at its current version."""
        return EntitySnapshot(
            entity_id=entity.id,
            version=entity.version,
            state=entity.create_snapshot(),
        )
