"""Event-sourced entities - state derived from an ordered replay of domain events."""
import inspect
from types import MappingProxyType
from typing import Callable, ClassVar, Generic, Iterable, Mapping, Tuple, Type, TypeVar

from pydantic import PrivateAttr

from shared_kernel.domain.base.entity import Entity, TId
from shared_kernel.domain.base.events import DomainEvent
from shared_kernel.domain.base.exceptions import (
    ConcurrencyConflictError,
    ConfigurationError,
    HandlerNotRegisteredError,
    InvalidArgumentError,
)
from shared_kernel.infrastructure.logging.logger import get_logger

F = TypeVar('F', bound=Callable[..., None])

logger = get_logger(__name__)


def applies(*event_types: Type[DomainEvent]) -> Callable[[F], F]:
    """Mark an entity method as the handler that applies ``event_types``.

    The method receives the event and mutates the entity in place::

        class Order(EventSourcedEntity[int]):
            items: List[str] = Field(default_factory=list)

            @applies(ItemAdded)
            def _on_item_added(self, event: ItemAdded) -> None:
                self.items.append(event.sku)
    """
    if not event_types:
        raise InvalidArgumentError("event_types", "applies() needs at least one event type")

    def decorator(func: F) -> F:
        func.__applies_to__ = tuple(event_types)
        return func

    return decorator


class EventSourcedEntity(Entity[TId], Generic[TId]):
    """Entity whose state changes only by applying domain events.

    Handlers are collected from ``@applies`` methods when the concrete class
    is created and never change afterwards. An event is routed by its exact
    class; ``event_type`` plays no part in choosing the handler. Declaring
    ``event_types`` closes the set of events the entity understands: class
    creation then fails unless every listed event has a handler.

    ``version`` counts every event applied to the instance, raised live or
    replayed from history, on top of any snapshot version it was seeded
    with. Copies keep the fields but start at version 0 with no pending
    events.
    """

    event_types: ClassVar[Tuple[Type[DomainEvent], ...]] = ()
    __event_handlers__: ClassVar[Mapping[Type[DomainEvent], str]] = MappingProxyType({})

    _version: int = PrivateAttr(default=0)

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs) -> None:
        super().__pydantic_init_subclass__(**kwargs)

        handlers = {}
        for klass in reversed(cls.__mro__):
            for name, member in vars(klass).items():
                if not inspect.isfunction(member):
                    continue
                for event_type in getattr(member, '__applies_to__', ()):
                    handlers[event_type] = name

        if cls.event_types:
            declared = set(cls.event_types)
            missing = [event_type for event_type in cls.event_types if event_type not in handlers]
            if missing:
                raise HandlerNotRegisteredError(missing[0].__name__, cls.__name__)
            undeclared = sorted(
                event_type.__qualname__ for event_type in handlers if event_type not in declared
            )
            if undeclared:
                raise ConfigurationError(
                    f"{cls.__name__} handles events outside its event_types: "
                    f"{', '.join(undeclared)}"
                )

        cls.__event_handlers__ = MappingProxyType(handlers)

    @property
    def version(self) -> int:
        """Number of events applied to this entity."""
        return self._version

    @property
    def event_handlers(self) -> Mapping[Type[DomainEvent], Callable[[DomainEvent], None]]:
        """Read-only mapping of event class to bound handler."""
        return MappingProxyType({
            event_type: getattr(self, name)
            for event_type, name in self.__event_handlers__.items()
        })

    def is_fresh(self) -> bool:
        """No event has been applied yet."""
        return self._version == 0

    def _reset_copied_state(self) -> None:
        # copies start fresh, like from_snapshot
        super()._reset_copied_state()
        self._version = 0

    def raise_event(self, event: DomainEvent) -> None:
        """Record a new event and apply it to this entity.

        The event is buffered for dispatch before it is applied. If applying
        fails that event is taken back out of the buffer, leaving any events
        the handler raised itself in place, and the version is left untouched.

        Raises:
            InvalidArgumentError: If event is None.
            HandlerNotRegisteredError: If no handler applies the event.
        """
        if event is None:
            raise InvalidArgumentError("event", "Cannot raise an absent event")

        self._domain_events.add(event)
        try:
            self._apply_event(event)
        except Exception:
            self._domain_events.discard(event)
            raise
        self._version += 1

        logger.debug(
            "Raised event",
            entity_type=type(self).__name__,
            entity_id=self.id,
            event_type=event.event_type,
            version=self._version,
        )

    def load_from_history(self, history: Iterable[DomainEvent]) -> None:
        """Rebuild state by replaying historical events in order.

        Replayed events are considered already dispatched and are not
        buffered. Replaying onto an entity that already has events applied
        is allowed but logged, since the result depends on what came before.
        """
        if not self.is_fresh():
            logger.warning(
                "Replaying history onto a live entity",
                entity_type=type(self).__name__,
                entity_id=self.id,
                version=self._version,
            )
        self._replay(history)

    def restore_from_snapshot(
        self, snapshot_version: int, events_after_snapshot: Iterable[DomainEvent]
    ) -> None:
        """Seed the version from a snapshot, then replay the events after it.

        The caller is responsible for the entity's fields already matching
        the snapshot (see ``from_snapshot``).
        """
        if snapshot_version < 0:
            raise InvalidArgumentError(
                "snapshot_version", f"Snapshot version must be >= 0, got {snapshot_version}"
            )
        self._version = snapshot_version
        self._replay(events_after_snapshot)

    def create_snapshot(self) -> str:
        """Serialize the current field values.

        Pending events, handlers and the version are not part of the
        snapshot. Override for a custom serialization.
        """
        return self.model_dump_json()

    @classmethod
    def from_snapshot(cls, snapshot: str) -> 'EventSourcedEntity[TId]':
        """Build a fresh instance whose fields come from ``create_snapshot``."""
        return cls.model_validate_json(snapshot)

    def check_version(self, expected_version: int) -> None:
        """Optimistic concurrency check against the current version.

        Raises:
            ConcurrencyConflictError: If the version differs from expected_version.
        """
        if self._version != expected_version:
            logger.warning(
                "Version mismatch",
                entity_type=type(self).__name__,
                entity_id=self.id,
                expected=expected_version,
                actual=self._version,
            )
            raise ConcurrencyConflictError(
                type(self).__name__, self.id, expected_version, self._version
            )

    def _replay(self, history: Iterable[DomainEvent]) -> None:
        applied = 0
        for event in history:
            self._apply_event(event)
            self._version += 1
            applied += 1

        logger.debug(
            "Replayed history",
            entity_type=type(self).__name__,
            entity_id=self.id,
            applied=applied,
            version=self._version,
        )

    def _apply_event(self, event: DomainEvent) -> None:
        if event is None:
            raise InvalidArgumentError("event", "Cannot apply an absent event")
        handler_name = self.__event_handlers__.get(type(event))
        if handler_name is None:
            raise HandlerNotRegisteredError(type(event).__name__, type(self).__name__)
        getattr(self, handler_name)(event)
