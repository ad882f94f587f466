"""Base domain entities - identity, equality and pending domain events."""
from typing import Any, Dict, Generic, Optional, Tuple, TypeVar, TYPE_CHECKING
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from shared_kernel.domain.base.events import DomainEvent, DomainEventBuffer

if TYPE_CHECKING:
    from shared_kernel.domain.base.ports.event_dispatcher_port import DomainEventDispatcher

TId = TypeVar('TId')


def is_default_identifier(value: Any) -> bool:
    """True when ``value`` is the absent/zero value of its identifier type."""
    if value is None:
        return True
    if isinstance(value, UUID):
        return value.int == 0
    if isinstance(value, (int, str, bytes)):
        return not value
    return False


class Entity(BaseModel, Generic[TId]):
    """Base class for all domain entities.

    Two entities are equal when they are of the same concrete class and
    share a persisted identifier. Transient entities (no identifier yet)
    are only equal to themselves.
    """
    model_config = ConfigDict(
        validate_assignment=True,
        arbitrary_types_allowed=True
    )

    id: Optional[TId] = Field(default=None, frozen=True)  # Entity identifier

    _domain_events: DomainEventBuffer = PrivateAttr(default_factory=DomainEventBuffer)
    _identity_hash: Optional[int] = PrivateAttr(default=None)

    def is_transient(self) -> bool:
        """Entity has not been given a persisted identifier yet."""
        return is_default_identifier(self.id)

    def __eq__(self, other: object) -> bool:
        """Entities are equal if they have the same type and persisted ID."""
        if other is self:
            return True
        if type(other) is not type(self):
            return False
        if self.is_transient() or other.is_transient():
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return self.identity_hash()

    def identity_hash(self) -> int:
        """Hash based on entity ID, memoised once the entity is persisted.

        Transient entities hash by reference, matching their reference
        equality, and the result is never cached.
        """
        if self.is_transient():
            return object.__hash__(self)
        if self._identity_hash is None:
            self._identity_hash = hash(self.id)
        return self._identity_hash

    def __copy__(self):
        copied = super().__copy__()
        copied._reset_copied_state()
        return copied

    def __deepcopy__(self, memo: Optional[Dict[int, Any]] = None):
        copied = super().__deepcopy__(memo)
        copied._reset_copied_state()
        return copied

    def _reset_copied_state(self) -> None:
        # A copy (also model_copy, which may change the id) owns its own
        # pending events and recomputes its hash.
        self._domain_events = DomainEventBuffer()
        self._identity_hash = None

    @property
    def domain_events(self) -> Tuple[DomainEvent, ...]:
        """Pending domain events, in the order they were added."""
        return self._domain_events.events

    def add_domain_event(self, event: DomainEvent) -> None:
        """Add a domain event to be published."""
        self._domain_events.add(event)

    def remove_domain_event(self, event: DomainEvent) -> None:
        """Remove a pending domain event; nothing happens if it is absent."""
        self._domain_events.remove(event)

    def clear_domain_events(self) -> None:
        """Clear all domain events."""
        self._domain_events.clear()

    def dispatch_domain_events(self, dispatcher: 'DomainEventDispatcher') -> int:
        """Hand every pending event to ``dispatcher`` in order, then clear them."""
        return self._domain_events.drain(dispatcher)


class AggregateRoot:
    """Marker for entities that form the root of an aggregate.

    Mixed into an entity class; outside code should only hold references
    to the root, never to the objects it owns.
    """
