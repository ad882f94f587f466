"""Pending domain event buffer owned by an entity."""
from typing import TYPE_CHECKING, Iterator, List, Tuple

from shared_kernel.infrastructure.logging.logger import get_logger

from .base_events import DomainEvent

if TYPE_CHECKING:
    from shared_kernel.domain.base.ports.event_dispatcher_port import DomainEventDispatcher

logger = get_logger(__name__)


class DomainEventBuffer:
    """Ordered, mutable list of events raised but not yet dispatched.

    Insertion order is preserved and duplicates are allowed. The buffer
    performs no validation of the events it holds.
    """

    def __init__(self) -> None:
        self._events: List[DomainEvent] = []

    def add(self, event: DomainEvent) -> None:
        """Append an event to the end of the buffer."""
        self._events.append(event)

    def remove(self, event: DomainEvent) -> None:
        """Remove the first occurrence equal to ``event``; no-op if absent."""
        try:
            self._events.remove(event)
        except ValueError:
            pass

    def discard(self, event: DomainEvent) -> None:
        """Remove the most recent entry that is ``event`` itself; no-op if absent.

        Matches by identity, so an equal but distinct event is left alone.
        """
        for index in range(len(self._events) - 1, -1, -1):
            if self._events[index] is event:
                del self._events[index]
                return

    def pop(self) -> DomainEvent:
        """Remove and return the most recently added event."""
        return self._events.pop()

    def clear(self) -> None:
        """Drop every pending event."""
        self._events.clear()

    def drain(self, dispatcher: 'DomainEventDispatcher') -> int:
        """Dispatch every pending event in insertion order, then empty the buffer.

        An event leaves the buffer only once ``dispatcher.dispatch`` has
        returned for it. If the dispatcher raises, the error propagates: the
        events delivered so far stay removed while the failing event and
        everything after it remain buffered, so a later drain resumes at the
        failed event.

        Returns:
            Number of events delivered.
        """
        delivered = 0
        while self._events:
            event = self._events[0]
            try:
                dispatcher.dispatch(event)
            except Exception:
                logger.warning(
                    "Dispatch failed, keeping remaining events buffered",
                    event_type=event.event_type,
                    event_id=event.event_id,
                    delivered=delivered,
                    remaining=len(self._events),
                )
                raise
            del self._events[0]
            delivered += 1

        logger.debug("Drained domain events", delivered=delivered)
        return delivered

    @property
    def events(self) -> Tuple[DomainEvent, ...]:
        """Read-only view of the pending events."""
        return tuple(self._events)

    def __iter__(self) -> Iterator[DomainEvent]:
        return iter(tuple(self._events))

    def __len__(self) -> int:
        return len(self._events)

    def __bool__(self) -> bool:
        return bool(self._events)
