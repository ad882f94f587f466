from typing import Callable, Dict, Iterable, List

from shared_kernel.domain.base.events import DomainEvent
from shared_kernel.domain.base.ports import DomainEventDispatcher
from shared_kernel.infrastructure.logging.logger import get_logger

EventHandler = Callable[[DomainEvent], None]


class EventPublisher(DomainEventDispatcher):
    """
    In-process implementation of the domain event dispatcher.
    Routes each event to the handlers registered for its event type.
    """

    def __init__(self):
        self._handlers: Dict[str, List[EventHandler]] = {}
        self._logger = get_logger(__name__)

    def register(self, event_type: str, handler: EventHandler) -> None:
        """Register a handler for a specific event type."""
        if event_type not in self._handlers:
            self._handlers[event_type] = []
        self._handlers[event_type].append(handler)
        self._logger.debug("Registered event handler", event_type=event_type)

    def unregister(self, event_type: str, handler: EventHandler) -> None:
        """Remove a previously registered handler; unknown handlers are ignored."""
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)
        if not handlers:
            self._handlers.pop(event_type, None)

    def publish(self, event: DomainEvent) -> None:
        """Publish a single event to all registered handlers, in registration order."""
        event_type = event.event_type
        handlers = self._handlers.get(event_type, [])

        if not handlers:
            self._logger.debug("No handlers for event", event_type=event_type)
            return

        self._logger.debug(
            "Publishing event", event_type=event_type, handler_count=len(handlers)
        )

        for handler in list(handlers):
            try:
                handler(event)
            except Exception:
                self._logger.exception(
                    "Error handling event", event_type=event_type, event_id=event.event_id
                )
                raise

    def dispatch(self, event: DomainEvent) -> None:
        self.publish(event)

    def publish_all(self, events: Iterable[DomainEvent]) -> None:
        """Publish multiple events."""
        for event in events:
            self.publish(event)
