"""Event dispatcher port for domain events."""

from abc import ABC, abstractmethod

from shared_kernel.domain.base.events.base_events import DomainEvent


class DomainEventDispatcher(ABC):
    """Port for delivering drained domain events to the outside world."""

    @abstractmethod
    def dispatch(self, event: DomainEvent) -> None:
        """Deliver a single domain event. May raise."""
