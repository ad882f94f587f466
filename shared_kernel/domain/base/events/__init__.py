"""Domain events package - base events and pending event buffer."""

from .base_events import DomainEvent
from .buffer import DomainEventBuffer
from .integration_events import IntegrationEvent

__all__ = [
    "DomainEvent",
    "DomainEventBuffer",
    "IntegrationEvent",
]
