"""Base domain layer - shared kernel for all bounded contexts."""

from .entity import AggregateRoot, Entity, is_default_identifier
from .event_sourced_entity import EventSourcedEntity, applies
from .events import DomainEvent, DomainEventBuffer, IntegrationEvent
from .exceptions import (
    ConcurrencyConflictError,
    ConfigurationError,
    DomainException,
    EntityNotFoundError,
    HandlerNotRegisteredError,
    InvalidArgumentError,
)
from .mixins import AuditableMixin, SoftDeleteMixin, VersionedMixin
from .ports import (
    AntiCorruptionAdapter,
    AntiCorruptionTranslator,
    DomainEventDispatcher,
    EntitySnapshot,
    EventHistorySource,
    UnitOfWork,
)

__all__ = [
    # Entities
    "Entity",
    "AggregateRoot",
    "EventSourcedEntity",
    "applies",
    "is_default_identifier",
    # Mixins
    "AuditableMixin",
    "SoftDeleteMixin",
    "VersionedMixin",
    # Events
    "DomainEvent",
    "DomainEventBuffer",
    "IntegrationEvent",
    # Ports
    "AntiCorruptionAdapter",
    "AntiCorruptionTranslator",
    "DomainEventDispatcher",
    "EventHistorySource",
    "EntitySnapshot",
    "UnitOfWork",
    # Exceptions
    "DomainException",
    "InvalidArgumentError",
    "ConfigurationError",
    "HandlerNotRegisteredError",
    "ConcurrencyConflictError",
    "EntityNotFoundError",
]
