"""
Domain Layer - shared kernel primitives

- base/: entities, event-sourced entities, domain events, exceptions and
  the ports the kernel consumes (dispatcher, history source, unit of work,
  anti-corruption layer)
"""

from .base import (
    AggregateRoot,
    DomainEvent,
    DomainException,
    Entity,
    EventSourcedEntity,
    applies,
)

__all__ = [
    "Entity",
    "AggregateRoot",
    "EventSourcedEntity",
    "applies",
    "DomainEvent",
    "DomainException",
]
