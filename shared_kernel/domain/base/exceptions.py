"""Domain exceptions - shared error taxonomy for entities and event sourcing."""
from typing import Any, Optional


class DomainException(Exception):
    """Base exception for all domain-specific errors."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class InvalidArgumentError(DomainException, ValueError):
    """Raised when a caller passes an absent or malformed argument."""

    def __init__(self, argument: str, message: Optional[str] = None):
        super().__init__(message or f"Invalid value for argument '{argument}'")
        self.argument = argument


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""


class HandlerNotRegisteredError(ConfigurationError):
    """Raised when an event variant has no mutation handler on an entity."""

    def __init__(self, event_type: str, entity_type: str):
        super().__init__(
            f"No event handler registered for {event_type} on {entity_type}"
        )
        self.event_type = event_type
        self.entity_type = entity_type


class ConcurrencyConflictError(DomainException):
    """Raised when an entity version does not match the expected version."""

    def __init__(self, entity_type: str, entity_id: Any, expected: int, actual: int):
        super().__init__(
            f"Concurrency conflict on {entity_type} with ID {entity_id}: "
            f"expected version {expected}, found {actual}"
        )
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.expected = expected
        self.actual = actual


class EntityNotFoundError(DomainException):
    """Raised when a requested entity cannot be found."""

    def __init__(self, entity_type: str, entity_id: Any):
        super().__init__(f"{entity_type} with ID {entity_id} not found")
        self.entity_type = entity_type
        self.entity_id = entity_id
