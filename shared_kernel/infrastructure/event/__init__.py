"""In-process event publishing."""

from .event_publisher import EventPublisher

__all__ = ["EventPublisher"]
