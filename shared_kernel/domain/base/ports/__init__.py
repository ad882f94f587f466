"""Domain ports - interfaces the kernel consumes from outer layers."""

from .anti_corruption_port import AntiCorruptionAdapter, AntiCorruptionTranslator
from .event_dispatcher_port import DomainEventDispatcher
from .event_history_port import EntitySnapshot, EventHistorySource
from .unit_of_work_port import UnitOfWork

__all__ = [
    "AntiCorruptionAdapter",
    "AntiCorruptionTranslator",
    "DomainEventDispatcher",
    "EntitySnapshot",
    "EventHistorySource",
    "UnitOfWork",
]
