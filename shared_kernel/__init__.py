"""Shared Kernel - Root Package.

Building blocks for domain models whose consistency is enforced at the
object level: entity identity and equality, pending domain events, and
event-sourced entities that rebuild their state from an ordered replay of
events, restore from snapshots and check versions optimistically.

Key Components:
    - domain: entities, event-sourced entities, domain events and ports
    - application: rehydration of event-sourced entities from history
    - infrastructure: in-process event publisher and logging setup
    - config: configuration schemas and manager
"""

from ._version import __version__

__package_name__ = "shared-kernel"
