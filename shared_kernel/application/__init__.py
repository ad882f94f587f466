"""Application layer - use cases built on the domain kernel."""

from .rehydration import EntityRehydrator

__all__ = ["EntityRehydrator"]
