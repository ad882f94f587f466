"""Audit, soft-delete and row version mixins for entities."""
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class AuditableMixin(BaseModel):
    """Tracks who created and last modified an entity, and when."""

    created_on: Optional[datetime] = None
    created_by: Optional[str] = None
    modified_on: Optional[datetime] = None
    modified_by: Optional[str] = None

    def mark_created(self, by: str, at: Optional[datetime] = None) -> None:
        self.created_on = at or _utc_now()
        self.created_by = by

    def mark_modified(self, by: str, at: Optional[datetime] = None) -> None:
        self.modified_on = at or _utc_now()
        self.modified_by = by


class SoftDeleteMixin(BaseModel):
    """Flags an entity as deleted instead of removing it from storage."""

    is_deleted: bool = Field(False, description="Entity is logically deleted")
    deleted_on: Optional[datetime] = None

    def soft_delete(self, at: Optional[datetime] = None) -> None:
        self.is_deleted = True
        self.deleted_on = at or _utc_now()

    def undelete(self) -> None:
        self.is_deleted = False
        self.deleted_on = None


class VersionedMixin(BaseModel):
    """Carries a storage row version for optimistic concurrency.

    The value is opaque to the domain (a counter, timestamp or token chosen
    by the store); persistence adapters compare it when writing.
    """

    row_version: Optional[bytes] = None

    def has_row_version(self, row_version: Optional[bytes]) -> bool:
        return self.row_version == row_version
