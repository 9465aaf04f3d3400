"""Reusable record mixins."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field

from ..exceptions import InvariantViolationError


class AuditableMixin(BaseModel):
    """Mixin that adds created_at / updated_at timestamps."""

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def touch(self) -> None:
        """Update the ``updated_at`` timestamp to *now*."""
        object.__setattr__(self, "updated_at", datetime.now(timezone.utc))


class SoftDeleteMixin(BaseModel):
    """Mixin for records that are never hard-deleted.

    Provides ``deleted_at`` and the delete/restore transitions. Repositories
    must filter on :attr:`is_deleted` for every read.
    """

    deleted_at: datetime | None = None

    @property
    def is_deleted(self) -> bool:
        """Return True if the record has been soft-deleted."""
        return self.deleted_at is not None

    def delete(self) -> None:
        """Mark as deleted. Raises if already deleted."""
        if self.deleted_at is not None:
            raise InvariantViolationError("Already deleted")
        object.__setattr__(self, "deleted_at", datetime.now(timezone.utc))

    def restore(self) -> None:
        """Clear deletion. Raises if not deleted."""
        if self.deleted_at is None:
            raise InvariantViolationError("Not deleted")
        object.__setattr__(self, "deleted_at", None)
