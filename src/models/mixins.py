"""Mixins for SQLAlchemy models."""

from datetime import datetime

from sqlalchemy import Column, DateTime


def local_now() -> datetime:
    """Current local wall-clock time, without offset."""
    return datetime.now()


class TimestampMixin:
    """Mixin to add created_at and updated_at timestamp columns.

    The columns carry no server defaults or onupdate hooks: the service layer
    stamps them explicitly so creation and refresh times are visible in code.
    """

    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)

    def mark_created(self, now: datetime | None = None) -> None:
        """Set both timestamps to the same instant."""
        now = now or local_now()
        self.created_at = now
        self.updated_at = now

    def mark_updated(self, now: datetime | None = None) -> None:
        """Refresh updated_at, leaving created_at untouched."""
        self.updated_at = now or local_now()
