from datetime import datetime, timezone
from sqlalchemy import Column, String, DateTime, Text
from lingam.app.core.database import Base


class StorageEntryORM(Base):
    """
    One key of the durable key/value store.

    Each back-office collection lives under a single key as a JSON array.
    """
    __tablename__ = "storage_entries"

    key = Column(String(255), primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(
        DateTime,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    def __repr__(self):
        return f"<StorageEntry {self.key} ({len(self.value or '')} chars)>"
