"""Models package."""

from lingam.app.models.storage_entry_orm import StorageEntryORM

__all__ = [
    "StorageEntryORM",
]
