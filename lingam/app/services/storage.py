"""
Durable key/value storage.

A string-keyed, string-valued store with get/set/remove operations, backed
by one SQL table. Values are opaque text; collections serialize themselves
to JSON before calling set_item().
"""

import logging
from typing import Optional

from sqlalchemy import delete, select, text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from lingam.app.core.database import get_db_context
from lingam.app.models.storage_entry_orm import StorageEntryORM

logger = logging.getLogger(__name__)


class KeyValueStorage:
    """SQL-backed key/value store (one row per key)."""

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]):
        self._session_maker = session_maker

    async def get_item(self, key: str) -> Optional[str]:
        """Return the stored text for key, or None if the key was never set."""
        async with get_db_context(self._session_maker) as session:
            result = await session.execute(
                select(StorageEntryORM.value).where(StorageEntryORM.key == key)
            )
            return result.scalar_one_or_none()

    async def set_item(self, key: str, value: str) -> None:
        """Overwrite the value stored under key."""
        async with get_db_context(self._session_maker) as session:
            entry = await session.get(StorageEntryORM, key)
            if entry is None:
                session.add(StorageEntryORM(key=key, value=value))
            else:
                entry.value = value
        logger.debug(f"Stored {len(value)} chars under '{key}'")

    async def remove_item(self, key: str) -> None:
        async with get_db_context(self._session_maker) as session:
            await session.execute(delete(StorageEntryORM).where(StorageEntryORM.key == key))

    async def ping(self) -> None:
        """Round-trip to the database; raises if it is unreachable."""
        async with get_db_context(self._session_maker) as session:
            await session.execute(text("SELECT 1"))
