"""
Durable Entity Store - one typed collection persisted under a single key.

The whole collection is mirrored in memory and written back as a JSON array
after every mutation (full replacement, never append). Loading validates the
array against the record model, which turns serialized dates and timestamps
back into date/datetime values.
"""

import asyncio
import logging
import time
from typing import Callable, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from lingam.app.services.storage import KeyValueStorage

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class EntityStore(Generic[RecordT]):
    """In-memory collection of frozen records backed by KeyValueStorage.

    Records must carry a string ``id``. Mutations on one store are serialized
    by a lock so a slower persist can never overwrite a newer snapshot.
    """

    def __init__(self, storage: KeyValueStorage, key: str, model: Type[RecordT]):
        self.storage = storage
        self.key = key
        self.model = model
        self._adapter = TypeAdapter(List[model])
        self._records: List[RecordT] = []
        self._lock = asyncio.Lock()
        self._last_id = 0

    async def load(self) -> None:
        """Replace the in-memory collection with what is stored under the key.

        A missing key means an empty collection. Corrupt data is logged and
        also treated as an empty collection.
        """
        raw = await self.storage.get_item(self.key)
        records: List[RecordT] = []
        if raw is not None:
            try:
                records = self._adapter.validate_json(raw)
            except (ValidationError, ValueError) as e:
                logger.error(
                    f"Could not parse stored collection '{self.key}', starting empty: {e}",
                    extra={"extra_data": {"storage_key": self.key}},
                )
                records = []

        self._records = list(records)
        self._last_id = max(
            (int(r.id) for r in self._records if str(r.id).isdigit()),
            default=self._last_id,
        )
        logger.info(f"Loaded {len(self._records)} records from '{self.key}'")

    async def _write(self, records: List[RecordT]) -> None:
        payload = self._adapter.dump_json(records).decode("utf-8")
        await self.storage.set_item(self.key, payload)

    def next_id(self) -> str:
        """Millisecond timestamp id, strictly increasing within this store."""
        candidate = time.time_ns() // 1_000_000
        if candidate <= self._last_id:
            candidate = self._last_id + 1
        self._last_id = candidate
        return str(candidate)

    # --- reads -----------------------------------------------------------

    def all(self) -> List[RecordT]:
        """Copy of the collection; records themselves are immutable."""
        return list(self._records)

    def filter(self, predicate: Callable[[RecordT], bool]) -> List[RecordT]:
        return [r for r in self._records if predicate(r)]

    def find(self, record_id: str) -> Optional[RecordT]:
        return next((r for r in self._records if r.id == record_id), None)

    def __len__(self) -> int:
        return len(self._records)

    # --- mutations -------------------------------------------------------
    # The new list is written first and swapped in only after the write
    # succeeds, so a failed write leaves memory matching what is stored.

    async def add(self, record: RecordT) -> RecordT:
        async with self._lock:
            records = self._records + [record]
            await self._write(records)
            self._records = records
        return record

    async def update(
        self,
        record_id: str,
        change: Callable[[RecordT], RecordT],
    ) -> Optional[RecordT]:
        """Replace the record with change(record) and persist.

        Returns None without persisting when the id is unknown. If change()
        hands back the very same object nothing is written.
        """
        async with self._lock:
            for index, current in enumerate(self._records):
                if current.id == record_id:
                    updated = change(current)
                    if updated is not current:
                        records = list(self._records)
                        records[index] = updated
                        await self._write(records)
                        self._records = records
                    return updated
        return None

    async def remove(self, record_id: str) -> bool:
        async with self._lock:
            remaining = [r for r in self._records if r.id != record_id]
            if len(remaining) == len(self._records):
                return False
            await self._write(remaining)
            self._records = remaining
        return True

    async def clear(self) -> None:
        async with self._lock:
            await self._write([])
            self._records = []
