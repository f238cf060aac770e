import logging

from pydantic import ValidationError

from lingam.app.schemas.store_info import StoreInfo
from lingam.app.services.storage import KeyValueStorage

logger = logging.getLogger(__name__)


class StoreInfoService:
    """Single store-settings record, falling back to the published defaults."""

    def __init__(self, storage: KeyValueStorage, key: str):
        self.storage = storage
        self.key = key

    async def get(self) -> StoreInfo:
        raw = await self.storage.get_item(self.key)
        if raw is None:
            return StoreInfo()
        try:
            return StoreInfo.model_validate_json(raw)
        except (ValidationError, ValueError) as e:
            logger.error(f"Error loading store settings from '{self.key}': {e}")
            return StoreInfo()

    async def save(self, info: StoreInfo) -> StoreInfo:
        await self.storage.set_item(self.key, info.model_dump_json())
        logger.info("Store settings updated")
        return info
