import pytest

from lingam.app.schemas.store_info import StoreInfo
from lingam.app.services import StoreInfoService


@pytest.mark.asyncio
async def test_defaults_when_never_saved(storage):
    service = StoreInfoService(storage, "settings")
    info = await service.get()
    assert info.name == "LINGAM Aabharanam"
    assert info.opening_hours == "Monday to Sunday (appointments only)"


@pytest.mark.asyncio
async def test_save_then_get(storage):
    service = StoreInfoService(storage, "settings")
    await service.save(StoreInfo(phone="+1 (312) 555-0100"))

    info = await service.get()
    assert info.phone == "+1 (312) 555-0100"
    assert info.name == "LINGAM Aabharanam"


@pytest.mark.asyncio
async def test_corrupt_settings_fall_back_to_defaults(storage):
    await storage.set_item("settings", "{broken")
    info = await StoreInfoService(storage, "settings").get()
    assert info == StoreInfo()
