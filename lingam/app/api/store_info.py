from fastapi import APIRouter, Depends, Security

from lingam.app.api.deps import get_store_info_service
from lingam.app.core.security import STORE_SETTINGS_WRITE, User, get_current_user
from lingam.app.schemas.store_info import StoreInfo
from lingam.app.services.store_info_service import StoreInfoService

router = APIRouter()


@router.get("/store-info", response_model=StoreInfo)
async def get_store_info(service: StoreInfoService = Depends(get_store_info_service)):
    return await service.get()


@router.put("/store-info", response_model=StoreInfo)
async def update_store_info(
    payload: StoreInfo,
    service: StoreInfoService = Depends(get_store_info_service),
    current_user: User = Security(get_current_user, scopes=[STORE_SETTINGS_WRITE]),
):
    return await service.save(payload)
