from typing import Optional

from fastapi import APIRouter, Depends, Query

from assetverse.api.deps import get_container, require_permission
from assetverse.models.assets import AssetCreate, AssetPage, AssetRecord, AssetUpdate
from assetverse.models.common import MessageResponse
from assetverse.services.container import ServiceContainer


router = APIRouter(prefix="/assets", tags=["Assets"])


@router.get("", response_model=AssetPage)
def list_assets(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    hr_email: Optional[str] = Query(default=None, alias="hrEmail"),
    current_user: dict = Depends(require_permission("assets:read")),
    services: ServiceContainer = Depends(get_container),
) -> AssetPage:
    _ = current_user
    return services.asset_service.list_assets(page=page, limit=limit, hr_email=hr_email)


@router.get("/{asset_id}", response_model=AssetRecord)
def get_asset(
    asset_id: str,
    current_user: dict = Depends(require_permission("assets:read")),
    services: ServiceContainer = Depends(get_container),
) -> AssetRecord:
    _ = current_user
    return services.asset_service.get_asset(asset_id)


@router.post("", response_model=AssetRecord)
def add_asset(
    payload: AssetCreate,
    current_user: dict = Depends(require_permission("assets:manage")),
    services: ServiceContainer = Depends(get_container),
) -> AssetRecord:
    return services.asset_service.add_asset(current_user, payload)


@router.put("/{asset_id}", response_model=AssetRecord)
def update_asset(
    asset_id: str,
    payload: AssetUpdate,
    current_user: dict = Depends(require_permission("assets:manage")),
    services: ServiceContainer = Depends(get_container),
) -> AssetRecord:
    return services.asset_service.update_asset(current_user, asset_id, payload)


@router.delete("/{asset_id}", response_model=MessageResponse)
def delete_asset(
    asset_id: str,
    current_user: dict = Depends(require_permission("assets:manage")),
    services: ServiceContainer = Depends(get_container),
) -> MessageResponse:
    services.asset_service.delete_asset(current_user, asset_id)
    return MessageResponse(message="Asset deleted successfully")
