from __future__ import annotations

import math
from typing import Any

from assetverse.core.errors import AuthorizationError, NotFoundError
from assetverse.models.assets import AssetCreate, AssetPage, AssetRecord, AssetUpdate
from assetverse.repositories.data_store import new_id, utcnow
from assetverse.repositories.stores import AssetStore
from assetverse.services.event_log import EventLogger


class AssetService:
    def __init__(self, assets: AssetStore, event_logger: EventLogger) -> None:
        self.assets = assets
        self.event_logger = event_logger

    def add_asset(self, user: dict[str, Any], payload: AssetCreate) -> AssetRecord:
        asset_id = new_id("ast")
        row = {
            "id": asset_id,
            "name": payload.name,
            "product_type": payload.product_type,
            "product_quantity": payload.product_quantity,
            "available_quantity": payload.product_quantity,
            "hr_email": user["email"],
            "company_name": user.get("company_name"),
            "company_logo": payload.company_logo or user.get("company_logo"),
            "date_added": utcnow(),
        }
        self.assets.insert(asset_id, row)

        self.event_logger.log_event(
            event_type="asset_added",
            actor_email=user["email"],
            actor_role=user["role"],
            details={"asset_id": asset_id, "quantity": payload.product_quantity},
        )
        return AssetRecord(**row)

    def list_assets(self, page: int = 1, limit: int = 10, hr_email: str | None = None) -> AssetPage:
        rows, total = self.assets.page(page, limit, hr_email=hr_email)
        return AssetPage(
            total=total,
            page=page,
            limit=limit,
            total_pages=math.ceil(total / limit),
            assets=[AssetRecord(**r) for r in rows],
        )

    def get_asset(self, asset_id: str) -> AssetRecord:
        row = self.assets.get(asset_id)
        if not row:
            raise NotFoundError("Asset not found")
        return AssetRecord(**row)

    def update_asset(self, user: dict[str, Any], asset_id: str, payload: AssetUpdate) -> AssetRecord:
        self._require_owner(user, asset_id)
        updates = payload.model_dump(exclude_unset=True, exclude_none=True)
        row = self.assets.update(asset_id, updates)
        if row is None:
            raise NotFoundError("Asset not found")
        return AssetRecord(**row)

    def delete_asset(self, user: dict[str, Any], asset_id: str) -> None:
        self._require_owner(user, asset_id)
        if not self.assets.delete(asset_id):
            raise NotFoundError("Asset not found")

        self.event_logger.log_event(
            event_type="asset_deleted",
            actor_email=user["email"],
            actor_role=user["role"],
            details={"asset_id": asset_id},
        )

    def _require_owner(self, user: dict[str, Any], asset_id: str) -> None:
        row = self.assets.get(asset_id)
        if not row:
            raise NotFoundError("Asset not found")
        if row["hr_email"] != user["email"]:
            raise AuthorizationError("You can only manage your own company's assets")
