from typing import Optional

from fastapi import APIRouter, Depends

from assetverse.api.deps import get_container, require_permission
from assetverse.core.errors import AuthorizationError
from assetverse.models.packages import PackageRecord, PackageUpgradeRequest, PaymentRecord
from assetverse.services.container import ServiceContainer


router = APIRouter(tags=["Packages"])


@router.get("/packages", response_model=list[PackageRecord])
def list_packages(services: ServiceContainer = Depends(get_container)) -> list[PackageRecord]:
    return services.package_service.list_packages()


@router.patch("/upgrade-package", response_model=PaymentRecord)
def upgrade_package(
    payload: PackageUpgradeRequest,
    current_user: dict = Depends(require_permission("packages:upgrade")),
    services: ServiceContainer = Depends(get_container),
) -> PaymentRecord:
    return services.package_service.upgrade_package(current_user, payload)


@router.get("/payments", response_model=list[PaymentRecord])
def list_payments(
    email: Optional[str] = None,
    current_user: dict = Depends(require_permission("payments:read")),
    services: ServiceContainer = Depends(get_container),
) -> list[PaymentRecord]:
    if email and email != current_user["email"]:
        raise AuthorizationError("You can only view your own payments")
    return services.package_service.list_payments(current_user["email"])
