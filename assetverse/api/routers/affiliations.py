from typing import Optional

from fastapi import APIRouter, Depends, Query

from assetverse.api.deps import get_container, require_permission
from assetverse.core.errors import AuthorizationError
from assetverse.models.auth import UserPublic
from assetverse.models.common import MessageResponse
from assetverse.models.workflow import AffiliationRecord, AffiliationRemoval
from assetverse.services.container import ServiceContainer


router = APIRouter(tags=["Affiliations"])


@router.get("/employee-affiliations", response_model=list[AffiliationRecord])
def list_employee_affiliations(
    email: Optional[str] = None,
    current_user: dict = Depends(require_permission("affiliations:read")),
    services: ServiceContainer = Depends(get_container),
) -> list[AffiliationRecord]:
    return services.affiliation_service.list_affiliations(email or current_user["email"])


@router.get("/company-employees", response_model=list[UserPublic])
def list_company_employees(
    company: str = Query(min_length=1),
    current_user: dict = Depends(require_permission("affiliations:read")),
    services: ServiceContainer = Depends(get_container),
) -> list[UserPublic]:
    _ = current_user
    return services.affiliation_service.list_company_employees(company)


@router.delete("/employee-affiliation", response_model=MessageResponse)
def remove_employee_affiliation(
    payload: AffiliationRemoval,
    current_user: dict = Depends(require_permission("affiliations:remove")),
    services: ServiceContainer = Depends(get_container),
) -> MessageResponse:
    if payload.hr_email and payload.hr_email != current_user["email"]:
        raise AuthorizationError("You can only remove employees from your own company")
    services.workflow_service.remove_affiliation(
        payload.employee_email,
        payload.company_name,
        payload.hr_email,
        actor=current_user,
    )
    return MessageResponse(message="Employee removed from company successfully")
