from typing import Optional

from fastapi import APIRouter, Depends

from assetverse.api.deps import get_container, require_permission
from assetverse.core.errors import AuthorizationError
from assetverse.core.rbac import Role
from assetverse.models.common import MessageResponse
from assetverse.models.workflow import AssignmentRecord
from assetverse.services.container import ServiceContainer


router = APIRouter(prefix="/assigned-assets", tags=["Assigned Assets"])


@router.get("", response_model=list[AssignmentRecord])
def list_assigned_assets(
    email: Optional[str] = None,
    current_user: dict = Depends(require_permission("assignments:return")),
    services: ServiceContainer = Depends(get_container),
) -> list[AssignmentRecord]:
    email = email or current_user["email"]
    if current_user["role"] != Role.HR and email != current_user["email"]:
        raise AuthorizationError("You can only view your own assigned assets")
    return services.workflow_service.list_assignments(email)


@router.put("/{assignment_id}", response_model=MessageResponse)
def return_asset(
    assignment_id: str,
    current_user: dict = Depends(require_permission("assignments:return")),
    services: ServiceContainer = Depends(get_container),
) -> MessageResponse:
    services.workflow_service.return_asset(assignment_id, current_user)
    return MessageResponse(message="Asset returned successfully")
