from typing import Optional

from fastapi import APIRouter, Depends, Query

from assetverse.api.deps import get_container, require_permission
from assetverse.core.errors import AuthorizationError
from assetverse.core.rbac import Role
from assetverse.models.workflow import RequestCreate, RequestCreated, RequestDecision, RequestRecord
from assetverse.services.container import ServiceContainer


router = APIRouter(prefix="/requests", tags=["Asset Requests"])


@router.get("", response_model=list[RequestRecord])
def list_requests(
    hr_email: Optional[str] = Query(default=None, alias="hrEmail"),
    user_email: Optional[str] = Query(default=None, alias="userEmail"),
    current_user: dict = Depends(require_permission("requests:read")),
    services: ServiceContainer = Depends(get_container),
) -> list[RequestRecord]:
    if current_user["role"] == Role.HR:
        hr_email = current_user["email"]
    else:
        user_email = current_user["email"]
    return services.workflow_service.list_requests(hr_email=hr_email, requester_email=user_email)


@router.post("", response_model=RequestCreated)
def submit_request(
    payload: RequestCreate,
    current_user: dict = Depends(require_permission("requests:create")),
    services: ServiceContainer = Depends(get_container),
) -> RequestCreated:
    if payload.requester_email and payload.requester_email != current_user["email"]:
        raise AuthorizationError("You can only request assets for yourself")
    record = services.workflow_service.submit(payload, current_user)
    return RequestCreated(inserted_id=record.id)


@router.put("/{request_id}")
def process_request(
    request_id: str,
    payload: RequestDecision,
    current_user: dict = Depends(require_permission("requests:process")),
    services: ServiceContainer = Depends(get_container),
) -> dict[str, bool]:
    services.workflow_service.transition(
        request_id,
        payload.request_status,
        processed_by=current_user["email"],
    )
    return {"success": True}
