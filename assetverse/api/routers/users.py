from fastapi import APIRouter, Depends

from assetverse.api.deps import get_container, get_current_user
from assetverse.core.errors import AuthorizationError
from assetverse.models.auth import ProfileUpdate, UserCreate, UserPublic, UserRegistered
from assetverse.models.common import MessageResponse
from assetverse.services.container import ServiceContainer


router = APIRouter(prefix="/users", tags=["Users"])


@router.post("", response_model=UserRegistered)
def register_user(
    payload: UserCreate,
    services: ServiceContainer = Depends(get_container),
) -> UserRegistered:
    user = services.auth_service.register(payload)
    return UserRegistered(message="User registered successfully", user_id=user["email"])


@router.get("/{email}", response_model=UserPublic)
def get_user(
    email: str,
    current_user: dict = Depends(get_current_user),
    services: ServiceContainer = Depends(get_container),
) -> UserPublic:
    _ = current_user
    return services.auth_service.as_public(services.auth_service.get_profile(email))


@router.put("/{email}", response_model=MessageResponse)
def update_user(
    email: str,
    payload: ProfileUpdate,
    current_user: dict = Depends(get_current_user),
    services: ServiceContainer = Depends(get_container),
) -> MessageResponse:
    if current_user["email"] != email:
        raise AuthorizationError("You can only update your own profile")
    services.auth_service.update_profile(email, payload)
    return MessageResponse(message="User info updated successfully")
