from fastapi import APIRouter, Depends
from fastapi.security import OAuth2PasswordRequestForm

from assetverse.api.deps import get_container, get_current_user
from assetverse.core.errors import AuthorizationError
from assetverse.models.auth import Token, UserPublic
from assetverse.services.container import ServiceContainer


router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/token", response_model=Token)
def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    services: ServiceContainer = Depends(get_container),
) -> Token:
    user = services.auth_service.authenticate(form_data.username, form_data.password)
    if not user:
        raise AuthorizationError("Invalid credentials", status_code=401)
    return services.auth_service.issue_token(user)


@router.get("/me", response_model=UserPublic)
def read_me(
    current_user: dict = Depends(get_current_user),
    services: ServiceContainer = Depends(get_container),
) -> UserPublic:
    return services.auth_service.as_public(current_user)
