from collections.abc import Callable
from typing import Any

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer

from assetverse.core.errors import AuthorizationError
from assetverse.core.rbac import has_permission
from assetverse.core.security import decode_access_token
from assetverse.services.container import ServiceContainer, container


oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/token", auto_error=False)


def get_container() -> ServiceContainer:
    return container


def get_current_user(
    token: str | None = Depends(oauth2_scheme),
    services: ServiceContainer = Depends(get_container),
) -> dict[str, Any]:
    if not token:
        raise AuthorizationError("Unauthorized access", status_code=401)
    try:
        payload = decode_access_token(token)
        email = payload.get("sub")
    except ValueError as exc:
        raise AuthorizationError("Unauthorized access", status_code=401) from exc

    if not email:
        raise AuthorizationError("Unauthorized access", status_code=401)

    return services.auth_service.require_user(email)


def require_permission(permission: str) -> Callable[[dict[str, Any]], dict[str, Any]]:
    def dependency(user: dict[str, Any] = Depends(get_current_user)) -> dict[str, Any]:
        if not has_permission(user["role"], permission):
            raise AuthorizationError("HR access only")
        return user

    return dependency
