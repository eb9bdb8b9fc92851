from __future__ import annotations

from typing import Any

from assetverse.core.config import settings
from assetverse.core.errors import AuthorizationError, ConflictError, NotFoundError, ValidationError
from assetverse.core.rbac import Role
from assetverse.core.security import create_access_token, hash_password, verify_password
from assetverse.models.auth import ProfileUpdate, Token, UserCreate, UserPublic
from assetverse.repositories.data_store import utcnow
from assetverse.repositories.stores import UserStore
from assetverse.services.event_log import EventLogger


class AuthService:
    def __init__(self, users: UserStore, event_logger: EventLogger) -> None:
        self.users = users
        self.event_logger = event_logger

    def register(self, payload: UserCreate) -> dict[str, Any]:
        if not payload.email or not payload.name or not payload.role:
            raise ValidationError("Missing required fields")
        if payload.role == Role.HR and not payload.company_name:
            raise ValidationError("Company name is required for HR accounts")

        now = utcnow()
        record: dict[str, Any] = {
            "email": payload.email,
            "name": payload.name,
            "role": payload.role.value,
            "hashed_password": hash_password(payload.password) if payload.password else None,
            "profile_image": payload.profile_image,
            "date_of_birth": payload.date_of_birth,
            "created_at": now,
            "updated_at": now,
        }
        if payload.role == Role.HR:
            record.update(
                {
                    "company_name": payload.company_name,
                    "company_logo": payload.company_logo,
                    "package_limit": settings.default_package_limit,
                    "current_employees": 0,
                    "subscription": "basic",
                }
            )

        with self.users.store.transaction():
            if self.users.get(payload.email):
                raise ConflictError("User already exists")
            self.users.insert(payload.email, record)

        self.event_logger.log_event(
            event_type="user_registered",
            actor_email=payload.email,
            actor_role=payload.role.value,
            details={"email": payload.email},
        )
        return record

    def authenticate(self, email: str, password: str) -> dict[str, Any] | None:
        user = self.users.get(email)
        if not user or not user.get("hashed_password"):
            return None
        if not verify_password(password, user["hashed_password"]):
            return None
        return user

    def issue_token(self, user: dict[str, Any]) -> Token:
        token, expires_at = create_access_token(user["email"], role=user["role"])
        self.event_logger.log_event(
            event_type="auth_login",
            actor_email=user["email"],
            actor_role=user["role"],
            details={},
        )
        return Token(access_token=token, expires_at=expires_at)

    def require_user(self, email: str) -> dict[str, Any]:
        user = self.users.get(email)
        if not user:
            raise AuthorizationError("User not found", status_code=401)
        return user

    def get_profile(self, email: str) -> dict[str, Any]:
        user = self.users.get(email)
        if not user:
            raise NotFoundError("User not found")
        return user

    def update_profile(self, email: str, payload: ProfileUpdate) -> dict[str, Any]:
        if not payload.display_name:
            raise ValidationError("Name is required")

        updates: dict[str, Any] = {"name": payload.display_name, "updated_at": utcnow()}
        if payload.photo_url:
            updates["profile_image"] = payload.photo_url

        user = self.users.update(email, updates)
        if user is None:
            raise NotFoundError("User not found")
        return user

    def as_public(self, user: dict[str, Any]) -> UserPublic:
        return UserPublic(
            email=user["email"],
            name=user["name"],
            role=user["role"],
            profile_image=user.get("profile_image"),
            date_of_birth=user.get("date_of_birth"),
            company_name=user.get("company_name"),
            company_logo=user.get("company_logo"),
            package_limit=user.get("package_limit"),
            current_employees=user.get("current_employees"),
            subscription=user.get("subscription"),
            created_at=user["created_at"],
        )
