from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from assetverse.core.rbac import Role
from assetverse.models.common import CamelModel


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_at: datetime


class UserCreate(CamelModel):
    email: Optional[str] = None
    name: Optional[str] = None
    role: Optional[Role] = None
    password: Optional[str] = Field(default=None, min_length=6, max_length=72)
    company_name: Optional[str] = None
    company_logo: Optional[str] = None
    profile_image: Optional[str] = None
    date_of_birth: Optional[str] = None


class UserRegistered(CamelModel):
    message: str
    user_id: str


class ProfileUpdate(CamelModel):
    display_name: Optional[str] = None
    photo_url: Optional[str] = None


class UserPublic(CamelModel):
    email: str
    name: str
    role: Role
    profile_image: Optional[str] = None
    date_of_birth: Optional[str] = None
    company_name: Optional[str] = None
    company_logo: Optional[str] = None
    package_limit: Optional[int] = None
    current_employees: Optional[int] = None
    subscription: Optional[str] = None
    created_at: datetime
