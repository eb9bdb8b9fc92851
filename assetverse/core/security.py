from datetime import datetime, timedelta, timezone
from typing import Any

from jose import JWTError, jwt
from passlib.context import CryptContext

from assetverse.core.config import settings


pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def create_access_token(email: str, role: str, expires_delta: timedelta | None = None) -> tuple[str, datetime]:
    issued_at = datetime.now(timezone.utc)
    expire = issued_at + (expires_delta or timedelta(minutes=settings.access_token_expire_minutes))
    claims: dict[str, Any] = {"sub": email, "role": role, "iat": issued_at, "exp": expire}
    return jwt.encode(claims, settings.secret_key, algorithm=settings.algorithm), expire


def decode_access_token(token: str) -> dict[str, Any]:
    """Return the verified claims of a bearer token; ValueError if forged or expired."""
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError as exc:
        raise ValueError("Invalid token") from exc
