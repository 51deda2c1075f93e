"""Password hashing, JWT handling and the bearer-token dependency."""
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from passlib.context import CryptContext
from pydantic import BaseModel

from study_tracker.core.config import Settings, get_settings
from study_tracker.core.errors import UnauthorizedError

logger = logging.getLogger(__name__)

ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_TYPE = "refresh"

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

bearer_scheme = HTTPBearer(auto_error=False)


class CurrentUser(BaseModel):
    id: UUID
    email: str


def hash_password(password: str, rounds: Optional[int] = None) -> str:
    """Hash a password using bcrypt."""
    rounds = rounds or get_settings().bcrypt_rounds
    return pwd_context.hash(password, rounds=rounds)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def _encode(user_id: UUID, email: str, token_type: str, expires_delta: timedelta, settings: Settings) -> str:
    now = datetime.now(timezone.utc)
    to_encode = {
        "sub": str(user_id),
        "email": email,
        "type": token_type,
        "iat": now,
        "exp": now + expires_delta,
    }
    return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def create_access_token(user_id: UUID, email: str, settings: Optional[Settings] = None) -> str:
    """Create a JWT access token."""
    settings = settings or get_settings()
    return _encode(
        user_id,
        email,
        ACCESS_TOKEN_TYPE,
        timedelta(minutes=settings.access_token_expire_minutes),
        settings,
    )


def create_refresh_token(user_id: UUID, email: str, settings: Optional[Settings] = None) -> str:
    """Create a longer-lived JWT refresh token."""
    settings = settings or get_settings()
    return _encode(
        user_id,
        email,
        REFRESH_TOKEN_TYPE,
        timedelta(days=settings.refresh_token_expire_days),
        settings,
    )


def decode_token(token: str, settings: Optional[Settings] = None) -> Dict[str, Any]:
    """Decode and verify a JWT token."""
    settings = settings or get_settings()
    try:
        return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError as exc:
        logger.warning("JWT decode error: %s", exc)
        raise UnauthorizedError("Invalid token")


def principal_from_token(token: str, expected_type: str, settings: Optional[Settings] = None) -> CurrentUser:
    payload = decode_token(token, settings)
    if payload.get("type") != expected_type:
        raise UnauthorizedError("Invalid token type")
    sub = payload.get("sub")
    if not sub:
        raise UnauthorizedError("Invalid token payload")
    try:
        user_id = UUID(sub)
    except ValueError:
        raise UnauthorizedError("Invalid user id in token")
    return CurrentUser(id=user_id, email=payload.get("email") or "")


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> CurrentUser:
    if credentials is None:
        raise UnauthorizedError("Missing authentication token")
    if credentials.scheme.lower() != "bearer":
        raise UnauthorizedError("Invalid authentication scheme")
    return principal_from_token(credentials.credentials, ACCESS_TOKEN_TYPE, settings)
