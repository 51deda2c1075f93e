"""Request/response schemas for the auth routes."""
from pydantic import BaseModel, EmailStr, Field

from study_tracker.schemas.user import UserRead


class RegisterRequest(BaseModel):
    """Schema for email registration."""
    email: EmailStr
    password: str = Field(..., min_length=6, description="Password must be at least 6 characters")
    name: str = Field(..., min_length=1, max_length=255)
    school_name: str = Field(..., min_length=1, max_length=255)


class LoginRequest(BaseModel):
    """Schema for email login."""
    email: EmailStr
    password: str


class RefreshRequest(BaseModel):
    refresh_token: str


class TokenPair(BaseModel):
    token: str
    refresh_token: str


class AuthResponse(TokenPair):
    user: UserRead


class MessageResponse(BaseModel):
    message: str
