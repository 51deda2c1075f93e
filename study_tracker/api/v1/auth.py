from fastapi import APIRouter, status

from study_tracker.api.deps import CurrentUserDep, DBSessionDep, SettingsDep
from study_tracker.schemas.auth import (
    AuthResponse,
    LoginRequest,
    MessageResponse,
    RefreshRequest,
    RegisterRequest,
    TokenPair,
)
from study_tracker.schemas.user import UserRead
from study_tracker.services import auth_service as svc

router = APIRouter(prefix="/auth", tags=["auth"])


def _auth_response(user, settings) -> AuthResponse:
    tokens = svc.issue_tokens(user.id, user.email, settings)
    return AuthResponse(user=UserRead.model_validate(user), **tokens.model_dump())


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(data: RegisterRequest, db: DBSessionDep, settings: SettingsDep):
    user = await svc.register_user(db, data, settings)
    return _auth_response(user, settings)


@router.post("/login", response_model=AuthResponse)
async def login(data: LoginRequest, db: DBSessionDep, settings: SettingsDep):
    user = await svc.authenticate(db, data)
    return _auth_response(user, settings)


@router.post("/refresh", response_model=TokenPair)
async def refresh(data: RefreshRequest, settings: SettingsDep):
    return svc.refresh_tokens(data.refresh_token, settings)


@router.post("/logout", response_model=MessageResponse)
async def logout(current_user: CurrentUserDep):
    # Tokens are stateless; the client drops them.
    return MessageResponse(message="Logged out successfully")
