"""Registration, login and token refresh."""
import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from study_tracker.core.config import Settings
from study_tracker.core.errors import ConflictError, NotFoundError, UnauthorizedError
from study_tracker.core.security import (
    REFRESH_TOKEN_TYPE,
    create_access_token,
    create_refresh_token,
    hash_password,
    principal_from_token,
    verify_password,
)
from study_tracker.models.school import School
from study_tracker.models.user import User
from study_tracker.schemas.auth import LoginRequest, RegisterRequest, TokenPair

logger = logging.getLogger(__name__)


async def get_user_by_email(db: AsyncSession, email: str) -> Optional[User]:
    """Get user by email address."""
    return await db.scalar(select(User).where(User.email == email))


async def get_user_or_404(db: AsyncSession, user_id: UUID) -> User:
    user = await db.scalar(
        select(User).where(User.id == user_id).execution_options(populate_existing=True)
    )
    if not user:
        raise NotFoundError("User not found")
    return user


async def get_or_create_school(db: AsyncSession, name: str) -> School:
    school = await db.scalar(select(School).where(School.name == name))
    if school is None:
        school = School(name=name, total_points=0, student_count=0)
        db.add(school)
        await db.flush()
    return school


def issue_tokens(user_id: UUID, email: str, settings: Settings) -> TokenPair:
    return TokenPair(
        token=create_access_token(user_id, email, settings),
        refresh_token=create_refresh_token(user_id, email, settings),
    )


async def register_user(db: AsyncSession, data: RegisterRequest, settings: Settings) -> User:
    if await get_user_by_email(db, data.email):
        raise ConflictError("Email already registered")

    try:
        school = await get_or_create_school(db, data.school_name)
        await db.execute(
            update(School)
            .where(School.id == school.id)
            .values(student_count=School.student_count + 1)
            .execution_options(synchronize_session=False)
        )
        user = User(
            email=data.email,
            password_hash=hash_password(data.password, settings.bcrypt_rounds),
            name=data.name,
            school_id=school.id,
            total_points=0,
        )
        db.add(user)
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise ConflictError("Email already registered")

    logger.info("User registration successful for: %s", user.email)
    return await get_user_or_404(db, user.id)


async def authenticate(db: AsyncSession, data: LoginRequest) -> User:
    user = await get_user_by_email(db, data.email)
    if not user or not verify_password(data.password, user.password_hash):
        raise UnauthorizedError("Invalid email or password")
    logger.info("Login successful for user: %s", user.email)
    return user


def refresh_tokens(refresh_token: str, settings: Settings) -> TokenPair:
    principal = principal_from_token(refresh_token, REFRESH_TOKEN_TYPE, settings)
    return issue_tokens(principal.id, principal.email, settings)
