import os
from datetime import date, time

# Settings are read at import time by study_tracker.db.session
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-do-not-use-in-production")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from study_tracker.core.config import Settings, get_settings
from study_tracker.core.security import create_access_token, hash_password
from study_tracker.db.session import get_db
from study_tracker.main import app
from study_tracker.models import Base, Course, School, StudyPlan, User

# --- In-memory test database ---
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


def _enable_sqlite_foreign_keys(engine):
    @event.listens_for(engine.sync_engine, "connect")
    def _set_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


@pytest.fixture
def test_settings():
    """Application settings used by every test"""
    return Settings(
        database_url=TEST_DATABASE_URL,
        jwt_secret_key="test-secret-key-do-not-use-in-production",
        jwt_algorithm="HS256",
        access_token_expire_minutes=15,
        refresh_token_expire_days=7,
        bcrypt_rounds=4,
        base_points_per_minute=10,
    )


@pytest.fixture
async def test_engine():
    """Create test database engine with in-memory SQLite"""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )
    _enable_sqlite_foreign_keys(engine)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def test_session(test_engine):
    """Create test database session"""
    async_session = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with async_session() as session:
        yield session


@pytest.fixture
async def client(test_session, test_settings):
    """HTTP client bound to the app with database and settings overridden"""

    async def _get_test_db():
        yield test_session

    app.dependency_overrides[get_db] = _get_test_db
    app.dependency_overrides[get_settings] = lambda: test_settings

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# --- Sample data fixtures ---
@pytest.fixture
async def school(test_session):
    school = School(name="Test University", total_points=0, student_count=1)
    test_session.add(school)
    await test_session.commit()
    return school


@pytest.fixture
async def user(test_session, school):
    user = User(
        email="test@example.com",
        password_hash=hash_password("password123", rounds=4),
        name="Test User",
        school_id=school.id,
        total_points=0,
    )
    test_session.add(user)
    await test_session.commit()
    return user


@pytest.fixture
async def other_user(test_session):
    other = User(
        email="other@example.com",
        password_hash=hash_password("password123", rounds=4),
        name="Other User",
        total_points=0,
    )
    test_session.add(other)
    await test_session.commit()
    return other


@pytest.fixture
async def course(test_session, user):
    course = Course(
        user_id=user.id,
        name="Calculus",
        day=1,
        start_time=time(9, 0),
        end_time=time(11, 0),
        location="Room 101",
        color="#3b82f6",
    )
    test_session.add(course)
    await test_session.commit()
    return course


@pytest.fixture
async def plan(test_session, user, course):
    plan = StudyPlan(
        user_id=user.id,
        course_id=course.id,
        title="Review chapter 3",
        date=date.today(),
        start_time=time(14, 0),
        end_time=time(16, 0),
        location="Library",
        target_minutes=120,
        completed_minutes=0,
        pomodoro_count=0,
        completed=False,
    )
    test_session.add(plan)
    await test_session.commit()
    return plan


@pytest.fixture
def auth_headers(user, test_settings):
    token = create_access_token(user.id, user.email, test_settings)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def other_auth_headers(other_user, test_settings):
    token = create_access_token(other_user.id, other_user.email, test_settings)
    return {"Authorization": f"Bearer {token}"}
