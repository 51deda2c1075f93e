import asyncio
from datetime import date, time

import pytest
from sqlalchemy import event, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from study_tracker.models import Base, School, StudyPlan, User
from study_tracker.services.session_service import record_session


@pytest.fixture
async def file_engine(tmp_path):
    """File-backed SQLite so that each session gets its own connection"""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'concurrency.db'}",
        connect_args={"timeout": 30},
        poolclass=NullPool,
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _set_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(file_engine):
    return async_sessionmaker(file_engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest.fixture
async def seeded(session_factory):
    async with session_factory() as db:
        school = School(name="Concurrent College", total_points=0, student_count=1)
        db.add(school)
        await db.flush()
        user = User(
            email="busy@example.com",
            password_hash="x",
            name="Busy Student",
            school_id=school.id,
            total_points=0,
        )
        db.add(user)
        await db.flush()
        plan = StudyPlan(
            user_id=user.id,
            title="Exam prep",
            date=date(2024, 5, 6),
            start_time=time(9, 0),
            end_time=time(12, 0),
            target_minutes=120,
        )
        db.add(plan)
        await db.commit()
        return school.id, user.id, plan.id


@pytest.mark.integration
async def test_concurrent_recordings_do_not_lose_updates(session_factory, seeded):
    school_id, user_id, plan_id = seeded

    async def record(minutes):
        async with session_factory() as db:
            return await record_session(
                db,
                user_id,
                session_date="2024-05-06",
                minutes=minutes,
                points_per_minute=10,
                plan_id=str(plan_id),
            )

    first, second = await asyncio.gather(record(25), record(25))

    assert first.points_earned == second.points_earned == 250
    async with session_factory() as db:
        assert await db.scalar(select(User.total_points).where(User.id == user_id)) == 500
        assert await db.scalar(select(School.total_points).where(School.id == school_id)) == 500
        row = (
            await db.execute(
                select(StudyPlan.completed_minutes, StudyPlan.pomodoro_count, StudyPlan.completed)
                .where(StudyPlan.id == plan_id)
            )
        ).one()
        assert tuple(row) == (50, 2, False)
