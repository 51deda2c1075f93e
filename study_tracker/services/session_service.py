"""Focus-session recording and listing."""
import logging
from datetime import date
from typing import Optional
from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from study_tracker.core.errors import AppError, NotFoundError, StorageError, ValidationError
from study_tracker.models.focus_session import FocusSession
from study_tracker.models.school import School
from study_tracker.models.study_plan import StudyPlan
from study_tracker.models.user import User
from study_tracker.services.plan_progress import record_plan_progress
from study_tracker.services.points import compute_points
from study_tracker.utils.validators import parse_date, parse_optional_uuid

logger = logging.getLogger(__name__)


async def credit_points(db: AsyncSession, user_id: UUID, points: int) -> Optional[UUID]:
    """
    Add ``points`` to the user and, if affiliated, to the user's school.

    Both counters are bumped with ``total_points = total_points + :points`` so
    concurrent recordings for the same user or school are all reflected.
    Returns the credited school id, if any.
    """
    result = await db.execute(
        update(User)
        .where(User.id == user_id)
        .values(total_points=User.total_points + points)
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        raise NotFoundError("User not found")

    school_id = await db.scalar(select(User.school_id).where(User.id == user_id))
    if school_id is not None:
        await db.execute(
            update(School)
            .where(School.id == school_id)
            .values(total_points=School.total_points + points)
            .execution_options(synchronize_session=False)
        )
    return school_id


async def get_owned_plan_id(db: AsyncSession, user_id: UUID, plan_id: UUID) -> UUID:
    """Fail with 404 unless the plan exists and belongs to the user."""
    found = await db.scalar(
        select(StudyPlan.id).where(StudyPlan.id == plan_id, StudyPlan.user_id == user_id)
    )
    if found is None:
        raise NotFoundError("Study plan not found")
    return found


async def record_session(
    db: AsyncSession,
    user_id: UUID,
    *,
    session_date: str,
    minutes: int,
    points_per_minute: int,
    plan_id: Optional[str] = None,
    course_id: Optional[str] = None,
    location: Optional[str] = None,
) -> FocusSession:
    """
    Record a completed focus session as one unit of work.

    The session row, the user/school point credit and the plan progress are
    committed together or not at all. ``points_per_minute`` is the rate in
    effect for this call; the computed points are stored on the session.
    """
    parsed_date = parse_date(session_date)
    if not isinstance(minutes, int) or isinstance(minutes, bool) or minutes < 1:
        raise ValidationError("Minutes must be a positive integer")
    plan_uuid = parse_optional_uuid(plan_id, "plan ID")
    course_uuid = parse_optional_uuid(course_id, "course ID")
    logger.info("Focus session validated for user %s: date=%s minutes=%d", user_id, parsed_date, minutes)

    points_earned = compute_points(minutes, points_per_minute)
    focus = FocusSession(
        user_id=user_id,
        plan_id=plan_uuid,
        course_id=course_uuid,
        date=parsed_date,
        minutes=minutes,
        points_earned=points_earned,
        location=location or "",
    )

    try:
        if plan_uuid is not None:
            await get_owned_plan_id(db, user_id, plan_uuid)
        db.add(focus)
        await db.flush()
        school_id = await credit_points(db, user_id, points_earned)
        if plan_uuid is not None:
            await record_plan_progress(db, user_id, plan_uuid, minutes)
        await db.commit()
    except AppError as exc:
        await db.rollback()
        logger.warning("Focus session aborted for user %s: %s", user_id, exc.message)
        raise
    except SQLAlchemyError as exc:
        await db.rollback()
        logger.error("Focus session aborted for user %s on storage error: %s", user_id, exc)
        raise StorageError("Failed to record focus session") from exc

    logger.info(
        "Focus session %s committed: user=%s school=%s plan=%s minutes=%d points=%d",
        focus.id,
        user_id,
        school_id,
        plan_uuid,
        minutes,
        points_earned,
    )
    return await get_session_with_relations(db, focus.id)


async def get_session_with_relations(db: AsyncSession, session_id: UUID) -> FocusSession:
    stmt = (
        select(FocusSession)
        .where(FocusSession.id == session_id)
        .execution_options(populate_existing=True)
    )
    focus = await db.scalar(stmt)
    if focus is None:
        raise NotFoundError("Focus session not found")
    return focus


async def list_sessions(
    db: AsyncSession,
    user_id: UUID,
    *,
    limit: int,
    offset: int,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
) -> tuple[int, list[FocusSession]]:
    filters = [FocusSession.user_id == user_id]
    if start_date:
        filters.append(FocusSession.date >= start_date)
    if end_date:
        filters.append(FocusSession.date <= end_date)

    total = await db.scalar(select(func.count()).select_from(FocusSession).where(*filters))
    result = await db.scalars(
        select(FocusSession)
        .where(*filters)
        .order_by(FocusSession.created_at.desc())
        .limit(limit)
        .offset(offset)
        .execution_options(populate_existing=True)
    )
    return total or 0, list(result.all())
