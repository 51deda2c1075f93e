from datetime import date
from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from study_tracker.core.errors import NotFoundError
from study_tracker.models.study_plan import StudyPlan
from study_tracker.schemas.study_plan import StudyPlanCreate, StudyPlanUpdate
from study_tracker.services.course_service import get_course_or_404
from study_tracker.services.plan_progress import mark_complete_if_reached
from study_tracker.utils.validators import parse_optional_uuid


async def list_plans(
    db: AsyncSession,
    user_id: UUID,
    *,
    on_date: Optional[date] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    completed: Optional[bool] = None,
) -> list[StudyPlan]:
    filters = [StudyPlan.user_id == user_id]
    if on_date:
        filters.append(StudyPlan.date == on_date)
    if start_date:
        filters.append(StudyPlan.date >= start_date)
    if end_date:
        filters.append(StudyPlan.date <= end_date)
    if completed is not None:
        filters.append(StudyPlan.completed.is_(completed))

    result = await db.scalars(
        select(StudyPlan).where(*filters).order_by(StudyPlan.date, StudyPlan.start_time)
    )
    return list(result.all())


async def get_plan_or_404(db: AsyncSession, user_id: UUID, plan_id: UUID) -> StudyPlan:
    plan = await db.scalar(
        select(StudyPlan)
        .where(StudyPlan.id == plan_id, StudyPlan.user_id == user_id)
        .execution_options(populate_existing=True)
    )
    if not plan:
        raise NotFoundError("Study plan not found")
    return plan


async def _resolve_course_id(db: AsyncSession, user_id: UUID, raw: Optional[str]) -> Optional[UUID]:
    course_id = parse_optional_uuid(raw, "course ID")
    if course_id is not None:
        await get_course_or_404(db, user_id, course_id)
    return course_id


async def create_plan(db: AsyncSession, user_id: UUID, data: StudyPlanCreate) -> StudyPlan:
    plan = StudyPlan(
        user_id=user_id,
        course_id=await _resolve_course_id(db, user_id, data.course_id),
        title=data.title,
        date=data.date,
        start_time=data.start_time,
        end_time=data.end_time,
        reminder_time=data.reminder_time,
        location=data.location,
        target_minutes=data.target_minutes,
        completed_minutes=0,
        pomodoro_count=0,
        completed=False,
    )
    db.add(plan)
    await db.commit()
    return await get_plan_or_404(db, user_id, plan.id)


async def update_plan(db: AsyncSession, user_id: UUID, plan_id: UUID, data: StudyPlanUpdate) -> StudyPlan:
    plan = await get_plan_or_404(db, user_id, plan_id)
    payload = data.model_dump(exclude_unset=True)

    if "course_id" in payload:
        raw = payload.pop("course_id")
        if raw is not None:
            plan.course_id = await _resolve_course_id(db, user_id, raw)

    for field, value in payload.items():
        if value is None and field != "reminder_time":
            continue
        setattr(plan, field, value)

    if "target_minutes" in payload:
        mark_complete_if_reached(plan)

    await db.commit()
    return await get_plan_or_404(db, user_id, plan_id)


async def set_plan_completed(db: AsyncSession, user_id: UUID, plan_id: UUID, completed: bool) -> StudyPlan:
    """Manual toggle; the only way a completed plan is reopened."""
    plan = await get_plan_or_404(db, user_id, plan_id)
    plan.completed = completed
    await db.commit()
    return await get_plan_or_404(db, user_id, plan_id)


async def delete_plan(db: AsyncSession, user_id: UUID, plan_id: UUID) -> None:
    plan = await get_plan_or_404(db, user_id, plan_id)
    await db.delete(plan)
    await db.commit()
