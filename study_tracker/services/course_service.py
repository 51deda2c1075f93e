from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from study_tracker.core.errors import NotFoundError
from study_tracker.models.course import DEFAULT_COURSE_COLOR, Course
from study_tracker.schemas.course import CourseCreate, CourseUpdate


async def list_courses(db: AsyncSession, user_id: UUID) -> list[Course]:
    stmt = (
        select(Course)
        .where(Course.user_id == user_id)
        .order_by(Course.day, Course.start_time)
    )
    result = await db.scalars(stmt)
    return list(result.all())


async def get_course_or_404(db: AsyncSession, user_id: UUID, course_id: UUID) -> Course:
    course = await db.scalar(
        select(Course)
        .where(Course.id == course_id, Course.user_id == user_id)
        .execution_options(populate_existing=True)
    )
    if not course:
        raise NotFoundError("Course not found")
    return course


async def create_course(db: AsyncSession, user_id: UUID, data: CourseCreate) -> Course:
    course = Course(
        user_id=user_id,
        name=data.name,
        day=data.day,
        start_time=data.start_time,
        end_time=data.end_time,
        location=data.location,
        color=data.color or DEFAULT_COURSE_COLOR,
    )
    db.add(course)
    await db.commit()
    return await get_course_or_404(db, user_id, course.id)


async def update_course(db: AsyncSession, user_id: UUID, course_id: UUID, data: CourseUpdate) -> Course:
    course = await get_course_or_404(db, user_id, course_id)
    for field, value in data.model_dump(exclude_unset=True).items():
        if value is None:
            continue
        setattr(course, field, value)
    await db.commit()
    return await get_course_or_404(db, user_id, course_id)


async def delete_course(db: AsyncSession, user_id: UUID, course_id: UUID) -> None:
    # Plans, todos and sessions keep their rows; the FK sets course_id to NULL
    course = await get_course_or_404(db, user_id, course_id)
    await db.delete(course)
    await db.commit()
