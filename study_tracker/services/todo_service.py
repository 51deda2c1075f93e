from datetime import date
from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from study_tracker.core.errors import NotFoundError
from study_tracker.models.todo import Todo
from study_tracker.schemas.todo import TodoCreate, TodoUpdate
from study_tracker.services.course_service import get_course_or_404
from study_tracker.utils.validators import parse_optional_uuid


async def list_todos(
    db: AsyncSession,
    user_id: UUID,
    *,
    on_date: Optional[date] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    completed: Optional[bool] = None,
    todo_type: Optional[str] = None,
) -> list[Todo]:
    filters = [Todo.user_id == user_id]
    if on_date:
        filters.append(Todo.date == on_date)
    if start_date:
        filters.append(Todo.date >= start_date)
    if end_date:
        filters.append(Todo.date <= end_date)
    if completed is not None:
        filters.append(Todo.completed.is_(completed))
    if todo_type:
        filters.append(Todo.todo_type == todo_type)

    result = await db.scalars(select(Todo).where(*filters).order_by(Todo.date, Todo.created_at))
    return list(result.all())


async def get_todo_or_404(db: AsyncSession, user_id: UUID, todo_id: UUID) -> Todo:
    todo = await db.scalar(
        select(Todo)
        .where(Todo.id == todo_id, Todo.user_id == user_id)
        .execution_options(populate_existing=True)
    )
    if not todo:
        raise NotFoundError("Todo not found")
    return todo


async def create_todo(db: AsyncSession, user_id: UUID, data: TodoCreate) -> Todo:
    course_id = parse_optional_uuid(data.course_id, "course ID")
    if course_id is not None:
        await get_course_or_404(db, user_id, course_id)

    todo = Todo(
        user_id=user_id,
        course_id=course_id,
        title=data.title,
        date=data.date,
        todo_type=data.todo_type,
        completed=False,
    )
    db.add(todo)
    await db.commit()
    return await get_todo_or_404(db, user_id, todo.id)


async def update_todo(db: AsyncSession, user_id: UUID, todo_id: UUID, data: TodoUpdate) -> Todo:
    todo = await get_todo_or_404(db, user_id, todo_id)
    payload = data.model_dump(exclude_unset=True)

    if "course_id" in payload:
        raw = payload.pop("course_id")
        if raw is not None:
            course_id = parse_optional_uuid(raw, "course ID")
            if course_id is not None:
                await get_course_or_404(db, user_id, course_id)
            todo.course_id = course_id

    for field, value in payload.items():
        if value is None:
            continue
        setattr(todo, field, value)
    await db.commit()
    return await get_todo_or_404(db, user_id, todo_id)


async def set_todo_completed(db: AsyncSession, user_id: UUID, todo_id: UUID, completed: bool) -> Todo:
    todo = await get_todo_or_404(db, user_id, todo_id)
    todo.completed = completed
    await db.commit()
    return await get_todo_or_404(db, user_id, todo_id)


async def delete_todo(db: AsyncSession, user_id: UUID, todo_id: UUID) -> None:
    todo = await get_todo_or_404(db, user_id, todo_id)
    await db.delete(todo)
    await db.commit()
