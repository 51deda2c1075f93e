from datetime import date
from typing import Optional

from fastapi import APIRouter, Query, status

from study_tracker.api.deps import CurrentUserDep, DBSessionDep
from study_tracker.schemas.study_plan import CompletionToggle
from study_tracker.schemas.todo import TODO_TYPE_PATTERN, TodoCreate, TodoRead, TodoUpdate
from study_tracker.services import todo_service as svc
from study_tracker.utils.validators import parse_uuid

router = APIRouter(prefix="/todos", tags=["todos"])


@router.get("", response_model=list[TodoRead])
async def list_todos(
    db: DBSessionDep,
    current_user: CurrentUserDep,
    date: Optional[date] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    completed: Optional[bool] = None,
    todo_type: Optional[str] = Query(None, alias="type", pattern=TODO_TYPE_PATTERN),
):
    return await svc.list_todos(
        db,
        current_user.id,
        on_date=date,
        start_date=start_date,
        end_date=end_date,
        completed=completed,
        todo_type=todo_type,
    )


@router.post("", response_model=TodoRead, status_code=status.HTTP_201_CREATED)
async def create_todo(data: TodoCreate, db: DBSessionDep, current_user: CurrentUserDep):
    return await svc.create_todo(db, current_user.id, data)


@router.get("/{todo_id}", response_model=TodoRead)
async def get_todo(todo_id: str, db: DBSessionDep, current_user: CurrentUserDep):
    return await svc.get_todo_or_404(db, current_user.id, parse_uuid(todo_id, "todo ID"))


@router.put("/{todo_id}", response_model=TodoRead)
async def update_todo(
    todo_id: str,
    data: TodoUpdate,
    db: DBSessionDep,
    current_user: CurrentUserDep,
):
    return await svc.update_todo(db, current_user.id, parse_uuid(todo_id, "todo ID"), data)


@router.patch("/{todo_id}/complete", response_model=TodoRead)
async def toggle_todo_complete(
    todo_id: str,
    data: CompletionToggle,
    db: DBSessionDep,
    current_user: CurrentUserDep,
):
    return await svc.set_todo_completed(db, current_user.id, parse_uuid(todo_id, "todo ID"), data.completed)


@router.delete("/{todo_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_todo(todo_id: str, db: DBSessionDep, current_user: CurrentUserDep):
    await svc.delete_todo(db, current_user.id, parse_uuid(todo_id, "todo ID"))
    return None
