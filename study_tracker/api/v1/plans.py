from datetime import date
from typing import Optional

from fastapi import APIRouter, status

from study_tracker.api.deps import CurrentUserDep, DBSessionDep
from study_tracker.schemas.study_plan import (
    CompletionToggle,
    StudyPlanCreate,
    StudyPlanRead,
    StudyPlanUpdate,
)
from study_tracker.services import plan_service as svc
from study_tracker.utils.validators import parse_uuid

router = APIRouter(prefix="/plans", tags=["plans"])


@router.get("", response_model=list[StudyPlanRead])
async def list_plans(
    db: DBSessionDep,
    current_user: CurrentUserDep,
    date: Optional[date] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    completed: Optional[bool] = None,
):
    return await svc.list_plans(
        db,
        current_user.id,
        on_date=date,
        start_date=start_date,
        end_date=end_date,
        completed=completed,
    )


@router.post("", response_model=StudyPlanRead, status_code=status.HTTP_201_CREATED)
async def create_plan(data: StudyPlanCreate, db: DBSessionDep, current_user: CurrentUserDep):
    return await svc.create_plan(db, current_user.id, data)


@router.get("/{plan_id}", response_model=StudyPlanRead)
async def get_plan(plan_id: str, db: DBSessionDep, current_user: CurrentUserDep):
    return await svc.get_plan_or_404(db, current_user.id, parse_uuid(plan_id, "plan ID"))


@router.put("/{plan_id}", response_model=StudyPlanRead)
async def update_plan(
    plan_id: str,
    data: StudyPlanUpdate,
    db: DBSessionDep,
    current_user: CurrentUserDep,
):
    return await svc.update_plan(db, current_user.id, parse_uuid(plan_id, "plan ID"), data)


@router.patch("/{plan_id}/complete", response_model=StudyPlanRead)
async def toggle_plan_complete(
    plan_id: str,
    data: CompletionToggle,
    db: DBSessionDep,
    current_user: CurrentUserDep,
):
    return await svc.set_plan_completed(db, current_user.id, parse_uuid(plan_id, "plan ID"), data.completed)


@router.delete("/{plan_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_plan(plan_id: str, db: DBSessionDep, current_user: CurrentUserDep):
    await svc.delete_plan(db, current_user.id, parse_uuid(plan_id, "plan ID"))
    return None
