from datetime import date
from typing import Optional

from fastapi import APIRouter, status

from study_tracker.api.deps import CurrentUserDep, DBSessionDep, SettingsDep
from study_tracker.schemas.focus_session import FocusSessionCreate, FocusSessionPage, FocusSessionRead
from study_tracker.schemas.stats import StatsReport
from study_tracker.services import session_service as svc
from study_tracker.services.stats_service import DEFAULT_PERIOD, compute_stats
from study_tracker.utils.validators import normalize_pagination

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.get("", response_model=FocusSessionPage)
async def list_sessions(
    db: DBSessionDep,
    current_user: CurrentUserDep,
    limit: Optional[int] = None,
    offset: Optional[int] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
):
    limit, offset = normalize_pagination(limit, offset)
    total, sessions = await svc.list_sessions(
        db,
        current_user.id,
        limit=limit,
        offset=offset,
        start_date=start_date,
        end_date=end_date,
    )
    return FocusSessionPage(
        sessions=[FocusSessionRead.model_validate(s) for s in sessions],
        total=total,
        limit=limit,
        offset=offset,
    )


@router.post("", response_model=FocusSessionRead, status_code=status.HTTP_201_CREATED)
async def record_session(
    data: FocusSessionCreate,
    db: DBSessionDep,
    current_user: CurrentUserDep,
    settings: SettingsDep,
):
    return await svc.record_session(
        db,
        current_user.id,
        session_date=data.date,
        minutes=data.minutes,
        points_per_minute=settings.base_points_per_minute,
        plan_id=data.plan_id,
        course_id=data.course_id,
        location=data.location,
    )


@router.get("/stats", response_model=StatsReport)
async def get_session_stats(
    db: DBSessionDep,
    current_user: CurrentUserDep,
    period: str = DEFAULT_PERIOD,
):
    return await compute_stats(db, current_user.id, period)
