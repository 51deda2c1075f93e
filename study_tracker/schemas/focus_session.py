from datetime import date as date_type, datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from study_tracker.schemas.course import CourseRead
from study_tracker.schemas.study_plan import StudyPlanRead


class FocusSessionCreate(BaseModel):
    """Identifiers, date and minutes are checked by the recording service itself."""
    plan_id: Optional[str] = None
    course_id: Optional[str] = None
    date: str  # YYYY-MM-DD
    minutes: int
    location: Optional[str] = ""


class FocusSessionRead(BaseModel):
    id: UUID
    user_id: UUID
    plan_id: Optional[UUID] = None
    plan: Optional[StudyPlanRead] = None
    course_id: Optional[UUID] = None
    course: Optional[CourseRead] = None
    date: date_type
    minutes: int
    points_earned: int
    location: str
    created_at: datetime

    class Config:
        from_attributes = True


class FocusSessionPage(BaseModel):
    sessions: list[FocusSessionRead]
    total: int
    limit: int
    offset: int
