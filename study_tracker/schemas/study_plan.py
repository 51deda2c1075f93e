from datetime import date as date_type, datetime, time
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from study_tracker.schemas.course import CourseRead


class StudyPlanCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    # Raw string so that "" can mean "no course"
    course_id: Optional[str] = None
    date: date_type
    start_time: time
    end_time: time
    reminder_time: Optional[time] = None
    location: str = ""
    target_minutes: int = Field(0, ge=0)


class StudyPlanUpdate(BaseModel):
    """All fields optional for PATCH/PUT. ``course_id=""`` detaches the course."""
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    course_id: Optional[str] = None
    date: Optional[date_type] = None
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    reminder_time: Optional[time] = None
    location: Optional[str] = None
    target_minutes: Optional[int] = Field(None, ge=0)


class CompletionToggle(BaseModel):
    completed: bool


class StudyPlanRead(BaseModel):
    id: UUID
    user_id: UUID
    course_id: Optional[UUID] = None
    course: Optional[CourseRead] = None
    title: str
    date: date_type
    start_time: time
    end_time: time
    reminder_time: Optional[time] = None
    location: str
    target_minutes: int
    completed_minutes: int
    pomodoro_count: int
    completed: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
