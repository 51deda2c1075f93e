from datetime import date as date_type, datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from study_tracker.schemas.course import CourseRead

TODO_TYPE_PATTERN = "^(homework|exam|memo)$"


class TodoCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    course_id: Optional[str] = None
    date: date_type
    todo_type: str = Field(..., pattern=TODO_TYPE_PATTERN)


class TodoUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    course_id: Optional[str] = None
    date: Optional[date_type] = None
    todo_type: Optional[str] = Field(None, pattern=TODO_TYPE_PATTERN)


class TodoRead(BaseModel):
    id: UUID
    user_id: UUID
    course_id: Optional[UUID] = None
    course: Optional[CourseRead] = None
    title: str
    date: date_type
    todo_type: str
    completed: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
