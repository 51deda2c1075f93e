from datetime import datetime, time
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field


class CourseBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    day: int = Field(..., ge=0, le=6, description="0=Sunday, 6=Saturday")
    start_time: time
    end_time: time
    location: str = ""


class CourseCreate(CourseBase):
    color: Optional[str] = Field(None, max_length=64)


class CourseUpdate(BaseModel):
    """All fields optional for partial updates."""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    day: Optional[int] = Field(None, ge=0, le=6)
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    location: Optional[str] = None
    color: Optional[str] = Field(None, max_length=64)


class CourseRead(CourseBase):
    id: UUID
    user_id: UUID
    color: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
