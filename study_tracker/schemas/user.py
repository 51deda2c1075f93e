from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from study_tracker.schemas.school import SchoolRead


class UserRead(BaseModel):
    id: UUID
    email: str
    name: str
    school_id: Optional[UUID] = None
    school: Optional[SchoolRead] = None
    total_points: int
    avatar_url: str = ""
    created_at: datetime

    class Config:
        from_attributes = True
