from uuid import UUID

from pydantic import BaseModel


class SchoolRead(BaseModel):
    id: UUID
    name: str
    total_points: int
    student_count: int
    logo_url: str = ""

    class Config:
        from_attributes = True
