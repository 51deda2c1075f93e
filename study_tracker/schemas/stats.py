from datetime import date as date_type
from uuid import UUID

from pydantic import BaseModel


class DailyStat(BaseModel):
    date: date_type
    sessions: int
    minutes: int
    points: int


class CourseStat(BaseModel):
    course_id: UUID
    course_name: str
    color: str
    minutes: int
    percentage: float


class StatsReport(BaseModel):
    period: str
    total_sessions: int
    total_minutes: int
    total_points: int
    active_days: int
    current_streak: int
    daily_breakdown: list[DailyStat]
    course_breakdown: list[CourseStat]
