"""Focus-session statistics: period totals, breakdowns and the day streak."""
import calendar
from datetime import date, timedelta
from typing import Iterable, Optional
from uuid import UUID

from sqlalchemy import distinct, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from study_tracker.models.course import Course
from study_tracker.models.focus_session import FocusSession
from study_tracker.schemas.stats import CourseStat, DailyStat, StatsReport

PERIODS = ("week", "month", "year", "lifetime")
DEFAULT_PERIOD = "month"


def subtract_months(day: date, months: int) -> date:
    """Step back whole calendar months, clamping to the target month's last day."""
    month_index = day.year * 12 + (day.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def resolve_period_start(period: Optional[str], today: date) -> Optional[date]:
    """
    Lower bound of the stats window, or None for lifetime.

    Unknown or missing periods fall back to the month window.
    """
    if period == "week":
        return today - timedelta(days=7)
    if period == "year":
        return subtract_months(today, 12)
    if period == "lifetime":
        return None
    return subtract_months(today, 1)


def calculate_streak(dates_desc: Iterable[date], today: date) -> int:
    """
    Count consecutive study days walking back from the most recent date.

    The first date counts if it is today or any earlier day; every later
    date must be exactly one day before the previous one.
    """
    # Each date is compared with the previous entry, not with today - i, so a
    # run that ended yesterday or earlier still counts in full.
    streak = 0
    previous: Optional[date] = None
    for day in dates_desc:
        if previous is None:
            if day > today:
                break
        elif day != previous - timedelta(days=1):
            break
        streak += 1
        previous = day
    return streak


def course_percentage(minutes: int, total_minutes: int) -> float:
    if total_minutes <= 0:
        return 0.0
    return minutes / total_minutes * 100


async def get_current_streak(db: AsyncSession, user_id: UUID, today: date) -> int:
    result = await db.scalars(
        select(FocusSession.date)
        .where(FocusSession.user_id == user_id)
        .distinct()
        .order_by(FocusSession.date.desc())
    )
    return calculate_streak(result.all(), today)


async def compute_stats(
    db: AsyncSession,
    user_id: UUID,
    period: Optional[str] = DEFAULT_PERIOD,
    today: Optional[date] = None,
) -> StatsReport:
    today = today or date.today()
    start = resolve_period_start(period, today)

    filters = [FocusSession.user_id == user_id]
    if start is not None:
        filters.append(FocusSession.date >= start)

    totals = await db.execute(
        select(
            func.count(FocusSession.id),
            func.coalesce(func.sum(FocusSession.minutes), 0),
            func.coalesce(func.sum(FocusSession.points_earned), 0),
            func.count(distinct(FocusSession.date)),
        ).where(*filters)
    )
    total_sessions, total_minutes, total_points, active_days = totals.one()

    daily = await db.execute(
        select(
            FocusSession.date,
            func.count(FocusSession.id),
            func.coalesce(func.sum(FocusSession.minutes), 0),
            func.coalesce(func.sum(FocusSession.points_earned), 0),
        )
        .where(*filters)
        .group_by(FocusSession.date)
        .order_by(FocusSession.date)
    )
    daily_breakdown = [
        DailyStat(date=day, sessions=sessions, minutes=minutes, points=points)
        for day, sessions, minutes, points in daily
    ]

    course_minutes = func.coalesce(func.sum(FocusSession.minutes), 0).label("minutes")
    courses = await db.execute(
        select(Course.id, Course.name, Course.color, course_minutes)
        .select_from(FocusSession)
        .join(Course, FocusSession.course_id == Course.id)
        .where(*filters)
        .group_by(Course.id, Course.name, Course.color)
        .order_by(course_minutes.desc(), Course.name)
    )
    course_breakdown = [
        CourseStat(
            course_id=course_id,
            course_name=name,
            color=color,
            minutes=minutes,
            percentage=course_percentage(minutes, total_minutes),
        )
        for course_id, name, color, minutes in courses
    ]

    return StatsReport(
        period=period or DEFAULT_PERIOD,
        total_sessions=total_sessions,
        total_minutes=total_minutes,
        total_points=total_points,
        active_days=active_days,
        current_streak=await get_current_streak(db, user_id, today),
        daily_breakdown=daily_breakdown,
        course_breakdown=course_breakdown,
    )
