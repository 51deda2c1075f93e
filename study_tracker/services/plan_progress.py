"""Study plan progress: minutes/pomodoro accounting and completion."""
import logging
from uuid import UUID

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from study_tracker.core.errors import NotFoundError
from study_tracker.db.base import utcnow
from study_tracker.models.study_plan import StudyPlan

logger = logging.getLogger(__name__)


def is_target_reached(target_minutes: int, completed_minutes: int) -> bool:
    # A zero target never auto-completes
    return target_minutes > 0 and completed_minutes >= target_minutes


def mark_complete_if_reached(plan: StudyPlan) -> bool:
    """Set ``plan.completed`` when the target is met. Never clears the flag."""
    if not plan.completed and is_target_reached(plan.target_minutes or 0, plan.completed_minutes or 0):
        plan.completed = True
        return True
    return False


def apply_session_minutes(plan: StudyPlan, minutes: int) -> StudyPlan:
    """
    In-memory progress transition for one completed focus session.

    This is the reference rule; :func:`record_plan_progress` applies the same
    transition in SQL.
    """
    plan.completed_minutes = (plan.completed_minutes or 0) + minutes
    plan.pomodoro_count = (plan.pomodoro_count or 0) + 1
    mark_complete_if_reached(plan)
    return plan


async def record_plan_progress(db: AsyncSession, user_id: UUID, plan_id: UUID, minutes: int) -> None:
    """
    Storage-side version of :func:`apply_session_minutes`.

    Counters are advanced with relative increments so concurrent sessions on
    the same plan never lose minutes; completion is then re-checked with a
    conditional update that is safe to run any number of times.
    """
    result = await db.execute(
        update(StudyPlan)
        .where(StudyPlan.id == plan_id, StudyPlan.user_id == user_id)
        .values(
            completed_minutes=StudyPlan.completed_minutes + minutes,
            pomodoro_count=StudyPlan.pomodoro_count + 1,
            updated_at=utcnow(),
        )
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        raise NotFoundError("Study plan not found")

    result = await db.execute(
        update(StudyPlan)
        .where(
            StudyPlan.id == plan_id,
            StudyPlan.completed.is_(False),
            StudyPlan.target_minutes > 0,
            StudyPlan.completed_minutes >= StudyPlan.target_minutes,
        )
        .values(completed=True)
        .execution_options(synchronize_session=False)
    )
    if result.rowcount:
        logger.info("Study plan %s reached its target and was marked complete", plan_id)
