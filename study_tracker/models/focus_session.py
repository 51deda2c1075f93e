from uuid import uuid4

from sqlalchemy import CheckConstraint, Column, Date, DateTime, ForeignKey, Integer, String, Uuid
from sqlalchemy.orm import relationship

from study_tracker.db.base import Base, utcnow


class FocusSession(Base):
    """A recorded block of focused study time. Rows are never updated."""

    __tablename__ = "focus_sessions"
    __table_args__ = (
        CheckConstraint("minutes >= 1", name="ck_focus_sessions_minutes_positive"),
    )

    id = Column(Uuid, primary_key=True, default=uuid4)
    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    plan_id = Column(Uuid, ForeignKey("study_plans.id", ondelete="SET NULL"), nullable=True, index=True)
    course_id = Column(Uuid, ForeignKey("courses.id", ondelete="SET NULL"), nullable=True)
    date = Column(Date, nullable=False, index=True)
    minutes = Column(Integer, nullable=False)
    # Fixed at creation, never recomputed when the points rate changes
    points_earned = Column(Integer, nullable=False, default=0)
    location = Column(String, nullable=False, default="")
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)

    user = relationship("User", back_populates="focus_sessions")
    plan = relationship("StudyPlan", lazy="selectin")
    course = relationship("Course", lazy="selectin")
