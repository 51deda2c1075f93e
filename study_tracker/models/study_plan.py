from uuid import uuid4

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Time,
    Uuid,
)
from sqlalchemy.orm import relationship

from study_tracker.db.base import Base, utcnow


class StudyPlan(Base):
    __tablename__ = "study_plans"
    __table_args__ = (
        CheckConstraint("target_minutes >= 0", name="ck_study_plans_target_non_negative"),
    )

    id = Column(Uuid, primary_key=True, default=uuid4)
    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    course_id = Column(Uuid, ForeignKey("courses.id", ondelete="SET NULL"), nullable=True, index=True)
    title = Column(String(255), nullable=False)
    date = Column(Date, nullable=False, index=True)
    start_time = Column(Time, nullable=False)
    end_time = Column(Time, nullable=False)
    reminder_time = Column(Time, nullable=True)
    location = Column(String, nullable=False, default="")
    target_minutes = Column(Integer, nullable=False, default=0)
    # Progress counters are only advanced by recorded focus sessions
    completed_minutes = Column(Integer, nullable=False, default=0)
    pomodoro_count = Column(Integer, nullable=False, default=0)
    completed = Column(Boolean, nullable=False, default=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    user = relationship("User", back_populates="study_plans")
    course = relationship("Course", lazy="selectin")
