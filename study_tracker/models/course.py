from uuid import uuid4

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, String, Time, Uuid
from sqlalchemy.orm import relationship

from study_tracker.db.base import Base, utcnow

DEFAULT_COURSE_COLOR = "bg-blue-400"


class Course(Base):
    __tablename__ = "courses"
    __table_args__ = (
        CheckConstraint("day >= 0 AND day <= 6", name="ck_courses_day_of_week"),
    )

    id = Column(Uuid, primary_key=True, default=uuid4)
    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    day = Column(Integer, nullable=False, index=True)  # 0=Sunday, 6=Saturday
    start_time = Column(Time, nullable=False)
    end_time = Column(Time, nullable=False)
    location = Column(String, nullable=False, default="")
    color = Column(String(64), nullable=False, default=DEFAULT_COURSE_COLOR)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    user = relationship("User", back_populates="courses")
