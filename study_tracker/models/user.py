from uuid import uuid4

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Uuid
from sqlalchemy.orm import relationship

from study_tracker.db.base import Base, utcnow


class User(Base):
    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid4)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String, nullable=False)
    name = Column(String(255), nullable=False)
    school_id = Column(Uuid, ForeignKey("schools.id", ondelete="SET NULL"), nullable=True, index=True)
    # Only ever changed through relative increments, see services.session_service
    total_points = Column(Integer, nullable=False, default=0, index=True)
    avatar_url = Column(String, nullable=False, default="")
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    school = relationship("School", back_populates="users", lazy="selectin")
    courses = relationship("Course", back_populates="user", cascade="all, delete-orphan", passive_deletes=True)
    study_plans = relationship("StudyPlan", back_populates="user", cascade="all, delete-orphan", passive_deletes=True)
    todos = relationship("Todo", back_populates="user", cascade="all, delete-orphan", passive_deletes=True)
    focus_sessions = relationship(
        "FocusSession", back_populates="user", cascade="all, delete-orphan", passive_deletes=True
    )
