from uuid import uuid4

from sqlalchemy import Column, DateTime, Integer, String, Uuid
from sqlalchemy.orm import relationship

from study_tracker.db.base import Base, utcnow


class School(Base):
    __tablename__ = "schools"

    id = Column(Uuid, primary_key=True, default=uuid4)
    name = Column(String(255), nullable=False, unique=True)
    total_points = Column(Integer, nullable=False, default=0, index=True)
    student_count = Column(Integer, nullable=False, default=0)
    logo_url = Column(String, nullable=False, default="")
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    users = relationship("User", back_populates="school", passive_deletes=True)
