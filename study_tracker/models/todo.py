from uuid import uuid4

from sqlalchemy import Boolean, Column, Date, DateTime, Enum, ForeignKey, String, Uuid
from sqlalchemy.orm import relationship

from study_tracker.db.base import Base, utcnow

TODO_TYPE_ENUM = ("homework", "exam", "memo")


class Todo(Base):
    __tablename__ = "todos"

    id = Column(Uuid, primary_key=True, default=uuid4)
    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    course_id = Column(Uuid, ForeignKey("courses.id", ondelete="SET NULL"), nullable=True, index=True)
    title = Column(String(255), nullable=False)
    date = Column(Date, nullable=False, index=True)
    todo_type = Column(
        Enum(*TODO_TYPE_ENUM, name="todo_type_enum", native_enum=False, length=20),
        nullable=False,
        default="memo",
        index=True,
    )
    completed = Column(Boolean, nullable=False, default=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    user = relationship("User", back_populates="todos")
    course = relationship("Course", lazy="selectin")
