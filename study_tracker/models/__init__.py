from study_tracker.db.base import Base
from study_tracker.models.school import School
from study_tracker.models.user import User
from study_tracker.models.course import Course
from study_tracker.models.study_plan import StudyPlan
from study_tracker.models.todo import Todo
from study_tracker.models.focus_session import FocusSession

__all__ = ["Base", "School", "User", "Course", "StudyPlan", "Todo", "FocusSession"]
