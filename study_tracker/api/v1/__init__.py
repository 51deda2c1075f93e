from fastapi import APIRouter

from study_tracker.api.v1.auth import router as auth_router
from study_tracker.api.v1.courses import router as courses_router
from study_tracker.api.v1.plans import router as plans_router
from study_tracker.api.v1.sessions import router as sessions_router
from study_tracker.api.v1.todos import router as todos_router
from study_tracker.api.v1.users import router as users_router

api_router = APIRouter()
api_router.include_router(auth_router)
api_router.include_router(users_router)
api_router.include_router(courses_router)
api_router.include_router(plans_router)
api_router.include_router(sessions_router)
api_router.include_router(todos_router)
