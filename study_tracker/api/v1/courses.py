from fastapi import APIRouter, status

from study_tracker.api.deps import CurrentUserDep, DBSessionDep
from study_tracker.schemas.course import CourseCreate, CourseRead, CourseUpdate
from study_tracker.services import course_service as svc
from study_tracker.utils.validators import parse_uuid

router = APIRouter(prefix="/courses", tags=["courses"])


@router.get("", response_model=list[CourseRead])
async def list_courses(db: DBSessionDep, current_user: CurrentUserDep):
    return await svc.list_courses(db, current_user.id)


@router.post("", response_model=CourseRead, status_code=status.HTTP_201_CREATED)
async def create_course(data: CourseCreate, db: DBSessionDep, current_user: CurrentUserDep):
    return await svc.create_course(db, current_user.id, data)


@router.get("/{course_id}", response_model=CourseRead)
async def get_course(course_id: str, db: DBSessionDep, current_user: CurrentUserDep):
    return await svc.get_course_or_404(db, current_user.id, parse_uuid(course_id, "course ID"))


@router.put("/{course_id}", response_model=CourseRead)
async def update_course(
    course_id: str,
    data: CourseUpdate,
    db: DBSessionDep,
    current_user: CurrentUserDep,
):
    return await svc.update_course(db, current_user.id, parse_uuid(course_id, "course ID"), data)


@router.delete("/{course_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_course(course_id: str, db: DBSessionDep, current_user: CurrentUserDep):
    await svc.delete_course(db, current_user.id, parse_uuid(course_id, "course ID"))
    return None
