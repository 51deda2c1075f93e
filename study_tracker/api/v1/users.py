from fastapi import APIRouter

from study_tracker.api.deps import CurrentUserDep, DBSessionDep
from study_tracker.schemas.user import UserRead
from study_tracker.services.auth_service import get_user_or_404

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=UserRead)
async def get_me(db: DBSessionDep, current_user: CurrentUserDep):
    return await get_user_or_404(db, current_user.id)
