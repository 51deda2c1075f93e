from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from study_tracker.core.config import Settings, get_settings
from study_tracker.core.security import CurrentUser, get_current_user
from study_tracker.db.session import get_db


DBSessionDep = Annotated[AsyncSession, Depends(get_db)]
CurrentUserDep = Annotated[CurrentUser, Depends(get_current_user)]
SettingsDep = Annotated[Settings, Depends(get_settings)]
