"""
User settings endpoints.
"""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.api.dependencies import get_current_user_id
from app.db.session import get_db
from app.schemas.user_setting import ThemeResponse, ThemeUpdate
from app.services.settings_service import SettingsService

router = APIRouter()


@router.get("/theme", summary="Get the theme colour.", response_model=ThemeResponse, )
def get_theme(db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id), ):
    return SettingsService(db).get_theme(user_id)


@router.put("/theme", summary="Set the theme colour.", response_model=ThemeResponse, )
def set_theme(data: ThemeUpdate, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id), ):
    return SettingsService(db).set_theme(user_id, data.primary_hex)
