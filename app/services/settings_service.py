"""
User settings service.

A missing setting is not an error: the configured default is returned.
"""

from fastapi import HTTPException, status
from sqlmodel import Session

from app.core.config import settings
from app.db.repositories.user_setting import UserSettingRepository
from app.schemas.user_setting import ThemeResponse
from app.tracking.theme import hex_to_hsl_string, normalize_hex

PRIMARY_COLOR_KEY = "primary_color"


class SettingsService:
    """Service for per-user UI preferences."""

    def __init__(self, session: Session):
        self.repository = UserSettingRepository(session)

    def get_theme(self, user_id: str) -> ThemeResponse:
        setting = self.repository.get(user_id, PRIMARY_COLOR_KEY)
        if setting is None:
            return self._theme(settings.DEFAULT_PRIMARY_HEX, is_default=True)
        return self._theme(setting.value, is_default=False)

    def set_theme(self, user_id: str, primary_hex: str) -> ThemeResponse:
        normalized = normalize_hex(primary_hex)
        if normalized is None:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=f"Invalid colour '{primary_hex}', expected #rrggbb",
            )
        setting = self.repository.put(user_id, PRIMARY_COLOR_KEY, normalized)
        return self._theme(setting.value, is_default=False)

    @staticmethod
    def _theme(primary_hex: str, is_default: bool) -> ThemeResponse:
        normalized = normalize_hex(primary_hex) or primary_hex
        return ThemeResponse(
            primary_hex=normalized,
            primary_hsl=hex_to_hsl_string(normalized) or "",
            is_default=is_default,
        )
