"""
User setting repository.
"""

from typing import Optional

from sqlmodel import Session, select

from app.db.upsert import upsert_rows
from app.models.user_setting import CONFLICT_COLUMNS, UserSetting
from app.models.timestamps import utc_now


class UserSettingRepository:
    """Repository for UserSetting database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get(self, user_id: str, key: str) -> Optional[UserSetting]:
        statement = select(UserSetting).where(UserSetting.user_id == user_id, UserSetting.key == key)
        return self.session.exec(statement).first()

    def put(self, user_id: str, key: str, value: str) -> UserSetting:
        row = {"user_id": user_id, "key": key, "value": value, "updated_at": utc_now()}
        upsert_rows(self.session, UserSetting, [row], CONFLICT_COLUMNS, update_columns=("value", "updated_at"))
        self.session.commit()

        setting = self.get(user_id, key)
        return setting
