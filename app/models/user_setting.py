"""
User setting model.

Key/value UI preferences per user (currently only the theme colour).
"""

import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel

from app.models.timestamps import timestamp_field


class UserSetting(SQLModel, table=True):
    """A single preference value.  One row per user per key."""

    __tablename__ = "user_settings"
    __table_args__ = (UniqueConstraint("user_id", "key", name="uq_user_setting_user_key"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(max_length=64, nullable=False, index=True)
    key: str = Field(max_length=50, nullable=False)
    value: str = Field(max_length=255, nullable=False)

    updated_at: datetime.datetime = timestamp_field()


CONFLICT_COLUMNS = ("user_id", "key")
