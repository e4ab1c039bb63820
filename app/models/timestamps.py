"""Timestamp columns shared by the table models.

Timestamps are stored timezone-aware in UTC.
"""

import datetime

from sqlalchemy import DateTime
from sqlmodel import Field


def utc_now() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


def timestamp_field():
    """A non-null ``timestamptz`` column defaulting to the current time."""
    return Field(default_factory=utc_now, sa_type=DateTime(timezone=True), nullable=False)
