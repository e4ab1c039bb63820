"""
Dashboard API schemas.
"""

import datetime

from pydantic import BaseModel, Field


class DashboardStats(BaseModel):
    as_of: datetime.date
    workouts_this_month: int
    current_streak: int
    longest_streak: int
    total_sessions: int = Field(..., description="All days ever marked as worked out")
    personal_records: int = Field(..., description="Exercises currently above every monthly record")
