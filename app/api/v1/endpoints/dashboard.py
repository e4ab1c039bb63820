"""
Dashboard endpoint.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from app.api.dependencies import get_current_user_id
from app.db.session import get_db
from app.schemas.dashboard import DashboardStats
from app.services.dashboard_service import DashboardService

router = APIRouter()


@router.get("", summary="Get dashboard counters.", response_model=DashboardStats, )
def get_dashboard(as_of: Optional[datetime.date] = Query(None, description="Reference date (defaults to today)"),
                  db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id), ):
    ref_date = as_of or datetime.date.today()
    return DashboardService(db).get_stats(user_id, ref_date)
