"""
Monthly progress endpoints.
"""

from fastapi import APIRouter, Depends, Path
from sqlmodel import Session

from app.api.dependencies import get_current_user_id
from app.db.session import get_db
from app.schemas.monthly_progress import MonthlyProgressCreate, MonthlyProgressResponse, YearProgressResponse
from app.services.progress_service import ProgressService

router = APIRouter()


@router.get("/{year}", summary="Get the Jan-Dec progress table for a year.", response_model=YearProgressResponse, )
def get_year_table(year: int = Path(..., ge=1900, le=9999), db: Session = Depends(get_db),
                   user_id: str = Depends(get_current_user_id), ):
    service = ProgressService(db)
    return service.get_year_table(user_id, year)


@router.put("/{year}/{month}/{exercise_name}", summary="Record a monthly best manually.",
            response_model=MonthlyProgressResponse, )
def record_manual(data: MonthlyProgressCreate, exercise_name: str, year: int = Path(..., ge=1900, le=9999),
                  month: int = Path(..., ge=1, le=12), db: Session = Depends(get_db),
                  user_id: str = Depends(get_current_user_id), ):
    service = ProgressService(db)
    return service.record_manual(user_id, year, month, exercise_name, data.max_weight)
