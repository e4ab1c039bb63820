"""
Monthly snapshot endpoint.

Called by the external scheduler on the 1st of every month, or by hand.
Responses use ``{"message", "recordsProcessed", "year", "month"}`` on
success and ``{"error"}`` on failure.
"""

import logging
import secrets
from typing import Optional

from fastapi import APIRouter, Depends, Header, Query, status
from fastapi.responses import JSONResponse
from sqlmodel import Session

from app.core.config import settings
from app.core.exceptions import SnapshotError
from app.db.session import get_db
from app.schemas.snapshot import SnapshotErrorResponse, SnapshotResult
from app.services.snapshot_service import SnapshotService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/monthly", summary="Snapshot current weights into last month's history.",
             response_model=SnapshotResult,
             responses={status.HTTP_401_UNAUTHORIZED: {"model": SnapshotErrorResponse},
                        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": SnapshotErrorResponse}}, )
def run_monthly_snapshot(overwrite: bool = Query(True, description="Replace records already stored for the month"),
                         x_snapshot_token: Optional[str] = Header(None), db: Session = Depends(get_db), ):
    if settings.SNAPSHOT_TOKEN and not secrets.compare_digest(x_snapshot_token or "", settings.SNAPSHOT_TOKEN):
        return JSONResponse(status_code=status.HTTP_401_UNAUTHORIZED, content={"error": "Invalid snapshot token"})

    service = SnapshotService(db)
    try:
        return service.run(overwrite=overwrite)
    except SnapshotError as exc:
        logger.error("Error in monthly snapshot: %s", exc)
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": str(exc)})
