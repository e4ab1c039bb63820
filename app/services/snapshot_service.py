"""
Monthly snapshot service.

Copies every user's current weights into ``monthly_progress`` under the
month that just ended.  The run is a plain batch: read everything, build
the records, upsert them in one statement.  Nothing is kept between runs,
so it can be triggered by any scheduler or by hand.
"""

import datetime
import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from app.core.config import settings
from app.core.exceptions import SnapshotError
from app.db.repositories.exercise_weight import ExerciseWeightRepository
from app.db.repositories.monthly_progress import MonthlyProgressRepository
from app.schemas.snapshot import SnapshotResult
from app.tracking.snapshot import build_snapshot_records, snapshot_period

logger = logging.getLogger(__name__)


class SnapshotService:
    """Service running the monthly snapshot job."""

    def __init__(self, session: Session, timezone: Optional[str] = None):
        self.session = session
        self.weights = ExerciseWeightRepository(session)
        self.progress = MonthlyProgressRepository(session)
        self.timezone = timezone or settings.SNAPSHOT_TIMEZONE

    def run(self, overwrite: bool = True, now: Optional[datetime.datetime] = None) -> SnapshotResult:
        """Snapshot all current weights into the previous month.

        Args:
            overwrite: Replace records already stored for the period.  When
                False, existing records are kept and only missing ones added.
            now: Reference time (defaults to the current time)

        Raises:
            SnapshotError: Reading the weights or writing the records failed.
                Records are written in one statement, so a failed write
                leaves the period as it was.
        """
        year, month = snapshot_period(now, self.timezone)
        logger.info("Running monthly snapshot for %d-%02d (overwrite=%s)", year, month, overwrite)

        try:
            weights = self.weights.get_all()
        except SQLAlchemyError as exc:
            logger.exception("Error fetching exercise weights")
            raise SnapshotError(f"Failed to fetch exercise weights: {exc}") from exc

        if not weights:
            logger.info("No exercise weights found to snapshot")
            return SnapshotResult(message="No exercise weights found", records_processed=0, year=year,
                                  month=month)

        records = build_snapshot_records(weights, year, month)
        logger.info("Prepared %d records from %d weight rows", len(records), len(weights))

        try:
            processed = self.progress.upsert_many(records, overwrite=overwrite)
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.exception("Error saving monthly progress")
            raise SnapshotError(f"Failed to save monthly progress: {exc}") from exc

        logger.info("Saved %d monthly progress records for %d-%02d", processed, year, month)
        return SnapshotResult(
            message="Monthly snapshot completed successfully",
            records_processed=processed,
            year=year,
            month=month,
        )
