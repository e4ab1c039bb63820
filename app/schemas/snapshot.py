"""
Monthly snapshot job schemas.

Field names are camelCase on the wire to match the scheduler's contract.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SnapshotResult(BaseModel):
    """Outcome of a snapshot run."""

    model_config = ConfigDict(populate_by_name=True)

    message: str
    records_processed: int = Field(0, alias="recordsProcessed")
    year: Optional[int] = None
    month: Optional[int] = None


class SnapshotErrorResponse(BaseModel):
    error: str
