"""Stats routes - cleaning run observability."""

from typing import Literal, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from layoffs_etl.api.deps import get_db
from layoffs_etl.models.runs import CleaningRun
from layoffs_etl.schemas.api import StatsResponse
from layoffs_etl.services.data_service import DataService

router = APIRouter(prefix="/stats", tags=["stats"])


def _to_response(run: CleaningRun) -> StatsResponse:
    return StatsResponse(
        run_id=str(run.run_id),
        source_name=run.source_name,
        status=run.status,
        rows_in=run.rows_in,
        duplicates_removed=run.duplicates_removed,
        rows_pruned=run.rows_pruned,
        rows_out=run.rows_out,
        error_message=run.error_message,
        started_at=run.started_at,
        ended_at=run.ended_at,
    )


@router.get("", response_model=list[StatsResponse])
def get_run_stats(
    status: Optional[Literal["running", "success", "failure"]] = Query(None, description="Filter by status"),
    limit: int = Query(10, ge=1, le=50, description="Number of runs to return"),
    db: Session = Depends(get_db),
):
    """
    Get recent cleaning run statistics.

    Shows row counts per stage, status, and error messages.
    """
    runs = DataService(db).get_runs(status=status, limit=limit)
    return [_to_response(run) for run in runs]


@router.get("/latest", response_model=StatsResponse)
def get_latest_run(db: Session = Depends(get_db)):
    run = DataService(db).get_latest_run()
    if not run:
        raise HTTPException(status_code=404, detail="No cleaning runs recorded")
    return _to_response(run)
