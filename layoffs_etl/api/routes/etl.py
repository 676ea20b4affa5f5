"""ETL routes - Trigger cleaning runs."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from layoffs_etl.api.deps import get_db
from layoffs_etl.core.config import settings
from layoffs_etl.core.logging import get_logger
from layoffs_etl.schemas.api import ETLTriggerResponse
from layoffs_etl.services.etl_service import ETLService

router = APIRouter(prefix="/etl", tags=["etl"])
log = get_logger("etl_routes")


@router.post("/run", response_model=ETLTriggerResponse)
def trigger_cleaning(db: Session = Depends(get_db)):
    """
    Run the cleaning pipeline over the configured CSV.

    1. Load raw rows
    2. Store raw payloads
    3. Deduplicate and normalize
    4. Replace the cleaned table
    """
    source = settings.LAYOFFS_CSV_PATH
    log.info(f"Cleaning run triggered for {source}")

    try:
        result = ETLService(db, csv_path=source).run()
        return ETLTriggerResponse(
            success=result["success"],
            source=result["source"],
            rows_in=result["rows_in"],
            rows_out=result["rows_out"],
        )
    except Exception as exc:
        log.error(f"Cleaning run failed for {source}: {exc}")
        return ETLTriggerResponse(success=False, source=source, error=str(exc))
