"""Data routes - Exposes cleaned and raw layoffs with request metadata."""

import time
import uuid
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from layoffs_etl.api.deps import get_db
from layoffs_etl.schemas.api import DataResponse, LayoffOut, RawDataResponse, RawRecordOut
from layoffs_etl.services.data_service import DataService

router = APIRouter(prefix="/data", tags=["data"])


@router.get("", response_model=DataResponse)
def get_layoffs(
    company: Optional[str] = Query(None, description="Filter by company (case-insensitive partial match)"),
    country: Optional[str] = Query(None, description="Filter by country (exact)"),
    industry: Optional[str] = Query(None, description="Filter by industry (exact)"),
    year: Optional[int] = Query(None, ge=1900, le=2100, description="Filter by event year"),
    limit: int = Query(50, ge=1, le=500, description="Number of records to return (max 500)"),
    offset: int = Query(0, ge=0, description="Number of records to skip"),
    db: Session = Depends(get_db),
):
    """
    Get cleaned layoff events, newest first.

    Includes request metadata (request_id, latency_ms).
    """
    start = time.perf_counter()
    request_id = str(uuid.uuid4())

    service = DataService(db)
    results = service.get_layoffs(
        company=company,
        country=country,
        industry=industry,
        year=year,
        limit=limit,
        offset=offset,
    )
    total = service.get_layoffs_count(company=company, country=country, industry=industry, year=year)

    latency_ms = int((time.perf_counter() - start) * 1000)

    return DataResponse(
        request_id=request_id,
        api_latency_ms=latency_ms,
        total_count=total,
        data=[LayoffOut.model_validate(r) for r in results],
    )


@router.get("/count")
def get_layoffs_count(db: Session = Depends(get_db)):
    """Get total count of cleaned records."""
    return {"count": DataService(db).get_layoffs_count()}


@router.get("/raw", response_model=RawDataResponse)
def get_raw_data(
    limit: int = Query(50, ge=1, le=100),
    offset: int = Query(0, ge=0),
    db: Session = Depends(get_db),
):
    """
    Get raw rows as loaded from the CSV.

    Raw data is stored as-is for auditability and replay.
    """
    request_id = str(uuid.uuid4())
    service = DataService(db)

    results = service.get_raw_data(limit=limit, offset=offset)

    return RawDataResponse(
        request_id=request_id,
        total_count=service.get_raw_count(),
        data=[
            RawRecordOut(
                id=str(r.id),
                filename=r.filename,
                payload=r.payload,
                ingested_at=r.ingested_at,
            )
            for r in results
        ],
    )
