"""Report routes - aggregate views over the cleaned table."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from layoffs_etl.api.deps import get_db
from layoffs_etl.schemas.api import (
    CompanyTotal,
    CountryYearTotal,
    DateAuditRow,
    IndustryTotal,
    YearTotal,
)
from layoffs_etl.services.report_service import ReportService

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("/top-companies", response_model=list[CompanyTotal])
def top_companies(
    limit: int = Query(10, ge=1, le=100, description="Number of companies"),
    db: Session = Depends(get_db),
):
    """Companies with the highest total layoffs."""
    return ReportService(db).top_companies(limit)


@router.get("/industries", response_model=list[IndustryTotal])
def industries(db: Session = Depends(get_db)):
    """Total layoffs per industry."""
    return ReportService(db).by_industry()


@router.get("/years", response_model=list[YearTotal])
def years(db: Session = Depends(get_db)):
    """Total layoffs per year, newest first. Undated events are excluded."""
    return ReportService(db).by_year()


@router.get("/countries", response_model=list[CountryYearTotal])
def countries(db: Session = Depends(get_db)):
    """Total layoffs per country and year."""
    return ReportService(db).by_country_year()


@router.get("/date-audit", response_model=list[DateAuditRow])
def date_audit(
    limit: int = Query(5, ge=1, le=100),
    db: Session = Depends(get_db),
):
    return ReportService(db).date_audit(limit)
