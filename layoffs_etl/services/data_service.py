"""Data Service - Query logic for data endpoints with proper separation of concerns."""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import extract, func, select
from sqlalchemy.orm import Session

from layoffs_etl.core.logging import get_logger
from layoffs_etl.models.layoffs import Layoff
from layoffs_etl.models.raw import RawLayoff
from layoffs_etl.models.runs import CleaningRun

log = get_logger("data_service")


class DataService:
    """Handles all data query operations - reads from DB only, no writes."""

    def __init__(self, db: Session):
        self.db = db

    # -------------------------------------------------------------------------
    # Cleaned Data Queries
    # -------------------------------------------------------------------------
    def _filtered(
        self,
        stmt,
        company: Optional[str] = None,
        country: Optional[str] = None,
        industry: Optional[str] = None,
        year: Optional[int] = None,
    ):
        if company:
            stmt = stmt.where(Layoff.company.ilike(f"%{company}%"))
        if country:
            stmt = stmt.where(Layoff.country == country)
        if industry:
            stmt = stmt.where(Layoff.industry == industry)
        if year is not None:
            stmt = stmt.where(extract("year", Layoff.event_date) == year)
        return stmt

    def get_layoffs(
        self,
        company: Optional[str] = None,
        country: Optional[str] = None,
        industry: Optional[str] = None,
        year: Optional[int] = None,
        limit: int = 100,
        offset: int = 0,
    ) -> List[Layoff]:
        """Cleaned layoffs, newest event first, with optional filtering."""
        stmt = self._filtered(select(Layoff), company, country, industry, year)
        stmt = stmt.order_by(Layoff.event_date.desc(), Layoff.id.asc())
        stmt = stmt.limit(limit).offset(offset)
        return list(self.db.execute(stmt).scalars().all())

    def get_layoffs_count(
        self,
        company: Optional[str] = None,
        country: Optional[str] = None,
        industry: Optional[str] = None,
        year: Optional[int] = None,
    ) -> int:
        stmt = self._filtered(select(func.count()).select_from(Layoff), company, country, industry, year)
        return self.db.execute(stmt).scalar() or 0

    def get_all_layoffs(self) -> List[Layoff]:
        return list(self.db.execute(select(Layoff).order_by(Layoff.id)).scalars().all())

    # -------------------------------------------------------------------------
    # Raw Data Queries
    # -------------------------------------------------------------------------
    def get_raw_data(self, limit: int = 100, offset: int = 0) -> List[RawLayoff]:
        stmt = select(RawLayoff).order_by(RawLayoff.ingested_at.desc()).limit(limit).offset(offset)
        return list(self.db.execute(stmt).scalars().all())

    def get_raw_count(self) -> int:
        return self.db.execute(select(func.count()).select_from(RawLayoff)).scalar() or 0

    # -------------------------------------------------------------------------
    # Cleaning Runs
    # -------------------------------------------------------------------------
    def get_runs(self, status: Optional[str] = None, limit: int = 10) -> List[CleaningRun]:
        """Recent cleaning runs, newest first."""
        stmt = select(CleaningRun)
        if status:
            stmt = stmt.where(CleaningRun.status == status)
        stmt = stmt.order_by(CleaningRun.started_at.desc()).limit(limit)
        return list(self.db.execute(stmt).scalars().all())

    def get_latest_run(self) -> Optional[CleaningRun]:
        stmt = select(CleaningRun).order_by(CleaningRun.started_at.desc()).limit(1)
        return self.db.execute(stmt).scalar_one_or_none()
