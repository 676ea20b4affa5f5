"""Report Service - aggregate reports over the cleaned layoffs table."""

from __future__ import annotations

from typing import Any, Dict, List

from sqlalchemy import desc, extract, func, select
from sqlalchemy.orm import Session

from layoffs_etl.core.logging import get_logger
from layoffs_etl.models.layoffs import Layoff

log = get_logger("report_service")


class ReportService:
    """Group-by reports. Totals are SUM(total_laid_off); all-null groups sum to None."""

    def __init__(self, db: Session):
        self.db = db

    def top_companies(self, limit: int = 10) -> List[Dict[str, Any]]:
        total = func.sum(Layoff.total_laid_off).label("total_reductions")
        stmt = (
            select(Layoff.company, total)
            .group_by(Layoff.company)
            .order_by(desc("total_reductions"), Layoff.company)
            .limit(limit)
        )
        return [dict(row._mapping) for row in self.db.execute(stmt)]

    def by_industry(self) -> List[Dict[str, Any]]:
        total = func.sum(Layoff.total_laid_off).label("total_reductions")
        stmt = (
            select(Layoff.industry, total)
            .group_by(Layoff.industry)
            .order_by(desc("total_reductions"), Layoff.industry)
        )
        return [dict(row._mapping) for row in self.db.execute(stmt)]

    def by_year(self) -> List[Dict[str, Any]]:
        year = extract("year", Layoff.event_date).label("layoff_year")
        total = func.sum(Layoff.total_laid_off).label("total_reductions")
        stmt = (
            select(year, total)
            .where(Layoff.event_date.is_not(None))
            .group_by(year)
            .order_by(desc("layoff_year"))
        )
        return [
            {"layoff_year": int(row.layoff_year), "total_reductions": row.total_reductions}
            for row in self.db.execute(stmt)
        ]

    def by_country_year(self) -> List[Dict[str, Any]]:
        year = extract("year", Layoff.event_date).label("layoff_year")
        total = func.sum(Layoff.total_laid_off).label("total_reductions")
        stmt = (
            select(Layoff.country, year, total)
            .where(Layoff.event_date.is_not(None))
            .group_by(Layoff.country, year)
            .order_by(desc("layoff_year"), desc("total_reductions"), Layoff.country)
        )
        return [
            {
                "country": row.country,
                "layoff_year": int(row.layoff_year),
                "total_reductions": row.total_reductions,
            }
            for row in self.db.execute(stmt)
        ]

    def date_audit(self, limit: int = 5) -> List[Dict[str, Any]]:
        """Spot-check that event_date behaves as a date: year and month name per row."""
        stmt = (
            select(Layoff.event_date)
            .where(Layoff.event_date.is_not(None))
            .order_by(Layoff.id)
            .limit(limit)
        )
        return [
            {"event_date": d, "year": d.year, "month": d.strftime("%B")}
            for d in self.db.execute(stmt).scalars()
        ]

    def all_reports(self, top_n: int = 10) -> Dict[str, List[Dict[str, Any]]]:
        return {
            "top_companies": self.top_companies(top_n),
            "industries": self.by_industry(),
            "years": self.by_year(),
            "countries": self.by_country_year(),
            "date_audit": self.date_audit(),
        }
