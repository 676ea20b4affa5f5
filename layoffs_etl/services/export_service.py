"""Write the cleaned layoffs table back out as CSV."""

from __future__ import annotations

import csv
from pathlib import Path
from typing import List

from sqlalchemy.orm import Session

from layoffs_etl.cleaning.dates import format_date
from layoffs_etl.core.logging import get_logger
from layoffs_etl.services.data_service import DataService

log = get_logger("export_service")

EXPORT_DATE_FORMAT = "%Y-%m-%d"

EXPORT_COLUMNS: List[str] = [
    "company",
    "location",
    "total_laid_off",
    "date",
    "percentage_laid_off",
    "industry",
    "stage",
    "funds_raised",
    "country",
]


def export_layoffs_csv(db: Session, path: str | Path) -> int:
    """Write every cleaned row to ``path`` with ISO dates. Returns rows written."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    rows = DataService(db).get_all_layoffs()
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=EXPORT_COLUMNS)
        writer.writeheader()
        for row in rows:
            writer.writerow(
                {
                    "company": row.company,
                    "location": row.location,
                    "total_laid_off": row.total_laid_off,
                    "date": format_date(row.event_date, EXPORT_DATE_FORMAT) or "",
                    "percentage_laid_off": row.percentage_laid_off,
                    "industry": row.industry,
                    "stage": row.stage,
                    "funds_raised": row.funds_raised,
                    "country": row.country,
                }
            )

    log.info(f"Exported {len(rows)} cleaned rows to {path}")
    return len(rows)
