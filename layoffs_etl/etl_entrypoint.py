"""ETL entrypoint - Standalone script for running a cleaning pass.

Usage:
    python -m layoffs_etl.etl_entrypoint                         # Clean LAYOFFS_CSV_PATH
    python -m layoffs_etl.etl_entrypoint data/layoffs.csv        # Clean a specific file
    python -m layoffs_etl.etl_entrypoint data/layoffs.csv out.csv  # ...and export the result
"""

import sys
from typing import Any, Dict, List, Optional

from layoffs_etl.core.db import SessionLocal, init_db
from layoffs_etl.core.logging import get_logger
from layoffs_etl.services.etl_service import ETLService
from layoffs_etl.services.export_service import export_layoffs_csv
from layoffs_etl.services.report_service import ReportService

logger = get_logger("etl_entrypoint")


def log_reports(reports: Dict[str, List[Dict[str, Any]]]) -> None:
    for name, rows in reports.items():
        logger.info(f"Report {name} ({len(rows)} rows)")
        for row in rows:
            logger.info(f"  {row}")


def run_cleaning_job(csv_path: Optional[str] = None, export_path: Optional[str] = None) -> Dict[str, Any]:
    """Run one cleaning pass, then log the reports and optionally export."""
    init_db()
    with SessionLocal() as db:
        service = ETLService(db, csv_path=csv_path)
        result = service.run()
        logger.info(f"Cleaning job completed: {result}")

        log_reports(ReportService(db).all_reports())

        if export_path:
            export_layoffs_csv(db, export_path)
        return result


def main(argv: Optional[List[str]] = None) -> Dict[str, Any]:
    """Main entry point for the cleaning pipeline."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) > 2:
        logger.error("Usage: python -m layoffs_etl.etl_entrypoint [csv_path] [export_path]")
        sys.exit(2)

    logger.info("Cleaning pipeline starting...")
    csv_path = args[0] if args else None
    export_path = args[1] if len(args) > 1 else None

    try:
        result = run_cleaning_job(csv_path, export_path)
    except Exception as exc:
        logger.error(f"Cleaning pipeline failed: {exc}")
        sys.exit(1)

    logger.info(f"Cleaning pipeline completed: {result}")
    return result


if __name__ == "__main__":
    main()
