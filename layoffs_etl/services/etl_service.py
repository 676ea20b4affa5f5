"""End-to-end cleaning run: load the raw CSV, clean it, store the analysis-ready table."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from sqlalchemy import delete, insert
from sqlalchemy.orm import Session

from layoffs_etl.cleaning.pipeline import CleaningPipeline, PipelineResult
from layoffs_etl.cleaning.rules import CleaningConfig
from layoffs_etl.core.config import settings
from layoffs_etl.core.logging import get_logger
from layoffs_etl.ingestion.csv_source import CSVSource
from layoffs_etl.models.layoffs import Layoff
from layoffs_etl.models.raw import RawLayoff
from layoffs_etl.models.runs import CleaningRun

log = get_logger("etl_service")


class ETLService:
    """Runs one all-or-nothing cleaning pass over a layoffs CSV.

    Responsibilities:
    - Load raw rows from the CSV source
    - Store raw payloads for auditability/replay
    - Run the cleaning pipeline (dedup, normalize, prune, dedup again)
    - Replace the cleaned ``layoffs`` table
    - Track the run in ``cleaning_runs``
    """

    def __init__(
        self,
        db: Session,
        csv_path: Optional[str | Path] = None,
        config: Optional[CleaningConfig] = None,
    ):
        self.db = db
        self.csv_path = Path(csv_path or settings.LAYOFFS_CSV_PATH)
        self.config = config or CleaningConfig.from_settings(settings)

    def run(self) -> Dict[str, Any]:
        """Run the full load/clean/store cycle. Raises on failure after recording it."""
        run = CleaningRun(source_name=self.csv_path.name, status="running")
        self.db.add(run)
        self.db.commit()
        self.db.refresh(run)

        try:
            log.info(f"Starting cleaning run {run.run_id} for {self.csv_path}")

            records = CSVSource(self.csv_path).fetch()
            if not records:
                log.info(f"No records in {self.csv_path}; cleaned table unchanged")
                run.status = "success"
                run.ended_at = datetime.now(timezone.utc)
                self.db.commit()
                return self._result(run)

            # Persist raw data
            self._persist_raw(run, records)

            # Clean
            rows = [self._strip_payload(rec) for rec in records]
            result = CleaningPipeline(self.config).run(rows)

            # Replace cleaned table
            self._replace_cleaned(result)

            run.status = "success"
            run.rows_in = result.rows_in
            run.duplicates_removed = result.duplicates_removed
            run.rows_pruned = result.normalization.rows_pruned
            run.rows_out = result.rows_out
            run.ended_at = datetime.now(timezone.utc)
            self.db.commit()

            log.info(f"Cleaning run {run.run_id} finished | {result.summary()}")
            return self._result(run)

        except Exception as exc:
            self.db.rollback()
            run.status = "failure"
            run.error_message = str(exc)
            run.ended_at = datetime.now(timezone.utc)
            self.db.add(run)
            self.db.commit()
            log.error(f"Cleaning run {run.run_id} failed: {exc}")
            raise

    @staticmethod
    def _result(run: CleaningRun) -> Dict[str, Any]:
        return {
            "success": run.status == "success",
            "run_id": str(run.run_id),
            "source": run.source_name,
            "rows_in": run.rows_in,
            "duplicates_removed": run.duplicates_removed,
            "rows_pruned": run.rows_pruned,
            "rows_out": run.rows_out,
        }

    # -------------------------------------------------------------------------
    # Raw Data Persistence
    # -------------------------------------------------------------------------
    def _persist_raw(self, run: CleaningRun, records: List[Dict[str, Any]]) -> None:
        self.db.execute(
            insert(RawLayoff),
            [
                {
                    "run_id": run.run_id,
                    "filename": self.csv_path.name,
                    "payload": rec["payload"],
                }
                for rec in records
            ],
        )

    @staticmethod
    def _strip_payload(record: Dict[str, Any]) -> Dict[str, Any]:
        return {key: value for key, value in record.items() if key != "payload"}

    # -------------------------------------------------------------------------
    # Cleaned Data Write
    # -------------------------------------------------------------------------
    def _replace_cleaned(self, result: PipelineResult) -> None:
        """Swap the cleaned table contents in the run's transaction."""
        columns = set(Layoff.__table__.columns.keys())
        unknown = [name for name in result.schema.column_names if name not in columns]
        if unknown:
            raise ValueError(f"Cleaned schema has columns not in the layoffs table: {unknown}")

        self.db.execute(delete(Layoff))
        if result.rows:
            self.db.execute(insert(Layoff), [result.schema.project(row) for row in result.rows])
