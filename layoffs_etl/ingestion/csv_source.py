"""CSV source implementation for the raw layoffs export."""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Any, Dict, List, Optional

from layoffs_etl.core.logging import get_logger
from .base import BaseSource

log = get_logger("ingestion.csv")

NULL_TOKENS = {"", "NULL"}

# CSV header -> record field
COLUMN_MAP = {
    "company": "company",
    "location": "location",
    "total_laid_off": "total_laid_off",
    "date": "event_date",
    "percentage_laid_off": "percentage_laid_off",
    "industry": "industry",
    "source": "source",
    "stage": "stage",
    "funds_raised": "funds_raised",
    "country": "country",
    "date_added": "date_added",
}
INTEGER_FIELDS = {"total_laid_off", "funds_raised"}
NULLABLE_TEXT_FIELDS = {"percentage_laid_off"}


class CSVSource(BaseSource):
    """Reads a layoffs CSV with columns: company,location,total_laid_off,date,
    percentage_laid_off,industry,source,stage,funds_raised,country,date_added."""

    name = "csv"

    def __init__(self, file_path: str | Path):
        self.file_path = Path(file_path)

    def fetch(self) -> List[Dict[str, Any]]:
        if not self.file_path.exists():
            log.warning(f"CSV file not found: {self.file_path}")
            return []

        records: List[Dict[str, Any]] = []
        with self.file_path.open("r", newline="", encoding="utf-8-sig") as f:
            reader = csv.DictReader(f)
            missing = [col for col in COLUMN_MAP if col not in (reader.fieldnames or [])]
            if missing:
                log.warning(f"CSV {self.file_path.name} is missing columns {missing}; they load as null")

            for line_no, row in enumerate(reader, start=2):
                records.append(self.to_record(row, line_no))

        log.info(f"Loaded {len(records)} records from {self.file_path.name}")
        return records

    @classmethod
    def to_record(cls, row: Dict[str, Any], line_no: Optional[int] = None) -> Dict[str, Any]:
        record: Dict[str, Any] = {"payload": dict(row)}
        for column, field in COLUMN_MAP.items():
            value = row.get(column)
            if field in INTEGER_FIELDS:
                value = cls._to_int(value, field, line_no)
            elif field in NULLABLE_TEXT_FIELDS and cls._is_null(value):
                value = None
            record[field] = value
        return record

    @staticmethod
    def _is_null(val: Any) -> bool:
        return val is None or (isinstance(val, str) and val.strip() in NULL_TOKENS)

    @classmethod
    def _to_int(cls, val: Any, field: str, line_no: Optional[int]) -> Optional[int]:
        if cls._is_null(val):
            return None
        try:
            return int(str(val).strip())
        except ValueError:
            log.warning(f"Line {line_no}: non-integer {field}={val!r}; loading as null")
            return None
