"""Table schema and schema-level transforms for the in-memory dataset."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Iterable, List

from layoffs_etl.core.logging import get_logger

log = get_logger("cleaning.schema")


class ColumnType(str, Enum):
    TEXT = "text"
    INTEGER = "integer"
    DATE = "date"


class TableSchema:
    """Ordered column definitions for a dataset of dict rows.

    Column drops and type changes go through this class so that the schema and
    every row are updated together, once.
    """

    def __init__(self, columns: Dict[str, ColumnType]):
        self.columns: Dict[str, ColumnType] = dict(columns)

    def __contains__(self, name: object) -> bool:
        return name in self.columns

    def __repr__(self) -> str:
        cols = ", ".join(f"{name}:{ctype.value}" for name, ctype in self.columns.items())
        return f"TableSchema({cols})"

    @property
    def column_names(self) -> List[str]:
        return list(self.columns)

    def type_of(self, name: str) -> ColumnType:
        return self.columns[name]

    def copy(self) -> "TableSchema":
        return TableSchema(self.columns)

    def drop_columns(self, rows: List[Dict[str, Any]], names: Iterable[str]) -> List[str]:
        """Remove columns from the schema and from every row. Returns the names dropped."""
        dropped: List[str] = []
        for name in names:
            if name not in self.columns:
                log.debug(f"Column {name!r} not in schema; nothing to drop")
                continue
            del self.columns[name]
            dropped.append(name)

        if dropped:
            for row in rows:
                for name in dropped:
                    row.pop(name, None)
            log.info(f"Dropped columns {dropped} from {len(rows)} rows")
        return dropped

    def retype_column(self, name: str, column_type: ColumnType) -> None:
        if name not in self.columns:
            raise KeyError(f"Unknown column: {name}")
        self.columns[name] = column_type

    def project(self, row: Dict[str, Any]) -> Dict[str, Any]:
        """Return the row restricted to schema columns, in schema order."""
        return {name: row.get(name) for name in self.columns}


# Raw layoffs table, as loaded from CSV ("date" header maps to event_date)
LAYOFFS_SCHEMA = TableSchema(
    {
        "company": ColumnType.TEXT,
        "location": ColumnType.TEXT,
        "total_laid_off": ColumnType.INTEGER,
        "event_date": ColumnType.TEXT,
        "percentage_laid_off": ColumnType.TEXT,
        "industry": ColumnType.TEXT,
        "source": ColumnType.TEXT,
        "stage": ColumnType.TEXT,
        "funds_raised": ColumnType.INTEGER,
        "country": ColumnType.TEXT,
        "date_added": ColumnType.TEXT,
    }
)
