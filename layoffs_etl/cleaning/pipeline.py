"""Cleaning pipeline - Deduplicator then FieldNormalizer over one dataset."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from layoffs_etl.cleaning.deduplicator import Deduplicator
from layoffs_etl.cleaning.normalizer import FieldNormalizer, NormalizationReport
from layoffs_etl.cleaning.rules import CleaningConfig
from layoffs_etl.cleaning.schema import LAYOFFS_SCHEMA, TableSchema
from layoffs_etl.core.logging import get_logger

log = get_logger("cleaning.pipeline")


class PipelineResult:
    """Cleaned rows, the transformed schema and per-stage counts."""

    def __init__(
        self,
        rows: List[Dict[str, Any]],
        schema: TableSchema,
        rows_in: int,
        duplicates_removed: int,
        normalization: NormalizationReport,
    ):
        self.rows = rows
        self.schema = schema
        self.rows_in = rows_in
        self.duplicates_removed = duplicates_removed
        self.normalization = normalization

    @property
    def rows_out(self) -> int:
        return len(self.rows)

    def summary(self) -> Dict[str, Any]:
        return {
            "rows_in": self.rows_in,
            "duplicates_removed": self.duplicates_removed,
            "rows_pruned": self.normalization.rows_pruned,
            "rows_out": self.rows_out,
        }


class CleaningPipeline:
    """Runs deduplication, normalization, then deduplication again.

    The dataset is mutated in place. A ParseError propagates unchanged; the
    caller must treat the dataset as discarded when one is raised.
    """

    def __init__(self, config: Optional[CleaningConfig] = None):
        self.config = config or CleaningConfig()
        self.deduplicator = Deduplicator(self.config.key_fields)
        self.normalizer = FieldNormalizer(self.config)

    def run(self, rows: List[Dict[str, Any]], schema: Optional[TableSchema] = None) -> PipelineResult:
        schema = (schema or LAYOFFS_SCHEMA).copy()
        rows_in = len(rows)
        log.info(f"Cleaning {rows_in} rows")

        # Step 1: Deduplicate
        duplicates = self.deduplicator.find_duplicates(rows)
        for idx, rank in duplicates:
            log.debug(f"Duplicate row {idx} (rank {rank}): {rows[idx]}")
        removed = self.deduplicator.deduplicate(rows)

        # Step 2: Normalize
        report = self.normalizer.normalize(rows, schema)

        # Step 3: Rows that only differed before normalization now collide
        collapsed = self.deduplicator.deduplicate(rows)
        if collapsed:
            log.info(f"Removed {collapsed} rows made identical by normalization")
        removed += collapsed

        result = PipelineResult(
            rows=rows,
            schema=schema,
            rows_in=rows_in,
            duplicates_removed=removed,
            normalization=report,
        )
        log.info(f"Cleaning finished: {result.summary()}")
        return result
