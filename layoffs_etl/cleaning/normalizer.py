"""Field normalizer - canonical text, typed dates, imputed categories, pruned rows/columns."""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel

from layoffs_etl.cleaning.dates import is_blank, is_null_token, parse_date
from layoffs_etl.cleaning.rules import (
    CategoryRule,
    CleaningConfig,
    ImputationRule,
    TrailingStripRule,
)
from layoffs_etl.cleaning.schema import ColumnType, TableSchema
from layoffs_etl.core.exceptions import ParseError
from layoffs_etl.core.logging import get_logger

log = get_logger("cleaning.normalizer")

Row = Dict[str, Any]


class NormalizationReport(BaseModel):
    """Counts of what each normalization step changed."""

    trimmed: int = 0
    collapsed: int = 0
    stripped: int = 0
    dates_parsed: int = 0
    dates_nulled: int = 0
    dates_rejected: int = 0
    imputed: int = 0
    rows_pruned: int = 0
    columns_dropped: List[str] = []


class FieldNormalizer:
    """Applies the normalization steps, in order, to a deduplicated dataset.

    Every step mutates ``rows`` in place. ``normalize`` runs them all; the
    individual steps are public so callers can run a subset.
    """

    def __init__(self, config: CleaningConfig):
        self.config = config

    def normalize(self, rows: List[Row], schema: TableSchema) -> NormalizationReport:
        report = NormalizationReport()

        report.trimmed = self.trim(rows, self.config.trim_fields)
        report.collapsed = self.collapse_categories(rows, self.config.category_rules)
        report.stripped = self.strip_trailing(rows, self.config.strip_rules)

        parsed, nulled, rejected = self.parse_dates(rows, schema)
        report.dates_parsed = parsed
        report.dates_nulled = nulled
        report.dates_rejected = rejected

        report.imputed = self.impute(rows, self.config.imputation_rules)
        report.rows_pruned = self.prune_rows(rows, self.config.metric_fields)
        report.columns_dropped = schema.drop_columns(rows, self.config.drop_columns)

        log.info(f"Normalization complete: {report.model_dump()}")
        return report

    # -------------------------------------------------------------------------
    # Text standardization
    # -------------------------------------------------------------------------
    @staticmethod
    def trim(rows: List[Row], fields: List[str]) -> int:
        """Strip surrounding whitespace. Returns the number of values changed."""
        changed = 0
        for row in rows:
            for field in fields:
                value = row.get(field)
                if not isinstance(value, str):
                    continue
                stripped = value.strip()
                if stripped != value:
                    row[field] = stripped
                    changed += 1
        return changed

    @staticmethod
    def collapse_categories(rows: List[Row], rules: List[CategoryRule]) -> int:
        changed = 0
        for rule in rules:
            for row in rows:
                value = row.get(rule.field)
                if not isinstance(value, str) or value == rule.canonical:
                    continue
                if rule.matches(value):
                    row[rule.field] = rule.canonical
                    changed += 1
        return changed

    @staticmethod
    def strip_trailing(rows: List[Row], rules: List[TrailingStripRule]) -> int:
        """Remove trailing occurrences of a character; internal ones are kept."""
        changed = 0
        for rule in rules:
            for row in rows:
                value = row.get(rule.field)
                if not isinstance(value, str):
                    continue
                stripped = value.rstrip(rule.char)
                if stripped != value:
                    row[rule.field] = stripped
                    changed += 1
        return changed

    # -------------------------------------------------------------------------
    # Dates
    # -------------------------------------------------------------------------
    def parse_dates(self, rows: List[Row], schema: TableSchema) -> tuple[int, int, int]:
        """
        Convert the date field from text to ``datetime.date``.

        Blank values and null tokens become None. Anything else must match
        ``date_format`` exactly. Under the ``abort`` policy the first bad value
        raises ParseError; under ``null`` it is set to None.

        Returns:
            (parsed, nulled, rejected) counts
        """
        field = self.config.date_field
        fmt = self.config.date_format

        if field in schema and schema.type_of(field) == ColumnType.DATE:
            log.debug(f"{field} already typed as date; skipping parse")
            return 0, 0, 0

        parsed = nulled = rejected = 0
        for idx, row in enumerate(rows):
            value = row.get(field)
            if is_null_token(value, self.config.null_date_tokens):
                row[field] = None
                nulled += 1
                continue

            try:
                row[field] = parse_date(value, fmt)
                parsed += 1
            except (TypeError, ValueError):
                if self.config.date_error_policy == "abort":
                    raise ParseError(idx, field, value, fmt) from None
                log.warning(f"Row {idx}: unparseable {field}={value!r}; setting to null")
                row[field] = None
                rejected += 1

        if field in schema:
            schema.retype_column(field, ColumnType.DATE)
        return parsed, nulled, rejected

    # -------------------------------------------------------------------------
    # Imputation
    # -------------------------------------------------------------------------
    @staticmethod
    def impute(rows: List[Row], rules: List[ImputationRule]) -> int:
        """
        Fill blank targets from the first row, in dataset order, that shares
        the grouping key and has a non-blank target.

        A company with conflicting industries always donates its first one.
        """
        filled = 0
        for rule in rules:
            rule_filled = 0
            donors: Dict[Any, Any] = {}
            for row in rows:
                key = row.get(rule.group_by)
                value = row.get(rule.target)
                if key is None or is_blank(value):
                    continue
                donors.setdefault(key, value)

            for row in rows:
                if not is_blank(row.get(rule.target)):
                    continue
                donor = donors.get(row.get(rule.group_by))
                if donor is not None:
                    row[rule.target] = donor
                    rule_filled += 1

            filled += rule_filled
            log.debug(f"Imputed {rule_filled} {rule.target} values by {rule.group_by}")
        return filled

    # -------------------------------------------------------------------------
    # Row pruning
    # -------------------------------------------------------------------------
    @staticmethod
    def prune_rows(rows: List[Row], metric_fields: List[str]) -> int:
        """Drop rows where every metric field is blank. Returns rows removed."""
        if not metric_fields:
            return 0
        kept = [row for row in rows if not all(is_blank(row.get(f)) for f in metric_fields)]
        removed = len(rows) - len(kept)
        rows[:] = kept
        if removed:
            log.info(f"Pruned {removed} rows with no {' / '.join(metric_fields)}")
        return removed
