"""Deduplicator - remove rows that repeat the same key-field values."""

from __future__ import annotations

from typing import Any, Dict, Hashable, List, Sequence, Tuple

from layoffs_etl.core.logging import get_logger

log = get_logger("cleaning.deduplicator")

Row = Dict[str, Any]


class Deduplicator:
    """Keeps the first row of every key group, in dataset order."""

    def __init__(self, key_fields: Sequence[str]):
        self.key_fields = list(key_fields)

    def key_of(self, row: Row) -> Tuple[Hashable, ...]:
        return tuple(row.get(field) for field in self.key_fields)

    def rank(self, rows: List[Row]) -> List[int]:
        """Row number of each row within its key group (1 = first seen)."""
        counts: Dict[Tuple[Hashable, ...], int] = {}
        ranks: List[int] = []
        for row in rows:
            key = self.key_of(row)
            counts[key] = counts.get(key, 0) + 1
            ranks.append(counts[key])
        return ranks

    def find_duplicates(self, rows: List[Row]) -> List[Tuple[int, int]]:
        """
        List redundant rows without touching the dataset.

        Returns:
            (index, rank) pairs for every row whose rank is greater than 1
        """
        return [(idx, rank) for idx, rank in enumerate(self.rank(rows)) if rank > 1]

    def deduplicate(self, rows: List[Row]) -> int:
        """
        Remove redundant rows in place, preserving the order of kept rows.

        Returns:
            Number of rows removed
        """
        ranks = self.rank(rows)
        kept = [row for row, rank in zip(rows, ranks) if rank == 1]
        removed = len(rows) - len(kept)
        rows[:] = kept

        if removed > 0:
            log.info(f"Removed {removed} duplicate rows")
        return removed
