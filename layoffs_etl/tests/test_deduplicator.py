"""Deduplicator tests"""

from layoffs_etl.cleaning.deduplicator import Deduplicator
from layoffs_etl.cleaning.rules import DEFAULT_KEY_FIELDS
from layoffs_etl.tests.conftest import make_row


class TestDeduplicator:
    """Test duplicate detection and removal"""

    def setup_method(self):
        self.dedup = Deduplicator(DEFAULT_KEY_FIELDS)

    def test_identical_rows_keep_one(self):
        """Two identical Acme/NY rows collapse to one"""
        rows = [make_row(), make_row()]
        removed = self.dedup.deduplicate(rows)
        assert removed == 1
        assert len(rows) == 1
        assert rows[0]["company"] == "Acme"

    def test_fields_outside_key_are_ignored(self):
        """Rows differing only in source/date_added are duplicates"""
        first = make_row(source="A", date_added="01/01/2023")
        second = make_row(source="B", date_added="02/02/2023")
        rows = [first, second]
        self.dedup.deduplicate(rows)
        assert rows == [first]

    def test_first_seen_wins_and_order_preserved(self):
        """Retained rows keep their input order"""
        a1 = make_row(company="A", source="first")
        b = make_row(company="B")
        a2 = make_row(company="A", source="second")
        c = make_row(company="C")
        rows = [a1, b, a2, c]
        self.dedup.deduplicate(rows)
        assert rows == [a1, b, c]
        assert rows[0]["source"] == "first"

    def test_null_values_group_together(self):
        """Missing values compare equal, as in a window partition"""
        rows = [make_row(industry=None, total_laid_off=None), make_row(industry=None, total_laid_off=None)]
        assert self.dedup.deduplicate(rows) == 1

    def test_find_duplicates_does_not_mutate(self):
        """Verification pass lists rank>1 rows only"""
        rows = [make_row(), make_row(company="B"), make_row(), make_row()]
        assert self.dedup.find_duplicates(rows) == [(2, 2), (3, 3)]
        assert len(rows) == 4

    def test_idempotent(self):
        """Running twice equals running once"""
        rows = [make_row(), make_row(company="B"), make_row(), make_row(company="B")]
        self.dedup.deduplicate(rows)
        once = list(rows)
        assert self.dedup.deduplicate(rows) == 0
        assert rows == once

    def test_no_duplicate_keys_remain(self):
        """Every remaining key tuple is unique"""
        rows = [make_row(company=c, total_laid_off=n) for c in "ABA" for n in (1, 2, 1)]
        self.dedup.deduplicate(rows)
        keys = [self.dedup.key_of(r) for r in rows]
        assert len(keys) == len(set(keys)) == 4

    def test_empty_dataset(self):
        """Empty in, empty out"""
        rows = []
        assert self.dedup.deduplicate(rows) == 0
        assert rows == []
