"""CLI entrypoint tests"""

import pytest

from layoffs_etl import etl_entrypoint


class TestEntrypoint:
    """Test the command-line cleaning job"""

    @pytest.fixture(autouse=True)
    def in_memory_db(self, session_factory, monkeypatch):
        monkeypatch.setattr(etl_entrypoint, "SessionLocal", session_factory)
        monkeypatch.setattr(etl_entrypoint, "init_db", lambda: None)

    def test_clean_and_export(self, sample_csv, tmp_path):
        out = tmp_path / "clean.csv"
        result = etl_entrypoint.main([str(sample_csv), str(out)])
        assert result["success"] is True
        assert result["rows_out"] == 4
        assert out.exists()

    def test_failure_exits_nonzero(self, tmp_path):
        bad = tmp_path / "bad.csv"
        bad.write_text("company,total_laid_off,date\nAcme,1,31/12/2023\n", encoding="utf-8")
        with pytest.raises(SystemExit) as exc_info:
            etl_entrypoint.main([str(bad)])
        assert exc_info.value.code == 1

    def test_too_many_arguments(self):
        with pytest.raises(SystemExit) as exc_info:
            etl_entrypoint.main(["a", "b", "c"])
        assert exc_info.value.code == 2
