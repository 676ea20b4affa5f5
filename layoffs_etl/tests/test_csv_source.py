"""CSV source tests"""

from layoffs_etl.ingestion.csv_source import CSVSource


class TestCSVSource:
    """Test raw CSV loading"""

    def test_loads_all_rows(self, sample_csv):
        records = CSVSource(sample_csv).fetch()
        assert len(records) == 6

    def test_field_mapping_and_types(self, sample_csv):
        first = CSVSource(sample_csv).fetch()[0]
        assert first["company"] == "Acme "
        assert first["event_date"] == "03/01/2023"
        assert first["total_laid_off"] == 100
        assert first["funds_raised"] == 50
        assert first["payload"]["date"] == "03/01/2023"

    def test_nulls(self, sample_csv):
        ghost = CSVSource(sample_csv).fetch()[4]
        assert ghost["total_laid_off"] is None
        assert ghost["percentage_laid_off"] is None
        assert ghost["funds_raised"] is None
        # Date text is left for the normalizer
        assert ghost["event_date"] == "NULL"

    def test_non_integer_loads_as_null(self, tmp_path):
        path = tmp_path / "bad.csv"
        path.write_text("company,total_laid_off\nAcme,lots\n", encoding="utf-8")
        records = CSVSource(path).fetch()
        assert records[0]["total_laid_off"] is None
        assert records[0]["country"] is None

    def test_missing_file(self, tmp_path):
        assert CSVSource(tmp_path / "missing.csv").fetch() == []
