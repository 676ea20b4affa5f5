"""Report service tests"""

from datetime import date

import pytest

from layoffs_etl.services.etl_service import ETLService
from layoffs_etl.services.report_service import ReportService


class TestReportService:
    """Test aggregate reports over the cleaned sample"""

    @pytest.fixture
    def reports(self, db, sample_csv):
        ETLService(db, csv_path=sample_csv).run()
        return ReportService(db)

    def test_top_companies(self, reports):
        assert reports.top_companies() == [
            {"company": "Coinbase", "total_reductions": 200},
            {"company": "Acme", "total_reductions": 150},
            {"company": "Beta", "total_reductions": 30},
        ]

    def test_top_companies_limit(self, reports):
        assert [r["company"] for r in reports.top_companies(limit=1)] == ["Coinbase"]

    def test_by_industry(self, reports):
        assert reports.by_industry() == [
            {"industry": "Crypto", "total_reductions": 200},
            {"industry": "Tech", "total_reductions": 150},
            {"industry": "Fintech", "total_reductions": 30},
        ]

    def test_by_year_excludes_undated(self, reports):
        assert reports.by_year() == [
            {"layoff_year": 2023, "total_reductions": 100},
            {"layoff_year": 2022, "total_reductions": 250},
        ]

    def test_by_country_year(self, reports):
        assert reports.by_country_year() == [
            {"country": "United States", "layoff_year": 2023, "total_reductions": 100},
            {"country": "United States", "layoff_year": 2022, "total_reductions": 250},
        ]

    def test_date_audit(self, reports):
        audit = reports.date_audit()
        assert len(audit) == 3
        assert audit[0] == {"event_date": date(2023, 3, 1), "year": 2023, "month": "March"}

    def test_empty_table(self, db):
        service = ReportService(db)
        assert service.top_companies() == []
        assert service.by_year() == []
        assert set(service.all_reports()) == {"top_companies", "industries", "years", "countries", "date_audit"}
