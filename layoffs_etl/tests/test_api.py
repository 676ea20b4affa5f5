"""API endpoint tests"""

import pytest
from fastapi.testclient import TestClient

from layoffs_etl.api.deps import get_db
from layoffs_etl.core.config import settings
from layoffs_etl.main import app


class TestAPI:
    """Test API endpoints against an in-memory database"""

    @pytest.fixture
    def client(self, session_factory, sample_csv, monkeypatch):
        """Create test client with the DB dependency overridden"""

        def override_get_db():
            db = session_factory()
            try:
                yield db
            finally:
                db.close()

        monkeypatch.setattr(settings, "LAYOFFS_CSV_PATH", str(sample_csv))
        app.dependency_overrides[get_db] = override_get_db
        yield TestClient(app)
        app.dependency_overrides.clear()

    @pytest.fixture
    def loaded_client(self, client):
        response = client.post("/etl/run")
        assert response.json()["success"] is True
        return client

    def test_health_check(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"database": "ok", "last_run_status": None}

    def test_readiness(self, client):
        response = client.get("/health/ready")
        assert response.status_code == 200
        assert response.json()["status"] == "ready"

    def test_trigger_run(self, client):
        response = client.post("/etl/run")
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["rows_in"] == 6
        assert body["rows_out"] == 4
        assert client.get("/health").json()["last_run_status"] == "success"

    def test_trigger_run_failure(self, client, tmp_path, monkeypatch):
        bad = tmp_path / "bad.csv"
        bad.write_text("company,total_laid_off,date\nAcme,1,not-a-date\n", encoding="utf-8")
        monkeypatch.setattr(settings, "LAYOFFS_CSV_PATH", str(bad))

        body = client.post("/etl/run").json()
        assert body["success"] is False
        assert "not-a-date" in body["error"]
        assert client.get("/stats/latest").json()["status"] == "failure"

    def test_get_data(self, loaded_client):
        response = loaded_client.get("/data")
        assert response.status_code == 200
        body = response.json()
        assert body["total_count"] == 4
        assert body["data"][0]["event_date"] == "2023-03-01"
        assert "source" not in body["data"][0]

    def test_data_with_filters(self, loaded_client):
        body = loaded_client.get("/data?company=acme&year=2022").json()
        assert body["total_count"] == 1
        assert body["data"][0]["total_laid_off"] == 50

    def test_data_count_and_raw(self, loaded_client):
        assert loaded_client.get("/data/count").json() == {"count": 4}
        raw = loaded_client.get("/data/raw?limit=2").json()
        assert raw["total_count"] == 6
        assert len(raw["data"]) == 2

    def test_reports(self, loaded_client):
        top = loaded_client.get("/reports/top-companies?limit=2").json()
        assert top == [
            {"company": "Coinbase", "total_reductions": 200},
            {"company": "Acme", "total_reductions": 150},
        ]
        years = loaded_client.get("/reports/years").json()
        assert [y["layoff_year"] for y in years] == [2023, 2022]
        assert loaded_client.get("/reports/industries").status_code == 200
        assert len(loaded_client.get("/reports/countries").json()) == 2
        assert loaded_client.get("/reports/date-audit?limit=1").json()[0]["month"] == "March"

    def test_stats(self, loaded_client):
        runs = loaded_client.get("/stats").json()
        assert len(runs) == 1
        assert runs[0]["duplicates_removed"] == 1
        assert runs[0]["rows_pruned"] == 1

    def test_latest_run_missing(self, client):
        assert client.get("/stats/latest").status_code == 404

    def test_invalid_endpoint(self, client):
        response = client.get("/invalid")
        assert response.status_code == 404
