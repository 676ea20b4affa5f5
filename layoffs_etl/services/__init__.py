# Services package
from layoffs_etl.services.etl_service import ETLService
from layoffs_etl.services.data_service import DataService
from layoffs_etl.services.report_service import ReportService
from layoffs_etl.services.export_service import export_layoffs_csv

__all__ = [
    "ETLService",
    "DataService",
    "ReportService",
    "export_layoffs_csv",
]
