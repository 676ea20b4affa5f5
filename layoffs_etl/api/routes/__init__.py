from layoffs_etl.api.routes.data import router as data_router
from layoffs_etl.api.routes.etl import router as etl_router
from layoffs_etl.api.routes.health import router as health_router
from layoffs_etl.api.routes.reports import router as reports_router
from layoffs_etl.api.routes.stats import router as stats_router

__all__ = ["data_router", "etl_router", "health_router", "reports_router", "stats_router"]
