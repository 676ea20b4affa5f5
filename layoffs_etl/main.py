from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.concurrency import run_in_threadpool

from layoffs_etl.api.routes import data, etl, health, reports, stats
from layoffs_etl.core.config import settings
from layoffs_etl.core.db import SessionLocal, init_db
from layoffs_etl.core.logging import get_logger
from layoffs_etl.services.etl_service import ETLService


log = get_logger("app")


def run_startup_cleaning() -> None:
    """Clean the configured CSV once; failures are logged and the app still starts."""
    with SessionLocal() as db:
        try:
            result = ETLService(db).run()
            log.info(f"Startup cleaning: {result}")
        except Exception as exc:
            log.exception(f"Startup cleaning failed: {exc}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    log.info(f"Starting application in {settings.ENV.upper()} mode")

    init_db()
    log.info("Database tables ready")

    if settings.CLEAN_ON_STARTUP:
        await run_in_threadpool(run_startup_cleaning)
    else:
        log.info("Startup cleaning is disabled (CLEAN_ON_STARTUP=false)")

    yield

    log.info("Application shutdown complete")


app = FastAPI(
    title="Layoffs ETL",
    description="Cleaning pipeline and reports for company layoff events",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.docs_enabled else None,
    redoc_url="/redoc" if settings.docs_enabled else None,
    openapi_url="/openapi.json" if settings.docs_enabled else None,
    debug=settings.debug_enabled,
)


app.include_router(data.router)
app.include_router(etl.router)
app.include_router(health.router)
app.include_router(reports.router)
app.include_router(stats.router)
