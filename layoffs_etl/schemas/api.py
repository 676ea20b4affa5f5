from datetime import date, datetime
from typing import Optional
from pydantic import BaseModel


class LayoffOut(BaseModel):
    """One cleaned layoff event."""

    id: int
    company: Optional[str] = None
    location: Optional[str] = None
    total_laid_off: Optional[int] = None
    event_date: Optional[date] = None
    percentage_laid_off: Optional[str] = None
    industry: Optional[str] = None
    stage: Optional[str] = None
    funds_raised: Optional[int] = None
    country: Optional[str] = None

    class Config:
        from_attributes = True


class DataResponse(BaseModel):
    request_id: str
    api_latency_ms: int
    total_count: int
    data: list[LayoffOut]


class RawRecordOut(BaseModel):
    id: str
    filename: str
    payload: dict
    ingested_at: datetime


class RawDataResponse(BaseModel):
    request_id: str
    total_count: int
    data: list[RawRecordOut]


class CompanyTotal(BaseModel):
    company: Optional[str]
    total_reductions: Optional[int]


class IndustryTotal(BaseModel):
    industry: Optional[str]
    total_reductions: Optional[int]


class YearTotal(BaseModel):
    layoff_year: int
    total_reductions: Optional[int]


class CountryYearTotal(BaseModel):
    country: Optional[str]
    layoff_year: int
    total_reductions: Optional[int]


class DateAuditRow(BaseModel):
    event_date: date
    year: int
    month: str


class HealthResponse(BaseModel):
    database: str
    last_run_status: str | None


class StatsResponse(BaseModel):
    run_id: str
    source_name: str
    status: str
    rows_in: int
    duplicates_removed: int
    rows_pruned: int
    rows_out: int
    error_message: str | None = None
    started_at: datetime
    ended_at: datetime | None


class ETLTriggerResponse(BaseModel):
    success: bool
    source: str
    rows_in: int = 0
    rows_out: int = 0
    error: str | None = None
