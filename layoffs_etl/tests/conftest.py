"""Shared fixtures: in-memory database and sample layoffs data."""

from typing import Any, Dict

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from layoffs_etl.models import Base

SAMPLE_CSV = """company,location,total_laid_off,date,percentage_laid_off,industry,source,stage,funds_raised,country,date_added
Acme ,NY,100,03/01/2023,0.1,Tech,TechCrunch,Series B,50,United States.,03/02/2023
Acme ,NY,100,03/01/2023,0.1,Tech,Bloomberg,Series B,50,United States.,03/03/2023
Acme,NY,50,01/15/2022,,,TechCrunch,Series B,50,United States,01/16/2022
Coinbase,SF Bay Area,200,06/14/2022,0.18,Crypto Currency,CNBC,Post-IPO,549,United States,06/14/2022
Ghost,London,,NULL,,Retail,Reuters,Seed,,United Kingdom,07/01/2022
Beta,Berlin,30,,0.05,Fintech,Handelsblatt,Series A,10,Germany,08/01/2022
"""


def make_row(**overrides: Any) -> Dict[str, Any]:
    row = {
        "company": "Acme",
        "location": "NY",
        "total_laid_off": 100,
        "event_date": "03/01/2023",
        "percentage_laid_off": "0.1",
        "industry": "Tech",
        "source": "TechCrunch",
        "stage": "Series B",
        "funds_raised": 50,
        "country": "United States",
        "date_added": "03/02/2023",
    }
    row.update(overrides)
    return row


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def sample_csv(tmp_path):
    path = tmp_path / "layoffs.csv"
    path.write_text(SAMPLE_CSV, encoding="utf-8")
    return path
