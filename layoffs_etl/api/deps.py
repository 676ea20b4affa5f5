"""API dependencies"""

from typing import Generator

from sqlalchemy.orm import Session

from layoffs_etl.core.db import SessionLocal


def get_db() -> Generator[Session, None, None]:
    """One database session per request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
