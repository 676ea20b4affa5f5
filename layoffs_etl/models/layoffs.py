"""Analysis-ready layoffs table; replaced wholesale by each successful cleaning run."""

from datetime import date

from sqlalchemy import Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from layoffs_etl.models.base import Base


class Layoff(Base):
    """One cleaned layoff event.

    The cleaned table has no natural key, so rows get a surrogate id. The
    ``source`` and ``date_added`` columns of the raw export are not kept.
    """

    __tablename__ = "layoffs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    company: Mapped[str | None] = mapped_column(String, nullable=True, index=True)
    location: Mapped[str | None] = mapped_column(String, nullable=True)
    total_laid_off: Mapped[int | None] = mapped_column(Integer, nullable=True)

    event_date: Mapped[date | None] = mapped_column(Date, nullable=True, index=True)

    percentage_laid_off: Mapped[str | None] = mapped_column(String, nullable=True)
    industry: Mapped[str | None] = mapped_column(String, nullable=True)
    stage: Mapped[str | None] = mapped_column(String, nullable=True)
    funds_raised: Mapped[int | None] = mapped_column(Integer, nullable=True)
    country: Mapped[str | None] = mapped_column(String, nullable=True, index=True)
