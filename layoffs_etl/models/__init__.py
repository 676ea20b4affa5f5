from layoffs_etl.models.base import Base
from layoffs_etl.models.raw import RawLayoff
from layoffs_etl.models.layoffs import Layoff
from layoffs_etl.models.runs import CleaningRun

__all__ = [
    "Base",
    "RawLayoff",
    "Layoff",
    "CleaningRun",
]
