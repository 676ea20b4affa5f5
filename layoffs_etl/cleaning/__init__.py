from layoffs_etl.cleaning.deduplicator import Deduplicator
from layoffs_etl.cleaning.normalizer import FieldNormalizer, NormalizationReport
from layoffs_etl.cleaning.pipeline import CleaningPipeline, PipelineResult
from layoffs_etl.cleaning.rules import CleaningConfig
from layoffs_etl.cleaning.schema import LAYOFFS_SCHEMA, ColumnType, TableSchema

__all__ = [
    "Deduplicator",
    "FieldNormalizer",
    "NormalizationReport",
    "CleaningPipeline",
    "PipelineResult",
    "CleaningConfig",
    "LAYOFFS_SCHEMA",
    "ColumnType",
    "TableSchema",
]
