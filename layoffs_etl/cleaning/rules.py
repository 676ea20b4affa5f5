"""Cleaning rule configuration."""

from typing import List, Literal

from pydantic import BaseModel, Field

from layoffs_etl.core.config import Settings

DateErrorPolicy = Literal["abort", "null"]

DEFAULT_KEY_FIELDS = [
    "company",
    "location",
    "industry",
    "total_laid_off",
    "percentage_laid_off",
    "event_date",
    "stage",
    "country",
    "funds_raised",
]


class CategoryRule(BaseModel):
    """Rewrite values of ``field`` starting with ``prefix`` to ``canonical``."""

    field: str
    prefix: str
    canonical: str
    case_sensitive: bool = False

    def matches(self, value: str) -> bool:
        if self.case_sensitive:
            return value.startswith(self.prefix)
        return value.lower().startswith(self.prefix.lower())


class TrailingStripRule(BaseModel):
    """Remove trailing occurrences of ``char`` from ``field``."""

    field: str
    char: str = Field(".", min_length=1, max_length=1)


class ImputationRule(BaseModel):
    """Fill blank ``target`` values from another row sharing ``group_by``."""

    target: str
    group_by: str


class CleaningConfig(BaseModel):
    """Every rule the pipeline applies. Defaults reproduce the layoffs cleaning run."""

    key_fields: List[str] = Field(default_factory=lambda: list(DEFAULT_KEY_FIELDS))
    trim_fields: List[str] = Field(default_factory=lambda: ["company", "country"])
    category_rules: List[CategoryRule] = Field(
        default_factory=lambda: [CategoryRule(field="industry", prefix="Crypto", canonical="Crypto")]
    )
    strip_rules: List[TrailingStripRule] = Field(
        default_factory=lambda: [TrailingStripRule(field="country", char=".")]
    )
    date_field: str = "event_date"
    date_format: str = "%m/%d/%Y"
    null_date_tokens: List[str] = Field(default_factory=lambda: ["", "NULL"])
    date_error_policy: DateErrorPolicy = "abort"
    imputation_rules: List[ImputationRule] = Field(
        default_factory=lambda: [ImputationRule(target="industry", group_by="company")]
    )
    metric_fields: List[str] = Field(default_factory=lambda: ["total_laid_off", "percentage_laid_off"])
    drop_columns: List[str] = Field(default_factory=lambda: ["source", "date_added"])

    @classmethod
    def from_settings(cls, settings: Settings) -> "CleaningConfig":
        return cls(
            date_format=settings.DATE_FORMAT,
            date_error_policy=settings.DATE_ERROR_POLICY,
        )
