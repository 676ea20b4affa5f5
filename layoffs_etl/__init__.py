"""Layoffs ETL - cleaning pipeline and reporting service for layoff events."""

__version__ = "1.0.0"
