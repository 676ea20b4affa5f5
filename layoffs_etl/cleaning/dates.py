"""Strict single-format date parsing."""

from datetime import date, datetime
from typing import Any, Iterable, Optional


def is_blank(value: Any) -> bool:
    """True for None and for strings that are empty once whitespace is stripped."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def is_null_token(value: Any, tokens: Iterable[str]) -> bool:
    if is_blank(value):
        return True
    return isinstance(value, str) and value.strip() in set(tokens)


def parse_date(value: str, fmt: str) -> date:
    """Parse ``value`` with exactly ``fmt``.

    Raises ValueError when the whole string does not match; no other formats
    are tried.
    """
    return datetime.strptime(value, fmt).date()


def format_date(value: Optional[date], fmt: str) -> Optional[str]:
    if value is None:
        return None
    return value.strftime(fmt)
