"""Abstract source interface for ingestion."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List


class BaseSource(ABC):
    """Abstract base class for raw layoff sources."""

    name: str

    @abstractmethod
    def fetch(self) -> List[Dict[str, Any]]:
        """Fetch raw records (each must include ``payload`` and the layoffs columns)."""
