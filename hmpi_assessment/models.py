"""Data models for groundwater samples and their pollution index results."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, Optional


class QualityCategory(str, Enum):
    """Water quality classes, ordered from best to worst."""

    EXCELLENT = "excellent"
    GOOD = "good"
    MODERATE = "moderate"
    POOR = "poor"
    UNSUITABLE = "unsuitable"

    @property
    def severity(self) -> int:
        return _SEVERITY[self]

    def __str__(self) -> str:
        return self.value


_SEVERITY = {category: rank for rank, category in enumerate(QualityCategory)}


@dataclass(frozen=True)
class Results:
    """Pollution indices computed for one sample."""

    hpi: float
    pli: float
    cf: float
    quality_category: QualityCategory

    def to_dict(self) -> Dict[str, object]:
        return {
            "hpi": self.hpi,
            "pli": self.pli,
            "cf": self.cf,
            "quality_category": self.quality_category.value,
        }


@dataclass(frozen=True)
class Sample:
    """One validated groundwater observation."""

    id: str
    latitude: float
    longitude: float
    sample_date: str
    metals: Dict[str, float] = field(hash=False)
    results: Optional[Results] = None

    @property
    def has_results(self) -> bool:
        return self.results is not None

    def with_results(self, results: Results) -> "Sample":
        """Return a copy of the sample carrying ``results``."""
        return replace(self, metals=dict(self.metals), results=results)

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        category = self.results.quality_category.value if self.results else "pending"
        return f"<Sample {self.id} ({self.latitude:.4f}, {self.longitude:.4f}) {self.sample_date} {category}>"
