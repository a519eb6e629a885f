"""Water quality classification from HPI and PLI values."""
from __future__ import annotations

from . import config
from .models import QualityCategory


def classify(hpi: float, pli: float) -> QualityCategory:
    """Map an (HPI, PLI) pair to a quality category.

    Bands are tried from best to worst and both limits are strict upper bounds,
    so the worse of the two indices decides the category.
    """
    for category, hpi_limit, pli_limit in config.QUALITY_THRESHOLDS:
        if hpi < hpi_limit and pli < pli_limit:
            return QualityCategory(category)
    return QualityCategory(config.FALLBACK_CATEGORY)


def is_high_risk(category: QualityCategory | str) -> bool:
    return QualityCategory(category).value in config.HIGH_RISK_CATEGORIES
