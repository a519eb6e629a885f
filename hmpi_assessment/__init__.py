"""Heavy Metal Pollution Index assessment for groundwater samples."""
from __future__ import annotations

from .analyzer import (
    high_risk_samples,
    mean_concentration_by_metal,
    metal_contributions,
    processed_samples,
    quality_distribution,
    samples_to_dataframe,
    summarize_analysis,
    summary_stats,
    top_pollutants,
)
from .calculator import ALL_INDICES, calculate_batch, calculate_sample, compute_cf, compute_hpi, compute_pli
from .classifier import classify, is_high_risk
from .loader import LoaderError, dataframe_to_rows, read_rows
from .models import QualityCategory, Results, Sample
from .pipeline import Assessment, assess
from .reference import DEFAULT_STANDARDS, METALS, ReferenceStandard, ReferenceStandards
from .validator import REQUIRED_FIELDS, ValidationError, ValidationReport, validate_rows

__version__ = "0.1.0"

__all__ = [
    "ALL_INDICES",
    "Assessment",
    "DEFAULT_STANDARDS",
    "LoaderError",
    "METALS",
    "QualityCategory",
    "REQUIRED_FIELDS",
    "ReferenceStandard",
    "ReferenceStandards",
    "Results",
    "Sample",
    "ValidationError",
    "ValidationReport",
    "assess",
    "calculate_batch",
    "calculate_sample",
    "classify",
    "compute_cf",
    "compute_hpi",
    "compute_pli",
    "dataframe_to_rows",
    "high_risk_samples",
    "is_high_risk",
    "mean_concentration_by_metal",
    "metal_contributions",
    "processed_samples",
    "quality_distribution",
    "read_rows",
    "samples_to_dataframe",
    "summarize_analysis",
    "summary_stats",
    "top_pollutants",
    "validate_rows",
]
