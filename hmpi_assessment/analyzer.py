"""Aggregate views over a batch of calculated groundwater samples."""
from __future__ import annotations

import logging
from typing import Dict, Iterable, List

import pandas as pd

from . import config
from .classifier import is_high_risk
from .models import Sample
from .reference import METAL_NAMES, METALS

logger = logging.getLogger(__name__)


def processed_samples(samples: Iterable[Sample]) -> List[Sample]:
    """Keep only the samples that already carry results."""
    return [sample for sample in samples if sample.has_results]


def samples_to_dataframe(samples: Iterable[Sample]) -> pd.DataFrame:
    """Convert samples to a pandas DataFrame, one row per sample."""
    records = []
    for sample in samples:
        record = {
            "id": sample.id,
            "latitude": sample.latitude,
            "longitude": sample.longitude,
            "sample_date": sample.sample_date,
        }
        record.update({metal: sample.metals.get(metal) for metal in METALS})
        if sample.has_results:
            record.update(sample.results.to_dict())
        else:
            record.update({"hpi": None, "pli": None, "cf": None, "quality_category": None})
        records.append(record)
    if not records:
        return pd.DataFrame()
    return pd.DataFrame(records)


def summary_stats(samples: Iterable[Sample]) -> Dict[str, Dict[str, float]]:
    """Compute min/max/avg of HPI and PLI over processed samples."""
    df = samples_to_dataframe(processed_samples(samples))
    if df.empty:
        raise ValueError("No calculated samples available for statistics.")

    stats = {}
    for column in ("hpi", "pli"):
        series = df[column].astype(float)
        stats[column] = {
            "min": float(series.min()),
            "max": float(series.max()),
            "avg": float(series.mean()),
        }
    return stats


def quality_distribution(samples: Iterable[Sample]) -> List[Dict[str, object]]:
    """Count samples per quality category in first-seen order."""
    processed = processed_samples(samples)
    if not processed:
        return []
    categories = pd.Series([s.results.quality_category.value for s in processed])
    counts = categories.groupby(categories, sort=False).size()
    total = len(processed)
    return [
        {
            "category": category,
            "count": int(count),
            "percentage": round(int(count) / total * 100, 1),
        }
        for category, count in counts.items()
    ]


def mean_concentration_by_metal(samples: Iterable[Sample]) -> Dict[str, float]:
    """Average concentration of every metal over processed samples."""
    df = samples_to_dataframe(processed_samples(samples))
    if df.empty:
        raise ValueError("No calculated samples available for metal averages.")
    return {metal: float(df[metal].astype(float).mean()) for metal in METALS}


def metal_contributions(samples: Iterable[Sample]) -> List[Dict[str, object]]:
    """Mean concentration per metal with its element name, rounded to 0.001 mg/L."""
    means = mean_concentration_by_metal(samples)
    return [
        {"metal": metal, "name": METAL_NAMES[metal], "concentration": round(means[metal], 3)}
        for metal in METALS
    ]


def top_pollutants(sample: Sample, k: int | None = None) -> List[str]:
    """Return the ``k`` metals with the highest concentration in ``sample``.

    Ties keep panel order.
    """
    k = config.DEFAULT_TOP_POLLUTANTS if k is None else k
    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}")
    ranked = sorted(sample.metals.items(), key=lambda item: item[1], reverse=True)
    return [metal for metal, _ in ranked[:k]]


def high_risk_samples(samples: Iterable[Sample]) -> List[Sample]:
    """Processed samples classified as poor or unsuitable."""
    return [s for s in processed_samples(samples) if is_high_risk(s.results.quality_category)]


def summarize_analysis(samples: Iterable[Sample], k: int | None = None) -> Dict[str, object]:
    """Return every aggregate view for convenience; empty batches give empty views."""
    processed = processed_samples(samples)
    logger.debug("Summarizing %d calculated samples", len(processed))
    return {
        "sample_count": len(processed),
        "summary_stats": summary_stats(processed) if processed else {},
        "quality_distribution": quality_distribution(processed),
        "mean_concentration_by_metal": mean_concentration_by_metal(processed) if processed else {},
        "metal_contributions": metal_contributions(processed) if processed else [],
        "top_pollutants": {s.id: top_pollutants(s, k) for s in processed},
        "high_risk_samples": [s.id for s in high_risk_samples(processed)],
    }
