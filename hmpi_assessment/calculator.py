"""Heavy metal pollution index calculators."""
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Mapping, Tuple

import numpy as np

from .classifier import classify
from .models import Results, Sample
from .reference import DEFAULT_STANDARDS, ReferenceStandards

logger = logging.getLogger(__name__)

ALL_INDICES: Tuple[str, ...] = ("hpi", "pli", "cf")


def contamination_factors(
    metals: Mapping[str, float],
    standards: ReferenceStandards = DEFAULT_STANDARDS,
) -> Dict[str, float]:
    """Return concentration / standard for every metal that has a standard."""
    return {
        metal: concentration / standards[metal].standard
        for metal, concentration in metals.items()
        if metal in standards
    }


def compute_hpi(metals: Mapping[str, float], standards: ReferenceStandards = DEFAULT_STANDARDS) -> float:
    """Heavy metal Pollution Index: weighted mean of Qi = (c / S) * 100."""
    matched = [metal for metal in metals if metal in standards]
    if not matched:
        return 0.0
    sub_indices = np.array([metals[m] / standards[m].standard * 100.0 for m in matched], dtype=float)
    weights = np.array([standards[m].weight for m in matched], dtype=float)
    return float(np.sum(weights * sub_indices) / np.sum(weights))


def compute_pli(metals: Mapping[str, float], standards: ReferenceStandards = DEFAULT_STANDARDS) -> float:
    """Pollution Load Index: geometric mean of the contamination factors."""
    factors = np.array(list(contamination_factors(metals, standards).values()), dtype=float)
    if factors.size == 0:
        return 0.0
    return float(np.prod(factors) ** (1.0 / factors.size))


def compute_cf(metals: Mapping[str, float], standards: ReferenceStandards = DEFAULT_STANDARDS) -> float:
    """Mean contamination factor over the matched metals."""
    factors = np.array(list(contamination_factors(metals, standards).values()), dtype=float)
    if factors.size == 0:
        return 0.0
    return float(factors.mean())


_CALCULATORS = {
    "hpi": compute_hpi,
    "pli": compute_pli,
    "cf": compute_cf,
}


def _normalize_indices(indices: Iterable[str]) -> frozenset:
    selected = frozenset(name.lower() for name in indices)
    unknown = selected - set(ALL_INDICES)
    if unknown:
        raise ValueError(f"Unknown index: {', '.join(sorted(unknown))}")
    return selected


def calculate_sample(
    sample: Sample,
    standards: ReferenceStandards = DEFAULT_STANDARDS,
    indices: Iterable[str] = ALL_INDICES,
) -> Sample:
    """Return a new sample carrying computed indices and its quality category.

    Indices left out of ``indices`` are reported as 0.0 and the category is
    derived from whatever HPI and PLI values result.
    """
    return _calculate(sample, standards, _normalize_indices(indices))


def _calculate(sample: Sample, standards: ReferenceStandards, selected: frozenset) -> Sample:
    values = {
        name: (_CALCULATORS[name](sample.metals, standards) if name in selected else 0.0)
        for name in ALL_INDICES
    }
    results = Results(
        hpi=values["hpi"],
        pli=values["pli"],
        cf=values["cf"],
        quality_category=classify(values["hpi"], values["pli"]),
    )
    return sample.with_results(results)


def calculate_batch(
    samples: Iterable[Sample],
    standards: ReferenceStandards = DEFAULT_STANDARDS,
    indices: Iterable[str] = ALL_INDICES,
) -> List[Sample]:
    """Calculate every sample independently, keeping batch order."""
    selected = _normalize_indices(indices)
    calculated = [_calculate(sample, standards, selected) for sample in samples]
    names = [name for name in ALL_INDICES if name in selected]
    logger.info("Calculated %s for %d samples", "/".join(names) or "no indices", len(calculated))
    return calculated
