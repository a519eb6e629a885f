"""One-call assessment: validate, calculate, and summarize a batch."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Iterable, List, Mapping

from .analyzer import summarize_analysis
from .calculator import ALL_INDICES, calculate_batch
from .models import Sample
from .reference import DEFAULT_STANDARDS, ReferenceStandards
from .validator import ValidationReport, validate_rows

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Assessment:
    """Validation report, calculated samples, and aggregate views of one upload."""

    report: ValidationReport
    samples: List[Sample] = field(default_factory=list)
    summary: Dict[str, object] = field(default_factory=dict)

    @property
    def errors(self) -> List[str]:
        return self.report.errors

    @property
    def is_valid(self) -> bool:
        return self.report.is_valid


def assess(
    rows: Iterable[Mapping[str, object]],
    standards: ReferenceStandards = DEFAULT_STANDARDS,
    indices: Iterable[str] = ALL_INDICES,
    today: date | None = None,
    require_valid: bool = False,
) -> Assessment:
    """Run the full pipeline on a fresh batch of raw rows.

    With ``require_valid`` any diagnostic rejects the whole upload by raising
    ``ValidationError``; otherwise the accepted samples are calculated and the
    diagnostics are returned with them.
    """
    report = validate_rows(rows, today=today)
    if require_valid:
        report.raise_for_errors()
    samples = calculate_batch(report.samples, standards, indices)
    summary = summarize_analysis(samples)
    if not report.is_valid:
        logger.warning("Assessment finished with %d diagnostics", len(report.errors))
    return Assessment(report=report, samples=samples, summary=summary)
