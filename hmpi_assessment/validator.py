"""Validation of raw tabular rows into groundwater sample records."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Iterable, List, Mapping, Optional, Tuple

from . import config
from .models import Sample
from .reference import METALS

logger = logging.getLogger(__name__)

COORDINATE_FIELDS: Tuple[str, ...] = ("latitude", "longitude")
DATE_FIELD = "sampleDate"
REQUIRED_FIELDS: Tuple[str, ...] = COORDINATE_FIELDS + (DATE_FIELD,) + METALS

NO_DATA_MESSAGE = "No data found in the uploaded file"


class ValidationError(ValueError):
    """Raised when a caller requires a batch with no diagnostics."""

    def __init__(self, errors: Iterable[str]):
        self.errors = list(errors)
        preview = "; ".join(self.errors[:5])
        if len(self.errors) > 5:
            preview += f"; ... and {len(self.errors) - 5} more errors"
        super().__init__(preview)


@dataclass(frozen=True)
class ValidationReport:
    """Accepted samples plus every diagnostic produced for the batch."""

    samples: List[Sample] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def raise_for_errors(self) -> None:
        if self.errors:
            raise ValidationError(self.errors)


def _parse_float(value: object) -> float:
    if value is None or isinstance(value, bool):
        raise ValidationError([f"Invalid numeric value: {value!r}"])
    if isinstance(value, str):
        value = value.strip()
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError([f"Invalid numeric value: {value!r}"]) from exc
    if not math.isfinite(number):
        raise ValidationError([f"Invalid numeric value: {value!r}"])
    return number


def _parse_in_range(value: object, bounds: Tuple[float, float]) -> Optional[float]:
    try:
        number = _parse_float(value)
    except ValidationError:
        return None
    low, high = bounds
    return number if low <= number <= high else None


def _parse_concentration(value: object) -> Optional[float]:
    try:
        number = _parse_float(value)
    except ValidationError:
        return None
    return number if number >= 0 else None


def _resolve_date(value: object, today: date) -> str:
    # value != value catches NaN and NaT
    if value is None or value != value:
        return today.isoformat()
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    text = str(value).strip()
    return text or today.isoformat()


def _validate_row(row: Mapping[str, object], row_number: int, today: date) -> Tuple[Optional[Sample], List[str]]:
    errors: List[str] = []

    latitude = _parse_in_range(row.get("latitude"), config.LATITUDE_RANGE)
    if latitude is None:
        errors.append(f"Invalid latitude at row {row_number}")
    longitude = _parse_in_range(row.get("longitude"), config.LONGITUDE_RANGE)
    if longitude is None:
        errors.append(f"Invalid longitude at row {row_number}")

    metals = {}
    for metal in METALS:
        concentration = _parse_concentration(row.get(metal))
        if concentration is None:
            errors.append(f"Invalid {metal} concentration at row {row_number}")
        else:
            metals[metal] = concentration

    if errors:
        return None, errors

    sample = Sample(
        id=f"sample_{row_number}",
        latitude=latitude,
        longitude=longitude,
        sample_date=_resolve_date(row.get(DATE_FIELD), today),
        metals=metals,
    )
    return sample, errors


def missing_columns(row: Mapping[str, object]) -> List[str]:
    """Return required fields absent from ``row``'s keys, in canonical order."""
    return [name for name in REQUIRED_FIELDS if name not in row]


def validate_rows(rows: Iterable[Mapping[str, object]], today: date | None = None) -> ValidationReport:
    """Validate raw rows and build samples for the rows without problems.

    Only the first row is checked for missing columns and that diagnostic does
    not stop row-level validation. A row is accepted only if none of its fields
    produced a diagnostic; accepted rows keep their 1-based input position in
    their id (``sample_3`` stays ``sample_3`` when row 2 is rejected). Rows
    without a ``sampleDate`` get ``today`` (default: the current date).
    """
    rows = list(rows)
    if not rows:
        logger.warning("Validation received an empty batch")
        return ValidationReport(samples=[], errors=[NO_DATA_MESSAGE])

    today = today or date.today()
    samples: List[Sample] = []
    errors: List[str] = []

    missing = missing_columns(rows[0])
    if missing:
        errors.append(f"Missing required columns: {', '.join(missing)}")
        logger.warning("Header is missing required columns: %s", missing)

    for index, row in enumerate(rows):
        sample, row_errors = _validate_row(row, index + 1, today)
        if sample is not None:
            samples.append(sample)
        else:
            logger.debug("Rejected row %d: %s", index + 1, row_errors)
            errors.extend(row_errors)

    logger.info("Validated %d rows: %d accepted, %d diagnostics", len(rows), len(samples), len(errors))
    return ValidationReport(samples=samples, errors=errors)
