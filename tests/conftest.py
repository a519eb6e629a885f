"""Shared fixtures for the HMPI assessment tests."""
from datetime import date
from typing import Dict

import pytest

from hmpi_assessment.config import configure_logging
from hmpi_assessment.models import QualityCategory, Results, Sample
from hmpi_assessment.reference import WHO_STANDARDS

configure_logging("DEBUG")


@pytest.fixture
def run_date() -> date:
    return date(2024, 3, 15)


@pytest.fixture
def make_row():
    """Factory for a raw CSV-like row with every required column filled in."""

    def _make_row(**overrides) -> Dict[str, str]:
        row = {
            "latitude": "28.6139",
            "longitude": "77.2090",
            "sampleDate": "2024-01-10",
            "As": "0.005",
            "Cd": "0.001",
            "Cr": "0.02",
            "Cu": "0.5",
            "Fe": "0.1",
            "Mn": "0.05",
            "Ni": "0.02",
            "Pb": "0.003",
            "Zn": "1.0",
        }
        row.update({key: value for key, value in overrides.items()})
        return row

    return _make_row


@pytest.fixture
def double_who_panel() -> Dict[str, float]:
    return {metal: standard * 2 for metal, standard in WHO_STANDARDS.items()}


@pytest.fixture
def make_sample():
    """Factory for a validated sample, optionally carrying results."""

    def _make_sample(index: int = 1, metals=None, hpi=None, pli=None, category=None, cf: float = 0.0) -> Sample:
        sample = Sample(
            id=f"sample_{index}",
            latitude=10.0,
            longitude=20.0,
            sample_date="2024-01-10",
            metals=metals or {metal: 0.1 for metal in WHO_STANDARDS},
        )
        if hpi is None:
            return sample
        return sample.with_results(Results(hpi=hpi, pli=pli, cf=cf, quality_category=QualityCategory(category)))

    return _make_sample
