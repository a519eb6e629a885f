"""Regulatory reference values for heavy metals in drinking water."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterator, Tuple

METALS: Tuple[str, ...] = ("As", "Cd", "Cr", "Cu", "Fe", "Mn", "Ni", "Pb", "Zn")

METAL_NAMES: Dict[str, str] = {
    "As": "Arsenic",
    "Cd": "Cadmium",
    "Cr": "Chromium",
    "Cu": "Copper",
    "Fe": "Iron",
    "Mn": "Manganese",
    "Ni": "Nickel",
    "Pb": "Lead",
    "Zn": "Zinc",
}

# WHO/EPA drinking water guideline values (mg/L)
WHO_STANDARDS: Dict[str, float] = {
    "As": 0.01,
    "Cd": 0.003,
    "Cr": 0.05,
    "Cu": 2.0,
    "Fe": 0.3,
    "Mn": 0.1,
    "Ni": 0.07,
    "Pb": 0.01,
    "Zn": 3.0,
}

METAL_WEIGHTS: Dict[str, float] = {metal: 1.0 for metal in METALS}


@dataclass(frozen=True)
class ReferenceStandard:
    """Permissible concentration (mg/L) and HPI weight for one metal."""

    standard: float
    weight: float = 1.0

    def __post_init__(self) -> None:
        if not self.standard > 0:
            raise ValueError(f"Standard concentration must be positive, got {self.standard}")
        if not self.weight > 0:
            raise ValueError(f"Weight must be positive, got {self.weight}")


class ReferenceStandards(Mapping):
    """Read-only table of metal -> ReferenceStandard.

    Alternate regulatory limits are expressed as a new table (see ``replace``);
    an existing table is never modified.
    """

    def __init__(self, entries: Mapping[str, ReferenceStandard]):
        self._entries = MappingProxyType(dict(entries))

    @classmethod
    def from_mappings(
        cls,
        standards: Mapping[str, float],
        weights: Mapping[str, float] | None = None,
    ) -> "ReferenceStandards":
        """Build a table from plain dicts; missing weights default to 1.0."""
        weights = weights or {}
        unknown = set(weights) - set(standards)
        if unknown:
            raise ValueError(f"Weights given for metals without a standard: {', '.join(sorted(unknown))}")
        return cls(
            {
                metal: ReferenceStandard(float(value), float(weights.get(metal, 1.0)))
                for metal, value in standards.items()
            }
        )

    def replace(self, **changes: ReferenceStandard | float) -> "ReferenceStandards":
        """Return a copy with some metals overridden (a bare float keeps the old weight)."""
        entries = dict(self._entries)
        for metal, change in changes.items():
            if not isinstance(change, ReferenceStandard):
                weight = entries[metal].weight if metal in entries else 1.0
                change = ReferenceStandard(float(change), weight)
            entries[metal] = change
        return ReferenceStandards(entries)

    def standard_for(self, metal: str) -> float:
        if metal not in self._entries:
            raise ValueError(f"Unknown metal: {metal}")
        return self._entries[metal].standard

    def weight_for(self, metal: str) -> float:
        if metal not in self._entries:
            raise ValueError(f"Unknown metal: {metal}")
        return self._entries[metal].weight

    def __getitem__(self, metal: str) -> ReferenceStandard:
        return self._entries[metal]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        body = ", ".join(f"{m}={e.standard:g}/w{e.weight:g}" for m, e in self._entries.items())
        return f"<ReferenceStandards {body}>"


DEFAULT_STANDARDS = ReferenceStandards.from_mappings(WHO_STANDARDS, METAL_WEIGHTS)
