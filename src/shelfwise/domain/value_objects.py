"""Module including value objects used across the domain layer."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any


class Origin(Enum):
    """Enumeration of product origin classes."""

    DOMESTIC = "domestic"
    IMPORTED = "imported"

    @classmethod
    def from_flag(cls, is_domestic: bool) -> Origin:
        """Map the upstream ``isDomestic`` flag onto an origin class."""
        return cls.DOMESTIC if is_domestic else cls.IMPORTED


class RuleMode(Enum):
    """How a tier's acceptance windows are anchored.

    ABSOLUTE counts backward from the expiry date; RELATIVE counts forward
    from the manufacture date.
    """

    ABSOLUTE = "absolute"
    RELATIVE = "relative"


@dataclass(frozen=True, slots=True)
class CalculationResult:
    """Value object holding the outcome of one acceptance calculation.

    Conventions:
      - All dates are calendar dates (no time of day).
      - `dc_release_date` is the store deadline; the name is kept for
        compatibility with stored results. Use `store_deadline` in new code.
      - `manufacture_date` is the date actually used: the supplied one, or the
        one derived from the expiry date when none was supplied.
    """

    total_shelf_life: int
    manufacture_date: date
    expiry_date: date
    dc_acceptance_date: date
    dc_release_date: date
    can_accept: bool
    can_release: bool
    rule_used: str
    dc_formula: str
    store_formula: str
    mode: RuleMode
    origin: Origin

    @property
    def store_deadline(self) -> date:
        """Last day a store may keep the product on shelf."""
        return self.dc_release_date

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable mapping using the upstream camelCase keys."""
        return {
            "totalShelfLife": self.total_shelf_life,
            "manufactureDate": self.manufacture_date.isoformat(),
            "expiryDate": self.expiry_date.isoformat(),
            "dcAcceptanceDate": self.dc_acceptance_date.isoformat(),
            "dcReleaseDate": self.dc_release_date.isoformat(),
            "canAccept": self.can_accept,
            "canRelease": self.can_release,
            "ruleUsed": self.rule_used,
            "dcFormula": self.dc_formula,
            "storeFormula": self.store_formula,
            "mode": self.mode.value,
            "origin": self.origin.value,
        }
