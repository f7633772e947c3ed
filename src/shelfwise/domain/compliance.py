"""Label compliance findings and the overall receiving verdict.

The upstream label analysis (OCR of the physical label) arrives as a JSON
document. This module reads the parts of it that matter for receiving,
derives compliance findings (missing mandatory label information), and
combines them with the engine's temporal verdict: a shipment passes only when
the DC deadline has not passed and there are no findings.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from .dates import format_ymd
from .errors import InvalidLabelAnalysisError
from .value_objects import CalculationResult

# Regulated allergen categories that must be declared on the label.
ALLERGEN_CATEGORIES: tuple[str, ...] = (
    "Crustaceans and their products",
    "Mango and its products",
    "Peanuts and their products",
    "Milk (cow or goat) and its products",
    "Eggs and their products",
    "Tree nuts and their products",
    "Sesame and its products",
    "Gluten-containing cereals and their products",
    "Soybeans and their products",
    "Fish and their products",
    "Sulphites",
)

MISSING_MEAT_ORIGIN = "Meat ingredient is missing its country of origin"
MISSING_MANUFACTURER_NAME = "Missing manufacturer name"
MISSING_MANUFACTURER_PHONE = "Missing manufacturer phone number"
MISSING_MANUFACTURER_ADDRESS = "Missing manufacturer address"
MISSING_EXPIRY_DATE = "Expiry date could not be identified"


@dataclass(frozen=True, slots=True)
class Manufacturer:
    """Manufacturer contact details printed on the label."""

    name: str = ""
    phone: str = ""
    address: str = ""


@dataclass(frozen=True, slots=True)
class AllergenInfo:
    """One allergen category and whether the label declares it."""

    category: str
    found: bool
    notes: str | None = None


@dataclass(frozen=True, slots=True)
class LabelDates:
    """Date information read from the label."""

    total_shelf_life_days: int
    expiry_date: str | None = None
    manufacture_date: str | None = None


@dataclass(frozen=True, slots=True)
class LabelAnalysis:  # pylint: disable=too-many-instance-attributes
    """What the upstream label analysis extracted from one product label."""

    product_name: str
    is_domestic: bool
    dates: LabelDates
    manufacturer: Manufacturer = field(default_factory=Manufacturer)
    allergens: tuple[AllergenInfo, ...] = ()
    has_pork_or_beef: bool = False
    meat_origin: str | None = None
    price_visible: bool = False
    price: str | None = None

    @property
    def found_allergens(self) -> list[str]:
        """Categories the label declares."""
        return [a.category for a in self.allergens if a.found]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LabelAnalysis:
        """Build from the upstream JSON document (camelCase keys).

        Raises:
            InvalidLabelAnalysisError: If the document or one of its sections
                is not an object, `isDomestic` or `dates.totalShelfLifeDays`
                is missing or not usable, or a text or date field holds a
                list, object or boolean. Numbers in text fields (phone
                numbers, prices) are kept as their string form.
        """
        if not isinstance(data, Mapping):
            raise InvalidLabelAnalysisError("<document>", "must be a JSON object")
        if not isinstance(data.get("isDomestic"), bool):
            raise InvalidLabelAnalysisError("isDomestic", "must be true or false")

        dates = _section(data, "dates")
        days = dates.get("totalShelfLifeDays")
        if isinstance(days, bool) or not isinstance(days, (int, float)):
            raise InvalidLabelAnalysisError("dates.totalShelfLifeDays")

        maker = _section(data, "manufacturer")

        return cls(
            product_name=_text(data, "productName"),
            is_domestic=data["isDomestic"],
            dates=LabelDates(
                total_shelf_life_days=round(days),
                expiry_date=_date_text(dates, "expiryDate"),
                manufacture_date=_date_text(dates, "manufactureDate"),
            ),
            manufacturer=Manufacturer(
                name=_text(maker, "name", "manufacturer.name"),
                phone=_text(maker, "phone", "manufacturer.phone"),
                address=_text(maker, "address", "manufacturer.address"),
            ),
            allergens=tuple(
                AllergenInfo(
                    category=_text(item, "category", "allergens.category"),
                    found=bool(item.get("found")),
                    notes=_text(item, "notes", "allergens.notes") or None,
                )
                for item in data.get("allergens") or ()
                if isinstance(item, Mapping)
            ),
            has_pork_or_beef=bool(data.get("hasPorkOrBeef")),
            meat_origin=_text(data, "meatOrigin") or None,
            price_visible=bool(data.get("priceVisible")),
            price=_text(data, "price") or None,
        )


def _section(data: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = data.get(key) or {}
    if not isinstance(value, Mapping):
        raise InvalidLabelAnalysisError(key, "must be an object")
    return value


def _text(section: Mapping[str, Any], key: str, field: str | None = None) -> str:
    """Read a text field. OCR output sometimes types digits as numbers."""
    value = section.get(key)
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    raise InvalidLabelAnalysisError(field or key, "must be a string")


def _date_text(dates: Mapping[str, Any], key: str) -> str | None:
    value = dates.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise InvalidLabelAnalysisError(f"dates.{key}", "must be a date string")
    return value or None


def collect_label_findings(label: LabelAnalysis) -> list[str]:
    """Return the compliance findings for a label, in a stable order."""
    findings: list[str] = []
    if label.has_pork_or_beef and not label.meat_origin:
        findings.append(MISSING_MEAT_ORIGIN)
    if not label.manufacturer.name.strip():
        findings.append(MISSING_MANUFACTURER_NAME)
    if not label.manufacturer.phone.strip():
        findings.append(MISSING_MANUFACTURER_PHONE)
    if not label.manufacturer.address.strip():
        findings.append(MISSING_MANUFACTURER_ADDRESS)
    if not label.dates.expiry_date:
        findings.append(MISSING_EXPIRY_DATE)
    return findings


@dataclass(frozen=True, slots=True)
class ComplianceVerdict:
    """Overall receiving decision.

    `findings` are the label compliance findings only; `reasons` adds the
    temporal reason (if any) and is what a person reads.
    """

    is_passed: bool
    can_accept: bool
    findings: tuple[str, ...]
    reasons: tuple[str, ...]


def aggregate_verdict(
    calculation: CalculationResult | None, findings: Iterable[str]
) -> ComplianceVerdict:
    """Combine the temporal verdict with label findings.

    Args:
        calculation: The engine result, or None if no calculation was possible
            (e.g. the expiry date could not be read).
        findings: Label compliance findings.

    Returns:
        A verdict that passes only when the DC deadline has not passed and
        there are no findings.
    """
    findings = tuple(findings)
    can_accept = calculation is not None and calculation.can_accept
    reasons = list(findings)
    if calculation is not None and not calculation.can_accept:
        reasons.append(
            "DC acceptance deadline "
            f"{format_ymd(calculation.dc_acceptance_date)} has passed"
        )
    return ComplianceVerdict(
        is_passed=can_accept and not findings,
        can_accept=can_accept,
        findings=findings,
        reasons=tuple(reasons),
    )


@dataclass(frozen=True, slots=True)
class InspectionReport:
    """Everything decided about one inspected label."""

    label: LabelAnalysis
    calculation: CalculationResult | None
    verdict: ComplianceVerdict

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable mapping for display or storage."""
        return {
            "productName": self.label.product_name,
            "isDomestic": self.label.is_domestic,
            "allergens": self.label.found_allergens,
            "calculation": (
                self.calculation.to_dict() if self.calculation is not None else None
            ),
            "complianceSummary": {
                "isPassed": self.verdict.is_passed,
                "reasons": list(self.verdict.reasons),
            },
        }
