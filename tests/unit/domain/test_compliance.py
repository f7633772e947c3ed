"""Unit tests for label compliance findings and the receiving verdict."""

from datetime import date

import pytest

from shelfwise.domain import compliance
from shelfwise.domain.compliance import (
    InspectionReport,
    LabelAnalysis,
    aggregate_verdict,
    collect_label_findings,
)
from shelfwise.domain.engine import resolve_acceptance
from shelfwise.domain.errors import InvalidLabelAnalysisError

# pylint: disable=redefined-outer-name


@pytest.fixture
def label_doc():
    """A complete upstream label analysis document with nothing missing."""
    return {
        "productName": "Pork Dumplings",
        "isDomestic": True,
        "dates": {
            "totalShelfLifeDays": 365,
            "expiryDate": "2025-06-01",
            "manufactureDate": None,
        },
        "manufacturer": {
            "name": "Good Foods Ltd.",
            "phone": "02-1234-5678",
            "address": "1 Market Rd.",
        },
        "allergens": [
            {"category": "Soybeans and their products", "found": True},
            {"category": "Sulphites", "found": False, "notes": "none listed"},
        ],
        "hasPorkOrBeef": True,
        "meatOrigin": "Pork: domestic",
        "priceVisible": True,
        "price": "129",
    }


def calc(today):
    """Scenario A calculation evaluated on `today`."""
    return resolve_acceptance("2025-06-01", 365, True, today=today)


class TestLabelAnalysisFromDict:
    """Reading the upstream JSON document."""

    @staticmethod
    def test_reads_camel_case_fields(label_doc) -> None:
        """Every field of interest is carried over."""
        label = LabelAnalysis.from_dict(label_doc)
        assert label.product_name == "Pork Dumplings"
        assert label.is_domestic is True
        assert label.dates.total_shelf_life_days == 365
        assert label.dates.expiry_date == "2025-06-01"
        assert label.dates.manufacture_date is None
        assert label.manufacturer.phone == "02-1234-5678"
        assert label.found_allergens == ["Soybeans and their products"]
        assert label.allergens[1].notes == "none listed"
        assert label.meat_origin == "Pork: domestic"
        assert label.price == "129"

    @staticmethod
    def test_fractional_days_are_rounded(label_doc) -> None:
        """OCR-estimated shelf-lives may be fractional."""
        label_doc["dates"]["totalShelfLifeDays"] = 364.6
        assert LabelAnalysis.from_dict(label_doc).dates.total_shelf_life_days == 365

    @staticmethod
    def test_missing_optional_sections_default(label_doc) -> None:
        """Manufacturer, allergens and meat info are optional."""
        for key in ("manufacturer", "allergens", "hasPorkOrBeef", "meatOrigin"):
            del label_doc[key]
        label = LabelAnalysis.from_dict(label_doc)
        assert label.manufacturer.name == ""
        assert not label.allergens
        assert not label.has_pork_or_beef

    @staticmethod
    @pytest.mark.parametrize("value", [None, "yes", 1])
    def test_is_domestic_must_be_boolean(label_doc, value) -> None:
        """The origin flag drives table selection, so it must be explicit."""
        label_doc["isDomestic"] = value
        with pytest.raises(InvalidLabelAnalysisError) as excinfo:
            LabelAnalysis.from_dict(label_doc)
        assert excinfo.value.field == "isDomestic"

    @staticmethod
    @pytest.mark.parametrize("value", [None, "365", True])
    def test_shelf_life_must_be_a_number(label_doc, value) -> None:
        """Without a day count there is no tier to resolve."""
        label_doc["dates"]["totalShelfLifeDays"] = value
        with pytest.raises(
            InvalidLabelAnalysisError,
            match=r"Label analysis field 'dates.totalShelfLifeDays' is required\.",
        ):
            LabelAnalysis.from_dict(label_doc)

    @staticmethod
    def test_document_must_be_an_object() -> None:
        with pytest.raises(InvalidLabelAnalysisError) as excinfo:
            LabelAnalysis.from_dict([1, 2])  # type: ignore[arg-type]
        assert excinfo.value.field == "<document>"

    @staticmethod
    @pytest.mark.parametrize("key", ["dates", "manufacturer"])
    def test_sections_must_be_objects(label_doc, key) -> None:
        label_doc[key] = ["not", "an", "object"]
        with pytest.raises(InvalidLabelAnalysisError, match="must be an object") as excinfo:
            LabelAnalysis.from_dict(label_doc)
        assert excinfo.value.field == key

    @staticmethod
    def test_malformed_allergen_entries_are_skipped(label_doc) -> None:
        label_doc["allergens"] = ["Sulphites", {"category": "Sulphites", "found": True}]
        assert LabelAnalysis.from_dict(label_doc).found_allergens == ["Sulphites"]

    @staticmethod
    def test_numbers_in_text_fields_are_kept_as_text(label_doc) -> None:
        """OCR output may type a phone number or price as a JSON number."""
        label_doc["productName"] = 7
        label_doc["manufacturer"]["phone"] = 223456789
        label_doc["price"] = 129.5
        label = LabelAnalysis.from_dict(label_doc)

        assert label.product_name == "7"
        assert label.manufacturer.phone == "223456789"
        assert label.price == "129.5"
        assert compliance.MISSING_MANUFACTURER_PHONE not in collect_label_findings(label)

    @staticmethod
    @pytest.mark.parametrize(
        ("path", "value", "field"),
        [
            (("manufacturer", "phone"), ["02", "1234"], "manufacturer.phone"),
            (("manufacturer", "name"), True, "manufacturer.name"),
            (("productName",), {"en": "Dumplings"}, "productName"),
            (("meatOrigin",), False, "meatOrigin"),
        ],
    )
    def test_unusable_text_fields_raise(label_doc, path, value, field) -> None:
        target = label_doc
        for key in path[:-1]:
            target = target[key]
        target[path[-1]] = value
        with pytest.raises(InvalidLabelAnalysisError, match="must be a string") as excinfo:
            LabelAnalysis.from_dict(label_doc)
        assert excinfo.value.field == field

    @staticmethod
    @pytest.mark.parametrize("key", ["expiryDate", "manufactureDate"])
    def test_dates_must_be_strings(label_doc, key) -> None:
        label_doc["dates"][key] = 20250101
        with pytest.raises(InvalidLabelAnalysisError) as excinfo:
            LabelAnalysis.from_dict(label_doc)
        assert excinfo.value.field == f"dates.{key}"


class TestFindings:
    """Label compliance findings."""

    @staticmethod
    def test_complete_label_has_no_findings(label_doc) -> None:
        """Nothing missing, nothing to report."""
        assert not collect_label_findings(LabelAnalysis.from_dict(label_doc))

    @staticmethod
    def test_missing_information_in_stable_order(label_doc) -> None:
        """Each missing item yields one finding, in a fixed order."""
        label_doc["meatOrigin"] = ""
        label_doc["manufacturer"] = {"name": " ", "phone": "", "address": ""}
        label_doc["dates"]["expiryDate"] = ""
        findings = collect_label_findings(LabelAnalysis.from_dict(label_doc))
        assert findings == [
            compliance.MISSING_MEAT_ORIGIN,
            compliance.MISSING_MANUFACTURER_NAME,
            compliance.MISSING_MANUFACTURER_PHONE,
            compliance.MISSING_MANUFACTURER_ADDRESS,
            compliance.MISSING_EXPIRY_DATE,
        ]

    @staticmethod
    def test_meat_origin_only_required_for_pork_or_beef(label_doc) -> None:
        """No pork or beef, no origin requirement."""
        label_doc["hasPorkOrBeef"] = False
        label_doc["meatOrigin"] = None
        assert not collect_label_findings(LabelAnalysis.from_dict(label_doc))


class TestVerdict:
    """Combining the temporal verdict with findings."""

    @staticmethod
    def test_passes_when_open_and_clean() -> None:
        """Open DC window and no findings passes."""
        verdict = aggregate_verdict(calc(date(2024, 7, 1)), [])
        assert verdict.is_passed
        assert verdict.can_accept
        assert verdict.reasons == ()

    @staticmethod
    def test_passed_deadline_adds_reason() -> None:
        """A passed DC deadline fails the verdict with a readable reason."""
        verdict = aggregate_verdict(calc(date(2024, 10, 1)), [])
        assert not verdict.is_passed
        assert not verdict.can_accept
        assert verdict.reasons == ("DC acceptance deadline 2024-09-05 has passed",)

    @staticmethod
    def test_findings_fail_an_open_window() -> None:
        """Findings alone are enough to reject."""
        verdict = aggregate_verdict(
            calc(date(2024, 7, 1)), [compliance.MISSING_MANUFACTURER_PHONE]
        )
        assert verdict.can_accept
        assert not verdict.is_passed
        assert verdict.findings == (compliance.MISSING_MANUFACTURER_PHONE,)

    @staticmethod
    def test_no_calculation_cannot_accept() -> None:
        """Without a calculation the shipment cannot be accepted."""
        verdict = aggregate_verdict(None, [compliance.MISSING_EXPIRY_DATE])
        assert not verdict.can_accept
        assert not verdict.is_passed
        assert verdict.reasons == (compliance.MISSING_EXPIRY_DATE,)


def test_inspection_report_to_dict(label_doc) -> None:
    """The report serializes with the upstream camelCase keys."""
    label = LabelAnalysis.from_dict(label_doc)
    calculation = calc(date(2024, 7, 1))
    report = InspectionReport(
        label=label,
        calculation=calculation,
        verdict=aggregate_verdict(calculation, []),
    )
    data = report.to_dict()
    assert data["productName"] == "Pork Dumplings"
    assert data["isDomestic"] is True
    assert data["allergens"] == ["Soybeans and their products"]
    assert data["calculation"]["dcAcceptanceDate"] == "2024-09-05"
    assert data["complianceSummary"] == {"isPassed": True, "reasons": []}


def test_allergen_categories_are_unique() -> None:
    """The regulated category list has no duplicates."""
    assert len(set(compliance.ALLERGEN_CATEGORIES)) == len(
        compliance.ALLERGEN_CATEGORIES
    )
