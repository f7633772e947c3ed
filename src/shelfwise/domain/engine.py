"""Date resolution engine.

Turns an expiry date, a total shelf-life and an origin class into the DC
acceptance deadline and the store deadline, with formula strings that show
how each date was derived.

Two arithmetic modes exist, selected by the matched tier:

- ABSOLUTE (longer shelf-lives): count back from the expiry date,
  ``expiry - window + 1 day``.
- RELATIVE (very short shelf-lives): count forward from the manufacture
  date, ``manufacture + window``.

The engine is pure: no I/O, no shared state. "Today" is sampled once per call
unless the caller injects it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from .dates import (
    count_back,
    count_forward,
    derive_manufacture_date,
    format_ymd,
    parse_date,
    parse_optional_date,
)
from .rule_table import RuleBook, ShelfLifeRule
from .standard_rules import STANDARD_RULEBOOK
from .value_objects import CalculationResult, Origin, RuleMode

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Deadlines:
    """Both deadlines of one calculation and the formulas that produced them."""

    dc: date
    store: date
    dc_formula: str
    store_formula: str


def absolute_deadlines(rule: ShelfLifeRule, expiry: date) -> Deadlines:
    """Count the tier's windows back from the expiry date."""
    dc = count_back(expiry, rule.dc_window)
    store = count_back(expiry, rule.store_window)
    anchor = format_ymd(expiry)
    return Deadlines(
        dc=dc,
        store=store,
        dc_formula=(
            f"[Rule: {rule.label}] expiry ({anchor}) - {rule.dc_display}"
            f" + 1 day = {format_ymd(dc)}"
        ),
        store_formula=(
            f"[Rule: {rule.label}] expiry ({anchor}) - {rule.store_display}"
            f" + 1 day = {format_ymd(store)}"
        ),
    )


def relative_deadlines(rule: ShelfLifeRule, manufactured: date) -> Deadlines:
    """Count the tier's windows forward from the manufacture date."""
    dc = count_forward(manufactured, rule.dc_window)
    store = count_forward(manufactured, rule.store_window)
    anchor = format_ymd(manufactured)
    return Deadlines(
        dc=dc,
        store=store,
        dc_formula=(
            f"[Rule: {rule.label}] manufactured ({anchor}) + {rule.dc_display}"
            f" = {format_ymd(dc)}"
        ),
        store_formula=(
            f"[Rule: {rule.label}] manufactured ({anchor}) + {rule.store_display}"
            f" = {format_ymd(store)}"
        ),
    )


def resolve_acceptance(  # pylint: disable=too-many-arguments
    expiry_date: str,
    total_shelf_life_days: int,
    is_domestic: bool,
    manufacture_date: str | None = None,
    *,
    rulebook: RuleBook = STANDARD_RULEBOOK,
    today: date | None = None,
) -> CalculationResult:
    """Resolve the DC and store deadlines for one product.

    Args:
        expiry_date: Expiry date as an ISO-like string. The caller is expected
            to have validated it.
        total_shelf_life_days: Total shelf-life in days.
        is_domestic: True for domestically produced goods, False for imports.
        manufacture_date: Optional manufacture date string. When absent (or
            blank) it is derived as ``expiry - total_shelf_life_days + 1 day``.
        rulebook: Rule tables to resolve against. Defaults to the standard tables.
        today: The current date. Sampled once from the system clock if omitted.

    Returns:
        A fresh `CalculationResult`. A deadline that has already passed is a
        normal outcome (`can_accept`/`can_release` are False), not an error.

    Raises:
        InvalidDateError: If `expiry_date` or `manufacture_date` cannot be parsed.
        DateOutOfRangeError: If a derived date or deadline falls outside years
            1-9999 (e.g. an enormous shelf-life).
    """
    if today is None:
        today = date.today()

    expiry = parse_date(expiry_date, "expiry date")
    supplied = parse_optional_date(manufacture_date, "manufacture date")
    manufactured = supplied or derive_manufacture_date(expiry, total_shelf_life_days)

    origin = Origin.from_flag(is_domestic)
    table = rulebook.for_origin(origin)
    rule = table.resolve(total_shelf_life_days)
    logger.debug(
        "Shelf-life of %d days resolved to tier '%s' (%s, %s)",
        total_shelf_life_days,
        rule.label,
        table.name,
        rule.mode.value,
    )

    if rule.mode is RuleMode.RELATIVE:
        deadlines = relative_deadlines(rule, manufactured)
    else:
        deadlines = absolute_deadlines(rule, expiry)

    return CalculationResult(
        total_shelf_life=total_shelf_life_days,
        manufacture_date=manufactured,
        expiry_date=expiry,
        dc_acceptance_date=deadlines.dc,
        dc_release_date=deadlines.store,
        can_accept=today <= deadlines.dc,
        can_release=today <= deadlines.store,
        rule_used=rule.label,
        dc_formula=deadlines.dc_formula,
        store_formula=deadlines.store_formula,
        mode=rule.mode,
        origin=origin,
    )
