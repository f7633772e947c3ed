"""Handlers for acceptance calculations and label inspections."""

import logging
from collections.abc import Callable

from shelfwise.domain import engine
from shelfwise.domain.compliance import (
    InspectionReport,
    aggregate_verdict,
    collect_label_findings,
)
from shelfwise.domain.rule_table import RuleBook
from shelfwise.domain.value_objects import CalculationResult
from shelfwise.interfaces.clock import Clock
from shelfwise.service_layer import commands

logger = logging.getLogger(__name__)


def resolve_acceptance(
    cmd: commands.ResolveAcceptance, rulebook: RuleBook, clock: Clock
) -> CalculationResult:
    """Resolve the DC and store deadlines of one product."""

    result = engine.resolve_acceptance(
        cmd.expiry_date,
        cmd.total_shelf_life_days,
        cmd.is_domestic,
        cmd.manufacture_date,
        rulebook=rulebook,
        today=clock.today(),
    )
    logger.info(
        "DC deadline %s (%s), store deadline %s (%s) by tier '%s'",
        result.dc_acceptance_date,
        "open" if result.can_accept else "passed",
        result.store_deadline,
        "open" if result.can_release else "passed",
        result.rule_used,
    )
    return result


def inspect_label(
    cmd: commands.InspectLabel, rulebook: RuleBook, clock: Clock
) -> InspectionReport:
    """Decide whether a shipment may be received, from its label analysis.

    A label without a readable expiry date gets no calculation; that shows up
    as a finding and fails the verdict.
    """

    label = cmd.label
    findings = collect_label_findings(label)

    calculation = None
    if label.dates.expiry_date:
        calculation = engine.resolve_acceptance(
            label.dates.expiry_date,
            label.dates.total_shelf_life_days,
            label.is_domestic,
            label.dates.manufacture_date,
            rulebook=rulebook,
            today=clock.today(),
        )

    verdict = aggregate_verdict(calculation, findings)
    if verdict.is_passed:
        logger.info("Label '%s' passed inspection", label.product_name)
    else:
        logger.info(
            "Label '%s' rejected: %s", label.product_name, "; ".join(verdict.reasons)
        )
    return InspectionReport(label=label, calculation=calculation, verdict=verdict)


COMMAND_HANDLERS: dict[type, Callable[..., object]] = {
    commands.ResolveAcceptance: resolve_acceptance,
    commands.InspectLabel: inspect_label,
}
