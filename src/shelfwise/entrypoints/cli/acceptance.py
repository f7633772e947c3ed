"""SHELFWISE acceptance commands.

- ``shelfwise resolve`` computes the DC and store deadlines for one product.
- ``shelfwise inspect`` reads an upstream label analysis (JSON) and prints the
  receiving verdict.
- ``shelfwise rules`` prints the tier table in force.

Behavior
- Results go to **stdout** (a Rich table, or JSON with ``--json``); notices go
  to **stderr** so JSON output can be piped.
- ``--today`` freezes the current date for what-if checks.

Failure modes
- Invalid or out-of-range dates and invalid label documents → usage error
  (exit code 2).
- Unreadable or invalid rule book → ``ClickException`` (exit code 1).
- ``inspect`` exits with 1 when the shipment is rejected.
"""

from __future__ import annotations

import json
from datetime import date
from typing import IO, TYPE_CHECKING, Any

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from shelfwise.bootstrap import (
    FixedClock,
    RuleFileError,
    RulesPathNotFoundError,
    bootstrap,
)
from shelfwise.domain.compliance import LabelAnalysis
from shelfwise.domain.errors import (
    DateOutOfRangeError,
    InvalidDateError,
    InvalidLabelAnalysisError,
)
from shelfwise.domain.standard_rules import STANDARD_RULEBOOK
from shelfwise.domain.value_objects import Origin
from shelfwise.service_layer import commands

from .helpers import DATE, error, success, warn

if TYPE_CHECKING:
    from shelfwise.bootstrap import AppContainer
    from shelfwise.domain.compliance import InspectionReport
    from shelfwise.domain.value_objects import CalculationResult

OPEN = "[green]open[/green]"
PASSED = "[red]passed[/red]"


def _container(ctx: click.Context, today: date | None = None) -> AppContainer:
    rules_path = (ctx.obj or {}).get("rules_path")
    try:
        container = bootstrap(
            rules_path=rules_path,
            clock=FixedClock(today) if today is not None else None,
        )
    except (RuleFileError, RulesPathNotFoundError) as e:
        raise click.ClickException(str(e)) from e
    if container.rulebook is not STANDARD_RULEBOOK:
        warn(f"Using rule book {container.rulebook.version}.")
    return container


def _echo_json(payload: dict[str, Any]) -> None:
    click.echo(json.dumps(payload, ensure_ascii=False, indent=2))


def _print_calculation(console: Console, result: CalculationResult) -> None:
    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column(style="bold")
    table.add_column()
    table.add_row("Tier", escape(result.rule_used))
    table.add_row("Mode", result.mode.value)
    table.add_row("Origin", result.origin.value)
    table.add_row("Shelf-life", f"{result.total_shelf_life} days")
    table.add_row("Manufactured", result.manufacture_date.isoformat())
    table.add_row("Expiry", result.expiry_date.isoformat())
    table.add_row(
        "DC deadline",
        f"{result.dc_acceptance_date.isoformat()} "
        f"({OPEN if result.can_accept else PASSED})",
    )
    table.add_row(
        "Store deadline",
        f"{result.store_deadline.isoformat()} "
        f"({OPEN if result.can_release else PASSED})",
    )
    console.print(table)
    console.print(result.dc_formula, soft_wrap=True, markup=False)
    console.print(result.store_formula, soft_wrap=True, markup=False)


@click.command()
@click.argument("expiry", type=DATE)
@click.argument("shelf_life_days", type=click.IntRange(min=0))
@click.option(
    "--domestic/--imported",
    "is_domestic",
    default=True,
    show_default=True,
    help="Origin class of the product.",
)
@click.option(
    "--manufactured",
    type=DATE,
    default=None,
    help="Manufacture date. Derived from the expiry date when omitted.",
)
@click.option(
    "--today",
    type=DATE,
    default=None,
    help="Evaluate deadlines as of this date instead of the current date.",
)
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON.")
@click.pass_context
def resolve(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    expiry: date,
    shelf_life_days: int,
    is_domestic: bool,
    manufactured: date | None,
    today: date | None,
    as_json: bool,
) -> None:
    """Compute the DC acceptance and store deadlines of a product.

    EXPIRY is the expiry date (YYYY-MM-DD); SHELF_LIFE_DAYS is the product's
    total shelf-life in days.
    """
    container = _container(ctx, today)
    try:
        result: CalculationResult = container.message_bus.handle(
            commands.ResolveAcceptance(
                expiry_date=expiry.isoformat(),
                total_shelf_life_days=shelf_life_days,
                is_domestic=is_domestic,
                manufacture_date=manufactured.isoformat() if manufactured else None,
            )
        )
    except DateOutOfRangeError as e:
        raise click.UsageError(str(e), ctx) from e
    if as_json:
        _echo_json(result.to_dict())
    else:
        _print_calculation(Console(), result)


@click.command()
@click.argument("label_json", type=click.File("r", encoding="utf-8"))
@click.option(
    "--today",
    type=DATE,
    default=None,
    help="Evaluate deadlines as of this date instead of the current date.",
)
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON.")
@click.pass_context
def inspect(
    ctx: click.Context, label_json: IO[str], today: date | None, as_json: bool
) -> None:
    """Decide whether a shipment may be received, from its label analysis.

    LABEL_JSON is a label analysis document as produced by the label reader
    (use '-' for stdin). Exits with status 1 when the shipment is rejected.
    """
    try:
        label = LabelAnalysis.from_dict(json.load(label_json))
    except json.JSONDecodeError as e:
        raise click.BadParameter(
            f"not valid JSON ({e.msg})", param_hint="LABEL_JSON"
        ) from e
    except InvalidLabelAnalysisError as e:
        raise click.BadParameter(str(e), param_hint="LABEL_JSON") from e

    container = _container(ctx, today)
    try:
        report: InspectionReport = container.message_bus.handle(
            commands.InspectLabel(label=label)
        )
    except (InvalidDateError, DateOutOfRangeError) as e:
        raise click.BadParameter(str(e), param_hint="LABEL_JSON") from e

    if as_json:
        _echo_json(report.to_dict())
    else:
        console = Console()
        name = report.label.product_name or "(unnamed product)"
        console.print(f"[bold]{escape(name)}[/bold]")
        if report.calculation is not None:
            _print_calculation(console, report.calculation)
        if allergens := report.label.found_allergens:
            console.print(f"Allergens: {', '.join(allergens)}", markup=False)

    if report.verdict.is_passed:
        success("Shipment accepted.")
        return
    error("Shipment rejected.")
    for reason in report.verdict.reasons:
        click.echo(f"  - {reason}", err=True)
    ctx.exit(1)


@click.command()
@click.option(
    "--domestic/--imported",
    "is_domestic",
    default=True,
    show_default=True,
    help="Which origin class to list.",
)
@click.pass_context
def rules(ctx: click.Context, is_domestic: bool) -> None:
    """List the shelf-life tiers in force."""
    container = _container(ctx)
    rule_table = container.rulebook.for_origin(Origin.from_flag(is_domestic))

    table = Table(title=f"Shelf-life tiers ({rule_table.name})")
    table.add_column("Tier")
    table.add_column("Days", justify="right")
    table.add_column("DC window")
    table.add_column("Store window")
    table.add_column("Mode")
    for rule in rule_table:
        days = (
            f"{rule.min_days}+"
            if rule.max_days is None
            else f"{rule.min_days}-{rule.max_days - 1}"
        )
        table.add_row(
            escape(rule.label),
            days,
            escape(rule.dc_display),
            escape(rule.store_display),
            rule.mode.value,
        )
    Console().print(table)
