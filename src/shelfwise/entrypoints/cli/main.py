"""SHELFWISE CLI entry point.

The top-level ``shelfwise`` group (a Click-Extra group) owns everything that is
shared by the subcommands: console verbosity, the flight recorder, per-logger
levels and the choice of rule book. The subcommands themselves live in
`shelfwise.entrypoints.cli.acceptance`.

Commands
- ``shelfwise resolve``: DC and store deadlines for one product.
- ``shelfwise inspect``: receiving verdict from a label analysis document.
- ``shelfwise rules``: the shelf-life tiers in force.

Examples
    $ shelfwise resolve 2025-06-01 365
    $ shelfwise -v --rules draft.toml resolve 2025-06-01 365 --imported
    $ shelfwise inspect label.json --json
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from shelfwise import __version__
from shelfwise.config import LOG_PATH_ENV, RULES_PATH_ENV
from shelfwise.logging import (
    DEFAULT_CAPACITY,
    LoggingSettings,
    configure_logging,
    console_level,
    log_startup,
)

from .acceptance import inspect, resolve, rules
from .helpers.log_level_parser import parse_log_level

logger = logging.getLogger(__name__)

DEFAULT_LOG_PATH = (
    Path(user_log_dir("shelfwise", appauthor=False, ensure_exists=True)) / "latest.log"
)

HELP = """Shelf-life acceptance checks for receiving.

    SHELFWISE decides whether a food shipment may still be received at a
    distribution center (DC) and released to stores, based on its remaining
    shelf-life and a tiered rule book for domestic and imported products.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "-v",
    "--verbose",
    "verbose_count",
    count=True,
    help="More console output: -v shows INFO, -vv shows DEBUG.",
)
@click.option(
    "-q",
    "--quiet",
    "quiet_count",
    count=True,
    help="Less console output: -q shows ERROR only, -qq CRITICAL only.",
)
@click.option(
    "--debug/--no-debug",
    default=False,
    help="DEBUG console output with timestamps, logger names and source paths.",
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_LOG_PATH,
    envvar=LOG_PATH_ENV,
    show_default=True,
    show_envvar=True,
    help="File the flight recorder writes to. Truncated on every run.",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    default=True,
    envvar="SHELFWISE_FLIGHT_RECORDER",
    show_envvar=True,
    help=(
        "Buffer DEBUG records in memory and write them to --log-path as soon "
        "as a WARNING or worse is logged."
    ),
)
@click.option(
    "--flight-recorder-capacity",
    type=click.IntRange(min=1),
    default=DEFAULT_CAPACITY,
    envvar="SHELFWISE_FLIGHT_RECORDER_CAPACITY",
    hidden=True,
    help="Number of records the flight recorder keeps in memory.",
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    default=False,
    envvar="SHELFWISE_FORCE_FLUSH_FLIGHT_RECORDER",
    show_default=True,
    show_envvar=True,
    help="Also write the flight recorder buffer on exit, even after a clean run.",
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    envvar=["SHELFWISE_LOGGER_LEVEL", "SHELFWISE_LOGGER_LEVELS"],
    show_envvar=True,
    help=(
        "Minimum level for one logger, as NAME=LEVEL (e.g. "
        "-L shelfwise.domain=INFO). Repeatable; applies to the console and the "
        "flight recorder."
    ),
)
@click.option(
    "--rules",
    "rules_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    envvar=RULES_PATH_ENV,
    show_envvar=True,
    help="TOML rule book to use instead of the standard tiers.",
)
@clickx.pass_context
def shelfwise(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder: bool,
    flight_recorder_capacity: int,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
    rules_path: Path | None,
) -> None:
    """Shelf-life acceptance checks for receiving."""
    settings = LoggingSettings(
        console_level=console_level(verbose_count, quiet_count),
        debug=debug,
        color=ctx.color is not False,  # None means "auto"
        log_path=log_path if flight_recorder else None,
        capacity=flight_recorder_capacity,
        force_flush=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )
    handlers = configure_logging(settings)
    log_startup(logger, settings, handlers, __version__)

    ctx.ensure_object(dict)
    ctx.obj["rules_path"] = rules_path

    ctx.call_on_close(logging.shutdown)


shelfwise.add_command(resolve)
shelfwise.add_command(inspect)
shelfwise.add_command(rules)
