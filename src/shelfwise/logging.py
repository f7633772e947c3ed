"""Logging setup for the SHELFWISE CLI.

Two sinks are configured on the root logger:

- a Rich console handler on stderr, whose threshold follows ``-v``/``-q``
  (WARNING by default), so command output on stdout stays clean;
- an optional flight recorder: an in-memory buffer of every DEBUG+ record that
  is written to a log file when a WARNING (or worse) is logged, and on exit
  when force-flush is on. Acceptance decisions can then be traced after the
  fact without running every command at DEBUG.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from importlib.metadata import PackageNotFoundError, version
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

PROJECT_PREFIX = "shelfwise"
DEFAULT_CONSOLE_LEVEL = logging.WARNING
DEFAULT_CAPACITY = 2000

RECORD_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


@dataclass(frozen=True)
class LoggingSettings:  # pylint: disable=too-many-instance-attributes
    """How the CLI wants logging set up for one invocation.

    A `log_path` of None turns the flight recorder off.
    """

    console_level: int = DEFAULT_CONSOLE_LEVEL
    debug: bool = False
    color: bool = True
    log_path: Path | None = None
    capacity: int = DEFAULT_CAPACITY
    force_flush: bool = False
    logger_levels: Mapping[str, int] = field(default_factory=dict)

    @property
    def flight_recorder(self) -> bool:
        return self.log_path is not None


def console_level(verbose: int = 0, quiet: int = 0) -> int:
    """Shift the WARNING default one level per -v (down) or -q (up).

    The result is clamped to DEBUG..CRITICAL.
    """
    level = DEFAULT_CONSOLE_LEVEL - 10 * verbose + 10 * quiet
    return max(logging.DEBUG, min(logging.CRITICAL, level))


class ThirdPartyPrefixFilter(logging.Filter):  # pylint: disable=too-few-public-methods
    """Tag records from other libraries with ``[top-level-package]``.

    Project records get an empty prefix. Nothing is filtered out.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(PROJECT_PREFIX):
            record.prefix = ""
        else:
            record.prefix = f"[{record.name.partition('.')[0]}]"
        return True


def console_handler(
    level: int = DEFAULT_CONSOLE_LEVEL, debug: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr console handler.

    Args:
        level: Console threshold. Ignored in debug mode, which shows DEBUG.
        debug: Show timestamps, logger names and source locations.
        color: False disables color (mirrors click-extra's ``--no-color``).
    """
    color_system: ColorSystem | None = "auto" if color else None
    handler = RichHandler(
        level=logging.DEBUG if debug else level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug,
        enable_link_path=debug,
    )
    if debug:
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s: %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(prefix)s %(message)s"))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def flight_recorder_handler(
    path: Path,
    capacity: int = DEFAULT_CAPACITY,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build the flight recorder: a `MemoryHandler` in front of a log file.

    The file is truncated on every run. Buffered records are written when a
    WARNING+ record arrives or the buffer is full, and on close only when
    `flush_on_close` is set.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8")
    target.setLevel(logging.DEBUG)
    target.setFormatter(logging.Formatter(RECORD_FORMAT))
    return MemoryHandler(
        capacity=capacity,
        flushLevel=logging.WARNING,
        target=target,
        flushOnClose=flush_on_close,
    )


def configure_logging(settings: LoggingSettings) -> list[logging.Handler]:
    """Install the console handler and flight recorder on the root logger.

    Existing root handlers are replaced. Per-logger levels from
    `settings.logger_levels` are applied afterwards.

    Returns:
        The handlers now attached to the root logger.
    """
    handlers: list[logging.Handler] = [
        console_handler(settings.console_level, settings.debug, settings.color)
    ]
    if settings.log_path is not None:
        handlers.append(
            flight_recorder_handler(
                settings.log_path, settings.capacity, settings.force_flush
            )
        )

    # Root stays at DEBUG so the flight recorder sees everything; the console
    # handler applies its own threshold.
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    for name, level in settings.logger_levels.items():
        logging.getLogger(name).setLevel(level)
    return handlers


def _dist_version(name: str) -> str:
    try:
        return version(name)
    except PackageNotFoundError:  # pragma: no cover
        return "<not installed>"


def log_startup(
    logger: logging.Logger,
    settings: LoggingSettings,
    handlers: list[logging.Handler],
    app_version: str,
) -> None:
    """Log a one-line INFO summary, then DEBUG diagnostics.

    The diagnostics (interpreter, platform, PID, working directory, Click and
    Rich versions, handlers and logger overrides) normally only reach the
    flight recorder, which is where they are needed when a run is reported.
    """
    logger.info(
        "SHELFWISE %s, console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(
            logging.DEBUG if settings.debug else settings.console_level
        ),
        "ON" if settings.flight_recorder else "OFF",
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    for dist in ("click", "click-extra", "rich"):
        logger.debug("%s: %s", dist.title().replace("-", " "), _dist_version(dist))
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if settings.flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            settings.log_path,
            settings.capacity,
            settings.force_flush,
        )
    logger.debug(
        "Per-logger overrides: %s",
        {
            name: logging.getLevelName(level)
            for name, level in settings.logger_levels.items()
        }
        or "<none>",
    )
