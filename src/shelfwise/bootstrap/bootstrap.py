"""Bootstrap the message bus with handlers, rule book and clock."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from functools import partial
from pathlib import Path
from typing import TYPE_CHECKING, Any

from shelfwise import config
from shelfwise.adapters.clocks import SystemClock
from shelfwise.adapters.rule_files import load_rulebook
from shelfwise.domain.rule_table import RuleBook
from shelfwise.domain.standard_rules import STANDARD_RULEBOOK
from shelfwise.interfaces.clock import Clock
from shelfwise.service_layer.handlers import COMMAND_HANDLERS
from shelfwise.service_layer.messagebus import MessageBus

if TYPE_CHECKING:
    from shelfwise.service_layer.commands import Command

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring constants."""

    message_bus: MessageBus
    rulebook: RuleBook
    clock: Clock


def build_rulebook(rules_path: Path | None = None) -> RuleBook:
    """Return the rule book in force.

    An explicit path wins, then `SHELFWISE_RULES_PATH`, then the standard tables.
    """
    if rules_path is None:
        rules_path = config.get_rules_path()
    if rules_path is None:
        logger.debug("Using the standard rule book")
        return STANDARD_RULEBOOK
    return load_rulebook(rules_path)


def build_message_bus(
    dependencies: Mapping[str, object],
    command_handlers: Mapping[type[Command], Callable[..., Any]],
) -> MessageBus:
    """Build a message bus with injected dependencies."""
    injected_command_handlers = {
        command_type: inject_dependencies(handler, dependencies)
        for command_type, handler in command_handlers.items()
    }
    return MessageBus(command_handlers=injected_command_handlers)


def bootstrap(
    rules_path: Path | None = None, clock: Clock | None = None
) -> AppContainer:
    """Bootstrap the message bus with handlers, rule book and clock.

    Args:
        rules_path: Optional alternate rule book file.
        clock: Clock to read "today" from. Defaults to the system clock.
    """
    rulebook = build_rulebook(rules_path)
    clock = clock or SystemClock()
    message_bus = build_message_bus(
        {"rulebook": rulebook, "clock": clock}, COMMAND_HANDLERS
    )

    return AppContainer(
        message_bus=message_bus,
        rulebook=rulebook,
        clock=clock,
    )


def inject_dependencies(
    handler: Callable[..., Any], dependencies: Mapping[str, object]
) -> Callable[..., Any]:
    """Inject dependencies into a handler function based on its parameters."""
    params = inspect.signature(handler).parameters
    deps = {
        name: dependency for name, dependency in dependencies.items() if name in params
    }
    return partial(handler, **deps)
