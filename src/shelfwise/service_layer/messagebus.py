"""Command dispatch for the service layer.

Entrypoints build a command and hand it to `MessageBus.handle`. The bus looks
up the handler registered for the command's type, calls it and returns its
result. Handlers arrive with their dependencies already bound (see
`shelfwise.bootstrap`), so the bus only ever passes the command.
"""

import logging
from collections.abc import Callable, Mapping
from typing import Any

from shelfwise.domain.errors import DomainError

from .commands import Command

logger = logging.getLogger(__name__)

Handler = Callable[[Command], Any]


class NoHandlerForCommand(LookupError):
    """Raised when a command type has no registered handler."""

    def __init__(self, cmd: Command) -> None:
        super().__init__(f"No handler registered for {type(cmd).__name__}")
        self.command = cmd


def handler_name(handler: Callable[..., Any]) -> str:
    """Readable name for log lines; unwraps `functools.partial`."""
    target = getattr(handler, "func", handler)
    return getattr(target, "__qualname__", None) or repr(handler)


class MessageBus:
    """Route each command to the handler registered for its type.

    Failures are logged and re-raised. Domain errors (bad dates, bad label
    documents, rule-table problems) are expected input problems and are logged
    at WARNING without a traceback; anything else is logged with one.
    """

    def __init__(self, command_handlers: Mapping[type[Command], Handler]) -> None:
        self._handlers = dict(command_handlers)

    @property
    def command_types(self) -> frozenset[type[Command]]:
        """Command types this bus can handle."""
        return frozenset(self._handlers)

    def handle(self, cmd: Command) -> Any:
        """Dispatch `cmd` and return the handler's result.

        Raises:
            NoHandlerForCommand: If nothing is registered for `type(cmd)`.
        """
        try:
            handler = self._handlers[type(cmd)]
        except KeyError:
            logger.error("No handler registered for %s", type(cmd).__name__)
            raise NoHandlerForCommand(cmd) from None

        name = handler_name(handler)
        logger.debug("Dispatching %s to %s", cmd, name)
        try:
            return handler(cmd)
        except DomainError as e:
            logger.warning("%s rejected by %s: %s", type(cmd).__name__, name, e)
            raise
        except Exception:
            logger.exception("%s failed in %s", type(cmd).__name__, name)
            raise
