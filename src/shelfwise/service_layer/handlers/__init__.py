"""Service layer handlers."""

from collections.abc import Callable

from .acceptance_handlers import COMMAND_HANDLERS as ACCEPTANCE_COMMAND_HANDLERS

__all__ = ["COMMAND_HANDLERS"]

COMMAND_HANDLERS: dict[type, Callable[..., object]] = {
    **ACCEPTANCE_COMMAND_HANDLERS,
}
