"""Clocks for SHELFWISE."""

from datetime import date

from shelfwise.interfaces.clock import Clock

# pylint: disable=too-few-public-methods


class SystemClock(Clock):
    """Clock backed by the local system date."""

    def today(self) -> date:
        """Return today's local date."""
        return date.today()


class FixedClock(Clock):
    """A clock frozen on one date.

    Note:
        Used for what-if calculations (``--today``) and in tests.
    """

    def __init__(self, fixed: date) -> None:
        self._fixed = fixed

    def today(self) -> date:
        """Return the frozen date."""
        return self._fixed
