"""Interface for clocks."""

import abc
from datetime import date

# pylint: disable=too-few-public-methods


class Clock(abc.ABC):
    """Contract for a source of the current calendar date."""

    @abc.abstractmethod
    def today(self) -> date:
        """Return the current date (no time of day)."""
