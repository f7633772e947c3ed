"""Shelf-life tiers and the rule tables that hold them.

A rule table is an ordered, immutable catalog of tiers for one origin class.
Tiers are ordered from the longest to the shortest shelf-life. The first tier
is the catch-all (unbounded above) and the last tier starts at day 0, so every
non-negative duration falls in exactly one tier. Tables check this when they
are built; a table that exists is a well-formed table.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from itertools import pairwise
from typing import cast

from .errors import (
    InvalidRuleError,
    MissingCatchAllError,
    NoMatchingTierError,
    RuleTableError,
    RuleTableGapError,
    RuleTableOverlapError,
)
from .value_objects import Origin, RuleMode

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ShelfLifeRule:
    """One shelf-life tier.

    Conventions:
      - `min_days` is inclusive, `max_days` exclusive; `max_days=None` means
        unbounded above.
      - `dc_window` and `store_window` are in days and may be fractional.
      - `dc_display` and `store_display` are what humans read in formulas;
        arithmetic only ever uses the numeric windows.
    """

    min_days: int
    max_days: int | None
    dc_window: float
    store_window: float
    dc_display: str
    store_display: str
    label: str
    mode: RuleMode = RuleMode.ABSOLUTE

    @property
    def is_relative(self) -> bool:
        """True when windows count forward from the manufacture date."""
        return self.mode is RuleMode.RELATIVE

    @property
    def is_catch_all(self) -> bool:
        """True when the tier has no upper bound."""
        return self.max_days is None

    def contains(self, days: int) -> bool:
        """Return True if a total shelf-life of `days` falls in this tier."""
        if self.max_days is None:
            return days >= self.min_days
        return self.min_days <= days < self.max_days


def resolve_tier(
    rules: Sequence[ShelfLifeRule], total_shelf_life_days: int, table: str = "rules"
) -> ShelfLifeRule:
    """Return the tier a total shelf-life duration falls in.

    Rules are scanned in their defined order and the first match wins. Zero
    and negative durations are treated as day 0, so they land in the lowest
    tier.

    Args:
        rules: Ordered tiers of one origin class.
        total_shelf_life_days: Total shelf-life of the product in days.
        table: Name used in error messages.

    Returns:
        The matching tier.

    Raises:
        NoMatchingTierError: If no tier covers the duration. This only happens
            for a sequence that was never validated as a `RuleTable`.
    """
    days = max(total_shelf_life_days, 0)
    for rule in rules:
        if rule.contains(days):
            return rule
    raise NoMatchingTierError(table, days)


@dataclass(frozen=True, slots=True)
class RuleTable:
    """Immutable, validated tier table for one origin class."""

    origin: Origin
    rules: tuple[ShelfLifeRule, ...]
    version: str = "standard"

    def __post_init__(self) -> None:
        object.__setattr__(self, "rules", tuple(self.rules))
        self._validate()

    @property
    def name(self) -> str:
        """Identifier used in logs and error messages, e.g. 'domestic@standard'."""
        return f"{self.origin.value}@{self.version}"

    def resolve(self, total_shelf_life_days: int) -> ShelfLifeRule:
        """Return the tier for a total shelf-life duration."""
        return resolve_tier(self.rules, total_shelf_life_days, table=self.name)

    def __iter__(self) -> Iterator[ShelfLifeRule]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    def _validate(self) -> None:
        if not self.rules:
            raise MissingCatchAllError(self.name)

        for rule in self.rules:
            _check_rule(self.name, rule)

        catch_alls = [rule for rule in self.rules if rule.is_catch_all]
        if len(catch_alls) != 1 or not self.rules[0].is_catch_all:
            raise MissingCatchAllError(self.name)

        for longer, shorter in pairwise(self.rules):
            # only the first tier is unbounded, so shorter.max_days is set
            upper = cast(int, shorter.max_days)
            if upper < longer.min_days:
                raise RuleTableGapError(self.name, upper, longer.min_days)
            if upper > longer.min_days:
                raise RuleTableOverlapError(self.name, longer.label, shorter.label)

        if (lowest := self.rules[-1].min_days) > 0:
            raise RuleTableGapError(self.name, 0, lowest)


def _check_rule(table: str, rule: ShelfLifeRule) -> None:
    if rule.min_days < 0:
        raise InvalidRuleError(table, rule.label, "min_days must not be negative")
    if rule.max_days is not None and rule.max_days <= rule.min_days:
        raise InvalidRuleError(
            table, rule.label, "max_days must be greater than min_days"
        )
    if rule.dc_window < 0 or rule.store_window < 0:
        raise InvalidRuleError(table, rule.label, "windows must not be negative")


@dataclass(frozen=True, slots=True)
class RuleBook:
    """The pair of rule tables in force: one per origin class."""

    domestic: RuleTable
    imported: RuleTable
    version: str = "standard"

    def __post_init__(self) -> None:
        if self.domestic.origin is not Origin.DOMESTIC:
            raise RuleTableError(self.domestic.name, "expected a domestic table")
        if self.imported.origin is not Origin.IMPORTED:
            raise RuleTableError(self.imported.name, "expected an imported table")

    def for_origin(self, origin: Origin) -> RuleTable:
        """Return the table that applies to an origin class."""
        return self.domestic if origin is Origin.DOMESTIC else self.imported

    def tables(self) -> Iterable[RuleTable]:
        """Iterate over both tables, domestic first."""
        return (self.domestic, self.imported)

    @classmethod
    def build(
        cls,
        domestic: Iterable[ShelfLifeRule],
        imported: Iterable[ShelfLifeRule],
        version: str = "standard",
    ) -> RuleBook:
        """Validate two tier sequences and assemble them into a rule book."""
        book = cls(
            domestic=RuleTable(Origin.DOMESTIC, tuple(domestic), version),
            imported=RuleTable(Origin.IMPORTED, tuple(imported), version),
            version=version,
        )
        logger.debug(
            "Built rule book %s (%d domestic tiers, %d imported tiers)",
            version,
            len(book.domestic),
            len(book.imported),
        )
        return book
