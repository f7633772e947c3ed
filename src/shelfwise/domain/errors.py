"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


class InvalidDateError(DomainError, ValueError):
    """Raised when a date string supplied by the caller cannot be parsed."""

    def __init__(self, value: object, field: str = "date") -> None:
        super().__init__(f"Invalid {field}: {value!r} is not a recognizable date.")
        self.value = value
        self.field = field


class DateOutOfRangeError(DomainError, ValueError):
    """Raised when date arithmetic leaves the supported calendar (years 1-9999)."""

    def __init__(self, anchor: object, days: int) -> None:
        super().__init__(
            f"Date out of range: {anchor} shifted by {days:+d} days is outside "
            "years 1-9999."
        )
        self.anchor = anchor
        self.days = days


class InvalidLabelAnalysisError(DomainError, ValueError):
    """Raised when an upstream label analysis lacks a field the engine needs."""

    def __init__(self, field: str, reason: str = "is required") -> None:
        super().__init__(f"Label analysis field '{field}' {reason}.")
        self.field = field
        self.reason = reason


# ============================================================================
#                     Rule table configuration errors
# ============================================================================


class RuleTableError(DomainError):
    """Base class for malformed rule tables.

    A rule table error is a configuration defect. It is raised when a table is
    built, not recovered from per calculation.
    """

    def __init__(self, table: str, message: str) -> None:
        super().__init__(f"Rule table '{table}': {message}")
        self.table = table


class InvalidRuleError(RuleTableError):
    """Raised when a single tier is internally inconsistent."""

    def __init__(self, table: str, label: str, reason: str) -> None:
        super().__init__(table, f"tier '{label}' is invalid: {reason}")
        self.label = label
        self.reason = reason


class RuleTableGapError(RuleTableError):
    """Raised when consecutive tiers leave shelf-life days uncovered."""

    def __init__(self, table: str, lower: int, upper: int) -> None:
        super().__init__(table, f"no tier covers days {lower} to {upper - 1}")
        self.lower = lower
        self.upper = upper


class RuleTableOverlapError(RuleTableError):
    """Raised when two tiers claim the same shelf-life days."""

    def __init__(self, table: str, first: str, second: str) -> None:
        super().__init__(table, f"tiers '{first}' and '{second}' overlap")
        self.first = first
        self.second = second


class MissingCatchAllError(RuleTableError):
    """Raised when the catch-all tier is missing, duplicated or misplaced."""

    def __init__(self, table: str) -> None:
        super().__init__(
            table, "the first tier must be the only one unbounded above"
        )


class NoMatchingTierError(RuleTableError):
    """Raised when no tier matches a shelf-life duration."""

    def __init__(self, table: str, days: int) -> None:
        super().__init__(table, f"no tier matches a shelf-life of {days} days")
        self.days = days
