"""Module defining Commands."""

from dataclasses import dataclass

from shelfwise.domain.compliance import LabelAnalysis


@dataclass(frozen=True)
class Command:
    """Base class for all commands."""


@dataclass(frozen=True)
class ResolveAcceptance(Command):
    """Command to resolve the DC and store deadlines of one product."""

    expiry_date: str
    total_shelf_life_days: int
    is_domestic: bool
    manufacture_date: str | None = None


@dataclass(frozen=True)
class InspectLabel(Command):
    """Command to decide whether a shipment may be received, from its label analysis."""

    label: LabelAnalysis
