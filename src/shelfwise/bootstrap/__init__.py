"""Bootstrap (composition root) for SHELFWISE.

Assembles the application at runtime: wires concrete adapters (clock, rule
book loader) to service-layer handlers, composes the message bus, reads
configuration, and exposes the result to entrypoints.

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces/domain).
- This package may import: `shelfwise.adapters`, `shelfwise.service_layer`,
  `shelfwise.interfaces`, `shelfwise.domain`, and `shelfwise.config`.
- Inner layers must not import `shelfwise.bootstrap`.

Public surface:
- Re-export composition factories (and the errors they raise) from this
  module; keep wiring helpers internal.
- No business rules live here; this is assembly and lifecycle only.
"""

from shelfwise.adapters.clocks import FixedClock
from shelfwise.adapters.rule_files import RuleFileError
from shelfwise.config import RulesPathNotFoundError

from .bootstrap import AppContainer, bootstrap

__all__ = [
    "AppContainer",
    "FixedClock",
    "RuleFileError",
    "RulesPathNotFoundError",
    "bootstrap",
]
