"""CLI helpers for SHELFWISE.

Utilities used by the command-line interface: message emitters that write to
stderr with emoji→ASCII fallbacks, Click parameter types, and the logger-level
option parser.
"""

from .messages import error, success, warn
from .params import DATE

__all__ = ["DATE", "error", "success", "warn"]
