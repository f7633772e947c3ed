"""Service layer for SHELFWISE.

Implements application use-cases: command handlers and their orchestration.
Calls domain objects and the ports defined in `shelfwise.interfaces`.

Dependency rule: may import `shelfwise.domain` and `shelfwise.interfaces`, but
not `shelfwise.adapters` or `shelfwise.entrypoints`.
"""
