"""Entrypoints (inbound adapters) for SHELFWISE.

Expose the application to the outside world: CLI commands. Parse and validate
inputs, call service-layer handlers through the bootstrapped message bus, and
present results.

Dependency rule: may import `shelfwise.bootstrap` and `shelfwise.service_layer`;
avoid importing `shelfwise.adapters` directly.
"""
