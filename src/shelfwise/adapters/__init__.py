"""Adapters (infrastructure) for SHELFWISE.

Provide concrete implementations of ports (e.g., clocks) and loaders for
externally supplied configuration such as alternate rule books.

Dependency rule: may import `shelfwise.domain`; the domain must not import this
package.
"""
