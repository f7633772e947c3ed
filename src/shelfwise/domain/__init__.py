"""Domain layer for SHELFWISE.

Contains business rules: shelf-life tiers and rule tables, the date resolution
engine, and label compliance aggregation. This package is deliberately
technology-agnostic.

Dependency rule: do not import from `shelfwise.adapters` or `shelfwise.entrypoints`.
"""
