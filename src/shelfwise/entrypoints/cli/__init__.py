"""Command-line interface for SHELFWISE."""
