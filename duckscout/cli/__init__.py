"""CLI module for duckscout."""
