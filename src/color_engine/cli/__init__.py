"""Command-line interface for color-engine."""
