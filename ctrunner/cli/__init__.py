"""Command-line interface for the ct task."""
