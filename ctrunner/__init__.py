"""Run Common Test suites for a project."""

__version__ = "0.1.0"
