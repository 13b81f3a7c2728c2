"""CLI command handlers."""

from .run import run_ct
from .envsubst import render_template

__all__ = ['run_ct', 'render_template']
