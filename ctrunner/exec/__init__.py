"""
Execution module for the ct task.
Handles runner argument assembly and process execution.
"""

from .command_builder import (
    APP_CONFIG_RULE,
    COVER_RULE,
    DEFAULT_RULES,
    SUREFIRE_RULE,
    CommandRule,
    CtCommandBuilder,
    CtOptions,
)
from .runner import CommandRunner

__all__ = [
    "APP_CONFIG_RULE",
    "COVER_RULE",
    "DEFAULT_RULES",
    "SUREFIRE_RULE",
    "CommandRule",
    "CtCommandBuilder",
    "CtOptions",
    "CommandRunner",
]
