"""
Argument assembly for the test runner invocation.

The base invocation is always present; optional flags are added by an
ordered list of rules, each pairing a predicate with the arguments it
appends.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple

from ..cover import write_cover_spec
from ..loader import ProjectConfig


logger = logging.getLogger(__name__)


@dataclass
class CtOptions:
    """Command-line options of the ct task."""
    verbose: bool = False
    surefire: bool = False
    cover: bool = False


@dataclass
class CommandRule:
    """A conditional group of runner arguments."""
    name: str
    predicate: Callable[["CtCommandBuilder"], bool]
    extend: Callable[["CtCommandBuilder"], List[str]]

    def apply(self, builder: "CtCommandBuilder", argv: List[str]) -> bool:
        """Append this rule's arguments to argv if its predicate holds."""
        if not self.predicate(builder):
            return False
        argv.extend(self.extend(builder))
        logger.debug(f"Applied rule '{self.name}'")
        return True


def _surefire_args(builder: "CtCommandBuilder") -> List[str]:
    return ["-ct_hooks", "cth_surefire"]


def _cover_args(builder: "CtCommandBuilder") -> List[str]:
    project = builder.project
    spec = write_cover_spec(project.cover_spec_path, project.app, project.coverdata_path)
    return ["-cover", str(spec)]


def _app_config_args(builder: "CtCommandBuilder") -> List[str]:
    return ["-erl_args", "-config", str(builder.project.app_config)]


SUREFIRE_RULE = CommandRule(
    name="surefire",
    predicate=lambda b: b.options.surefire,
    extend=_surefire_args,
)

COVER_RULE = CommandRule(
    name="cover",
    predicate=lambda b: b.options.cover,
    extend=_cover_args,
)

APP_CONFIG_RULE = CommandRule(
    name="app_config",
    predicate=lambda b: b.project.app_config.exists(),
    extend=_app_config_args,
)

DEFAULT_RULES: Tuple[CommandRule, ...] = (SUREFIRE_RULE, COVER_RULE, APP_CONFIG_RULE)


class CtCommandBuilder:
    """Builds the argv list for one test runner invocation."""

    BASE_FLAGS = ["-no_auto_compile", "-noinput", "-abort_if_missing_suites"]

    def __init__(
        self,
        project: ProjectConfig,
        options: CtOptions,
        ebin_paths: Optional[Sequence[Path]] = None,
        rules: Sequence[CommandRule] = DEFAULT_RULES,
    ):
        """
        Initialize the builder.

        Args:
            project: Project configuration and derived paths
            options: Parsed task options
            ebin_paths: Library binary-output directories (default: discovered
                from the build's lib directory)
            rules: Ordered conditional rules applied after the base invocation
        """
        self.project = project
        self.options = options
        self.ebin_paths = list(project.ebin_paths() if ebin_paths is None else ebin_paths)
        self.rules = tuple(rules)

    def base(self) -> List[str]:
        """The arguments every invocation carries."""
        argv = [self.project.runner, *self.BASE_FLAGS, "-pa"]
        argv.extend(str(p) for p in self.ebin_paths)
        argv.extend(["-dir", str(self.project.test_path)])
        argv.extend(["-logdir", str(self.project.log_dir)])
        return argv

    def build(self) -> List[str]:
        """Return a fresh argv list with every applicable rule applied."""
        argv = self.base()
        for rule in self.rules:
            rule.apply(self, argv)
        return argv
