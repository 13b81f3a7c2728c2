"""
Command runner for the external test executor.
Runs an argv list synchronously and returns its exit status.
"""

import logging
import shlex
import subprocess
from pathlib import Path
from typing import Dict, List, Optional

from ..exceptions import RunnerNotFoundError


logger = logging.getLogger(__name__)


class CommandRunner:
    """
    Executes commands in argv mode (no shell=True).

    Output is not captured: the child inherits stdout/stderr so the runner's
    progress streams straight to the terminal. There is no timeout.
    """

    def __init__(self, cwd: Optional[Path] = None, env: Optional[Dict[str, str]] = None):
        """
        Initialize command runner.

        Args:
            cwd: Working directory for the child (default: current directory)
            env: Full environment for the child (default: inherited)
        """
        self.cwd = cwd
        self.env = env

    def run(self, argv: List[str]) -> int:
        """
        Run argv and wait for it to exit.

        Returns:
            The child's exit status

        Raises:
            RunnerNotFoundError: If the executable does not exist
        """
        if not argv:
            raise ValueError("Cannot run an empty command")

        argv = [str(arg) for arg in argv]
        logger.debug(f"Running: {shlex.join(argv)}")

        try:
            result = subprocess.run(
                argv,
                cwd=str(self.cwd) if self.cwd else None,
                env=self.env,
                check=False,
            )
        except FileNotFoundError as e:
            raise RunnerNotFoundError(argv[0]) from e

        logger.debug(f"{argv[0]} exited with status {result.returncode}")
        return result.returncode
