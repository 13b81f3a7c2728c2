"""The ct task: prepare the test tree and run the suite executor once."""

import logging
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

from .exceptions import TestsFailedError
from .exec.command_builder import CtCommandBuilder, CtOptions
from .exec.runner import CommandRunner
from .fixtures import link_data_dirs
from .loader import ProjectConfig
from .variables.substitution import EnvSubstitutor


logger = logging.getLogger(__name__)


@dataclass
class CtResult:
    """Outcome of a ct task run."""
    skipped: bool = False
    command: List[str] = field(default_factory=list)
    exit_code: int = 0


class CtTask:
    """
    Runs the project's Common Test suites.

    Steps, when the test directory exists:
    1. create the log directory
    2. link fixture ``*_data`` directories into the app's ebin directory
    3. render ``app.config`` from ``app.config.src`` if the template exists
    4. assemble the runner command and run it
    """

    def __init__(
        self,
        project: ProjectConfig,
        runner: Optional[CommandRunner] = None,
        env: Optional[Mapping[str, str]] = None,
    ):
        self.project = project
        self.runner = runner or CommandRunner(cwd=project.root)
        self.substitutor = EnvSubstitutor(env)

    def run(self, options: CtOptions) -> CtResult:
        """
        Run the task.

        Raises:
            TestsFailedError: If the runner exits with a non-zero status
            FixtureLinkError: If a data directory can't be linked or copied
            RunnerNotFoundError: If the runner executable is missing
            OSError: On any file read/write failure
        """
        project = self.project
        logger.info(f"==> {project.app}")

        if not project.test_path.exists():
            logger.info(f"No test directory at {project.test_path}, nothing to run")
            return CtResult(skipped=True)

        project.log_dir.mkdir(parents=True, exist_ok=True)

        for linked in link_data_dirs(project.test_path, project.ebin_path):
            logger.debug(f"Fixture data available at {linked}")

        if project.app_config_src.exists():
            self.substitutor.render_file(project.app_config_src, project.app_config)

        command = CtCommandBuilder(project, options).build()
        if options.verbose:
            logger.info(f"Command: {' '.join(command)}")
        else:
            logger.debug(f"Command: {' '.join(command)}")

        status = self.runner.run(command)
        if status != 0:
            raise TestsFailedError(status)

        return CtResult(command=command, exit_code=status)
