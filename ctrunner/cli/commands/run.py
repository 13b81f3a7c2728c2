"""Run command implementation."""

import logging
from argparse import Namespace
from pathlib import Path

from ctrunner.exceptions import CtError, ProjectValidationError
from ctrunner.exec.command_builder import CtOptions
from ctrunner.loader import ProjectLoader
from ctrunner.task import CtTask


logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(args: Namespace) -> None:
    """Set up root logging from --log-level, --verbose and --quiet."""
    level_name = getattr(args, 'log_level', 'info') or 'info'
    if level_name == 'warn':
        level_name = 'warning'
    log_level = getattr(logging, level_name.upper())

    if getattr(args, 'quiet', False):
        log_level = logging.ERROR
    elif getattr(args, 'verbose', False):
        log_level = logging.DEBUG

    logging.basicConfig(level=log_level, format=LOG_FORMAT)


def run_ct(args: Namespace) -> int:
    """
    Run the project's test suites.

    Returns 0 on success (or when there is no test directory), 1 when tests
    fail or the task aborts, 2 when the project file is invalid.
    """
    configure_logging(args)

    try:
        workspace = Path.cwd()
        project_file = Path(args.project) if args.project else None

        loader = ProjectLoader(workspace)
        try:
            project = loader.load(project_file, env=args.env)
        except ProjectValidationError as e:
            for error in e.errors:
                if error.path:
                    logger.error(f"Validation error: {error.path}: {error.message}")
                else:
                    logger.error(f"Validation error: {error.message}")
            return e.exit_code

        options = CtOptions(
            verbose=args.verbose,
            surefire=args.surefire,
            cover=args.cover,
        )

        CtTask(project).run(options)
        return 0

    except CtError as e:
        logger.error(str(e))
        return e.exit_code
    except OSError as e:
        logger.error(f"I/O error: {e}")
        return 1
