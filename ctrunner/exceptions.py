"""ct task exceptions."""

from typing import List, Optional
from dataclasses import dataclass


@dataclass
class ValidationError:
    """Single validation error."""
    message: str
    path: str = ""
    exit_code: int = 2


class ProjectValidationError(Exception):
    """Raised when the project file fails validation.

    The loader collects every problem before raising, so the CLI can report
    them together and map to the validation exit code.
    """

    def __init__(self, errors: List[ValidationError]):
        self.errors = errors
        self.exit_code = 2

        messages = []
        for error in errors:
            if error.path:
                messages.append(f"Validation error: {error.path}: {error.message}")
            else:
                messages.append(f"Validation error: {error.message}")

        super().__init__("\n".join(messages))


class CtError(Exception):
    """Base class for failures that abort the ct task."""
    exit_code = 1


class TestsFailedError(CtError):
    """Raised when the test runner exits with a non-zero status."""

    # Not a test class, keep pytest from collecting it
    __test__ = False

    MESSAGE = "One or more tests failed."

    def __init__(self, exit_status: Optional[int] = None):
        self.exit_status = exit_status
        super().__init__(self.MESSAGE)


class FixtureLinkError(CtError):
    """Raised when a fixture data directory can be neither symlinked nor copied."""

    def __init__(self, source, destination, reason: str = ""):
        self.source = source
        self.destination = destination
        message = f"Could not link or copy {source} to {destination}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class RunnerNotFoundError(CtError):
    """Raised when the test runner executable cannot be started."""

    def __init__(self, executable: str):
        self.executable = executable
        super().__init__(f"Test runner not found: {executable}")
