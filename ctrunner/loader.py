"""Project file loader and build path resolution for the ct task."""

import glob
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional
import yaml

from ctrunner.exceptions import ValidationError, ProjectValidationError


DEFAULT_PROJECT_FILE = "ct.yaml"
ENV_VAR = "CT_ENV"


class PreservingLoader(yaml.SafeLoader):
    """YAML loader that keeps words like 'on', 'yes' and 'no' as strings."""
    pass


# Every project field is a string, so drop the implicit boolean resolvers
PreservingLoader.yaml_implicit_resolvers = {
    first: [
        (tag, regexp) for tag, regexp in resolvers
        if tag != 'tag:yaml.org,2002:bool'
    ]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


@dataclass
class ProjectConfig:
    """
    Project description plus the build paths derived from it.

    Layout under the project root:
        <build_root>/<env>/lib/<app>/ebin
        <build_root>/<env>/logs
    """
    app: str
    root: Path
    build_root: str = "_build"
    env: str = "test"
    test_dir: str = "test"
    runner: str = "ct_run"

    @property
    def build_path(self) -> Path:
        return self.root / self.build_root / self.env

    @property
    def lib_path(self) -> Path:
        return self.build_path / "lib"

    @property
    def app_path(self) -> Path:
        return self.lib_path / self.app

    @property
    def ebin_path(self) -> Path:
        return self.app_path / "ebin"

    @property
    def log_dir(self) -> Path:
        return self.build_path / "logs"

    @property
    def test_path(self) -> Path:
        return self.root / self.test_dir

    @property
    def app_config_src(self) -> Path:
        return self.test_path / "app.config.src"

    @property
    def app_config(self) -> Path:
        return self.test_path / "app.config"

    @property
    def cover_spec_path(self) -> Path:
        return self.app_path / "ct.cover.spec"

    @property
    def coverdata_path(self) -> Path:
        return self.app_path / "ct.coverdata"

    def ebin_paths(self) -> List[Path]:
        """Binary-output directories of every library in the build."""
        pattern = str(self.lib_path / "*" / "ebin")
        return [Path(p) for p in sorted(glob.glob(pattern)) if os.path.isdir(p)]


class ProjectLoader:
    """Loads and validates the YAML project file."""

    REQUIRED_FIELDS = {"app"}
    OPTIONAL_FIELDS = {"build_root", "env", "test_dir", "runner"}

    def __init__(self, root: Path, environ: Optional[Dict[str, str]] = None):
        """Initialize loader with the project root."""
        self.root = root.resolve()
        self.environ = os.environ if environ is None else environ
        self.errors: List[ValidationError] = []

    def load(self, project_file: Optional[Path] = None, env: Optional[str] = None) -> ProjectConfig:
        """
        Load the project configuration.

        Args:
            project_file: Explicit project file; must exist when given
            env: Build environment override (wins over CT_ENV and the file)

        Returns:
            ProjectConfig with validated fields

        Raises:
            ProjectValidationError: If the file is missing, unreadable or invalid
        """
        self.errors = []

        if project_file is None:
            path = self.root / DEFAULT_PROJECT_FILE
            data: Dict[str, Any] = self._read(path) if path.exists() else {"app": self.root.name}
        else:
            path = Path(project_file)
            if not path.is_absolute():
                path = self.root / path
            if not path.exists():
                self._add_error(f"Project file not found: {path}")
                self._raise_validation_errors()
            data = self._read(path)

        self._validate(data, str(path))
        if self.errors:
            self._raise_validation_errors()

        fields = {k: data[k] for k in self.OPTIONAL_FIELDS if k in data}
        file_env = fields.pop("env", None)
        selected_env = env or self.environ.get(ENV_VAR) or file_env
        if selected_env:
            fields["env"] = selected_env

        return ProjectConfig(app=data["app"], root=self.root, **fields)

    def _read(self, path: Path) -> Dict[str, Any]:
        """Parse a YAML project file into a dictionary."""
        try:
            with open(path, 'r') as f:
                data = yaml.load(f, Loader=PreservingLoader)
        except (OSError, yaml.YAMLError) as e:
            self._add_error(f"Failed to load project file: {e}", str(path))
            self._raise_validation_errors()

        if data is None or not isinstance(data, dict):
            self._add_error("Project file must be a YAML object/dictionary", str(path))
            self._raise_validation_errors()

        return data

    def _validate(self, data: Dict[str, Any], path: str):
        """Validate field names and types."""
        allowed = self.REQUIRED_FIELDS | self.OPTIONAL_FIELDS

        for key in data:
            if key not in allowed:
                self._add_error(f"Unknown field '{key}'", path)

        for key in sorted(self.REQUIRED_FIELDS):
            if key not in data:
                self._add_error(f"'{key}' field is required", path)

        for key in sorted(allowed):
            if key not in data:
                continue
            value = data[key]
            if not isinstance(value, str):
                self._add_error(f"'{key}' must be a string, got {type(value).__name__}", path)
            elif not value.strip():
                self._add_error(f"'{key}' cannot be empty", path)

    def _add_error(self, message: str, path: str = "", exit_code: int = 2):
        """Add validation error."""
        self.errors.append(ValidationError(message, path, exit_code))

    def _raise_validation_errors(self):
        """Raise ProjectValidationError with accumulated errors."""
        raise ProjectValidationError(self.errors)
