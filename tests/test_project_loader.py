"""Tests for project file loading and build path derivation."""

import pytest
from pathlib import Path

from ctrunner.exceptions import ProjectValidationError
from ctrunner.loader import ProjectConfig, ProjectLoader


class TestProjectLoader:
    """Test the YAML project loader."""

    def test_full_project_file(self, tmp_path):
        (tmp_path / "ct.yaml").write_text("""
app: my_app
build_root: out
env: ci
test_dir: spec
runner: /opt/otp/bin/ct_run
""")
        config = ProjectLoader(tmp_path, environ={}).load()

        assert config.app == "my_app"
        assert config.root == tmp_path.resolve()
        assert config.build_root == "out"
        assert config.env == "ci"
        assert config.test_dir == "spec"
        assert config.runner == "/opt/otp/bin/ct_run"

    def test_defaults(self, tmp_path):
        (tmp_path / "ct.yaml").write_text("app: my_app\n")

        config = ProjectLoader(tmp_path, environ={}).load()

        assert config.build_root == "_build"
        assert config.env == "test"
        assert config.test_dir == "test"
        assert config.runner == "ct_run"

    def test_missing_default_file_uses_directory_name(self, tmp_path):
        project_root = tmp_path / "widget"
        project_root.mkdir()

        config = ProjectLoader(project_root, environ={}).load()

        assert config.app == "widget"

    def test_explicit_missing_file_is_error(self, tmp_path):
        with pytest.raises(ProjectValidationError) as exc_info:
            ProjectLoader(tmp_path, environ={}).load(Path("other.yaml"))

        assert exc_info.value.exit_code == 2
        assert "Project file not found" in str(exc_info.value)

    def test_explicit_relative_file_resolved_against_root(self, tmp_path):
        (tmp_path / "conf").mkdir()
        (tmp_path / "conf" / "ct.yaml").write_text("app: nested\n")

        config = ProjectLoader(tmp_path, environ={}).load(Path("conf/ct.yaml"))

        assert config.app == "nested"

    def test_errors_collected_together(self, tmp_path):
        (tmp_path / "ct.yaml").write_text("""
build_root: 3
surprise: true
runner: ""
""")
        with pytest.raises(ProjectValidationError) as exc_info:
            ProjectLoader(tmp_path, environ={}).load()

        messages = [e.message for e in exc_info.value.errors]
        assert "Unknown field 'surprise'" in messages
        assert "'app' field is required" in messages
        assert "'build_root' must be a string, got int" in messages
        assert "'runner' cannot be empty" in messages

    def test_yaml_boolean_words_stay_strings(self, tmp_path):
        (tmp_path / "ct.yaml").write_text("app: on\nenv: yes\ntest_dir: no\n")

        config = ProjectLoader(tmp_path, environ={}).load()

        assert config.app == "on"
        assert config.env == "yes"
        assert config.test_dir == "no"

    def test_non_mapping_rejected(self, tmp_path):
        (tmp_path / "ct.yaml").write_text("- just\n- a list\n")

        with pytest.raises(ProjectValidationError, match="YAML object"):
            ProjectLoader(tmp_path, environ={}).load()

    def test_invalid_yaml_rejected(self, tmp_path):
        (tmp_path / "ct.yaml").write_text("app: [unclosed\n")

        with pytest.raises(ProjectValidationError, match="Failed to load project file"):
            ProjectLoader(tmp_path, environ={}).load()


class TestEnvSelection:
    """--env > CT_ENV > project file > 'test'."""

    @pytest.fixture
    def project_dir(self, tmp_path):
        (tmp_path / "ct.yaml").write_text("app: my_app\nenv: from_file\n")
        return tmp_path

    def test_file_env(self, project_dir):
        assert ProjectLoader(project_dir, environ={}).load().env == "from_file"

    def test_environment_beats_file(self, project_dir):
        loader = ProjectLoader(project_dir, environ={"CT_ENV": "from_environ"})

        assert loader.load().env == "from_environ"

    def test_argument_beats_environment(self, project_dir):
        loader = ProjectLoader(project_dir, environ={"CT_ENV": "from_environ"})

        assert loader.load(env="from_arg").env == "from_arg"


class TestProjectConfigPaths:

    def test_derived_paths(self, tmp_path):
        config = ProjectConfig(app="my_app", root=tmp_path)

        assert config.build_path == tmp_path / "_build" / "test"
        assert config.app_path == tmp_path / "_build" / "test" / "lib" / "my_app"
        assert config.ebin_path == config.app_path / "ebin"
        assert config.log_dir == tmp_path / "_build" / "test" / "logs"
        assert config.app_config_src == tmp_path / "test" / "app.config.src"
        assert config.app_config == tmp_path / "test" / "app.config"
        assert config.cover_spec_path == config.app_path / "ct.cover.spec"
        assert config.coverdata_path == config.app_path / "ct.coverdata"

    def test_ebin_paths_discovered(self, tmp_path):
        config = ProjectConfig(app="my_app", root=tmp_path)
        for lib in ("zeta", "alpha", "my_app"):
            (config.lib_path / lib / "ebin").mkdir(parents=True)
        (config.lib_path / "broken").mkdir()
        (config.lib_path / "broken" / "ebin").write_text("not a directory")

        names = [p.parent.name for p in config.ebin_paths()]

        assert names == ["alpha", "my_app", "zeta"]

    def test_ebin_paths_without_build(self, tmp_path):
        assert ProjectConfig(app="my_app", root=tmp_path).ebin_paths() == []
