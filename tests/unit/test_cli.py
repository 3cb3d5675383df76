#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_cli.py
"""Unit tests for the docz command line."""

import logging

import pytest

from docz import __version__
from docz.cli import EXIT_BUILD_ERROR, EXIT_SUCCESS, EXIT_USAGE_ERROR, create_parser, main


@pytest.fixture(autouse=True)
def restore_root_logger():
    """main() installs handlers on the root logger; put the original ones back."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.unit
class TestArgumentParser:
    """Tests for argument parsing."""

    def test_build_options(self):
        args = create_parser().parse_args(["--cwd", "book", "build", "-o", "html", "-o", "pdf", "-j", "4"])
        assert args.command == "build"
        assert args.cwd == "book"
        assert args.outputs == ["html", "pdf"]
        assert args.jobs == 4

    def test_log_level_is_case_insensitive(self):
        args = create_parser().parse_args(["--log-level", "debug", "init"])
        assert args.log_level == "DEBUG"

    def test_defaults(self):
        args = create_parser().parse_args(["build"])
        assert args.outputs is None
        assert args.jobs is None
        assert args.log_level == "WARNING"
        assert args.config is None

    def test_command_required(self):
        with pytest.raises(SystemExit) as exc_info:
            create_parser().parse_args([])
        assert exc_info.value.code == 2

    def test_unknown_output_rejected(self):
        with pytest.raises(SystemExit) as exc_info:
            create_parser().parse_args(["build", "-o", "docx"])
        assert exc_info.value.code == 2

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            create_parser().parse_args(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out


@pytest.mark.unit
class TestInitCommand:
    """Tests for ``docz init``."""

    def test_init(self, tmp_path, capsys):
        assert main(["--cwd", str(tmp_path), "init"]) == EXIT_SUCCESS
        assert (tmp_path / "doc.toml").is_file()
        assert (tmp_path / "src" / "00-intro.md").is_file()
        assert "Initialized project" in capsys.readouterr().out

    def test_init_twice(self, tmp_path):
        assert main(["--cwd", str(tmp_path), "init"]) == EXIT_SUCCESS
        assert main(["--cwd", str(tmp_path), "init"]) == EXIT_USAGE_ERROR


@pytest.mark.unit
class TestBuildCommand:
    """Tests for ``docz build``."""

    def test_build_configured_outputs(self, project_dir, capsys):
        assert main(["--cwd", str(project_dir), "build"]) == EXIT_SUCCESS
        assert (project_dir / "build" / "doc.html").is_file()
        assert (project_dir / "build" / "doc.txt").is_file()
        assert "Build Summary" in capsys.readouterr().out

    def test_build_selected_output(self, project_dir):
        assert main(["--cwd", str(project_dir), "build", "-o", "json"]) == EXIT_SUCCESS
        assert sorted(p.name for p in (project_dir / "build").iterdir()) == ["doc.json"]

    def test_explicit_relative_config(self, project_dir):
        (project_dir / "doc.toml").rename(project_dir / "alt.toml")
        assert main(["--cwd", str(project_dir), "-c", "alt.toml", "build", "-o", "md"]) == EXIT_SUCCESS
        assert (project_dir / "build" / "doc.md").is_file()

    def test_missing_config(self, tmp_path, capsys):
        assert main(["--cwd", str(tmp_path), "build"]) == EXIT_USAGE_ERROR
        assert "Config file not found" in capsys.readouterr().out

    def test_failed_stage(self, project_dir):
        (project_dir / "src" / "bad.md").write_bytes(b"\xff\xfe")
        assert main(["--cwd", str(project_dir), "build"]) == EXIT_BUILD_ERROR

    def test_log_file(self, project_dir, tmp_path):
        log_file = tmp_path / "docz.log"
        assert main(["--cwd", str(project_dir), "--log-level", "info", "--log-file", str(log_file), "build"]) == 0
        assert "Wrote" in log_file.read_text(encoding="utf-8")
