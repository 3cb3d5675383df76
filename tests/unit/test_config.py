#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_config.py
"""Unit tests for doc.toml loading, saving and project initialization."""

import sys

import pytest

from docz.config import Config
from docz.constants import DEFAULT_INTRO_FILE
from docz.exceptions import ConfigError
from docz.formats import Format

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


def _write_config(tmp_path, text: str):
    path = tmp_path / "doc.toml"
    path.write_text(text, encoding="utf-8")
    return path


@pytest.mark.unit
class TestLoad:
    """Tests for Config.load and Config.load_from."""

    def test_full_file(self, project_dir):
        config = Config.load(project_dir)
        assert config.root_dir == project_dir
        assert config.title == "My Book"
        assert config.description == "About things"
        assert config.authors == ["Ada"]
        assert config.outputs == ["html", "debug"]
        assert config.output_formats() == [Format.HTML, Format.DEBUG]

    def test_defaults_for_missing_keys(self, tmp_path):
        config = Config.load_from(_write_config(tmp_path, ""))
        assert config.title == "Doc title"
        assert config.description == "Doc description"
        assert config.authors == []
        assert config.files == []
        assert config.src_path == tmp_path / "src"
        assert config.assets_path == tmp_path / "src" / "_assets"
        assert config.build_path == tmp_path / "build"
        assert config.outputs == ["html"]

    def test_directories_and_files(self, tmp_path):
        path = _write_config(
            tmp_path,
            '[doc]\nfiles = ["b.md", "a.md"]\n[src]\ndir = "pages"\nassets = "static"\n[build]\ndir = "out"\n',
        )
        config = Config.load_from(path)
        assert config.files == ["b.md", "a.md"]
        assert config.src_path == tmp_path / "pages"
        assert config.assets_path == tmp_path / "pages" / "static"
        assert config.build_path == tmp_path / "out"

    def test_unknown_keys_ignored(self, tmp_path):
        config = Config.load_from(_write_config(tmp_path, '[doc]\ntitle = "T"\nextra = 1\n[other]\nx = 2\n'))
        assert config.title == "T"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="Config file not found") as exc_info:
            Config.load(tmp_path)
        assert exc_info.value.path == str(tmp_path / "doc.toml")

    def test_invalid_toml(self, tmp_path):
        with pytest.raises(ConfigError, match="Invalid TOML"):
            Config.load_from(_write_config(tmp_path, "[doc\ntitle = "))

    @pytest.mark.parametrize(
        "text, message",
        [
            ('doc = "x"\n', r"\[doc\] must be a table"),
            ("[doc]\ntitle = 3\n", "doc.title must be a string"),
            ('[doc]\nauthors = "Ada"\n', "doc.authors must be a list of strings"),
            ("[doc]\nauthors = [1]\n", "doc.authors must be a list of strings"),
            ("[build]\noutputs = [\"docx\"]\n", "build.outputs"),
        ],
    )
    def test_invalid_values(self, tmp_path, text, message):
        with pytest.raises(ConfigError, match=message):
            Config.load_from(_write_config(tmp_path, text))


@pytest.mark.unit
class TestSave:
    """Tests for Config.save and to_dict."""

    def test_save_writes_tables(self, tmp_path):
        config = Config(root_dir=tmp_path, title="T", authors=["A"], outputs=["pdf"])
        path = config.save()
        with open(path, "rb") as f:
            data = tomllib.load(f)
        assert data["doc"]["title"] == "T"
        assert data["doc"]["authors"] == ["A"]
        assert data["src"] == {"dir": "src", "assets": "_assets"}
        assert data["build"] == {"dir": "build", "outputs": ["pdf"]}

    def test_save_then_load(self, tmp_path):
        config = Config(root_dir=tmp_path, title="Round", description="Trip", files=["x.md"])
        config.save()
        assert Config.load(tmp_path) == config

    def test_never_overwrites(self, tmp_path):
        _write_config(tmp_path, '[doc]\ntitle = "Keep"\n')
        with pytest.raises(ConfigError, match="already exists"):
            Config(root_dir=tmp_path).save()
        assert Config.load(tmp_path).title == "Keep"


@pytest.mark.unit
class TestInitDir:
    """Tests for project initialization."""

    def test_creates_project(self, tmp_path):
        root = tmp_path / "book"
        config = Config.init_dir(root)
        assert (root / "doc.toml").is_file()
        assert (root / "src" / DEFAULT_INTRO_FILE).read_text(encoding="utf-8").startswith("---\ntitle: Introduction")
        assert (root / ".gitignore").read_text(encoding="utf-8") == "build\n"
        assert Config.load(root) == config

    def test_existing_gitignore_kept(self, tmp_path):
        (tmp_path / ".gitignore").write_text("*.pyc\n", encoding="utf-8")
        Config.init_dir(tmp_path)
        assert (tmp_path / ".gitignore").read_text(encoding="utf-8") == "*.pyc\n"

    def test_refuses_existing_config(self, project_dir):
        with pytest.raises(ConfigError, match="Config file already exists"):
            Config.init_dir(project_dir)

    def test_refuses_existing_src(self, tmp_path):
        (tmp_path / "src").mkdir()
        with pytest.raises(ConfigError, match="Source directory already exists"):
            Config.init_dir(tmp_path)
        assert not (tmp_path / "doc.toml").exists()
