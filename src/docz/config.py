#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docz/config.py
"""Project configuration stored in ``doc.toml``.

A docz project is a directory holding a ``doc.toml`` file next to its source
directory. The file has three tables::

    [doc]
    title = "Doc title"
    description = "Doc description"
    authors = []
    files = []          # optional explicit order, relative to the src dir

    [src]
    dir = "src"
    assets = "_assets"  # copied verbatim into the build dir

    [build]
    dir = "build"
    outputs = ["html"]

Unknown keys are ignored so that newer files still load; missing keys take
their defaults. Reading uses ``tomllib`` (``tomli`` before Python 3.11) and
writing uses ``tomli_w``.

"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]

import tomli_w

from docz.constants import (
    CONFIG_FILENAME,
    DEFAULT_ASSETS_DIR,
    DEFAULT_BUILD_DIR,
    DEFAULT_DOC_DESCRIPTION,
    DEFAULT_DOC_TITLE,
    DEFAULT_INTRO_CONTENT,
    DEFAULT_INTRO_FILE,
    DEFAULT_OUTPUTS,
    DEFAULT_SRC_DIR,
)
from docz.exceptions import ConfigError, FormatError
from docz.formats import Format

logger = logging.getLogger(__name__)


def _expect_table(data: Dict[str, Any], key: str, path: Optional[Path]) -> Dict[str, Any]:
    value = data.get(key, {})
    if not isinstance(value, dict):
        raise ConfigError(f"[{key}] must be a table, got {type(value).__name__}", path=_path_str(path))
    return value


def _expect_str(table: Dict[str, Any], section: str, key: str, default: str, path: Optional[Path]) -> str:
    value = table.get(key, default)
    if not isinstance(value, str):
        raise ConfigError(f"{section}.{key} must be a string, got {type(value).__name__}", path=_path_str(path))
    return value


def _expect_str_list(table: Dict[str, Any], section: str, key: str, default: List[str], path: Optional[Path]) -> List[str]:
    value = table.get(key, default)
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{section}.{key} must be a list of strings", path=_path_str(path))
    return list(value)


def _path_str(path: Optional[Path]) -> Optional[str]:
    return str(path) if path is not None else None


@dataclass
class Config:
    """Configuration of a docz project.

    Parameters
    ----------
    root_dir : Path
        Project root; relative directories resolve against it
    title : str
        Document title, applied to the built Document
    description : str
        Document summary
    authors : list of str
        Document authors
    files : list of str
        Explicit source order, relative to the source directory. When empty
        every source file is used, sorted by path.
    src_dir : str
        Source directory, relative to the root
    assets_dir : str
        Static assets directory, relative to the source directory
    build_dir : str
        Output directory, relative to the root; recreated by every build
    outputs : list of str
        Output format ids

    """

    root_dir: Path = field(default_factory=Path.cwd)
    title: str = DEFAULT_DOC_TITLE
    description: str = DEFAULT_DOC_DESCRIPTION
    authors: List[str] = field(default_factory=list)
    files: List[str] = field(default_factory=list)
    src_dir: str = DEFAULT_SRC_DIR
    assets_dir: str = DEFAULT_ASSETS_DIR
    build_dir: str = DEFAULT_BUILD_DIR
    outputs: List[str] = field(default_factory=lambda: list(DEFAULT_OUTPUTS))

    @property
    def config_path(self) -> Path:
        """Path of the ``doc.toml`` file."""
        return self.root_dir / CONFIG_FILENAME

    @property
    def src_path(self) -> Path:
        return self.root_dir / self.src_dir

    @property
    def assets_path(self) -> Path:
        return self.src_path / self.assets_dir

    @property
    def build_path(self) -> Path:
        return self.root_dir / self.build_dir

    def output_formats(self) -> List[Format]:
        """Resolve the configured output ids.

        Raises
        ------
        ConfigError
            If an id names no known format

        """
        formats = []
        for output in self.outputs:
            try:
                formats.append(Format.parse(output))
            except FormatError as e:
                raise ConfigError(f"build.outputs: {e}", path=str(self.config_path), original_error=e) from e
        return formats

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    @classmethod
    def load(cls, root: str | Path) -> Config:
        """Load ``doc.toml`` from a project root directory."""
        return cls.load_from(Path(root) / CONFIG_FILENAME)

    @classmethod
    def load_from(cls, path: str | Path) -> Config:
        """Load a configuration file; its directory becomes the project root.

        Raises
        ------
        ConfigError
            If the file is missing, is not valid TOML or has values of the wrong type

        """
        path = Path(path)
        logger.debug("Loading config file %s", path)
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except FileNotFoundError as e:
            raise ConfigError("Config file not found", path=str(path), original_error=e) from e
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML ({e})", path=str(path), original_error=e) from e
        except OSError as e:
            raise ConfigError(f"Cannot read config file ({e.strerror})", path=str(path), original_error=e) from e
        return cls.from_dict(data, root_dir=path.parent, path=path)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], root_dir: str | Path, path: Optional[Path] = None) -> Config:
        """Build a configuration from the parsed TOML tables."""
        doc = _expect_table(data, "doc", path)
        src = _expect_table(data, "src", path)
        build = _expect_table(data, "build", path)

        config = cls(
            root_dir=Path(root_dir),
            title=_expect_str(doc, "doc", "title", DEFAULT_DOC_TITLE, path),
            description=_expect_str(doc, "doc", "description", DEFAULT_DOC_DESCRIPTION, path),
            authors=_expect_str_list(doc, "doc", "authors", [], path),
            files=_expect_str_list(doc, "doc", "files", [], path),
            src_dir=_expect_str(src, "src", "dir", DEFAULT_SRC_DIR, path),
            assets_dir=_expect_str(src, "src", "assets", DEFAULT_ASSETS_DIR, path),
            build_dir=_expect_str(build, "build", "dir", DEFAULT_BUILD_DIR, path),
            outputs=_expect_str_list(build, "build", "outputs", list(DEFAULT_OUTPUTS), path),
        )
        # Fail on load rather than half way through a build
        config.output_formats()
        return config

    # ------------------------------------------------------------------
    # Saving
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Return the configuration as TOML tables."""
        return {
            "doc": {
                "title": self.title,
                "description": self.description,
                "authors": list(self.authors),
                "files": list(self.files),
            },
            "src": {"dir": self.src_dir, "assets": self.assets_dir},
            "build": {"dir": self.build_dir, "outputs": list(self.outputs)},
        }

    def save(self, path: str | Path | None = None) -> Path:
        """Write the configuration, by default to ``<root>/doc.toml``.

        Raises
        ------
        ConfigError
            If the file already exists; an existing configuration is never overwritten

        """
        target = Path(path) if path is not None else self.config_path
        if target.exists():
            raise ConfigError("Config file already exists", path=str(target))
        target.write_text(tomli_w.dumps(self.to_dict()), encoding="utf-8")
        logger.debug("Wrote config file %s", target)
        return target

    @classmethod
    def init_dir(cls, root: str | Path) -> Config:
        """Initialize a new project in ``root``.

        Writes a default ``doc.toml``, creates the source directory with an
        introduction file and adds a ``.gitignore`` excluding the build dir.

        Raises
        ------
        ConfigError
            If ``doc.toml`` or the source directory already exists

        """
        root = Path(root)
        config = cls(root_dir=root)
        if config.config_path.exists():
            raise ConfigError("Config file already exists", path=str(config.config_path))
        if config.src_path.exists():
            raise ConfigError("Source directory already exists", path=str(config.src_path))

        root.mkdir(parents=True, exist_ok=True)
        config.save()
        config.src_path.mkdir()
        (config.src_path / DEFAULT_INTRO_FILE).write_text(DEFAULT_INTRO_CONTENT, encoding="utf-8")

        gitignore = root / ".gitignore"
        if not gitignore.exists():
            gitignore.write_text(f"{config.build_dir}\n", encoding="utf-8")
        logger.info("Initialized project in %s", root)
        return config
