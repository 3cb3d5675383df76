#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docz/service.py
"""Build service: sources -> trees -> one document -> output files.

A build runs four stages:

1. load: read the source files, in the configured order or sorted by path;
2. parse: one tree per file, optionally on a thread pool;
3. process: ``ChapterAggregationProcessor`` merges the trees into one Document
   with a Chapter per file, then ``DocMetadataProcessor`` applies the title,
   description and authors from ``doc.toml``;
4. render: every output format is rendered and written to
   ``<build dir>/doc.<ext>``.

A failure in the first three stages ends the build. Output formats are
independent: a format that fails to render is recorded in the report and the
remaining formats are still produced.

Examples
--------
    >>> from docz.config import Config
    >>> report = Service(Config.load(".")).build(["html", "debug"])  # doctest: +SKIP
    >>> report.ok  # doctest: +SKIP
    True

"""

from __future__ import annotations

import logging
import shutil
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from docz.ast.nodes import Document, Node
from docz.config import Config
from docz.constants import OUTPUT_BASENAME
from docz.exceptions import BuildError, ConfigError, ProcessError
from docz.formats import Format, create_parser, create_renderer, is_source_path
from docz.processors import ChapterAggregationProcessor, DocMetadataProcessor, run_processors
from docz.utils.decorators import debug_timer

logger = logging.getLogger(__name__)


@dataclass
class SourceFile:
    """A source file read from disk."""

    path: Path
    format: Format
    content: bytes


@dataclass
class BuildReport:
    """Outcome of a build.

    Parameters
    ----------
    written : list of Path
        Output files written, in output format order
    failures : list of BuildError
        Every stage failure, each naming its stage and file or format

    """

    written: List[Path] = field(default_factory=list)
    failures: List[BuildError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True when no stage failed."""
        return not self.failures


def load_sources(config: Config) -> List[SourceFile]:
    """Read the source files of a project.

    With ``doc.files`` set, exactly those files are read, in that order.
    Otherwise every file with a Markdown or HTML extension under the source
    directory is read, sub-directories included, sorted by relative path. The
    assets directory is never scanned.

    Raises
    ------
    BuildError
        With stage "load", if a listed file or the source directory is missing,
        a listed file has no parser or a file cannot be read

    """
    src_path = config.src_path
    if config.files:
        paths = []
        for name in config.files:
            path = src_path / name
            if not path.is_file():
                raise BuildError("Source file does not exist", file=str(path), stage="load")
            paths.append(path)
    else:
        if not src_path.is_dir():
            raise BuildError("Source directory does not exist", file=str(src_path), stage="load")
        assets_path = config.assets_path
        paths = sorted(
            (
                path
                for path in src_path.rglob("*")
                if path.is_file() and is_source_path(path) and assets_path not in path.parents
            ),
            key=lambda p: p.relative_to(src_path).as_posix(),
        )

    sources = []
    for path in paths:
        try:
            fmt = Format.from_path(path)
            content = path.read_bytes()
        except OSError as e:
            raise BuildError(f"Cannot read source file ({e.strerror})", file=str(path), stage="load", original_error=e) from e
        except Exception as e:
            raise BuildError(str(e), file=str(path), stage="load", original_error=e) from e
        sources.append(SourceFile(path=path, format=fmt, content=content))
    logger.debug("Loaded %d source file(s) from %s", len(sources), src_path)
    return sources


class Service:
    """Builds a docz project.

    Parameters
    ----------
    config : Config
        Project configuration
    max_workers : int or None, default = None
        Parse source files on a thread pool of this size; None or 1 parses
        sequentially. Results keep the source order either way.

    """

    def __init__(self, config: Config, max_workers: Optional[int] = None):
        self.config = config
        self.max_workers = max_workers

    def build(self, outputs: Optional[Sequence[str]] = None) -> BuildReport:
        """Build the project.

        Parameters
        ----------
        outputs : sequence of str or None, default = None
            Output format ids overriding ``build.outputs`` from the configuration

        Returns
        -------
        BuildReport
            Files written and failures recorded

        Raises
        ------
        FormatError
            If an entry of ``outputs`` names no known format
        ConfigError
            If a configured output names no known format, or the build
            directory is the project root or contains the source directory

        """
        formats = [Format.parse(output) for output in outputs] if outputs else self.config.output_formats()
        report = BuildReport()

        self._reset_build_dir()

        try:
            sources = load_sources(self.config)
            trees = self._parse_sources(sources)
            document = self._process(trees)
        except BuildError as e:
            logger.error("Build failed: %s", e)
            report.failures.append(e)
            return report

        self._copy_assets()

        for fmt in formats:
            try:
                report.written.append(self._render_output(document, fmt))
            except BuildError as e:
                logger.error("Output %s failed: %s", fmt, e)
                report.failures.append(e)
        return report

    def _reset_build_dir(self) -> None:
        """Recreate an empty build directory."""
        build_path = self.config.build_path.resolve()
        protected = (self.config.root_dir.resolve(), self.config.src_path.resolve())
        if any(build_path == path or build_path in path.parents for path in protected):
            raise ConfigError(
                f"Refusing to remove build directory {build_path}: it holds the project or its sources",
                path=str(self.config.config_path),
            )
        if build_path.exists():
            logger.debug("Removing build directory %s", build_path)
            shutil.rmtree(build_path)
        build_path.mkdir(parents=True)

    def _copy_assets(self) -> None:
        assets_path = self.config.assets_path
        if assets_path.is_dir():
            logger.debug("Copying assets from %s", assets_path)
            shutil.copytree(assets_path, self.config.build_path / self.config.assets_dir)

    def _parse_sources(self, sources: List[SourceFile]) -> List[Node]:
        if self.max_workers and self.max_workers > 1 and len(sources) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                return list(executor.map(self._parse_source, sources))
        return [self._parse_source(source) for source in sources]

    def _parse_source(self, source: SourceFile) -> Node:
        """Parse one file; any failure becomes a BuildError naming the file."""
        with debug_timer(logger, f"Parsing {source.path.name}"):
            try:
                return create_parser(source.format).parse(source.content)
            except Exception as e:
                raise BuildError(str(e), file=str(source.path), stage="parse", original_error=e) from e

    def _process(self, trees: List[Node]) -> Document:
        processors = [
            ChapterAggregationProcessor(),
            DocMetadataProcessor(
                title=self.config.title,
                summary=self.config.description or None,
                authors=self.config.authors or None,
            ),
        ]
        try:
            result = run_processors(processors, trees)
        except ProcessError as e:
            raise BuildError(str(e), stage="process", original_error=e) from e
        if len(result) != 1 or not isinstance(result[0], Document):
            raise BuildError(f"expected one Document after processing, got {len(result)} tree(s)", stage="process")
        return result[0]

    def _render_output(self, document: Document, fmt: Format) -> Path:
        """Render one output format and write it to the build directory."""
        renderer = create_renderer(fmt)
        with debug_timer(logger, f"Rendering ({fmt})"):
            try:
                data = renderer.render(document)
            except Exception as e:
                raise BuildError(str(e), stage="render", format_id=str(fmt), original_error=e) from e

        target = self.config.build_path / f"{OUTPUT_BASENAME}.{renderer.file_extension}"
        try:
            target.write_bytes(data)
        except OSError as e:
            raise BuildError(
                f"Cannot write output ({e.strerror})", file=str(target), stage="write", format_id=str(fmt), original_error=e
            ) from e
        logger.info("Wrote %s", target)
        return target
