"""Pytest configuration and shared fixtures for the docz test suite."""

from pathlib import Path

import pytest

from docz.ast import (
    Document,
    Heading,
    Metadata,
    Paragraph,
    Text,
)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")


@pytest.fixture
def simple_document() -> Document:
    """A small document with a heading and a paragraph."""
    return Document(
        title="Sample",
        children=[
            Heading(level=1, children=[Text(value="Intro")]),
            Paragraph(children=[Text(value="Hello world")]),
        ],
    )


@pytest.fixture
def titled_source_document() -> Document:
    """A parsed-looking source document with frontmatter."""
    return Document(
        children=[
            Metadata(value="title: Foo\n"),
            Heading(level=1, children=[Text(value="Foo")]),
        ]
    )


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """A project with doc.toml and two Markdown chapters."""
    (tmp_path / "doc.toml").write_text(
        '[doc]\ntitle = "My Book"\ndescription = "About things"\nauthors = ["Ada"]\n\n'
        '[build]\noutputs = ["html", "debug"]\n',
        encoding="utf-8",
    )
    src = tmp_path / "src"
    src.mkdir()
    (src / "01-hello.md").write_text("# Hello\n", encoding="utf-8")
    (src / "02-world.md").write_text("# World\n", encoding="utf-8")
    return tmp_path
