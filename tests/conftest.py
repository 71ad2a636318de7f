"""Shared fixtures for project-knowledge tests."""

import logging

import pytest

from project_knowledge.knowledge import SourceFile


@pytest.fixture
def make_file():
    """Build an in-memory SourceFile."""

    def _make(content: str, path: str = "/repo/src/Sample.cs") -> SourceFile:
        return SourceFile(path=path, extension=".cs", content=content)

    return _make


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Undo CLI logging setup so caplog sees package records."""
    yield
    logger = logging.getLogger("project_knowledge")
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
