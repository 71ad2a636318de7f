"""Errors raised by the analysis pipeline."""

from __future__ import annotations


class AnalysisError(Exception):
    """Base error for a failed analysis run."""


class ProjectNotFoundError(AnalysisError):
    """The project root does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Project path does not exist: {path}")
