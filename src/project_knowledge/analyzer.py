"""Project analyzer - runs every classifier and assembles the report.

Loads C# and TypeScript sources, samples the directory layout and runs
the naming, architecture, pattern, domain and testing classifiers in that
order. No model or network access; each run is a stateless snapshot.
"""

from __future__ import annotations

import datetime
import json
import logging
from pathlib import Path

from . import __version__
from .classifiers import (
    classify_architecture,
    classify_domain,
    classify_naming,
    classify_patterns,
    classify_testing,
)
from .config import CSHARP_PATTERN, TYPESCRIPT_PATTERN
from .errors import ProjectNotFoundError
from .knowledge import ProjectKnowledge
from .scanner import directory_basenames, list_directories, scan_files

logger = logging.getLogger(__name__)


def _timestamp() -> str:
    now = datetime.datetime.now(datetime.timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def analyze_project(path: str | Path, version: str = __version__) -> ProjectKnowledge:
    """Run the full analysis on a local project directory."""
    path = Path(path)
    logger.info("Analyzing project at: %s", path)
    if not path.exists():
        raise ProjectNotFoundError(str(path))

    logger.info("Scanning for C# and TypeScript files...")
    cs_files = scan_files(path, CSHARP_PATTERN)
    ts_files = scan_files(path, TYPESCRIPT_PATTERN)
    logger.info("Found %d C# files and %d TypeScript files", len(cs_files), len(ts_files))

    logger.info("Analyzing naming conventions...")
    naming = classify_naming(cs_files)

    logger.info("Detecting architecture...")
    directories = list_directories(path)
    logger.debug("Sampled %d directories", len(directories))
    architecture = classify_architecture(directory_basenames(directories))

    logger.info("Identifying patterns...")
    patterns = classify_patterns(cs_files)

    logger.info("Extracting domain vocabulary...")
    domain = classify_domain(cs_files)

    logger.info("Analyzing testing patterns...")
    testing = classify_testing(cs_files)

    logger.info("Analysis complete!")
    return ProjectKnowledge(
        analyzed=_timestamp(),
        version=version,
        naming=naming,
        architecture=architecture,
        patterns=patterns,
        domain=domain,
        testing=testing,
    )


def write_knowledge(knowledge: ProjectKnowledge, output: str | Path) -> Path:
    """Write the report as JSON, creating parent directories as needed."""
    output = Path(output)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(json.dumps(knowledge.to_dict(), indent=2), encoding="utf-8")
    logger.info("Project knowledge saved to: %s", output)
    return output


def load_knowledge(path: str | Path) -> ProjectKnowledge:
    with open(path, encoding="utf-8") as f:
        return ProjectKnowledge.from_dict(json.load(f))
