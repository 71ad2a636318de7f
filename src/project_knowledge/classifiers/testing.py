"""Testing convention classifier.

Looks only at files whose path marks them as tests. Frameworks and
mocking libraries are voted by file count; the organization pattern
prefers comment markers over test-name conventions.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from ..config import DEFAULT_TESTING, TestingConfig
from ..knowledge import SourceFile, TestingInfo
from ..scoring import count_files, strict_winner, tally_families

AAA_COMMENT = re.compile(r"//\s*Arrange|//\s*Act|//\s*Assert")
GWT_COMMENT = re.compile(r"//\s*Given|//\s*When|//\s*Then")
AAA_NAME = re.compile(r"(?:Should|When|Given)\w+_\w+_\w+")
GWT_NAME = re.compile(r"Given\w+_When\w+_Then\w+")


def select_test_files(files: Sequence[SourceFile], config: TestingConfig = DEFAULT_TESTING) -> list[SourceFile]:
    return [
        f for f in files
        if any(marker in f.path.lower() for marker in config.path_markers)
    ]


def classify_testing(
    files: Sequence[SourceFile],
    config: TestingConfig = DEFAULT_TESTING,
) -> TestingInfo:
    test_files = select_test_files(files, config)
    if not test_files:
        return TestingInfo(
            framework=config.no_tests_framework,
            pattern=config.no_tests_pattern,
            mocking_library=config.no_mocking,
            description=config.no_tests_description,
        )

    framework = _vote(test_files, config.frameworks, config.unknown_framework)
    pattern = detect_test_pattern(test_files, config)
    mocking = _vote(test_files, config.mocking_libraries, config.no_mocking)

    parts = [f"Tests written using {framework}"]
    if pattern not in (config.various_patterns, config.no_tests_pattern):
        parts.append(f"organized with {pattern} pattern")
    if mocking != config.no_mocking:
        parts.append(f"using {mocking} for mocking")

    return TestingInfo(
        framework=framework,
        pattern=pattern,
        mocking_library=mocking,
        description=", ".join(parts) + ".",
    )


def _vote(files, families, fallback: str) -> str:
    winner, _ = strict_winner(tally_families(files, families))
    if winner is None:
        return fallback
    return next(f.label for f in families if f.key == winner)


def detect_test_pattern(files: Sequence[SourceFile], config: TestingConfig = DEFAULT_TESTING) -> str:
    """Comment markers decide when one style leads; test names break ties."""
    aaa_comments = count_files(files, AAA_COMMENT)
    gwt_comments = count_files(files, GWT_COMMENT)

    if aaa_comments > gwt_comments:
        return config.aaa_label
    if gwt_comments > aaa_comments:
        return config.gwt_label

    # Given_When_Then names also fit the scenario shape, so any scenario
    # name settles it as AAA.
    if count_files(files, AAA_NAME):
        return config.aaa_label
    if count_files(files, GWT_NAME):
        return config.gwt_label
    return config.various_patterns
