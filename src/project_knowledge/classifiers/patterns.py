"""Structural pattern classifier.

Four independent checks over whole-file text: how entities are
constructed, how collections are exposed, how errors propagate and how
input is validated.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from ..config import DEFAULT_PATTERNS, PatternConfig
from ..knowledge import PatternsInfo, SourceFile
from ..scoring import count_files, count_matches, exceeds

PRIVATE_NOARG_CONSTRUCTOR = re.compile(r"private\s+\w+\s*\(\s*\)\s*\{")
PUBLIC_CONSTRUCTOR = re.compile(r"public\s+\w+\s*\([^)]*\)\s*\{")
FACTORY_METHOD = re.compile(r"public\s+static\s+\w+\s+(?:Create|CreateNew|New|Factory)\w*\s*\(")

READONLY_COLLECTION = re.compile(r"IReadOnlyList<\w+>")
PUBLIC_COLLECTION = re.compile(r"public\s+List<\w+>\s+\w+\s*\{")
PRIVATE_BACKING_FIELD = re.compile(r"private\s+(?:readonly\s+)?List<\w+>\s+_\w+")

RESULT_TYPE = re.compile(r"Result<\w+>|class\s+Result\s*\{")
THROWN_EXCEPTION = re.compile(r"throw\s+new\s+\w+Exception")

FLUENT_VALIDATION = re.compile(r"using\s+FluentValidation|AbstractValidator<")
DATA_ANNOTATIONS = re.compile(r"\[Required\]|\[MaxLength\]|\[Range\]")
GUARD_CLAUSE = re.compile(
    r"if\s*\([^)]*(?:null|string\.IsNullOrEmpty|<=|>=)[^)]*\)\s*(?:throw|return)"
)


def classify_patterns(
    files: Sequence[SourceFile],
    config: PatternConfig = DEFAULT_PATTERNS,
) -> PatternsInfo:
    constructors = detect_constructor_style(files, config)
    collections = detect_collection_style(files, config)
    errors = detect_error_style(files, config)
    validation = detect_validation_style(files, config)

    description = ". ".join([
        f"Entity constructors: {constructors}",
        f"Collection properties: {collections}",
        f"Error handling: {errors}",
        f"Validation: {validation}",
    ]) + "."

    return PatternsInfo(
        entity_constructors=constructors,
        collection_properties=collections,
        error_handling=errors,
        validation=validation,
        description=description,
    )


def detect_constructor_style(files: Sequence[SourceFile], config: PatternConfig = DEFAULT_PATTERNS) -> str:
    private = count_files(files, PRIVATE_NOARG_CONSTRUCTOR)
    public = count_files(files, PUBLIC_CONSTRUCTOR)
    factory = count_files(files, FACTORY_METHOD)

    if private > public and factory > 0:
        return config.factory_constructors
    if exceeds(public, private, config.dominance_ratio):
        return config.public_constructors
    return config.mixed_constructors


def detect_collection_style(files: Sequence[SourceFile], config: PatternConfig = DEFAULT_PATTERNS) -> str:
    # Counted per match, not per file.
    readonly = count_matches(files, READONLY_COLLECTION)
    public = count_matches(files, PUBLIC_COLLECTION)
    backing = count_matches(files, PRIVATE_BACKING_FIELD)

    if readonly > public and backing > 0:
        return config.readonly_collections
    if exceeds(public, readonly, config.dominance_ratio):
        return config.public_collections
    if readonly > 0:
        return config.mixed_collections
    return config.various_collections


def detect_error_style(files: Sequence[SourceFile], config: PatternConfig = DEFAULT_PATTERNS) -> str:
    results = count_files(files, RESULT_TYPE)
    exceptions = count_files(files, THROWN_EXCEPTION)

    if results > exceptions:
        return config.result_errors
    if exceeds(exceptions, results, config.dominance_ratio):
        return config.exception_errors
    if results > 0:
        return config.mixed_errors
    return config.exception_errors


def detect_validation_style(files: Sequence[SourceFile], config: PatternConfig = DEFAULT_PATTERNS) -> str:
    """Report every validation technique in use, joined together."""
    fluent = count_files(files, FLUENT_VALIDATION)
    annotations = count_files(files, DATA_ANNOTATIONS)
    guards = count_files(files, GUARD_CLAUSE)

    found: list[str] = []
    if fluent > 0:
        found.append(config.declarative_validation)
    if annotations > 0:
        found.append(config.attribute_validation)
    if exceeds(guards, max(fluent, annotations), config.dominance_ratio):
        found.append(config.guard_validation)

    if not found:
        return config.default_validation
    return config.validation_joiner.join(found)
