"""Domain vocabulary classifier."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from .. import extractors
from ..config import DEFAULT_DOMAIN, DomainConfig
from ..knowledge import DomainInfo, SourceFile

AGGREGATE_MARKER = re.compile(r":\s*AggregateRoot|:\s*IAggregateRoot|\[AggregateRoot\]")


def classify_domain(
    files: Sequence[SourceFile],
    config: DomainConfig = DEFAULT_DOMAIN,
) -> DomainInfo:
    """Collect domain terms and aggregate roots from class declarations."""
    names = extractors.collect(files, extractors.extract_visible_types)
    terms = sorted(set(filter_domain_terms(names, config)))
    aggregates = find_aggregates(files, set(terms), config)
    return DomainInfo(
        terms=tuple(terms),
        aggregates=tuple(aggregates),
        description=_describe(terms, aggregates, config),
    )


def is_technical(name: str, config: DomainConfig = DEFAULT_DOMAIN) -> bool:
    return name in config.base_types or name.endswith(config.technical_suffixes)


def filter_domain_terms(names: Iterable[str], config: DomainConfig = DEFAULT_DOMAIN) -> list[str]:
    return [n for n in names if not is_technical(n, config)]


def find_aggregates(
    files: Sequence[SourceFile],
    terms: set[str],
    config: DomainConfig = DEFAULT_DOMAIN,
) -> list[str]:
    """Aggregate roots: the leading class of files under an aggregates folder
    or carrying an aggregate-root marker. Technical classes never qualify.
    """
    aggregates: set[str] = set()
    for f in files:
        in_folder = config.aggregates_folder in f.path.lower()
        if not (in_folder or AGGREGATE_MARKER.search(f.content)):
            continue
        name = extractors.first_entity_type(f.content)
        if name and name in terms:
            aggregates.add(name)
    return sorted(aggregates)


def _describe(terms: list[str], aggregates: list[str], config: DomainConfig) -> str:
    if not terms:
        return "No clear domain model detected"

    if len(terms) <= config.small_limit:
        parts = ["Small domain model"]
    elif len(terms) <= config.medium_limit:
        parts = ["Medium-sized domain model"]
    else:
        parts = ["Large domain model"]

    parts.append(f"with entities like {', '.join(terms[:config.example_count])}")

    if len(aggregates) == 1:
        parts.append(f"Aggregate root: {aggregates[0]}")
    elif aggregates:
        parts.append(f"{len(aggregates)} aggregate roots identified")

    return ". ".join(parts) + "."
