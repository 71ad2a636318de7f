"""Lexical token extractors for C# source text.

Each extractor takes the text of one file and returns a fresh list of
matches. Compiled patterns are module constants but only ever used through
``finditer``, so no scanning position carries over between files.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from typing import TypeVar

from .knowledge import PropertyToken, SourceFile

T = TypeVar("T")

_IDENT = r"[A-Za-z_][A-Za-z0-9_]*"
_TYPE = r"[A-Za-z_<>\[\]]+"

TYPE_DECLARATION = re.compile(
    rf"(?:public|internal|private|protected)?\s*(?:abstract|sealed|static|partial)?\s*\bclass\s+({_IDENT})"
)
VISIBLE_TYPE_DECLARATION = re.compile(
    rf"(?:public|internal)\s+(?:abstract|sealed|static|partial)?\s*\bclass\s+({_IDENT})"
)
# Entity classes may be abstract or sealed but never static or partial.
ENTITY_DECLARATION = re.compile(
    rf"(?:public|internal)\s+(?:abstract|sealed)?\s*\bclass\s+({_IDENT})"
)
METHOD_DECLARATION = re.compile(
    rf"(?:public|private|protected|internal)\s+(?:static\s+)?(?:async\s+)?(?:virtual\s+)?"
    rf"(?:override\s+)?{_TYPE}\s+({_IDENT})\s*\("
)
PROPERTY_DECLARATION = re.compile(
    rf"(?:public|protected|internal)\s+{_TYPE}\s+({_IDENT})\s*\{{\s*get;?\s*(private\s+set|set)?;?\s*\}}"
)
PRIVATE_FIELD = re.compile(rf"private\s+(?:readonly\s+)?{_TYPE}\s+({_IDENT})\s*[=;]")
CONSTANT_DECLARATION = re.compile(
    rf"(?:public|private|protected|internal)\s+const\s+[A-Za-z_]+\s+({_IDENT})\s*="
)
TIMESTAMP_FIELD = re.compile(
    rf"(?:public|protected|internal|private)\s+(?:readonly\s+)?(?:DateTime(?:Offset)?)\s+({_IDENT})"
)


def extract_types(content: str) -> list[str]:
    """Names of every class declaration, any visibility."""
    return [m.group(1) for m in TYPE_DECLARATION.finditer(content)]


def extract_visible_types(content: str) -> list[str]:
    """Names of public or internal class declarations."""
    return [m.group(1) for m in VISIBLE_TYPE_DECLARATION.finditer(content)]


def first_entity_type(content: str) -> str | None:
    match = ENTITY_DECLARATION.search(content)
    return match.group(1) if match else None


def extract_methods(content: str, denylist: Iterable[str] = ()) -> list[str]:
    """Method names, minus keywords the pattern tends to catch."""
    skip = set(denylist)
    return [
        m.group(1) for m in METHOD_DECLARATION.finditer(content)
        if m.group(1) not in skip
    ]


def extract_properties(content: str) -> list[PropertyToken]:
    return [
        PropertyToken(
            name=m.group(1),
            has_private_setter=bool(m.group(2)) and "private" in m.group(2),
        )
        for m in PROPERTY_DECLARATION.finditer(content)
    ]


def extract_private_fields(content: str) -> list[str]:
    return [m.group(1) for m in PRIVATE_FIELD.finditer(content)]


def extract_constants(content: str) -> list[str]:
    return [m.group(1) for m in CONSTANT_DECLARATION.finditer(content)]


def extract_timestamp_fields(content: str) -> list[str]:
    """Names of DateTime/DateTimeOffset typed members."""
    return [m.group(1) for m in TIMESTAMP_FIELD.finditer(content)]


def collect(files: Iterable[SourceFile], extractor: Callable[[str], list[T]]) -> list[T]:
    """Run ``extractor`` over every file, concatenating results in file order."""
    tokens: list[T] = []
    for f in files:
        tokens.extend(extractor(f.content))
    return tokens
