"""Naming convention classifier.

Extracts declarations from C# sources and tallies them to decide the
casing of types and methods, setter visibility of properties, private
field prefixes, constant style and the suffix used on timestamp fields.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .. import extractors
from ..config import DEFAULT_NAMING, NamingConfig
from ..knowledge import NamingConventions, PropertyToken, SourceFile
from ..scoring import strict_majority


def classify_naming(
    files: Sequence[SourceFile],
    config: NamingConfig = DEFAULT_NAMING,
) -> NamingConventions:
    """Classify naming conventions across ``files``."""
    classes = extractors.collect(files, extractors.extract_types)
    methods = extractors.collect(
        files, lambda text: extractors.extract_methods(text, config.method_denylist)
    )
    properties = extractors.collect(files, extractors.extract_properties)
    private_fields = extractors.collect(files, extractors.extract_private_fields)
    constants = extractors.collect(files, extractors.extract_constants)
    date_fields = extractors.collect(files, extractors.extract_timestamp_fields)

    class_style = detect_casing(classes, config)
    method_style = detect_casing(methods, config)
    property_style = detect_property_style(properties, config)
    field_style = detect_private_field_style(private_fields, config)
    constant_style = detect_constant_style(constants, config)
    date_style = detect_date_suffix(date_fields, config)

    parts = [
        f"Classes use {class_style}",
        f"methods use {method_style}",
        f"properties use {property_style}",
        f"private fields use {field_style}",
    ]
    if constant_style != config.title_case:
        parts.append(f"constants use {constant_style}")
    parts.append(f"Date fields: {date_style}")

    return NamingConventions(
        classes=class_style,
        methods=method_style,
        properties=property_style,
        variables=config.variables,
        constants=constant_style,
        private_fields=field_style,
        date_fields=date_style,
        description=", ".join(parts) + ".",
    )


def _starts_upper(name: str) -> bool:
    return name[0] == name[0].upper()


def detect_casing(names: Iterable[str], config: NamingConfig = DEFAULT_NAMING) -> str:
    """Majority vote on first-character case; ties go to the upper style."""
    upper = lower = 0
    for name in names:
        if not name:
            continue
        if _starts_upper(name):
            upper += 1
        else:
            lower += 1
    return config.lower_casing if lower > upper else config.upper_casing


def detect_property_style(
    properties: Sequence[PropertyToken],
    config: NamingConfig = DEFAULT_NAMING,
) -> str:
    if not properties:
        return config.upper_casing

    private = sum(1 for p in properties if p.has_private_setter)
    percentage = private / len(properties) * 100
    if percentage > config.restricted_setter_threshold:
        return config.restricted_setters
    if percentage > config.mixed_setter_threshold:
        return config.mixed_setters
    return config.open_setters


def detect_private_field_style(fields: Iterable[str], config: NamingConfig = DEFAULT_NAMING) -> str:
    """Three-way majority among prefix buckets; ties favour the configured default."""
    counts = {bucket.label: 0 for bucket in config.field_prefixes}
    for name in fields:
        for bucket in config.field_prefixes:
            if not bucket.indicators or any(name.startswith(p) for p in bucket.indicators):
                counts[bucket.label] += 1
                break
    return strict_majority(counts, config.field_default)


def detect_constant_style(constants: Iterable[str], config: NamingConfig = DEFAULT_NAMING) -> str:
    upper_snake = title = 0
    for name in constants:
        if not name:
            continue
        if name == name.upper() and config.constant_separator in name:
            upper_snake += 1
        elif _starts_upper(name):
            title += 1
    return config.upper_snake if upper_snake > title else config.title_case


def detect_date_suffix(fields: Sequence[str], config: NamingConfig = DEFAULT_NAMING) -> str:
    if not fields:
        return config.primary_suffix_label

    primary = secondary = 0
    for name in fields:
        if name.endswith(config.primary_suffix):
            primary += 1
        elif name.endswith(config.secondary_suffix):
            secondary += 1

    if secondary > primary:
        return config.secondary_suffix_label
    if primary > 0:
        return config.primary_suffix_label
    return config.inconsistent_suffix_label
