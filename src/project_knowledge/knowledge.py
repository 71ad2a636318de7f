"""Project knowledge data model.

Every classifier returns one of the result records below; the aggregator
bundles them into a ProjectKnowledge report. JSON keys are camelCase and
must stay stable for downstream consumers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class SourceFile:
    """A loaded source file. Lives for one analysis run only."""

    path: str
    extension: str
    content: str


@dataclass(frozen=True)
class PropertyToken:
    """An auto-property declaration and whether its setter is private."""

    name: str
    has_private_setter: bool


@dataclass(frozen=True)
class NamingConventions:
    """Naming conventions used in the project."""

    classes: str
    methods: str
    properties: str
    variables: str
    constants: str
    private_fields: str
    date_fields: str
    description: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "classes": self.classes,
            "methods": self.methods,
            "properties": self.properties,
            "variables": self.variables,
            "constants": self.constants,
            "privateFields": self.private_fields,
            "dateFields": self.date_fields,
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> NamingConventions:
        return cls(
            classes=data["classes"],
            methods=data["methods"],
            properties=data["properties"],
            variables=data["variables"],
            constants=data["constants"],
            private_fields=data["privateFields"],
            date_fields=data["dateFields"],
            description=data["description"],
        )


@dataclass(frozen=True)
class ArchitectureInfo:
    """Architectural pattern and the layers found on disk."""

    pattern: str
    layers: tuple[str, ...] = ()
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "pattern": self.pattern,
            "layers": list(self.layers),
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ArchitectureInfo:
        return cls(
            pattern=data["pattern"],
            layers=tuple(data.get("layers", ())),
            description=data["description"],
        )


@dataclass(frozen=True)
class PatternsInfo:
    """Structural idioms: construction, collections, errors, validation."""

    entity_constructors: str
    collection_properties: str
    error_handling: str
    validation: str
    description: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "entityConstructors": self.entity_constructors,
            "collectionProperties": self.collection_properties,
            "errorHandling": self.error_handling,
            "validation": self.validation,
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PatternsInfo:
        return cls(
            entity_constructors=data["entityConstructors"],
            collection_properties=data["collectionProperties"],
            error_handling=data["errorHandling"],
            validation=data["validation"],
            description=data["description"],
        )


@dataclass(frozen=True)
class DomainInfo:
    """Domain vocabulary and aggregate roots."""

    terms: tuple[str, ...] = ()
    aggregates: tuple[str, ...] = ()
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "terms": list(self.terms),
            "aggregates": list(self.aggregates),
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DomainInfo:
        return cls(
            terms=tuple(data.get("terms", ())),
            aggregates=tuple(data.get("aggregates", ())),
            description=data["description"],
        )


@dataclass(frozen=True)
class TestingInfo:
    """Test framework, organization pattern and mocking library."""

    __test__ = False  # not a pytest test class

    framework: str
    pattern: str
    mocking_library: str
    description: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "framework": self.framework,
            "pattern": self.pattern,
            "mockingLibrary": self.mocking_library,
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TestingInfo:
        return cls(
            framework=data["framework"],
            pattern=data["pattern"],
            mocking_library=data["mockingLibrary"],
            description=data["description"],
        )


@dataclass(frozen=True)
class ProjectKnowledge:
    """Complete analysis report for one project."""

    analyzed: str
    version: str
    naming: NamingConventions
    architecture: ArchitectureInfo
    patterns: PatternsInfo
    domain: DomainInfo
    testing: TestingInfo

    def to_dict(self) -> dict[str, Any]:
        return {
            "analyzed": self.analyzed,
            "version": self.version,
            "naming": self.naming.to_dict(),
            "architecture": self.architecture.to_dict(),
            "patterns": self.patterns.to_dict(),
            "domain": self.domain.to_dict(),
            "testing": self.testing.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ProjectKnowledge:
        return cls(
            analyzed=data["analyzed"],
            version=data["version"],
            naming=NamingConventions.from_dict(data["naming"]),
            architecture=ArchitectureInfo.from_dict(data["architecture"]),
            patterns=PatternsInfo.from_dict(data["patterns"]),
            domain=DomainInfo.from_dict(data["domain"]),
            testing=TestingInfo.from_dict(data["testing"]),
        )

    def summary_rows(self) -> list[tuple[str, str]]:
        """Key/value rows for a compact console summary."""
        rows = [
            ("Architecture", self.architecture.pattern),
            ("Layers", ", ".join(self.architecture.layers) or "-"),
            ("Classes / Methods", f"{self.naming.classes} / {self.naming.methods}"),
            ("Private fields", self.naming.private_fields),
            ("Constructors", self.patterns.entity_constructors),
            ("Error handling", self.patterns.error_handling),
            ("Validation", self.patterns.validation),
            ("Domain terms", str(len(self.domain.terms))),
        ]
        if self.domain.aggregates:
            rows.append(("Aggregates", ", ".join(self.domain.aggregates)))
        rows.append(("Testing", f"{self.testing.framework} / {self.testing.mocking_library}"))
        return rows
