"""Declarative heuristics for every classifier.

Families, indicators, weights, thresholds and fallback labels live here as
frozen dataclasses. Each classifier takes its config as a parameter and
falls back to the module-level default instance, so tests can swap a
table without touching process-wide state.
"""

from __future__ import annotations

from dataclasses import dataclass

# --- Scanning ---

SKIP_DIRS = frozenset({
    "node_modules", "bin", "obj", "dist", ".git", ".vs", ".vscode",
})

SAMPLER_SKIP_DIRS = SKIP_DIRS | {"build"}

MAX_DIRECTORY_DEPTH = 5

CSHARP_PATTERN = "**/*.cs"
TYPESCRIPT_PATTERN = "**/*.ts"


@dataclass(frozen=True)
class Family:
    """A named convention family and the signals that vote for it."""

    key: str
    label: str
    indicators: tuple[str, ...] = ()
    weight: int = 1


# --- Architecture ---


@dataclass(frozen=True)
class ArchitectureConfig:
    families: tuple[Family, ...] = (
        Family("ddd", "DDD", (
            "domain", "aggregates", "entities", "valueobjects",
            "repositories", "domainservices", "application", "infrastructure",
        ), weight=2),
        Family("clean", "Clean", (
            "domain", "application", "infrastructure", "presentation",
            "core", "usecases",
        ), weight=2),
        Family("layered", "Layered", (
            "businesslogic", "business", "datalayer", "dataaccess",
            "presentationlayer", "servicelayer", "services",
        ), weight=2),
        Family("nTier", "N-Tier", (
            "dal", "bll", "ui", "dataaccess", "businesslogic", "presentation",
        ), weight=2),
    )
    min_score: int = 3
    fallback: str = "Custom"
    # (pattern, layers) pairs in declaration order.
    layers: tuple[tuple[str, tuple[str, ...]], ...] = (
        ("DDD", ("Domain", "Application", "Infrastructure", "Api")),
        ("Clean", ("Domain", "Application", "Infrastructure", "Presentation")),
        ("Layered", ("Presentation", "Business", "DataAccess")),
        ("N-Tier", ("Presentation", "BusinessLogic", "DataAccess")),
        ("Custom", ()),
    )
    generic_layers: tuple[str, ...] = (
        "Domain", "Application", "Infrastructure", "Api", "Core", "Services",
    )
    descriptions: tuple[tuple[str, str], ...] = (
        ("DDD", "Domain-Driven Design with aggregates, entities, and repositories"),
        ("Clean", "Clean Architecture with clear dependency direction and separation of concerns"),
        ("Layered", "Layered Architecture with presentation, business, and data access layers"),
        ("N-Tier", "N-Tier Architecture with physical separation of layers"),
        ("Custom", "Custom architecture pattern"),
    )

    def layers_for(self, pattern: str) -> tuple[str, ...]:
        return dict(self.layers).get(pattern, ())

    def description_for(self, pattern: str) -> str:
        descriptions = dict(self.descriptions)
        return descriptions.get(pattern, descriptions[self.fallback])


# --- Naming ---


@dataclass(frozen=True)
class NamingConfig:
    upper_casing: str = "PascalCase"
    lower_casing: str = "camelCase"
    variables: str = "camelCase"
    method_denylist: frozenset[str] = frozenset({"get", "set", "if", "for", "while", "switch"})

    restricted_setter_threshold: float = 70.0
    mixed_setter_threshold: float = 30.0
    restricted_setters: str = "PascalCase with private setters"
    mixed_setters: str = "PascalCase (mixed setter visibility)"
    open_setters: str = "PascalCase with public setters"

    # Checked in order; the last bucket catches everything else.
    field_prefixes: tuple[Family, ...] = (
        Family("underscore", "_camelCase", ("_",)),
        Family("short", "m_camelCase", ("m_",)),
        Family("none", "camelCase (no prefix)"),
    )
    field_default: str = "_camelCase"

    upper_snake: str = "UPPER_SNAKE_CASE"
    title_case: str = "PascalCase"
    constant_separator: str = "_"

    primary_suffix: str = "At"
    secondary_suffix: str = "On"
    primary_suffix_label: str = "Use 'At' suffix (CreatedAt, UpdatedAt)"
    secondary_suffix_label: str = "Use 'On' suffix (CreatedOn, UpdatedOn)"
    inconsistent_suffix_label: str = "Various date field naming (no consistent suffix)"


# --- Structural patterns ---


@dataclass(frozen=True)
class PatternConfig:
    dominance_ratio: int = 2

    factory_constructors: str = "Private parameterless constructor + static factory method"
    public_constructors: str = "Public constructors with parameters"
    mixed_constructors: str = "Mixed constructor patterns"

    readonly_collections: str = "IReadOnlyList<T> with private List<T> backing field"
    public_collections: str = "Public List<T> properties"
    mixed_collections: str = "IReadOnlyList<T> (mixed backing strategies)"
    various_collections: str = "Various collection patterns"

    result_errors: str = "Result pattern with Result<T>"
    exception_errors: str = "Exception-based error handling"
    mixed_errors: str = "Mixed (Result pattern and exceptions)"

    declarative_validation: str = "FluentValidation"
    attribute_validation: str = "DataAnnotations"
    guard_validation: str = "Manual validation in constructors"
    default_validation: str = "Manual validation"
    validation_joiner: str = " + "


# --- Domain vocabulary ---


@dataclass(frozen=True)
class DomainConfig:
    technical_suffixes: tuple[str, ...] = (
        "Controller", "Service", "Repository", "Validator", "Mapper",
        "Factory", "Builder", "Handler", "Query", "Command", "Response",
        "Request", "Dto", "ViewModel", "Model", "Configuration", "Settings",
        "Options",
    )
    base_types: frozenset[str] = frozenset({
        "Entity", "ValueObject", "AggregateRoot", "BaseEntity",
    })
    aggregates_folder: str = "aggregates"
    small_limit: int = 5
    medium_limit: int = 15
    example_count: int = 5


# --- Testing conventions ---


@dataclass(frozen=True)
class TestingConfig:
    __test__ = False  # not a pytest test class

    path_markers: tuple[str, ...] = ("test", "spec")

    # Declaration order doubles as the tie-break preference.
    frameworks: tuple[Family, ...] = (
        Family("xunit", "xUnit", (r"using\s+Xunit", r"\[Fact\]", r"\[Theory\]")),
        Family("nunit", "NUnit", (r"using\s+NUnit", r"\[Test\]", r"\[TestFixture\]")),
        Family("mstest", "MSTest", (
            r"using\s+Microsoft\.VisualStudio\.TestTools", r"\[TestMethod\]", r"\[TestClass\]",
        )),
    )
    mocking_libraries: tuple[Family, ...] = (
        Family("moq", "Moq", (r"using\s+Moq", r"new\s+Mock<", r"Mock\.Of<")),
        Family("nsubstitute", "NSubstitute", (r"using\s+NSubstitute", r"Substitute\.For<")),
        Family("fakeiteasy", "FakeItEasy", (r"using\s+FakeItEasy", r"A\.Fake<")),
    )

    aaa_label: str = "AAA (Arrange-Act-Assert)"
    gwt_label: str = "GWT (Given-When-Then)"

    unknown_framework: str = "Unknown"
    various_patterns: str = "Various patterns"
    no_mocking: str = "None detected"

    no_tests_framework: str = "None detected"
    no_tests_pattern: str = "Unknown"
    no_tests_description: str = "No test files found in project"


DEFAULT_ARCHITECTURE = ArchitectureConfig()
DEFAULT_NAMING = NamingConfig()
DEFAULT_PATTERNS = PatternConfig()
DEFAULT_DOMAIN = DomainConfig()
DEFAULT_TESTING = TestingConfig()
