"""Tests for the naming convention classifier."""

from dataclasses import replace

import pytest

from project_knowledge.classifiers.naming import (
    classify_naming,
    detect_casing,
    detect_constant_style,
    detect_date_suffix,
    detect_private_field_style,
    detect_property_style,
)
from project_knowledge.config import DEFAULT_NAMING
from project_knowledge.knowledge import PropertyToken

ENTITY_CS = """
public class Customer
{
    public const int MAX_NAME_LENGTH = 100;
    private readonly string _name;
    private int _age;

    public Guid Id { get; private set; }
    public string Email { get; private set; }
    public DateTime CreatedOn { get; private set; }
    public DateTime UpdatedOn { get; private set; }

    public void Rename(string name) { }
    public bool IsAdult() { return _age >= 18; }
}
"""


class TestCasing:
    def test_majority_upper(self):
        assert detect_casing(["Order", "Customer", "helper"]) == "PascalCase"

    def test_majority_lower(self):
        assert detect_casing(["doThis", "doThat", "Run"]) == "camelCase"

    def test_tie_defaults_upper(self):
        assert detect_casing(["Run", "walk"]) == "PascalCase"

    def test_empty_defaults_upper(self):
        assert detect_casing([]) == "PascalCase"

    def test_default_is_configurable(self):
        config = replace(DEFAULT_NAMING, upper_casing="Upper")
        assert detect_casing([], config) == "Upper"


class TestPropertyStyle:
    @pytest.mark.parametrize("private, total, expected", [
        (8, 10, "PascalCase with private setters"),
        (7, 10, "PascalCase (mixed setter visibility)"),
        (4, 10, "PascalCase (mixed setter visibility)"),
        (3, 10, "PascalCase with public setters"),
        (0, 10, "PascalCase with public setters"),
    ])
    def test_thresholds(self, private, total, expected):
        props = [PropertyToken(f"P{i}", i < private) for i in range(total)]
        assert detect_property_style(props) == expected

    def test_empty(self):
        assert detect_property_style([]) == "PascalCase"


class TestPrivateFieldStyle:
    def test_underscore_majority(self):
        assert detect_private_field_style(["_name", "_age", "value"]) == "_camelCase"

    def test_short_prefix_majority(self):
        assert detect_private_field_style(["m_name", "m_age", "_x"]) == "m_camelCase"

    def test_unprefixed_majority(self):
        assert detect_private_field_style(["name", "age", "_x"]) == "camelCase (no prefix)"

    def test_tie_defaults_to_underscore(self):
        assert detect_private_field_style(["name", "m_age"]) == "_camelCase"

    def test_empty_defaults_to_underscore(self):
        assert detect_private_field_style([]) == "_camelCase"


class TestConstantStyle:
    def test_upper_snake(self):
        assert detect_constant_style(["MAX_SIZE", "MIN_SIZE", "Timeout"]) == "UPPER_SNAKE_CASE"

    def test_upper_without_separator_is_title_case(self):
        assert detect_constant_style(["MAX", "MIN"]) == "PascalCase"

    def test_tie_is_title_case(self):
        assert detect_constant_style(["MAX_SIZE", "Timeout"]) == "PascalCase"

    def test_empty(self):
        assert detect_constant_style([]) == "PascalCase"


class TestDateSuffix:
    def test_on_suffix(self):
        assert detect_date_suffix(["CreatedOn", "UpdatedOn", "DeletedAt"]) == (
            "Use 'On' suffix (CreatedOn, UpdatedOn)"
        )

    def test_at_wins_tie(self):
        assert detect_date_suffix(["CreatedOn", "UpdatedAt"]) == (
            "Use 'At' suffix (CreatedAt, UpdatedAt)"
        )

    def test_inconsistent(self):
        assert detect_date_suffix(["Created", "Timestamp"]) == (
            "Various date field naming (no consistent suffix)"
        )

    def test_empty(self):
        assert detect_date_suffix([]) == "Use 'At' suffix (CreatedAt, UpdatedAt)"


class TestClassifyNaming:
    def test_entity_file(self, make_file):
        result = classify_naming([make_file(ENTITY_CS)])
        assert result.classes == "PascalCase"
        assert result.methods == "PascalCase"
        assert result.properties == "PascalCase with private setters"
        assert result.variables == "camelCase"
        assert result.private_fields == "_camelCase"
        assert result.constants == "UPPER_SNAKE_CASE"
        assert result.date_fields == "Use 'On' suffix (CreatedOn, UpdatedOn)"
        assert result.description == (
            "Classes use PascalCase, methods use PascalCase, "
            "properties use PascalCase with private setters, "
            "private fields use _camelCase, constants use UPPER_SNAKE_CASE, "
            "Date fields: Use 'On' suffix (CreatedOn, UpdatedOn)."
        )

    def test_empty_input(self):
        result = classify_naming([])
        assert result.classes == "PascalCase"
        assert result.methods == "PascalCase"
        assert result.properties == "PascalCase"
        assert result.private_fields == "_camelCase"
        assert result.constants == "PascalCase"
        assert result.date_fields == "Use 'At' suffix (CreatedAt, UpdatedAt)"
        assert result.description == (
            "Classes use PascalCase, methods use PascalCase, properties use PascalCase, "
            "private fields use _camelCase, Date fields: Use 'At' suffix (CreatedAt, UpdatedAt)."
        )

    def test_to_dict_keys(self):
        d = classify_naming([]).to_dict()
        assert set(d) == {
            "classes", "methods", "properties", "variables",
            "constants", "privateFields", "dateFields", "description",
        }
