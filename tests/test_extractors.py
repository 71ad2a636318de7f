"""Tests for the lexical token extractors."""

from project_knowledge import extractors
from project_knowledge.knowledge import PropertyToken

ORDER_CS = """
namespace Shop.Domain.Aggregates
{
    public sealed class Order : AggregateRoot
    {
        private const int MAX_LINES = 50;
        public const string DefaultCurrency = "EUR";
        private readonly List<OrderLine> _lines = new();
        private int m_version;
        private string status;

        public Guid Id { get; private set; }
        public string Number { get; set; }
        public DateTime CreatedAt { get; private set; }
        private DateTimeOffset updatedOn;

        private Order() { }

        public static Order Create(string number)
        {
            if (number == null) throw new ArgumentNullException(nameof(number));
            return new Order { Number = number };
        }

        public void AddLine(OrderLine line) { }
        internal async Task<bool> saveAsync() { return true; }
    }

    internal class OrderLine { }
}
"""


class TestTypeExtraction:
    def test_types(self):
        assert extractors.extract_types(ORDER_CS) == ["Order", "OrderLine"]

    def test_visible_types(self):
        assert extractors.extract_visible_types(ORDER_CS) == ["Order", "OrderLine"]

    def test_private_nested_class_is_not_visible(self):
        text = "public class Outer { private class Inner { } }"
        assert extractors.extract_types(text) == ["Outer", "Inner"]
        assert extractors.extract_visible_types(text) == ["Outer"]

    def test_first_entity_type(self):
        assert extractors.first_entity_type(ORDER_CS) == "Order"
        assert extractors.first_entity_type("// nothing here") is None

    def test_entity_type_skips_static_and_partial(self):
        text = "public static class Guards { }\npublic partial class Order { }\ninternal abstract class Shape { }"
        assert extractors.first_entity_type(text) == "Shape"


class TestMemberExtraction:
    def test_methods(self):
        methods = extractors.extract_methods(ORDER_CS, {"get", "set"})
        assert "Create" in methods
        assert "AddLine" in methods
        assert "saveAsync" in methods

    def test_method_denylist(self):
        text = "public void get() { }\npublic void Run() { }"
        assert extractors.extract_methods(text, {"get"}) == ["Run"]

    def test_properties(self):
        props = extractors.extract_properties(ORDER_CS)
        assert PropertyToken("Id", True) in props
        assert PropertyToken("Number", False) in props
        assert PropertyToken("CreatedAt", True) in props

    def test_private_fields(self):
        fields = extractors.extract_private_fields(ORDER_CS)
        assert "_lines" in fields
        assert "m_version" in fields
        assert "status" in fields

    def test_constants(self):
        assert extractors.extract_constants(ORDER_CS) == ["MAX_LINES", "DefaultCurrency"]

    def test_timestamp_fields(self):
        assert extractors.extract_timestamp_fields(ORDER_CS) == ["CreatedAt", "updatedOn"]


class TestCollect:
    def test_no_matches_lost_between_files(self, make_file):
        files = [
            make_file("public class Alpha { }\npublic class Beta { }", "/a.cs"),
            make_file("public class Gamma { }", "/b.cs"),
        ]
        assert extractors.collect(files, extractors.extract_types) == ["Alpha", "Beta", "Gamma"]

    def test_repeated_runs_are_identical(self, make_file):
        files = [make_file(ORDER_CS)]
        first = extractors.collect(files, extractors.extract_constants)
        second = extractors.collect(files, extractors.extract_constants)
        assert first == second

    def test_empty_input(self):
        assert extractors.collect([], extractors.extract_types) == []
