"""test_formatter.py - Unit tests for value classification, rendering and descriptions.

Covers:
    - classify() assigns each value to exactly one ValueKind
    - primitive_tag() one-word tags
    - render() rule per kind (quoted strings, literal scalars, pretty composites)
    - describe_type() structural descriptions for mappings, sequences, sets,
      tuples, dataclasses and plain objects
    - cycle and depth limits
"""

from collections import namedtuple
from dataclasses import dataclass
from decimal import Decimal

import pytest

from logify.formatter import ValueKind, classify, describe_type, primitive_tag, render


@dataclass
class Point:
    x: int
    y: float


class Account:
    def __init__(self):
        self.owner = "ana"
        self.balance = 10
        self._secret = "hidden"


Pair = namedtuple("Pair", ["left", "right"])


class TestClassify:
    @pytest.mark.parametrize(
        "value, kind",
        [
            (None, ValueKind.SCALAR),
            (True, ValueKind.SCALAR),
            (3, ValueKind.SCALAR),
            (2.5, ValueKind.SCALAR),
            (Decimal("1.5"), ValueKind.SCALAR),
            (b"raw", ValueKind.SCALAR),
            (len, ValueKind.SCALAR),
            ("text", ValueKind.STRING),
            ({"a": 1}, ValueKind.COMPOSITE),
            ([1], ValueKind.COMPOSITE),
            (Point(1, 2.0), ValueKind.COMPOSITE),
            (int, ValueKind.COMPOSITE),
        ],
    )
    def test_kind(self, value, kind):
        assert classify(value) is kind


class TestPrimitiveTag:
    @pytest.mark.parametrize(
        "value, tag",
        [
            (None, "null"),
            (False, "boolean"),
            (7, "number"),
            (1.25, "number"),
            ("s", "string"),
            (b"b", "bytes"),
            (print, "function"),
            (lambda: None, "function"),
            ({"a": 1}, "object"),
            ([1, 2], "object"),
        ],
    )
    def test_tag(self, value, tag):
        assert primitive_tag(value) == tag


class TestRender:
    def test_string_is_double_quoted(self):
        assert render("hello") == '"hello"'

    def test_scalars_render_literally(self):
        assert render(5) == "5"
        assert render(None) == "None"
        assert render(True) == "True"

    def test_composite_is_pretty_printed(self):
        assert render({"a": 1, "b": "x"}) == "{'a': 1, 'b': 'x'}"

    def test_long_composite_spans_lines(self):
        value = {f"key_{i}": "v" * 10 for i in range(10)}
        assert "\n" in render(value)


class TestDescribeType:
    def test_scalars_use_primitive_tag(self):
        assert describe_type(5) == "number"
        assert describe_type("x") == "string"
        assert describe_type(None) == "null"

    def test_mapping_mirrors_shape(self):
        assert describe_type({"a": 1, "b": "x"}) == "{ a: number, b: string }"

    def test_nested_mapping(self):
        value = {"user": {"id": 1, "tags": ["a", "b"]}, "active": True}
        assert describe_type(value) == (
            "{ user: { id: number, tags: string[] }, active: boolean }"
        )

    def test_empty_containers(self):
        assert describe_type({}) == "{}"
        assert describe_type([]) == "unknown[]"
        assert describe_type(set()) == "Set<unknown>"

    def test_mixed_list_is_a_union(self):
        assert describe_type([1, "a", 2]) == "(number | string)[]"

    def test_tuple_lists_each_position(self):
        assert describe_type((1, "a", None)) == "[number, string, null]"

    def test_set(self):
        assert describe_type({1, 2}) == "Set<number>"

    def test_dataclass(self):
        assert describe_type(Point(1, 2.0)) == "Point { x: number, y: number }"

    def test_namedtuple(self):
        assert describe_type(Pair(1, "r")) == "Pair { left: number, right: string }"

    def test_plain_object_skips_private_attributes(self):
        assert describe_type(Account()) == "Account { owner: string, balance: number }"

    def test_object_without_fields_uses_class_name(self):
        assert describe_type(object()) == "object"

    def test_self_reference_is_marked_circular(self):
        value = {"name": "root"}
        value["self"] = value
        assert describe_type(value) == "{ name: string, self: [Circular] }"

    def test_repeated_sibling_is_not_circular(self):
        shared = {"n": 1}
        assert describe_type([shared, shared]) == "{ n: number }[]"

    def test_depth_limit_collapses_to_object(self):
        value = {"a": {"b": {"c": 1}}}
        assert describe_type(value, max_depth=2) == "{ a: { b: object } }"
