"""
Tests for the query operators.

Tests verify that the operators:
    - Fail explicitly on missing structure
    - Group and sort stably
    - Join with inner-join semantics
"""

import pytest
from xmltransforms.exceptions import StructureError
from xmltransforms.model import element
from xmltransforms.query import (
    child_at,
    group_by,
    inner_join,
    int_attribute,
    left_unmatched,
    order_by,
    text_of,
)


CUSTOMER = element(
    "Customers",
    element("FullAddress", element("City", "Berlin"), element("Country", "Germany")),
)


class TestPaths:

    def test_child_at(self):
        assert child_at(CUSTOMER, "FullAddress", "City").text == "Berlin"

    def test_child_at_empty_path(self):
        assert child_at(CUSTOMER) is CUSTOMER

    def test_text_of(self):
        assert text_of(CUSTOMER, "FullAddress", "Country") == "Germany"

    def test_missing_step(self):
        with pytest.raises(StructureError, match="Region"):
            text_of(CUSTOMER, "FullAddress", "Region")


class TestIntAttribute:

    @pytest.mark.parametrize("raw,expected", [("7", 7), ("-3", -3), (" 42 ", 42), ("+5", 5)])
    def test_valid(self, raw, expected):
        assert int_attribute(element("channel", id=raw), "id") == expected

    @pytest.mark.parametrize("raw", ["", "abc", "1.5", "1_000"])
    def test_invalid(self, raw):
        with pytest.raises(StructureError):
            int_attribute(element("channel", id=raw), "id")

    def test_missing(self):
        with pytest.raises(StructureError):
            int_attribute(element("channel"), "id")


class TestGroupBy:

    def test_first_occurrence_order(self):
        groups = group_by(["b1", "a1", "b2", "c1", "a2"], key=lambda s: s[0])
        assert [k for k, _ in groups] == ["b", "a", "c"]
        assert dict(groups)["b"] == ["b1", "b2"]
        assert dict(groups)["a"] == ["a1", "a2"]

    def test_every_item_in_exactly_one_group(self):
        items = list(range(20))
        groups = group_by(items, key=lambda n: n % 3)
        flattened = [i for _, members in groups for i in members]
        assert sorted(flattened) == items
        assert len(groups) == 3

    def test_empty(self):
        assert group_by([], key=lambda x: x) == []


class TestOrderBy:

    def test_two_keys(self):
        rows = [("USA", "Eugene"), ("Germany", "Berlin"), ("USA", "Elgin")]
        result = order_by(rows, lambda r: r[0], lambda r: r[1])
        assert result == [("Germany", "Berlin"), ("USA", "Elgin"), ("USA", "Eugene")]

    def test_stable_on_ties(self):
        rows = [("USA", "Elgin", 1), ("USA", "Elgin", 2), ("Germany", "Berlin", 3), ("USA", "Elgin", 0)]
        result = order_by(rows, lambda r: r[0], lambda r: r[1])
        assert [r[2] for r in result] == [3, 1, 2, 0]

    def test_ordinal_comparison(self):
        """Upper case sorts before lower case, as code points do."""
        assert order_by(["b", "a", "B", "A"], lambda s: s) == ["A", "B", "a", "b"]

    def test_input_not_mutated(self):
        rows = ["b", "a"]
        order_by(rows, lambda s: s)
        assert rows == ["b", "a"]


class TestJoin:

    def test_inner_join(self):
        orders = ["1", "2", "1", "9"]
        products = [("1", 100), ("2", 250)]
        result = inner_join(orders, products, lambda o: o, lambda p: p[0], lambda o, p: p[1])
        assert result == [100, 250, 100]

    def test_duplicate_inner_keys_each_match(self):
        result = inner_join(["x"], [("x", 1), ("x", 2)], lambda o: o, lambda p: p[0], lambda o, p: p[1])
        assert result == [1, 2]

    def test_left_unmatched(self):
        products = [("1", 100)]
        assert left_unmatched(["1", "9", "8"], products, lambda o: o, lambda p: p[0]) == ["9", "8"]

    def test_empty_outer(self):
        assert inner_join([], [("1", 1)], lambda o: o, lambda p: p[0], lambda o, p: p[1]) == []
