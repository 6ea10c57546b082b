"""
Tests for the tree model objects.

These tests verify:
    - Basic node creation
    - Immutability and the leaf/container invariant
    - Typed navigation (find/require child and attribute)
    - Inner text and tree walks
    - Record width
"""

import dataclasses

import pytest
from xmltransforms.exceptions import FormatError, StructureError
from xmltransforms.model import Comment, Node, Record, Text, element


def build_customer() -> Node:
    return element(
        "Customer",
        element("CompanyName", "Alfreds Futterkiste"),
        Comment("primary"),
        element(
            "FullAddress",
            element("City", "Berlin"),
            element("Country", "Germany"),
        ),
        CustomerID="ALFKI",
    )


class TestNode:
    """Test Node construction and invariants."""

    def test_create_leaf(self):
        node = Node(name="City", text="Berlin")
        assert node.name == "City"
        assert node.text == "Berlin"
        assert node.children == ()
        assert dict(node.attributes) == {}

    def test_children_are_tuple(self):
        """Lists passed in are frozen into tuples."""
        node = Node(name="a", children=[Node(name="b")])
        assert isinstance(node.children, tuple)

    def test_text_with_element_children_rejected(self):
        with pytest.raises(StructureError):
            Node(name="a", children=(Node(name="b"),), text="x")

    def test_text_with_comment_children_allowed(self):
        node = Node(name="a", children=(Comment("note"),), text="x")
        assert node.text == "x"

    def test_frozen(self):
        node = Node(name="a")
        with pytest.raises(dataclasses.FrozenInstanceError):
            node.name = "b"

    def test_attributes_read_only(self):
        node = Node(name="a", attributes={"id": "1"})
        with pytest.raises(TypeError):
            node.attributes["id"] = "2"

    def test_attributes_copied(self):
        """Mutating the source dict does not leak into the node."""
        attrs = {"id": "1"}
        node = Node(name="a", attributes=attrs)
        attrs["id"] = "2"
        assert node.attribute("id") == "1"

    def test_equality(self):
        assert Node(name="a", attributes={"x": "1"}) == Node(name="a", attributes={"x": "1"})
        assert Node(name="a") != Node(name="b")


class TestNavigation:
    """Test typed accessors."""

    def test_find_child(self):
        customer = build_customer()
        assert customer.find_child("CompanyName").text == "Alfreds Futterkiste"

    def test_find_child_missing(self):
        assert build_customer().find_child("Phone") is None

    def test_require_child_missing(self):
        with pytest.raises(StructureError, match="Phone"):
            build_customer().require_child("Phone")

    def test_attribute(self):
        customer = build_customer()
        assert customer.attribute("CustomerID") == "ALFKI"
        assert customer.attribute("Missing") is None

    def test_require_attribute_missing(self):
        with pytest.raises(StructureError, match="Missing"):
            build_customer().require_attribute("Missing")

    def test_elements_filters_by_name(self):
        root = element("r", element("a"), element("b"), element("a"))
        assert [n.name for n in root.elements("a")] == ["a", "a"]
        assert [n.name for n in root.elements()] == ["a", "b", "a"]

    def test_elements_skip_comments(self):
        assert [n.name for n in build_customer().elements()] == ["CompanyName", "FullAddress"]

    def test_comments(self):
        assert [c.text for c in build_customer().comments()] == ["primary"]


class TestTextAndWalks:
    """Test inner text and pre-order walks."""

    def test_value_concatenates_in_document_order(self):
        root = element("root", element("a", "Hello"), element("b", "World"))
        assert root.value == "HelloWorld"

    def test_value_ignores_comments(self):
        assert build_customer().value == "Alfreds FutterkisteBerlinGermany"

    def test_value_includes_mixed_text(self):
        node = Node(name="p", children=(Text("Hi "), element("b", "there"), Text("!")))
        assert node.value == "Hi there!"

    def test_value_of_empty_element(self):
        assert Node(name="a").value == ""

    def test_iter_pre_order(self):
        names = [n.name for n in build_customer().iter()]
        assert names == ["Customer", "CompanyName", "FullAddress", "City", "Country"]


class TestBuilders:
    """Test node builders; none of them mutate the original."""

    def test_renamed_keeps_attributes(self):
        customer = build_customer()
        contact = customer.renamed("contact")
        assert contact.name == "contact"
        assert contact.attribute("CustomerID") == "ALFKI"
        assert contact.children == customer.children
        assert customer.name == "Customer"

    def test_renamed_drops_attributes(self):
        contact = build_customer().renamed("contact", keep_attributes=False)
        assert dict(contact.attributes) == {}

    def test_with_children(self):
        customer = build_customer()
        trimmed = customer.with_children(customer.elements("FullAddress"))
        assert [n.name for n in trimmed.elements()] == ["FullAddress"]
        assert len(customer.children) == 3

    def test_element_text_and_attributes(self):
        node = element("Group", ID="A")
        assert node.attribute("ID") == "A"
        assert node.text is None

    def test_element_skips_none(self):
        node = element("Data", None, element("Price", "1"), None)
        assert [n.name for n in node.elements()] == ["Price"]

    def test_element_attribute_called_name(self):
        node = element("subscriber", name="a")
        assert node.name == "subscriber"
        assert node.attribute("name") == "a"

    def test_element_mixed_content(self):
        node = element("p", "Hi ", element("b", "there"))
        assert node.text is None
        assert node.value == "Hi there"


class TestRecord:
    """Test CSV Record width invariant."""

    def test_ten_fields(self):
        record = Record(fields=[str(i) for i in range(10)])
        assert record[0] == "0"
        assert record[9] == "9"

    @pytest.mark.parametrize("count", [0, 9, 11])
    def test_wrong_width_rejected(self, count):
        with pytest.raises(FormatError):
            Record(fields=["x"] * count)
