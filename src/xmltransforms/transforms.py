"""
XML Transforms (Layer 3: Node tree → result).

Each public function is a self-contained pipeline:

    parse text → query/rebuild the tree → serialize or aggregate

No function depends on another's output and none keeps state between
calls, so all of them are safe to call concurrently.

Error categories:
    ParseError      input is not well-formed XML
    StructureError  a required element/attribute is missing or mistyped
    FormatError     a CSV line has too few fields
"""

from __future__ import annotations

import logging
from typing import List, Optional, Union

from xmltransforms.config import DEFAULT_CONFIG, JoinPolicy, TransformConfig
from xmltransforms.csv_parser import parse_records
from xmltransforms.exceptions import StructureError
from xmltransforms.model import Node, element
from xmltransforms.query import (
    group_by,
    inner_join,
    int_attribute,
    left_unmatched,
    order_by,
    text_of,
)
from xmltransforms.serialization import serialize
from xmltransforms.xml_parser import parse_xml


logger = logging.getLogger(__name__)

ADVENTURE_WORKS_NS = "http://www.adventure-works.com"
DELETE_MARKER = "DELETE"


def _aw(local: str) -> str:
    """Clark-notation name in the Adventure Works namespace."""
    return f"{{{ADVENTURE_WORKS_NS}}}{local}"


def _render(node: Node, config: Optional[TransformConfig]) -> str:
    return serialize(node, indent=(config or DEFAULT_CONFIG).indent)


def create_hierarchy(xml_text: str, config: Optional[TransformConfig] = None) -> str:
    """
    Group ``Data`` records by their ``Category`` text.

    Input:
        <Root><Data><Category>A</Category><Quantity>3</Quantity>
              <Price>10</Price></Data>...</Root>

    Output:
        <Root><Group ID="A"><Data><Quantity>3</Quantity><Price>10</Price></Data>
              ...</Group>...</Root>

    Groups follow first-occurrence order of each category; records keep
    their relative order inside a group.

    Raises:
        StructureError: If a Data element has no Category
    """
    root = parse_xml(xml_text)

    def category(data: Node) -> str:
        return text_of(data, "Category")

    groups = [
        element(
            "Group",
            *(
                element("Data", data.find_child("Quantity"), data.find_child("Price"))
                for data in records
            ),
            ID=key,
        )
        for key, records in group_by(root.elements("Data"), category)
    ]
    logger.debug("create_hierarchy: %d group(s)", len(groups))
    return _render(element("Root", *groups), config)


def get_purchase_orders(xml_text: str) -> str:
    """
    List purchase orders shipped to New York.

    An order matches when any of its Address children has
    aw:Type="Shipping" and an aw:State of "NY".

    Returns:
        Matching aw:PurchaseOrderNumber values joined with "," in document
        order, e.g. "99301,99189,99110"; "" when nothing matches

    Raises:
        StructureError: If an Address lacks Type/State, or a matching
            order lacks PurchaseOrderNumber
    """
    root = parse_xml(xml_text)

    def ships_to_ny(address: Node) -> bool:
        return (
            address.require_attribute(_aw("Type")) == "Shipping"
            and address.require_child(_aw("State")).value == "NY"
        )

    numbers = [
        order.require_attribute(_aw("PurchaseOrderNumber"))
        for order in root.elements(_aw("PurchaseOrder"))
        if any(ships_to_ny(address) for address in order.elements(_aw("Address")))
    ]
    logger.debug("get_purchase_orders: %d match(es)", len(numbers))
    return ",".join(numbers)


def read_customers_from_csv(csv_text: str, config: Optional[TransformConfig] = None) -> str:
    """
    Build a Customer document from CSV.

    Each non-empty line holds, in order: CustomerID, CompanyName,
    ContactName, ContactTitle, Phone, Address, City, Region, PostalCode,
    Country.

    Raises:
        FormatError: If a line has fewer than 10 fields
    """
    customers = [
        element(
            "Customer",
            element("CompanyName", r[1]),
            element("ContactName", r[2]),
            element("ContactTitle", r[3]),
            element("Phone", r[4]),
            element(
                "FullAddress",
                element("Address", r[5]),
                element("City", r[6]),
                element("Region", r[7]),
                element("PostalCode", r[8]),
                element("Country", r[9]),
            ),
            CustomerID=r[0],
        )
        for r in parse_records(csv_text)
    ]
    logger.debug("read_customers_from_csv: %d customer(s)", len(customers))
    return _render(element("Root", *customers), config)


def get_concatenation_string(xml_text: str) -> str:
    """Full inner text of the document root, in document order."""
    return parse_xml(xml_text).value


def replace_customers_with_contacts(
    xml_text: str, config: Optional[TransformConfig] = None
) -> str:
    """
    Rename every direct child of the root to ``contact``.

    The root keeps its name; its content is replaced wholesale, so its
    attributes, comments and text go. Each contact holds deep copies of
    the customer's child elements and nothing else: the customer's own
    attributes, comments and text are dropped.
    """
    root = parse_xml(xml_text)
    contacts = [
        child.with_children(child.elements()).renamed("contact", keep_attributes=False)
        for child in root.elements()
    ]
    return _render(Node(name=root.name, children=tuple(contacts)), config)


def find_channels_ids(xml_text: str) -> List[int]:
    """
    Ids of channels marked for deletion.

    A channel qualifies when it has more than one ``subscriber`` child
    and a direct comment child whose text is exactly "DELETE".

    Returns:
        Channel ids in document order; [] when none qualify

    Raises:
        StructureError: If a qualifying channel has no integer ``id``
    """
    root = parse_xml(xml_text)
    ids = [
        int_attribute(channel, "id")
        for channel in root.elements("channel")
        if sum(1 for _ in channel.elements("subscriber")) > 1
        and any(comment.text == DELETE_MARKER for comment in channel.comments())
    ]
    logger.debug("find_channels_ids: %s", ids)
    return ids


def sort_customers(xml_text: str, config: Optional[TransformConfig] = None) -> str:
    """
    Sort ``Customers`` elements by FullAddress/Country, then FullAddress/City.

    Comparison is ordinal; customers with equal keys keep their order.

    Raises:
        StructureError: If a customer lacks FullAddress, Country or City
    """
    root = parse_xml(xml_text)
    ordered = order_by(
        root.elements("Customers"),
        lambda c: text_of(c, "FullAddress", "Country"),
        lambda c: text_of(c, "FullAddress", "City"),
    )
    return _render(element("Root", *ordered), config)


def get_orders_value(xml_text: str, config: Optional[TransformConfig] = None) -> int:
    """
    Total value of all orders.

    Every ``Orders/Order`` names a product by its ``product`` text; the
    order is worth the ``Value`` attribute of the ``products`` child whose
    ``Id`` equals that name.

    Unmatched orders follow ``config.unmatched_orders``: DROP leaves them
    out of the sum (and logs a warning), ERROR raises StructureError.

    Raises:
        StructureError: On a missing product name, Id or Value, a
            non-integer Value, or unmatched orders under JoinPolicy.ERROR
    """
    config = config or DEFAULT_CONFIG
    root = parse_xml(xml_text)

    names = [
        text_of(order, "product")
        for orders in root.elements("Orders")
        for order in orders.elements("Order")
    ]
    catalog = root.find_child("products")
    products = list(catalog.elements()) if catalog is not None else []

    def product_id(product: Node) -> str:
        return product.require_attribute("Id")

    unmatched = left_unmatched(names, products, lambda name: name, product_id)
    if unmatched:
        if config.unmatched_orders is JoinPolicy.ERROR:
            raise StructureError(f"Orders reference unknown products: {unmatched}")
        logger.warning("Dropping %d order(s) with unknown products: %s", len(unmatched), unmatched)

    values = inner_join(
        names,
        products,
        lambda name: name,
        product_id,
        lambda _, product: int_attribute(product, "Value"),
    )
    return sum(values)


def get_flatten_string(document: Union[str, Node]) -> str:
    """
    Serialize a document with no formatting at all.

    Example:
        <root><element>something</element></root>
    """
    node = parse_xml(document) if isinstance(document, str) else document
    return serialize(node, indent=0)


__all__ = [
    "ADVENTURE_WORKS_NS",
    "create_hierarchy",
    "get_purchase_orders",
    "read_customers_from_csv",
    "get_concatenation_string",
    "replace_customers_with_contacts",
    "find_channels_ids",
    "sort_customers",
    "get_orders_value",
    "get_flatten_string",
]
