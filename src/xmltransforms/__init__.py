"""
XML Transforms Package

Stateless utilities that parse an XML (or CSV) document, query or
reshape it through a few declarative operators, and return a string,
an integer or a list of integers.

ARCHITECTURAL GUARANTEE:
------------------------
    - Every public transform is a pure function of its input text
    - Parsed trees are immutable; outputs are always new trees
    - Only lxml touches markup; everything else works on xmltransforms.model

All errors derive from xmltransforms.exceptions.TransformError.
"""

from xmltransforms.config import DEFAULT_CONFIG, JoinPolicy, TransformConfig, load_config
from xmltransforms.exceptions import (
    ConfigError,
    FormatError,
    MalformedInputError,
    ParseError,
    StructureError,
    TransformError,
)
from xmltransforms.model import Comment, Node, Record, Text, element
from xmltransforms.serialization import serialize
from xmltransforms.transforms import (
    create_hierarchy,
    find_channels_ids,
    get_concatenation_string,
    get_flatten_string,
    get_orders_value,
    get_purchase_orders,
    read_customers_from_csv,
    replace_customers_with_contacts,
    sort_customers,
)
from xmltransforms.xml_parser import parse_xml

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CONFIG",
    "JoinPolicy",
    "TransformConfig",
    "load_config",
    "ConfigError",
    "FormatError",
    "MalformedInputError",
    "ParseError",
    "StructureError",
    "TransformError",
    "Comment",
    "Node",
    "Record",
    "Text",
    "element",
    "serialize",
    "parse_xml",
    "create_hierarchy",
    "find_channels_ids",
    "get_concatenation_string",
    "get_flatten_string",
    "get_orders_value",
    "get_purchase_orders",
    "read_customers_from_csv",
    "replace_customers_with_contacts",
    "sort_customers",
]
