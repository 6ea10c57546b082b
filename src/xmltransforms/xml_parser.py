"""
XML Parser for xmltransforms (Layer 1: Raw Text → Node tree).

Converts XML text into immutable ``Node`` trees using lxml.

Parsing Notes:
    - Comments are kept as ``Comment`` children (channel markers need them)
    - Processing instructions are dropped
    - Entities are not resolved and no network access is allowed
    - Whitespace-only text is formatting, not content, even in a leaf
    - The XML declaration's encoding is ignored; input is already text
    - Namespaced names are kept in Clark notation ({uri}local)
"""

import logging
from typing import List, Optional

from lxml import etree

from .exceptions import ParseError
from .model import Child, Comment, Node, Text


logger = logging.getLogger(__name__)


def _make_parser() -> etree.XMLParser:
    # Input arrives as str and is re-encoded as UTF-8, so any encoding named
    # in the XML declaration is ignored.
    return etree.XMLParser(
        encoding="utf-8",
        remove_comments=False,
        remove_pis=True,
        resolve_entities=False,
        no_network=True,
        huge_tree=False,
    )


def _is_blank(value: Optional[str]) -> bool:
    return value is None or value.strip() == ""


def _convert_element(el) -> Node:
    """Recursively convert an lxml element into a Node."""
    children: List[Child] = []

    if not _is_blank(el.text):
        children.append(Text(el.text))

    for child in el:
        if isinstance(child, etree._Comment):
            children.append(Comment(child.text or ""))
        elif isinstance(child.tag, str):
            children.append(_convert_element(child))
        # Processing instructions and entities carry no content.

        if not _is_blank(child.tail):
            children.append(Text(child.tail))

    has_elements = any(isinstance(c, Node) for c in children)
    text = None
    if not has_elements:
        # Leaf: non-blank text is kept exactly, comments stay as children.
        texts = [c.text for c in children if isinstance(c, Text)]
        children = [c for c in children if not isinstance(c, Text)]
        if texts:
            text = "".join(texts)

    return Node(
        name=el.tag,
        attributes=dict(el.attrib),
        children=tuple(children),
        text=text,
    )


def parse_xml(text: str) -> Node:
    """
    Parse XML text into a Node tree.

    Args:
        text: XML document (a single root element)

    Returns:
        Root Node

    Raises:
        ParseError: If the markup is not well-formed
    """
    if text is None or text.strip() == "":
        raise ParseError("Input document is empty")

    try:
        root = etree.fromstring(text.encode("utf-8"), parser=_make_parser())
    except etree.XMLSyntaxError as e:
        raise ParseError(f"Malformed XML: {e}") from e

    node = _convert_element(root)
    logger.debug("Parsed <%s> with %d child nodes", node.name, len(node.children))
    return node


__all__ = ["parse_xml"]
