"""
Serialization helpers for Node trees.

Two outputs:
    - XML text via lxml (``serialize``), deterministic and order preserving
    - A lossless dict view with JSON/YAML round-trip, for fixtures and debugging

This module intentionally keeps serialization structure stable and explicit.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml
from lxml import etree

from xmltransforms.model import Comment, Node, Text


# ----------------------------------------------------------------------
# XML
# ----------------------------------------------------------------------

def node_to_element(node: Node) -> etree._Element:
    """Build an lxml element tree mirroring ``node``."""
    el = etree.Element(node.name)
    for key, value in node.attributes.items():
        el.set(key, value)

    if node.text is not None:
        el.text = node.text

    last = None
    for child in node.children:
        if isinstance(child, Text):
            if last is None:
                el.text = (el.text or "") + child.text
            else:
                last.tail = (last.tail or "") + child.text
            continue
        if isinstance(child, Comment):
            sub = etree.Comment(child.text)
        elif isinstance(child, Node):
            sub = node_to_element(child)
        else:
            raise TypeError(f"Unsupported child type: {type(child)}")
        el.append(sub)
        last = sub
    return el


def serialize(node: Node, indent: int = 2) -> str:
    """
    Serialize a Node tree to XML text.

    Args:
        node: Root node
        indent: Spaces per nesting level; 0 gives the flat form

    Returns:
        XML string without declaration
    """
    el = node_to_element(node)
    if indent > 0:
        etree.indent(el, space=" " * indent)
    return etree.tostring(el, encoding="unicode")


# ----------------------------------------------------------------------
# Dict / JSON / YAML
# ----------------------------------------------------------------------

def child_to_dict(child) -> Dict[str, Any]:
    if isinstance(child, Node):
        return node_to_dict(child)
    if isinstance(child, Comment):
        return {"type": "comment", "text": child.text}
    if isinstance(child, Text):
        return {"type": "text", "text": child.text}
    raise TypeError(f"Unsupported child type: {type(child)}")


def child_from_dict(d: Dict[str, Any]):
    t = d.get("type")
    if t == "element":
        return node_from_dict(d)
    if t == "comment":
        return Comment(d["text"])
    if t == "text":
        return Text(d["text"])
    raise TypeError(f"Unsupported child dict type: {t}")


def node_to_dict(n: Node) -> Dict[str, Any]:
    return {
        "type": "element",
        "name": n.name,
        "attributes": dict(n.attributes),
        "text": n.text,
        "children": [child_to_dict(c) for c in n.children],
    }


def node_from_dict(d: Dict[str, Any]) -> Node:
    return Node(
        name=d["name"],
        attributes=d.get("attributes") or {},
        children=tuple(child_from_dict(c) for c in d.get("children", [])),
        text=d.get("text"),
    )


def node_to_json(n: Node) -> str:
    # Attribute order is part of the tree, so keys are not sorted.
    return json.dumps(node_to_dict(n))


def node_from_json(s: str) -> Node:
    d = json.loads(s)
    return node_from_dict(d)


def node_to_yaml(n: Node) -> str:
    return yaml.safe_dump(node_to_dict(n), sort_keys=False)


def node_from_yaml(s: str) -> Node:
    d = yaml.safe_load(s)
    return node_from_dict(d)
