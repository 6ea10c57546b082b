"""
Core Tree Model Objects

Defines the value types every transform reads and builds:
    - Node (one XML element and its descendants)
    - Comment (comment side-node interleaved with children)
    - Text (character run inside mixed content)
    - Record (one 10-field CSV line)

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about lxml or any concrete parser
        - Are immutable (frozen dataclasses, tuple children)
        - Never mutate: every "change" builds a new Node
        - Expose typed accessors so a missing element is explicit
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Tuple, Union

from .exceptions import FormatError, StructureError


RECORD_WIDTH = 10


@dataclass(frozen=True)
class Comment:
    """
    Represents an XML comment.

    Properties:
        text: Comment body exactly as written (no trimming)
    """

    text: str


@dataclass(frozen=True)
class Text:
    """
    A text run inside mixed content.

    Leaf elements keep their text on ``Node.text``; a Text child only
    appears when an element holds both elements and non-blank text.
    """

    text: str


Child = Union["Node", Comment, Text]


def _freeze_attributes(attributes) -> Mapping[str, str]:
    if isinstance(attributes, MappingProxyType):
        return attributes
    return MappingProxyType(dict(attributes or {}))


@dataclass(frozen=True)
class Node:
    """
    Represents one XML element.

    Properties:
        name:
            Element name. Namespace-qualified names use Clark notation,
            e.g. "{http://www.adventure-works.com}PurchaseOrder"

        attributes:
            Read-only name -> value mapping (unique keys, construction order)

        children:
            Ordered tuple of Node, Comment and Text children

        text:
            Inline text of a leaf element, or None

    INVARIANTS:
        - A Node with text has no element children
        - Each Node owns its children; trees are acyclic
        - Nodes are never mutated after construction
    """

    name: str
    attributes: Mapping[str, str] = field(default_factory=dict)
    children: Tuple[Child, ...] = ()
    text: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "attributes", _freeze_attributes(self.attributes))
        object.__setattr__(self, "children", tuple(self.children))
        if self.text is not None and any(isinstance(c, Node) for c in self.children):
            raise StructureError(f"<{self.name}> cannot hold both text and child elements")

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def elements(self, name: Optional[str] = None) -> Iterator[Node]:
        """Yield element children, optionally only those called ``name``."""
        for child in self.children:
            if isinstance(child, Node) and (name is None or child.name == name):
                yield child

    def comments(self) -> Iterator[Comment]:
        """Yield the comment children of this node."""
        for child in self.children:
            if isinstance(child, Comment):
                yield child

    def find_child(self, name: str) -> Optional[Node]:
        """
        Retrieve the first element child called ``name``.

        Args:
            name: Element name (Clark notation for namespaced names)

        Returns:
            Node or None if not found
        """
        return next(self.elements(name), None)

    def attribute(self, name: str) -> Optional[str]:
        """
        Retrieve an attribute value.

        Args:
            name: Attribute name

        Returns:
            Attribute value or None if absent
        """
        return self.attributes.get(name)

    def require_child(self, name: str) -> Node:
        """Like ``find_child`` but raises StructureError when missing."""
        child = self.find_child(name)
        if child is None:
            raise StructureError(f"<{self.name}> has no <{name}> element")
        return child

    def require_attribute(self, name: str) -> str:
        """Like ``attribute`` but raises StructureError when missing."""
        value = self.attribute(name)
        if value is None:
            raise StructureError(f"<{self.name}> has no '{name}' attribute")
        return value

    @property
    def value(self) -> str:
        """
        Inner text of the element.

        Concatenates every text value below this node in document order
        (pre-order), with no separators. Comments are not text.
        """
        if self.text is not None:
            return self.text
        parts = []
        for child in self.children:
            if isinstance(child, Node):
                parts.append(child.value)
            elif isinstance(child, Text):
                parts.append(child.text)
        return "".join(parts)

    def iter(self) -> Iterator[Node]:
        """Pre-order walk over this node and all element descendants."""
        yield self
        for child in self.elements():
            yield from child.iter()

    # ------------------------------------------------------------------
    # Builders (return new nodes)
    # ------------------------------------------------------------------

    def renamed(self, name: str, keep_attributes: bool = True) -> Node:
        """Copy of this node under a new name."""
        return Node(
            name=name,
            attributes=self.attributes if keep_attributes else {},
            children=self.children,
            text=self.text,
        )

    def with_children(self, children) -> Node:
        """Copy of this node with its children replaced."""
        return Node(name=self.name, attributes=self.attributes, children=tuple(children))


def element(name: str, /, *content, **attributes) -> Node:
    """
    Build a Node from loose content, the way XML literals read.

    String content becomes the leaf text; Node, Comment and Text content
    become children. None entries are skipped.

    Example:
        element("Customer", element("City", "Berlin"), CustomerID="ALFKI")
    """
    text = None
    children = []
    for item in content:
        if item is None:
            continue
        if isinstance(item, str):
            text = item if text is None else text + item
        else:
            children.append(item)
    if text is not None and children:
        children.insert(0, Text(text))
        text = None
    return Node(name=name, attributes=attributes, children=tuple(children), text=text)


@dataclass(frozen=True)
class Record:
    """
    One CSV line split into fields.

    INVARIANT:
        len(fields) == RECORD_WIDTH, otherwise FormatError.
    """

    fields: Tuple[str, ...]

    def __post_init__(self):
        object.__setattr__(self, "fields", tuple(self.fields))
        if len(self.fields) != RECORD_WIDTH:
            raise FormatError(
                f"Expected {RECORD_WIDTH} fields, got {len(self.fields)}"
            )

    def __getitem__(self, index: int) -> str:
        return self.fields[index]
