"""
Query Operators for Node trees

Small, declarative building blocks the transforms are written in:
    - Path navigation with explicit failure (text_of)
    - Stable grouping (group_by)
    - Stable multi-key ordering (order_by)
    - Inner join with a companion for the unmatched rows

ARCHITECTURAL RULE:
    Operators are pure. They never mutate their inputs and always
    preserve input order where the result has no other ordering.
"""

from __future__ import annotations

import re
from typing import Callable, Dict, Hashable, Iterable, List, Tuple, TypeVar

from xmltransforms.exceptions import StructureError
from xmltransforms.model import Node


T = TypeVar("T")
U = TypeVar("U")
K = TypeVar("K", bound=Hashable)
R = TypeVar("R")

_INTEGER_RE = re.compile(r"^\s*[+-]?\d+\s*$")


def child_at(node: Node, *path: str) -> Node:
    """
    Follow a chain of child names.

    Example:
        child_at(customer, "FullAddress", "Country")

    Raises:
        StructureError: If any step of the path is missing
    """
    current = node
    for name in path:
        current = current.require_child(name)
    return current


def text_of(node: Node, *path: str) -> str:
    """Inner text of the element at ``path`` below ``node``."""
    return child_at(node, *path).value


def int_attribute(node: Node, name: str) -> int:
    """
    Read a required attribute as an integer.

    Raises:
        StructureError: If the attribute is missing or not an integer
    """
    raw = node.require_attribute(name)
    if not _INTEGER_RE.match(raw):
        raise StructureError(f"<{node.name}> attribute '{name}' is not an integer: {raw!r}")
    return int(raw)


def group_by(items: Iterable[T], key: Callable[[T], K]) -> List[Tuple[K, List[T]]]:
    """
    Group items by key.

    Groups appear in first-occurrence order of their key; items keep
    their relative order inside each group.
    """
    groups: Dict[K, List[T]] = {}
    for item in items:
        groups.setdefault(key(item), []).append(item)
    return list(groups.items())


def order_by(items: Iterable[T], *keys: Callable[[T], str]) -> List[T]:
    """
    Stable ascending sort on several keys, first key most significant.

    String keys compare by code point (ordinal), not by locale.
    Items with equal keys keep their original relative order.
    """
    result = list(items)
    # Sorting from the least significant key up relies on sort stability.
    for key in reversed(keys):
        result.sort(key=key)
    return result


def _index(inner: Iterable[U], inner_key: Callable[[U], K]) -> Dict[K, List[U]]:
    lookup: Dict[K, List[U]] = {}
    for item in inner:
        lookup.setdefault(inner_key(item), []).append(item)
    return lookup


def inner_join(
    outer: Iterable[T],
    inner: Iterable[U],
    outer_key: Callable[[T], K],
    inner_key: Callable[[U], K],
    result: Callable[[T, U], R],
) -> List[R]:
    """
    Inner join of two sequences.

    For every outer item (in order), yields ``result(outer, inner)`` for
    each matching inner item (in order). Outer items without a partner
    produce nothing.
    """
    lookup = _index(inner, inner_key)
    return [result(o, i) for o in outer for i in lookup.get(outer_key(o), [])]


def left_unmatched(
    outer: Iterable[T],
    inner: Iterable[U],
    outer_key: Callable[[T], K],
    inner_key: Callable[[U], K],
) -> List[T]:
    """Outer items that ``inner_join`` would silently drop."""
    lookup = _index(inner, inner_key)
    return [o for o in outer if outer_key(o) not in lookup]


__all__ = [
    "child_at",
    "text_of",
    "int_attribute",
    "group_by",
    "order_by",
    "inner_join",
    "left_unmatched",
]
