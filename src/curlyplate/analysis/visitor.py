"""Shared traversal helpers for curlyplate AST analysis."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from curlyplate.nodes import Node


def visit_children(node: Node, visit: Callable[[Node], None]) -> None:
    """Call ``visit`` on each direct child of a container node, in order.

    Leaves have no ``children`` attribute and are a no-op.
    """
    for child in getattr(node, "children", ()):
        visit(child)


def iter_nodes(node: Node) -> Iterator[Node]:
    """Yield ``node`` and all of its descendants in document order."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(getattr(current, "children", ())))
