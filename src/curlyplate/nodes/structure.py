"""Template structure nodes for curlyplate AST."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import ClassVar

from curlyplate.nodes.base import BlockType, Node


@dataclass(frozen=True, slots=True)
class Root(Node):
    """Root node representing a complete template. Exactly one per AST."""

    type: ClassVar[BlockType] = BlockType.ROOT

    children: Sequence[Node] = ()
