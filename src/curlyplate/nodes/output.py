"""Leaf nodes for curlyplate AST: text, comments and substitutions."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import ClassVar

from curlyplate.nodes.base import BlockType, Node


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Raw text between directives."""

    type: ClassVar[BlockType] = BlockType.TEXT

    content: str = ""


@dataclass(frozen=True, slots=True)
class Comment(Node):
    """Hidden comment: {{ # note # }}"""

    type: ClassVar[BlockType] = BlockType.COMMENT

    content: str = ""


@dataclass(frozen=True, slots=True)
class Variable(Node):
    """Single-level substitution: {{ name }}"""

    type: ClassVar[BlockType] = BlockType.VARIABLE

    value: str = ""


@dataclass(frozen=True, slots=True)
class Accessor(Node):
    """Nested property lookup: {{ user.name }}"""

    type: ClassVar[BlockType] = BlockType.ACCESSOR

    value: str = ""
    path: Sequence[str] = ()
