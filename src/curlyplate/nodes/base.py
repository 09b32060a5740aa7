"""Base node class for curlyplate AST."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class BlockType(str, Enum):
    """Discriminant for every AST node variant."""

    ROOT = "root"
    TEXT = "text"
    COMMENT = "comment"
    VARIABLE = "variable"
    ACCESSOR = "accessor"
    LOOP = "loop"
    IF = "if"


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all AST nodes.

    All nodes track the source offsets of their directive markers for
    error reporting. ``end_index`` points just past the closing ``}}`` (for
    containers, past the matching close directive). Nodes are immutable.

    """

    start_index: int
    end_index: int
    lineno: int = 1
    col_offset: int = 0

    type: ClassVar[BlockType]
