"""Control flow nodes for curlyplate AST."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import ClassVar

from curlyplate.nodes.base import BlockType, Node


@dataclass(frozen=True, slots=True)
class Loop(Node):
    """Loop: {{#loop items as item}}...{{/loop}}"""

    type: ClassVar[BlockType] = BlockType.LOOP

    value: str = ""
    loop_target: str = ""
    loop_alias: str = ""
    loop_path: Sequence[str] = ()
    children: Sequence[Node] = ()


@dataclass(frozen=True, slots=True)
class If(Node):
    """Conditional: {{#if user.isAdmin}}...{{/if}}"""

    type: ClassVar[BlockType] = BlockType.IF

    value: str = ""
    condition_path: Sequence[str] = ()
    children: Sequence[Node] = ()
