"""curlyplate AST nodes.

Immutable, slotted dataclasses. Every node exposes ``type`` (a
:class:`BlockType`) as the variant discriminant; containers (``Root``,
``Loop``, ``If``) own their ``children`` as tuples, so the AST is a tree.

"""

from curlyplate.nodes.base import BlockType, Node
from curlyplate.nodes.control_flow import If, Loop
from curlyplate.nodes.output import Accessor, Comment, Text, Variable
from curlyplate.nodes.structure import Root

CONTAINER_TYPES = frozenset({BlockType.ROOT, BlockType.LOOP, BlockType.IF})

__all__ = [
    "CONTAINER_TYPES",
    "Accessor",
    "BlockType",
    "Comment",
    "If",
    "Loop",
    "Node",
    "Root",
    "Text",
    "Variable",
]
