"""Dependency analysis for template introspection.

Extracts the context paths a template may read. Paths rooted at a loop
alias are local to the loop body and are not reported.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from curlyplate.analysis.visitor import visit_children
from curlyplate.nodes import BlockType

if TYPE_CHECKING:
    from curlyplate.nodes import Accessor, If, Loop, Node, Variable


class DependencyWalker:
    """Collect context paths (e.g. ``"user.name"``) referenced by an AST.

    Thread-safe: creates new state for each analyze() call.

    Example:
        >>> from curlyplate.parser import parse
        >>> root = parse("{{#loop user.tasks as t}}{{t.title}}{{/loop}}{{site}}")
        >>> sorted(DependencyWalker().analyze(root))
        ['site', 'user.tasks']

    """

    def __init__(self) -> None:
        self._scope_stack: list[frozenset[str]] = []
        self._dependencies: set[str] = set()
        self._dispatch: dict[BlockType, Callable[..., None]] = {
            BlockType.VARIABLE: self._visit_variable,
            BlockType.ACCESSOR: self._visit_accessor,
            BlockType.LOOP: self._visit_loop,
            BlockType.IF: self._visit_if,
        }

    def analyze(self, node: Node) -> frozenset[str]:
        """Return every context path ``node`` may access."""
        self._scope_stack = [frozenset()]
        self._dependencies = set()
        self._visit(node)
        return frozenset(self._dependencies)

    def _visit(self, node: Node) -> None:
        handler = self._dispatch.get(node.type)
        if handler:
            handler(node)
        else:
            visit_children(node, self._visit)

    def _add(self, path: Sequence[str]) -> None:
        if path and path[0] not in self._scope_stack[-1]:
            self._dependencies.add(".".join(path))

    def _visit_variable(self, node: Variable) -> None:
        self._add((node.value,))

    def _visit_accessor(self, node: Accessor) -> None:
        self._add(node.path)

    def _visit_if(self, node: If) -> None:
        self._add(node.condition_path)
        visit_children(node, self._visit)

    def _visit_loop(self, node: Loop) -> None:
        self._add(node.loop_path)
        self._scope_stack.append(self._scope_stack[-1] | {node.loop_alias})
        visit_children(node, self._visit)
        self._scope_stack.pop()
