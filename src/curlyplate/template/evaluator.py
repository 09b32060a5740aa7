"""curlyplate Evaluator: renders an AST against a scope.

Rendering is a recursive walk dispatched on ``node.type``. Each container
builds its output in a local ``buf`` list joined once at the end, so the
evaluator keeps no state between calls and never mutates the AST or the
scopes it reads.

Strict vs lenient:
    In strict mode every missing, null or wrongly-typed reference raises
    (``UndefinedError`` / ``TemplateTypeError``). In lenient mode the same
    conditions render as empty text, or as a best-effort string for values
    of an unsupported type.

"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping, Sequence
from contextlib import contextmanager
from typing import Any

from curlyplate.environment.exceptions import (
    ErrorCode,
    TemplateRenderError,
    TemplateTypeError,
    build_source_snippet,
)
from curlyplate.nodes import (
    Accessor,
    BlockType,
    Comment,
    If,
    Loop,
    Node,
    Root,
    Text,
    Variable,
)
from curlyplate.template.helpers import (
    SCALAR_KINDS,
    ValueKind,
    classify,
    is_truthy,
    lookup,
    resolve_path,
    stringify,
)
from curlyplate.template.scope import Scope

logger = logging.getLogger(__name__)


class Evaluator:
    """Tree-walking renderer for a parsed template.

    Attributes:
        strict: Raise on missing/null/wrongly-typed data instead of
            rendering empty text.
        name: Template name for error locations.
        source: Template source for error snippets.

    Node Dispatch:
        O(1) dict lookup from ``BlockType`` to handler, built once per
        evaluator.
    """

    __slots__ = ("_dispatch", "name", "source", "strict")

    def __init__(self, strict: bool = True, name: str | None = None, source: str | None = None):
        self.strict = strict
        self.name = name
        self.source = source
        self._dispatch: dict[BlockType, Callable[[Any, Scope], str]] = {
            BlockType.ROOT: self._render_root,
            BlockType.TEXT: self._render_text,
            BlockType.COMMENT: self._render_comment,
            BlockType.VARIABLE: self._render_variable,
            BlockType.ACCESSOR: self._render_accessor,
            BlockType.LOOP: self._render_loop,
            BlockType.IF: self._render_if,
        }

    def render(self, node: Node, scope: Mapping[str, Any]) -> str:
        """Render ``node`` against ``scope`` and return the raw output."""
        if not isinstance(scope, Scope):
            scope = Scope(scope)
        return self._dispatch[node.type](node, scope)

    # ------------------------------------------------------------------
    # Leaves
    # ------------------------------------------------------------------

    def _render_text(self, node: Text, scope: Scope) -> str:
        return node.content

    def _render_comment(self, node: Comment, scope: Scope) -> str:
        return ""

    def _render_variable(self, node: Variable, scope: Scope) -> str:
        with self._located(node):
            value = lookup(scope, node.value, strict=self.strict)
            return self._output(value, node, f'Variable "{node.value}"')

    def _render_accessor(self, node: Accessor, scope: Scope) -> str:
        with self._located(node):
            value = resolve_path(node.path, scope, strict=self.strict)
            return self._output(value, node, f'Accessor path "{".".join(node.path)}"')

    def _output(self, value: Any, node: Variable | Accessor, label: str) -> str:
        kind = classify(value)
        if kind is ValueKind.ABSENT:
            return ""
        if kind not in SCALAR_KINDS:
            if self.strict:
                raise TemplateTypeError(
                    f"{label} must be string|number|boolean. Got: {kind.value}",
                    value=value,
                    code=ErrorCode.UNSUPPORTED_TYPE,
                    expression=node.value,
                )
            logger.debug(f"{label} is a {kind.value}; rendering best-effort string")
        return stringify(value)

    # ------------------------------------------------------------------
    # Containers
    # ------------------------------------------------------------------

    def _render_children(self, children: Sequence[Node], scope: Scope) -> str:
        dispatch = self._dispatch
        buf = [dispatch[child.type](child, scope) for child in children]
        return "".join(buf)

    def _render_root(self, node: Root, scope: Scope) -> str:
        return self._render_children(node.children, scope)

    def _render_loop(self, node: Loop, scope: Scope) -> str:
        with self._located(node):
            items = resolve_path(node.loop_path, scope, strict=self.strict)
            kind = classify(items)
            if kind is not ValueKind.SEQUENCE:
                if self.strict:
                    raise TemplateTypeError(
                        f'Loop target "{".".join(node.loop_path)}" is not an array.',
                        value=items,
                        code=ErrorCode.NOT_ITERABLE,
                        expression=node.value,
                    )
                logger.debug(f"Loop target {node.loop_target!r} is a {kind.value}; skipping")
                return ""

        buf: list[str] = []
        for item in items:
            buf.append(self._render_children(node.children, scope.child(node.loop_alias, item)))
        return "".join(buf)

    def _render_if(self, node: If, scope: Scope) -> str:
        with self._located(node):
            condition = resolve_path(node.condition_path, scope, strict=self.strict)
        if is_truthy(condition):
            return self._render_children(node.children, scope)
        return ""

    # ------------------------------------------------------------------
    # Error context
    # ------------------------------------------------------------------

    @contextmanager
    def _located(self, node: Node) -> Iterator[None]:
        """Stamp template location onto render errors raised inside the block.

        The path helpers know the failing name but not where the template
        referenced it. The innermost directive wins; the error propagates.
        """
        try:
            yield
        except TemplateRenderError as exc:
            if exc.lineno is None:
                exc.template_name = self.name
                exc.lineno = node.lineno
                if self.source:
                    exc.source_snippet = build_source_snippet(
                        self.source, node.lineno, column=node.col_offset
                    )
            raise
