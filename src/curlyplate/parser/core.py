"""curlyplate Parser: builds an immutable AST from template source.

The parser scans the source left to right with explicit index arithmetic:
find the next ``{{``, emit the text before it, find the next ``}}``, then
classify the trimmed body between them. Nesting is tracked with an explicit
stack of open containers; close directives must match the innermost open
container by type.

Containers are materialized as frozen nodes only when their close directive
is reached, so every node is complete the moment it exists.

Example:
    >>> from curlyplate.parser import Parser
    >>> root = Parser("{{#loop items as item}}-{{item}}{{/loop}}").parse()
    >>> loop = root.children[0]
    >>> loop.loop_path, loop.loop_alias
    (('items',), 'item')

"""

from __future__ import annotations

import logging
from bisect import bisect_right
from dataclasses import dataclass, field

from curlyplate.environment.exceptions import (
    ErrorCode,
    TemplateSyntaxError,
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
from curlyplate.parser.directives import (
    CLOSE_MARKER,
    OPEN_MARKER,
    Directive,
    DirectiveKind,
    classify_directive,
    split_path,
)

logger = logging.getLogger(__name__)

# Directive kind -> handler method name
_DIRECTIVE_HANDLERS: dict[DirectiveKind, str] = {
    DirectiveKind.LOOP_OPEN: "_open_loop",
    DirectiveKind.LOOP_CLOSE: "_close_block",
    DirectiveKind.IF_OPEN: "_open_if",
    DirectiveKind.IF_CLOSE: "_close_block",
    DirectiveKind.COMMENT: "_add_comment",
    DirectiveKind.MALFORMED: "_reject_malformed",
    DirectiveKind.UNEXPECTED_CLOSE: "_reject_unexpected_close",
    DirectiveKind.ACCESSOR: "_add_accessor",
    DirectiveKind.VARIABLE: "_add_variable",
}

# Close directive kind -> container type it must match
_CLOSES: dict[DirectiveKind, BlockType] = {
    DirectiveKind.LOOP_CLOSE: BlockType.LOOP,
    DirectiveKind.IF_CLOSE: BlockType.IF,
}


@dataclass(slots=True)
class _OpenBlock:
    """A container whose close directive has not been seen yet.

    ``body`` is the open directive text, ``target`` its raw path and
    ``alias`` the loop alias (empty for if blocks and the root).
    """

    type: BlockType
    start_index: int
    body: str = ""
    target: str = ""
    alias: str = ""
    children: list[Node] = field(default_factory=list)


class Parser:
    """Recursive-structure parser driven by an explicit open-block stack.

    Attributes:
        source: Template text being parsed.
        name: Optional template name, used in error locations.
    """

    __slots__ = ("_line_starts", "_stack", "name", "source")

    def __init__(self, source: str, name: str | None = None):
        self.source = source
        self.name = name
        self._stack: list[_OpenBlock] = []
        self._line_starts = [0] + [i + 1 for i, ch in enumerate(source) if ch == "\n"]

    def parse(self) -> Root:
        """Parse the whole source into a :class:`Root` node.

        Raises:
            TemplateSyntaxError: On an unmatched ``{{``, a close directive
                that does not match the innermost open block, a malformed
                loop/if directive, or blocks left open at end of input.
        """
        source = self.source
        self._stack = [_OpenBlock(BlockType.ROOT, 0)]
        cursor = 0

        while True:
            start = source.find(OPEN_MARKER, cursor)
            if start == -1:
                break

            self._add_text(cursor, start)

            close = source.find(CLOSE_MARKER, start + len(OPEN_MARKER))
            if close == -1:
                raise self._error(
                    f"Unmatched '{OPEN_MARKER}' at position {start}.",
                    ErrorCode.UNMATCHED_OPEN,
                    start,
                )

            end = close + len(CLOSE_MARKER)
            body = source[start + len(OPEN_MARKER) : close].strip()
            directive = classify_directive(body)
            handler = getattr(self, _DIRECTIVE_HANDLERS[directive.kind])
            handler(directive, start, end)
            cursor = end

        self._add_text(cursor, len(source))

        if len(self._stack) > 1:
            open_blocks = self._stack[1:]
            unclosed = ", ".join(block.type.value for block in open_blocks)
            raise self._error(
                f"Unclosed directive(s): {unclosed}.",
                ErrorCode.UNCLOSED_DIRECTIVE,
                open_blocks[-1].start_index,
            )

        root_frame = self._stack.pop()
        root = Root(start_index=0, end_index=len(source), children=tuple(root_frame.children))
        logger.debug(
            f"Parsed template {self.name or '<template>'}: "
            f"{len(root.children)} top-level node(s)"
        )
        return root

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @property
    def _top(self) -> _OpenBlock:
        return self._stack[-1]

    def _location(self, index: int) -> dict[str, int]:
        lineno = bisect_right(self._line_starts, index)
        return {"lineno": lineno, "col_offset": index - self._line_starts[lineno - 1]}

    def _error(self, message: str, code: ErrorCode, position: int) -> TemplateSyntaxError:
        return TemplateSyntaxError(
            message, code=code, position=position, source=self.source, name=self.name
        )

    def _add_text(self, start: int, end: int) -> None:
        if end > start:
            self._top.children.append(
                Text(
                    start_index=start,
                    end_index=end,
                    content=self.source[start:end],
                    **self._location(start),
                )
            )

    # ------------------------------------------------------------------
    # Directive handlers
    # ------------------------------------------------------------------

    def _open_loop(self, directive: Directive, start: int, end: int) -> None:
        self._stack.append(
            _OpenBlock(
                BlockType.LOOP,
                start,
                body=directive.body,
                target=directive.target or "",
                alias=directive.alias or "",
            )
        )

    def _open_if(self, directive: Directive, start: int, end: int) -> None:
        self._stack.append(
            _OpenBlock(BlockType.IF, start, body=directive.body, target=directive.target or "")
        )

    def _close_block(self, directive: Directive, start: int, end: int) -> None:
        expected = _CLOSES[directive.kind]
        top = self._top
        if top.type is not expected:
            raise self._error(
                f"Mismatched '{directive.body}' at index {start}. "
                f"Top block is '{top.type.value}'.",
                ErrorCode.MISMATCHED_CLOSE,
                start,
            )
        self._stack.pop()
        self._top.children.append(self._finish_block(top, end))

    def _finish_block(self, block: _OpenBlock, end: int) -> Node:
        location = self._location(block.start_index)
        children = tuple(block.children)

        if block.type is BlockType.LOOP:
            return Loop(
                start_index=block.start_index,
                end_index=end,
                value=block.body,
                loop_target=block.target,
                loop_alias=block.alias,
                loop_path=split_path(block.target),
                children=children,
                **location,
            )
        return If(
            start_index=block.start_index,
            end_index=end,
            value=block.body,
            condition_path=split_path(block.target),
            children=children,
            **location,
        )

    def _add_comment(self, directive: Directive, start: int, end: int) -> None:
        self._top.children.append(
            Comment(start_index=start, end_index=end, content=directive.body, **self._location(start))
        )

    def _add_accessor(self, directive: Directive, start: int, end: int) -> None:
        self._top.children.append(
            Accessor(
                start_index=start,
                end_index=end,
                value=directive.body,
                path=split_path(directive.body),
                **self._location(start),
            )
        )

    def _add_variable(self, directive: Directive, start: int, end: int) -> None:
        self._top.children.append(
            Variable(start_index=start, end_index=end, value=directive.body, **self._location(start))
        )

    def _reject_malformed(self, directive: Directive, start: int, end: int) -> None:
        usage = "#loop <path> as <alias>" if directive.keyword == "loop" else "#if <path>"
        raise self._error(
            f"Malformed '#{directive.keyword}' directive at position {start}: "
            f"expected '{usage}'.",
            ErrorCode.MALFORMED_DIRECTIVE,
            start,
        )

    def _reject_unexpected_close(self, directive: Directive, start: int, end: int) -> None:
        raise self._error(
            f"Unexpected closing directive '{directive.body}' at position {start}.",
            ErrorCode.UNEXPECTED_CLOSE,
            start,
        )


def parse(source: str, name: str | None = None) -> Root:
    """Parse template source into an AST. Shortcut for ``Parser(source).parse()``."""
    return Parser(source, name).parse()
