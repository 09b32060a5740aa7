"""Exceptions for curlyplate.

Exception Hierarchy:
TemplateError (base)
├── TemplateSyntaxError     # Parse-time, always fatal
├── UndefinedError          # Render-time missing/null reference (strict mode)
└── TemplateTypeError       # Render-time wrong value type (strict mode)

Every error carries an :class:`ErrorCode` naming the exact failure kind,
so callers can branch on ``err.code`` instead of parsing message text.

Example:
    ```
    C-PAR-001: Unmatched '{{' at position 6. Snippet: "Hello {{name"
      --> <template>:1:6
       |
    >  1 | Hello {{name
       |       ^
       |
    ```

"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from curlyplate.environment import terminal

# Half-width of the inline snippet quoted in error messages
SNIPPET_RADIUS = 12

# Longest value repr embedded in a MISSING_PROPERTY message
_MAX_VALUE_REPR = 80


class ErrorCode(Enum):
    """Searchable error codes.

    Format: C-{CATEGORY}-{NUMBER}
    Categories: PAR (parser), RUN (runtime)
    """

    # Parser errors (C-PAR-xxx)
    UNMATCHED_OPEN = "C-PAR-001"
    MISMATCHED_CLOSE = "C-PAR-002"
    UNEXPECTED_CLOSE = "C-PAR-003"
    UNCLOSED_DIRECTIVE = "C-PAR-004"
    MALFORMED_DIRECTIVE = "C-PAR-005"

    # Reference errors (C-RUN-00x)
    MISSING_VARIABLE = "C-RUN-001"
    MISSING_PROPERTY = "C-RUN-002"
    NULL_PROPERTY = "C-RUN-003"

    # Type errors
    UNSUPPORTED_TYPE = "C-RUN-004"
    NOT_ITERABLE = "C-RUN-005"

    @property
    def category(self) -> str:
        """Error category ('parser' or 'runtime')."""
        prefix = self.value.split("-")[1]
        return {"PAR": "parser", "RUN": "runtime"}.get(prefix, "unknown")


# ---------------------------------------------------------------------------
# Source snippets
# ---------------------------------------------------------------------------


def inline_snippet(source: str, index: int, radius: int = SNIPPET_RADIUS) -> str:
    """Quote up to ``radius`` characters either side of ``index``.

    The result is JSON-quoted with newlines escaped, so it always fits on
    one line of an error message.

    Example:
        >>> inline_snippet("Hello {{name", 6)
        '"Hello {{name"'
    """
    start = max(0, index - radius)
    end = min(len(source), index + radius)
    return json.dumps(source[start:end], ensure_ascii=False)


def offset_to_location(source: str, index: int) -> tuple[int, int]:
    """Convert a character offset into a (1-based line, 0-based column) pair."""
    index = max(0, min(index, len(source)))
    lineno = source.count("\n", 0, index) + 1
    line_start = source.rfind("\n", 0, index) + 1
    return lineno, index - line_start


@dataclass(frozen=True, slots=True)
class SourceSnippet:
    """Template source lines around an error.

    Attributes:
        lines: Tuple of (line_number, line_content) pairs around the error.
        error_line: The 1-based line number where the error occurred.
        column: Optional column offset for caret pointer.
    """

    lines: tuple[tuple[int, str], ...]
    error_line: int
    column: int | None = None

    def format(self) -> str:
        """Format snippet in a compiler-style diagnostic layout."""
        parts: list[str] = [terminal.dim_text("   |")]
        for lineno, content in self.lines:
            parts.append(
                terminal.format_source_line(lineno, content, is_error=lineno == self.error_line)
            )
            if lineno == self.error_line and self.column is not None:
                caret = " " * self.column + "^"
                parts.append(f"{terminal.dim_text('   |')}   {terminal.error_code(caret)}")
        parts.append(terminal.dim_text("   |"))
        return "\n".join(parts)


def build_source_snippet(
    source: str,
    error_line: int,
    *,
    context_lines: int = 1,
    column: int | None = None,
) -> SourceSnippet:
    """Build a SourceSnippet from template source.

    Args:
        source: Full template source text.
        error_line: 1-based line number of the error.
        context_lines: Number of lines to show before/after the error line.
        column: Optional column offset for caret pointer.
    """
    all_lines = source.splitlines() or [""]
    start = max(0, error_line - 1 - context_lines)
    end = min(len(all_lines), error_line + context_lines)
    lines = tuple((i + 1, all_lines[i]) for i in range(start, end))
    return SourceSnippet(lines=lines, error_line=error_line, column=column)


def describe_value(value: Any) -> str:
    """Short, single-line representation of a data value for messages."""
    if isinstance(value, Mapping) and not isinstance(value, dict):
        value = dict(value)
    try:
        text = json.dumps(value, ensure_ascii=False, default=repr)
    except (TypeError, ValueError):
        text = repr(value)
    if len(text) > _MAX_VALUE_REPR:
        text = text[: _MAX_VALUE_REPR - 3] + "..."
    return text


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class TemplateError(Exception):
    """Base exception for all curlyplate errors.

    Attributes:
        code: ErrorCode identifying the failure kind.
        message: Human-readable message (without location decoration).
    """

    code: ErrorCode | None = None

    def __init__(self, message: str, *, code: ErrorCode | None = None):
        self.message = message
        if code is not None:
            self.code = code
        super().__init__(message)

    def format_compact(self) -> str:
        """Format as a terminal diagnostic: code, message, docs-free."""
        return terminal.format_error_header(self.code.value if self.code else None, self.message)


class TemplateSyntaxError(TemplateError):
    """Parse-time syntax error in template source.

    Raised regardless of strict mode. ``position`` is the character offset
    of the offending directive; ``snippet`` is the quoted source around it.
    """

    def __init__(
        self,
        message: str,
        *,
        code: ErrorCode,
        position: int,
        source: str,
        name: str | None = None,
    ):
        self.position = position
        self.source = source
        self.name = name
        self.snippet = inline_snippet(source, position)
        self.lineno, self.col_offset = offset_to_location(source, position)
        super().__init__(f"{message} Snippet: {self.snippet}", code=code)

    @property
    def location(self) -> str:
        return f"{self.name or '<template>'}:{self.lineno}:{self.col_offset}"

    def format_compact(self) -> str:
        """Format syntax error with location and a caret under the offset."""
        parts = [
            super().format_compact(),
            f"  --> {terminal.location(self.location)}",
            build_source_snippet(self.source, self.lineno, column=self.col_offset).format(),
        ]
        return "\n".join(parts)


class TemplateRenderError(TemplateError):
    """Common base for render-time errors raised in strict mode.

    Attributes:
        expression: Directive text that failed, e.g. ``user.name``.
        template_name: Name of the template, if it has one.
        lineno: Line of the failing directive.
        source_snippet: Source lines around the failing directive.
    """

    def __init__(
        self,
        message: str,
        *,
        code: ErrorCode,
        expression: str | None = None,
        template_name: str | None = None,
        lineno: int | None = None,
        source_snippet: SourceSnippet | None = None,
    ):
        self.expression = expression
        self.template_name = template_name
        self.lineno = lineno
        self.source_snippet = source_snippet
        super().__init__(message, code=code)

    def format_compact(self) -> str:
        parts = [super().format_compact()]
        loc = self.template_name or "<template>"
        if self.lineno:
            loc += f":{self.lineno}"
        parts.append(f"  Location: {terminal.location(loc)}")
        if self.source_snippet:
            parts.append(self.source_snippet.format())
        if self.expression:
            parts.append(f"  Expression: {{{{ {self.expression} }}}}")
        if self.code is ErrorCode.MISSING_VARIABLE or self.code is ErrorCode.MISSING_PROPERTY:
            parts.append(
                f"  {terminal.hint('Hint:')} pass the value in the data context, "
                f"or render with strict_var_mode=False"
            )
        return "\n".join(parts)


class UndefinedError(TemplateRenderError):
    """A variable, accessor or path segment is missing or resolves to null.

    Example:
        >>> TemplateRenderer("Hello {{name}}!", {}).render()
        UndefinedError: Variable "name" is missing/null/undefined.

    Attributes:
        name: The variable name or path key that failed to resolve.
    """

    def __init__(self, message: str, *, name: str, code: ErrorCode, **kwargs: Any):
        self.name = name
        super().__init__(message, code=code, **kwargs)


class TemplateTypeError(TemplateRenderError):
    """A resolved value has the wrong type for its use.

    Raised for loop targets that are not sequences and for substitutions
    whose value is not a string, number or boolean.

    Attributes:
        value: The offending value.
    """

    def __init__(self, message: str, *, value: Any, code: ErrorCode, **kwargs: Any):
        self.value = value
        super().__init__(message, code=code, **kwargs)
