"""Directive classification for the curlyplate parser.

A directive body is the trimmed text between ``{{`` and ``}}``. Rules are
checked in priority order and the first match wins:

1. ``#loop <path> as <alias>``  -> LOOP_OPEN
2. ``/loop``                    -> LOOP_CLOSE
3. ``#if <path>``               -> IF_OPEN
4. ``/if``                      -> IF_CLOSE
5. ``# ... #``                  -> COMMENT
6. ``#loop``/``#if`` otherwise   -> MALFORMED (missing path or alias)
   ``/anything-else``           -> UNEXPECTED_CLOSE
7. contains ``.``               -> ACCESSOR
8. anything else                -> VARIABLE
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

OPEN_MARKER = "{{"
CLOSE_MARKER = "}}"

_LOOP_OPEN_RE = re.compile(r"^#loop\s+(.+?)\s+as\s+(\w+)$", re.DOTALL)
_IF_OPEN_RE = re.compile(r"^#if\s+(.+)$", re.DOTALL)
# Keyword prefix of an open directive that failed its full pattern
_OPEN_KEYWORD_RE = re.compile(r"^#(loop|if)(?:\s|$)")

LOOP_CLOSE = "/loop"
IF_CLOSE = "/if"
PATH_SEPARATOR = "."


class DirectiveKind(Enum):
    LOOP_OPEN = "loop_open"
    LOOP_CLOSE = "loop_close"
    IF_OPEN = "if_open"
    IF_CLOSE = "if_close"
    COMMENT = "comment"
    MALFORMED = "malformed"
    UNEXPECTED_CLOSE = "unexpected_close"
    ACCESSOR = "accessor"
    VARIABLE = "variable"


@dataclass(frozen=True, slots=True)
class Directive:
    """A classified directive body.

    ``target`` is the raw path text for LOOP_OPEN/IF_OPEN and ``alias`` the
    loop alias; ``keyword`` names the offending keyword for MALFORMED.
    """

    kind: DirectiveKind
    body: str
    target: str | None = None
    alias: str | None = None
    keyword: str | None = None


def split_path(text: str) -> tuple[str, ...]:
    """Split a dotted path into stripped segments: ``"a . b"`` -> ``("a", "b")``."""
    return tuple(segment.strip() for segment in text.split(PATH_SEPARATOR))


def classify_directive(body: str) -> Directive:
    """Classify a trimmed directive body."""
    match = _LOOP_OPEN_RE.match(body)
    if match:
        return Directive(DirectiveKind.LOOP_OPEN, body, target=match[1], alias=match[2])

    if body == LOOP_CLOSE:
        return Directive(DirectiveKind.LOOP_CLOSE, body)

    match = _IF_OPEN_RE.match(body)
    if match:
        return Directive(DirectiveKind.IF_OPEN, body, target=match[1])

    if body == IF_CLOSE:
        return Directive(DirectiveKind.IF_CLOSE, body)

    if body.startswith("#") and body.endswith("#"):
        return Directive(DirectiveKind.COMMENT, body)

    match = _OPEN_KEYWORD_RE.match(body)
    if match:
        return Directive(DirectiveKind.MALFORMED, body, keyword=match[1])

    if body.startswith("/"):
        return Directive(DirectiveKind.UNEXPECTED_CLOSE, body, keyword=body[1:].strip())

    if PATH_SEPARATOR in body:
        return Directive(DirectiveKind.ACCESSOR, body)

    return Directive(DirectiveKind.VARIABLE, body)
