"""Output post-processing."""

from __future__ import annotations

import re

# A newline, any whitespace (including more newlines), another newline,
# then trailing whitespace on that line.
_BLANK_LINES_RE = re.compile(r"\n\s*\n\s*")


def normalize_output(text: str) -> str:
    """Collapse runs of blank lines into one newline and strip the result.

    Applied once to the full render output. The pass is lossy: a template
    cannot produce two consecutive blank lines, and indentation on the line
    following a collapsed run is dropped. ``\\r`` counts as whitespace, so
    CRLF blank lines collapse too; only the ``\\r`` ending the last
    non-blank line survives.

    Example:
        >>> normalize_output("  a\\n\\n\\n  b\\n")
        'a\\nb'
    """
    return _BLANK_LINES_RE.sub("\n", text).strip()
