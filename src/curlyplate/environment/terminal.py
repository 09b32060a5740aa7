"""Terminal color helpers for error diagnostics.

ANSI colors with TTY detection. Honors ``NO_COLOR`` (https://no-color.org/)
and ``FORCE_COLOR``; ``FORCE_COLOR`` wins when both are set.
"""

from __future__ import annotations

import os
import re
import sys
from typing import Literal

_CODES = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "dim": "\033[2m",
    "yellow": "\033[33m",
    "cyan": "\033[36m",
    "green": "\033[32m",
    "bright_red": "\033[91m",
}

ColorName = Literal["reset", "bold", "dim", "yellow", "cyan", "green", "bright_red"]

_ANSI_RE = re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")


def _should_use_colors() -> bool:
    if os.environ.get("FORCE_COLOR"):
        return True
    if os.environ.get("NO_COLOR"):
        return False
    return sys.stdout.isatty()


_USE_COLORS = _should_use_colors()


def supports_color() -> bool:
    """True if colored output is enabled for this process."""
    return _USE_COLORS


def colorize(text: str, *colors: ColorName) -> str:
    """Wrap text in ANSI codes, or return it unchanged when colors are off.

    Example:
        >>> colorize("Error", "bright_red", "bold")
        '\033[91m\033[1mError\033[0m'  # if colors supported
    """
    if not _USE_COLORS or not colors:
        return text
    prefix = "".join(_CODES.get(color, "") for color in colors)
    return f"{prefix}{text}{_CODES['reset']}" if prefix else text


def strip_colors(text: str) -> str:
    """Remove ANSI escape sequences from text."""
    return _ANSI_RE.sub("", text)


def error_code(text: str) -> str:
    return colorize(text, "bright_red", "bold")


def location(text: str) -> str:
    return colorize(text, "cyan")


def hint(text: str) -> str:
    return colorize(text, "green")


def dim_text(text: str) -> str:
    return colorize(text, "dim")


def format_error_header(code: str | None, message: str) -> str:
    """Prefix a message with its (colored) error code, if any."""
    if code:
        return f"{error_code(code)}: {message}"
    return message


def format_source_line(lineno: int, content: str, is_error: bool = False) -> str:
    """Format one numbered source line; the error line gets a ``>`` marker.

    Example:
        >>> format_source_line(3, "{{ user }}", is_error=True)
        '>  3 | {{ user }}'  # without colors
    """
    marker = ">" if is_error else " "
    number = colorize(f"{marker}{lineno:>3}", "yellow")
    body = colorize(content, "bright_red") if is_error else dim_text(content)
    return f"{number} | {body}"
