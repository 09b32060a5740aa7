"""curlyplate parser: directive classification and AST construction."""

from curlyplate.parser.core import Parser, parse
from curlyplate.parser.directives import Directive, DirectiveKind, classify_directive, split_path

__all__ = [
    "Directive",
    "DirectiveKind",
    "Parser",
    "classify_directive",
    "parse",
    "split_path",
]
