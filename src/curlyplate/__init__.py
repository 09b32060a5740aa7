"""curlyplate: a small logic-light template engine.

Templates mix literal text with ``{{ ... }}`` directives: variables,
dotted accessors, comments, loops and conditionals. A template is parsed
once into an immutable AST and rendered by walking that tree.

Quickstart:
    >>> from curlyplate import TemplateRenderer
    >>> TemplateRenderer("Hello {{name}}!", {"name": "Alice"}).render()
    'Hello Alice!'

Reusable templates:
    >>> from curlyplate import Environment
    >>> env = Environment()
    >>> template = env.from_string("{{#loop items as item}}-{{item}}{{/loop}}")
    >>> template.render(items=["A", "B"])
    '-A-B'

Architecture:
Template Source → Parser → AST (curlyplate.nodes) → Evaluator → normalize_output

Strict Mode (default):
Missing, null or wrongly-typed data raises ``UndefinedError`` or
``TemplateTypeError``. With ``strict_var_mode=False`` the same cases render
as empty text instead. Syntax errors always raise ``TemplateSyntaxError``.

Output Normalization:
Runs of blank lines collapse to a single newline and the output is
stripped. This is deliberate and lossy; disable it with
``normalize_output=False``.

"""

from curlyplate.environment import (
    Environment,
    ErrorCode,
    RendererOptions,
    SourceSnippet,
    TemplateError,
    TemplateRenderError,
    TemplateSyntaxError,
    TemplateTypeError,
    UndefinedError,
    build_source_snippet,
)
from curlyplate.parser import parse
from curlyplate.renderer import TemplateRenderer
from curlyplate.template import UNDEFINED, Scope, Template, resolve_path
from curlyplate.utils.text import normalize_output

__version__ = "0.1.0"

__all__ = [
    "UNDEFINED",
    "Environment",
    "ErrorCode",
    "RendererOptions",
    "Scope",
    "SourceSnippet",
    "Template",
    "TemplateError",
    "TemplateRenderError",
    "TemplateRenderer",
    "TemplateSyntaxError",
    "TemplateTypeError",
    "UndefinedError",
    "__version__",
    "build_source_snippet",
    "normalize_output",
    "parse",
    "resolve_path",
]
