"""TemplateRenderer: parse once, render a fixed data context.

The renderer binds a template and its data at construction. Use it when a
template is rendered against one dataset; for many datasets, build a
:class:`~curlyplate.template.Template` once and pass each context to
``Template.render()``.

"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from curlyplate.environment.config import RendererOptions
from curlyplate.template import Template

if TYPE_CHECKING:
    from curlyplate.nodes import Root


class TemplateRenderer:
    """Template text plus the data it renders with.

    Supports:

    - **Text**: raw text left as-is.
    - **Variables**: ``{{ name }}``.
    - **Accessors**: nested lookups like ``{{ user.name }}``.
    - **Comments**: ``{{ # note # }}``, which produce no output.
    - **Loops**: ``{{#loop items as item}}...{{/loop}}``.
    - **Conditionals**: ``{{#if user.isAdmin}}...{{/if}}``.

    The template is parsed during construction, so syntax errors surface
    here, before any data is touched.

    Args:
        content: The complete template string.
        variables: Data context for substitution; never mutated.
        config: ``RendererOptions`` or a mapping such as
            ``{"strict_var_mode": False}``.

    Raises:
        TemplateSyntaxError: If ``content`` is not a valid template.
        TypeError: If ``variables`` is not a mapping or ``config`` has
            unknown keys.

    Example:
        >>> renderer = TemplateRenderer("Hello {{ name }}!", {"name": "Alice"})
        >>> renderer.render()
        'Hello Alice!'

    """

    __slots__ = ("_template", "_variables")

    def __init__(
        self,
        content: str,
        variables: Mapping[str, Any],
        config: RendererOptions | Mapping[str, Any] | None = None,
    ):
        if not isinstance(variables, Mapping):
            raise TypeError(f"variables must be a mapping, got {type(variables).__name__}")
        self._variables = variables
        self._template = Template.from_string(content, RendererOptions.coerce(config))

    @property
    def content(self) -> str:
        return self._template.source or ""

    @property
    def variables(self) -> Mapping[str, Any]:
        return self._variables

    @property
    def options(self) -> RendererOptions:
        return self._template.options

    @property
    def root_block(self) -> Root:
        """Root of the parsed AST."""
        return self._template.ast

    @property
    def template(self) -> Template:
        return self._template

    def render(self) -> str:
        """Render the bound data and return the normalized output.

        Repeatable: rendering never mutates the AST or the data, so every
        call returns the same string.

        Raises:
            UndefinedError: Strict mode, missing or null reference.
            TemplateTypeError: Strict mode, value of the wrong type.
        """
        return self._template.render(self._variables)
