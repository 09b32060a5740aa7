"""curlyplate Template: parsed template object ready for rendering.

A Template wraps an immutable AST plus the options it renders with. The AST
is built once; ``render()`` walks it with a fresh :class:`Evaluator` call
and creates only local state, so one Template can be rendered concurrently
from several threads, each with its own context.

Pipeline:
    ```
    source ─► Parser ─► Root (immutable AST)
    render(context) ─► Evaluator ─► raw text ─► normalize_output ─► str
    ```

"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from curlyplate.environment.config import RendererOptions
from curlyplate.parser import parse
from curlyplate.template.evaluator import Evaluator
from curlyplate.template.introspection import TemplateIntrospectionMixin
from curlyplate.template.scope import Scope
from curlyplate.utils.text import normalize_output

if TYPE_CHECKING:
    from curlyplate.nodes import Root


class Template(TemplateIntrospectionMixin):
    """Parsed template ready for rendering.

    Attributes:
        name: Template identifier (for error messages)
        source: Original template text
        ast: Root node of the parsed template
        options: RendererOptions this template renders with

    Example:
        >>> t = Template.from_string("Hello {{name}}!")
        >>> t.render(name="World")
        'Hello World!'
        >>> t.render({"name": "World"})  # Mapping context also works
        'Hello World!'

    """

    __slots__ = ("_ast", "_dependencies", "_evaluator", "_name", "_options", "_source")

    def __init__(
        self,
        ast: Root,
        options: RendererOptions | None = None,
        name: str | None = None,
        source: str | None = None,
    ):
        self._ast = ast
        self._options = options or RendererOptions()
        self._name = name
        self._source = source
        self._dependencies: frozenset[str] | None = None
        self._evaluator = Evaluator(strict=self._options.strict_var_mode, name=name, source=source)

    @classmethod
    def from_string(
        cls,
        source: str,
        options: RendererOptions | None = None,
        name: str | None = None,
    ) -> Template:
        """Parse ``source`` and wrap the result.

        Raises:
            TemplateSyntaxError: If the source is not a valid template.
        """
        return cls(parse(source, name), options, name=name, source=source)

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def source(self) -> str | None:
        return self._source

    @property
    def ast(self) -> Root:
        return self._ast

    @property
    def options(self) -> RendererOptions:
        return self._options

    def render(self, *args: Any, **kwargs: Any) -> str:
        """Render the template against a context.

        Args:
            *args: At most one Mapping of context variables
            **kwargs: Context variables as keyword arguments; these shadow
                entries of the positional mapping

        Returns:
            Rendered (and, unless disabled, normalized) output

        Raises:
            UndefinedError: Strict mode, missing or null reference.
            TemplateTypeError: Strict mode, value of the wrong type.
        """
        if len(args) > 1 or (args and not isinstance(args[0], Mapping)):
            raise TypeError(
                f"render() takes at most 1 positional argument (a mapping), got {len(args)}"
            )
        scope = Scope(args[0] if args else {})
        if kwargs:
            scope = Scope(kwargs, scope)

        output = self._evaluator.render(self._ast, scope)
        if self._options.normalize_output:
            output = normalize_output(output)
        return output

    def __repr__(self) -> str:
        return f"<Template {self._name or '(inline)'}>"
