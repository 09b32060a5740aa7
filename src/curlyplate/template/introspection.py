"""Template introspection mixin.

Adds static analysis methods to the Template class via mixin inheritance.
Results are computed from the immutable AST and cached per template.

"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from curlyplate.analysis import DependencyWalker, iter_nodes
from curlyplate.nodes import BlockType

if TYPE_CHECKING:
    from curlyplate.nodes import Root


class TemplateIntrospectionMixin:
    """Mixin adding static analysis to Template.

    Requires the host class to define the following slots:
        _ast: Root
        _dependencies: frozenset[str] | None

    """

    if TYPE_CHECKING:
        _ast: Root
        _dependencies: frozenset[str] | None

    def depends_on(self) -> frozenset[str]:
        """Get all context paths this template may access.

        Paths rooted at a loop alias are excluded.

        Example:
            >>> env.from_string("{{#if user.isAdmin}}{{site.name}}{{/if}}").depends_on()
            frozenset({'user.isAdmin', 'site.name'})
        """
        if self._dependencies is None:
            self._dependencies = DependencyWalker().analyze(self._ast)
        return self._dependencies

    def required_context(self) -> frozenset[str]:
        """Top-level context names the template reads.

        Example:
            >>> env.from_string("{{ title }} by {{ author.name }}").required_context()
            frozenset({'title', 'author'})
        """
        return frozenset(path.split(".")[0] for path in self.depends_on())

    def validate_context(self, context: Mapping[str, Any]) -> list[str]:
        """List required top-level names missing from ``context``, sorted.

        Checks names only: a template that reads ``page.title`` needs
        ``page`` in the context, but ``page.title`` itself is not verified.
        """
        return sorted(self.required_context() - set(context))

    def comments(self) -> tuple[str, ...]:
        """Raw bodies of all comment directives, in document order."""
        return tuple(
            node.content for node in iter_nodes(self._ast) if node.type is BlockType.COMMENT
        )
