"""curlyplate Environment: shared rendering settings and template factory."""

from __future__ import annotations

from typing import TYPE_CHECKING

from curlyplate.environment.config import RendererOptions

if TYPE_CHECKING:
    from curlyplate.template import Template


class Environment:
    """Holds the options every template created from it renders with.

    Attributes:
        strict_var_mode: Raise on missing/null/wrongly-typed data (default).
        normalize_output: Collapse blank-line runs and strip the output.

    Example:
        >>> env = Environment(strict_var_mode=False)
        >>> env.from_string("Hello {{name}}!").render()
        'Hello !'

    """

    __slots__ = ("normalize_output", "strict_var_mode")

    def __init__(self, strict_var_mode: bool = True, normalize_output: bool = True):
        self.strict_var_mode = strict_var_mode
        self.normalize_output = normalize_output

    @property
    def options(self) -> RendererOptions:
        """Snapshot of the current settings."""
        return RendererOptions(
            strict_var_mode=self.strict_var_mode,
            normalize_output=self.normalize_output,
        )

    def from_string(self, source: str, name: str | None = None) -> Template:
        """Parse ``source`` into a Template bound to this environment's options.

        Later changes to the environment do not affect templates already
        created.

        Raises:
            TemplateSyntaxError: If the source is not a valid template.
        """
        from curlyplate.template import Template

        return Template.from_string(source, self.options, name=name)

    def __repr__(self) -> str:
        return (
            f"Environment(strict_var_mode={self.strict_var_mode}, "
            f"normalize_output={self.normalize_output})"
        )
