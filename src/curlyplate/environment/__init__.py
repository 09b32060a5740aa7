"""curlyplate environment: configuration, errors and the template factory."""

from curlyplate.environment.config import RendererOptions
from curlyplate.environment.core import Environment
from curlyplate.environment.exceptions import (
    ErrorCode,
    SourceSnippet,
    TemplateError,
    TemplateRenderError,
    TemplateSyntaxError,
    TemplateTypeError,
    UndefinedError,
    build_source_snippet,
)

__all__ = [
    "Environment",
    "ErrorCode",
    "RendererOptions",
    "SourceSnippet",
    "TemplateError",
    "TemplateRenderError",
    "TemplateSyntaxError",
    "TemplateTypeError",
    "UndefinedError",
    "build_source_snippet",
]
