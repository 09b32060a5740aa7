"""curlyplate Template package: parsed templates and the render-time runtime.

"""

from curlyplate.template.core import Template
from curlyplate.template.evaluator import Evaluator
from curlyplate.template.helpers import (
    UNDEFINED,
    ValueKind,
    classify,
    is_truthy,
    lookup,
    resolve_path,
    stringify,
)
from curlyplate.template.scope import Scope

__all__ = [
    "UNDEFINED",
    "Evaluator",
    "Scope",
    "Template",
    "ValueKind",
    "classify",
    "is_truthy",
    "lookup",
    "resolve_path",
    "stringify",
]
