"""Static analysis of curlyplate ASTs."""

from curlyplate.analysis.dependencies import DependencyWalker
from curlyplate.analysis.visitor import iter_nodes, visit_children

__all__ = ["DependencyWalker", "iter_nodes", "visit_children"]
