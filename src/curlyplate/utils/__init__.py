"""Shared utilities for curlyplate."""

from curlyplate.utils.text import normalize_output

__all__ = ["normalize_output"]
