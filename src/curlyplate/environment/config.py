"""Renderer configuration."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

# camelCase spellings accepted for callers porting option dicts verbatim
_ALIASES = {
    "strictVarMode": "strict_var_mode",
    "normalizeOutput": "normalize_output",
}


@dataclass(frozen=True, slots=True)
class RendererOptions:
    """Options controlling how rendering handles bad data and whitespace.

    Attributes:
        strict_var_mode: When True, any missing/null/wrongly-typed variable,
            accessor, loop target or if-condition raises. When False, those
            cases render as empty (or best-effort) text. Syntax errors are
            raised either way.
        normalize_output: When True, runs of blank lines collapse to a single
            newline and the result is stripped. This is lossy on purpose:
            templates cannot emit consecutive blank lines.
    """

    strict_var_mode: bool = True
    normalize_output: bool = True

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> RendererOptions:
        """Build options from a plain mapping.

        Raises:
            TypeError: On keys that are not known options.
        """
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in config.items():
            name = _ALIASES.get(key, key)
            if name not in known:
                raise TypeError(f"Unknown renderer option {key!r}")
            # None keeps the default
            if value is not None:
                kwargs[name] = bool(value)
        return cls(**kwargs)

    @classmethod
    def coerce(cls, config: RendererOptions | Mapping[str, Any] | None) -> RendererOptions:
        """Accept options, a mapping of options, or None for defaults."""
        if config is None:
            return cls()
        if isinstance(config, cls):
            return config
        if isinstance(config, Mapping):
            return cls.from_mapping(config)
        raise TypeError(
            f"config must be RendererOptions or a mapping, got {type(config).__name__}"
        )
