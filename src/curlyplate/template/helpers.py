"""Pure runtime helpers: value classification, path resolution, output coercion.

Every point where the renderer inspects data goes through :func:`classify`,
which maps a Python value onto a closed set of :class:`ValueKind` variants.
Type decisions are then explicit checks on the kind, never ad-hoc
``isinstance`` chains scattered through the renderer.

Thread-Safety:
All functions are stateless and safe for concurrent use.

"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping, Sequence
from enum import Enum
from numbers import Number
from typing import Any, Final

from curlyplate.environment.exceptions import ErrorCode, UndefinedError, describe_value

logger = logging.getLogger(__name__)


class _Undefined:
    """Sentinel for a value that could not be resolved in lenient mode.

    Falsy and stringifies as ``""`` so it degrades to empty output.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __str__(self) -> str:
        return ""

    def __bool__(self) -> bool:
        return False


UNDEFINED: Final = _Undefined()


class ValueKind(Enum):
    """Closed set of data shapes the renderer distinguishes."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    ABSENT = "absent"
    OBJECT = "object"


SCALAR_KINDS = frozenset({ValueKind.STRING, ValueKind.NUMBER, ValueKind.BOOLEAN})


def classify(value: Any) -> ValueKind:
    """Return the :class:`ValueKind` of a data value.

    ``bool`` is checked before numbers (it subclasses ``int``) and ``str``
    before sequences, so a string is never iterated as a loop target.
    """
    if value is None or value is UNDEFINED:
        return ValueKind.ABSENT
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, Number):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        return ValueKind.SEQUENCE
    return ValueKind.OBJECT


def is_absent(value: Any) -> bool:
    return value is None or value is UNDEFINED


def _own_member(value: Any, key: str) -> tuple[bool, Any]:
    """Look up ``key`` directly on ``value``; returns (found, member).

    Mappings match on keys, sequences on in-range decimal indices, and
    plain objects on public attributes. Scalars have no members.
    """
    kind = classify(value)
    if kind is ValueKind.MAPPING:
        if key in value:
            return True, value[key]
        return False, None
    if kind is ValueKind.SEQUENCE:
        if key.isdecimal() and int(key) < len(value):
            return True, value[int(key)]
        return False, None
    if kind is ValueKind.OBJECT and key and not key.startswith("_"):
        try:
            return True, getattr(value, key)
        except AttributeError:
            return False, None
    return False, None


def lookup(scope: Mapping[str, Any], name: str, *, strict: bool = True) -> Any:
    """Single-level variable lookup (no path traversal).

    Returns:
        The bound value, or ``UNDEFINED`` in lenient mode when the name is
        missing or bound to ``None``.

    Raises:
        UndefinedError: In strict mode when the name is missing or ``None``.
    """
    value = scope.get(name)
    if is_absent(value):
        if strict:
            raise UndefinedError(
                f'Variable "{name}" is missing/null/undefined.',
                name=name,
                code=ErrorCode.MISSING_VARIABLE,
                expression=name,
            )
        logger.debug(f"Variable {name!r} is missing; rendering empty")
        return UNDEFINED
    return value


def resolve_path(path: Sequence[str], scope: Mapping[str, Any], *, strict: bool = True) -> Any:
    """Walk ``path`` left to right starting at ``scope``.

    Each step requires the current value to own the next key. A missing key
    or a ``None`` along the way fails in strict mode; in lenient mode the
    walk stops and ``UNDEFINED`` is returned, never a partial value.

    Args:
        path: Ordered key segments, e.g. ``("user", "name")``.
        scope: Mapping the walk starts from.
        strict: Raise instead of returning ``UNDEFINED``.

    Returns:
        The value at the final key, unchanged (any type), or ``UNDEFINED``.

    Raises:
        UndefinedError: MISSING_PROPERTY or NULL_PROPERTY in strict mode.

    Example:
        >>> resolve_path(("user", "name"), {"user": {"name": "Ada"}})
        'Ada'
        >>> resolve_path(("user", "age"), {"user": {}}, strict=False)
        UNDEFINED
    """
    expression = ".".join(path)
    current: Any = scope
    for key in path:
        found, member = _own_member(current, key)
        if not found:
            if strict:
                raise UndefinedError(
                    f'Property "{key}" does not exist on: {describe_value(current)}',
                    name=key,
                    code=ErrorCode.MISSING_PROPERTY,
                    expression=expression,
                )
            logger.debug(f"Path {expression!r} stops at missing key {key!r}; rendering empty")
            return UNDEFINED
        current = member
        if is_absent(current):
            if strict:
                raise UndefinedError(
                    f'Property "{key}" is null/undefined.',
                    name=key,
                    code=ErrorCode.NULL_PROPERTY,
                    expression=expression,
                )
            logger.debug(f"Path {expression!r} hits None at key {key!r}; rendering empty")
            return UNDEFINED
    return current


def is_truthy(value: Any) -> bool:
    """Dynamic-language truthiness for ``#if`` conditions.

    Absent values, ``False``, zero, NaN and the empty string are falsy.
    Everything else is truthy, including empty sequences and mappings.
    """
    kind = classify(value)
    if kind is ValueKind.ABSENT:
        return False
    if kind is ValueKind.BOOLEAN:
        return value
    if kind is ValueKind.NUMBER:
        return value != 0 and not _is_nan(value)
    if kind is ValueKind.STRING:
        return value != ""
    return True


def _is_nan(value: Any) -> bool:
    try:
        return math.isnan(value)
    except TypeError:
        return False


# Integral floats at or above this magnitude keep their exponent form
_MAX_PLAIN_FLOAT = 1e21


def stringify(value: Any) -> str:
    """Convert a resolved value to output text.

    Booleans render ``true``/``false``; integral floats below ``1e21`` drop
    the trailing ``.0``; sequences join their elements with ``,``, and a
    sequence nested inside itself renders empty. Absent values render
    empty. Anything else falls back to ``str()``.
    """
    return _stringify(value, set())


def _stringify(value: Any, active: set[int]) -> str:
    kind = classify(value)
    if kind is ValueKind.ABSENT:
        return ""
    if kind is ValueKind.STRING:
        return value
    if kind is ValueKind.BOOLEAN:
        return "true" if value else "false"
    if kind is ValueKind.NUMBER:
        if isinstance(value, float):
            if math.isnan(value):
                return "NaN"
            if math.isinf(value):
                return "Infinity" if value > 0 else "-Infinity"
            if value.is_integer() and abs(value) < _MAX_PLAIN_FLOAT:
                return str(int(value))
        return str(value)
    if kind is ValueKind.SEQUENCE:
        # ids of sequences currently being joined
        if id(value) in active:
            return ""
        active.add(id(value))
        try:
            return ",".join(_stringify(item, active) for item in value)
        finally:
            active.discard(id(value))
    return str(value)
