"""
Resolution of function sources into ``Function`` units.

A source is either a registered name or a raw callable. The two cases are
kept apart as explicit variants:

- ``Named(name)``: look ``name`` up in a registry.
- ``Raw(fn)``: use ``fn`` as-is.

``resolve()`` also accepts plain values and classifies them with
``to_source()``: a ``str`` is a name, any other callable is raw. Other
hashable identifiers (enum members, tuples, ...) must be wrapped in
``Named`` explicitly.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Any, Union

from transproc.exceptions import InvalidSourceError
from transproc.function import Function
from transproc.registry import FunctionRegistry, functions


@dataclass(frozen=True)
class Named:
    """A function referenced by its registered name."""

    name: Hashable


@dataclass(frozen=True)
class Raw:
    """A function given directly as a callable."""

    fn: Callable[..., Any]


Source = Union[Named, Raw]


def to_source(source: Any) -> Source:
    """Classify ``source`` as ``Named`` or ``Raw``.

    Raises:
        InvalidSourceError: If ``source`` is neither a string nor a callable.
    """
    if isinstance(source, (Named, Raw)):
        return source
    if isinstance(source, str):
        return Named(source)
    if callable(source):
        return Raw(source)
    raise InvalidSourceError(source)


def resolve(
    source: Any,
    *args: Any,
    registry: FunctionRegistry | None = None,
) -> Function:
    """Turn a function name or callable into a ``Function`` unit.

    Args:
        source: A registered name, a callable, or a ``Named`` / ``Raw``.
        *args: Extra arguments bound after the primary value.
        registry: Registry used for names. Defaults to the process-wide one.

    Returns:
        A ``Function`` wrapping the resolved callable and ``args``.

    Raises:
        UnknownFunctionError: If a name is not registered.
        InvalidSourceError: If ``source`` is neither a name nor a callable.

    Examples::

        resolve("map_array", resolve("to_string"))
        resolve(str.upper) >> resolve("rename_keys", {"a": "b"})
    """
    src = to_source(source)
    if isinstance(src, Raw):
        return Function(src.fn, args)
    if registry is None:
        registry = functions()
    return Function(registry.lookup(src.name), args)


t = resolve
