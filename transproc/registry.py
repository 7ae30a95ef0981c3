"""
Function registry for transproc.

A registry maps names to transformation callables. It is **append-only**:
a name is bound once and never overwritten or removed, so a name resolved
anywhere in the process always means the same function.

One process-wide instance backs the module-level ``register()`` and
``lookup()`` helpers and is reachable through ``functions()``. Separate
``FunctionRegistry`` instances can be created for isolated use and passed
explicitly to the APIs that accept ``registry=``.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Hashable, Iterator
from typing import Any

from transproc.exceptions import DuplicateRegistrationError, UnknownFunctionError

logger = logging.getLogger(__name__)

TransformFn = Callable[..., Any]


class FunctionRegistry:
    """Append-only name -> callable store.

    Registration is guarded by a lock so the check-then-insert sequence
    stays atomic on multi-threaded hosts. Lookups read the dict directly.
    """

    def __init__(self) -> None:
        self._functions: dict[Hashable, TransformFn] = {}
        self._lock = threading.Lock()

    def register(self, name: Hashable, fn: TransformFn | None = None):
        """Register ``fn`` under ``name`` and return it.

        When ``fn`` is omitted, returns a decorator instead::

            @registry.register("to_json")
            def to_json(value):
                return json.dumps(value)

        Raises:
            DuplicateRegistrationError: If ``name`` is already registered.
                The existing entry is left untouched.
        """
        if fn is None:
            def decorator(func: TransformFn) -> TransformFn:
                return self.register(name, func)

            return decorator

        with self._lock:
            if name in self._functions:
                raise DuplicateRegistrationError(name)
            self._functions[name] = fn
        logger.debug("Registered function %r", name)
        return fn

    def lookup(self, name: Hashable) -> TransformFn:
        """Return the callable registered under ``name``.

        Raises:
            UnknownFunctionError: If nothing is registered under ``name``,
                including names that are not hashable.
        """
        try:
            return self._functions[name]
        except (KeyError, TypeError):
            raise UnknownFunctionError(name) from None

    def names(self) -> list[Hashable]:
        """Registered names, in registration order."""
        return list(self._functions)

    def __getitem__(self, name: Hashable) -> TransformFn:
        return self.lookup(name)

    def __contains__(self, name: object) -> bool:
        try:
            return name in self._functions
        except TypeError:
            return False

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._functions)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self)} functions)"


_registry = FunctionRegistry()


def functions() -> FunctionRegistry:
    """Return the process-wide registry."""
    return _registry


def register(name: Hashable, fn: TransformFn | None = None):
    """Register a function in the process-wide registry.

    See ``FunctionRegistry.register`` for the decorator form.

    Example::

        transproc.register("to_json", lambda v: json.dumps(v))
        transproc.resolve("map_array", transproc.resolve("to_json"))
    """
    return _registry.register(name, fn)


def lookup(name: Hashable) -> TransformFn:
    """Look up a function in the process-wide registry."""
    return _registry.lookup(name)
