"""
Auto-registration of transformation containers.

Subclassing ``Functions`` turns a class body into a namespace of
transformation functions. Every public function defined in the body is
registered under its own name as soon as the class is created::

    class MyTransformations(Functions):
        def boom(value):
            return f"{value} BOOM!"

    resolve("boom")("w00t!")  # -> "w00t! BOOM!"

Plain functions are rebound as ``staticmethod``s, so they take the value as
their first argument and can be called off the class
(``MyTransformations.boom("x")``) without an instance. Names starting with
``_`` are private helpers and are not registered.

The namespace is process-wide: a name already registered by another
container (or by ``register()``) raises ``DuplicateRegistrationError``
while the class is being created. Pass ``registry=`` in the class
statement to register into a separate ``FunctionRegistry``.
"""

from __future__ import annotations

import logging
from typing import Any

from transproc.registry import FunctionRegistry, functions

logger = logging.getLogger(__name__)


def _plain_function(attr: Any):
    """Return the underlying function of a registrable attribute, else None."""
    if isinstance(attr, staticmethod):
        return attr.__func__
    if isinstance(attr, (classmethod, property, type)):
        return None
    if callable(attr):
        return attr
    return None


class Functions:
    """Base class whose subclasses register every function they define."""

    def __init_subclass__(cls, registry: FunctionRegistry | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        target = registry if registry is not None else functions()

        registered = 0
        for name, attr in list(vars(cls).items()):
            if name.startswith("_"):
                continue
            fn = _plain_function(attr)
            if fn is None:
                continue
            if not isinstance(attr, staticmethod):
                setattr(cls, name, staticmethod(fn))
            target.register(name, fn)
            registered += 1

        logger.debug("Registered %d function(s) from %s", registered, cls.__qualname__)
