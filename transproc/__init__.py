"""
transproc: named, composable transformation functions.

Public API surface:

- ``register(name, fn)`` -- add a function to the process-wide registry.
  Without ``fn`` it returns a decorator. Names are bound once.

- ``resolve(source, *args)`` (alias ``t``) -- **recommended entry point**.
  Accepts a registered name or a callable and returns a ``Function`` with
  ``args`` bound after the value.

- ``Function`` / ``Composite`` -- callable units. ``a >> b`` runs ``a``
  then ``b``.

- ``Functions`` -- base class that registers every function defined in a
  subclass body under its own name.

Examples::

    import transproc
    from transproc import t

    transproc.register("to_json", lambda v: json.dumps(v))

    pipeline = t("to_json") >> t(lambda v: v.upper())
    pipeline({"a": 1})  # -> '{"A": 1}'

Built-in coercions and record/DataFrame helpers are registered by
importing ``transproc.transforms``. Pipelines can also be declared in YAML,
see ``transproc.config``.
"""

from __future__ import annotations

from transproc.exceptions import (
    DuplicateRegistrationError,
    InvalidSourceError,
    PipelineConfigError,
    TransprocError,
    UnknownFunctionError,
)
from transproc.function import Composite, Function, Transform
from transproc.functions import Functions
from transproc.registry import FunctionRegistry, functions, lookup, register
from transproc.resolver import Named, Raw, resolve, t

__version__ = "0.1.0"

__all__ = [
    "Composite",
    "DuplicateRegistrationError",
    "Function",
    "FunctionRegistry",
    "Functions",
    "InvalidSourceError",
    "Named",
    "PipelineConfigError",
    "Raw",
    "Transform",
    "TransprocError",
    "UnknownFunctionError",
    "functions",
    "lookup",
    "register",
    "resolve",
    "t",
]
