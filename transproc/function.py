"""
Transformation units for transproc.

- ``Function`` wraps a callable plus a tuple of bound extra arguments.
  Calling it with a value calls ``fn(value, *args)``.
- ``Composite`` runs a sequence of units, feeding each result to the next.

Both share the ``Transform`` base, so ``a >> b`` works on any pair of units
and a chain of any length is built left-to-right::

    pipeline = t("to_string") >> t("to_boolean")
    pipeline("true")  # -> True

Units are immutable. Composition never inspects its operands; an arity or
type mismatch only surfaces when the pipeline is called.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


class Transform(ABC):
    """Base class for anything that can be called with a value and chained."""

    @abstractmethod
    def __call__(self, value: Any) -> Any:
        """Apply the transformation to ``value``."""

    def compose(self, other: Transform) -> Composite:
        """Return a unit that runs ``self`` first, then ``other``."""
        return Composite((*_steps(self), *_steps(other)))

    def __rshift__(self, other: Transform) -> Composite:
        return self.compose(other)


@dataclass(frozen=True)
class Function(Transform):
    """A callable with bound extra arguments.

    Attributes:
        fn: The wrapped callable. Its arity is not checked.
        args: Extra arguments passed after the primary value on every call.
    """

    fn: Callable[..., Any]
    args: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))

    def __call__(self, value: Any) -> Any:
        return self.fn(value, *self.args)


@dataclass(frozen=True)
class Composite(Transform):
    """Units run in sequence, first to last.

    Composing composites concatenates their steps, so a chain of any length
    is a flat tuple and calling it never recurses once per step.
    """

    steps: tuple[Transform, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "steps", tuple(self.steps))

    def __call__(self, value: Any) -> Any:
        for step in self.steps:
            value = step(value)
        return value


def _steps(unit: Any) -> tuple[Any, ...]:
    if isinstance(unit, Composite):
        return unit.steps
    return (unit,)
