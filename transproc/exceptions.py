"""
Custom exception hierarchy for transproc.

Callers can catch ``TransprocError`` for anything raised by the library
itself, or a specific subclass (e.g., ``UnknownFunctionError``) when they
only care about one failure mode. Errors raised by the wrapped
transformation callables are never translated into these types.
"""


class TransprocError(Exception):
    """Base exception for all transproc errors."""


class DuplicateRegistrationError(TransprocError):
    """Raised when a function name is registered a second time.

    The registry is append-only, so the first registration always wins and
    the registry is left unchanged.
    """

    def __init__(self, name: object) -> None:
        self.name = name
        super().__init__(f"function {name!r} is already registered")


class UnknownFunctionError(TransprocError):
    """Raised when looking up a name that was never registered."""

    def __init__(self, name: object) -> None:
        self.name = name
        super().__init__(f"no registered function for {name!r}")


class InvalidSourceError(TransprocError):
    """Raised when ``resolve()`` gets neither a function name nor a callable."""

    def __init__(self, source: object) -> None:
        self.source = source
        super().__init__(
            f"cannot resolve {source!r} ({type(source).__name__}): "
            "expected a registered function name or a callable"
        )


class PipelineConfigError(TransprocError):
    """Raised when a pipeline config cannot be turned into a pipeline.

    This can happen if:
    - The config file is empty.
    - One or more steps reference functions that are not registered.
    """
