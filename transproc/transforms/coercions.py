"""
Scalar coercion functions.

Each function takes a single value and converts it to the target type.
Values that cannot be converted raise the underlying ``ValueError`` /
``TypeError`` (or ``decimal.InvalidOperation``) unchanged; a pipeline that
needs lenient parsing should put its own step in front.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from numbers import Number
from typing import Any

from transproc.functions import Functions

# Accepted spellings for to_boolean(), compared after str().strip().lower()
TRUE_VALUES = frozenset({"true", "t", "yes", "y", "on", "1"})
FALSE_VALUES = frozenset({"false", "f", "no", "n", "off", "0"})


class Coercions(Functions):
    def to_string(value: Any) -> str:
        return str(value)

    def to_integer(value: Any) -> int:
        """Convert to ``int``. Numeric strings may carry surrounding whitespace."""
        if isinstance(value, str):
            return int(value.strip())
        return int(value)

    def to_float(value: Any) -> float:
        return float(value)

    def to_decimal(value: Any) -> Decimal:
        """Convert to ``Decimal`` via ``str()`` so floats keep their printed form."""
        return Decimal(str(value))

    def to_boolean(value: Any) -> bool:
        """Convert common truthy/falsy spellings to ``bool``.

        ``True``/``False`` pass through. Numbers (including numpy scalars
        such as ``float64``) map ``1`` to ``True`` and ``0`` to ``False``.
        Strings are matched case-insensitively against ``TRUE_VALUES`` and
        ``FALSE_VALUES``.

        Raises:
            ValueError: If the value matches neither set.
        """
        if isinstance(value, bool):
            return value
        if isinstance(value, Number):
            if value == 1:
                return True
            if value == 0:
                return False
            raise ValueError(f"Cannot coerce {value!r} to boolean")
        key = str(value).strip().lower()
        if key in TRUE_VALUES:
            return True
        if key in FALSE_VALUES:
            return False
        raise ValueError(f"Cannot coerce {value!r} to boolean")

    def to_date(value: Any) -> date:
        """Parse an ISO-8601 date string (``YYYY-MM-DD``). Dates pass through."""
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        return date.fromisoformat(str(value).strip())

    def to_datetime(value: Any) -> datetime:
        if isinstance(value, datetime):
            return value
        return datetime.fromisoformat(str(value).strip())
