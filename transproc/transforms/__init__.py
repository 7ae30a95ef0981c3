"""
Built-in transformation functions for transproc.

Importing this package registers every built-in function in the
process-wide registry, so they can be resolved by name::

    import transproc.transforms  # noqa: F401
    from transproc import t

    pipeline = t("to_string") >> t("to_boolean")

Containers:
  - coercions.py: Scalar type coercions (to_integer, to_boolean, ...).
  - arrays.py: Operations on sequences (map_array, extract_key).
  - records.py: Operations on dicts (rename_keys, accept_keys, nest, ...).
  - frames.py: Operations on pandas DataFrames (parse_numbers, ...).

Nothing is registered until this package is imported, so applications that
do not use the built-ins keep the whole function namespace to themselves.
"""

from transproc.transforms.arrays import Arrays
from transproc.transforms.coercions import Coercions
from transproc.transforms.frames import Frames
from transproc.transforms.records import Records

__all__ = ["Arrays", "Coercions", "Frames", "Records"]
