# core/errors.py

"""
Exceptions raised by model-level code.

`Roster` methods catch these and translate them into failed `Response` objects,
so callers of the roster only ever see structured results.
"""


class EmptyDataError(ValueError):
    """Raised when an aggregate is requested over an empty grade sequence."""


class StructuralError(TypeError):
    """Raised when a child operation is attempted on a leaf display node."""
