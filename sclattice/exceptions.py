"""Exception classes for sclattice."""

from __future__ import annotations


class InvalidParameterError(ValueError):
    """Raised when layout parameters violate their documented constraints.

    Attributes
    ----------
    field : str
        Name of the offending parameter.
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
