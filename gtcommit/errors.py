"""Exceptions raised by gtcommit.

Verification never raises; a rejected opening is a plain ``False``.
"""


class CommitmentError(Exception):
    """Base class for all gtcommit errors."""


class MalformedEncoding(CommitmentError, ValueError):
    """Bytes do not decode to a valid element or scalar of the expected kind."""


class MalformedKey(MalformedEncoding):
    """A decoded commitment key contains an invalid element."""


class InvalidKeyLength(MalformedKey):
    """A decoded commitment key has the wrong number of elements."""

    def __init__(self, expected: int, actual: int):
        super().__init__(f"commitment key must have {expected} elements, got {actual}")
        self.expected = expected
        self.actual = actual


class DimensionMismatch(CommitmentError, ValueError):
    """Operands sized for different vector lengths were mixed."""

    def __init__(self, expected: int, actual: int, what: str = "values"):
        super().__init__(f"{what} length {actual} != n={expected}")
        self.expected = expected
        self.actual = actual
