"""
Scalar error taxonomy.

Queries on a scalar never raise. These errors cover construction from a
value the kind cannot represent, parsing and casting.
"""


class ScalarError(Exception):
    """Base class for all colscalar errors."""


class ScalarTypeError(ScalarError, TypeError):
    """Value has a Python type the scalar kind does not accept."""


class ScalarRangeError(ScalarError, ValueError):
    """Value falls outside the representable range of the scalar kind."""


class ScalarParseError(ScalarError, ValueError):
    """Text cannot be parsed as a scalar of the requested kind."""


class ScalarCastError(ScalarError, TypeError):
    """Cast between two kinds is unsupported or would lose information."""


class UnknownDataTypeError(ScalarError, KeyError):
    """Data type name or id is not known."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable
        return str(self.args[0]) if self.args else ""
