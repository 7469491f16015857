"""
Options controlling scalar equality.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class EqualOptions:
    """
    How ``Scalar.equal`` compares floating-point payloads.

    Integer, boolean, string and binary kinds always compare exactly.
    """
    approx: bool = False  # compare floats within atol
    nans_equal: bool = False  # treat NaN as equal to NaN
    atol: float = 1e-5

    def __post_init__(self):
        """Validate options."""
        if self.atol < 0:
            raise ValueError("atol must be non-negative")

    @classmethod
    def defaults(cls) -> "EqualOptions":
        return cls()
