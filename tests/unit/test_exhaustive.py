"""
Exhaustive checks over whole 16-bit ranges.

Slow: run with --run-slow.
"""

import pytest

from colscalar import Int16Scalar, Scalar, UInt16Scalar


@pytest.mark.slow
@pytest.mark.parametrize("cls,low,high", [(Int16Scalar, -32768, 32767), (UInt16Scalar, 0, 65535)])
def test_construct_render_parse_every_value(cls, low: int, high: int):
    """Every value is stored as-is, renders base-10 and parses back equal."""
    for v in range(low, high + 1):
        s = cls(v)
        assert s.is_valid
        assert s.value == v
        text = s.to_string()
        assert text == str(v)
        assert Scalar.parse(text, s.data_type) == s


@pytest.mark.slow
def test_null_differs_from_every_value():
    null = Int16Scalar()
    for v in range(-32768, 32768):
        assert Int16Scalar(v) != null
