"""
Benchmark scalar construction, equality and rendering.
"""

import pytest

from colscalar import DoubleScalar, Int8Scalar, scalar


@pytest.mark.benchmark(group="scalars")
def test_int8_construct_speed(benchmark):
    """Benchmark Int8Scalar construction with range checking."""
    result = benchmark(Int8Scalar, -128)
    assert result.value == -128


@pytest.mark.benchmark(group="scalars")
def test_int8_equal_speed(benchmark):
    """Benchmark structural equality."""
    left, right = Int8Scalar(-128), Int8Scalar(-128)
    assert benchmark(left.equal, right)


@pytest.mark.benchmark(group="scalars")
def test_double_to_string_speed(benchmark):
    """Benchmark float rendering."""
    s = DoubleScalar(0.1)
    assert benchmark(s.to_string) == "0.1"


@pytest.mark.benchmark(group="scalars")
def test_factory_inference_speed(benchmark):
    """Benchmark scalar() with type inference."""
    result = benchmark(scalar, 42)
    assert result.value == 42
