from __future__ import annotations

import math
from typing import Any

import hypothesis.strategies as hst
import numpy as np
import pytest
from hypothesis import given

from lazyspace.utils import numpy_concrete_floats
from lazyspace.validators import FiniteNumbers

from .conftest import AClass, a_func

not_numbers: list[Any] = [
    "",
    None,
    "1",
    [],
    {},
    [1, 2],
    b"good",
    1j,
    AClass,
    AClass(),
    a_func,
]


@pytest.mark.parametrize("dtype", numpy_concrete_floats)
def test_not_numbers(dtype) -> None:
    for positive in (False, True):
        v = FiniteNumbers(dtype, positive=positive)
        for value in not_numbers:
            with pytest.raises(TypeError, match="is not an int or float"):
                v.validate(value)


@pytest.mark.parametrize("dtype", numpy_concrete_floats)
def test_non_finite(dtype) -> None:
    v = FiniteNumbers(dtype)
    for value in (math.nan, math.inf, -math.inf, np.float32("nan"), 10**400):
        with pytest.raises(ValueError, match=f"is not finite as {dtype.__name__}"):
            v.validate(value)


def test_finite_only_after_conversion() -> None:
    # fine as a python float, overflows in single and half precision
    FiniteNumbers(np.float64).validate(1e300)
    with pytest.raises(ValueError, match="is not finite as float32"):
        FiniteNumbers(np.float32).validate(1e300)
    with pytest.raises(ValueError, match="is not finite as float32"):
        FiniteNumbers(np.float32).validate(-1e300)

    FiniteNumbers(np.float32).validate(60000)
    with pytest.raises(ValueError, match="is not finite as float16"):
        FiniteNumbers(np.float16).validate(70000)


def test_positive() -> None:
    v = FiniteNumbers(np.float64, positive=True)
    for value in (1, 0.5, 1e-300, 5e-324, np.float32(2.0), np.int64(3), True):
        v.validate(value)
    for value in (0, 0.0, -0.0, -1, -1e-300, False):
        with pytest.raises(ValueError, match="is not positive as float64"):
            v.validate(value)


def test_positive_only_after_conversion() -> None:
    FiniteNumbers(np.float64, positive=True).validate(1e-50)
    with pytest.raises(ValueError, match="is not positive as float32"):
        FiniteNumbers(np.float32, positive=True).validate(1e-50)

    # subnormal but still positive
    FiniteNumbers(np.float32, positive=True).validate(1e-40)


@given(value=hst.floats(allow_nan=False, allow_infinity=False))
def test_convert_matches_dtype(value: float) -> None:
    v = FiniteNumbers(np.float32)
    converted = v.convert(value)
    assert isinstance(converted, np.float32)

    with np.errstate(over="ignore"):
        expected = np.float32(value)
    assert converted == expected
    if np.isfinite(expected):
        v.validate(value)
    else:
        with pytest.raises(ValueError, match="is not finite as float32"):
            v.validate(value)


def test_repr_and_properties() -> None:
    v = FiniteNumbers(np.float32)
    assert repr(v) == "<FiniteNumbers float32>"
    assert v.dtype is np.float32
    assert not v.positive

    p = FiniteNumbers(np.float64, positive=True)
    assert repr(p) == "<FiniteNumbers float64 v>0>"
    assert p.positive
