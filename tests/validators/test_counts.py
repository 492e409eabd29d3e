from __future__ import annotations

import math
from typing import Any

import numpy as np
import pytest

from lazyspace.validators import Counts

from .conftest import AClass, a_func

counts: tuple[int | bool | np.integer, ...] = (
    0,
    1,
    10,
    1000000,
    int(1e15),
    # warning: True==1 and False==0
    True,
    False,
    np.int64(3),
    np.uint8(7),
)
not_counts: tuple[Any, ...] = (
    0.0,
    1.0,
    3.5,
    math.pi,
    "",
    "1",
    None,
    float("nan"),
    float("inf"),
    [],
    {},
    b"good",
    AClass,
    AClass(),
    a_func,
    np.float64(2.0),
)


def test_counts() -> None:
    n = Counts()
    for v in counts:
        n.validate(v)
    assert repr(n) == "<Counts>"


def test_negative() -> None:
    n = Counts()
    for v in (-1, int(-1e15), np.int32(-5)):
        with pytest.raises(ValueError, match="must not be negative"):
            n.validate(v)


def test_not_counts() -> None:
    n = Counts()
    for v in not_counts:
        with pytest.raises(TypeError, match="is not an int"):
            n.validate(v)
