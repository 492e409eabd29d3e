from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, overload

import numpy as np

from lazyspace.utils import default_float

from .spaced_sequence import (
    AbstractSpacedSequence,
    T,
    compute_step,
    validate_arguments,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

log = logging.getLogger(__name__)


class LinearSequence(AbstractSpacedSequence[T]):
    """
    Lazy sequence of evenly spaced values.

    Args:
        start: First value.
        end: Last value, must not be smaller than ``start``.
        num_points: Number of values, ``end`` is included when it is 2 or
            more.
        dtype: numpy floating point type of the produced values.
        metadata: Extra metadata added to the snapshot.

    Raises:
        TypeError: If an argument has the wrong type.
        ValueError: If ``start > end``, a bound is not finite once converted
            to ``dtype``, the interval is too wide for ``dtype``,
            ``num_points`` is negative or ``dtype`` is not a numpy floating
            point type.
    """

    sequence_type = "linear"

    def __init__(
        self,
        start: float,
        end: float,
        num_points: int,
        dtype: type[T] = default_float,  # type: ignore[assignment]
        metadata: Mapping[str, Any] | None = None,
    ):
        validate_arguments(start, end, num_points, dtype, context="linear sequence")
        offset, step = compute_step(start, end, num_points, dtype)
        super().__init__(offset, step, num_points, dtype, metadata=metadata)
        self._first = float(start)
        self._last = float(end)
        log.debug(f"Created {self!r} with step {step!r}")

    def _transform(self, point: Any) -> Any:
        return point

    @property
    def first(self) -> float:
        return self._first

    @property
    def last(self) -> float:
        return self._last


@overload
def linear_sequence(start: float, end: float, n: int) -> LinearSequence[np.float64]: ...


@overload
def linear_sequence(
    start: float, end: float, n: int, dtype: type[T]
) -> LinearSequence[T]: ...


def linear_sequence(
    start: float, end: float, n: int, dtype: type[Any] = default_float
) -> LinearSequence[Any]:
    """
    Returns a lazy sequence that yields ``n`` evenly spaced numbers over the
    ``[start, end]`` interval.

    ``n == 0`` yields nothing and ``n == 1`` yields ``start`` only.
    Values can be pulled from either end, ``reversed()`` walks the sequence
    from ``end`` to ``start``.

    Args:
        start: First value.
        end: Last value.
        n: Number of values.
        dtype: numpy floating point type of the values, float64 by default.

    Raises:
        TypeError: If ``start``, ``end`` or ``n`` has the wrong type, or
            ``dtype`` is not a type.
        ValueError: If ``end < start``, if a bound is not finite once
            converted to ``dtype`` or the interval is too wide for it, if
            ``n`` is negative or if ``dtype`` is not a numpy floating point
            type.

    Examples:
        >>> [float(v) for v in linear_sequence(2.0, 3.0, 5)]
        [2.0, 2.25, 2.5, 2.75, 3.0]
        >>> [float(v) for v in reversed(linear_sequence(2.0, 3.0, 5))]
        [3.0, 2.75, 2.5, 2.25, 2.0]
    """
    return LinearSequence(start, end, n, dtype)
