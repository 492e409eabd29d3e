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


class LogarithmicSequence(AbstractSpacedSequence[T]):
    """
    Lazy sequence of geometrically spaced values, i.e. values whose natural
    logarithms are evenly spaced.

    The bounds are moved to log space on construction; ``start`` and
    ``step`` are therefore log space quantities and every produced value
    is exponentiated.

    Args:
        start: First value, must be positive.
        end: Last value, must be positive and not smaller than ``start``.
        num_points: Number of values.
        dtype: numpy floating point type of the produced values.
        metadata: Extra metadata added to the snapshot.

    Raises:
        TypeError: If an argument has the wrong type.
        ValueError: If a bound is not positive and finite once converted to
            ``dtype``, ``start > end``, ``num_points`` is negative or
            ``dtype`` is not a numpy floating point type.
    """

    sequence_type = "logarithmic"

    def __init__(
        self,
        start: float,
        end: float,
        num_points: int,
        dtype: type[T] = default_float,  # type: ignore[assignment]
        metadata: Mapping[str, Any] | None = None,
    ):
        context = "logarithmic sequence"
        validate_arguments(
            start, end, num_points, dtype, context=context, positive=True
        )
        offset, step = compute_step(
            np.log(dtype(start)), np.log(dtype(end)), num_points, dtype
        )
        super().__init__(offset, step, num_points, dtype, metadata=metadata)
        self._first = float(start)
        self._last = float(end)
        log.debug(f"Created {self!r} with log step {step!r}")

    def _transform(self, point: Any) -> Any:
        return np.exp(point)

    @property
    def first(self) -> float:
        return self._first

    @property
    def last(self) -> float:
        return self._last


@overload
def logarithmic_sequence(
    start: float, end: float, n: int
) -> LogarithmicSequence[np.float64]: ...


@overload
def logarithmic_sequence(
    start: float, end: float, n: int, dtype: type[T]
) -> LogarithmicSequence[T]: ...


def logarithmic_sequence(
    start: float, end: float, n: int, dtype: type[Any] = default_float
) -> LogarithmicSequence[Any]:
    """
    Logarithmic version of :func:`~lazyspace.linear_sequence`.

    Returns a lazy sequence of ``n`` numbers between ``start`` and ``end``
    whose natural logarithms are evenly spaced.

    Args:
        start: First value.
        end: Last value.
        n: Number of values.
        dtype: numpy floating point type of the values, float64 by default.

    Raises:
        TypeError: If ``start``, ``end`` or ``n`` has the wrong type, or
            ``dtype`` is not a type.
        ValueError: If ``start`` or ``end`` is not positive and finite once
            converted to ``dtype``, if ``end < start``, if ``n`` is negative
            or if ``dtype`` is not a numpy floating point type.

    Examples:
        >>> [round(float(v), 6) for v in logarithmic_sequence(0.1, 100.0, 4)]
        [0.1, 1.0, 10.0, 100.0]
    """
    return LogarithmicSequence(start, end, n, dtype)
