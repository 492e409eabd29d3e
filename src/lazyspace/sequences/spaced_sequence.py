from __future__ import annotations

from abc import ABC, abstractmethod
from copy import deepcopy
from typing import TYPE_CHECKING, Any, Generic, TypeVar

import numpy as np
import numpy.typing as npt
from typing_extensions import Self

from lazyspace.metadatable import Metadatable
from lazyspace.utils import numpy_floats
from lazyspace.validators import Counts, FiniteNumbers, FloatTypes, validate_all

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from lazyspace.metadatable import Snapshot

T = TypeVar("T", bound=np.floating)


def compute_step(start: Any, end: Any, num_points: int, dtype: type[T]) -> tuple[T, T]:
    """
    Compute the offset and the per index increment of ``num_points`` evenly
    spaced values over ``[start, end]``.

    With fewer than two points the step is never used to produce a value,
    so it is set to zero.

    Args:
        start: First value of the sequence.
        end: Last value of the sequence.
        num_points: Total number of values in the sequence.
        dtype: numpy floating point type the arithmetic is done in.

    Returns:
        ``(start, step)`` both cast to ``dtype``.

    Raises:
        ValueError: If ``end - start`` does not fit in ``dtype``.
    """
    first = dtype(start)
    if num_points < 2:
        return first, dtype(0)
    with np.errstate(over="ignore", invalid="ignore"):
        step = (dtype(end) - first) / dtype(num_points - 1)
    if not np.isfinite(step):
        raise ValueError(
            f"interval from {start!r} to {end!r} is too wide for {dtype.__name__}"
        )
    return first, step


def validate_arguments(
    start: Any,
    end: Any,
    num_points: int,
    dtype: type,
    context: str,
    positive: bool = False,
) -> None:
    """
    Check the arguments shared by all sequence constructors. The bounds are
    checked after conversion to ``dtype`` since that is what the sequence
    computes with.

    Raises:
        TypeError: If an argument has the wrong type.
        ValueError: If a bound is not finite in ``dtype`` (or not positive
            when ``positive`` is set), ``num_points`` is negative, ``dtype``
            is not a numpy floating point type or ``start > end``.
    """
    FloatTypes(*numpy_floats).validate(dtype, "argument 3; " + context)
    bounds = FiniteNumbers(dtype, positive=positive)
    validate_all(
        (bounds, start),
        (bounds, end),
        (Counts(), num_points),
        context=context,
    )
    if not start <= end:
        raise ValueError(
            f"start={start!r} must not be larger than end={end!r}; {context}"
        )


class AbstractSpacedSequence(Metadatable, ABC, Generic[T]):
    """
    Lazy sequence of ``num_points`` values derived from evenly spaced
    points ``start + step * i`` for ``i`` in ``range(num_points)``.

    The sequence is its own iterator. ``next(seq)`` produces values from the
    front and :meth:`next_back` produces values from the back. Both draw
    from one shared index range so they can be interleaved freely; the
    sequence is exhausted once the two cursors meet.

    Subclasses define how a point in the evenly spaced domain maps to the
    value that is produced, see :meth:`_transform`.
    """

    sequence_type: str

    def __init__(
        self,
        start: Any,
        step: T,
        num_points: int,
        dtype: type[T],
        metadata: Mapping[str, Any] | None = None,
    ):
        super().__init__(metadata)
        self._start = dtype(start)
        self._step = step
        self._num_points = int(num_points)
        self._dtype = dtype
        self._front = 0
        self._back = self._num_points

    @abstractmethod
    def _transform(self, point: Any) -> Any:
        """
        Map a point (or an array of points) of the evenly spaced domain to
        the produced value.
        """

    @property
    @abstractmethod
    def first(self) -> float:
        """
        Value produced at index 0, as given to the constructor.
        """

    @property
    @abstractmethod
    def last(self) -> float:
        """
        Value produced at the last index, as given to the constructor.
        """

    @property
    def start(self) -> T:
        """
        Offset of the evenly spaced points.
        """
        return self._start

    @property
    def step(self) -> T:
        """
        Increment between two consecutive evenly spaced points.
        """
        return self._step

    @property
    def num_points(self) -> int:
        """
        Total number of values, consumed or not.
        """
        return self._num_points

    @property
    def dtype(self) -> type[T]:
        return self._dtype

    def _value_at(self, index: int) -> T:
        return self._transform(self._start + self._step * self._dtype(index))

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> T:
        if self._front == self._back:
            raise StopIteration
        value = self._value_at(self._front)
        self._front += 1
        return value

    def next_back(self) -> T:
        """
        Produce the next value from the back of the sequence.

        Raises:
            StopIteration: If no values remain.
        """
        if self._front == self._back:
            raise StopIteration
        self._back -= 1
        return self._value_at(self._back)

    def __reversed__(self) -> Iterator[T]:
        """
        Iterate over the remaining values from the back. This consumes the
        values from this sequence, use :meth:`copy` first to keep them.
        """
        while self._front != self._back:
            yield self.next_back()

    def __len__(self) -> int:
        return self._back - self._front

    def __length_hint__(self) -> int:
        return len(self)

    def copy(self) -> Self:
        """
        Return an independent sequence with the same definition and the
        same cursor positions as this one.
        """
        new_seq = self.__class__.__new__(self.__class__)
        new_seq.__dict__.update(self.__dict__)
        new_seq.metadata = deepcopy(self.metadata)
        return new_seq

    __copy__ = copy

    def to_array(self) -> npt.NDArray[T]:
        """
        Remaining values as a numpy array. Neither cursor is advanced.
        """
        indices = np.arange(self._front, self._back).astype(self._dtype)
        points = self._start + self._step * indices
        return np.asarray(self._transform(points), dtype=self._dtype)

    def snapshot_base(self) -> Snapshot:
        return {
            "first": self.first,
            "last": self.last,
            "num": self._num_points,
            "type": self.sequence_type,
            "dtype": self._dtype.__name__,
        }

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__}: {self.first!r} to {self.last!r}, "
            f"num_points={self._num_points}, dtype={self._dtype.__name__}, "
            f"remaining={len(self)}>"
        )
