"""
Provides validators for the arguments of sequence constructors. A validator
checks that a value belongs to the given type and, where it matters, that it
is still usable once converted to the element type of the sequence.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar, Union

import numpy as np

numbertypes = float | int | np.floating | np.integer


def validate_all(*args: tuple[Validator[Any], Any], context: str = "") -> None:
    """
    Takes a list of (validator, value) couplets and tests whether they are
    all valid, raising TypeError or ValueError otherwise.

    Args:
        *args: Values to validate.
        context: keyword-only arg with a string to include in the error message
            giving the user context for the error.
    """
    if context:
        context = "; " + context

    for i, (validator, value) in enumerate(args):
        validator.validate(value, "argument " + str(i) + context)


T = TypeVar("T")


class Validator(Generic[T]):
    """
    Base class for all argument validators.

    Subclasses implement ``validate(value, context)`` which raises
    TypeError if the value has the wrong type and ValueError if it has the
    right type but lies outside the allowed domain. ``context`` identifies
    the caller and is appended to the error message.
    """

    def validate(self, value: T, context: str = "") -> None:
        raise NotImplementedError


class FiniteNumbers(Validator[numbertypes]):
    """
    Requires a real number that stays finite when converted to ``dtype``.
    With ``positive=True`` the converted value must also be larger than
    zero, which is what a logarithm needs.

    The check is done on the converted value so that e.g. ``1e300`` is
    rejected for float32 (it becomes inf) and ``1e-50`` is rejected as a
    positive float32 (it becomes 0).

    Args:
        dtype: numpy floating point type the value will be converted to.
        positive: Require the converted value to be strictly positive.
    """

    validtypes = (float, int, np.integer, np.floating)

    def __init__(self, dtype: type[np.floating], positive: bool = False) -> None:
        self._dtype = dtype
        self._positive = positive

    def convert(self, value: numbertypes) -> np.floating:
        """
        Convert ``value`` to ``dtype`` without warnings. Values too large
        for ``dtype`` become inf.
        """
        with np.errstate(over="ignore", under="ignore"):
            try:
                return self._dtype(value)
            except OverflowError:
                # python ints too large for any float
                return self._dtype(np.inf if value > 0 else -np.inf)

    def validate(self, value: numbertypes, context: str = "") -> None:
        """
        Validates value else raises error.

        Args:
            value: A number.
            context: Context for validation.

        Raises:
            TypeError: If not int or float.
            ValueError: If the converted value is NaN or infinite, or not
                positive when ``positive`` is set.
        """
        if not isinstance(value, self.validtypes):
            raise TypeError(f"{value!r} is not an int or float; {context}")

        converted = self.convert(value)
        name = self._dtype.__name__
        if not np.isfinite(converted):
            raise ValueError(f"{value!r} is not finite as {name}; {context}")
        if self._positive and not converted > 0:
            raise ValueError(f"{value!r} is not positive as {name}; {context}")

    def __repr__(self) -> str:
        positive = " v>0" if self._positive else ""
        return f"<FiniteNumbers {self._dtype.__name__}{positive}>"

    @property
    def dtype(self) -> type[np.floating]:
        return self._dtype

    @property
    def positive(self) -> bool:
        return self._positive


class Counts(Validator[Union[int, "np.integer[Any]"]]):
    """
    Requires a non-negative integer, such as a number of points.
    """

    validtypes = (int, np.integer)

    def validate(self, value: int | np.integer, context: str = "") -> None:
        """
        Validates if non-negative int else raises error.

        Args:
            value: An integer.
            context: Context for validation.

        Raises:
             TypeError: If not an integer.
             ValueError: If negative.
        """
        if not isinstance(value, self.validtypes):
            raise TypeError(f"{value!r} is not an int; {context}")

        if value < 0:
            raise ValueError(f"{value!r} is invalid: must not be negative; {context}")

    def __repr__(self) -> str:
        return "<Counts>"


class FloatTypes(Validator[type]):
    """
    Requires one of a provided set of numpy floating point types.
    eg. FloatTypes(np.float32, np.float64)

    Raises:
        TypeError: If no type is provided or one of them is not a numpy
            floating point type.
    """

    def __init__(self, *types: type) -> None:
        if not len(types):
            raise TypeError("FloatTypes needs at least one type")
        for type_ in types:
            if not (isinstance(type_, type) and issubclass(type_, np.floating)):
                raise TypeError(f"{type_!r} is not a numpy floating point type")

        self._types = frozenset(types)

    def validate(self, value: type, context: str = "") -> None:
        """
        Validates that value is one of the accepted types.

        Args:
            value: A numpy scalar type.
            context: Context for validation.

        Raises:
            TypeError: If value is not a type at all.
            ValueError: If value is a type but not one of the accepted ones.
        """
        if not isinstance(value, type):
            raise TypeError(f"{value!r} is not a type; {context}")

        if value not in self._types:
            raise ValueError(
                f"{value.__name__} is not one of {self._names()}; {context}"
            )

    def _names(self) -> str:
        return ", ".join(sorted({t.__name__ for t in self._types}))

    def __repr__(self) -> str:
        return f"<FloatTypes: {self._names()}>"

    @property
    def types(self) -> frozenset[type]:
        return self._types
