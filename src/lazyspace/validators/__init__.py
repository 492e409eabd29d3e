from .validators import (
    Counts,
    FiniteNumbers,
    FloatTypes,
    Validator,
    validate_all,
)

__all__ = [
    "Counts",
    "FiniteNumbers",
    "FloatTypes",
    "Validator",
    "validate_all",
]
