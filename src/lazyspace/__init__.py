"""Lazy linearly and logarithmically spaced numeric sequences."""

import lazyspace._version
from lazyspace.sequences import (
    LinearSequence,
    LogarithmicSequence,
    linear_sequence,
    logarithmic_sequence,
)

__version__ = lazyspace._version.__version__

__all__ = [
    "LinearSequence",
    "LogarithmicSequence",
    "__version__",
    "linear_sequence",
    "logarithmic_sequence",
]
