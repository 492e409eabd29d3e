from .linear import LinearSequence, linear_sequence
from .logarithmic import LogarithmicSequence, logarithmic_sequence
from .spaced_sequence import AbstractSpacedSequence, compute_step

__all__ = [
    "AbstractSpacedSequence",
    "LinearSequence",
    "LogarithmicSequence",
    "compute_step",
    "linear_sequence",
    "logarithmic_sequence",
]
