from .types import default_float, numpy_c_floats, numpy_concrete_floats, numpy_floats

__all__ = [
    "default_float",
    "numpy_c_floats",
    "numpy_concrete_floats",
    "numpy_floats",
]
