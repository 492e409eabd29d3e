"""
Collections of numpy floating point types that sequences can produce
"""

from __future__ import annotations

import numpy as np

numpy_concrete_floats = (np.float16, np.float32, np.float64)
"""
Floating point types with fixed sizes.
"""
numpy_c_floats = (np.half, np.single, np.double)
"""
Floating point types that matches C types. These are aliases of the
concrete types above.
"""

numpy_floats: tuple[type[np.floating], ...] = numpy_concrete_floats + numpy_c_floats
"""
All numpy float types a sequence may use as its element type
"""

default_float = np.float64
"""
Element type used when no dtype is given
"""
