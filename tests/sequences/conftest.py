from __future__ import annotations

import hypothesis.strategies as hst
import numpy as np

FLOAT_TYPES = (np.float32, np.float64)

# spacing is compared with an absolute tolerance so the bounds are kept
# small enough for single precision rounding to stay well below it
TOLERANCE = 1e-3
LINEAR_LIMITS = {np.float32: 1e2, np.float64: 1e6}
LOG_LIMITS = {np.float32: (2.0**-10, 2.0**10), np.float64: (1e-6, 1e6)}
WIDTHS = {np.float32: 32, np.float64: 64}
MAX_POINTS = 200

point_counts = hst.integers(min_value=0, max_value=MAX_POINTS)


@hst.composite
def linear_arguments(draw):
    dtype = draw(hst.sampled_from(FLOAT_TYPES))
    limit = LINEAR_LIMITS[dtype]
    bounds = hst.floats(min_value=-limit, max_value=limit, width=WIDTHS[dtype])
    start, end = sorted((draw(bounds), draw(bounds)))
    return start, end, draw(point_counts), dtype


@hst.composite
def logarithmic_arguments(draw):
    dtype = draw(hst.sampled_from(FLOAT_TYPES))
    low, high = LOG_LIMITS[dtype]
    bounds = hst.floats(min_value=low, max_value=high, width=WIDTHS[dtype])
    start, end = sorted((draw(bounds), draw(bounds)))
    return start, end, draw(point_counts), dtype


def assert_evenly_spaced(values) -> None:
    spaces = np.diff(np.asarray(values, dtype=np.float64))
    if len(spaces):
        assert np.all(np.abs(spaces - spaces[0]) < TOLERANCE)
