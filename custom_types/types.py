"""Shared types definitions for the root finding package."""

from typing import Callable

import numpy as np
import numpy.typing as npt

# Type aliases for cleaner signatures
ArrayLike = npt.ArrayLike
FloatArray = npt.NDArray[np.float64]
Objective = Callable[[float], float]


def as_array(x: ArrayLike) -> FloatArray:
    """Convert scalar or array-like to float array, preserving shape."""
    return np.asarray(x, dtype=np.float64)
