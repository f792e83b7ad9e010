"""Shared utility functions for orbitjax.

Provides angle conversion helpers, fixed-size vector algebra and
trace-aware argument checks.
"""

from orbitjax.utils._angle import from_radians, to_radians, wrap_to_2pi
from orbitjax.utils._validation import concrete_all, concrete_any
from orbitjax.utils.linalg import (
    X_HAT,
    Y_HAT,
    Z_HAT,
    add,
    cross,
    dot,
    norm,
    normalize,
    scale,
    squared_norm,
)

__all__ = [
    "X_HAT",
    "Y_HAT",
    "Z_HAT",
    "add",
    "concrete_all",
    "concrete_any",
    "cross",
    "dot",
    "from_radians",
    "norm",
    "normalize",
    "scale",
    "squared_norm",
    "to_radians",
    "wrap_to_2pi",
]
