"""Atmospheric drag acceleration model.

Computes the non-conservative acceleration due to atmospheric drag on a
spacecraft from its velocity relative to the atmosphere.  The caller
supplies the density and, where the atmosphere co-rotates with the
central body, the relative velocity.

All inputs and outputs use SI base units (metres/second, metres/second
squared, kg, kg/m^3).

References:
    1. O. Montenbruck and E. Gill, *Satellite Orbits: Models, Methods
       and Applications*, 2012, Eq. 3.97.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from orbitjax.config import get_dtype
from orbitjax.utils import norm


def accel_drag(
    v: ArrayLike,
    density: float,
    mass: float,
    area: float,
    cd: float,
) -> Array:
    """Acceleration due to atmospheric drag.

    Args:
        v: Velocity relative to the atmosphere [m/s].  Shape ``(3,)``, or
            ``(6,)`` for a full state ``[r, v]`` (last 3 elements used).
        density: Atmospheric density [kg/m^3].
        mass: Spacecraft mass [kg].
        area: Wind-facing cross-sectional area [m^2].
        cd: Coefficient of drag [dimensionless].

    Returns:
        Drag acceleration ``-0.5 * cd * density * area / mass * |v| * v``
            [m/s^2], shape ``(3,)``.

    Examples:
        ```python
        import jax.numpy as jnp
        from orbitjax.orbit_dynamics import accel_drag
        a = accel_drag(jnp.array([7000.0, 0.0, 10.0]), 2e-11, 500.0, 5.0, 2.2)
        ```
    """
    v = jnp.asarray(v, dtype=get_dtype())[-3:]
    return -0.5 * cd * density * (area / mass) * norm(v) * v
