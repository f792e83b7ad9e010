"""Solar radiation pressure acceleration model.

Cannonball model: the spacecraft is treated as a flat plate facing the
radiation source, with a single reflectivity coefficient.  Shadowing is
not modelled.

All inputs and outputs use SI base units (metres/second squared, N/m^2).

References:
    1. O. Montenbruck and E. Gill, *Satellite Orbits: Models, Methods
       and Applications*, 2012, Eq. 3.75.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from orbitjax.config import get_dtype
from orbitjax.constants import P_SUN
from orbitjax.utils import normalize


def accel_srp(
    u_source: ArrayLike,
    pressure: float = P_SUN,
    cr: float = 1.0,
    area: float = 1.0,
    mass: float = 1.0,
) -> Array:
    """Acceleration due to solar radiation pressure.

    Args:
        u_source: Direction from the spacecraft to the radiation source.
            Shape ``(3,)``; normalized internally.
        pressure: Radiation pressure at the spacecraft [N/m^2].
        cr: Coefficient of reflectivity [dimensionless].
        area: Source-facing cross-sectional area [m^2].
        mass: Spacecraft mass [kg].

    Returns:
        SRP acceleration ``-pressure * cr * area / mass * u_hat`` [m/s^2],
            shape ``(3,)``, pointing away from the source.

    Examples:
        ```python
        import jax.numpy as jnp
        from orbitjax.orbit_dynamics import accel_srp
        a = accel_srp(jnp.array([1.0, 0.0, 0.0]), 4.56e-6, 1.3, 2.0, 4.0)
        ```
    """
    u_hat = normalize(jnp.asarray(u_source, dtype=get_dtype())[:3])
    return -pressure * cr * (area / mass) * u_hat
