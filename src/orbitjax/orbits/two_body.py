"""Two-body orbit properties.

Mean motion, orbital period and circular velocity of a body orbiting a
central body of gravitational parameter ``gm``.  The optional *mass* of the
orbiting body is added to the central body's gravitational parameter
(``G * mass + gm``); leave it at zero for artificial satellites.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from orbitjax.config import get_dtype, get_machine_epsilon
from orbitjax.constants import GM_EARTH, GRAVITATIONAL_CONSTANT
from orbitjax.exceptions import InvalidStateError
from orbitjax.utils import concrete_any, from_radians


def mean_motion(
    a: ArrayLike,
    gm: float = GM_EARTH,
    mass: float = 0.0,
    use_degrees: bool = False,
) -> Array:
    """Compute the mean motion of an orbiting body.

    Args:
        a: Semi-major axis. Units: *m*
        gm: Gravitational parameter of the central body. Units: *m³/s²*
        mass: Mass of the orbiting body. Units: *kg*
        use_degrees: If ``True``, return mean motion in degrees per second.

    Returns:
        Mean motion ``sqrt((G * mass + gm) / a³)``. Units: *rad/s* or *deg/s*

    Examples:
        ```python
        from orbitjax.constants import R_EARTH
        from orbitjax.orbits import mean_motion
        n = mean_motion(R_EARTH + 500e3)
        ```
    """
    a = jnp.asarray(a, dtype=get_dtype())
    n = jnp.sqrt((GRAVITATIONAL_CONSTANT * mass + gm) / a**3)
    return from_radians(n, use_degrees)


def orbital_period(a: ArrayLike, gm: float = GM_EARTH, mass: float = 0.0) -> Array:
    """Compute the orbital period of an orbiting body.

    Args:
        a: Semi-major axis. Units: *m*
        gm: Gravitational parameter of the central body. Units: *m³/s²*
        mass: Mass of the orbiting body. Units: *kg*

    Returns:
        Orbital period. Units: *s*
    """
    a = jnp.asarray(a, dtype=get_dtype())
    return 2.0 * jnp.pi * jnp.sqrt(a**3 / (GRAVITATIONAL_CONSTANT * mass + gm))


def circular_velocity(r: ArrayLike, gm: float = GM_EARTH) -> Array:
    """Compute the velocity of a circular orbit of radius *r*.

    Args:
        r: Orbital radius. Units: *m*
        gm: Gravitational parameter of the central body. Units: *m³/s²*

    Returns:
        Circular velocity ``sqrt(gm / r)``. Units: *m/s*

    Raises:
        InvalidStateError: If ``|r|`` is not larger than machine epsilon.

    Examples:
        ```python
        from orbitjax.constants import R_EARTH
        from orbitjax.orbits import circular_velocity
        v = circular_velocity(R_EARTH + 200e3)
        ```
    """
    r = jnp.asarray(r, dtype=get_dtype())
    if concrete_any(jnp.abs(r) <= get_machine_epsilon()):
        raise InvalidStateError(f"circular_velocity: orbital radius must be non-zero (r={r}).")
    return jnp.sqrt(gm / r)
