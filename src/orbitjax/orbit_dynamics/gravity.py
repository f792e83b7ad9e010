"""Gravity force models: central body and J2 zonal perturbation.

All inputs and outputs use SI base units (metres, metres/second squared),
though any consistent unit system works.

References:
    1. O. Montenbruck and E. Gill, *Satellite Orbits: Models, Methods
       and Applications*, 2012, p. 56-68.
    2. E. Melman, *Trajectory optimization for a mission to Neptune and
       Triton*, MSc thesis, Delft University of Technology, 2007.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from orbitjax.config import get_dtype
from orbitjax.constants import GM_EARTH, J2_EARTH, R_EARTH
from orbitjax.utils import norm, squared_norm


def accel_central_body(r_object: ArrayLike, gm: float = GM_EARTH) -> Array:
    """Acceleration due to a point-mass central body at the origin.

    Args:
        r_object: Position of the object [m].  Shape ``(3,)`` or ``(6,)``
            (only first 3 elements used).
        gm: Gravitational parameter of the central body [m^3/s^2].

    Returns:
        Acceleration ``-gm * r / |r|^3`` [m/s^2], shape ``(3,)``.

    Examples:
        ```python
        import jax.numpy as jnp
        from orbitjax.constants import R_EARTH
        from orbitjax.orbit_dynamics import accel_central_body
        a = accel_central_body(jnp.array([R_EARTH, 0.0, 0.0]))
        ```
    """
    r = jnp.asarray(r_object, dtype=get_dtype())[:3]
    return -gm * r / norm(r) ** 3


def accel_j2(
    r_object: ArrayLike,
    gm: float = GM_EARTH,
    r_eq: float = R_EARTH,
    j2: float = J2_EARTH,
) -> Array:
    """Perturbing acceleration due to the J2 zonal harmonic.

    Returns only the J2 term; add :func:`accel_central_body` for the total
    gravitational acceleration.

    .. math::

        \\mathbf{a}_{J2} = -\\frac{3}{2} J_2 \\frac{\\mu R^2}{r^5}
        \\begin{bmatrix}
            x (1 - 5 z^2 / r^2) \\\\
            y (1 - 5 z^2 / r^2) \\\\
            z (3 - 5 z^2 / r^2)
        \\end{bmatrix}

    Args:
        r_object: Position of the object in the body-fixed equatorial
            frame [m].  Shape ``(3,)`` or ``(6,)`` (only first 3 elements
            used).
        gm: Gravitational parameter of the central body [m^3/s^2].
        r_eq: Equatorial radius of the central body [m].
        j2: Unnormalized J2 coefficient [dimensionless].

    Returns:
        J2 acceleration [m/s^2], shape ``(3,)``.
    """
    r = jnp.asarray(r_object, dtype=get_dtype())[:3]
    r_sq = squared_norm(r)
    r_mag = jnp.sqrt(r_sq)

    z_sq_scaled = r[2] * r[2] / r_sq
    pre = -1.5 * j2 * gm * r_eq * r_eq / (r_sq * r_sq * r_mag)

    return pre * r * jnp.array(
        [1.0 - 5.0 * z_sq_scaled, 1.0 - 5.0 * z_sq_scaled, 3.0 - 5.0 * z_sq_scaled]
    )
