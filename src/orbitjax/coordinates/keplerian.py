"""Keplerian orbital element ↔ Cartesian state vector conversions.

Converts between osculating Keplerian orbital elements
``[a, e, i, argp, raan, nu]`` and inertial Cartesian state vectors
``[x, y, z, vx, vy, vz]`` about a central body of gravitational
parameter ``gm``.

| Index | Element                                  | Units         |
|-------|------------------------------------------|---------------|
| 0     | *a*: semi-major axis (*p* if parabolic)  | m             |
| 1     | *e*: eccentricity                        | dimensionless |
| 2     | *i*: inclination                         | rad           |
| 3     | *ω*: argument of periapsis               | rad           |
| 4     | *Ω*: longitude of the ascending node     | rad           |
| 5     | *ν*: true anomaly                        | rad           |

Circular and equatorial orbits leave some of these angles undefined.  The
Cartesian → Keplerian conversion flags them with ``NaN`` and moves the
remaining phase information into a defined slot:

- circular and equatorial: ``ω = Ω = NaN``, slot 5 holds the true
  longitude.
- circular and inclined: slot 3 holds the argument of latitude, ``ν = 0``.
- equatorial and eccentric: slot 4 holds the true longitude of periapsis,
  ``ω = 0``.

The last two keep :func:`state_keplerian_to_cartesian` able to rebuild the
state.  An orbit counts as circular when ``e < tolerance``, as equatorial
when ``i`` is within *tolerance* of 0 or π, and as parabolic when
``|e - 1| < tolerance``.

All inputs and outputs use SI base units (metres, metres/second, radians).

References:
    1. V. A. Chobotov, *Orbital Mechanics*, 3rd Ed., AIAA Education
       Series, 2002.
    2. D. A. Vallado, *Fundamentals of Astrodynamics and Applications*,
       4th Ed., 2013, Algorithms 9 and 10.
"""

from __future__ import annotations

import logging

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from orbitjax.config import get_default_tolerance, get_dtype
from orbitjax.constants import GM_EARTH
from orbitjax.exceptions import InvalidStateError
from orbitjax.utils import (
    Z_HAT,
    cross,
    dot,
    from_radians,
    norm,
    normalize,
    squared_norm,
    to_radians,
    wrap_to_2pi,
)

logger = logging.getLogger(__name__)


def _as_state(x: ArrayLike, name: str) -> Array:
    x = jnp.asarray(x, dtype=get_dtype())
    if x.shape != (6,):
        logger.debug("%s rejected state of shape %s", name, x.shape)
        raise InvalidStateError(f"{name}: expected a state of shape (6,), got {x.shape}.")
    return x


def _signed_angle(a_hat: Array, b_hat: Array, axis: Array) -> Array:
    """Angle from *a_hat* to *b_hat* about *axis*, in ``[0, 2pi)``."""
    return wrap_to_2pi(jnp.arctan2(dot(axis, cross(a_hat, b_hat)), dot(a_hat, b_hat)))


def state_cartesian_to_keplerian(
    x_cart: ArrayLike,
    gm: float = GM_EARTH,
    tolerance: float | None = None,
    use_degrees: bool = False,
) -> Array:
    """Convert a Cartesian state vector to Keplerian orbital elements.

    Derives the osculating elements from the angular momentum, eccentricity
    and ascending-node vectors.  Geometrically undefined angles are returned
    as ``NaN`` (see the module docstring for the degenerate-orbit
    conventions); no exception is raised for degenerate geometry.

    Args:
        x_cart: Cartesian state ``[x, y, z, vx, vy, vz]`` in *m* and *m/s*.
        gm: Gravitational parameter of the central body. Units: *m³/s²*
        tolerance: Threshold used to detect circular, equatorial and
            parabolic orbits.  Defaults to
            :func:`~orbitjax.config.get_default_tolerance`.
        use_degrees: If ``True``, return angular elements in degrees.

    Returns:
        Orbital elements ``[a, e, i, argp, raan, nu]``.  Slot 0 holds the
            semi-latus rectum for parabolic orbits.

    Raises:
        InvalidStateError: If *x_cart* does not have shape ``(6,)``.

    Examples:
        ```python
        import jax.numpy as jnp
        from orbitjax.coordinates import state_cartesian_to_keplerian
        x = jnp.array([3.75e6, 4.24e6, -1.39e6, -4.65e3, -2.21e3, 1.66e3])
        oe = state_cartesian_to_keplerian(x, 3.986004415e14)
        ```
    """
    x_cart = _as_state(x_cart, "state_cartesian_to_keplerian")
    if tolerance is None:
        tolerance = get_default_tolerance()

    r = x_cart[:3]
    v = x_cart[3:6]
    r_mag = norm(r)
    r_hat = r / r_mag
    v_sq = squared_norm(v)

    # Angular momentum fixes the orbital plane
    h = cross(r, v)
    h_hat = normalize(h)
    i = jnp.arccos(jnp.clip(h_hat[2], -1.0, 1.0))

    # Eccentricity vector
    e_vec = ((v_sq - gm / r_mag) * r - dot(r, v) * v) / gm
    e = norm(e_vec)
    e_hat = e_vec / e

    parabolic = jnp.abs(e - 1.0) < tolerance
    circular = e < tolerance
    equatorial = (i < tolerance) | (jnp.abs(i - jnp.pi) < tolerance)

    semi = jnp.where(
        parabolic,
        squared_norm(h) / gm,
        1.0 / (2.0 / r_mag - v_sq / gm),
    )

    # Ascending node direction (z_hat x h_hat)
    n_hat = normalize(cross(jnp.asarray(Z_HAT, dtype=x_cart.dtype), h_hat))

    raan = wrap_to_2pi(jnp.arctan2(n_hat[1], n_hat[0]))
    argp = _signed_angle(n_hat, e_hat, h_hat)
    nu = _signed_angle(e_hat, r_hat, h_hat)

    raan = jnp.where(equatorial, jnp.nan, raan)
    argp = jnp.where(circular, jnp.nan, argp)

    # Circular and equatorial: true longitude replaces the true anomaly
    cos_l = jnp.clip(r[0] / r_mag, -1.0, 1.0)
    true_longitude = wrap_to_2pi(
        jnp.where(v[0] < 0.0, jnp.arccos(cos_l), 2.0 * jnp.pi - jnp.arccos(cos_l))
    )
    nu = jnp.where(circular & equatorial, true_longitude, nu)

    # Circular and inclined: argument of latitude, measured from the node
    arg_latitude = _signed_angle(n_hat, r_hat, h_hat)
    argp = jnp.where(circular & ~equatorial, arg_latitude, argp)
    nu = jnp.where(circular & ~equatorial, 0.0, nu)

    # Equatorial and eccentric: true longitude of periapsis
    lon_periapsis = wrap_to_2pi(jnp.arctan2(e_vec[1], e_vec[0]))
    raan = jnp.where(equatorial & ~circular, lon_periapsis, raan)
    argp = jnp.where(equatorial & ~circular, 0.0, argp)

    angles = from_radians(jnp.stack([i, argp, raan, nu]), use_degrees)
    return jnp.concatenate([jnp.stack([semi, e]), angles])


def state_keplerian_to_cartesian(
    x_oe: ArrayLike,
    gm: float = GM_EARTH,
    tolerance: float | None = None,
    use_degrees: bool = False,
) -> Array:
    """Convert Keplerian orbital elements to a Cartesian state vector.

    Builds position and velocity in the perifocal frame from the polar
    orbit equation, then rotates them into the reference frame with the
    3-1-3 (Ω, i, ω) rotation, applied as the two columns of the rotation
    matrix that act on the in-plane components.

    Args:
        x_oe: Orbital elements ``[a, e, i, argp, raan, nu]``.  Slot 0 is
            read as the semi-latus rectum when ``|e - 1| <= tolerance``.
            Angles in *rad* (or *deg* if ``use_degrees=True``).
        gm: Gravitational parameter of the central body. Units: *m³/s²*
        tolerance: Threshold used to detect parabolic orbits.  Defaults to
            :func:`~orbitjax.config.get_default_tolerance`.
        use_degrees: If ``True``, interpret angular elements as degrees.

    Returns:
        Cartesian state ``[x, y, z, vx, vy, vz]`` in *m* and *m/s*.

    Raises:
        InvalidStateError: If *x_oe* does not have shape ``(6,)``.

    Examples:
        ```python
        import jax.numpy as jnp
        from orbitjax.coordinates import state_keplerian_to_cartesian
        oe = jnp.array([8000e3, 0.23, 20.6, 274.78, 108.77, 46.11])
        x = state_keplerian_to_cartesian(oe, 3.986004415e14, use_degrees=True)
        ```
    """
    x_oe = _as_state(x_oe, "state_keplerian_to_cartesian")
    if tolerance is None:
        tolerance = get_default_tolerance()

    a = x_oe[0]
    e = x_oe[1]
    i, argp, raan, nu = to_radians(x_oe[2:6], use_degrees)

    p = jnp.where(jnp.abs(e - 1.0) > tolerance, a * (1.0 - e * e), a)
    r = p / (1.0 + e * jnp.cos(nu))

    # Perifocal position and velocity
    r_pf = jnp.stack([r * jnp.cos(nu), r * jnp.sin(nu)])
    v_pf = jnp.sqrt(gm / p) * jnp.stack([-jnp.sin(nu), e + jnp.cos(nu)])

    cos_o = jnp.cos(argp)
    sin_o = jnp.sin(argp)
    cos_R = jnp.cos(raan)
    sin_R = jnp.sin(raan)
    cos_i = jnp.cos(i)
    sin_i = jnp.sin(i)

    rot = jnp.array(
        [
            [cos_R * cos_o - sin_R * sin_o * cos_i, -cos_R * sin_o - sin_R * cos_o * cos_i],
            [sin_R * cos_o + cos_R * sin_o * cos_i, -sin_R * sin_o + cos_R * cos_o * cos_i],
            [sin_o * sin_i, cos_o * sin_i],
        ]
    )

    return jnp.concatenate([rot @ r_pf, rot @ v_pf])
