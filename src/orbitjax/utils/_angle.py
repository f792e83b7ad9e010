"""Radian/degree handling behind the ``use_degrees`` flag."""

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

_TWO_PI = 2.0 * jnp.pi


def to_radians(angle: ArrayLike, use_degrees: bool) -> Array:
    """Return *angle* in radians, converting from degrees when *use_degrees* is set."""
    return jnp.where(use_degrees, jnp.deg2rad(angle), angle)


def from_radians(angle: ArrayLike, use_degrees: bool) -> Array:
    """Return a radian *angle* in degrees when *use_degrees* is set."""
    return jnp.where(use_degrees, jnp.rad2deg(angle), angle)


def wrap_to_2pi(angle: ArrayLike) -> Array:
    """Wrap an angle into ``[0, 2pi)``.

    ``NaN`` inputs stay ``NaN``.

    Args:
        angle (ArrayLike): Angle in radians.

    Returns:
        Equivalent angle in ``[0, 2pi)``.
    """
    wrapped = jnp.mod(angle, _TWO_PI)
    # a tiny negative angle can round up to exactly 2pi
    return jnp.where(wrapped >= _TWO_PI, wrapped - _TWO_PI, wrapped)
