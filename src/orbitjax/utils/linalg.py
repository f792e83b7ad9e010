"""Small fixed-size vector algebra helpers.

Thin, JAX-traceable wrappers used by the element conversions and force
models.  They operate on the last axis, so batched ``(..., 3)`` inputs
work as well as single vectors.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

X_HAT = (1.0, 0.0, 0.0)
Y_HAT = (0.0, 1.0, 0.0)
Z_HAT = (0.0, 0.0, 1.0)


def dot(a: ArrayLike, b: ArrayLike) -> Array:
    """Dot product of two vectors along the last axis."""
    return jnp.sum(jnp.asarray(a) * jnp.asarray(b), axis=-1)


def cross(a: ArrayLike, b: ArrayLike) -> Array:
    """Cross product of two 3-vectors."""
    return jnp.cross(a, b)


def squared_norm(v: ArrayLike) -> Array:
    """Squared Euclidean norm."""
    return dot(v, v)


def norm(v: ArrayLike) -> Array:
    """Euclidean norm."""
    return jnp.sqrt(squared_norm(v))


def normalize(v: ArrayLike) -> Array:
    """Unit vector in the direction of *v*.

    A zero vector yields ``NaN`` components; callers that can receive
    degenerate geometry mask the result with ``jnp.where``.
    """
    v = jnp.asarray(v)
    return v / norm(v)[..., None]


def add(a: ArrayLike, b: ArrayLike) -> Array:
    """Element-wise vector sum."""
    return jnp.add(a, b)


def scale(v: ArrayLike, s: ArrayLike) -> Array:
    """Multiply a vector by a scalar."""
    return jnp.asarray(s)[..., None] * jnp.asarray(v)
