"""Helpers for argument checks that must stay JAX-traceable.

Checks on array *values* need concrete data.  Under ``jax.jit`` or
``jax.vmap`` the values are abstract, so the checks are skipped there and
the traced computation propagates ``NaN`` instead.
"""

import jax
import jax.numpy as jnp
from jax.typing import ArrayLike


def concrete_any(mask: ArrayLike) -> bool:
    """Return ``jnp.any(mask)`` as a Python bool, or ``False`` while tracing.

    Args:
        mask (ArrayLike): Boolean array flagging invalid elements.

    Returns:
        ``True`` if *mask* is concrete and any element is set.
    """
    try:
        return bool(jnp.any(mask))
    except jax.errors.ConcretizationTypeError:
        return False


def concrete_all(mask: ArrayLike) -> bool | None:
    """Return ``jnp.all(mask)`` as a Python bool, or ``None`` while tracing.

    Args:
        mask (ArrayLike): Boolean array.

    Returns:
        ``True``/``False`` for concrete input, ``None`` for traced input.
    """
    try:
        return bool(jnp.all(mask))
    except jax.errors.ConcretizationTypeError:
        return None
