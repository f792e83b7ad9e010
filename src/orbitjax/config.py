"""Package-wide float precision and the tolerances derived from it.

Every orbitjax function coerces its inputs with
``jnp.asarray(x, dtype=get_dtype())``.  The dtype defaults to
``jnp.float32``; selecting ``jnp.float64`` turns on ``jax_enable_x64``.
Select the dtype before compiling anything with ``jax.jit``, because the
value returned by ``get_dtype()`` at trace time is fixed into the compiled
function.

The limit-case tolerance of the element conversions and the stopping
tolerance of the Kepler equation solver both scale with the machine
epsilon of the selected dtype.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp

_SUPPORTED_DTYPES = {
    "float16": jnp.float16,
    "bfloat16": jnp.bfloat16,
    "float32": jnp.float32,
    "float64": jnp.float64,
}

_dtype = jnp.float32


def set_dtype(dtype) -> None:
    """Select the float dtype used by every orbitjax function.

    Args:
        dtype: A JAX float type, e.g. ``jnp.float64``.  Strings are not
            accepted.

    Raises:
        ValueError: If *dtype* is not one of ``jnp.float16``,
            ``jnp.bfloat16``, ``jnp.float32`` or ``jnp.float64``.

    Examples:
        ```python
        import jax.numpy as jnp
        from orbitjax.config import set_dtype
        set_dtype(jnp.float64)
        ```
    """
    global _dtype
    if not any(dtype is supported for supported in _SUPPORTED_DTYPES.values()):
        names = ", ".join(f"jnp.{name}" for name in _SUPPORTED_DTYPES)
        raise ValueError(f"Unsupported dtype {dtype!r}. Must be one of: {names}")
    if dtype is jnp.float64:
        jax.config.update("jax_enable_x64", True)
    _dtype = dtype


def get_dtype():
    """Return the float dtype selected with :func:`set_dtype`."""
    return _dtype


def get_machine_epsilon() -> float:
    """Return the machine epsilon of the selected dtype.

    Returns:
        float: Distance from 1.0 to the next larger representable value.
    """
    return float(jnp.finfo(_dtype).eps)


def get_default_tolerance() -> float:
    """Return the default limit-case tolerance for element conversions.

    Eccentricities and inclinations closer than this to their singular
    values are treated as circular, parabolic or equatorial.

    Returns:
        float: ``10 * eps`` of the selected dtype.
    """
    return 10.0 * get_machine_epsilon()


def get_root_finding_tolerance() -> float:
    """Return the default stopping tolerance of the Newton-Raphson solver.

    Returns:
        float: ``1e-3 * eps`` of the selected dtype.
    """
    return 1.0e-3 * get_machine_epsilon()
