"""Clohessy-Wiltshire relative motion with constant thrust.

Linearised motion of a chaser relative to a target on a circular orbit,
expressed in the target's local vertical / local horizontal (LVLH) frame
(Fehse, 2003):

- *x*: along-track, in the direction of the target's velocity
- *y*: opposite to the orbit normal
- *z*: radial, towards the central body

The equations of motion with a constant acceleration
:math:`\\mathbf{a} = (a_x, a_y, a_z)` are:

.. math::

    \\ddot{x} &= 2n\\dot{z} + a_x \\\\
    \\ddot{y} &= -n^2 y + a_y \\\\
    \\ddot{z} &= 3n^2 z - 2n\\dot{x} + a_z

where *n* is the mean motion of the target orbit.  The state vector is
ordered ``[x, y, z, x_dot, y_dot, z_dot]``.

All inputs and outputs use SI base units (metres, metres/second,
radians/second).

References:
    1. W. H. Clohessy and R. S. Wiltshire, "Terminal Guidance System
       for Satellite Rendezvous", *Journal of the Aerospace Sciences*,
       vol. 27, no. 9, pp. 653-658, 1960.
    2. W. Fehse, *Automated Rendezvous and Docking of Spacecraft*,
       Cambridge University Press, 2003, sec. 3.3.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from orbitjax.config import get_dtype


def cw_derivative(state: ArrayLike, n: ArrayLike, accel: ArrayLike = 0.0) -> Array:
    """Compute the Clohessy-Wiltshire state derivative.

    This is a pure function suitable for use with any numerical integrator.
    It is compatible with ``jax.jit``, ``jax.vmap``, and ``jax.grad``.

    Args:
        state: 6-element relative state in LVLH
            ``[x, y, z, x_dot, y_dot, z_dot]``. Units: m, m/s.
        n: Mean motion of the target orbit. Units: rad/s.
        accel: Constant thrust acceleration in LVLH, shape ``(3,)`` or a
            scalar broadcast to all axes. Units: m/s^2.

    Returns:
        6-element state derivative
            ``[x_dot, y_dot, z_dot, x_ddot, y_ddot, z_ddot]``.
            Units: m/s, m/s^2.

    Examples:
        ```python
        import jax.numpy as jnp
        from orbitjax.relative_motion import cw_derivative
        state = jnp.array([0.0, 0.0, 10.0, 0.0, 0.0, 0.0])
        deriv = cw_derivative(state, 1.1e-3)
        ```
    """
    dtype = get_dtype()
    state = jnp.asarray(state, dtype=dtype)
    n = jnp.asarray(n, dtype=dtype)
    a = jnp.broadcast_to(jnp.asarray(accel, dtype=dtype), (3,))

    y = state[1]
    z = state[2]
    x_dot = state[3]
    z_dot = state[5]

    n2 = n * n

    x_ddot = 2.0 * n * z_dot + a[0]
    y_ddot = -n2 * y + a[1]
    z_ddot = 3.0 * n2 * z - 2.0 * n * x_dot + a[2]

    return jnp.concatenate([state[3:6], jnp.stack([x_ddot, y_ddot, z_ddot])])


def state_cw_propagate(
    state0: ArrayLike,
    t: ArrayLike,
    n: ArrayLike,
    accel: ArrayLike = 0.0,
) -> Array:
    """Propagate a relative state with the closed-form Clohessy-Wiltshire solution.

    Evaluates the analytical solution of the Clohessy-Wiltshire equations,
    including a constant thrust acceleration, at elapsed time *t*.

    Args:
        state0: Initial relative state in LVLH
            ``[x, y, z, x_dot, y_dot, z_dot]``. Units: m, m/s.
        t: Elapsed time since the initial state. Units: s.
        n: Mean motion of the target orbit. Units: rad/s.
        accel: Constant thrust acceleration in LVLH, shape ``(3,)`` or a
            scalar broadcast to all axes. Units: m/s^2.

    Returns:
        Relative state at time *t*. Units: m, m/s.

    Examples:
        ```python
        import jax.numpy as jnp
        from orbitjax.constants import GM_EARTH
        from orbitjax.relative_motion import state_cw_propagate
        n = jnp.sqrt(GM_EARTH / 7200e3**3)
        state0 = jnp.array([0.0, 0.0, 10.0, 0.0, 0.0, 0.0])
        state_t = state_cw_propagate(state0, 100.0, n)
        ```
    """
    dtype = get_dtype()
    state0 = jnp.asarray(state0, dtype=dtype)
    t = jnp.asarray(t, dtype=dtype)
    n = jnp.asarray(n, dtype=dtype)
    a = jnp.broadcast_to(jnp.asarray(accel, dtype=dtype), (3,))

    x0, y0, z0, x_dot0, y_dot0, z_dot0 = state0
    ax, ay, az = a

    nt = n * t
    c = jnp.cos(nt)
    s = jnp.sin(nt)
    n2 = n * n

    # Along-track
    x = (
        (4.0 * x_dot0 / n - 6.0 * z0) * s
        - 2.0 * z_dot0 / n * c
        + (6.0 * n * z0 - 3.0 * x_dot0) * t
        + x0
        + 2.0 * z_dot0 / n
        + 2.0 * az / n2 * (nt - s)
        + ax * (4.0 / n2 * (1.0 - c) - 1.5 * t * t)
    )
    x_dot = (
        (4.0 * x_dot0 - 6.0 * n * z0) * c
        + 2.0 * z_dot0 * s
        + 6.0 * n * z0
        - 3.0 * x_dot0
        + 2.0 * az / n * (1.0 - c)
        + ax * (4.0 / n * s - 3.0 * t)
    )

    # Out-of-plane (decoupled harmonic oscillator)
    y = y0 * c + y_dot0 / n * s + ay / n2 * (1.0 - c)
    y_dot = -n * y0 * s + y_dot0 * c + ay / n * s

    # Radial
    z = (
        (2.0 * x_dot0 / n - 3.0 * z0) * c
        + z_dot0 / n * s
        + 4.0 * z0
        - 2.0 * x_dot0 / n
        + 2.0 * ax / n2 * (s - nt)
        + az / n2 * (1.0 - c)
    )
    z_dot = (
        -(2.0 * x_dot0 - 3.0 * n * z0) * s
        + z_dot0 * c
        + 2.0 * ax / n * (c - 1.0)
        + az / n * s
    )

    return jnp.stack([x, y, z, x_dot, y_dot, z_dot])
