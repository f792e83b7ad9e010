"""Anomaly conversions for elliptical and hyperbolic orbits.

Converts between true, eccentric and mean anomaly.  Each conversion comes
in three flavours:

- ``*_elliptical``: valid for ``0 <= e < 1`` only.
- ``*_hyperbolic``: valid for ``e > 1`` only.
- the unqualified name: dispatches on ``e`` and should be used when the
  orbit type is not known in advance.

Parabolic orbits (``e == 1`` to machine precision) are not supported by the
dispatching functions and raise :class:`~orbitjax.exceptions.ParabolicOrbitError`.

The inverse of Kepler's equation (mean to eccentric anomaly) is solved with
Newton-Raphson iteration inside ``jax.lax.while_loop``, or optionally with a
fixed-length bisection inside ``jax.lax.fori_loop``.

Eccentricity checks and solver failure are reported with exceptions when the
functions are called eagerly.  Under ``jax.jit`` or ``jax.vmap`` the values
are abstract: the checks are skipped, out-of-range eccentricities yield
``NaN`` from the closed forms, and elements the Newton-Raphson solver fails
to converge are returned as ``NaN``.

All angles are in radians unless ``use_degrees=True``.

References:
    1. V. A. Chobotov, *Orbital Mechanics*, 3rd Ed., AIAA Education
       Series, 2002.
    2. P. Musegaas, *Optimization of Space Trajectories Including Multiple
       Gravity Assists and Deep Space Maneuvers*, MSc thesis, Delft
       University of Technology, 2012.
"""

from __future__ import annotations

import logging

import jax
import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from orbitjax.config import get_dtype, get_machine_epsilon, get_root_finding_tolerance
from orbitjax.exceptions import (
    InvalidEccentricityError,
    MaxIterationsExceededError,
    NegativeEccentricityError,
    ParabolicOrbitError,
)
from orbitjax.utils import concrete_all, concrete_any, from_radians, to_radians, wrap_to_2pi

logger = logging.getLogger(__name__)

# Newton-Raphson becomes unreliable for near-parabolic orbits (Musegaas, 2012)
NEAR_PARABOLIC_LIMIT = 1.0 - 1.0e-11

# Steps within a few ulps of E cannot be refined further
_STEP_FLOOR_ULPS = 4.0

_SOLVER_METHODS = ("newton", "bisection")


# ──────────────────────────────────────────────
# Eccentricity checks
# ──────────────────────────────────────────────


def _check_non_negative(e: Array, caller: str) -> None:
    if concrete_any(e < 0.0):
        logger.debug("%s rejected negative eccentricity %s", caller, e)
        raise NegativeEccentricityError(f"{caller}: eccentricity is negative (e={e}).")


def _check_elliptical(e: Array, caller: str, upper: float = 1.0) -> None:
    _check_non_negative(e, caller)
    if concrete_any(e >= upper):
        logger.debug("%s rejected non-elliptical eccentricity %s", caller, e)
        raise InvalidEccentricityError(
            f"{caller}: eccentricity is non-elliptical, expected 0 <= e < {upper!r} (e={e})."
        )


def _check_hyperbolic(e: Array, caller: str) -> None:
    if concrete_any(e <= 1.0):
        logger.debug("%s rejected non-hyperbolic eccentricity %s", caller, e)
        raise InvalidEccentricityError(
            f"{caller}: eccentricity is non-hyperbolic, expected e > 1 (e={e})."
        )


def _check_not_parabolic(e: Array, caller: str) -> None:
    _check_non_negative(e, caller)
    if concrete_any(jnp.abs(e - 1.0) < get_machine_epsilon()):
        logger.debug("%s rejected parabolic eccentricity %s", caller, e)
        raise ParabolicOrbitError(
            f"{caller}: parabolic orbits have not been implemented (e={e})."
        )


# ──────────────────────────────────────────────
# Traceable kernels
# ──────────────────────────────────────────────


def _true_to_eccentric_elliptical(nu: Array, e: Array) -> Array:
    denom = 1.0 + e * jnp.cos(nu)
    sin_E = jnp.sqrt(1.0 - e**2) * jnp.sin(nu) / denom
    cos_E = (e + jnp.cos(nu)) / denom
    return jnp.arctan2(sin_E, cos_E)


def _true_to_eccentric_hyperbolic(nu: Array, e: Array) -> Array:
    denom = 1.0 + jnp.cos(nu)
    sinh_H = jnp.sqrt(e**2 - 1.0) * jnp.sin(nu) / denom
    cosh_H = (jnp.cos(nu) + e) / denom
    # atanh(x) = 0.5 * (ln(1 + x) - ln(1 - x))
    tanh_H = sinh_H / cosh_H
    return 0.5 * (jnp.log1p(tanh_H) - jnp.log1p(-tanh_H))


def _eccentric_to_true_elliptical(E: Array, e: Array) -> Array:
    denom = 1.0 - e * jnp.cos(E)
    sin_nu = jnp.sqrt(1.0 - e * e) * jnp.sin(E) / denom
    cos_nu = (jnp.cos(E) - e) / denom
    return jnp.arctan2(sin_nu, cos_nu)


def _eccentric_to_true_hyperbolic(H: Array, e: Array) -> Array:
    denom = e * jnp.cosh(H) - 1.0
    sin_nu = jnp.sqrt(e * e - 1.0) * jnp.sinh(H) / denom
    cos_nu = (e - jnp.cosh(H)) / denom
    return jnp.arctan2(sin_nu, cos_nu)


def _split_branches(x: Array, e: Array) -> tuple[Array, Array, Array, Array]:
    """Per-branch copies of the anomaly *x* and eccentricity *e*.

    ``jnp.where`` evaluates both branches, so the unselected one receives
    ``e = 0`` (elliptical) or ``x = 0, e = 2`` (hyperbolic).  Both stay
    finite, which keeps their zero cotangent from turning into ``NaN``
    under ``jax.grad``.

    Returns:
        Tuple ``(elliptical, e_ell, x_hyp, e_hyp)``.
    """
    elliptical = e < 1.0
    e_ell = jnp.where(elliptical, e, 0.0)
    x_hyp = jnp.where(elliptical, 0.0, x)
    e_hyp = jnp.where(elliptical, 2.0, e)
    return elliptical, e_ell, x_hyp, e_hyp


def _eccentric_to_mean_elliptical(E: Array, e: Array) -> Array:
    return E - e * jnp.sin(E)


def _eccentric_to_mean_hyperbolic(H: Array, e: Array) -> Array:
    return e * jnp.sinh(H) - H


def _kepler_function(E: Array, e: Array, M: Array) -> Array:
    return E - e * jnp.sin(E) - M


def _kepler_function_derivative(E: Array, e: Array) -> Array:
    return 1.0 - e * jnp.cos(E)


def _newton_raphson_kepler(
    M: Array, e: Array, tolerance: float, max_iterations: int
) -> tuple[Array, Array, Array]:
    """Solve ``E - e sin(E) = M`` for ``E`` with ``M`` already in ``[0, 2pi)``.

    An element stops iterating once its step drops below *tolerance* or
    below a few ulps of ``E``, or when a step that is already small stops
    shrinking.  Near the root Newton steps shrink monotonically, so a step
    that grows again is rounding noise.

    Returns:
        Tuple ``(E, iterations, converged)``.  Elements that converge are
        frozen while the remaining ones keep iterating.
    """
    # Starting guess of Musegaas (2012)
    E0 = jnp.where(M > jnp.pi, M - e, M + e)
    eps = float(jnp.finfo(E0.dtype).eps)
    step_floor = _STEP_FLOOR_ULPS * eps
    stall_limit = eps**0.5

    def cond(carry):
        _, converged, _, i = carry
        return jnp.logical_and(jnp.any(~converged), i < max_iterations)

    def body(carry):
        E, converged, prev_delta, i = carry
        E_next = E - _kepler_function(E, e, M) / _kepler_function_derivative(E, e)
        delta = jnp.abs(E - E_next)
        scale = jnp.maximum(jnp.abs(E_next), 1.0)
        stalled = (delta >= prev_delta) & (delta < stall_limit * scale)
        done = (delta < jnp.maximum(tolerance, step_floor * scale)) | stalled
        return (
            jnp.where(converged, E, E_next),
            converged | done,
            jnp.where(converged, prev_delta, delta),
            i + 1,
        )

    init = (
        E0,
        jnp.zeros(E0.shape, dtype=bool),
        jnp.full(E0.shape, jnp.inf, dtype=E0.dtype),
        jnp.asarray(0),
    )
    E, converged, _, iterations = jax.lax.while_loop(cond, body, init)
    return E, iterations, converged


def _bisection_kepler(M: Array, e: Array, iterations: int) -> Array:
    """Bisect Kepler's equation over a fixed number of halvings.

    Kepler's equation is odd about ``M = pi`` (``E(2pi - M) = 2pi - E(M)``),
    so the search always runs on ``[0, pi]`` where the root is bracketed by
    ``[M, min(M + e, pi)]``.
    """
    two_pi = 2.0 * jnp.pi
    reflect = M > jnp.pi
    M_half = jnp.where(reflect, two_pi - M, M)

    lo = M_half
    hi = jnp.minimum(M_half + e, jnp.pi)

    def body(_, bounds):
        lo, hi = bounds
        mid = 0.5 * (lo + hi)
        below = _kepler_function(mid, e, M_half) < 0.0
        return jnp.where(below, mid, lo), jnp.where(below, hi, mid)

    lo, hi = jax.lax.fori_loop(0, iterations, body, (lo, hi))
    E = 0.5 * (lo + hi)
    return jnp.where(reflect, two_pi - E, E)


# ──────────────────────────────────────────────
# True <-> eccentric anomaly
# ──────────────────────────────────────────────


def anomaly_true_to_eccentric_elliptical(
    anm_true: ArrayLike, e: ArrayLike, use_degrees: bool = False
) -> Array:
    """Convert true anomaly to eccentric anomaly for an elliptical orbit.

    Args:
        anm_true: True anomaly. Units: *rad* or *deg*
        e: Eccentricity, ``0 <= e < 1``. Dimensionless.
        use_degrees: If ``True``, input and output are in degrees.

    Returns:
        Eccentric anomaly in ``(-pi, pi]``. Units: *rad* or *deg*

    Raises:
        NegativeEccentricityError: If ``e < 0``.
        InvalidEccentricityError: If ``e >= 1``.

    References:
        V. A. Chobotov, *Orbital Mechanics*, 3rd Ed., 2002.

    Examples:
        ```python
        from orbitjax.orbits import anomaly_true_to_eccentric_elliptical
        E = anomaly_true_to_eccentric_elliptical(82.16, 0.146, use_degrees=True)
        ```
    """
    anm_true = jnp.asarray(anm_true, dtype=get_dtype())
    e = jnp.asarray(e, dtype=get_dtype())
    _check_elliptical(e, "anomaly_true_to_eccentric_elliptical")

    nu = to_radians(anm_true, use_degrees)
    return from_radians(_true_to_eccentric_elliptical(nu, e), use_degrees)


def anomaly_true_to_eccentric_hyperbolic(
    anm_true: ArrayLike, e: ArrayLike, use_degrees: bool = False
) -> Array:
    """Convert true anomaly to hyperbolic eccentric anomaly.

    The inverse hyperbolic tangent is evaluated as
    ``0.5 * (ln(1 + x) - ln(1 - x))``.

    Args:
        anm_true: True anomaly. Units: *rad* or *deg*
        e: Eccentricity, ``e > 1``. Dimensionless.
        use_degrees: If ``True``, input and output are in degrees.

    Returns:
        Hyperbolic eccentric anomaly. Units: *rad* or *deg*

    Raises:
        InvalidEccentricityError: If ``e <= 1``.

    Examples:
        ```python
        from orbitjax.orbits import anomaly_true_to_eccentric_hyperbolic
        H = anomaly_true_to_eccentric_hyperbolic(0.5291, 3.0)
        ```
    """
    anm_true = jnp.asarray(anm_true, dtype=get_dtype())
    e = jnp.asarray(e, dtype=get_dtype())
    _check_hyperbolic(e, "anomaly_true_to_eccentric_hyperbolic")

    nu = to_radians(anm_true, use_degrees)
    return from_radians(_true_to_eccentric_hyperbolic(nu, e), use_degrees)


def anomaly_true_to_eccentric(
    anm_true: ArrayLike, e: ArrayLike, use_degrees: bool = False
) -> Array:
    """Convert true anomaly to (elliptical or hyperbolic) eccentric anomaly.

    Dispatches on eccentricity: ``e < 1`` uses the elliptical relation and
    ``e > 1`` the hyperbolic one.

    Args:
        anm_true: True anomaly. Units: *rad* or *deg*
        e: Eccentricity. Dimensionless.
        use_degrees: If ``True``, input and output are in degrees.

    Returns:
        Eccentric anomaly. Units: *rad* or *deg*

    Raises:
        NegativeEccentricityError: If ``e < 0``.
        ParabolicOrbitError: If ``|e - 1|`` is below machine epsilon.

    Examples:
        ```python
        from orbitjax.orbits import anomaly_true_to_eccentric
        E = anomaly_true_to_eccentric(90.0, 0.1, use_degrees=True)
        ```
    """
    anm_true = jnp.asarray(anm_true, dtype=get_dtype())
    e = jnp.asarray(e, dtype=get_dtype())
    _check_not_parabolic(e, "anomaly_true_to_eccentric")

    nu = to_radians(anm_true, use_degrees)
    elliptical, e_ell, nu_hyp, e_hyp = _split_branches(nu, e)
    E = jnp.where(
        elliptical,
        _true_to_eccentric_elliptical(nu, e_ell),
        _true_to_eccentric_hyperbolic(nu_hyp, e_hyp),
    )
    return from_radians(E, use_degrees)


def anomaly_eccentric_to_true_elliptical(
    anm_ecc: ArrayLike, e: ArrayLike, use_degrees: bool = False
) -> Array:
    """Convert eccentric anomaly to true anomaly for an elliptical orbit.

    Args:
        anm_ecc: Eccentric anomaly. Units: *rad* or *deg*
        e: Eccentricity, ``0 <= e < 1``. Dimensionless.
        use_degrees: If ``True``, input and output are in degrees.

    Returns:
        True anomaly in ``(-pi, pi]``. Units: *rad* or *deg*

    Raises:
        NegativeEccentricityError: If ``e < 0``.
        InvalidEccentricityError: If ``e >= 1``.
    """
    anm_ecc = jnp.asarray(anm_ecc, dtype=get_dtype())
    e = jnp.asarray(e, dtype=get_dtype())
    _check_elliptical(e, "anomaly_eccentric_to_true_elliptical")

    E = to_radians(anm_ecc, use_degrees)
    return from_radians(_eccentric_to_true_elliptical(E, e), use_degrees)


def anomaly_eccentric_to_true_hyperbolic(
    anm_ecc: ArrayLike, e: ArrayLike, use_degrees: bool = False
) -> Array:
    """Convert hyperbolic eccentric anomaly to true anomaly.

    Args:
        anm_ecc: Hyperbolic eccentric anomaly. Units: *rad* or *deg*
        e: Eccentricity, ``e > 1``. Dimensionless.
        use_degrees: If ``True``, input and output are in degrees.

    Returns:
        True anomaly. Units: *rad* or *deg*

    Raises:
        InvalidEccentricityError: If ``e <= 1``.
    """
    anm_ecc = jnp.asarray(anm_ecc, dtype=get_dtype())
    e = jnp.asarray(e, dtype=get_dtype())
    _check_hyperbolic(e, "anomaly_eccentric_to_true_hyperbolic")

    H = to_radians(anm_ecc, use_degrees)
    return from_radians(_eccentric_to_true_hyperbolic(H, e), use_degrees)


def anomaly_eccentric_to_true(
    anm_ecc: ArrayLike, e: ArrayLike, use_degrees: bool = False
) -> Array:
    """Convert (elliptical or hyperbolic) eccentric anomaly to true anomaly.

    Args:
        anm_ecc: Eccentric anomaly. Units: *rad* or *deg*
        e: Eccentricity. Dimensionless.
        use_degrees: If ``True``, input and output are in degrees.

    Returns:
        True anomaly. Units: *rad* or *deg*

    Raises:
        NegativeEccentricityError: If ``e < 0``.
        ParabolicOrbitError: If ``|e - 1|`` is below machine epsilon.

    Examples:
        ```python
        from orbitjax.orbits import anomaly_eccentric_to_true
        nu = anomaly_eccentric_to_true(0.3879, 3.0)
        ```
    """
    anm_ecc = jnp.asarray(anm_ecc, dtype=get_dtype())
    e = jnp.asarray(e, dtype=get_dtype())
    _check_not_parabolic(e, "anomaly_eccentric_to_true")

    E = to_radians(anm_ecc, use_degrees)
    elliptical, e_ell, H, e_hyp = _split_branches(E, e)
    nu = jnp.where(
        elliptical,
        _eccentric_to_true_elliptical(E, e_ell),
        _eccentric_to_true_hyperbolic(H, e_hyp),
    )
    return from_radians(nu, use_degrees)


# ──────────────────────────────────────────────
# Eccentric -> mean anomaly
# ──────────────────────────────────────────────


def anomaly_eccentric_to_mean_elliptical(
    anm_ecc: ArrayLike, e: ArrayLike, use_degrees: bool = False
) -> Array:
    """Convert eccentric anomaly to mean anomaly for an elliptical orbit.

    Applies Kepler's equation: ``M = E - e * sin(E)``.

    Args:
        anm_ecc: Eccentric anomaly. Units: *rad* or *deg*
        e: Eccentricity, ``0 <= e < 1``. Dimensionless.
        use_degrees: If ``True``, input and output are in degrees.

    Returns:
        Mean anomaly. Units: *rad* or *deg*

    Raises:
        NegativeEccentricityError: If ``e < 0``.
        InvalidEccentricityError: If ``e >= 1``.

    References:
        O. Montenbruck, and E. Gill, *Satellite Orbits: Models, Methods and
        Applications*, 2012. Eq. 2.65.
    """
    anm_ecc = jnp.asarray(anm_ecc, dtype=get_dtype())
    e = jnp.asarray(e, dtype=get_dtype())
    _check_elliptical(e, "anomaly_eccentric_to_mean_elliptical")

    E = to_radians(anm_ecc, use_degrees)
    return from_radians(_eccentric_to_mean_elliptical(E, e), use_degrees)


def anomaly_eccentric_to_mean_hyperbolic(
    anm_ecc: ArrayLike, e: ArrayLike, use_degrees: bool = False
) -> Array:
    """Convert hyperbolic eccentric anomaly to mean anomaly.

    Applies the hyperbolic Kepler equation: ``M = e * sinh(H) - H``.

    Args:
        anm_ecc: Hyperbolic eccentric anomaly. Units: *rad* or *deg*
        e: Eccentricity, ``e > 1``. Dimensionless.
        use_degrees: If ``True``, input and output are in degrees.

    Returns:
        Mean anomaly. Units: *rad* or *deg*

    Raises:
        InvalidEccentricityError: If ``e <= 1``.
    """
    anm_ecc = jnp.asarray(anm_ecc, dtype=get_dtype())
    e = jnp.asarray(e, dtype=get_dtype())
    _check_hyperbolic(e, "anomaly_eccentric_to_mean_hyperbolic")

    H = to_radians(anm_ecc, use_degrees)
    return from_radians(_eccentric_to_mean_hyperbolic(H, e), use_degrees)


def anomaly_eccentric_to_mean(
    anm_ecc: ArrayLike, e: ArrayLike, use_degrees: bool = False
) -> Array:
    """Convert (elliptical or hyperbolic) eccentric anomaly to mean anomaly.

    Args:
        anm_ecc: Eccentric anomaly. Units: *rad* or *deg*
        e: Eccentricity. Dimensionless.
        use_degrees: If ``True``, input and output are in degrees.

    Returns:
        Mean anomaly. Units: *rad* or *deg*

    Raises:
        NegativeEccentricityError: If ``e < 0``.
        ParabolicOrbitError: If ``|e - 1|`` is below machine epsilon.

    Examples:
        ```python
        from orbitjax.orbits import anomaly_eccentric_to_mean
        M = anomaly_eccentric_to_mean(90.0, 0.1, use_degrees=True)
        ```
    """
    anm_ecc = jnp.asarray(anm_ecc, dtype=get_dtype())
    e = jnp.asarray(e, dtype=get_dtype())
    _check_not_parabolic(e, "anomaly_eccentric_to_mean")

    E = to_radians(anm_ecc, use_degrees)
    M = jnp.where(
        e < 1.0,
        _eccentric_to_mean_elliptical(E, e),
        _eccentric_to_mean_hyperbolic(E, e),
    )
    return from_radians(M, use_degrees)


# ──────────────────────────────────────────────
# Kepler's equation
# ──────────────────────────────────────────────


def kepler_function_elliptical(anm_ecc: ArrayLike, e: ArrayLike, anm_mean: ArrayLike) -> Array:
    """Evaluate Kepler's function ``f(E) = E - e * sin(E) - M``.

    The root of this function in ``E`` is the eccentric anomaly matching
    the mean anomaly ``M``.  Angles are in radians.
    """
    dtype = get_dtype()
    return _kepler_function(
        jnp.asarray(anm_ecc, dtype=dtype),
        jnp.asarray(e, dtype=dtype),
        jnp.asarray(anm_mean, dtype=dtype),
    )


def kepler_function_derivative_elliptical(anm_ecc: ArrayLike, e: ArrayLike) -> Array:
    """Evaluate ``df/dE = 1 - e * cos(E)`` of Kepler's function."""
    dtype = get_dtype()
    return _kepler_function_derivative(jnp.asarray(anm_ecc, dtype=dtype), jnp.asarray(e, dtype=dtype))


# ──────────────────────────────────────────────
# Mean -> eccentric anomaly
# ──────────────────────────────────────────────


def anomaly_mean_to_eccentric_newton(
    anm_mean: ArrayLike,
    e: ArrayLike,
    tolerance: float | None = None,
    max_iterations: int = 100,
    use_degrees: bool = False,
) -> Array:
    """Convert mean anomaly to eccentric anomaly with Newton-Raphson iteration.

    The mean anomaly is first shifted into ``[0, 2pi)``.  The initial guess
    is ``M + e`` for ``M <= pi`` and ``M - e`` otherwise.  Iteration stops
    once successive iterates differ by less than *tolerance*, or by no more
    than a few ulps of ``E`` when *tolerance* is finer than the float
    spacing.

    Valid for ``0 <= e < 1 - 1e-11``; the solver is not reliable for
    near-parabolic orbits.  Array inputs are solved element-wise in a
    single loop.  Under ``jax.jit`` elements that fail to converge are
    returned as ``NaN`` instead of raising.

    Args:
        anm_mean: Mean anomaly, any value. Units: *rad* or *deg*
        e: Eccentricity. Dimensionless.
        tolerance: Stopping tolerance on the change in ``E`` [rad].  Defaults
            to :func:`~orbitjax.config.get_root_finding_tolerance`.
        max_iterations: Maximum number of Newton-Raphson steps.
        use_degrees: If ``True``, input and output are in degrees.

    Returns:
        Eccentric anomaly in ``[0, 2pi)`` (up to rounding). Units: *rad* or *deg*

    Raises:
        NegativeEccentricityError: If ``e < 0``.
        InvalidEccentricityError: If ``e >= 1 - 1e-11``.
        MaxIterationsExceededError: If the iteration has not converged after
            *max_iterations* steps.

    Examples:
        ```python
        from orbitjax.orbits import anomaly_mean_to_eccentric_newton
        E = anomaly_mean_to_eccentric_newton(60.0, 0.01671, use_degrees=True)
        ```
    """
    anm_mean = jnp.asarray(anm_mean, dtype=get_dtype())
    e = jnp.asarray(e, dtype=get_dtype())
    _check_elliptical(e, "anomaly_mean_to_eccentric_newton", upper=NEAR_PARABOLIC_LIMIT)

    if tolerance is None:
        tolerance = get_root_finding_tolerance()

    M = wrap_to_2pi(to_radians(anm_mean, use_degrees))
    E, iterations, converged = _newton_raphson_kepler(M, e, tolerance, max_iterations)

    all_converged = concrete_all(converged)
    if all_converged is None:
        return from_radians(jnp.where(converged, E, jnp.nan), use_degrees)

    iterations = int(iterations)
    if not all_converged:
        logger.error(
            "Newton-Raphson Kepler solver did not converge in %d iterations (M=%s, e=%s)",
            iterations,
            M,
            e,
        )
        raise MaxIterationsExceededError(
            "Maximum iterations for Newton-Raphson root-finding exceeded "
            f"({max_iterations}).",
            iterations,
        )

    logger.debug("Newton-Raphson Kepler solver converged in %d iterations", iterations)
    return from_radians(E, use_degrees)


def anomaly_mean_to_eccentric_bisection(
    anm_mean: ArrayLike,
    e: ArrayLike,
    iterations: int = 100,
    use_degrees: bool = False,
) -> Array:
    """Convert mean anomaly to eccentric anomaly by bisection.

    Runs a fixed number of interval halvings, so it always terminates and
    never raises once the eccentricity is accepted.  Each halving gains
    about one bit, against the quadratic convergence of
    :func:`anomaly_mean_to_eccentric_newton`; 100 iterations exhaust
    ``float64`` precision.

    Args:
        anm_mean: Mean anomaly, any value. Units: *rad* or *deg*
        e: Eccentricity, ``0 <= e < 1``. Dimensionless.
        iterations: Number of halvings.
        use_degrees: If ``True``, input and output are in degrees.

    Returns:
        Eccentric anomaly in ``[0, 2pi]``. Units: *rad* or *deg*

    Raises:
        NegativeEccentricityError: If ``e < 0``.
        InvalidEccentricityError: If ``e >= 1``.
    """
    anm_mean = jnp.asarray(anm_mean, dtype=get_dtype())
    e = jnp.asarray(e, dtype=get_dtype())
    _check_elliptical(e, "anomaly_mean_to_eccentric_bisection")

    M = wrap_to_2pi(to_radians(anm_mean, use_degrees))
    return from_radians(_bisection_kepler(M, e, iterations), use_degrees)


def anomaly_mean_to_eccentric(
    anm_mean: ArrayLike,
    e: ArrayLike,
    use_degrees: bool = False,
    method: str = "newton",
    tolerance: float | None = None,
    max_iterations: int = 100,
) -> Array:
    """Convert mean anomaly to eccentric anomaly for an elliptical orbit.

    Args:
        anm_mean: Mean anomaly. Units: *rad* or *deg*
        e: Eccentricity. Dimensionless.
        use_degrees: If ``True``, input and output are in degrees.
        method: ``"newton"`` (default) or ``"bisection"``.
        tolerance: Newton-Raphson stopping tolerance [rad].  Ignored by
            bisection.
        max_iterations: Newton-Raphson iteration cap, or the fixed number of
            halvings for bisection.

    Returns:
        Eccentric anomaly. Units: *rad* or *deg*

    Raises:
        ValueError: If *method* is unknown.
    """
    if method == "newton":
        return anomaly_mean_to_eccentric_newton(
            anm_mean, e, tolerance=tolerance, max_iterations=max_iterations, use_degrees=use_degrees
        )
    if method == "bisection":
        return anomaly_mean_to_eccentric_bisection(
            anm_mean, e, iterations=max_iterations, use_degrees=use_degrees
        )
    raise ValueError(f"Unknown Kepler solver method {method!r}. Must be one of: {_SOLVER_METHODS}")


# ──────────────────────────────────────────────
# Composite conversions
# ──────────────────────────────────────────────


def anomaly_true_to_mean(anm_true: ArrayLike, e: ArrayLike, use_degrees: bool = False) -> Array:
    """Convert true anomaly to mean anomaly.

    Composite conversion: true -> eccentric -> mean, for elliptical and
    hyperbolic orbits.

    Args:
        anm_true: True anomaly. Units: *rad* or *deg*
        e: Eccentricity. Dimensionless.
        use_degrees: If ``True``, input and output are in degrees.

    Returns:
        Mean anomaly. Units: *rad* or *deg*
    """
    return anomaly_eccentric_to_mean(
        anomaly_true_to_eccentric(anm_true, e, use_degrees),
        e,
        use_degrees,
    )


def anomaly_mean_to_true(
    anm_mean: ArrayLike,
    e: ArrayLike,
    use_degrees: bool = False,
    method: str = "newton",
) -> Array:
    """Convert mean anomaly to true anomaly for an elliptical orbit.

    Composite conversion: mean -> eccentric -> true.

    Args:
        anm_mean: Mean anomaly. Units: *rad* or *deg*
        e: Eccentricity. Dimensionless.
        use_degrees: If ``True``, input and output are in degrees.
        method: Kepler solver, ``"newton"`` or ``"bisection"``.

    Returns:
        True anomaly. Units: *rad* or *deg*
    """
    return anomaly_eccentric_to_true_elliptical(
        anomaly_mean_to_eccentric(anm_mean, e, use_degrees, method=method),
        e,
        use_degrees,
    )
