"""
orbitjax is a small two-body astrodynamics library implemented in JAX: orbital element
conversions, anomaly conversions and Kepler's equation, and simple force models.
"""

from .constants import (
    DEG2RAD,
    RAD2DEG,
    JULIAN_DAY,
    JULIAN_YEAR_IN_DAYS,
    JULIAN_YEAR,
    GREGORIAN_EPOCH_JD,
    GRAVITATIONAL_CONSTANT,
    C_LIGHT,
    AU,
    R_EARTH,
    GM_EARTH,
    J2_EARTH,
    P_SUN,
)

from .config import (
    set_dtype,
    get_dtype,
    get_machine_epsilon,
    get_default_tolerance,
    get_root_finding_tolerance,
)

from .exceptions import (
    OrbitjaxError,
    InvalidStateError,
    NegativeEccentricityError,
    InvalidEccentricityError,
    ParabolicOrbitError,
    MaxIterationsExceededError,
)

from .indices import CartesianIndex, KeplerianIndex

from .coordinates import (
    state_cartesian_to_keplerian,
    state_keplerian_to_cartesian,
)

from .orbits import (
    anomaly_true_to_eccentric_elliptical,
    anomaly_true_to_eccentric_hyperbolic,
    anomaly_true_to_eccentric,
    anomaly_eccentric_to_true_elliptical,
    anomaly_eccentric_to_true_hyperbolic,
    anomaly_eccentric_to_true,
    anomaly_eccentric_to_mean_elliptical,
    anomaly_eccentric_to_mean_hyperbolic,
    anomaly_eccentric_to_mean,
    anomaly_true_to_mean,
    anomaly_mean_to_true,
    kepler_function_elliptical,
    kepler_function_derivative_elliptical,
    anomaly_mean_to_eccentric_newton,
    anomaly_mean_to_eccentric_bisection,
    anomaly_mean_to_eccentric,
    mean_motion,
    orbital_period,
    circular_velocity,
)

from .orbit_dynamics import (
    accel_central_body,
    accel_j2,
    accel_drag,
    accel_srp,
)

from .relative_motion import (
    cw_derivative,
    state_cw_propagate,
)

__all__ = [
    # Constants
    "DEG2RAD",
    "RAD2DEG",
    "JULIAN_DAY",
    "JULIAN_YEAR_IN_DAYS",
    "JULIAN_YEAR",
    "GREGORIAN_EPOCH_JD",
    "GRAVITATIONAL_CONSTANT",
    "C_LIGHT",
    "AU",
    "R_EARTH",
    "GM_EARTH",
    "J2_EARTH",
    "P_SUN",
    # Config
    "set_dtype",
    "get_dtype",
    "get_machine_epsilon",
    "get_default_tolerance",
    "get_root_finding_tolerance",
    # Exceptions
    "OrbitjaxError",
    "InvalidStateError",
    "NegativeEccentricityError",
    "InvalidEccentricityError",
    "ParabolicOrbitError",
    "MaxIterationsExceededError",
    # State vector indices
    "CartesianIndex",
    "KeplerianIndex",
    # Element conversions
    "state_cartesian_to_keplerian",
    "state_keplerian_to_cartesian",
    # Anomalies and Kepler's equation
    "anomaly_true_to_eccentric_elliptical",
    "anomaly_true_to_eccentric_hyperbolic",
    "anomaly_true_to_eccentric",
    "anomaly_eccentric_to_true_elliptical",
    "anomaly_eccentric_to_true_hyperbolic",
    "anomaly_eccentric_to_true",
    "anomaly_eccentric_to_mean_elliptical",
    "anomaly_eccentric_to_mean_hyperbolic",
    "anomaly_eccentric_to_mean",
    "anomaly_true_to_mean",
    "anomaly_mean_to_true",
    "kepler_function_elliptical",
    "kepler_function_derivative_elliptical",
    "anomaly_mean_to_eccentric_newton",
    "anomaly_mean_to_eccentric_bisection",
    "anomaly_mean_to_eccentric",
    # Two-body properties
    "mean_motion",
    "orbital_period",
    "circular_velocity",
    # Force models
    "accel_central_body",
    "accel_j2",
    "accel_drag",
    "accel_srp",
    # Relative motion
    "cw_derivative",
    "state_cw_propagate",
]
