"""Keplerian orbital mechanics functions.

This sub-module provides functions for:

- **Anomaly conversions**: converting between mean, eccentric, and true
  anomalies for elliptical and hyperbolic orbits.
- **Kepler's equation**: the Kepler function and its derivative, solved
  by Newton-Raphson iteration or bisection.
- **Two-body properties**: mean motion, orbital period and circular
  velocity.
"""

from .anomaly import (
    NEAR_PARABOLIC_LIMIT,
    anomaly_eccentric_to_mean,
    anomaly_eccentric_to_mean_elliptical,
    anomaly_eccentric_to_mean_hyperbolic,
    anomaly_eccentric_to_true,
    anomaly_eccentric_to_true_elliptical,
    anomaly_eccentric_to_true_hyperbolic,
    anomaly_mean_to_eccentric,
    anomaly_mean_to_eccentric_bisection,
    anomaly_mean_to_eccentric_newton,
    anomaly_mean_to_true,
    anomaly_true_to_eccentric,
    anomaly_true_to_eccentric_elliptical,
    anomaly_true_to_eccentric_hyperbolic,
    anomaly_true_to_mean,
    kepler_function_derivative_elliptical,
    kepler_function_elliptical,
)
from .two_body import circular_velocity, mean_motion, orbital_period

__all__ = [
    "NEAR_PARABOLIC_LIMIT",
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
    "mean_motion",
    "orbital_period",
    "circular_velocity",
]
