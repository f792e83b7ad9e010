"""Exception hierarchy for orbitjax.

Every error raised by the package derives from :class:`OrbitjaxError` and
from the builtin exception that best describes it, so callers can catch
either the specific class, the package base class, or the builtin
(``ValueError`` for bad arguments, ``NotImplementedError`` for parabolic
anomalies, ``RuntimeError`` for solver failure).

Degenerate orbit geometry (circular or equatorial orbits) is *not* an
error: the element conversions return ``NaN`` for the undefined angles.
"""

from __future__ import annotations


class OrbitjaxError(Exception):
    """Base class for all orbitjax errors."""


class InvalidStateError(OrbitjaxError, ValueError):
    """A state vector or scalar argument has the wrong shape or value."""


class InvalidEccentricityError(OrbitjaxError, ValueError):
    """The eccentricity lies outside the range of the requested conversion.

    Raised by the elliptical-only (``0 <= e < 1``) and hyperbolic-only
    (``e > 1``) functions.
    """


class NegativeEccentricityError(InvalidEccentricityError):
    """An eccentricity-dependent conversion received ``e < 0``."""


class ParabolicOrbitError(OrbitjaxError, NotImplementedError):
    """Anomaly conversions for parabolic orbits (``e == 1``) are not supported."""


class MaxIterationsExceededError(OrbitjaxError, RuntimeError):
    """The Newton-Raphson Kepler solver did not converge within its iteration cap."""

    def __init__(self, message: str, iterations: int):
        super().__init__(message)
        self.iterations = iterations
