"""Slot indices of the Cartesian and Keplerian state vectors.

Cartesian states are ordered ``[x, y, z, vx, vy, vz]``.  Keplerian states
are ordered ``[a, e, i, argp, raan, nu]``; slot 0 holds the semi-latus
rectum instead of the semi-major axis for parabolic orbits, and slot 5
holds the mean anomaly wherever a mean-anomaly element set is used.
"""

from __future__ import annotations

import enum


class CartesianIndex(enum.IntEnum):
    """Indices into a ``[x, y, z, vx, vy, vz]`` state vector."""

    X_POSITION = 0
    Y_POSITION = 1
    Z_POSITION = 2
    X_VELOCITY = 3
    Y_VELOCITY = 4
    Z_VELOCITY = 5


class KeplerianIndex(enum.IntEnum):
    """Indices into a ``[a, e, i, argp, raan, nu]`` element vector.

    Attributes:
        SEMI_MAJOR_AXIS: Semi-major axis (index 0).
        SEMI_LATUS_RECTUM: Alias of index 0 for parabolic orbits.
        ECCENTRICITY: Eccentricity (index 1).
        INCLINATION: Inclination (index 2).
        ARGUMENT_OF_PERIAPSIS: Argument of periapsis (index 3).
        LONGITUDE_OF_ASCENDING_NODE: Longitude of the ascending node (index 4).
        TRUE_ANOMALY: True anomaly (index 5).
        MEAN_ANOMALY: Alias of index 5 for mean-anomaly element sets.
    """

    SEMI_MAJOR_AXIS = 0
    SEMI_LATUS_RECTUM = 0
    ECCENTRICITY = 1
    INCLINATION = 2
    ARGUMENT_OF_PERIAPSIS = 3
    LONGITUDE_OF_ASCENDING_NODE = 4
    TRUE_ANOMALY = 5
    MEAN_ANOMALY = 5
