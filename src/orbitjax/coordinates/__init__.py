"""Coordinate transformations between Cartesian states and orbital elements.

Provides bidirectional conversion between 6-element Cartesian state
vectors and Keplerian orbital elements, with ``NaN`` flags for the angles
left undefined by circular and equatorial orbits.
"""

from .keplerian import state_cartesian_to_keplerian, state_keplerian_to_cartesian

__all__ = [
    "state_cartesian_to_keplerian",
    "state_keplerian_to_cartesian",
]
