"""Relative motion about a circular target orbit.

Provides the Clohessy-Wiltshire state derivative and its closed-form
solution with constant thrust, in the target's LVLH frame.
"""

from .clohessy_wiltshire import cw_derivative, state_cw_propagate

__all__ = [
    "cw_derivative",
    "state_cw_propagate",
]
