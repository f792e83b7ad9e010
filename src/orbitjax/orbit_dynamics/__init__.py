"""Orbit dynamics force models for perturbation modelling.

Provides gravitational, atmospheric, and radiation force models:

- **Gravity**: Central-body point-mass and J2 zonal accelerations
- **Drag**: Atmospheric drag acceleration
- **SRP**: Solar radiation pressure (cannonball model)
"""

from .drag import accel_drag
from .gravity import accel_central_body, accel_j2
from .srp import accel_srp

__all__ = [
    # Gravity
    "accel_central_body",
    "accel_j2",
    # Drag
    "accel_drag",
    # SRP
    "accel_srp",
]
