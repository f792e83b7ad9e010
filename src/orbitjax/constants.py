"""
Mathematical, time and physical constants used by the orbitjax conversions and force models.

All values are plain Python floats in SI units, so they can be used both as
default arguments and inside traced JAX code.
"""

import math

# ── Angles ──────────────────────────────────────

#: Degrees to radians, ``pi / 180``. Units: *rad/deg*
DEG2RAD = math.pi / 180.0

#: Radians to degrees, ``180 / pi``. Units: *deg/rad*
RAD2DEG = 180.0 / math.pi

# ── Time ────────────────────────────────────────

#: Seconds in a Julian day. Units: *s*
JULIAN_DAY = 86400.0

#: Days in a Julian year. Units: *days*
JULIAN_YEAR_IN_DAYS = 365.25

#: Seconds in a Julian year (``365.25 * 86400``). Units: *s*
JULIAN_YEAR = 3.15576e7

#: Julian Date of 0001-01-01 00:00:00 on the proleptic Gregorian calendar. Units: *days*
GREGORIAN_EPOCH_JD = 1721425.5

# ── Physics ─────────────────────────────────────

#: Newtonian constant of gravitation, 1986 CODATA value (Cohen & Taylor, 1987).
#: Units: *m^3 kg^-1 s^-2*
GRAVITATIONAL_CONSTANT = 6.67259e-11

#: Speed of light in vacuum (exact by definition of the metre). Units: *m/s*
C_LIGHT = 299792458.0

#: Astronomical unit, IAU 2012 Resolution B2. Units: *m*
AU = 1.495978707e11

# ── Earth ───────────────────────────────────────

#: Equatorial radius of the Earth, GGM05S gravity model. Units: *m*
R_EARTH = 6.3781363e6

#: Gravitational parameter of the Earth, GGM05S gravity model. Units: *m^3/s^2*
GM_EARTH = 3.986004415e14

#: Unnormalized second zonal harmonic of the Earth, GGM05S gravity model.
#: Dimensionless.
J2_EARTH = 1.0826358191967e-3

# ── Sun ─────────────────────────────────────────

#: Solar radiation pressure at 1 AU for a solar flux of about 1367 W/m^2
#: (Montenbruck & Gill, *Satellite Orbits*, 2012). Units: *N/m^2*
P_SUN = 4.56e-6
