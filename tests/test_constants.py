import numpy as np
import pytest

from orbitjax import constants


class TestConstants:
    def test_original_definitions(self):
        assert constants.GRAVITATIONAL_CONSTANT == 6.67259e-11
        assert constants.JULIAN_DAY == 86400.0
        assert constants.JULIAN_YEAR_IN_DAYS == 365.25
        assert constants.JULIAN_YEAR == 3.15576e7

    def test_julian_year_consistent(self):
        assert constants.JULIAN_YEAR == pytest.approx(constants.JULIAN_YEAR_IN_DAYS * constants.JULIAN_DAY)

    def test_angle_factors_are_inverse(self):
        assert constants.DEG2RAD * constants.RAD2DEG == pytest.approx(1.0, rel=1e-15)
        assert constants.DEG2RAD * 180.0 == pytest.approx(np.pi, rel=1e-15)

    def test_earth_values(self):
        assert constants.GM_EARTH == 3.986004415e14
        assert constants.R_EARTH == pytest.approx(6378136.3)
        assert 1.08e-3 < constants.J2_EARTH < 1.09e-3
