import jax
import jax.numpy as jnp
import numpy as np
import pytest

from orbitjax.constants import GM_EARTH, J2_EARTH, R_EARTH
from orbitjax.orbit_dynamics import accel_central_body, accel_drag, accel_j2, accel_srp

_RTOL = 1e-12

# ──────────────────────────────────────────────
# Gravity
# ──────────────────────────────────────────────


class TestCentralBody:
    def test_reference(self):
        a = accel_central_body(jnp.array([4.2164e4, 0.0, 0.0]), 3.986005e5)
        np.testing.assert_allclose(a, [-2.242096133923724e-4, 0.0, 0.0], rtol=_RTOL)

    def test_magnitude_inverse_square(self):
        r = jnp.array([R_EARTH, 1000e3, -2000e3])
        a = accel_central_body(r)
        r_mag = float(jnp.linalg.norm(r))
        assert float(jnp.linalg.norm(a)) == pytest.approx(GM_EARTH / r_mag**2, rel=_RTOL)

    def test_points_toward_origin(self):
        r = jnp.array([3000e3, -5000e3, 2000e3])
        a = accel_central_body(r)
        np.testing.assert_allclose(a / jnp.linalg.norm(a), -r / jnp.linalg.norm(r), rtol=_RTOL)

    def test_uses_position_of_full_state(self):
        x = jnp.array([R_EARTH, 0.0, 0.0, 0.0, 7500.0, 0.0])
        assert jnp.array_equal(accel_central_body(x), accel_central_body(x[:3]))

    def test_gradient_of_potential(self):
        """Central-body acceleration is the gradient of gm / |r|."""
        r = jnp.array([7000e3, 100e3, -300e3])
        grad = jax.grad(lambda p: GM_EARTH / jnp.linalg.norm(p))(r)
        np.testing.assert_allclose(accel_central_body(r), grad, rtol=_RTOL)


class TestJ2:
    def test_mercury_reference(self):
        gm = 2.2032e13
        r_eq = 2439e3
        r = jnp.array([1513.3e3, -7412.67e3, 3012.1e3])

        a = accel_central_body(r, gm) + accel_j2(r, gm, r_eq, 6e-5)

        expected = [-6.174568462599339e-02, 3.024518496375884e-01, -1.229017246366501e-01]
        np.testing.assert_allclose(a, expected, rtol=_RTOL)

    def test_zero_j2(self):
        r = jnp.array([7000e3, 0.0, 1000e3])
        assert jnp.allclose(accel_j2(r, j2=0.0), 0.0)

    def test_equatorial_plane(self):
        """In the equatorial plane J2 adds a radial pull of 1.5 * J2 * gm * R^2 / r^4."""
        r_mag = R_EARTH + 500e3
        a = accel_j2(jnp.array([r_mag, 0.0, 0.0]))
        expected = -1.5 * J2_EARTH * GM_EARTH * R_EARTH**2 / r_mag**4
        assert float(a[0]) == pytest.approx(expected, rel=_RTOL)
        assert float(a[1]) == 0.0
        assert float(a[2]) == 0.0

    def test_small_relative_to_central_body(self):
        r = jnp.array([R_EARTH + 400e3, 0.0, 500e3])
        ratio = jnp.linalg.norm(accel_j2(r)) / jnp.linalg.norm(accel_central_body(r))
        assert 1e-4 < float(ratio) < 1e-2

    def test_jit(self):
        r = jnp.array([1513.3e3, -7412.67e3, 3012.1e3])
        np.testing.assert_allclose(jax.jit(accel_j2)(r), accel_j2(r), rtol=_RTOL)


# ──────────────────────────────────────────────
# Drag
# ──────────────────────────────────────────────


class TestDrag:
    def test_reference(self):
        a = accel_drag(jnp.array([7000.0, 0.0, 10.0]), 2e-11, 500.0, 5.0, 2.2)
        expected = [-1.078001099999e-5, 0.0, -1.54000157143e-8]
        np.testing.assert_allclose(a, expected, rtol=1e-10)

    def test_opposes_velocity(self):
        v = jnp.array([-1200.0, 7300.0, 250.0])
        a = accel_drag(v, 1e-12, 100.0, 2.0, 2.0)
        assert float(jnp.dot(a, v)) < 0.0
        assert jnp.allclose(jnp.cross(a, v), 0.0, atol=1e-15)

    def test_uses_velocity_of_full_state(self):
        x = jnp.array([R_EARTH, 0.0, 0.0, 7000.0, 0.0, 10.0])
        np.testing.assert_array_equal(
            accel_drag(x, 2e-11, 500.0, 5.0, 2.2),
            accel_drag(x[3:], 2e-11, 500.0, 5.0, 2.2),
        )

    def test_zero_velocity(self):
        assert jnp.allclose(accel_drag(jnp.zeros(3), 1e-12, 100.0, 1.0, 2.2), 0.0)


# ──────────────────────────────────────────────
# Solar radiation pressure
# ──────────────────────────────────────────────


class TestSRP:
    def test_reference(self):
        a = accel_srp(jnp.array([1.0, 0.0, 0.0]), 4.56e-6, 1.3, 2.0, 4.0)
        np.testing.assert_allclose(a, [-2.964e-6, 0.0, 0.0], rtol=_RTOL)

    def test_direction_is_normalized(self):
        a_unit = accel_srp(jnp.array([0.0, 1.0, 0.0]), cr=1.5, area=10.0, mass=1000.0)
        a_scaled = accel_srp(jnp.array([0.0, 1.5e11, 0.0]), cr=1.5, area=10.0, mass=1000.0)
        np.testing.assert_allclose(a_unit, a_scaled, rtol=_RTOL)

    def test_points_away_from_source(self):
        u = jnp.array([1.0, 2.0, -2.0])
        a = accel_srp(u)
        assert float(jnp.dot(a, u)) < 0.0
