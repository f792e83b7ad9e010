import jax.numpy as jnp
import pytest

import orbitjax as oj
from orbitjax import CartesianIndex, KeplerianIndex
from orbitjax.constants import R_EARTH


class TestIndices:
    def test_cartesian_order(self):
        assert [int(i) for i in CartesianIndex] == [0, 1, 2, 3, 4, 5]

    def test_keplerian_aliases(self):
        assert KeplerianIndex.SEMI_LATUS_RECTUM is KeplerianIndex.SEMI_MAJOR_AXIS
        assert KeplerianIndex.MEAN_ANOMALY is KeplerianIndex.TRUE_ANOMALY
        assert len(KeplerianIndex) == 6

    def test_index_converted_state(self):
        x_oe = jnp.array([R_EARTH + 500e3, 0.01, 45.0, 30.0, 60.0, 90.0])
        x_cart = oj.state_keplerian_to_cartesian(x_oe, use_degrees=True)
        x_back = oj.state_cartesian_to_keplerian(x_cart, use_degrees=True)

        assert float(x_back[KeplerianIndex.INCLINATION]) == pytest.approx(45.0, rel=1e-10)
        assert float(x_back[KeplerianIndex.LONGITUDE_OF_ASCENDING_NODE]) == pytest.approx(60.0, rel=1e-10)
        assert float(x_cart[CartesianIndex.Z_VELOCITY]) != 0.0


class TestExceptions:
    @pytest.mark.parametrize(
        "exc, builtin",
        [
            (oj.InvalidStateError, ValueError),
            (oj.InvalidEccentricityError, ValueError),
            (oj.NegativeEccentricityError, ValueError),
            (oj.ParabolicOrbitError, NotImplementedError),
            (oj.MaxIterationsExceededError, RuntimeError),
        ],
    )
    def test_hierarchy(self, exc, builtin):
        assert issubclass(exc, oj.OrbitjaxError)
        assert issubclass(exc, builtin)

    def test_negative_is_invalid_eccentricity(self):
        assert issubclass(oj.NegativeEccentricityError, oj.InvalidEccentricityError)

    def test_max_iterations_carries_count(self):
        err = oj.MaxIterationsExceededError("no convergence", 42)
        assert err.iterations == 42
        assert str(err) == "no convergence"
