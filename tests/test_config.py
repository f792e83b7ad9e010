"""Tests for the orbitjax.config module."""

import jax
import jax.numpy as jnp
import pytest

from orbitjax.config import (
    get_default_tolerance,
    get_dtype,
    get_machine_epsilon,
    get_root_finding_tolerance,
    set_dtype,
)
from orbitjax.coordinates import state_keplerian_to_cartesian
from orbitjax.orbits import anomaly_mean_to_eccentric, orbital_period

pytestmark = pytest.mark.order("first")


@pytest.fixture(autouse=True)
def reset_dtype():
    """Reset dtype to float32 before and after each test."""
    set_dtype(jnp.float32)
    yield
    set_dtype(jnp.float32)


class TestGetSetDtype:
    def test_default_dtype(self):
        assert get_dtype() == jnp.float32

    def test_set_float64(self):
        set_dtype(jnp.float64)
        assert get_dtype() == jnp.float64

    @pytest.mark.parametrize("dtype", [jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64])
    def test_supported_dtypes(self, dtype):
        set_dtype(dtype)
        assert get_dtype() is dtype

    @pytest.mark.parametrize("dtype", [jnp.int32, "float32", jnp.complex64, None])
    def test_unsupported_dtype(self, dtype):
        with pytest.raises(ValueError, match="Unsupported dtype"):
            set_dtype(dtype)
        assert get_dtype() == jnp.float32

    def test_error_lists_supported_dtypes(self):
        with pytest.raises(ValueError, match="jnp.float64"):
            set_dtype(jnp.int8)

    def test_float64_enables_x64(self):
        set_dtype(jnp.float64)
        assert jax.config.jax_enable_x64 is True


class TestTolerances:
    """Default tolerances follow the machine epsilon of the configured dtype."""

    def test_machine_epsilon_float32(self):
        assert get_machine_epsilon() == pytest.approx(1.1920929e-07)

    def test_machine_epsilon_float64(self):
        set_dtype(jnp.float64)
        assert get_machine_epsilon() == pytest.approx(2.220446049250313e-16)

    def test_default_tolerance_is_ten_eps(self):
        set_dtype(jnp.float64)
        assert get_default_tolerance() == pytest.approx(10.0 * 2.220446049250313e-16)

    def test_root_finding_tolerance_is_milli_eps(self):
        set_dtype(jnp.float64)
        assert get_root_finding_tolerance() == pytest.approx(1e-3 * 2.220446049250313e-16)

    def test_tolerances_tighten_with_float64(self):
        tol_32 = get_default_tolerance()
        set_dtype(jnp.float64)
        assert get_default_tolerance() < tol_32


class TestDtypeSwitchingOutputs:
    """Verify that output dtypes match the configured dtype."""

    def test_orbital_period_dtype_float32(self):
        T = orbital_period(7000e3)
        assert T.dtype == jnp.float32

    def test_orbital_period_dtype_float64(self):
        set_dtype(jnp.float64)
        T = orbital_period(7000e3)
        assert T.dtype == jnp.float64

    def test_keplerian_to_cartesian_dtype_float64(self):
        set_dtype(jnp.float64)
        oe = jnp.array([7000e3, 0.01, 0.9, 0.5, 0.3, 0.1])
        state = state_keplerian_to_cartesian(oe)
        assert state.dtype == jnp.float64

    def test_newton_solver_converges_float32(self):
        """The Newton solver stops at float32 spacing instead of running out of iterations."""
        E = anomaly_mean_to_eccentric(1.0, 0.3)
        assert E.dtype == jnp.float32
        assert jnp.abs(E - 0.3 * jnp.sin(E) - 1.0) < 1e-6
