import jax.numpy as jnp
import pytest

from orbitjax.config import set_dtype


@pytest.fixture(autouse=True)
def _float64():
    """Run every test in float64.

    The reference values below are double-precision; test_config.py
    overrides this with its own fixture to exercise the float32 default.
    """
    set_dtype(jnp.float64)
