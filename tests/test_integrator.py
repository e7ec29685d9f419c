import numpy as np
import pytest
from chain_sim.core.integrators import semi_implicit_euler_step
from chain_sim.core.forces import apply_gravity, clear_accelerations


def test_velocity_updated_before_position():
    """Semi-implicit Euler moves with the new velocity, not the old one."""
    x = np.array([[0.0, 0.0]])
    v = np.array([[1.0, 0.0]])
    a = np.array([[0.0, -10.0]])

    semi_implicit_euler_step(x, v, a, 0.1)

    np.testing.assert_allclose(v, [[1.0, -1.0]])
    # explicit Euler would leave y at 0
    np.testing.assert_allclose(x, [[0.1, -0.1]])
    np.testing.assert_array_equal(a, [[0.0, -10.0]])


def test_freefall_matches_discrete_solution():
    """
    Constant g over k steps of h:
      v_k = g k h
      y_k = g h² k(k+1)/2
    """
    g, h, k = -10.0, 0.01, 100
    x = np.zeros((3, 2))
    v = np.zeros((3, 2))
    a = np.zeros((3, 2))
    apply_gravity(a, np.array([0.0, g]))

    for _ in range(k):
        semi_implicit_euler_step(x, v, a, h)

    print("freefall y", x[0, 1], "exact", 0.5 * g * (k * h) ** 2)
    np.testing.assert_allclose(v[:, 1], g * k * h)
    np.testing.assert_allclose(x[:, 1], g * h * h * k * (k + 1) / 2)
    assert x[0, 1] == pytest.approx(-5.05)
    np.testing.assert_array_equal(x[:, 0], 0.0)


def test_gravity_accumulates_until_cleared():
    a = np.zeros((2, 2))
    g = np.array([0.0, -10.0])
    apply_gravity(a, g)
    apply_gravity(a, g)
    np.testing.assert_array_equal(a, [[0.0, -20.0], [0.0, -20.0]])

    clear_accelerations(a)
    assert not a.any()
