import numpy as np
import pytest

from orbits.bodies import Body, BodyRegistry
from orbits.integrators import (
    INTEGRATORS,
    euler_step_arrays,
    get_integrator,
    hybrid_step_arrays,
    integrate,
    semi_implicit_euler_step_arrays,
)

POS = np.array([[0.0, 0.0, 0.0]])
VEL = np.array([[1.0, 0.0, 0.0]])
ACC = np.array([[0.0, 2.0, 0.0]])


def test_hybrid_step_uses_new_velocity_and_half_acceleration_term():
    pos, vel = hybrid_step_arrays(POS, VEL, ACC, 0.5)
    assert np.allclose(vel, [[1.0, 1.0, 0.0]])
    assert np.allclose(pos, [[0.5, 0.75, 0.0]])


def test_semi_implicit_euler_step():
    pos, vel = semi_implicit_euler_step_arrays(POS, VEL, ACC, 0.5)
    assert np.allclose(vel, [[1.0, 1.0, 0.0]])
    assert np.allclose(pos, [[0.5, 0.5, 0.0]])


def test_euler_step():
    pos, vel = euler_step_arrays(POS, VEL, ACC, 0.5)
    assert np.allclose(vel, [[1.0, 1.0, 0.0]])
    assert np.allclose(pos, [[0.5, 0.0, 0.0]])


def test_zero_dt_leaves_state_unchanged():
    pos, vel = hybrid_step_arrays(POS, VEL, ACC, 0.0)
    assert np.array_equal(pos, POS)
    assert np.array_equal(vel, VEL)


def test_integrate_moves_every_body_from_its_own_acceleration():
    a = Body(1.0, [0, 0, 0], [0, 0, 0], name="A")
    b = Body(1.0, [5, 0, 0], [0, 1, 0], name="B")
    a.set_acceleration([1.0, 0.0, 0.0])
    b.set_acceleration([0.0, 0.0, -2.0])
    reg = BodyRegistry([a, b])

    integrate(reg, 2.0)

    assert np.allclose(a.vel, [2.0, 0.0, 0.0])
    assert np.allclose(a.pos, [4.0 + 2.0, 0.0, 0.0])
    assert np.allclose(b.vel, [0.0, 1.0, -4.0])
    assert np.allclose(b.pos, [5.0, 2.0, -8.0 - 4.0])


def test_unknown_integrator():
    assert set(INTEGRATORS) == {"Hybrid", "SemiImplicitEuler", "Euler"}
    with pytest.raises(KeyError):
        get_integrator("RK4")


def test_integrate_empty_registry_is_noop():
    integrate(BodyRegistry(), 1.0)
