"""Per-frame integration schemes.

All schemes consume the acceleration computed for the current positions and
return new positions and velocities for every body at once.

``Hybrid`` is the default and reproduces the reference trajectories: the
velocity is kicked first and the position update then uses the new velocity
*plus* a second-order ``0.5 * a * dt**2`` term.  That term partly counts the
same acceleration twice, so the scheme gains energy at a rate that grows with
``dt`` (and therefore with the timewarp factor).  The two Euler variants are
available for comparison but are never chosen implicitly.
"""

import numpy as np


def hybrid_step_arrays(positions, velocities, accelerations, dt):
    """Kick velocity, then drift with the new velocity and a half-acceleration term."""
    vel_new = velocities + accelerations * dt
    pos_new = positions + vel_new * dt + 0.5 * accelerations * dt * dt
    return pos_new, vel_new


def semi_implicit_euler_step_arrays(positions, velocities, accelerations, dt):
    """Symplectic Euler: drift with the already kicked velocity."""
    vel_new = velocities + accelerations * dt
    pos_new = positions + vel_new * dt
    return pos_new, vel_new


def euler_step_arrays(positions, velocities, accelerations, dt):
    """Explicit Euler: drift with the velocity from the start of the step."""
    vel_new = velocities + accelerations * dt
    pos_new = positions + velocities * dt
    return pos_new, vel_new


INTEGRATORS = {
    "Hybrid": hybrid_step_arrays,
    "SemiImplicitEuler": semi_implicit_euler_step_arrays,
    "Euler": euler_step_arrays,
}


def get_integrator(name):
    if name not in INTEGRATORS:
        raise KeyError(f"Integrator '{name}' not found; choose from {sorted(INTEGRATORS)}")
    return INTEGRATORS[name]


def integrate(registry, dt, integrator="Hybrid"):
    """Advance every body in ``registry`` by ``dt`` seconds.

    The whole registry is read into arrays before anything is written back,
    so no body sees another's partially updated state.
    """
    if len(registry) == 0:
        return
    step = get_integrator(integrator)
    new_pos, new_vel = step(
        registry.positions(),
        registry.velocities(),
        registry.accelerations(),
        float(dt),
    )
    for body, p, v in zip(registry, new_pos, new_vel):
        body.update_physics_state(p, v)
