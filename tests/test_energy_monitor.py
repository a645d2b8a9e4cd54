import math

import numpy as np
import pygame

from orbits import constants as C
from orbits.analysis import EnergyMonitor, calculate_orbital_elements, system_energy
from orbits.bodies import Body
from orbits.presets import circular_velocity


def _pair():
    return [Body(1.0, [0.0, 0.0], [0.0, 0.0], name="A"), Body(1.0, [1.0, 0.0], [0.0, 0.0], name="B")]


def test_system_energy_two_bodies():
    bodies = [Body(2.0, [0, 0, 0], [1, 0, 0]), Body(3.0, [4, 0, 0], [0, 2, 0])]
    ke, pe, total = system_energy(bodies, g_constant=1.0)
    assert math.isclose(ke, 0.5 * 2.0 * 1.0 + 0.5 * 3.0 * 4.0)
    assert math.isclose(pe, -2.0 * 3.0 / 4.0)
    assert math.isclose(total, ke + pe)


def test_system_energy_clamps_coincident_bodies():
    bodies = [Body(1.0, [0, 0, 0], [0, 0, 0]), Body(1.0, [0, 0, 0], [0, 0, 0])]
    _, pe, _ = system_energy(bodies, g_constant=1.0, min_distance_sq=4.0)
    assert pe == -0.5


def test_energy_monitor_basic_update():
    em = EnergyMonitor(g_constant=1.0)
    bodies = _pair()
    em.set_initial_energy(bodies)
    em.update(bodies)
    assert len(em.history) == 1
    assert em.current_drift == 0.0


def test_energy_monitor_reports_percent_drift():
    em = EnergyMonitor(g_constant=1.0)
    bodies = _pair()
    em.set_initial_energy(bodies)  # total energy -1
    bodies[0].update_physics_state(bodies[0].pos, [1.0, 0.0, 0.0])  # +0.5 kinetic
    em.update(bodies)
    assert math.isclose(em.current_drift, 50.0)


def test_energy_monitor_export_csv(tmp_path):
    em = EnergyMonitor(g_constant=1.0)
    bodies = _pair()
    em.set_initial_energy(bodies)
    for _ in range(3):
        em.update(bodies)

    out_file = tmp_path / "hist.csv"
    em.export_csv(out_file)
    lines = out_file.read_text().strip().splitlines()
    assert lines[0] == "sample,energy_drift_percent"
    assert len(lines) == 4


def test_energy_monitor_draws_drift_plot():
    em = EnergyMonitor(max_points=2)
    em.history.extend([-10.0, 10.0])
    surface = pygame.Surface((100, 40))

    em.draw(surface)

    # the drift line crosses the zero axis in the middle of the plot
    assert surface.get_at((50, 20))[:3] == (255, 100, 100)
    assert surface.get_at((50, 2))[:3] == C.BLACK


def test_energy_monitor_draw_needs_two_samples():
    em = EnergyMonitor()
    em.history.append(5.0)
    surface = pygame.Surface((100, 40))

    em.draw(surface)

    assert surface.get_at((50, 20))[:3] == C.BLACK


def test_orbital_elements_of_circular_orbit():
    star = Body(C.SOLAR_MASS, [0, 0, 0], [0, 0, 0], name="Sun")
    v = circular_velocity(C.SOLAR_MASS, C.AU)
    planet = Body(1.0, [C.AU, 0, 0], [0, v, 0], name="Planet")

    elems = calculate_orbital_elements(planet, star)

    assert elems["eccentricity"] < 1e-6
    assert math.isclose(elems["semi_major_axis"], C.AU, rel_tol=1e-6)
    expected_period = 2 * np.pi * np.sqrt(C.AU**3 / (C.GRAVITY_CONSTANT * C.SOLAR_MASS))
    assert math.isclose(elems["period"], expected_period, rel_tol=1e-6)
    assert math.isclose(elems["speed"], v)


def test_orbital_elements_missing_body():
    assert calculate_orbital_elements(None, None)["period"] == 0
