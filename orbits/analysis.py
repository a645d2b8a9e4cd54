import csv
import os
from collections import deque

import numpy as np
import pygame

from . import constants as C


def system_energy(bodies, g_constant=C.GRAVITY_CONSTANT, min_distance_sq=C.MIN_DISTANCE_SQ):
    """Return kinetic, potential and total energy of ``bodies``."""
    bodies = list(bodies)
    kinetic = 0.0
    potential = 0.0
    for b in bodies:
        kinetic += 0.5 * b.mass * float(np.dot(b.vel, b.vel))
    for i, bi in enumerate(bodies):
        for bj in bodies[i + 1:]:
            r_vec = bj.pos - bi.pos
            dist = np.sqrt(max(float(np.dot(r_vec, r_vec)), min_distance_sq))
            potential -= g_constant * bi.mass * bj.mass / dist
    return kinetic, potential, kinetic + potential


def calculate_orbital_elements(body, central_body, g_constant=C.GRAVITY_CONSTANT):
    """Return the osculating orbital elements of ``body`` around ``central_body``."""
    if body is None or central_body is None:
        return {
            'semi_major_axis': 0, 'eccentricity': 0, 'period': 0,
            'periapsis': 0, 'apoapsis': 0, 'speed': 0
        }

    r_vec = body.pos - central_body.pos
    v_vec = body.vel - central_body.vel

    r = np.linalg.norm(r_vec)
    v = np.linalg.norm(v_vec)

    mu = g_constant * (central_body.mass + body.mass)

    specific_orbital_energy = v**2 / 2 - mu / r

    h_vec = np.cross(r_vec, v_vec)
    e_vec = (np.cross(v_vec, h_vec) / mu) - (r_vec / r)
    eccentricity = np.linalg.norm(e_vec)

    if abs(specific_orbital_energy) < 1e-9:  # parabolic
        semi_major_axis = float('inf')
        period = float('inf')
    else:
        semi_major_axis = -mu / (2 * specific_orbital_energy)
        if semi_major_axis > 0:
            period = 2 * np.pi * np.sqrt(semi_major_axis**3 / mu)
        else:  # hyperbolic
            period = float('inf')

    periapsis = semi_major_axis * (1 - eccentricity) if semi_major_axis > 0 else 0
    apoapsis = semi_major_axis * (1 + eccentricity) if semi_major_axis > 0 else 0

    return {
        'semi_major_axis': semi_major_axis,
        'eccentricity': eccentricity,
        'period': period,
        'periapsis': periapsis,
        'apoapsis': apoapsis,
        'speed': v
    }


class EnergyMonitor:
    """Track relative drift of total energy, in percent of the initial value.

    The default integrator gains energy faster at high timewarp; this history
    makes that visible.
    """

    def __init__(self, max_points=500, g_constant=C.GRAVITY_CONSTANT):
        self.history = deque(maxlen=max_points)
        self.initial_energy = None
        self.g_constant = g_constant

    def set_initial_energy(self, bodies):
        _, _, self.initial_energy = system_energy(bodies, self.g_constant)
        self.history.clear()

    @property
    def current_drift(self):
        return self.history[-1] if self.history else 0.0

    def update(self, bodies):
        if self.initial_energy is None or self.initial_energy == 0:
            return
        _, _, current_energy = system_energy(bodies, self.g_constant)
        drift = ((current_energy - self.initial_energy) / abs(self.initial_energy)) * 100
        self.history.append(drift)

    def draw(self, surface):
        if len(self.history) < 2:
            return

        width, height = surface.get_size()
        max_drift = max(max(abs(p) for p in self.history), 1e-12)
        points = []
        for i, drift in enumerate(self.history):
            x = (i / (self.history.maxlen - 1)) * width
            y = height / 2 - (drift / max_drift) * (height / 2 - 5)
            points.append((x, y))

        pygame.draw.line(surface, C.GRAY, (0, height / 2), (width, height / 2), 1)
        pygame.draw.lines(surface, (255, 100, 100), False, points, 2)

    def export_csv(self, file, delimiter=","):
        """Export the recorded energy drift history to a CSV file.

        Parameters
        ----------
        file : str or file-like
            Destination filename or open file object.
        delimiter : str, optional
            Delimiter used between columns (default is ',').
        """
        close = False
        if isinstance(file, (str, bytes, os.PathLike)):
            f = open(file, "w", newline="")
            close = True
        else:
            f = file
        try:
            writer = csv.writer(f, delimiter=delimiter)
            writer.writerow(["sample", "energy_drift_percent"])
            for i, drift in enumerate(self.history):
                writer.writerow([i, drift])
        finally:
            if close:
                f.close()
