"""Named starting configurations.

Each preset is a list of body descriptors.  ``color`` and ``radius`` (metres)
are only used for drawing.
"""

import math

from . import constants as C


def circular_velocity(central_mass, distance, g_constant=C.GRAVITY_CONSTANT):
    """Speed of a circular orbit of radius ``distance`` around ``central_mass``."""
    return math.sqrt(g_constant * central_mass / distance)


def _sun_earth_moon():
    earth_v = circular_velocity(C.SOLAR_MASS, C.AU)
    moon_v = circular_velocity(C.EARTH_MASS, C.EARTH_MOON_DISTANCE) + earth_v
    return [
        {
            "name": "Sun",
            "mass": C.SOLAR_MASS,
            "position": [0.0, 0.0, 0.0],
            "velocity": [0.0, 0.0, 0.0],
            "color": C.ORANGE_RED,
            "radius": C.SOLAR_RADIUS,
        },
        {
            "name": "Earth",
            "mass": C.EARTH_MASS,
            "position": [C.AU, 0.0, 0.0],
            "velocity": [0.0, earth_v, 0.0],
            "color": C.BLUE,
            "radius": C.EARTH_RADIUS,
        },
        {
            "name": "Moon",
            "mass": C.MOON_MASS,
            "position": [C.AU + C.EARTH_MOON_DISTANCE, 0.0, 0.0],
            "velocity": [0.0, moon_v, 0.0],
            "color": C.GRAY,
            "radius": C.MOON_RADIUS,
        },
    ]


def _sun_earth():
    return _sun_earth_moon()[:2]


def _binary_stars():
    # equal masses on a shared circle around the origin
    separation = 0.5 * C.AU
    v = 0.5 * circular_velocity(2 * C.SOLAR_MASS, separation)
    return [
        {
            "name": "Star A",
            "mass": C.SOLAR_MASS,
            "position": [-separation / 2, 0.0, 0.0],
            "velocity": [0.0, -v, 0.0],
            "color": C.YELLOW,
            "radius": C.SOLAR_RADIUS,
        },
        {
            "name": "Star B",
            "mass": C.SOLAR_MASS,
            "position": [separation / 2, 0.0, 0.0],
            "velocity": [0.0, v, 0.0],
            "color": C.LIGHT_BLUE,
            "radius": C.SOLAR_RADIUS,
        },
    ]


PRESETS = {
    "Sun, Earth & Moon": _sun_earth_moon(),
    "Sun & Earth": _sun_earth(),
    "Binary Stars": _binary_stars(),
}

DEFAULT_PRESET = "Sun, Earth & Moon"


def get_preset(name):
    """Return a fresh copy of the descriptors for preset ``name``."""
    if name not in PRESETS:
        raise KeyError(f"Preset '{name}' not found")
    return [dict(d) for d in PRESETS[name]]
