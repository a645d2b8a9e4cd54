"""Physical constants and tunables shared by the simulation."""

import numpy as np

# --- Physics ---
GRAVITY_CONSTANT = 6.67e-11  # m^3 kg^-1 s^-2
# Squared separations below this are clamped before dividing (m^2)
MIN_DISTANCE_SQ = 1.0

# --- Reference bodies ---
SOLAR_MASS = 1.989e30  # kg
SOLAR_RADIUS = 696_340.0 * 1000.0  # m
EARTH_MASS = 5.97e24  # kg
EARTH_RADIUS = 6378.0 * 1000.0  # m
MOON_MASS = 7.35e22  # kg
MOON_RADIUS = 1737.0 * 1000.0  # m
AU = 1.496e11  # m
EARTH_MOON_DISTANCE = 384_400.0 * 1000.0  # m

# --- Timewarp ---
TIMEWARP_SCALES = (1, 5, 10, 100, 1000, 10_000, 100_000)

# --- Telemetry ---
TELEMETRY_INTERVAL = 1.0  # real seconds

# --- Host window ---
WIDTH, HEIGHT = 1280, 800
FPS = 60
HUD_WIDTH = 260
HUD_HEIGHT = 110
ENERGY_GRAPH_HEIGHT = 80

# --- Camera ---
ZOOM_BASE = 300.0 / AU  # pixels per metre
ZOOM_MIN = 1e-13
ZOOM_MAX = 1e-3
ZOOM_RATE = 1.5  # zoom multiplier per second of held input
PAN_SPEED = 400.0  # pixels per second of held input
INITIAL_PAN_OFFSET = np.array([0.0, 0.0])

# --- Rendering ---
MIN_BODY_RADIUS_PIXELS = 2
MAX_BODY_RADIUS_PIXELS = 2000
DEFAULT_TRAIL_LENGTH = 300
MIN_TRAIL_LENGTH = 10
MAX_TRAIL_LENGTH = 2000

# --- Colours ---
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
GRAY = (128, 128, 128)
DARK_GRAY = (50, 50, 50)
ORANGE_RED = (255, 69, 0)
BLUE = (0, 0, 255)
YELLOW = (255, 255, 0)
LIGHT_BLUE = (173, 216, 230)
