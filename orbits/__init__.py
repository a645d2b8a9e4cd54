"""Gravitational orbit simulation with operator-controlled timewarp."""

from importlib.metadata import PackageNotFoundError, version

from .bodies import Body, BodyRegistry, BodyState, InvalidBodyConfig
from .forces import accumulate_accelerations, compute_accelerations, pair_forces
from .integrators import INTEGRATORS, hybrid_step_arrays, integrate
from .timewarp import TimewarpClock, TimewarpCommand
from .telemetry import TelemetryReporter
from .engine import PhysicsEngine
from .constants import GRAVITY_CONSTANT, MIN_DISTANCE_SQ, TIMEWARP_SCALES

try:
    __version__ = version("orbits")
except PackageNotFoundError:
    # Fallback when package metadata is unavailable (e.g. running from source)
    __version__ = "0.0.0"

__all__ = [
    "Body",
    "BodyRegistry",
    "BodyState",
    "InvalidBodyConfig",
    "accumulate_accelerations",
    "compute_accelerations",
    "pair_forces",
    "INTEGRATORS",
    "hybrid_step_arrays",
    "integrate",
    "TimewarpClock",
    "TimewarpCommand",
    "TelemetryReporter",
    "PhysicsEngine",
    "GRAVITY_CONSTANT",
    "MIN_DISTANCE_SQ",
    "TIMEWARP_SCALES",
    "__version__",
]
