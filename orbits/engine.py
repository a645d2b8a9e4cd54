"""Frame-synchronous physics engine.

One call to :meth:`PhysicsEngine.step` is one host frame:

1. apply at most one pending timewarp command;
2. convert the real frame delta into simulated time with the clock factor;
3. recompute every acceleration from a single position snapshot;
4. integrate all bodies with those accelerations;
5. let the telemetry reporter look at the result on its own real-time cadence.
"""

import logging
import math

from . import constants as C
from .bodies import BodyRegistry
from .forces import accumulate_accelerations
from .integrators import get_integrator, integrate
from .timewarp import TimewarpClock

logger = logging.getLogger(__name__)


class PhysicsEngine:
    """Owns the body registry and advances it once per frame."""

    def __init__(
        self,
        registry: BodyRegistry,
        clock: TimewarpClock,
        reporter=None,
        g_constant: float = C.GRAVITY_CONSTANT,
        min_distance_sq: float = C.MIN_DISTANCE_SQ,
        integrator: str = "Hybrid",
    ):
        get_integrator(integrator)
        if not min_distance_sq > 0:
            raise ValueError(f"min_distance_sq must be positive, got {min_distance_sq}")
        self.registry = registry
        self.clock = clock
        self.reporter = reporter
        self.g_constant = float(g_constant)
        self.min_distance_sq = float(min_distance_sq)
        self.integrator = integrator
        self.simulation_time = 0.0
        self.frame_count = 0
        logger.info(
            "engine ready: %d bodies, integrator %s, timewarp %gx",
            len(registry),
            integrator,
            clock.factor,
        )

    @classmethod
    def from_descriptors(cls, descriptors, clock=None, **kwargs):
        registry = BodyRegistry.from_descriptors(descriptors)
        return cls(registry, clock if clock is not None else TimewarpClock(), **kwargs)

    def step(self, frame_dt: float, command=None) -> float:
        """Advance one frame of ``frame_dt`` real seconds.

        Returns the simulated time step that was applied.
        """
        frame_dt = float(frame_dt)
        if not math.isfinite(frame_dt) or frame_dt < 0:
            raise ValueError(f"frame delta must be finite and >= 0, got {frame_dt}")

        self.clock.apply(command)
        dt = self.clock.scale(frame_dt)

        accumulate_accelerations(self.registry, self.g_constant, self.min_distance_sq)
        integrate(self.registry, dt, self.integrator)

        self.simulation_time += dt
        self.frame_count += 1

        if self.reporter is not None:
            self.reporter.tick(frame_dt, self.registry)
        return dt

    def state(self):
        return self.registry.snapshot()
