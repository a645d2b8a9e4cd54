"""Body records and the registry that owns them.

The registry is a plain indexed collection built once at setup.  Positions
and velocities are float64 3-vectors in metres and metres per second.
Acceleration is derived state written by :mod:`orbits.forces` every frame.
"""

from typing import NamedTuple

import numpy as np


class InvalidBodyConfig(ValueError):
    """Raised at setup when a body descriptor cannot be simulated."""


class BodyState(NamedTuple):
    """Read-only copy of one body's kinematic state."""

    name: str
    mass: float
    position: np.ndarray
    velocity: np.ndarray
    acceleration: np.ndarray


def _as_vector(value, label, name):
    try:
        v = np.asarray(value, dtype=float).reshape(-1)
    except (TypeError, ValueError) as exc:
        raise InvalidBodyConfig(f"{name}: {label} is not numeric: {value!r}") from exc
    if v.size > 3:
        raise InvalidBodyConfig(f"{name}: {label} has {v.size} components, expected 3")
    if v.size < 3:
        v = np.pad(v, (0, 3 - v.size))
    if not np.all(np.isfinite(v)):
        raise InvalidBodyConfig(f"{name}: {label} must be finite, got {v.tolist()}")
    return v


class Body:
    """A point mass with position, velocity and derived acceleration."""

    def __init__(self, mass, pos, vel, name=None):
        """Create a body.

        Parameters
        ----------
        mass : float
            Mass in kilograms. Must be finite and strictly positive.
        pos : array-like
            Initial position in metres. Two-component values are padded
            with a zero z.
        vel : array-like
            Initial velocity in m/s, padded the same way.
        name : str, optional
            Diagnostic label.

        Raises
        ------
        InvalidBodyConfig
            If the mass or either vector is unusable.
        """
        self.name = str(name) if name is not None else "Body"
        try:
            m = float(mass)
        except (TypeError, ValueError) as exc:
            raise InvalidBodyConfig(f"{self.name}: mass is not numeric: {mass!r}") from exc
        if not np.isfinite(m) or m <= 0:
            raise InvalidBodyConfig(f"{self.name}: mass must be > 0, got {mass!r}")
        self._mass = m
        self.pos = _as_vector(pos, "position", self.name)
        self.vel = _as_vector(vel, "velocity", self.name)
        self.acc = np.zeros(3, dtype=np.float64)

    @property
    def mass(self):
        return self._mass

    @property
    def momentum(self):
        return self._mass * self.vel

    def update_physics_state(self, new_pos, new_vel):
        """Replace position and velocity."""
        self.pos = np.array(new_pos, dtype=np.float64).reshape(3)
        self.vel = np.array(new_vel, dtype=np.float64).reshape(3)

    def set_acceleration(self, acc):
        self.acc = np.array(acc, dtype=np.float64).reshape(3)

    def state(self) -> BodyState:
        return BodyState(
            self.name, self._mass, self.pos.copy(), self.vel.copy(), self.acc.copy()
        )

    def __repr__(self):
        return (
            f"Body(name={self.name!r}, mass={self._mass}, pos={self.pos.tolist()}, "
            f"vel={self.vel.tolist()}, acc={self.acc.tolist()})"
        )

    @classmethod
    def from_descriptor(cls, descriptor):
        """Create a body from a ``{name, mass, position, velocity}`` mapping.

        ``pos`` and ``vel`` are accepted as short aliases. Unknown keys such
        as ``color`` or ``radius`` are left for the renderer.
        """
        if not isinstance(descriptor, dict):
            raise InvalidBodyConfig(f"body descriptor must be a mapping, got {descriptor!r}")
        name = descriptor.get("name")
        label = name if name is not None else "<unnamed>"
        if "mass" not in descriptor:
            raise InvalidBodyConfig(f"{label}: missing 'mass'")
        pos = descriptor.get("position", descriptor.get("pos"))
        vel = descriptor.get("velocity", descriptor.get("vel"))
        if pos is None:
            raise InvalidBodyConfig(f"{label}: missing 'position'")
        if vel is None:
            raise InvalidBodyConfig(f"{label}: missing 'velocity'")
        return cls(descriptor["mass"], pos, vel, name=name)


class BodyRegistry:
    """Indexed collection of the bodies taking part in a run.

    The set of bodies is fixed at construction; there is no way to add or
    remove one afterwards.
    """

    def __init__(self, bodies=()):
        self._bodies = tuple(bodies)
        for b in self._bodies:
            if not isinstance(b, Body):
                raise InvalidBodyConfig(f"expected Body, got {type(b).__name__}")

    @classmethod
    def from_descriptors(cls, descriptors):
        return cls(Body.from_descriptor(d) for d in descriptors)

    def __len__(self):
        return len(self._bodies)

    def __iter__(self):
        return iter(self._bodies)

    def __getitem__(self, index) -> Body:
        return self._bodies[index]

    def get(self, name):
        """Return the first body called ``name`` or ``None``."""
        for b in self._bodies:
            if b.name == name:
                return b
        return None

    @property
    def names(self):
        return [b.name for b in self._bodies]

    def positions(self) -> np.ndarray:
        return np.array([b.pos for b in self._bodies], dtype=np.float64).reshape(-1, 3)

    def velocities(self) -> np.ndarray:
        return np.array([b.vel for b in self._bodies], dtype=np.float64).reshape(-1, 3)

    def accelerations(self) -> np.ndarray:
        return np.array([b.acc for b in self._bodies], dtype=np.float64).reshape(-1, 3)

    def masses(self) -> np.ndarray:
        return np.array([b.mass for b in self._bodies], dtype=np.float64)

    def snapshot(self) -> list[BodyState]:
        return [b.state() for b in self._bodies]

    def total_momentum(self) -> np.ndarray:
        p = np.zeros(3, dtype=np.float64)
        for b in self._bodies:
            p += b.momentum
        return p

    def center_of_mass(self):
        """Return the centre-of-mass position and velocity, or ``(None, None)``."""
        if not self._bodies:
            return None, None
        masses = self.masses()
        total = masses.sum()
        com_pos = (self.positions() * masses[:, None]).sum(axis=0) / total
        com_vel = (self.velocities() * masses[:, None]).sum(axis=0) / total
        return com_pos, com_vel
