"""Discrete timewarp control.

The clock holds a level index into a fixed, ascending table of scale values.
Commands move the level by one step and are silently ignored at either end.
"""

import enum
import logging

from . import constants as C

logger = logging.getLogger(__name__)


class TimewarpCommand(enum.Enum):
    INCREASE = "timewarp_increase"
    DECREASE = "timewarp_decrease"


class TimewarpClock:
    """Map a warp level to the multiplier applied to real frame time."""

    def __init__(self, scales=C.TIMEWARP_SCALES, level: int = 0):
        scales = tuple(float(s) for s in scales)
        if not scales:
            raise ValueError("timewarp scale table must not be empty")
        if any(s <= 0 for s in scales):
            raise ValueError(f"timewarp scales must be positive, got {scales}")
        if not all(a < b for a, b in zip(scales, scales[1:])):
            raise ValueError(f"timewarp scales must be strictly ascending, got {scales}")
        if not 0 <= int(level) < len(scales):
            raise ValueError(f"timewarp level {level} outside 0..{len(scales) - 1}")
        self._scales = scales
        self._level = int(level)
        self._factor = self._scales[self._level]

    @property
    def level(self) -> int:
        return self._level

    @property
    def factor(self) -> float:
        return self._factor

    @property
    def scales(self) -> tuple:
        return self._scales

    @property
    def max_level(self) -> int:
        return len(self._scales) - 1

    def _set_level(self, level):
        self._level = level
        self._factor = self._scales[level]
        logger.debug("timewarp level %d, factor %gx", self._level, self._factor)

    def increase(self) -> bool:
        """Step up one level. Returns False when already at the top."""
        if self._level >= self.max_level:
            return False
        self._set_level(self._level + 1)
        return True

    def decrease(self) -> bool:
        """Step down one level. Returns False when already at the bottom."""
        if self._level <= 0:
            return False
        self._set_level(self._level - 1)
        return True

    def apply(self, command) -> bool:
        if command is None:
            return False
        command = TimewarpCommand(command)
        if command is TimewarpCommand.INCREASE:
            return self.increase()
        return self.decrease()

    def scale(self, real_dt: float) -> float:
        """Convert a real frame delta into simulated seconds."""
        return real_dt * self._factor

    def __repr__(self):
        return f"TimewarpClock(level={self._level}, factor={self._factor:g})"
