"""Translate raw key state into camera axes and timewarp commands.

``pressed`` is anything indexable by a key code that yields a truthy value
for held keys, such as the wrapper returned by ``pygame.key.get_pressed()``.
"""

import numpy as np
import pygame

from .timewarp import TimewarpCommand


class ControlScheme:
    """Source of per-axis activation state: ``(x, y, zoom)`` in -1..1."""

    def axes(self, pressed) -> np.ndarray:
        raise NotImplementedError


class KeyboardScheme(ControlScheme):
    def __init__(self, forward, backward, left, right, zoom_in, zoom_out):
        self.forward = forward
        self.backward = backward
        self.left = left
        self.right = right
        self.zoom_in = zoom_in
        self.zoom_out = zoom_out

    @classmethod
    def wasd(cls):
        return cls(pygame.K_w, pygame.K_s, pygame.K_a, pygame.K_d, pygame.K_e, pygame.K_q)

    @classmethod
    def arrow(cls):
        return cls(
            pygame.K_UP,
            pygame.K_DOWN,
            pygame.K_LEFT,
            pygame.K_RIGHT,
            pygame.K_PAGEUP,
            pygame.K_PAGEDOWN,
        )

    def axes(self, pressed) -> np.ndarray:
        def held(key):
            return 1.0 if pressed[key] else 0.0

        return np.array(
            [
                held(self.right) - held(self.left),
                held(self.forward) - held(self.backward),
                held(self.zoom_out) - held(self.zoom_in),
            ]
        )


class TimewarpInput:
    """Edge-triggered timewarp keys.

    A command is produced only on the frame a key goes down; holding it
    produces nothing further.  If both keys go down in the same frame,
    increase wins unless ``clock`` is already at its top level, in which
    case the decrease goes through.
    """

    def __init__(self, increase_key=pygame.K_PERIOD, decrease_key=pygame.K_COMMA):
        self.increase_key = increase_key
        self.decrease_key = decrease_key
        self._increase_held = False
        self._decrease_held = False

    def update(self, pressed, clock=None):
        increase = bool(pressed[self.increase_key])
        decrease = bool(pressed[self.decrease_key])
        increase_edge = increase and not self._increase_held
        decrease_edge = decrease and not self._decrease_held
        self._increase_held = increase
        self._decrease_held = decrease

        if increase_edge and decrease_edge and clock is not None and clock.level >= clock.max_level:
            return TimewarpCommand.DECREASE
        if increase_edge:
            return TimewarpCommand.INCREASE
        if decrease_edge:
            return TimewarpCommand.DECREASE
        return None
