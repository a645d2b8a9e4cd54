"""Drawing of body states.

The renderer only reads :class:`~orbits.bodies.BodyState` copies; it never
touches the registry.
"""

from collections import deque

import pygame
import pygame.gfxdraw

from . import constants as C


class BodySprite:
    """Visual attributes and trail of one body."""

    def __init__(self, name, color=C.WHITE, radius=0.0, max_trail_length=C.DEFAULT_TRAIL_LENGTH):
        self.name = name
        self.color = tuple(color)
        self.radius = float(radius)  # metres
        self.max_trail_length = self._clamp_trail_length(max_trail_length)
        self.trail = deque(maxlen=self.max_trail_length)

    @staticmethod
    def _clamp_trail_length(length):
        return max(C.MIN_TRAIL_LENGTH, min(int(length), C.MAX_TRAIL_LENGTH))

    def set_trail_length(self, length):
        self.max_trail_length = self._clamp_trail_length(length)
        self.trail = deque(self.trail, maxlen=self.max_trail_length)

    def record(self, position):
        self.trail.append(position[:2].copy())

    def radius_pixels(self, zoom):
        return min(max(C.MIN_BODY_RADIUS_PIXELS, int(self.radius * zoom)), C.MAX_BODY_RADIUS_PIXELS)


def _on_screen(screen, x, y, radius):
    # gfxdraw takes 16-bit coordinates
    width, height = screen.get_size()
    return -radius <= x <= width + radius and -radius <= y <= height + radius


class Renderer:
    def __init__(self, descriptors=(), trail_length=C.DEFAULT_TRAIL_LENGTH):
        self.sprites = {}
        for d in descriptors:
            name = d.get("name")
            self.sprites[name] = BodySprite(
                name,
                d.get("color", C.WHITE),
                d.get("radius", 0.0),
                max_trail_length=trail_length,
            )
        self.show_trails = True
        self.draw_labels = True
        self._font = None

    def sprite(self, name):
        if name not in self.sprites:
            self.sprites[name] = BodySprite(name)
        return self.sprites[name]

    def set_trail_length(self, length):
        for s in self.sprites.values():
            s.set_trail_length(length)

    def record(self, states):
        for state in states:
            self.sprite(state.name).record(state.position)

    def draw(self, screen, states, camera):
        for state in states:
            sprite = self.sprite(state.name)
            if self.show_trails and len(sprite.trail) > 1:
                points = [tuple(camera.world_to_screen(p)) for p in sprite.trail]
                pygame.draw.aalines(screen, sprite.color, False, points)

            x, y = (int(c) for c in camera.world_to_screen(state.position))
            radius = sprite.radius_pixels(camera.zoom)
            if not _on_screen(screen, x, y, radius):
                continue
            pygame.gfxdraw.filled_circle(screen, x, y, radius, sprite.color)
            pygame.gfxdraw.aacircle(screen, x, y, radius, sprite.color)

            if self.draw_labels:
                if self._font is None:
                    self._font = pygame.font.Font(None, 16)
                label = self._font.render(state.name, True, C.WHITE)
                screen.blit(label, (x + radius + 2, y - radius - 2))
