import numpy as np
from . import constants as C


class Camera:
    """Top-down view of the x/y plane that follows a focus body.

    ``zoom`` is in pixels per metre. ``pan_offset`` is a screen-space shift
    applied on top of the focus point.
    """

    def __init__(self, screen_size=(C.WIDTH, C.HEIGHT), zoom=C.ZOOM_BASE, pan_offset=None):
        self.screen_center = np.array(screen_size, dtype=float) / 2.0
        self.zoom = float(zoom)
        self.pan_offset = (
            np.array(pan_offset, dtype=float) if pan_offset is not None else C.INITIAL_PAN_OFFSET.astype(float).copy()
        )
        self.focus = np.zeros(2)

    def world_to_screen(self, pos):
        """Convert a world position in metres to screen pixels."""
        pos = np.asarray(pos, dtype=float)
        offset = (pos[:2] - self.focus) * self.zoom
        # screen y grows downwards
        return self.screen_center + self.pan_offset + np.array([offset[0], -offset[1]])

    def update_focus(self, states, focus_name=None):
        """Centre on the body called ``focus_name`` (default: the first body)."""
        if not states:
            return
        target = next((s for s in states if s.name == focus_name), states[0])
        self.focus = np.asarray(target.position[:2], dtype=float).copy()

    def apply_move(self, axes, frame_dt):
        """Pan with the x/y axes and zoom with the third axis."""
        axes = np.asarray(axes, dtype=float)
        self.pan_offset -= np.array([axes[0], -axes[1]]) * C.PAN_SPEED * frame_dt
        if axes[2]:
            self.zoom *= C.ZOOM_RATE ** (-axes[2] * frame_dt)
            self.zoom = min(max(self.zoom, C.ZOOM_MIN), C.ZOOM_MAX)
