import pygame
import pygame_gui

from . import constants as C
from .utils import distance_to_display, time_to_display, timewarp_to_display


class HudPanel:
    """Read-only heads-up display built from pygame_gui labels."""

    def __init__(self, manager: pygame_gui.UIManager):
        self.manager = manager
        self.panel = pygame_gui.elements.UIPanel(
            pygame.Rect(0, 0, C.HUD_WIDTH, C.HUD_HEIGHT),
            manager=manager,
            object_id="#hud_panel",
        )
        width = self.panel.rect.width - 20
        self.timewarp_label = pygame_gui.elements.UILabel(
            pygame.Rect(10, 5, width, 20),
            "Timewarp: 1x",
            manager,
            container=self.panel,
        )
        self.time_label = pygame_gui.elements.UILabel(
            pygame.Rect(10, 25, width, 20),
            "Elapsed: 0 sec",
            manager,
            container=self.panel,
        )
        self.focus_label = pygame_gui.elements.UILabel(
            pygame.Rect(10, 45, width, 20),
            "",
            manager,
            container=self.panel,
        )
        self.energy_label = pygame_gui.elements.UILabel(
            pygame.Rect(10, 65, width, 20),
            "Energy drift: 0 %",
            manager,
            container=self.panel,
        )

    def update_labels(self, engine, energy_drift=0.0, focus_name=None):
        self.timewarp_label.set_text(
            f"Timewarp: {timewarp_to_display(engine.clock.factor)} (level {engine.clock.level})"
        )
        self.time_label.set_text(f"Elapsed: {time_to_display(engine.simulation_time)}")
        self.energy_label.set_text(f"Energy drift: {energy_drift:.3e} %")

        registry = engine.registry
        focus = registry.get(focus_name) if focus_name else None
        if focus is not None and len(registry) > 1:
            other = next(b for b in registry if b is not focus)
            dist = float(((focus.pos - other.pos) ** 2).sum() ** 0.5)
            self.focus_label.set_text(f"{focus.name} - {other.name}: {distance_to_display(dist)}")
        else:
            self.focus_label.set_text("")

    def update(self, time_delta):
        self.manager.update(time_delta)

    def draw(self, surface):
        self.manager.draw_ui(surface)
