"""Interactive host for the physics engine.

The host owns the frame loop: it measures the real frame delta, turns key
state into timewarp commands and camera motion, steps the engine once, and
draws whatever state results.  None of this feeds back into the physics
except the discrete timewarp commands.
"""

import argparse
import logging
from datetime import datetime, timezone

import pygame
import pygame_gui

from . import constants as C
from .analysis import EnergyMonitor
from .bodies import InvalidBodyConfig
from .camera import Camera
from .controls import KeyboardScheme, TimewarpInput
from .engine import PhysicsEngine
from .integrators import INTEGRATORS
from .nasa import create_descriptor, load_ephemeris
from .presets import DEFAULT_PRESET, PRESETS, get_preset
from .rendering import Renderer
from .state_io import load_descriptors, save_state
from .telemetry import TelemetryReporter
from .timewarp import TimewarpClock
from .ui_manager import HudPanel

logger = logging.getLogger(__name__)


class Simulation:
    """Window, input and drawing around a :class:`PhysicsEngine`."""

    def __init__(
        self,
        descriptors,
        integrator: str = "Hybrid",
        telemetry_interval: float = C.TELEMETRY_INTERVAL,
        timewarp_level: int = 0,
        focus=None,
        init_pygame: bool = True,
        telemetry_sink=None,
    ):
        self.descriptors = [dict(d) for d in descriptors]
        self.timewarp = TimewarpClock(level=timewarp_level)
        self.reporter = TelemetryReporter(telemetry_interval, sink=telemetry_sink)
        self.engine = PhysicsEngine.from_descriptors(
            self.descriptors,
            clock=self.timewarp,
            reporter=self.reporter,
            integrator=integrator,
        )
        names = self.engine.registry.names
        self.focus_name = focus if focus is not None else (names[0] if names else None)

        self.energy_monitor = EnergyMonitor()
        self.energy_monitor.set_initial_energy(self.engine.registry)
        self.controls = KeyboardScheme.wasd()
        self.timewarp_input = TimewarpInput()
        self.camera = Camera()
        self.renderer = Renderer(self.descriptors)
        self.running = False

        if init_pygame:
            pygame.init()
            self.screen = pygame.display.set_mode((C.WIDTH, C.HEIGHT))
            pygame.display.set_caption("Orbits")
            self.frame_clock = pygame.time.Clock()
            self.hud = HudPanel(pygame_gui.UIManager((C.WIDTH, C.HEIGHT)))
        else:
            self.screen = None
            self.frame_clock = None
            self.hud = None

    # ------------------------------------------------------------------
    def handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False
            if self.hud is not None:
                self.hud.manager.process_events(event)

    def read_input(self, pressed):
        """Return this frame's timewarp command (or None) and camera axes."""
        return self.timewarp_input.update(pressed, self.timewarp), self.controls.axes(pressed)

    # ------------------------------------------------------------------
    def update(self, frame_dt: float, command=None, axes=None):
        """Step the physics once and refresh everything that watches it."""
        self.engine.step(frame_dt, command)
        self.energy_monitor.update(self.engine.registry)

        states = self.engine.state()
        self.renderer.record(states)
        if axes is not None:
            self.camera.apply_move(axes, frame_dt)
        self.camera.update_focus(states, self.focus_name)
        return states

    def draw(self, states, frame_dt: float = 0.0) -> None:
        if self.screen is None:
            return
        self.screen.fill(C.BLACK)
        self.renderer.draw(self.screen, states, self.camera)
        graph_rect = pygame.Rect(0, C.HEIGHT - C.ENERGY_GRAPH_HEIGHT, C.HUD_WIDTH, C.ENERGY_GRAPH_HEIGHT)
        self.energy_monitor.draw(self.screen.subsurface(graph_rect))
        self.hud.update_labels(self.engine, self.energy_monitor.current_drift, self.focus_name)
        self.hud.update(frame_dt)
        self.hud.draw(self.screen)
        pygame.display.flip()

    # ------------------------------------------------------------------
    def run(self, max_frames=None) -> None:
        """Main application loop."""
        if self.screen is None or self.frame_clock is None:
            raise RuntimeError("Simulation cannot run without pygame initialized")
        self.running = True
        frames = 0
        while self.running:
            frame_dt = self.frame_clock.tick(C.FPS) / 1000.0
            self.handle_events()
            if not self.running:
                break
            command, axes = self.read_input(pygame.key.get_pressed())
            states = self.update(frame_dt, command, axes)
            self.draw(states, frame_dt)
            frames += 1
            if max_frames is not None and frames >= max_frames:
                self.running = False
        pygame.quit()

    def run_headless(self, frames: int, frame_dt: float = 1.0 / C.FPS) -> None:
        """Step ``frames`` fixed-length frames without a window."""
        for _ in range(frames):
            self.update(frame_dt)


def load_bodies(args):
    """Resolve the command line options into a list of body descriptors."""
    if args.state_file:
        return load_descriptors(args.state_file)
    if args.nasa_kernel:
        ephem = load_ephemeris(args.nasa_kernel)
        epoch = datetime.strptime(args.nasa_date or "2024-01-01", "%Y-%m-%d").replace(tzinfo=timezone.utc)
        return [
            create_descriptor(ephem, 10, epoch, C.SOLAR_MASS, name="Sun",
                              color=C.ORANGE_RED, radius=C.SOLAR_RADIUS),
            create_descriptor(ephem, 399, epoch, C.EARTH_MASS, name="Earth",
                              color=C.BLUE, radius=C.EARTH_RADIUS),
            create_descriptor(ephem, 301, epoch, C.MOON_MASS, name="Moon",
                              color=C.GRAY, radius=C.MOON_RADIUS),
        ]
    return get_preset(args.preset)


def build_parser():
    parser = argparse.ArgumentParser(description="Orbital gravity simulation with timewarp")
    parser.add_argument("--preset", default=DEFAULT_PRESET, choices=sorted(PRESETS))
    parser.add_argument("--state-file", help="Load bodies from a JSON descriptor file")
    parser.add_argument("--nasa-kernel", help="Load Sun/Earth/Moon from an SPK kernel")
    parser.add_argument("--nasa-date", help="Epoch YYYY-MM-DD for SPK data")
    parser.add_argument("--integrator", choices=sorted(INTEGRATORS), default="Hybrid")
    parser.add_argument("--timewarp-level", type=int, default=0)
    parser.add_argument(
        "--telemetry-interval",
        type=float,
        default=C.TELEMETRY_INTERVAL,
        help="Real seconds between telemetry dumps",
    )
    parser.add_argument("--focus", help="Name of the body the camera follows")
    parser.add_argument("--frames", type=int, help="Stop after this many frames")
    parser.add_argument("--headless", action="store_true", help="Run without a window")
    parser.add_argument("--save-state", help="Write final body state to this JSON file")
    parser.add_argument("--log-level", default="INFO")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        descriptors = load_bodies(args)
        sim = Simulation(
            descriptors,
            integrator=args.integrator,
            telemetry_interval=args.telemetry_interval,
            timewarp_level=args.timewarp_level,
            focus=args.focus,
            init_pygame=not args.headless,
        )
    except (InvalidBodyConfig, KeyError, ValueError, OSError) as exc:
        logger.error("setup failed: %s", exc)
        return 2

    if args.headless:
        sim.run_headless(args.frames if args.frames is not None else C.FPS * 10)
    else:
        sim.run(max_frames=args.frames)

    if args.save_state:
        styles = {
            d.get("name"): {k: d[k] for k in ("color", "radius") if k in d}
            for d in sim.descriptors
        }
        save_state(args.save_state, sim.engine.registry, styles)
        logger.info("state written to %s", args.save_state)
    return 0


if __name__ == "__main__":  # pragma: no cover - manual tool
    raise SystemExit(main())
