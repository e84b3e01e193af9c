# MIT License (see LICENSE)
"""
Interactive pygame application.

Controls:
    1-4          Select mode (gravity, projectile, pendulum, collision)
    Space        Pause/resume
    Up / Down    Gravity ± 0.1
    Left / Right Elasticity ± 0.01
    R            Re-initialize the current mode
    H            Show/hide help
    Left click   Launch a projectile (projectile mode)
    Esc          Quit

The window is resizable; a resize re-initializes the current mode.
"""
from __future__ import annotations
import argparse
import logging
import sys

import pygame

from . import constants as C
from .config import Configuration, RESOLVERS, SimulationSettings, Viewport
from .controls import MODE_CATALOG, ControlPanel, clamp_elasticity, clamp_gravity
from .driver import FrameDriver
from .renderer.pygame_backend import PygameRenderer
from .types import Mode

logger = logging.getLogger(__name__)

MODE_KEYS = {
    pygame.K_1: Mode.GRAVITY,
    pygame.K_2: Mode.PROJECTILE,
    pygame.K_3: Mode.PENDULUM,
    pygame.K_4: Mode.COLLISION,
}

HELP_LINES = [
    "1-4: mode   Space: pause   R: reset   H: help   Esc: quit",
    "Up/Down: gravity   Left/Right: elasticity",
    "Click (projectile mode): launch a body",
]


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


class PlaygroundApp:
    """
    Window, input handling and HUD around a FrameDriver.

    Args:
        driver: Simulation loop; its renderer is replaced by a PygameRenderer.
        width: Initial window width.
        height: Initial window height.
    """

    def __init__(self, driver: FrameDriver, width: int = C.DEFAULT_WIDTH, height: int = C.DEFAULT_HEIGHT):
        self.driver = driver
        self.panel = ControlPanel(driver)
        self.size = (width, height)
        self.show_help = True
        self.running = False
        self.screen = None
        self.font = None

    def _draw_hud(self) -> None:
        lines = self.panel.status_lines()
        if self.show_help:
            lines += [""] + HELP_LINES + [""] + [
                f"{i}: {info.label}" for i, info in enumerate(MODE_CATALOG, start=1)
            ]
        for idx, text in enumerate(lines):
            color = C.HUD_COLOR if idx < 3 else C.HELP_COLOR
            self.screen.blit(self.font.render(text, True, color), (12, 10 + 18 * idx))

    def handle_event(self, event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.running = False
            elif event.key in MODE_KEYS:
                self.panel.select_mode(MODE_KEYS[event.key])
            elif event.key == pygame.K_SPACE:
                self.panel.toggle_pause()
            elif event.key == pygame.K_UP:
                self.panel.nudge_gravity(+1)
            elif event.key == pygame.K_DOWN:
                self.panel.nudge_gravity(-1)
            elif event.key == pygame.K_RIGHT:
                self.panel.nudge_elasticity(+1)
            elif event.key == pygame.K_LEFT:
                self.panel.nudge_elasticity(-1)
            elif event.key == pygame.K_r:
                self.driver.reset()
            elif event.key == pygame.K_h:
                self.show_help = not self.show_help
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.driver.click(*event.pos)
        elif event.type == pygame.VIDEORESIZE:
            self.size = (max(1, event.w), max(1, event.h))
            self.screen = pygame.display.get_surface()
            self.driver.renderer.surface = self.screen
            self.driver.resize(*self.size)

    def run(self) -> None:
        pygame.init()
        pygame.display.set_caption("Physics Playground")
        self.screen = pygame.display.set_mode(self.size, pygame.RESIZABLE)
        self.font = pygame.font.SysFont(None, 22)
        clock = pygame.time.Clock()

        self.driver.renderer = PygameRenderer(self.screen)
        self.driver.resize(*self.size)
        self.driver.start()
        self.running = True
        logger.info("Window opened at %dx%d", *self.size)

        try:
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)
                if not self.running:
                    break
                # One tick per displayed frame
                self.driver.scheduler.pump()
                self._draw_hud()
                pygame.display.flip()
                clock.tick(self.driver.settings.fps)
        finally:
            self.driver.stop()
            pygame.quit()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="physics-playground",
        description="Interactive 2D physics sandbox.",
    )
    parser.add_argument("--mode", choices=[m.value for m in Mode], default=Mode.GRAVITY.value)
    parser.add_argument("--gravity", type=float, default=C.DEFAULT_GRAVITY, help="m/s², 0-20")
    parser.add_argument("--elasticity", type=float, default=C.DEFAULT_ELASTICITY, help="0-1")
    parser.add_argument("--width", type=int, default=C.DEFAULT_WIDTH)
    parser.add_argument("--height", type=int, default=C.DEFAULT_HEIGHT)
    parser.add_argument("--seed", type=int, default=None, help="Seed for projectile spawns")
    parser.add_argument("--max-bodies", type=int, default=None, help="Projectile capacity")
    parser.add_argument("--resolver", choices=RESOLVERS, default=None,
                        help="Collision model (default: positional)")
    parser.add_argument("--paused", action="store_true", help="Start paused")
    parser.add_argument("--log-level", default="INFO")
    return parser


def make_driver(args: argparse.Namespace) -> FrameDriver:
    """Build a FrameDriver from parsed command line arguments."""
    settings = SimulationSettings.from_env(max_bodies=args.max_bodies, resolver=args.resolver)
    config = Configuration(
        gravity=clamp_gravity(args.gravity),
        elasticity=clamp_elasticity(args.elasticity),
        mode=Mode.parse(args.mode),
        paused=args.paused,
    )
    return FrameDriver(config, Viewport(args.width, args.height), settings, seed=args.seed)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    try:
        driver = make_driver(args)
    except ValueError as exc:
        logger.error("%s", exc)
        return 2
    PlaygroundApp(driver, args.width, args.height).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
