#!/usr/bin/env python3
"""
Main view class: combines all UI mixins into one runnable Pygame window.

Module layout
─────────────
    ui/
    ├── types.py           – ColorRGB, ViewportRect, Camera
    ├── constants.py       – ViewConstants mixin (all class-level constants)
    ├── helpers.py         – layout, camera, HUD text and drawing utilities
    ├── draw_scene.py      – SceneRenderer mixin (roads, signals, trees, car)
    ├── hud.py             – HudRenderer mixin  (HUD, labels, debug, splash)
    └── pygame_view.py     – PygameDrivingView (this file – main loop)
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

import pygame

from sim.simulation import Simulation, SimulationSnapshot
from sim.vehicle import Intent
from sim.viewpoints import viewpoints

from .constants import ViewConstants
from .draw_scene import SceneRenderer, build_static_geometry
from .helpers import camera_for, draw_alpha_rect, load_font, viewport_layout
from .hud import HudRenderer
from .types import ViewportRect

log = logging.getLogger("pygame_view")

_ARROW_INTENTS = {
    pygame.K_UP: Intent.FORWARD,
    pygame.K_DOWN: Intent.BACKWARD,
    pygame.K_LEFT: Intent.TURN_LEFT,
    pygame.K_RIGHT: Intent.TURN_RIGHT,
}


class PygameDrivingView(
    ViewConstants,
    SceneRenderer,
    HudRenderer,
):
    """Four-viewport driving window powered by Pygame.

    Inherits drawing logic from focused mixin modules so each file
    stays small and single-purpose.  The simulation advances in fixed
    ticks of ``policy.tick_ms``; rendering never mutates it.
    """

    def __init__(self, sim: Simulation, width: int = 1300, height: int = 800,
                 fps: int = 60, title: str = "Traffic Simulation"):
        self.sim = sim
        self.width = width
        self.height = height
        self.fps = fps
        self.title = title

        self.screen: Optional[pygame.Surface] = None
        self.clock: Optional[pygame.time.Clock] = None
        self.font_small: Optional[pygame.font.Font] = None
        self.font_tiny: Optional[pygame.font.Font] = None
        self.font_title: Optional[pygame.font.Font] = None

        self.layout: Dict[str, ViewportRect] = viewport_layout(width, height)
        self.static_geometry = build_static_geometry(
            self.ROAD_COLOR, self.CENTERLINE_COLOR, self.LANE_DASH_COLOR
        )
        self.time_seconds = 0.0
        self._tick_accumulator_ms = 0

        # UI state
        self.paused = False
        self.show_debug = False
        self.show_splash = True
        self._flash_until = 0.0

    # ------------------------------------------------------------------ #
    #  Resize                                                              #
    # ------------------------------------------------------------------ #
    def _handle_resize(self, new_w: int, new_h: int) -> None:
        self.width = max(self.MIN_WINDOW_W, new_w)
        self.height = max(self.MIN_WINDOW_H, new_h)
        self.layout = viewport_layout(self.width, self.height)
        self.screen = pygame.display.set_mode(
            (self.width, self.height), pygame.RESIZABLE
        )

    # ------------------------------------------------------------------ #
    #  Input                                                               #
    # ------------------------------------------------------------------ #
    def _handle_key(self, key: int, pressed: bool) -> bool:
        """Apply one key event; returns False when the window should close."""
        if key in _ARROW_INTENTS:
            if pressed:
                self.sim.press(_ARROW_INTENTS[key])
            else:
                self.sim.release(_ARROW_INTENTS[key])
            return True
        if not pressed:
            return True
        if key == pygame.K_ESCAPE:
            return False
        if key == pygame.K_r:
            self.sim.reset()
            self._flash_until = self.time_seconds + self.HUD_BLINK_MS / 1000.0
            log.info("car reset to home position")
        elif key == pygame.K_b:
            self.sim.brake()
        elif key == pygame.K_SPACE:
            self.paused = not self.paused
            log.info("simulation %s", "paused" if self.paused else "resumed")
        elif key == pygame.K_F3:
            self.show_debug = not self.show_debug
        return True

    # ------------------------------------------------------------------ #
    #  Fixed-tick driver                                                   #
    # ------------------------------------------------------------------ #
    def _advance(self, elapsed_ms: int) -> SimulationSnapshot:
        tick_ms = self.sim.policy.tick_ms
        self._tick_accumulator_ms += elapsed_ms
        ticks = min(self._tick_accumulator_ms // tick_ms, self.MAX_TICKS_PER_FRAME)
        if ticks == self.MAX_TICKS_PER_FRAME:
            # Drop the backlog after a long stall instead of fast-forwarding.
            self._tick_accumulator_ms = 0
        else:
            self._tick_accumulator_ms -= ticks * tick_ms
        return self.sim.advance(ticks)

    # ------------------------------------------------------------------ #
    #  Frame                                                               #
    # ------------------------------------------------------------------ #
    def _draw_frame(self, snapshot: SimulationSnapshot, delta_time: float) -> None:
        self.screen.fill(self.BG_COLOR)
        views = viewpoints(snapshot)
        for name, rect in self.layout.items():
            camera = camera_for(views[name], rect)
            self.screen.set_clip(pygame.Rect(rect.as_tuple()))
            self.draw_scene(self.screen, camera, snapshot, snapshot.trees)
        self.screen.set_clip(None)

        self.draw_viewport_frames(self.screen, self.layout)
        self.draw_hud(self.screen, snapshot, self.layout["main"].y - self.HUD_BAND_PX)

        if self.show_debug:
            main = self.layout["main"]
            self._draw_debug_overlay(self.screen, snapshot, delta_time,
                                     main.x + 8, main.y + 24)
        if self.paused:
            self._draw_pause_banner(self.screen)
        if self.time_seconds < self._flash_until:
            draw_alpha_rect(self.screen, (255, 255, 255, 40),
                            pygame.Rect(0, 0, self.width, self.height))

    # ------------------------------------------------------------------ #
    #  Main loop                                                           #
    # ------------------------------------------------------------------ #
    def run(self) -> None:
        pygame.init()
        try:
            pygame.display.set_caption(self.title)
            self.screen = pygame.display.set_mode(
                (self.width, self.height), pygame.RESIZABLE
            )
            self.clock = pygame.time.Clock()
            self.font_small = load_font(16, bold=False)
            self.font_tiny = load_font(12, bold=False)
            self.font_title = load_font(28, bold=True)
            log.info("window opened at %dx%d", self.width, self.height)

            running = True
            while running:
                elapsed_ms = self.clock.tick(self.fps)
                delta_time = elapsed_ms / 1000.0
                self.time_seconds += delta_time

                # ---- events --------------------------------------------- #
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.VIDEORESIZE:
                        self._handle_resize(event.w, event.h)
                    elif event.type == pygame.KEYDOWN:
                        if self.show_splash:
                            self.show_splash = False
                            continue
                        running = self._handle_key(event.key, True) and running
                    elif event.type == pygame.KEYUP:
                        self._handle_key(event.key, False)

                # ---- splash --------------------------------------------- #
                if self.show_splash:
                    self.screen.fill(self.HUD_BG_COLOR)
                    self._draw_splash(self.screen, self.time_seconds)
                    pygame.display.flip()
                    continue

                # ---- simulation tick ------------------------------------ #
                if self.paused:
                    snapshot = self.sim.snapshot()
                else:
                    snapshot = self._advance(elapsed_ms)

                # ---- render --------------------------------------------- #
                self._draw_frame(snapshot, delta_time)
                pygame.display.flip()
        finally:
            pygame.quit()
            log.info("window closed")


# ---------------------------------------------------------------------- #
#  Convenience entry point                                                 #
# ---------------------------------------------------------------------- #
def run_pygame_view(
    sim: Simulation,
    width: int = 1300,
    height: int = 800,
    fps: int = 60,
    title: str = "Traffic Simulation",
) -> None:
    view = PygameDrivingView(sim=sim, width=width, height=height, fps=fps, title=title)
    view.run()


if __name__ == "__main__":
    raise SystemExit(
        "pygame_view.py needs a Simulation. Run `python main.py` "
        "or call run_pygame_view(your_sim)."
    )
