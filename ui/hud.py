#!/usr/bin/env python3
"""HUD line, viewport labels, debug overlay, splash screen, and pause banner (mixin)."""

from __future__ import annotations

from typing import Mapping

import pygame

from ui.helpers import draw_alpha_rect, hud_line, render_text, signal_line
from ui.types import ViewportRect

_VIEW_LABELS = {
    "main": "Third Person",
    "left": "South-West",
    "top": "Top Down",
    "right": "South-East",
}

_KEY_HELP = (
    ("UP", "accelerate"),
    ("DOWN", "reverse"),
    ("LT/RT", "steer"),
    ("B", "brake"),
    ("R", "reset car"),
    ("SPACE", "pause"),
    ("F3", "debug overlay"),
    ("ESC", "quit"),
)


class HudRenderer:
    """Mixin that draws every overlay / HUD element."""

    # ------------------------------------------------------------------ #
    #  Main HUD line                                                       #
    # ------------------------------------------------------------------ #

    def draw_hud(self, surface: pygame.Surface, snapshot, band_top: int) -> None:
        if self.font_small is None:
            return
        band = pygame.Rect(0, band_top, self.width, self.HUD_BAND_PX)
        pygame.draw.rect(surface, self.HUD_BG_COLOR, band)
        render_text(surface, self.font_small, hud_line(snapshot),
                    (10, band.y + 6), self.HUD_TEXT_COLOR)
        render_text(surface, self.font_small, signal_line(snapshot),
                    (10, band.y + 26), self.HUD_TEXT_COLOR)

    def draw_viewport_frames(self, surface: pygame.Surface,
                             layout: Mapping[str, ViewportRect]) -> None:
        for name, rect in layout.items():
            pygame.draw.rect(surface, self.VIEWPORT_BORDER_COLOR, rect.as_tuple(), width=2)
            if self.font_tiny is not None:
                render_text(surface, self.font_tiny, _VIEW_LABELS.get(name, name),
                            (rect.x + 6, rect.y + 4), self.HUD_TEXT_COLOR)

    # ------------------------------------------------------------------ #
    #  Splash screen                                                       #
    # ------------------------------------------------------------------ #

    def _draw_splash(self, surface: pygame.Surface, elapsed_s: float) -> None:
        if self.font_title is None or self.font_small is None:
            return
        cx, cy = self.width // 2, self.height // 2
        render_text(surface, self.font_title, self.title.upper(),
                    (cx, cy - 40), self.HUD_TEXT_COLOR, anchor="center")
        blink_on = int(elapsed_s * 1000 / self.HUD_BLINK_MS) % 2 == 0
        if blink_on:
            render_text(surface, self.font_small, "press any key to drive",
                        (cx, cy), (170, 170, 170), anchor="center")
        if self.font_tiny is None:
            return
        y = cy + 40
        for keys, action in _KEY_HELP:
            render_text(surface, self.font_tiny, f"{keys:<8}{action}",
                        (cx, y), (120, 120, 150), anchor="center")
            y += 16

    # ------------------------------------------------------------------ #
    #  Debug overlay                                                       #
    # ------------------------------------------------------------------ #

    def _draw_debug_overlay(self, surface: pygame.Surface, snapshot,
                            dt: float, x: int, y: int) -> None:
        if self.font_tiny is None:
            return
        fps = self.clock.get_fps() if self.clock else 0.0
        ox, oy, oz = snapshot.camera_offset
        rows = (
            ("fps", f"{fps:.1f} ({dt * 1000:.0f} ms)"),
            ("tick", str(snapshot.tick_count)),
            ("signal", f"{snapshot.signal_counter_ms} ms"),
            ("camera", f"({ox:.1f}, {oy:.1f}, {oz:.1f})"),
            ("trees", str(len(snapshot.trees))),
        )
        draw_alpha_rect(surface, (0, 0, 0, 140),
                        pygame.Rect(x - 4, y - 4, 190, len(rows) * 14 + 8))
        for label, value in rows:
            render_text(surface, self.font_tiny, f"{label:<7}{value}",
                        (x, y), (0, 255, 127))
            y += 14

    # ------------------------------------------------------------------ #
    #  Pause banner                                                        #
    # ------------------------------------------------------------------ #

    def _draw_pause_banner(self, surface: pygame.Surface) -> None:
        draw_alpha_rect(surface, (0, 0, 0, 100),
                        pygame.Rect(0, 0, self.width, self.height))
        if self.font_title is not None:
            render_text(surface, self.font_title, "PAUSED",
                        (self.width // 2, self.height // 2), (220, 220, 220),
                        anchor="center")
