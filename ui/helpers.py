"""
ui/helpers.py
=============
Pure utility functions shared across UI modules:
viewport layout, camera construction, HUD text, lamp selection and
alpha-surface drawing.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

import pygame

from sim.physics import heading_vector
from sim.signals import SignalColor
from sim.viewpoints import Viewpoint
from ui.constants import ViewConstants
from ui.types import Camera, ViewportRect

# ── Layout ───────────────────────────────────────────────────────────────────

def viewport_layout(width: int, height: int) -> Dict[str, ViewportRect]:
    """Main view along the bottom, three small views along the top.

    Small views are a quarter of the window in each dimension: left
    (south-west) at the left edge, top-down centred, right (south-east)
    at the right edge.  A HUD band separates them from the main view.
    """
    s_w = width // ViewConstants.SMALL_VIEW_DIVISOR
    s_h = height // ViewConstants.SMALL_VIEW_DIVISOR
    main_top = s_h + ViewConstants.HUD_BAND_PX
    return {
        "main": ViewportRect("main", 0, main_top, width, max(1, height - main_top)),
        "left": ViewportRect("left", 0, 0, s_w, s_h),
        "top": ViewportRect("top", (width - s_w) // 2, 0, s_w, s_h),
        "right": ViewportRect("right", width - s_w, 0, s_w, s_h),
    }


def camera_for(view: Viewpoint, rect: ViewportRect) -> Camera:
    """Build the 2D camera that stands in for *view* inside *rect*."""
    fx, fz = view.ground_forward()
    tx, _, tz = view.target
    if view.projection == "orthographic":
        zoom = rect.w / (2.0 * view.extent)
        return Camera(rect, tx, tz, (fx, fz), zoom)
    if view.name == "main":
        ahead = ViewConstants.MAIN_LOOK_AHEAD_M
        return Camera(rect, tx + fx * ahead, tz + fz * ahead, (fx, fz),
                      ViewConstants.MAIN_ZOOM)
    return Camera(rect, tx, tz, (fx, fz), ViewConstants.SIDE_ZOOM)


# ── HUD text ─────────────────────────────────────────────────────────────────

def hud_line(snapshot) -> str:
    """``Speed: 0.00 Direction: 180 Heading: S Position: (3.0, 45.0)``"""
    x, _, z = snapshot.position
    return (
        f"Speed: {snapshot.speed:.2f} "
        f"Direction: {int(snapshot.heading)} "
        f"Heading: {snapshot.heading_label} "
        f"Position: ({x:.1f}, {z:.1f})"
    )


def signal_line(snapshot) -> str:
    return f"N-S: {snapshot.axis_a.value}   W-E: {snapshot.axis_b.value}"


def lamp_states(color: SignalColor) -> Dict[str, bool]:
    """Exactly one lamp of a signal head is lit."""
    return {lamp: lamp == color.value for lamp in ViewConstants.LAMP_ORDER}


# ── Shapes ───────────────────────────────────────────────────────────────────

def oriented_rect(cx: float, cz: float, heading_deg: float,
                  length: float, width: float) -> List[Tuple[float, float]]:
    """World-space corners of a rectangle facing *heading_deg*."""
    fx, fz = heading_vector(heading_deg)
    rx, rz = -fz, fx
    hl, hw = length / 2, width / 2
    return [
        (cx + fx * hl + rx * hw, cz + fz * hl + rz * hw),
        (cx + fx * hl - rx * hw, cz + fz * hl - rz * hw),
        (cx - fx * hl - rx * hw, cz - fz * hl - rz * hw),
        (cx - fx * hl + rx * hw, cz - fz * hl + rz * hw),
    ]


# ── Alpha drawing helpers ────────────────────────────────────────────────────

def draw_alpha_rect(
    target: pygame.Surface,
    color: Tuple[int, ...],
    rect: pygame.Rect,
    border_radius: int = 0,
) -> None:
    """Draw a semi-transparent rectangle (colour tuple with 4 channels)."""
    tmp = pygame.Surface((rect.w, rect.h), pygame.SRCALPHA)
    pygame.draw.rect(tmp, color, (0, 0, rect.w, rect.h), border_radius=border_radius)
    target.blit(tmp, rect.topleft)


# ── Text helper ──────────────────────────────────────────────────────────────

def load_font(size: int, bold: bool = False) -> pygame.font.Font:
    return pygame.font.SysFont("consolas,dejavusansmono,monospace", size, bold=bold)


def render_text(
    surface: pygame.Surface,
    font: pygame.font.Font,
    text: str,
    pos: Tuple[int, int],
    color: Tuple[int, ...] = (230, 230, 235),
    anchor: str = "topleft",
) -> pygame.Rect:
    """Render text with flexible *anchor* ('topleft', 'center', 'midright' …)."""
    img = font.render(text, True, color)
    rect = img.get_rect(**{anchor: pos})
    surface.blit(img, rect)
    return rect
