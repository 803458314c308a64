#!/usr/bin/env python3
"""Visual constants shared across all renderers."""

from __future__ import annotations

from typing import Dict, Sequence, Tuple

from .types import ColorRGB


class ViewConstants:
    """Mixin providing every visual / layout constant."""

    BG_COLOR: ColorRGB = (128, 128, 255)
    GRASS_COLOR: ColorRGB = (0, 178, 0)
    ROAD_COLOR: ColorRGB = (51, 51, 51)
    CENTERLINE_COLOR: ColorRGB = (255, 255, 0)
    LANE_DASH_COLOR: ColorRGB = (255, 255, 255)
    VIEWPORT_BORDER_COLOR: ColorRGB = (20, 20, 40)
    HUD_BG_COLOR: ColorRGB = (22, 22, 22)
    HUD_TEXT_COLOR: ColorRGB = (255, 255, 255)

    TREE_TRUNK_COLOR: ColorRGB = (140, 69, 18)
    TREE_CANOPY_COLORS: Sequence[ColorRGB] = (
        (33, 140, 33),
        (40, 160, 40),
        (48, 176, 48),
    )
    TREE_CANOPY_RADII: Sequence[float] = (3.0, 2.5, 2.0)
    TREE_TRUNK_RADIUS = 0.5

    CAR_COLOR: ColorRGB = (200, 30, 30)
    CAR_GLASS_COLOR: ColorRGB = (60, 70, 90)
    CAR_LENGTH = 4.1
    CAR_WIDTH = 1.8

    CAMERA_BODY_COLOR: ColorRGB = (170, 170, 170)
    CAMERA_SIZE = 1.2

    LIGHT_HOUSING_COLOR: ColorRGB = (25, 25, 25)
    # lamp → (on colour, off colour)
    LAMP_COLORS: Dict[str, Tuple[ColorRGB, ColorRGB]] = {
        "RED": ((255, 0, 0), (51, 0, 0)),
        "YELLOW": ((255, 255, 0), (51, 51, 0)),
        "GREEN": ((0, 255, 0), (0, 51, 0)),
    }
    LAMP_ORDER: Sequence[str] = ("RED", "YELLOW", "GREEN")
    LAMP_RADIUS_M = 0.6

    # ── Viewport layout ─────────────────────────────────────────────────
    SMALL_VIEW_DIVISOR = 4
    HUD_BAND_PX = 50
    MAIN_ZOOM = 9.0
    MAIN_LOOK_AHEAD_M = 12.0
    SIDE_ZOOM = 3.0
    MIN_WINDOW_W = 640
    MIN_WINDOW_H = 400

    # Tick driver catches up at most this many ticks per frame.
    MAX_TICKS_PER_FRAME = 10
    HUD_BLINK_MS = 500
