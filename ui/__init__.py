#!/usr/bin/env python3

from .types import Camera, ColorRGB, ColorRGBA, ViewportRect
from .constants import ViewConstants
from .draw_scene import SceneRenderer
from .hud import HudRenderer
from .pygame_view import PygameDrivingView, run_pygame_view

__all__ = [
    "Camera",
    "ColorRGB",
    "ColorRGBA",
    "ViewportRect",
    "ViewConstants",
    "SceneRenderer",
    "HudRenderer",
    "PygameDrivingView",
    "run_pygame_view",
]
