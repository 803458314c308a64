"""
ui/types.py
===========
Lightweight data containers used across every UI module.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

ColorRGB = Tuple[int, int, int]
ColorRGBA = Tuple[int, int, int, int]


@dataclass
class ViewportRect:
    """Screen-space rectangle a viewport draws into."""
    name: str
    x: int
    y: int
    w: int
    h: int

    @property
    def center(self) -> Tuple[float, float]:
        return self.x + self.w / 2, self.y + self.h / 2

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return self.x, self.y, self.w, self.h


@dataclass
class Camera:
    """Maps ground-plane world coordinates *(x, z)* to screen pixels.

    *forward* is the world direction drawn towards the top of the
    viewport; screen-right is *forward* turned 90° clockwise seen from
    above, matching a camera whose up vector is +y.
    """
    rect: ViewportRect
    world_x: float = 0.0
    world_z: float = 0.0
    forward: Tuple[float, float] = (0.0, -1.0)
    zoom: float = 3.0

    def _basis(self) -> np.ndarray:
        fx, fz = self.forward
        # columns: screen x, screen y (down)
        return np.array([[-fz, -fx], [fx, -fz]], dtype=float) * self.zoom

    def world_to_screen(self, wx: float, wz: float) -> Tuple[float, float]:
        sx, sy = self.transform(np.array([[wx, wz]], dtype=float))[0]
        return float(sx), float(sy)

    def transform(self, points: np.ndarray) -> np.ndarray:
        """Project an ``(N, 2)`` array of *(x, z)* points to screen pixels."""
        rel = np.asarray(points, dtype=float) - (self.world_x, self.world_z)
        return rel @ self._basis() + self.rect.center

    def visible(self, screen_points: np.ndarray, margin: float = 0.0) -> bool:
        """True if the bounding box of *screen_points* overlaps the viewport."""
        lo = screen_points.min(axis=0)
        hi = screen_points.max(axis=0)
        r = self.rect
        return not (
            hi[0] < r.x - margin or lo[0] > r.x + r.w + margin
            or hi[1] < r.y - margin or lo[1] > r.y + r.h + margin
        )


def as_points(screen_points: np.ndarray) -> Sequence[Tuple[float, float]]:
    """Numpy rows → plain tuples for ``pygame.draw``."""
    return [tuple(p) for p in screen_points.tolist()]
