#!/usr/bin/env python3
"""
sim/viewpoints.py
=================
Eye / target placement for the four viewports, derived from a
:class:`~sim.simulation.SimulationSnapshot`.

* ``main`` : third-person chase camera behind the car.
* ``right``: south-east angled view orbiting at −45°.
* ``top``  : orthographic view straight down, −z up on screen.
* ``left`` : south-west angled view orbiting at +45°.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Tuple

from sim.physics import Vector3

CHASE_EYE_HEIGHT: float = 2.0
CHASE_TARGET_HEIGHT: float = 1.0
SIDE_DISTANCE: float = 30.0
SIDE_HEIGHT: float = 5.0
SIDE_TARGET_HEIGHT: float = 2.0
RIGHT_SIDE_ANGLE: float = -45.0
LEFT_SIDE_ANGLE: float = 45.0
TOP_HEIGHT: float = 100.0
TOP_HALF_EXTENT: float = 50.0
FIELD_OF_VIEW: float = 45.0

_UP: Vector3 = (0.0, 1.0, 0.0)
_TOP_UP: Vector3 = (0.0, 0.0, -1.0)


@dataclass(frozen=True)
class Viewpoint:
    """One viewport camera.

    *projection* is ``"perspective"`` (``extent`` = vertical FOV in
    degrees) or ``"orthographic"`` (``extent`` = half-width in world
    units).
    """

    name: str
    eye: Vector3
    target: Vector3
    up: Vector3
    projection: str
    extent: float

    def ground_forward(self) -> Tuple[float, float]:
        """Unit ground-plane direction the camera looks along.

        Falls back to the up vector for cameras looking straight down.
        """
        dx = self.target[0] - self.eye[0]
        dz = self.target[2] - self.eye[2]
        length = math.hypot(dx, dz)
        if length < 1e-9:
            return self.up[0], self.up[2]
        return dx / length, dz / length


def _orbit(position: Vector3, angle_deg: float) -> Viewpoint:
    rad = math.radians(angle_deg)
    x, y, z = position
    eye = (x + SIDE_DISTANCE * math.sin(rad), SIDE_HEIGHT, z + SIDE_DISTANCE * math.cos(rad))
    target = (x, y + SIDE_TARGET_HEIGHT, z)
    name = "right" if angle_deg < 0 else "left"
    return Viewpoint(name, eye, target, _UP, "perspective", FIELD_OF_VIEW)


def chase_view(position: Vector3, camera_offset: Vector3) -> Viewpoint:
    x, y, z = position
    ox, oy, oz = camera_offset
    eye = (x + ox, y + oy + CHASE_EYE_HEIGHT, z + oz)
    target = (x, y + CHASE_TARGET_HEIGHT, z)
    return Viewpoint("main", eye, target, _UP, "perspective", FIELD_OF_VIEW)


def top_view(position: Vector3) -> Viewpoint:
    x, _, z = position
    return Viewpoint(
        "top", (x, TOP_HEIGHT, z), (x, 0.0, z), _TOP_UP, "orthographic", TOP_HALF_EXTENT,
    )


def viewpoints(snapshot) -> Dict[str, Viewpoint]:
    """All four viewport cameras for *snapshot*, keyed by name."""
    position = snapshot.position
    return {
        "main": chase_view(position, snapshot.camera_offset),
        "right": _orbit(position, RIGHT_SIDE_ANGLE),
        "top": top_view(position),
        "left": _orbit(position, LEFT_SIDE_ANGLE),
    }
