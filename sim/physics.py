#!/usr/bin/env python3
"""
sim/physics.py
==============
Low-level heading and vector helpers used by :mod:`sim.vehicle`,
:mod:`sim.viewpoints` and :mod:`sim.scenery`.

Keeping these in a separate module avoids circular imports and makes unit
testing straightforward.

Coordinate convention: the ground plane is *x* / *z* and *y* is up.
A heading of 0° ("N") moves along +z, 90° ("E") along +x.
"""

from __future__ import annotations

import math
from typing import Tuple

Vector3 = Tuple[float, float, float]


def wrap_heading(degrees: float) -> float:
    """Renormalise *degrees* into ``[0, 360)``."""
    wrapped = degrees % 360.0
    # Tiny negatives round up to exactly 360.0 under float modulo.
    if wrapped >= 360.0:
        wrapped -= 360.0
    return wrapped


def heading_label(degrees: float) -> str:
    """Compass tag for a heading, using 90° sectors centred on N/E/S/W.

    N = [315, 360) ∪ [0, 45), E = [45, 135), S = [135, 225), W = [225, 315).
    """
    if degrees >= 315.0 or degrees < 45.0:
        return "N"
    if degrees < 135.0:
        return "E"
    if degrees < 225.0:
        return "S"
    return "W"


def heading_vector(degrees: float) -> Tuple[float, float]:
    """Unit ground-plane direction ``(dx, dz)`` for a heading.

    Sine drives east–west, cosine drives north–south.
    """
    rad = math.radians(degrees)
    return math.sin(rad), math.cos(rad)


def rotate_about_y(vector: Vector3, degrees: float) -> Vector3:
    """Rotate *vector* about the vertical axis by *degrees*.

    Same handedness as ``glRotatef(degrees, 0, 1, 0)``, so a local
    offset of ``(0, 0, -6)`` rotated by the vehicle heading always sits
    behind the vehicle.
    """
    x, y, z = vector
    rad = math.radians(degrees)
    c = math.cos(rad)
    s = math.sin(rad)
    return (x * c + z * s, y, -x * s + z * c)


def planar_distance_sq(x: float, z: float) -> float:
    """Squared ground-plane distance of *(x, z)* from the origin."""
    return x * x + z * z


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))
