#!/usr/bin/env python3
"""
sim/vehicle.py
==============
The user-driven car: latched control intents plus the per-tick
kinematics step.

The car owns its position / heading / speed and the ease-in factor that
ramps turning authority up and down.  :meth:`VehicleState.step` is the
only place these change during a run; :meth:`VehicleState.reset` and
:meth:`VehicleState.brake` are the two one-shot commands.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from sim.driving_policy import DrivingPolicy, turn_rate_deg
from sim.physics import (
    Vector3,
    clamp,
    heading_label,
    heading_vector,
    rotate_about_y,
    wrap_heading,
)


class Intent(enum.Enum):
    """A held control input."""

    FORWARD = "forward"
    BACKWARD = "backward"
    TURN_LEFT = "turn_left"
    TURN_RIGHT = "turn_right"

    @property
    def is_turn(self) -> bool:
        return self in (Intent.TURN_LEFT, Intent.TURN_RIGHT)


@dataclass
class InputLatch:
    """Four boolean intents set on key-down and cleared on key-up."""

    forward: bool = False
    backward: bool = False
    turn_left: bool = False
    turn_right: bool = False

    def set(self, intent: Intent, active: bool) -> None:
        setattr(self, intent.value, bool(active))

    def is_set(self, intent: Intent) -> bool:
        return getattr(self, intent.value)

    @property
    def turning(self) -> bool:
        return self.turn_left or self.turn_right

    def clear(self) -> None:
        self.forward = False
        self.backward = False
        self.turn_left = False
        self.turn_right = False

    def active(self) -> List[str]:
        """Names of the intents currently held."""
        return [i.value for i in Intent if self.is_set(i)]


@dataclass
class VehicleState:
    """Pose, speed and intents of the controlled car.

    Attributes
    ----------
    position : list of float
        ``[x, y, z]`` in world units; *y* never changes.
    heading : float
        Degrees in ``[0, 360)``; 0 faces +z, 180 faces −z.
    speed : float
        Signed world units per tick, within ``[-max_speed / 2, max_speed]``.
    turn_interpolation : float
        Ease-in factor in ``[0, 1]`` scaling the turn rate.
    intents : InputLatch
        Held control inputs.
    camera_offset : tuple of float
        Chase-camera offset in world space, derived from *heading*.
    """

    policy: DrivingPolicy = field(default_factory=DrivingPolicy, repr=False)
    position: List[float] = field(default_factory=list)
    heading: Optional[float] = None
    speed: float = 0.0
    turn_interpolation: float = 0.0
    intents: InputLatch = field(default_factory=InputLatch)
    heading_label: str = "N"
    camera_offset: Vector3 = (0.0, 0.0, 0.0)

    def __post_init__(self) -> None:
        if not self.position:
            self.position = list(self.policy.home_position)
        if self.heading is None:
            self.heading = self.policy.home_heading
        self.heading = wrap_heading(self.heading)
        self.heading_label = heading_label(self.heading)
        self.update_camera_offset()

    # ── commands ──────────────────────────────────────────────────────────
    def reset(self) -> None:
        """Return to the home pose, stationary, with every intent released."""
        self.position = list(self.policy.home_position)
        self.heading = wrap_heading(self.policy.home_heading)
        self.speed = 0.0
        self.turn_interpolation = 0.0
        self.intents.clear()
        self.heading_label = heading_label(self.heading)
        self.update_camera_offset()

    def brake(self) -> None:
        """Stop dead and release both drive intents; steering is kept."""
        self.speed = 0.0
        self.intents.forward = False
        self.intents.backward = False

    def update_camera_offset(self) -> None:
        self.camera_offset = rotate_about_y(self.policy.local_camera_offset, self.heading)

    # ── per-tick kinematics ───────────────────────────────────────────────
    def step(self) -> None:
        """Advance one tick: speed, turn easing, heading, then position."""
        p = self.policy
        # Travel uses the heading the tick started with.
        dx, dz = heading_vector(self.heading)

        if self.intents.forward:
            self.speed = clamp(self.speed + p.acceleration, -p.max_speed / 2.0, p.max_speed)
        elif self.intents.backward:
            self.speed = clamp(self.speed - p.acceleration, -p.max_speed / 2.0, p.max_speed)
        elif self.speed > 0.0:
            self.speed = max(0.0, self.speed - p.deceleration)
        elif self.speed < 0.0:
            self.speed = min(0.0, self.speed + p.deceleration)

        if self.intents.turning:
            self.turn_interpolation = clamp(self.turn_interpolation + p.turn_acceleration, 0.0, 1.0)
        else:
            self.turn_interpolation = clamp(self.turn_interpolation - p.turn_deceleration, 0.0, 1.0)

        if self.turn_interpolation > 0.0:
            turn_amount = turn_rate_deg(self.speed, p) * self.turn_interpolation
            if self.intents.turn_left:
                self.heading += turn_amount
            if self.intents.turn_right:
                self.heading -= turn_amount
            self.heading = wrap_heading(self.heading)

        self.position[0] += self.speed * dx
        self.position[2] += self.speed * dz

        self.heading_label = heading_label(self.heading)
        self.update_camera_offset()

    # ── serialisation ─────────────────────────────────────────────────────
    def as_dict(self) -> Dict[str, Any]:
        return {
            "x": self.position[0],
            "y": self.position[1],
            "z": self.position[2],
            "heading": self.heading,
            "heading_label": self.heading_label,
            "speed": self.speed,
            "turn_interpolation": self.turn_interpolation,
            "intents": self.intents.active(),
        }
