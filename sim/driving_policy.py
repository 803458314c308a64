#!/usr/bin/env python3
"""
sim/driving_policy.py
=====================
Tunable vehicle, signal and scenery parameters for the intersection
drive.  Every constant lives in the frozen :class:`DrivingPolicy`
dataclass so that experiments can swap policies without touching code.

Also provides two derived-timing helpers:

* :func:`cycle_length_ms`: full signal cycle length.
* :func:`turn_rate_deg`: speed-dependent turn rate before easing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class DrivingPolicy:
    """Immutable bag of every tunable simulation parameter.

    Groups: vehicle limits, turning, chase camera, tick and signal
    timing, tree placement, home pose.
    """

    # ── Vehicle limits ────────────────────────────────────────────────────
    max_speed: float = 0.5
    """Maximum forward speed (world units per tick).  Reverse is capped at half."""

    acceleration: float = 0.01
    """Speed gained (or lost, in reverse) per tick while a drive key is held."""

    deceleration: float = 0.005
    """Coasting decay per tick toward zero when no drive key is held."""

    # ── Turning ───────────────────────────────────────────────────────────
    min_turn_speed: float = 2.0
    """Turn rate (degrees per tick) at full speed."""

    max_turn_speed: float = 6.0
    """Turn rate (degrees per tick) when stationary."""

    turn_acceleration: float = 0.2
    """Turn-interpolation gain per tick while a turn key is held."""

    turn_deceleration: float = 0.1
    """Turn-interpolation loss per tick once both turn keys are released."""

    turn_speed_multiplier: float = 1.0
    """Global scale on the blended turn rate."""

    # ── Chase camera ──────────────────────────────────────────────────────
    local_camera_offset: Tuple[float, float, float] = (0.0, 0.0, -6.0)
    """Camera displacement in the car's own frame (6 units behind)."""

    # ── Tick / signal timing ──────────────────────────────────────────────
    tick_ms: int = 20
    """Duration of one simulation tick in milliseconds."""

    green_ms: int = 5000
    """Green time for the north–south axis."""

    yellow_ms: int = 1000
    """Yellow time, shared by both axes."""

    red_ms: int = 6000
    """Red time for the north–south axis (the west–east green + yellow)."""

    # ── Tree placement ────────────────────────────────────────────────────
    tree_spacing: float = 50.0
    """Grid pitch used to walk each quadrant."""

    tree_region_start: float = 20.0
    """Inner edge of every quadrant (distance from each road axis)."""

    tree_region_end: float = 1000.0
    """Outer edge of every quadrant (exclusive)."""

    tree_jitter: int = 10
    """Half-width of the integer jitter applied to each grid point."""

    road_clearance: float = 15.0
    """Minimum distance from either road centreline."""

    traffic_light_min_distance: float = 20.0
    """Minimum straight-line distance from any traffic-light post."""

    tree_scales: Tuple[float, ...] = (0.8, 0.9, 1.0, 1.1)
    """Discrete uniform-scale multipliers a tree may draw from."""

    # ── Home pose ─────────────────────────────────────────────────────────
    home_position: Tuple[float, float, float] = (3.0, 0.0, 45.0)
    """Vehicle position at start-up and after a reset."""

    home_heading: float = 180.0
    """Vehicle heading at start-up and after a reset (facing south)."""

    def __post_init__(self) -> None:
        if self.max_speed <= 0.0:
            raise ValueError(f"max_speed must be positive, got {self.max_speed}")
        if self.acceleration <= 0.0 or self.deceleration <= 0.0:
            raise ValueError("acceleration and deceleration must be positive")
        if self.min_turn_speed > self.max_turn_speed:
            raise ValueError(
                f"min_turn_speed ({self.min_turn_speed}) exceeds "
                f"max_turn_speed ({self.max_turn_speed})"
            )
        if self.turn_acceleration <= 0.0 or self.turn_deceleration <= 0.0:
            raise ValueError("turn_acceleration and turn_deceleration must be positive")
        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {self.tick_ms}")
        if min(self.green_ms, self.yellow_ms, self.red_ms) <= 0:
            raise ValueError("signal durations must all be positive")
        if self.yellow_ms > self.red_ms:
            # The west–east yellow is carved out of the north–south red.
            raise ValueError(
                f"yellow_ms ({self.yellow_ms}) does not fit inside red_ms ({self.red_ms})"
            )
        if self.tree_spacing <= 0.0:
            raise ValueError(f"tree_spacing must be positive, got {self.tree_spacing}")
        if self.tree_jitter < 0:
            raise ValueError(f"tree_jitter must not be negative, got {self.tree_jitter}")
        if not self.tree_scales:
            raise ValueError("tree_scales must not be empty")
        if len(self.local_camera_offset) != 3 or len(self.home_position) != 3:
            raise ValueError("camera offset and home position need three components")


def cycle_length_ms(policy: DrivingPolicy) -> int:
    """Full signal cycle: green + yellow + red."""
    return policy.green_ms + policy.yellow_ms + policy.red_ms


def turn_rate_deg(speed: float, policy: DrivingPolicy) -> float:
    """Turn rate (degrees per tick) for *speed*, before turn easing.

    Blends linearly from ``max_turn_speed`` when stationary down to
    ``min_turn_speed`` at full forward speed, then applies the global
    multiplier.

    Parameters
    ----------
    speed : float
        Signed vehicle speed; only its magnitude matters.
    policy : DrivingPolicy
        Source of the turn limits and multiplier.
    """
    speed_factor = abs(speed) / policy.max_speed
    rate = policy.min_turn_speed + (policy.max_turn_speed - policy.min_turn_speed) * (
        1.0 - speed_factor
    )
    return rate * policy.turn_speed_multiplier
