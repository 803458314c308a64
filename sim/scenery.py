#!/usr/bin/env python3
"""
sim/scenery.py
==============
Fixed intersection layout and procedural roadside trees.

The layout (traffic-light posts, surveillance cameras, road dimensions)
is static data the renderer draws as-is.  Trees are seeded once by
:func:`place_trees`, an acceptance / rejection sampler over a jittered
grid in the four quadrants around the crossing roads.  Overlapping
trees are allowed.
"""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from sim.driving_policy import DrivingPolicy
from sim.physics import planar_distance_sq

log = logging.getLogger("scenery")

# ── Road geometry (world units) ──────────────────────────────────────────────
ROAD_HALF_WIDTH: float = 10.0
LANE_DIVIDER_OFFSET: float = 5.0
DASH_LENGTH: float = 3.0
DASH_GAP: float = 9.0
WORLD_EXTENT: float = 1000.0


@dataclass(frozen=True)
class TrafficLightPost:
    """A signal head at one corner of the intersection.

    *axis* is ``"A"`` (north–south) or ``"B"`` (west–east) and selects
    which signal colour the post shows.
    """

    name: str
    x: float
    z: float
    yaw: float
    axis: str


@dataclass(frozen=True)
class SurveillanceCamera:
    name: str
    x: float
    z: float
    yaw: float


@dataclass(frozen=True)
class TreeInstance:
    x: float
    z: float
    rotation: float
    scale: float


TRAFFIC_LIGHT_POSTS: Tuple[TrafficLightPost, ...] = (
    TrafficLightPost("NE", 10.0, -10.5, 0.0, "A"),
    TrafficLightPost("SW", -10.0, 10.5, 180.0, "A"),
    TrafficLightPost("SE", 10.0, 10.5, -90.0, "B"),
    TrafficLightPost("NW", -10.0, -10.5, 90.0, "B"),
)

SURVEILLANCE_CAMERAS: Tuple[SurveillanceCamera, ...] = (
    SurveillanceCamera("NE", 10.0, -10.0, -45.0),
    SurveillanceCamera("SW", -10.0, 10.0, 135.0),
    SurveillanceCamera("SE", 10.0, 10.0, -135.0),
    SurveillanceCamera("NW", -10.0, -10.0, 45.0),
)


def is_near_traffic_light(
    x: float,
    z: float,
    policy: DrivingPolicy,
    posts: Sequence[TrafficLightPost] = TRAFFIC_LIGHT_POSTS,
) -> bool:
    """True if *(x, z)* is strictly closer than the minimum distance to any post."""
    for post in posts:
        if math.hypot(x - post.x, z - post.z) < policy.traffic_light_min_distance:
            return True
    return False


def is_valid_tree_position(
    x: float,
    z: float,
    policy: DrivingPolicy,
    posts: Sequence[TrafficLightPost] = TRAFFIC_LIGHT_POSTS,
) -> bool:
    """Road clearance first, then traffic-light distance."""
    if abs(x) < policy.road_clearance or abs(z) < policy.road_clearance:
        return False
    if is_near_traffic_light(x, z, policy, posts):
        return False
    return True


def _grid(start: float, end: float, step: float) -> Iterable[float]:
    value = start
    while value < end:
        yield value
        value += step


def _jitter(rng: random.Random, half_width: int) -> int:
    if half_width == 0:
        return 0
    return rng.randrange(2 * half_width) - half_width


def _quadrant_bounds(quadrant: int, policy: DrivingPolicy) -> Tuple[float, float, float, float]:
    inner = policy.tree_region_start
    outer = policy.tree_region_end
    x_start, x_end = (inner, outer) if quadrant & 1 else (-outer, -inner)
    z_start, z_end = (inner, outer) if quadrant & 2 else (-outer, -inner)
    return x_start, x_end, z_start, z_end


def place_trees(
    policy: DrivingPolicy,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
    posts: Sequence[TrafficLightPost] = TRAFFIC_LIGHT_POSTS,
) -> Tuple[TreeInstance, ...]:
    """Scatter trees over the four quadrants outside the road footprint.

    Each grid point is jittered by an integer in
    ``[-tree_jitter, tree_jitter - 1]`` on both axes (no jitter, and no
    draw, when ``tree_jitter`` is 0) and kept only if
    :func:`is_valid_tree_position` accepts it.  Kept trees draw a whole
    rotation in ``[0, 359]`` and a scale from ``policy.tree_scales``.

    Parameters
    ----------
    policy : DrivingPolicy
        Spacing, region, clearance and scale settings.
    rng : random.Random, optional
        Generator to draw from.  Takes precedence over *seed*.
    seed : int, optional
        Seed for a fresh generator when *rng* is not given.
    posts : sequence of TrafficLightPost
        Anchors for the traffic-light distance rule.

    Returns
    -------
    tuple of TreeInstance
        Accepted trees in quadrant / row / column order.
    """
    if rng is None:
        rng = random.Random(seed)

    jitter = policy.tree_jitter
    trees: List[TreeInstance] = []
    rejected = 0
    for quadrant in range(4):
        x_start, x_end, z_start, z_end = _quadrant_bounds(quadrant, policy)
        for gx in _grid(x_start, x_end, policy.tree_spacing):
            for gz in _grid(z_start, z_end, policy.tree_spacing):
                tx = gx + _jitter(rng, jitter)
                tz = gz + _jitter(rng, jitter)
                if not is_valid_tree_position(tx, tz, policy, posts):
                    rejected += 1
                    continue
                trees.append(TreeInstance(
                    x=tx,
                    z=tz,
                    rotation=float(rng.randrange(360)),
                    scale=rng.choice(policy.tree_scales),
                ))

    log.info("placed %d trees (%d candidates rejected)", len(trees), rejected)
    return tuple(trees)


def back_to_front(trees: Iterable[TreeInstance]) -> List[TreeInstance]:
    """New list ordered farthest-from-origin first, for transparent drawing."""
    return sorted(trees, key=lambda t: planar_distance_sq(t.x, t.z), reverse=True)
