#!/usr/bin/env python3
"""
ui/draw_scene.py
================
Renders the intersection scene into one viewport: grass, the two
crossing roads with centrelines and dashed lane dividers, traffic-light
heads, surveillance cameras, trees and the car.

All methods are *pure renderers*: they read a snapshot and draw to a
surface through a :class:`~ui.types.Camera`.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

import numpy as np
import pygame

from sim.physics import heading_vector
from sim.scenery import (
    DASH_GAP,
    DASH_LENGTH,
    LANE_DIVIDER_OFFSET,
    ROAD_HALF_WIDTH,
    SURVEILLANCE_CAMERAS,
    TRAFFIC_LIGHT_POSTS,
    WORLD_EXTENT,
    TreeInstance,
    back_to_front,
)
from ui.helpers import lamp_states, oriented_rect
from ui.types import Camera, ColorRGB, as_points

_CENTERLINE_HALF_W = 0.1
_DIVIDER_HALF_W = 0.1

Polygon = Tuple[ColorRGB, np.ndarray]


def _quad(x0: float, z0: float, x1: float, z1: float) -> np.ndarray:
    return np.array([(x0, z0), (x1, z0), (x1, z1), (x0, z1)], dtype=float)


def build_static_geometry(road: ColorRGB, centerline: ColorRGB,
                          dash: ColorRGB) -> List[Polygon]:
    """Road surfaces and markings as world-space polygons, drawn once per view."""
    e, h = WORLD_EXTENT, ROAD_HALF_WIDTH
    polys: List[Polygon] = [
        (road, _quad(-h, -e, h, e)),    # north–south road
        (road, _quad(-e, -h, e, h)),    # west–east road
    ]

    c = _CENTERLINE_HALF_W
    polys += [
        (centerline, _quad(-c, h, c, e)),
        (centerline, _quad(-c, -e, c, -h)),
        (centerline, _quad(-e, -c, -h, c)),
        (centerline, _quad(h, -c, e, c)),
    ]

    d = _DIVIDER_HALF_W
    o = LANE_DIVIDER_OFFSET
    pos = -e
    while pos < e:
        if pos + DASH_LENGTH <= -h or pos >= h:
            for side in (-o, o):
                polys.append((dash, _quad(side - d, pos, side + d, pos + DASH_LENGTH)))
                polys.append((dash, _quad(pos, side - d, pos + DASH_LENGTH, side + d)))
        pos += DASH_LENGTH + DASH_GAP
    return polys


class SceneRenderer:
    """Mixin that draws the world into a single viewport."""

    def draw_scene(self, surface: pygame.Surface, camera: Camera,
                   snapshot, trees: Sequence[TreeInstance]) -> None:
        surface.fill(self.GRASS_COLOR, camera.rect.as_tuple())
        self.draw_roads(surface, camera)
        self.draw_trees(surface, camera, trees)
        self.draw_traffic_lights(surface, camera, snapshot)
        self.draw_surveillance_cameras(surface, camera)
        self.draw_car(surface, camera, snapshot)

    # ------------------------------------------------------------------ #
    #  Roads                                                               #
    # ------------------------------------------------------------------ #
    def draw_roads(self, surface: pygame.Surface, camera: Camera) -> None:
        for color, poly in self.static_geometry:
            pts = camera.transform(poly)
            if camera.visible(pts):
                pygame.draw.polygon(surface, color, as_points(pts))

    # ------------------------------------------------------------------ #
    #  Trees                                                               #
    # ------------------------------------------------------------------ #
    def draw_trees(self, surface: pygame.Surface, camera: Camera,
                   trees: Sequence[TreeInstance]) -> None:
        if not trees:
            return
        ordered = back_to_front(trees)
        centres = camera.transform(np.array([(t.x, t.z) for t in ordered], dtype=float))
        reach = max(self.TREE_CANOPY_RADII) * 1.1 * camera.zoom
        for tree, (sx, sy) in zip(ordered, centres.tolist()):
            r = camera.rect
            if not (r.x - reach <= sx <= r.x + r.w + reach
                    and r.y - reach <= sy <= r.y + r.h + reach):
                continue
            for radius, color in zip(self.TREE_CANOPY_RADII, self.TREE_CANOPY_COLORS):
                px = max(1, int(radius * tree.scale * camera.zoom))
                pygame.draw.circle(surface, color, (int(sx), int(sy)), px)
            trunk = max(1, int(self.TREE_TRUNK_RADIUS * tree.scale * camera.zoom))
            pygame.draw.circle(surface, self.TREE_TRUNK_COLOR, (int(sx), int(sy)), trunk)

    # ------------------------------------------------------------------ #
    #  Signals and cameras                                                 #
    # ------------------------------------------------------------------ #
    def draw_traffic_lights(self, surface: pygame.Surface, camera: Camera,
                            snapshot) -> None:
        lamp_px = max(2, int(self.LAMP_RADIUS_M * camera.zoom))
        for post in TRAFFIC_LIGHT_POSTS:
            color = snapshot.axis_a if post.axis == "A" else snapshot.axis_b
            lit = lamp_states(color)
            sx, sy = camera.world_to_screen(post.x, post.z)
            housing = pygame.Rect(0, 0, lamp_px * 3, lamp_px * 7)
            housing.center = (int(sx), int(sy))
            pygame.draw.rect(surface, self.LIGHT_HOUSING_COLOR, housing, border_radius=2)
            for i, lamp in enumerate(self.LAMP_ORDER):
                on, off = self.LAMP_COLORS[lamp]
                cy = housing.y + lamp_px + 1 + i * (lamp_px * 2 + 1)
                pygame.draw.circle(surface, on if lit[lamp] else off,
                                   (housing.centerx, cy), lamp_px)

    def draw_surveillance_cameras(self, surface: pygame.Surface,
                                  camera: Camera) -> None:
        size = self.CAMERA_SIZE
        for cam in SURVEILLANCE_CAMERAS:
            fx, fz = heading_vector(cam.yaw)
            rx, rz = -fz, fx
            tip = (cam.x + fx * size, cam.z + fz * size)
            back_l = (cam.x - fx * size * 0.5 + rx * size * 0.6,
                      cam.z - fz * size * 0.5 + rz * size * 0.6)
            back_r = (cam.x - fx * size * 0.5 - rx * size * 0.6,
                      cam.z - fz * size * 0.5 - rz * size * 0.6)
            pts = camera.transform(np.array([tip, back_l, back_r], dtype=float))
            pygame.draw.polygon(surface, self.CAMERA_BODY_COLOR, as_points(pts))

    # ------------------------------------------------------------------ #
    #  Car                                                                 #
    # ------------------------------------------------------------------ #
    def draw_car(self, surface: pygame.Surface, camera: Camera, snapshot) -> None:
        x, _, z = snapshot.position
        body = camera.transform(np.array(
            oriented_rect(x, z, snapshot.heading, self.CAR_LENGTH, self.CAR_WIDTH),
            dtype=float,
        ))
        pygame.draw.polygon(surface, self.CAR_COLOR, as_points(body))

        fx, fz = heading_vector(snapshot.heading)
        ahead = self.CAR_LENGTH * 0.15
        glass = camera.transform(np.array(
            oriented_rect(x + fx * ahead, z + fz * ahead,
                          snapshot.heading, self.CAR_LENGTH * 0.25, self.CAR_WIDTH * 0.8),
            dtype=float,
        ))
        pygame.draw.polygon(surface, self.CAR_GLASS_COLOR, as_points(glass))
        pygame.draw.polygon(surface, (235, 235, 235), as_points(body), width=1)
