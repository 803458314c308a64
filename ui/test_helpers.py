#!/usr/bin/env python3
"""Tests for the display-independent parts of the UI package."""

from __future__ import annotations

import unittest
from unittest import mock

import numpy as np

from sim.scenery import ROAD_HALF_WIDTH, TreeInstance
from sim.signals import SignalColor
from sim.simulation import Simulation
from sim.vehicle import Intent
from sim.viewpoints import viewpoints
from ui.constants import ViewConstants
from ui.draw_scene import SceneRenderer, build_static_geometry
from ui.helpers import (
    camera_for,
    hud_line,
    lamp_states,
    oriented_rect,
    signal_line,
    viewport_layout,
)
from ui.types import Camera, ViewportRect


class LayoutTests(unittest.TestCase):
    def test_default_window_layout(self) -> None:
        layout = viewport_layout(1300, 800)
        self.assertEqual(layout["left"].as_tuple(), (0, 0, 325, 200))
        self.assertEqual(layout["top"].as_tuple(), (487, 0, 325, 200))
        self.assertEqual(layout["right"].as_tuple(), (975, 0, 325, 200))
        self.assertEqual(layout["main"].as_tuple(), (0, 250, 1300, 550))

    def test_main_view_never_collapses(self) -> None:
        layout = viewport_layout(40, 40)
        self.assertGreaterEqual(layout["main"].h, 1)


class CameraTests(unittest.TestCase):
    def setUp(self) -> None:
        self.rect = ViewportRect("main", 0, 0, 200, 100)

    def test_forward_is_screen_up_and_east_is_right_facing_north(self) -> None:
        cam = Camera(self.rect, 0.0, 0.0, (0.0, -1.0), zoom=2.0)
        sx, sy = cam.world_to_screen(0.0, -1.0)
        self.assertAlmostEqual(sx, 100.0)
        self.assertAlmostEqual(sy, 48.0)
        sx, sy = cam.world_to_screen(1.0, 0.0)
        self.assertAlmostEqual(sx, 102.0)
        self.assertAlmostEqual(sy, 50.0)

    def test_visibility_check(self) -> None:
        cam = Camera(self.rect)
        self.assertTrue(cam.visible(np.array([[10.0, 10.0], [20.0, 20.0]])))
        self.assertFalse(cam.visible(np.array([[300.0, 10.0], [320.0, 20.0]])))
        self.assertTrue(cam.visible(np.array([[205.0, 10.0]]), margin=10.0))

    def test_cameras_follow_the_snapshot(self) -> None:
        snap = Simulation(seed=1).snapshot()
        layout = viewport_layout(1300, 800)
        views = viewpoints(snap)

        main = camera_for(views["main"], layout["main"])
        self.assertAlmostEqual(main.forward[0], 0.0)
        self.assertAlmostEqual(main.forward[1], -1.0)
        self.assertAlmostEqual(main.world_x, 3.0)
        self.assertAlmostEqual(main.world_z, 45.0 - ViewConstants.MAIN_LOOK_AHEAD_M)

        top = camera_for(views["top"], layout["top"])
        self.assertAlmostEqual(top.zoom, 325 / 100.0)
        self.assertAlmostEqual(top.world_x, 3.0)
        self.assertAlmostEqual(top.world_z, 45.0)


class HudTextTests(unittest.TestCase):
    def test_initial_hud_line(self) -> None:
        snap = Simulation(seed=1).snapshot()
        self.assertEqual(
            hud_line(snap),
            "Speed: 0.00 Direction: 180 Heading: S Position: (3.0, 45.0)",
        )
        self.assertEqual(signal_line(snap), "N-S: GREEN   W-E: RED")

    def test_hud_line_after_driving(self) -> None:
        sim = Simulation(seed=1)
        sim.press(Intent.FORWARD)
        snap = sim.advance(10)
        self.assertTrue(hud_line(snap).startswith("Speed: 0.10 "))

    def test_exactly_one_lamp_lit(self) -> None:
        for color in SignalColor:
            lit = lamp_states(color)
            self.assertEqual(sum(lit.values()), 1)
            self.assertTrue(lit[color.value])


class ShapeTests(unittest.TestCase):
    def test_oriented_rect_facing_north(self) -> None:
        corners = oriented_rect(0.0, 0.0, 0.0, 4.0, 2.0)
        rounded = {(round(x, 6), round(z, 6)) for x, z in corners}
        self.assertEqual(rounded, {(-1.0, 2.0), (1.0, 2.0), (1.0, -2.0), (-1.0, -2.0)})

    def test_lane_dashes_stay_out_of_the_intersection(self) -> None:
        dash = (1, 2, 3)
        polys = build_static_geometry((0, 0, 0), (9, 9, 9), dash)
        dashes = [p for color, p in polys if color == dash]
        self.assertGreater(len(dashes), 0)
        h = ROAD_HALF_WIDTH
        for quad in dashes:
            xs, zs = quad[:, 0], quad[:, 1]
            # The long axis of each dash runs along its road.
            along = zs if np.ptp(zs) > np.ptp(xs) else xs
            self.assertFalse(along.min() < h and along.max() > -h)


class _TreeOnlyRenderer(ViewConstants, SceneRenderer):
    pass


class TreeDrawOrderTests(unittest.TestCase):
    def test_farther_trees_are_painted_first(self) -> None:
        rect = ViewportRect("top", 0, 0, 400, 400)
        camera = Camera(rect, 0.0, 0.0, (0.0, -1.0), zoom=3.0)
        near = TreeInstance(x=1.0, z=1.0, rotation=0.0, scale=1.0)
        far = TreeInstance(x=5.0, z=5.0, rotation=0.0, scale=1.0)
        trees = (near, far)

        with mock.patch("ui.draw_scene.pygame.draw.circle") as circle:
            _TreeOnlyRenderer().draw_trees(object(), camera, trees)

        trunks = [
            call.args[2] for call in circle.call_args_list
            if call.args[1] == ViewConstants.TREE_TRUNK_COLOR
        ]
        self.assertEqual(trunks, [(215, 215), (203, 203)])
        self.assertEqual(trees, (near, far))


if __name__ == "__main__":
    unittest.main()
