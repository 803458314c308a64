#!/usr/bin/env python3
"""
End-to-end tests for the :class:`Simulation` facade and the viewport
rig that reads its snapshots.
"""

from __future__ import annotations

import dataclasses
import math
import unittest

from sim.driving_policy import DrivingPolicy
from sim.signals import SignalColor
from sim.simulation import Simulation
from sim.vehicle import Intent
from sim.viewpoints import viewpoints


class SimulationTests(unittest.TestCase):
    def setUp(self) -> None:
        self.sim = Simulation(seed=1)

    def test_initial_snapshot(self) -> None:
        snap = self.sim.snapshot()
        self.assertEqual(snap.position, (3.0, 0.0, 45.0))
        self.assertEqual(snap.heading, 180.0)
        self.assertEqual(snap.heading_label, "S")
        self.assertEqual(snap.speed, 0.0)
        self.assertEqual(snap.axis_a, SignalColor.GREEN)
        self.assertEqual(snap.axis_b, SignalColor.RED)
        self.assertEqual(snap.tick_count, 0)
        self.assertAlmostEqual(snap.camera_offset[2], 6.0)
        self.assertGreater(len(snap.trees), 0)

    def test_snapshot_is_frozen_and_detached(self) -> None:
        snap = self.sim.snapshot()
        with self.assertRaises(dataclasses.FrozenInstanceError):
            snap.speed = 1.0  # type: ignore[misc]
        self.sim.press(Intent.FORWARD)
        self.sim.advance(5)
        self.assertEqual(snap.position, (3.0, 0.0, 45.0))
        self.assertEqual(snap.speed, 0.0)

    def test_advance_runs_vehicle_and_signals_together(self) -> None:
        self.sim.press(Intent.FORWARD)
        snap = self.sim.advance(300)
        self.assertEqual(snap.tick_count, 300)
        self.assertEqual(snap.signal_counter_ms, 6000)
        self.assertEqual((snap.axis_a, snap.axis_b), (SignalColor.RED, SignalColor.GREEN))
        self.assertEqual(snap.speed, self.sim.policy.max_speed)
        self.assertLess(snap.position[2], 45.0)

    def test_advance_zero_ticks_is_a_no_op(self) -> None:
        before = self.sim.snapshot()
        after = self.sim.advance(0)
        self.assertEqual(before, after)

    def test_negative_ticks_are_rejected(self) -> None:
        with self.assertRaises(ValueError):
            self.sim.advance(-1)

    def test_intents_accept_enum_values(self) -> None:
        self.sim.set_intent("turn_left", True)  # type: ignore[arg-type]
        self.assertTrue(self.sim.vehicle.intents.turn_left)
        self.sim.release(Intent.TURN_LEFT)
        self.assertFalse(self.sim.vehicle.intents.turn_left)
        with self.assertRaises(ValueError):
            self.sim.set_intent("jump", True)  # type: ignore[arg-type]

    def test_turn_key_edge_refreshes_camera_offset(self) -> None:
        self.sim.vehicle.heading = 90.0
        self.sim.press(Intent.TURN_RIGHT)
        ox, _, oz = self.sim.snapshot().camera_offset
        self.assertAlmostEqual(ox, -6.0)
        self.assertAlmostEqual(oz, 0.0)

    def test_reset_keeps_signal_cycle_running(self) -> None:
        self.sim.press(Intent.FORWARD)
        self.sim.press(Intent.TURN_LEFT)
        self.sim.advance(120)
        self.sim.reset()
        snap = self.sim.snapshot()
        self.assertEqual(snap.position, (3.0, 0.0, 45.0))
        self.assertEqual(snap.heading, 180.0)
        self.assertEqual(snap.speed, 0.0)
        self.assertEqual(self.sim.vehicle.intents.active(), [])
        self.assertEqual(snap.signal_counter_ms, 2400)

    def test_brake_then_coast_stays_put(self) -> None:
        self.sim.press(Intent.FORWARD)
        self.sim.advance(30)
        self.sim.brake()
        parked = self.sim.snapshot().position
        self.sim.advance(10)
        self.assertEqual(self.sim.snapshot().position, parked)

    def test_same_seed_same_trees(self) -> None:
        self.assertEqual(Simulation(seed=1).trees, self.sim.trees)

    def test_custom_policy_tick_length(self) -> None:
        sim = Simulation(policy=DrivingPolicy(tick_ms=100), seed=1)
        snap = sim.advance(50)
        self.assertEqual(snap.signal_counter_ms, 5000)
        self.assertEqual(snap.axis_a, SignalColor.YELLOW)

    def test_as_dict(self) -> None:
        data = self.sim.snapshot().as_dict()
        self.assertEqual(data["heading_label"], "S")
        self.assertEqual(data["axis_a"], "GREEN")
        self.assertEqual(data["tree_count"], len(self.sim.trees))


class ViewpointTests(unittest.TestCase):
    def test_home_viewpoints(self) -> None:
        views = viewpoints(Simulation(seed=1).snapshot())
        self.assertEqual(set(views), {"main", "right", "top", "left"})

        main = views["main"]
        for got, expected in zip(main.eye, (3.0, 2.0, 51.0)):
            self.assertAlmostEqual(got, expected)
        self.assertEqual(main.target, (3.0, 1.0, 45.0))
        # Chase camera looks the way the car faces (−z at heading 180).
        fx, fz = main.ground_forward()
        self.assertAlmostEqual(fx, 0.0)
        self.assertAlmostEqual(fz, -1.0)

        right = views["right"]
        self.assertAlmostEqual(right.eye[0], 3.0 - 30.0 * math.sqrt(0.5))
        self.assertAlmostEqual(right.eye[2], 45.0 + 30.0 * math.sqrt(0.5))
        self.assertEqual(right.eye[1], 5.0)
        self.assertEqual(right.target, (3.0, 2.0, 45.0))

        left = views["left"]
        self.assertAlmostEqual(left.eye[0], 3.0 + 30.0 * math.sqrt(0.5))

        top = views["top"]
        self.assertEqual(top.projection, "orthographic")
        self.assertEqual(top.eye, (3.0, 100.0, 45.0))
        self.assertEqual(top.ground_forward(), (0.0, -1.0))


if __name__ == "__main__":
    unittest.main()
