#!/usr/bin/env python3
"""
Tree placement tests: exclusion rules, reproducibility with an injected
generator, and the back-to-front draw order.
"""

from __future__ import annotations

import math
import random
import unittest

from sim.driving_policy import DrivingPolicy
from sim.scenery import (
    TRAFFIC_LIGHT_POSTS,
    back_to_front,
    is_near_traffic_light,
    is_valid_tree_position,
    place_trees,
)


class PlacementRuleTests(unittest.TestCase):
    def setUp(self) -> None:
        self.policy = DrivingPolicy()

    def test_road_clearance_rejects_either_axis(self) -> None:
        self.assertFalse(is_valid_tree_position(14.9, 200.0, self.policy))
        self.assertFalse(is_valid_tree_position(-200.0, -14.9, self.policy))
        self.assertFalse(is_valid_tree_position(0.0, 0.0, self.policy))
        self.assertTrue(is_valid_tree_position(15.0, 200.0, self.policy))

    def test_traffic_light_distance_is_strict(self) -> None:
        post = TRAFFIC_LIGHT_POSTS[0]
        # 20 units due east of the NE post is exactly on the limit.
        self.assertFalse(is_near_traffic_light(post.x + 20.0, post.z, self.policy))
        self.assertTrue(is_near_traffic_light(post.x + 19.9, post.z, self.policy))

    def test_corner_near_posts_is_rejected(self) -> None:
        self.assertFalse(is_valid_tree_position(16.0, 16.0, self.policy))
        self.assertFalse(is_valid_tree_position(-20.0, -20.0, self.policy))
        self.assertTrue(is_valid_tree_position(30.0, 30.0, self.policy))


class PlaceTreesTests(unittest.TestCase):
    def setUp(self) -> None:
        self.policy = DrivingPolicy()
        self.trees = place_trees(self.policy, seed=42)

    def test_every_tree_respects_both_rules(self) -> None:
        self.assertGreater(len(self.trees), 1000)
        for tree in self.trees:
            self.assertGreaterEqual(abs(tree.x), self.policy.road_clearance)
            self.assertGreaterEqual(abs(tree.z), self.policy.road_clearance)
            for post in TRAFFIC_LIGHT_POSTS:
                self.assertGreaterEqual(
                    math.hypot(tree.x - post.x, tree.z - post.z),
                    self.policy.traffic_light_min_distance,
                )

    def test_attributes_come_from_the_allowed_sets(self) -> None:
        for tree in self.trees:
            self.assertIn(tree.scale, self.policy.tree_scales)
            self.assertTrue(0.0 <= tree.rotation <= 359.0)
            self.assertEqual(tree.rotation, int(tree.rotation))
            self.assertEqual(tree.x, int(tree.x))
            self.assertLessEqual(abs(tree.x), self.policy.tree_region_end + self.policy.tree_jitter)

    def test_all_four_quadrants_are_populated(self) -> None:
        quadrants = {(tree.x > 0, tree.z > 0) for tree in self.trees}
        self.assertEqual(len(quadrants), 4)

    def test_same_seed_same_forest(self) -> None:
        self.assertEqual(place_trees(self.policy, seed=42), self.trees)
        self.assertEqual(
            place_trees(self.policy, rng=random.Random(42)), self.trees,
        )
        self.assertNotEqual(place_trees(self.policy, seed=43), self.trees)

    def test_wider_clearance_only_removes_trees(self) -> None:
        strict = DrivingPolicy(road_clearance=25.0)
        fewer = place_trees(strict, seed=42)
        self.assertLess(len(fewer), len(self.trees))
        for tree in fewer:
            self.assertGreaterEqual(abs(tree.x), 25.0)
            self.assertGreaterEqual(abs(tree.z), 25.0)


class JitterTests(unittest.TestCase):
    def test_zero_jitter_puts_trees_on_grid_points(self) -> None:
        policy = DrivingPolicy(tree_jitter=0, tree_region_end=200.0)
        trees = place_trees(policy, seed=1)
        grid = (20.0, 70.0, 120.0, 170.0, -200.0, -150.0, -100.0, -50.0)
        expected = {
            (x, z) for x in grid for z in grid
            if is_valid_tree_position(x, z, policy)
        }
        self.assertEqual({(t.x, t.z) for t in trees}, expected)
        self.assertEqual(len(trees), len(expected))

    def test_negative_jitter_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            DrivingPolicy(tree_jitter=-1)


class DrawOrderTests(unittest.TestCase):
    def test_back_to_front_sorts_farthest_first_without_mutating(self) -> None:
        trees = place_trees(DrivingPolicy(tree_region_end=200.0), seed=3)
        ordered = back_to_front(trees)

        self.assertIsInstance(trees, tuple)
        self.assertEqual(sorted(ordered, key=id), sorted(trees, key=id))
        distances = [t.x * t.x + t.z * t.z for t in ordered]
        self.assertEqual(distances, sorted(distances, reverse=True))
        self.assertEqual(place_trees(DrivingPolicy(tree_region_end=200.0), seed=3), trees)


if __name__ == "__main__":
    unittest.main()
