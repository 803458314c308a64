#!/usr/bin/env python3
"""Environment override handling in :mod:`main`."""

from __future__ import annotations

import os
import unittest
from unittest import mock

import config
import main


class EnvOverrideTests(unittest.TestCase):
    def test_out_of_range_tick_falls_back_to_default(self) -> None:
        for raw in ("0", "-20"):
            with mock.patch.dict(os.environ, {"DRIVE_TICK_MS": raw, "DRIVE_TREE_SEED": "1"}):
                with self.assertLogs("main", level="WARNING"):
                    sim = main.build_simulation()
            self.assertEqual(sim.policy.tick_ms, config.DEFAULT_TICK_MS, msg=raw)

    def test_unparsable_value_falls_back_to_default(self) -> None:
        with mock.patch.dict(os.environ, {"DRIVE_TICK_MS": "fast"}):
            with self.assertLogs("main", level="WARNING"):
                self.assertEqual(
                    main._env_int("DRIVE_TICK_MS", 20, minimum=1), 20,
                )

    def test_valid_override_is_applied(self) -> None:
        with mock.patch.dict(os.environ, {"DRIVE_TICK_MS": "50", "DRIVE_TREE_SEED": "1"}):
            sim = main.build_simulation()
        self.assertEqual(sim.policy.tick_ms, 50)


if __name__ == "__main__":
    unittest.main()
